"""MCP Resources for status tier and theme discovery."""

from __future__ import annotations

import json

from fastmcp import FastMCP

from vitalhue.domains.health.domain_logic.recommendations import TIER_RECOMMENDATIONS
from vitalhue.domains.health.domain_logic.score_models import (
    STATUS_TIERS,
    TIER_THRESHOLDS,
)
from vitalhue.domains.health.domain_logic.theme_mapper import TIER_MESSAGES, TIER_PALETTES


def register_health_theme_resources(mcp: FastMCP) -> None:
    """Register status tier discovery resources on the MCP server."""

    @mcp.resource("theme://health/tiers")
    def health_theme_tiers_resource() -> str:
        """Discover the health status tiers, their score ranges and palettes."""
        return json.dumps(
            {
                "tier_count": len(STATUS_TIERS),
                "tiers": [
                    {
                        "tier": tier,
                        "min_score": TIER_THRESHOLDS[tier],
                        "message": TIER_MESSAGES[tier],
                        "palette": TIER_PALETTES[tier].as_dict(),
                        "base_recommendations": list(TIER_RECOMMENDATIONS[tier]),
                    }
                    for tier in STATUS_TIERS
                ],
            },
            indent=2,
        )
