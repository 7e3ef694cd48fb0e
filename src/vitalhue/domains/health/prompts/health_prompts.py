"""MCP Prompts - pre-built interaction templates for health status reviews."""

from __future__ import annotations

from fastmcp import FastMCP


def register_health_prompts(mcp: FastMCP) -> None:
    """Register health domain MCP prompts."""

    @mcp.prompt()
    def health_status_review_prompt(patient_id: str = "") -> str:
        """Prompt template for reviewing a patient's health status."""
        target = f"patient {patient_id}" if patient_id else "the current patient"
        return f"""Please review the health status of {target}. I'd like to:

1. See their overall health score and status tier
2. Understand which metrics raised or lowered the score
3. Go through the recommendations for their tier
4. Agree on one concrete next step before the next visit

Please keep the tone supportive and practical."""
