"""Demo patient records for development and testing.

The first three mirror the clinic's seed patients (decimal strings and the
boolean insulin-resistance flag included). The last two carry category text
and CGM statistics so every status tier has a representative.
"""

from __future__ import annotations

from typing import Any


def get_mock_patients() -> list[dict[str, Any]]:
    """Return demo patient records, keyed the way the clinic stores them."""
    return [
        {
            "id": "1",
            "name": "John Doe",
            "age": 32,
            "weight": "185.00",
            "weightGoal": "170.00",
            "bodyFat": "22.0",
            "bodyFatGoal": "15.0",
            "bloodPressure": "125/80",
            "insulinResistance": True,
            "adherence": 85,
            "bloodSugar": "Borderline",
        },
        {
            "id": "2",
            "name": "Sarah Wilson",
            "age": 28,
            "weight": "145.00",
            "weightGoal": "135.00",
            "bodyFat": "25.0",
            "bodyFatGoal": "20.0",
            "bloodPressure": "118/75",
            "insulinResistance": False,
            "adherence": 92,
            "bloodSugar": "Normal",
        },
        {
            "id": "3",
            "name": "Mikaiah Ferrell",
            "age": 35,
            "weight": "170.00",
            "weightGoal": "160.00",
            "bodyFat": "18.0",
            "bodyFatGoal": "15.0",
            "bloodPressure": "122/78",
            "insulinResistance": False,
            "adherence": 88,
            "bloodSugar": "Normal",
        },
        {
            "id": "4",
            "name": "Ashok Mehta",
            "age": 54,
            "weight": "212.00",
            "bodyFat": "31.5",
            "bloodPressure": "Stage 1 hypertension",
            "insulinResistance": "Moderate",
            "adherence": 64,
            "exerciseMinutes": 60,
            "glucoseAverage": 152,
            "glucoseVariability": 32,
        },
        {
            "id": "5",
            "name": "Priya Raman",
            "age": 41,
            "weight": "158.00",
            "bodyFat": "21.0",
            "bloodPressure": "Normal",
            "insulinResistance": "None",
            "adherence": 97,
            "exerciseMinutes": 320,
            "glucoseAverage": 94,
            "glucoseVariability": 12,
        },
    ]
