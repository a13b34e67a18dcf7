from __future__ import annotations

from datetime import date
from typing import List, Tuple

# Meteorological seasons, northern hemisphere
_SEASON_BY_MONTH = {
    12: "Winter", 1: "Winter", 2: "Winter",
    3: "Spring", 4: "Spring", 5: "Spring",
    6: "Summer", 7: "Summer", 8: "Summer",
    9: "Fall", 10: "Fall", 11: "Fall",
}

# (lower bound °F inclusive, label), checked top-down; anything below the last bound is freezing
TEMPERATURE_BANDS_F: List[Tuple[int, str]] = [
    (95, "Extreme Heat"),
    (85, "Very Hot"),
    (75, "Hot"),
    (65, "Warm"),
    (55, "Mild"),
    (45, "Cool"),
    (35, "Cold"),
]
FREEZING = "Freezing"


def season_for_date(d: date) -> str:
    return _SEASON_BY_MONTH[d.month]


def round_temperature(temp_f: float) -> int:
    # halves round away from zero, so 94.5 reads as 95
    return int(temp_f + 0.5) if temp_f >= 0 else -int(-temp_f + 0.5)


def temperature_category(temp_f: float) -> str:
    """Map a Fahrenheit reading onto a clothing-oriented temperature label.

    The reading is rounded to the nearest whole degree first so the label
    always agrees with the integer temperature shown in prompts.
    """
    rounded = round_temperature(temp_f)
    for lower, label in TEMPERATURE_BANDS_F:
        if rounded >= lower:
            return label
    return FREEZING
