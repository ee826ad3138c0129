from __future__ import annotations
from pathlib import Path
from typing import Final, Dict, Tuple

SLOT_MINUTES: Final[int] = 15
MINUTES_PER_DAY: Final[int] = 24 * 60
ASSUMED_EV_PERCENT: Final[float] = 50.0  # adoption rate the source profiles were generated at

PROFILE_INDEX_NAME: Final[str] = "profile"
SLOT_INDEX_NAME: Final[str] = "slot"

FILENAME_TEMPLATE: Final[str] = "chg{behavior}_dow{day}_flex{flexibility}.csv"
RESOURCE_DIR_ENV: Final[str] = "EVLOADLOGIC_RESOURCE_DIR"
DEFAULT_RESOURCE_DIR: Final[Path] = Path(__file__).parent / "resources"

DAY_TYPES: Final[Tuple[str, ...]] = ("weekday", "saturday", "sunday")

BEHAVIOR_CODES: Dict[str, int] = {
    "BAU": 1,
    "FreeSiteCharging": 2,
    "FreeMetroCharging": 3,
}
FLEXIBILITY_CODES: Dict[str, int] = {
    "MinDelay": 1,
    "MaxDelay": 2,
    "MinPower": 3,
}
DAY_CODES: Dict[str, int] = {
    "weekday": 1,
    "saturday": 2,
    "sunday": 3,
}

# Display labels used by the argument front end → canonical names
BEHAVIOR_LABELS: Dict[str, str] = {
    "Business as Usual": "BAU",
    "Free Workplace Charging at Project Site": "FreeSiteCharging",
    "Free Workplace Charging Across Metro Area": "FreeMetroCharging",
}
FLEXIBILITY_LABELS: Dict[str, str] = {
    "Min Delay": "MinDelay",
    "Max Delay": "MaxDelay",
    "Min Power": "MinPower",
}
STATION_LABELS: Dict[str, str] = {
    "Typical Home": "Home",
    "Typical Work": "Work",
    "Typical Public": "Public",
}

# Profile columns of the EVI-Pro output representative of each station type.
# Home lists 85 twice; it is kept, so that profile weighs double in the mean.
COHORT_INDICES: Dict[str, Tuple[int, ...]] = {
    "Public": (
        0, 1, 2, 3, 4, 5, 6, 8, 9, 10, 11, 12, 13, 14, 52, 53, 54, 57, 58,
        60, 61, 62, 63, 64, 65, 81, 99, 100, 102,
    ),
    "Work": (
        7, 19, 20, 27, 28, 29, 30, 31, 32, 36, 37, 42, 43, 44, 46, 50, 51,
        55, 69, 70, 71, 86, 88, 91, 92, 93,
    ),
    "Home": (
        15, 16, 17, 18, 21, 22, 23, 24, 25, 26, 33, 34, 35, 38, 39, 40, 41,
        45, 47, 48, 49, 56, 59, 66, 67, 68, 72, 73, 74, 75, 76, 77, 78, 79,
        80, 82, 83, 84, 85, 85, 87, 89, 90, 94, 95, 96, 97, 98, 101,
    ),
}

# Building-model object names
SCHEDULE_NAME: Final[str] = "EV Charging Power Draw"
DEFAULT_DAY_NAME: Final[str] = "EV Charging Default"
SUMMER_DESIGN_DAY_NAME: Final[str] = "EV Charging Summer Design Day"
WINTER_DESIGN_DAY_NAME: Final[str] = "EV Charging Winter Design Day"
SATURDAY_RULE_NAME: Final[str] = "ev_sch_sat_rule"
SUNDAY_RULE_NAME: Final[str] = "ev_sch_sun_rule"
SATURDAY_DAY_NAME: Final[str] = "EV Charging Sat"
SUNDAY_DAY_NAME: Final[str] = "EV Charging Sun"
FUEL_TYPE: Final[str] = "Electricity"
END_USE_SUBCATEGORY: Final[str] = "Electric Vehicles"
