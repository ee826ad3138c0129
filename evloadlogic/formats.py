from __future__ import annotations

from datetime import timedelta

import pandas as pd

from . import canon
from .types import EVLoadResult


def _slot_label(offset: timedelta) -> str:
    minutes = int(offset.total_seconds() // 60)
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def to_frame(result: EVLoadResult) -> pd.DataFrame:
    """
    Normalized day-type shapes side by side.

    Index: slot end time "HH:MM" (last slot of a full day is "24:00")
    Columns: weekday, saturday, sunday
    """
    cols = {day: result.normalized[day].to_numpy(dtype=float) for day in canon.DAY_TYPES}
    offsets = [t for t, _ in result.ruleset.default_day.values]
    out = pd.DataFrame(cols, index=pd.Index([_slot_label(t) for t in offsets], name="slot_end"))
    return out


def to_power_frame(result: EVLoadResult) -> pd.DataFrame:
    """Same layout as to_frame, in kW (shape × peak)."""
    return to_frame(result) * result.peak_kw


def to_payload(result: EVLoadResult) -> dict:
    """JSON-ready description of what the building model receives."""
    return {
        "family": {
            "behavior": result.family.behavior,
            "flexibility": result.family.flexibility,
        },
        "station_type": result.config.station_type,
        "ev_percent": result.config.ev_percent,
        "peak_kw": result.peak_kw,
        "ruleset": result.ruleset.model_dump(mode="json"),
        "equipment": result.equipment.model_dump(mode="json"),
    }
