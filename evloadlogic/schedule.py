from __future__ import annotations
from datetime import timedelta
from typing import Iterable, Mapping

import pandas as pd

from . import canon, exceptions, validate
from .types import ExteriorEquipment, ScheduleDay, ScheduleRule, ScheduleRuleset


def day_values(
    seq: Iterable[float], *, slot_minutes: int = canon.SLOT_MINUTES
) -> list[tuple[timedelta, float]]:
    """
    Map a per-slot sequence onto the day axis.

    Slot i ends at (i + 1) * slot_minutes; the value holds up to that offset.
    """
    values = [float(v) for v in seq]
    if slot_minutes <= 0:
        raise exceptions.ConfigurationError(f"slot_minutes must be positive, got {slot_minutes}.")
    if len(values) * slot_minutes > canon.MINUTES_PER_DAY:
        raise exceptions.FormatError(
            f"{len(values)} slots of {slot_minutes} min run past the end of the day."
        )
    return [(timedelta(minutes=(i + 1) * slot_minutes), v) for i, v in enumerate(values)]


def schedule_day(name: str, seq: Iterable[float], *, slot_minutes: int = canon.SLOT_MINUTES) -> ScheduleDay:
    return ScheduleDay(name=name, values=day_values(seq, slot_minutes=slot_minutes))


def build_ruleset(
    normalized: Mapping[str, pd.Series],
    *,
    name: str = canon.SCHEDULE_NAME,
    slot_minutes: int = canon.SLOT_MINUTES,
) -> ScheduleRuleset:
    """
    Ruleset for the building model.

    Weekday doubles as the default day and the summer design day; Sunday
    doubles as the winter design day. Saturday and Sunday each get one rule.
    """
    validate.assert_day_types(normalized)
    wk = normalized["weekday"]
    sat = normalized["saturday"]
    sun = normalized["sunday"]

    return ScheduleRuleset(
        name=name,
        default_day=schedule_day(canon.DEFAULT_DAY_NAME, wk, slot_minutes=slot_minutes),
        summer_design_day=schedule_day(canon.SUMMER_DESIGN_DAY_NAME, wk, slot_minutes=slot_minutes),
        winter_design_day=schedule_day(canon.WINTER_DESIGN_DAY_NAME, sun, slot_minutes=slot_minutes),
        rules=[
            ScheduleRule(
                name=canon.SATURDAY_RULE_NAME,
                apply_days=["saturday"],
                day=schedule_day(canon.SATURDAY_DAY_NAME, sat, slot_minutes=slot_minutes),
            ),
            ScheduleRule(
                name=canon.SUNDAY_RULE_NAME,
                apply_days=["sunday"],
                day=schedule_day(canon.SUNDAY_DAY_NAME, sun, slot_minutes=slot_minutes),
            ),
        ],
    )


def build_equipment(peak_kw: float, schedule_name: str = canon.SCHEDULE_NAME) -> ExteriorEquipment:
    """Single charger whose design level is the peak load in watts."""
    level_w = float(peak_kw) * 1000.0  # kW → W
    return ExteriorEquipment(
        name=f"{level_w} w EV Charger",
        definition_name=f"{level_w} w EV Charging Definition",
        design_level_w=level_w,
        schedule_name=schedule_name,
    )


def day_for(ruleset: ScheduleRuleset, day: str) -> ScheduleDay:
    """Day schedule the building model applies on a given day type."""
    for rule in ruleset.rules:
        if day in rule.apply_days:
            return rule.day
    if day == "weekday":
        return ruleset.default_day
    raise exceptions.ConfigurationError(f"Unknown day type '{day}'.")


def power_draw_w(equipment: ExteriorEquipment, day: ScheduleDay) -> list[tuple[timedelta, float]]:
    """Absolute draw per slot: design level × schedule value."""
    return [(t, equipment.design_level_w * v) for t, v in day.values]
