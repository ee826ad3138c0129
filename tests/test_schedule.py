"""Schedule emission: step offsets, day-type reuse, and the charger object."""

from datetime import timedelta

import pandas as pd
import pytest

from evloadlogic import canon, exceptions, schedule


@pytest.fixture
def normalized():
    return {
        "weekday": pd.Series([0.1, 0.2, 0.3, 0.4], name="weekday"),
        "saturday": pd.Series([0.5, 0.6, 0.7, 0.8], name="saturday"),
        "sunday": pd.Series([0.9, 1.0, 0.0, 0.0], name="sunday"),
    }


def test_day_values_are_right_aligned_steps():
    out = schedule.day_values([0.1, 0.2, 0.3])
    assert [t for t, _ in out] == [
        timedelta(minutes=15),
        timedelta(minutes=30),
        timedelta(minutes=45),
    ]
    assert [v for _, v in out] == [0.1, 0.2, 0.3]


def test_full_day_ends_at_midnight():
    out = schedule.day_values([0.0] * 96)
    assert len(out) == 96
    assert out[-1][0] == timedelta(hours=24)


def test_day_values_past_midnight_raises():
    with pytest.raises(exceptions.FormatError):
        schedule.day_values([0.0] * 97)


def test_ruleset_reuses_day_types(normalized):
    rs = schedule.build_ruleset(normalized)
    wk = [v for _, v in rs.default_day.values]
    assert rs.name == canon.SCHEDULE_NAME
    assert wk == [0.1, 0.2, 0.3, 0.4]
    assert rs.summer_design_day.values == rs.default_day.values
    assert [v for _, v in rs.winter_design_day.values] == [0.9, 1.0, 0.0, 0.0]
    assert rs.default_day.name == canon.DEFAULT_DAY_NAME
    assert rs.summer_design_day.name == canon.SUMMER_DESIGN_DAY_NAME
    assert rs.winter_design_day.name == canon.WINTER_DESIGN_DAY_NAME


def test_ruleset_has_saturday_and_sunday_rules(normalized):
    rs = schedule.build_ruleset(normalized)
    assert [(r.name, r.apply_days) for r in rs.rules] == [
        ("ev_sch_sat_rule", ["saturday"]),
        ("ev_sch_sun_rule", ["sunday"]),
    ]
    assert [v for _, v in schedule.day_for(rs, "saturday").values] == [0.5, 0.6, 0.7, 0.8]
    assert schedule.day_for(rs, "sunday").name == canon.SUNDAY_DAY_NAME
    assert schedule.day_for(rs, "weekday") == rs.default_day


def test_equipment_design_level_in_watts():
    eq = schedule.build_equipment(12.5)
    assert eq.design_level_w == 12500.0
    assert eq.name == "12500.0 w EV Charger"
    assert eq.definition_name == "12500.0 w EV Charging Definition"
    assert eq.fuel_type == "Electricity"
    assert eq.end_use_subcategory == "Electric Vehicles"
    assert eq.schedule_name == canon.SCHEDULE_NAME


def test_power_draw_scales_schedule(normalized):
    rs = schedule.build_ruleset(normalized)
    eq = schedule.build_equipment(2.0)
    draw = schedule.power_draw_w(eq, rs.winter_design_day)
    assert [w for _, w in draw] == pytest.approx([1800.0, 2000.0, 0.0, 0.0])
    assert [t for t, _ in draw] == [t for t, _ in rs.winter_design_day.values]
