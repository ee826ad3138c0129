"""Configuration parsing and boundary validation."""

import pytest

from evloadlogic import canon, config, exceptions, validate


def test_defaults_follow_measure_defaults():
    cfg = config.default_config()
    assert (cfg.flexibility, cfg.behavior, cfg.station_type) == ("MinDelay", "BAU", "Public")
    assert cfg.ev_percent == 1.0
    assert cfg.assumed_percent == 50.0
    assert cfg.family_key.behavior_code == 1
    assert cfg.family_key.flexibility_code == 1


def test_from_arguments_accepts_display_labels():
    cfg = config.from_arguments(
        {
            "delay_type": "Max Delay",
            "charge_behavior": "Free Workplace Charging Across Metro Area",
            "chg_station_type": "Typical Home",
            "ev_percent": "35",
        }
    )
    assert cfg.flexibility == "MaxDelay"
    assert cfg.behavior == "FreeMetroCharging"
    assert cfg.station_type == "Home"
    assert cfg.ev_percent == 35.0
    assert cfg.family_key.flexibility_code == 2
    assert cfg.family_key.behavior_code == 3


def test_from_arguments_accepts_canonical_names():
    cfg = config.from_arguments({"delay_type": "MinPower", "chg_station_type": "Work"})
    assert cfg.flexibility == "MinPower"
    assert cfg.station_type == "Work"
    assert cfg.behavior == "BAU"


def test_from_arguments_unknown_label_raises():
    with pytest.raises(exceptions.ConfigurationError):
        config.from_arguments({"chg_station_type": "Pena Station Next Analysis"})


def test_from_arguments_non_numeric_percent_raises():
    with pytest.raises(exceptions.RangeError):
        config.from_arguments({"ev_percent": "lots"})


@pytest.mark.parametrize("p", [0, 0.0, 42.5, 100])
def test_validate_ev_percent_accepts_bounds(p):
    assert validate.validate_ev_percent(p) == float(p)


@pytest.mark.parametrize("p", [-1, 100.01, float("nan")])
def test_validate_ev_percent_rejects(p):
    with pytest.raises(exceptions.RangeError):
        validate.validate_ev_percent(p)


def test_range_error_is_value_error():
    with pytest.raises(ValueError):
        validate.validate_ev_percent(101)


def test_validate_config_rejects_unknown_behavior():
    cfg = config.EVLoadConfig(behavior="Random")  # type: ignore[arg-type]
    with pytest.raises(exceptions.ConfigurationError):
        validate.validate_config(cfg)


def test_resolve_resource_dir_precedence(tmp_path, monkeypatch):
    monkeypatch.delenv(canon.RESOURCE_DIR_ENV, raising=False)
    assert config.resolve_resource_dir() == canon.DEFAULT_RESOURCE_DIR
    monkeypatch.setenv(canon.RESOURCE_DIR_ENV, str(tmp_path / "env"))
    assert config.resolve_resource_dir() == tmp_path / "env"
    assert config.resolve_resource_dir(tmp_path / "arg") == tmp_path / "arg"


@pytest.mark.parametrize("flag", [True, False])
def test_validate_ev_percent_rejects_bool(flag):
    with pytest.raises(exceptions.RangeError):
        validate.validate_ev_percent(flag)
