from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from . import canon, exceptions
from .types import ChargeBehavior, Flexibility, StationType, ProfileFamilyKey


@dataclass
class EVLoadConfig:
    flexibility: Flexibility = "MinDelay"
    behavior: ChargeBehavior = "BAU"
    station_type: StationType = "Public"
    ev_percent: float = 1.0  # share of vehicles parked at the building that are EVs
    assumed_percent: float = canon.ASSUMED_EV_PERCENT

    @property
    def family_key(self) -> ProfileFamilyKey:
        return ProfileFamilyKey(behavior=self.behavior, flexibility=self.flexibility)


def default_config() -> EVLoadConfig:
    return EVLoadConfig()


def _canonical(value: Any, labels: Mapping[str, str], known, what: str) -> str:
    s = str(value).strip()
    if s in known:
        return s
    if s in labels:
        return labels[s]
    raise exceptions.ConfigurationError(
        f"Unknown {what} '{value}'. Expected one of: "
        f"{', '.join([*labels, *known])}"
    )


def from_arguments(args: Mapping[str, Any]) -> EVLoadConfig:
    """
    Build a config from measure-style arguments.

    Keys: delay_type, charge_behavior, chg_station_type, ev_percent.
    Values may be display labels ("Min Delay", "Typical Home", ...) or the
    canonical names; missing keys fall back to the defaults.
    """
    cfg = default_config()
    if "delay_type" in args:
        cfg.flexibility = _canonical(  # type: ignore[assignment]
            args["delay_type"],
            canon.FLEXIBILITY_LABELS,
            canon.FLEXIBILITY_CODES,
            "charging flexibility",
        )
    if "charge_behavior" in args:
        cfg.behavior = _canonical(  # type: ignore[assignment]
            args["charge_behavior"],
            canon.BEHAVIOR_LABELS,
            canon.BEHAVIOR_CODES,
            "charging behavior",
        )
    if "chg_station_type" in args:
        cfg.station_type = _canonical(  # type: ignore[assignment]
            args["chg_station_type"],
            canon.STATION_LABELS,
            canon.COHORT_INDICES,
            "charging station type",
        )
    if "ev_percent" in args:
        try:
            cfg.ev_percent = float(args["ev_percent"])
        except (TypeError, ValueError) as e:
            raise exceptions.RangeError(
                f"ev_percent must be a number, got {args['ev_percent']!r}"
            ) from e
    return cfg


def resolve_resource_dir(resource_dir: Optional[str | Path] = None) -> Path:
    """Explicit argument → EVLOADLOGIC_RESOURCE_DIR → packaged resources/."""
    if resource_dir is not None:
        return Path(resource_dir)
    env = os.environ.get(canon.RESOURCE_DIR_ENV)
    if env:
        return Path(env)
    return canon.DEFAULT_RESOURCE_DIR
