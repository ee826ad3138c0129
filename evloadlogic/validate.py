from __future__ import annotations
import math
from typing import Mapping

import numpy as np
import pandas as pd

from . import canon, exceptions
from .config import EVLoadConfig


def validate_ev_percent(ev_percent: float) -> float:
    """Adoption percent must be a finite number within [0, 100]."""
    if isinstance(ev_percent, bool):
        raise exceptions.RangeError(f"ev_percent must be numeric, got {ev_percent!r}")
    try:
        p = float(ev_percent)
    except (TypeError, ValueError) as e:
        raise exceptions.RangeError(f"ev_percent must be numeric, got {ev_percent!r}") from e
    if math.isnan(p) or p < 0 or p > 100:
        raise exceptions.RangeError(
            "Percent of vehicles on site that are electric is outside of acceptable "
            f"bounds ({ev_percent}). Please choose a value between 0 and 100."
        )
    return p


def validate_config(cfg: EVLoadConfig) -> EVLoadConfig:
    validate_ev_percent(cfg.ev_percent)
    exceptions.require(
        cfg.behavior in canon.BEHAVIOR_CODES,
        f"Unknown charging behavior '{cfg.behavior}'.",
        exceptions.ConfigurationError,
    )
    exceptions.require(
        cfg.flexibility in canon.FLEXIBILITY_CODES,
        f"Unknown charging flexibility '{cfg.flexibility}'.",
        exceptions.ConfigurationError,
    )
    exceptions.require(
        cfg.assumed_percent > 0,
        f"assumed_percent must be positive, got {cfg.assumed_percent}.",
        exceptions.ConfigurationError,
    )
    return cfg


def assert_matrix(df: pd.DataFrame) -> None:
    """Check a LoadMatrix: non-empty, finite, non-negative floats."""
    if not isinstance(df, pd.DataFrame):
        raise exceptions.FormatError("Load matrix must be a DataFrame.")
    if df.shape[0] == 0 or df.shape[1] == 0:
        raise exceptions.FormatError("Load matrix is empty.")
    values = df.to_numpy()
    if values.dtype.kind not in "fiu":
        raise exceptions.FormatError("Load matrix must hold numeric values only.")
    if np.isnan(values).any():
        raise exceptions.FormatError(
            "Load matrix has missing cells; rows must all have the same slot count."
        )
    if not np.isfinite(values).all():
        raise exceptions.FormatError("Load matrix holds non-finite values.")
    if (values < 0).any():
        raise exceptions.FormatError(
            "Negative power values detected; charging load should be non-negative."
        )


def assert_same_slots(matrices: Mapping[str, pd.DataFrame]) -> int:
    """All day-type matrices of one family must share the slot count."""
    counts = {day: m.shape[1] for day, m in matrices.items()}
    if len(set(counts.values())) > 1:
        detail = ", ".join(f"{d}={n}" for d, n in counts.items())
        raise exceptions.FormatError(f"Mismatched time-slot counts across day types: {detail}")
    return next(iter(counts.values()))


def assert_day_types(mapping: Mapping[str, object]) -> None:
    missing = [d for d in canon.DAY_TYPES if d not in mapping]
    if missing:
        raise exceptions.FormatError(f"Missing day types: {', '.join(missing)}")
