from __future__ import annotations
from typing import Mapping, Sequence

import numpy as np
import pandas as pd

from . import canon, cohorts, exceptions, validate
from .types import LoadMatrix


def aggregate(
    matrix: LoadMatrix,
    indices: Sequence[int],
    ev_percent: float,
    assumed_percent: float = canon.ASSUMED_EV_PERCENT,
) -> pd.Series:
    """
    Mean charging power per slot over the cohort rows, rescaled for adoption.

    The profiles were generated at `assumed_percent` EV adoption; scaling by
    ev_percent / assumed_percent treats load as proportional to adoption.
    Indices repeated in the cohort count once per occurrence.
    """
    indices = list(indices)
    if not indices:
        raise exceptions.ConfigurationError("Cohort index set is empty; nothing to average.")
    if assumed_percent <= 0:
        raise exceptions.ConfigurationError(
            f"assumed_percent must be positive, got {assumed_percent}."
        )
    cohorts.check_indices(indices, matrix.shape[0])

    rows = matrix.to_numpy(dtype=float)[indices]
    mean = rows.mean(axis=0) * (float(ev_percent) / float(assumed_percent))
    return pd.Series(
        mean,
        index=pd.RangeIndex(len(mean), name=canon.SLOT_INDEX_NAME),
        dtype=float,
    )


def aggregate_family(
    matrices: Mapping[str, LoadMatrix],
    indices: Sequence[int],
    ev_percent: float,
    assumed_percent: float = canon.ASSUMED_EV_PERCENT,
) -> dict[str, pd.Series]:
    """Aggregate each day type in weekday, saturday, sunday order."""
    validate.assert_day_types(matrices)
    validate.assert_same_slots(matrices)
    out: dict[str, pd.Series] = {}
    for day in canon.DAY_TYPES:
        s = aggregate(matrices[day], indices, ev_percent, assumed_percent)
        s.name = day
        out[day] = s
    return out


def peak_load(sequences: Mapping[str, pd.Series]) -> float:
    """Largest value over every day type (kW)."""
    validate.assert_day_types(sequences)
    empty = [d for d in canon.DAY_TYPES if len(sequences[d]) == 0]
    if empty:
        raise exceptions.DegenerateInputError(f"Empty sequences for: {', '.join(empty)}")
    maxima = [np.max(np.asarray(sequences[d], dtype=float)) for d in canon.DAY_TYPES]
    # NaN propagates through np.max, unlike builtin max()
    return float(np.max(maxima))


def normalize(sequences: Mapping[str, pd.Series]) -> tuple[dict[str, pd.Series], float]:
    """
    Divide every day type by the shared peak.

    Returns ({day: normalized}, peak_kw). Values land in [0, 1] and the slot
    that set the peak becomes exactly 1.0.
    """
    peak = peak_load(sequences)
    for day in canon.DAY_TYPES:
        values = np.asarray(sequences[day], dtype=float)
        if not np.isfinite(values).all() or (values < 0).any():
            raise exceptions.DegenerateInputError(
                f"{day} sequence holds negative or non-finite values; cannot normalize."
            )
    if not np.isfinite(peak) or peak <= 0:
        raise exceptions.DegenerateInputError(
            f"Peak charging load is {peak}; cannot normalize a schedule without a positive peak."
        )
    out: dict[str, pd.Series] = {}
    for day in canon.DAY_TYPES:
        s = pd.Series(sequences[day], dtype=float) / peak
        s.name = day
        out[day] = s
    return out, peak
