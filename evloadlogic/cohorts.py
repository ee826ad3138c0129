from __future__ import annotations
from typing import Iterable, Mapping, Optional, Sequence

from . import canon, exceptions
from .types import CohortIndexSet


def select_indices(
    station_type: str,
    *,
    table: Optional[Mapping[str, Sequence[int]]] = None,
) -> CohortIndexSet:
    """Return the profile columns representative of a charging-station type."""
    table = canon.COHORT_INDICES if table is None else table
    if station_type not in table:
        raise exceptions.ConfigurationError(
            f"No cohort defined for station type '{station_type}'. "
            f"Available: {', '.join(map(str, table))}"
        )
    indices = tuple(int(i) for i in table[station_type])
    exceptions.require(
        len(indices) > 0,
        f"Cohort for station type '{station_type}' is empty.",
        exceptions.ConfigurationError,
    )
    return indices


def check_indices(indices: Iterable[int], n_profiles: int) -> None:
    """Every cohort index must address an existing profile row."""
    bad = sorted({i for i in indices if i < 0 or i >= n_profiles})
    if bad:
        raise exceptions.ConfigurationError(
            f"Cohort indices {bad} out of range for {n_profiles} profiles."
        )
