from __future__ import annotations
import logging
from pathlib import Path
from typing import IO, Iterable, Optional, Sequence

import pandas as pd

from . import canon, exceptions, validate
from .config import resolve_resource_dir
from .types import DayType, LoadMatrix, ProfileFamilyKey

logger = logging.getLogger(__name__)


def profile_filename(key: ProfileFamilyKey, day: DayType) -> str:
    """Deterministic resource name, e.g. chg1_dow3_flex2.csv."""
    if day not in canon.DAY_CODES:
        raise exceptions.ConfigurationError(
            f"Unknown day type '{day}'. Expected one of: {', '.join(canon.DAY_TYPES)}"
        )
    return canon.FILENAME_TEMPLATE.format(
        behavior=key.behavior_code,
        day=canon.DAY_CODES[day],
        flexibility=key.flexibility_code,
    )


def _to_numeric(raw: pd.DataFrame) -> pd.DataFrame:
    """Parse every cell as a number; ragged, blank or non-numeric cells fail."""
    if raw.isna().any().any():
        row, col = next(
            (r, c) for r, c in zip(*raw.isna().to_numpy().nonzero())
        )
        raise exceptions.FormatError(
            f"Missing cell at row {row}, column {col}; rows must all have the same length."
        )
    as_text = raw.astype(str).apply(lambda c: c.str.strip())
    numeric = as_text.apply(pd.to_numeric, errors="coerce")
    bad = numeric.isna()
    if bad.any().any():
        row, col = next((r, c) for r, c in zip(*bad.to_numpy().nonzero()))
        raise exceptions.FormatError(
            f"Non-numeric cell {raw.iat[row, col]!r} at row {row}, column {col}."
        )
    return numeric.astype(float)


def _as_matrix(values: pd.DataFrame) -> LoadMatrix:
    out = values.reset_index(drop=True)
    out.columns = pd.RangeIndex(out.shape[1], name=canon.SLOT_INDEX_NAME)
    out.index.name = canon.PROFILE_INDEX_NAME
    validate.assert_matrix(out)
    return out


def read_matrix(file_like: IO[str] | str | Path) -> LoadMatrix:
    """
    Read one header-less profile CSV and return it as [profile][slot].

    The file holds one row per time slot and one column per simulated
    vehicle profile; the result is transposed so rows are profiles.
    """
    try:
        raw = pd.read_csv(file_like, header=None, dtype=str, skip_blank_lines=True)
    except FileNotFoundError as e:
        raise exceptions.ResourceNotFound(f"Profile resource not found: {file_like}") from e
    except pd.errors.EmptyDataError as e:
        raise exceptions.FormatError(f"Profile resource is empty: {file_like}") from e
    except pd.errors.ParserError as e:
        # raised when a row has more fields than the first one
        raise exceptions.FormatError(f"Ragged profile resource {file_like}: {e}") from e
    except UnicodeDecodeError as e:
        raise exceptions.FormatError(f"Profile resource {file_like} is not valid UTF-8 text: {e}") from e

    numeric = _to_numeric(raw)
    return _as_matrix(numeric.T)


def from_rows(rows: Iterable[Sequence[float]]) -> LoadMatrix:
    """Build a LoadMatrix from in-memory rows already laid out as [profile][slot]."""
    rows = [list(r) for r in rows]
    if not rows:
        raise exceptions.FormatError("Load matrix is empty.")
    lengths = sorted({len(r) for r in rows})
    if len(lengths) > 1:
        raise exceptions.FormatError(
            f"Ragged load matrix: rows have slot counts {lengths}."
        )
    return _as_matrix(_to_numeric(pd.DataFrame(rows, dtype=object)))


def load(
    key: ProfileFamilyKey,
    day: DayType,
    *,
    resource_dir: Optional[str | Path] = None,
) -> LoadMatrix:
    """Load the matrix of one day type for a profile family."""
    path = resolve_resource_dir(resource_dir) / profile_filename(key, day)
    if not path.is_file():
        raise exceptions.ResourceNotFound(f"Profile resource not found: {path}")
    m = read_matrix(path)
    logger.debug(
        "Loaded %s: %d profiles x %d slots", path.name, m.shape[0], m.shape[1]
    )
    return m


def load_family(
    key: ProfileFamilyKey,
    *,
    resource_dir: Optional[str | Path] = None,
) -> dict[str, LoadMatrix]:
    """Load the weekday/saturday/sunday matrices; slot counts must agree."""
    matrices = {day: load(key, day, resource_dir=resource_dir) for day in canon.DAY_TYPES}
    validate.assert_same_slots(matrices)
    return matrices
