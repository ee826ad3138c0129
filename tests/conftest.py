import numpy as np
import pandas as pd
import pytest

from evloadlogic import canon, ingest
from evloadlogic.types import ProfileFamilyKey

N_PROFILES = 103
N_SLOTS = 96


def profile_matrix(scale: float = 1.0, n_profiles: int = N_PROFILES, n_slots: int = N_SLOTS) -> np.ndarray:
    """[profile][slot] kW values: an evening hump whose height varies by profile."""
    slots = np.arange(n_slots)
    shape = np.clip(np.sin((slots - 24) / n_slots * 2 * np.pi), 0.0, None)
    heights = (np.arange(n_profiles) % 7 + 1) * 0.5
    return scale * np.outer(heights, shape)


def write_profile_csv(path, matrix: np.ndarray) -> None:
    """Write in file orientation: one row per slot, one column per profile."""
    pd.DataFrame(np.asarray(matrix).T).to_csv(path, header=False, index=False)


@pytest.fixture
def family_key():
    return ProfileFamilyKey(behavior="BAU", flexibility="MinDelay")


@pytest.fixture
def resource_dir(tmp_path, family_key):
    """A profile family on disk; Saturday and Sunday are scaled copies of weekday."""
    scales = {"weekday": 1.0, "saturday": 0.5, "sunday": 1.5}
    for day, scale in scales.items():
        write_profile_csv(tmp_path / ingest.profile_filename(family_key, day), profile_matrix(scale))
    return tmp_path


@pytest.fixture(scope="session")
def all_families_dir(tmp_path_factory):
    """Every behavior/flexibility/day file, each with a distinct scale."""
    tmp_path = tmp_path_factory.mktemp("profiles")
    for b, bcode in canon.BEHAVIOR_CODES.items():
        for f, fcode in canon.FLEXIBILITY_CODES.items():
            key = ProfileFamilyKey(behavior=b, flexibility=f)
            for day, dcode in canon.DAY_CODES.items():
                scale = 1.0 + 0.1 * bcode + 0.01 * fcode + 0.2 * dcode
                write_profile_csv(tmp_path / ingest.profile_filename(key, day), profile_matrix(scale))
    return tmp_path


@pytest.fixture
def small_family():
    """Three tiny in-memory day-type matrices (2 profiles x 4 slots)."""
    return {
        "weekday": ingest.from_rows([[10, 20, 30, 40], [30, 20, 10, 0]]),
        "saturday": ingest.from_rows([[5, 5, 5, 5], [5, 5, 5, 15]]),
        "sunday": ingest.from_rows([[0, 40, 60, 0], [0, 0, 0, 0]]),
    }
