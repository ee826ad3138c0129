from __future__ import annotations
import logging
from pathlib import Path
from typing import Mapping, Optional, Sequence

from . import cohorts, ingest, schedule, transform, validate
from .config import EVLoadConfig, default_config, resolve_resource_dir
from .types import EVLoadResult, LoadMatrix

logger = logging.getLogger(__name__)


def run_matrices(
    matrices: Mapping[str, LoadMatrix],
    config: Optional[EVLoadConfig] = None,
    *,
    cohort_table: Optional[Mapping[str, Sequence[int]]] = None,
    resource_dir: Optional[str] = None,
) -> EVLoadResult:
    """
    Aggregate, normalize and emit schedules from already-loaded matrices.

    Any failure raises; no partial result is returned.
    """
    cfg = validate.validate_config(config or default_config())
    indices = cohorts.select_indices(cfg.station_type, table=cohort_table)
    return _build(matrices, cfg, indices, resource_dir)


def _build(
    matrices: Mapping[str, LoadMatrix],
    cfg: EVLoadConfig,
    indices: Sequence[int],
    resource_dir: Optional[str],
) -> EVLoadResult:
    """Pipeline steps after config and cohort have been checked."""
    logger.debug("Station type %s → %d cohort profiles", cfg.station_type, len(indices))

    aggregated = transform.aggregate_family(
        matrices, indices, cfg.ev_percent, cfg.assumed_percent
    )
    normalized, peak_kw = transform.normalize(aggregated)

    ruleset = schedule.build_ruleset(normalized)
    equipment = schedule.build_equipment(peak_kw, ruleset.name)
    logger.info("EV charging peak load %.3f kW (%s)", peak_kw, equipment.name)

    return EVLoadResult(
        config=cfg,
        family=cfg.family_key,
        indices=tuple(indices),
        aggregated=aggregated,
        normalized=normalized,
        peak_kw=peak_kw,
        ruleset=ruleset,
        equipment=equipment,
        resource_dir=resource_dir,
    )


def run(
    config: Optional[EVLoadConfig] = None,
    *,
    resource_dir: Optional[str | Path] = None,
    cohort_table: Optional[Mapping[str, Sequence[int]]] = None,
) -> EVLoadResult:
    """
    Full pipeline: load the profile family for the configured behavior and
    flexibility, then aggregate the station-type cohort and build schedules.
    """
    cfg = validate.validate_config(config or default_config())
    # resolve the cohort before any I/O so a bad station type fails fast
    indices = cohorts.select_indices(cfg.station_type, table=cohort_table)

    key = cfg.family_key
    logger.info(
        "charge key = %d, flex key = %d, station type = %s, ev percent = %s",
        key.behavior_code,
        key.flexibility_code,
        cfg.station_type,
        cfg.ev_percent,
    )
    directory = resolve_resource_dir(resource_dir)
    matrices = ingest.load_family(key, resource_dir=directory)
    return _build(matrices, cfg, indices, str(directory))
