from . import (
    canon,
    exceptions,
    types,
    config,
    validate,
    ingest,
    cohorts,
    transform,
    schedule,
    formats,
    scenario,
)

__all__ = [
    "canon",
    "exceptions",
    "types",
    "config",
    "validate",
    "ingest",
    "cohorts",
    "transform",
    "schedule",
    "formats",
    "scenario",
]
