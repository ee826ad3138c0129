from __future__ import annotations
from typing import Literal, Dict, List, Tuple, Optional, TYPE_CHECKING
from dataclasses import dataclass
from datetime import timedelta

import pandas as pd
from pydantic import BaseModel, Field

from . import canon

if TYPE_CHECKING:
    from .config import EVLoadConfig

ChargeBehavior = Literal["BAU", "FreeSiteCharging", "FreeMetroCharging"]
Flexibility = Literal["MinDelay", "MaxDelay", "MinPower"]
StationType = Literal["Home", "Work", "Public"]
DayType = Literal["weekday", "saturday", "sunday"]

# [profile][slot] matrix of kW values
LoadMatrix = pd.DataFrame
CohortIndexSet = Tuple[int, ...]


@dataclass(frozen=True)
class ProfileFamilyKey:
    behavior: ChargeBehavior
    flexibility: Flexibility

    @property
    def behavior_code(self) -> int:
        return canon.BEHAVIOR_CODES[self.behavior]

    @property
    def flexibility_code(self) -> int:
        return canon.FLEXIBILITY_CODES[self.flexibility]


## Building-model boundary objects
class ScheduleDay(BaseModel):
    """One day of a ruleset schedule.

    Attributes:
        name: Day schedule name in the building model
        values: (time-offset, value) pairs, each value holding until its offset
    """

    name: str
    values: List[Tuple[timedelta, float]]

    model_config = {"frozen": True}


class ScheduleRule(BaseModel):
    name: str
    apply_days: List[DayType]
    day: ScheduleDay

    model_config = {"frozen": True}


class ScheduleRuleset(BaseModel):
    name: str
    default_day: ScheduleDay
    summer_design_day: ScheduleDay
    winter_design_day: ScheduleDay
    rules: List[ScheduleRule] = Field(default_factory=list)

    model_config = {"frozen": True}


class ExteriorEquipment(BaseModel):
    name: str
    definition_name: str
    design_level_w: float
    schedule_name: str
    fuel_type: str = canon.FUEL_TYPE
    end_use_subcategory: str = canon.END_USE_SUBCATEGORY

    model_config = {"frozen": True}


@dataclass
class EVLoadResult:
    config: "EVLoadConfig"
    family: ProfileFamilyKey
    indices: CohortIndexSet
    aggregated: Dict[str, pd.Series]
    normalized: Dict[str, pd.Series]
    peak_kw: float
    ruleset: ScheduleRuleset
    equipment: ExteriorEquipment
    resource_dir: Optional[str] = None

    @property
    def peak_w(self) -> float:
        return self.peak_kw * 1000.0
