"""Pydantic validation models for all user-facing data entry points."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from core.models import (
    BBB,
    DELOAD,
    INPUT_KINDS,
    INPUT_ONE_REP_MAX,
    MAIN_LIFTS,
    PROGRESSION_TYPES,
    SEVENTH_WEEK_PROTOCOLS,
    SUPPLEMENTAL_TEMPLATES,
    TM_TEST,
    TRADITIONAL,
    WEEK_PROGRESSION_531,
    WEEK_PROGRESSIONS,
    CycleGroupConfig,
    ExerciseConfig,
    SeventhWeekStrategy,
    TrainingBlockConfig,
)


def _one_of(value, allowed, field: str):
    if value not in allowed:
        raise ValueError(f"{field} must be one of {list(allowed)}")
    return value


class ExerciseConfigInput(BaseModel):
    name: str
    input_value: float = Field(gt=0)
    training_max_percentage: float = Field(default=0.85, gt=0, le=1)

    @field_validator("name")
    @classmethod
    def valid_lift(cls, v):
        return _one_of(v, MAIN_LIFTS, "name")

    def to_config(self) -> ExerciseConfig:
        return ExerciseConfig(
            name=self.name,
            input_value=self.input_value,
            training_max_percentage=self.training_max_percentage,
        )


class LeaderCyclesInput(BaseModel):
    count: int = Field(default=2, ge=1, le=3)
    progression_type: str = TRADITIONAL
    supplemental_template: Optional[str] = None

    @field_validator("progression_type")
    @classmethod
    def valid_progression(cls, v):
        return _one_of(v, PROGRESSION_TYPES, "progression_type")

    @field_validator("supplemental_template")
    @classmethod
    def valid_supplemental(cls, v):
        if v is None:
            return v
        return _one_of(v, SUPPLEMENTAL_TEMPLATES, "supplemental_template")

    def to_config(self) -> CycleGroupConfig:
        return CycleGroupConfig(
            count=self.count,
            progression_type=self.progression_type,
            supplemental_template=self.supplemental_template,
        )


class AnchorCyclesInput(LeaderCyclesInput):
    count: int = Field(default=1, ge=1, le=2)

    @field_validator("supplemental_template")
    @classmethod
    def leader_only_templates(cls, v):
        if v == BBB:
            raise ValueError("BBB (Boring But Big) can only be used as a leader template, not as an anchor.")
        return v


class SeventhWeekStrategyInput(BaseModel):
    after_leader: str = DELOAD
    after_anchor: str = TM_TEST

    @field_validator("after_leader", "after_anchor")
    @classmethod
    def valid_protocol(cls, v):
        return _one_of(v, SEVENTH_WEEK_PROTOCOLS, "seventh week protocol")

    def to_config(self) -> SeventhWeekStrategy:
        return SeventhWeekStrategy(after_leader=self.after_leader, after_anchor=self.after_anchor)


class TrainingBlockConfigInput(BaseModel):
    name: str = Field(min_length=1, max_length=140)
    start_date: date
    exercises: list[ExerciseConfigInput] = Field(min_length=1)
    week_progression: str = WEEK_PROGRESSION_531
    leader_cycles: LeaderCyclesInput = Field(default_factory=LeaderCyclesInput)
    anchor_cycles: AnchorCyclesInput = Field(default_factory=AnchorCyclesInput)
    seventh_week_strategy: SeventhWeekStrategyInput = Field(default_factory=SeventhWeekStrategyInput)
    input_kind: str = INPUT_ONE_REP_MAX

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        if not v.strip():
            raise ValueError("name must not be blank")
        return v.strip()

    @field_validator("week_progression")
    @classmethod
    def valid_week_progression(cls, v):
        return _one_of(v, WEEK_PROGRESSIONS, "week_progression")

    @field_validator("input_kind")
    @classmethod
    def valid_input_kind(cls, v):
        return _one_of(v, INPUT_KINDS, "input_kind")

    @field_validator("exercises")
    @classmethod
    def unique_lifts(cls, v):
        names = [e.name for e in v]
        if len(names) != len(set(names)):
            raise ValueError("each lift may only appear once")
        return v

    def to_config(self) -> TrainingBlockConfig:
        return TrainingBlockConfig(
            name=self.name,
            start_date=self.start_date,
            exercises=tuple(e.to_config() for e in self.exercises),
            week_progression=self.week_progression,
            leader_cycles=self.leader_cycles.to_config(),
            anchor_cycles=self.anchor_cycles.to_config(),
            seventh_week_strategy=self.seventh_week_strategy.to_config(),
            input_kind=self.input_kind,
        )


class ExportRowsInput(BaseModel):
    rows: list[list[str]] = Field(min_length=1)
