from __future__ import annotations

from datetime import date as dt_date
from typing import Any, Optional

from pydantic import BaseModel

from core.models import Cycle, Exercise, RepRangeSet, SeventhWeek, StandardSet, TrainingBlock, WorkSet
from core.services.formatting import block_weeks, format_set


class WorkSetOut(BaseModel):
    type: str
    percentage: float
    weight: int
    reps: Optional[int] = None
    min_reps: Optional[int] = None
    max_reps: Optional[int] = None
    display: str


class ExerciseOut(BaseModel):
    name: str
    one_rep_max: float
    training_max: float
    sets: list[WorkSetOut]


class WeekOut(BaseModel):
    kind: str
    exercises: list[ExerciseOut]


class CycleOut(BaseModel):
    progression_type: str
    template_type: str
    week_progression: str
    weeks: list[WeekOut]


class SeventhWeekOut(BaseModel):
    protocol: str
    exercises: list[ExerciseOut]


class WeekLabelOut(BaseModel):
    week_number: int
    label: str
    kind: str
    start_date: dt_date


class TrainingBlockOut(BaseModel):
    name: str
    start_date: dt_date
    leader_cycles: list[CycleOut]
    seventh_week: SeventhWeekOut
    anchor_cycles: list[CycleOut]
    final_seventh_week: SeventhWeekOut
    schedule: list[WeekLabelOut]


class TrainingMaxesOut(BaseModel):
    training_maxes: dict[str, int]


class TemplateCatalogOut(BaseModel):
    main_work: dict[str, Any]
    supplemental: dict[str, Any]
    seventh_week: dict[str, Any]


class SimpleStatusResponse(BaseModel):
    status: str


def work_set_out(work_set: WorkSet) -> WorkSetOut:
    d = work_set.descriptor
    return WorkSetOut(
        type=d.kind,
        percentage=d.percentage,
        weight=work_set.weight,
        reps=d.reps if isinstance(d, StandardSet) else None,
        min_reps=d.min_reps if isinstance(d, RepRangeSet) else None,
        max_reps=d.max_reps if isinstance(d, RepRangeSet) else None,
        display=format_set(work_set),
    )


def exercise_out(exercise: Exercise) -> ExerciseOut:
    return ExerciseOut(
        name=exercise.name,
        one_rep_max=exercise.one_rep_max,
        training_max=exercise.training_max,
        sets=[work_set_out(s) for s in exercise.sets],
    )


def cycle_out(cycle: Cycle) -> CycleOut:
    return CycleOut(
        progression_type=cycle.progression_type,
        template_type=cycle.template_type,
        week_progression=cycle.week_progression,
        weeks=[WeekOut(kind=w.kind, exercises=[exercise_out(e) for e in w.exercises]) for w in cycle.weeks],
    )


def seventh_week_out(week: SeventhWeek) -> SeventhWeekOut:
    return SeventhWeekOut(protocol=week.protocol, exercises=[exercise_out(e) for e in week.exercises])


def training_block_out(block: TrainingBlock) -> TrainingBlockOut:
    return TrainingBlockOut(
        name=block.name,
        start_date=block.start_date,
        leader_cycles=[cycle_out(c) for c in block.leader_cycles],
        seventh_week=seventh_week_out(block.seventh_week),
        anchor_cycles=[cycle_out(c) for c in block.anchor_cycles],
        final_seventh_week=seventh_week_out(block.final_seventh_week),
        schedule=[
            WeekLabelOut(week_number=w.week_number, label=w.label, kind=w.kind, start_date=w.start_date)
            for w in block_weeks(block)
        ],
    )
