"""Domain types for 5/3/1 training block generation.

Closed vocabularies are plain string constants (the same strings the API and
UI accept). Everything produced by the engine is a frozen dataclass holding
tuples, so a generated ``TrainingBlock`` is an immutable value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

# -- Vocabularies --

SQUAT = "Squat"
BENCH_PRESS = "Bench Press"
DEADLIFT = "Deadlift"
PRESS = "Press"
MAIN_LIFTS = (SQUAT, BENCH_PRESS, DEADLIFT, PRESS)
UPPER_BODY_LIFTS = frozenset({PRESS, BENCH_PRESS})

TRADITIONAL = "traditional"
FIVES_PRO = "5s_pro"
PROGRESSION_TYPES = (TRADITIONAL, FIVES_PRO)

WEEK_PROGRESSION_531 = "5/3/1"
WEEK_PROGRESSION_351 = "3/5/1"
WEEK_PROGRESSIONS = (WEEK_PROGRESSION_531, WEEK_PROGRESSION_351)

LEADER = "leader"
ANCHOR = "anchor"
TEMPLATE_TYPES = (LEADER, ANCHOR)

FSL = "FSL"
SSL = "SSL"
BBB = "BBB"
SUPPLEMENTAL_TEMPLATES = (FSL, SSL, BBB)

DELOAD = "deload"
TM_TEST = "tm_test"
PR_TEST = "pr_test"
SEVENTH_WEEK_PROTOCOLS = (DELOAD, TM_TEST, PR_TEST)

INPUT_ONE_REP_MAX = "1rm"
INPUT_TRAINING_MAX = "tm"
INPUT_KINDS = (INPUT_ONE_REP_MAX, INPUT_TRAINING_MAX)

WEEK_REGULAR = "regular"
WEEK_SEVENTH = "seventh_week"

WEEKS_PER_CYCLE = 3
PLATE_INCREMENT = 5


def weight_for(training_max: float, percentage: float) -> int:
    """Round ``training_max * percentage`` down to the nearest 5 lbs."""
    return int(math.floor(training_max * percentage / PLATE_INCREMENT) * PLATE_INCREMENT)


# -- Set descriptors (sum type) --

@dataclass(frozen=True)
class StandardSet:
    reps: int
    percentage: float
    kind = "standard"


@dataclass(frozen=True)
class AmrapSet:
    percentage: float
    kind = "amrap"


@dataclass(frozen=True)
class RepRangeSet:
    min_reps: int
    max_reps: int
    percentage: float
    kind = "rep_range"

    def __post_init__(self):
        if self.min_reps > self.max_reps:
            raise ValueError("min_reps must be <= max_reps")


SetDescriptor = Union[StandardSet, AmrapSet, RepRangeSet]


@dataclass(frozen=True)
class WorkSet:
    """A set descriptor pinned to a concrete weight."""
    descriptor: SetDescriptor
    weight: int

    @classmethod
    def at(cls, descriptor: SetDescriptor, training_max: float) -> "WorkSet":
        return cls(descriptor=descriptor, weight=weight_for(training_max, descriptor.percentage))

    @property
    def kind(self) -> str:
        return self.descriptor.kind

    @property
    def percentage(self) -> float:
        return self.descriptor.percentage


# -- Generated plan --

@dataclass(frozen=True)
class Exercise:
    name: str
    sets: tuple[WorkSet, ...]
    one_rep_max: float
    training_max: float


@dataclass(frozen=True)
class Week:
    exercises: tuple[Exercise, ...]
    kind: str = WEEK_REGULAR


@dataclass(frozen=True)
class Cycle:
    weeks: tuple[Week, ...]
    progression_type: str
    template_type: str
    week_progression: str


@dataclass(frozen=True)
class SeventhWeek:
    exercises: tuple[Exercise, ...]
    protocol: str


@dataclass(frozen=True)
class TrainingBlock:
    name: str
    start_date: date
    leader_cycles: tuple[Cycle, ...]
    seventh_week: SeventhWeek
    anchor_cycles: tuple[Cycle, ...]
    final_seventh_week: SeventhWeek

    @property
    def total_weeks(self) -> int:
        return WEEKS_PER_CYCLE * (len(self.leader_cycles) + len(self.anchor_cycles)) + 2


# -- Configuration --

@dataclass(frozen=True)
class ExerciseConfig:
    name: str
    input_value: float
    training_max_percentage: float = 0.85


@dataclass(frozen=True)
class CycleGroupConfig:
    count: int
    progression_type: str = TRADITIONAL
    supplemental_template: Optional[str] = None


@dataclass(frozen=True)
class SeventhWeekStrategy:
    after_leader: str = DELOAD
    after_anchor: str = TM_TEST


@dataclass(frozen=True)
class TrainingBlockConfig:
    name: str
    start_date: date
    exercises: tuple[ExerciseConfig, ...]
    leader_cycles: CycleGroupConfig
    anchor_cycles: CycleGroupConfig
    week_progression: str = WEEK_PROGRESSION_531
    seventh_week_strategy: SeventhWeekStrategy = SeventhWeekStrategy()
    input_kind: str = INPUT_ONE_REP_MAX
