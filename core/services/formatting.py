"""Display helpers shared by the API, the CSV export and the Streamlit page."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, timedelta

from core.models import (
    DELOAD,
    PLATE_INCREMENT,
    PR_TEST,
    TM_TEST,
    WEEK_REGULAR,
    WEEK_SEVENTH,
    AmrapSet,
    Exercise,
    RepRangeSet,
    StandardSet,
    TrainingBlock,
    WorkSet,
)

PROTOCOL_LABELS = {DELOAD: "Deload", TM_TEST: "TM Test", PR_TEST: "PR Test"}
FINAL_WEEK_PREFIX = "Final"


@dataclass(frozen=True)
class BlockWeek:
    week_number: int
    label: str
    kind: str
    start_date: date
    exercises: tuple[Exercise, ...]


def format_weight(weight: float) -> int:
    """Round down to the nearest 5 lbs."""
    return int(math.floor(weight / PLATE_INCREMENT) * PLATE_INCREMENT)


def format_set(work_set: WorkSet, include_percentage: bool = True, unit: str = "lbs") -> str:
    d = work_set.descriptor
    pct = f" ({round(d.percentage * 100)}%)" if include_percentage else ""
    if isinstance(d, StandardSet):
        reps = str(d.reps)
    elif isinstance(d, AmrapSet):
        reps = "AMRAP"
    elif isinstance(d, RepRangeSet):
        reps = f"{d.min_reps}-{d.max_reps}"
    else:
        raise TypeError(f"Unsupported set type: {type(d).__name__}")
    return f"{reps}×{work_set.weight} {unit}{pct}"


def format_training_max(training_max: float, unit: str = "lbs") -> str:
    value = int(training_max) if float(training_max).is_integer() else round(training_max, 2)
    return f"{value} {unit}"


def seventh_week_label(protocol: str, final: bool = False) -> str:
    label = f"{PROTOCOL_LABELS.get(protocol, protocol)} Week"
    return f"{FINAL_WEEK_PREFIX} {label}" if final else label


def block_weeks(block: TrainingBlock) -> list[BlockWeek]:
    """Flatten a block into its weeks in training order, with display labels.

    The first week of each cycle is tagged ``Leader n`` / ``Anchor n``; week
    numbers run across the whole block.
    """
    weeks: list[BlockWeek] = []

    def add(label: str, kind: str, exercises: tuple[Exercise, ...]) -> None:
        number = len(weeks) + 1
        weeks.append(
            BlockWeek(
                week_number=number,
                label=label,
                kind=kind,
                start_date=block.start_date + timedelta(days=7 * (number - 1)),
                exercises=exercises,
            )
        )

    def add_cycles(cycles, title: str) -> None:
        for cycle_no, cycle in enumerate(cycles, start=1):
            for week_idx, week in enumerate(cycle.weeks):
                number = len(weeks) + 1
                label = f"{title} {cycle_no} - Week {number}" if week_idx == 0 else f"Week {number}"
                add(label, WEEK_REGULAR, week.exercises)

    add_cycles(block.leader_cycles, "Leader")
    add(seventh_week_label(block.seventh_week.protocol), WEEK_SEVENTH, block.seventh_week.exercises)
    add_cycles(block.anchor_cycles, "Anchor")
    add(seventh_week_label(block.final_seventh_week.protocol, final=True), WEEK_SEVENTH, block.final_seventh_week.exercises)
    return weeks


def training_max_summary(block: TrainingBlock) -> dict[str, float]:
    """Starting training max per lift (first leader week)."""
    first_week = block.leader_cycles[0].weeks[0]
    return {ex.name: ex.training_max for ex in first_week.exercises}


def cycle_count_label(block: TrainingBlock) -> str:
    cycles = len(block.leader_cycles) + len(block.anchor_cycles)
    return f"{cycles} cycles / {block.total_weeks} weeks"
