"""Tabular export of a training block (rows, pandas DataFrame, CSV) and the
reverse lookup used to extend an existing plan into a new block."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

import pandas as pd

from core.models import MAIN_LIFTS, ExerciseConfig, TrainingBlock
from core.services.formatting import FINAL_WEEK_PREFIX, block_weeks, format_set, format_training_max

EXPORT_COLUMNS = ["Week", "Date", "Exercise", "Training Max", "Sets"]
SET_SEPARATOR = "; "
_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


def block_rows(block: TrainingBlock, include_header: bool = False, unit: str = "lbs") -> list[list[str]]:
    rows: list[list[str]] = [list(EXPORT_COLUMNS)] if include_header else []
    for week in block_weeks(block):
        for ex in week.exercises:
            rows.append(
                [
                    week.label,
                    week.start_date.isoformat(),
                    ex.name,
                    format_training_max(ex.training_max, unit),
                    SET_SEPARATOR.join(format_set(s, unit=unit) for s in ex.sets),
                ]
            )
    return rows


def block_dataframe(block: TrainingBlock, unit: str = "lbs") -> pd.DataFrame:
    return pd.DataFrame(block_rows(block, unit=unit), columns=EXPORT_COLUMNS)


def block_csv(block: TrainingBlock, unit: str = "lbs") -> str:
    return block_dataframe(block, unit=unit).to_csv(index=False)


def training_maxes_from_rows(rows: Iterable[Sequence[str]]) -> dict[str, int]:
    """Read the final week's training max per lift from exported rows.

    Training maxes are truncated to whole pounds. Rows whose label does not
    start with ``Final`` (including a header row) are ignored.
    """
    maxes: dict[str, int] = {}
    for row in rows:
        if len(row) < 4:
            continue
        label, exercise, training_max = str(row[0] or ""), str(row[2] or "").strip(), str(row[3] or "")
        if not label.strip().lower().startswith(FINAL_WEEK_PREFIX.lower()) or not exercise:
            continue
        match = _NUMBER_RE.search(training_max)
        if match:
            maxes[exercise] = int(float(match.group(0)))
    if not maxes:
        raise ValueError("No final week training maxes found in exported rows")
    return maxes


def next_block_exercises(training_maxes: dict[str, float]) -> tuple[ExerciseConfig, ...]:
    """Exercise configs seeded with carried-over training maxes (use with input kind ``tm``)."""
    ordered = [lift for lift in MAIN_LIFTS if lift in training_maxes]
    ordered += [lift for lift in training_maxes if lift not in MAIN_LIFTS]
    return tuple(
        ExerciseConfig(name=lift, input_value=float(training_maxes[lift]), training_max_percentage=1.0)
        for lift in ordered
    )
