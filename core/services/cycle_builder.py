from __future__ import annotations

from typing import Iterable, Optional

from core.models import (
    INPUT_ONE_REP_MAX,
    WEEK_PROGRESSION_531,
    WEEK_REGULAR,
    Cycle,
    Exercise,
    ExerciseConfig,
    Week,
)
from core.services.templates import main_work_template, materialize, supplemental_template
from core.services.training_max import estimated_one_rep_max, resolve_training_max


def build_cycle(
    exercises: Iterable[ExerciseConfig],
    progression_type: str,
    template_type: str,
    supplemental: Optional[str] = None,
    cycle_index: int = 0,
    week_progression: str = WEEK_PROGRESSION_531,
    input_kind: str = INPUT_ONE_REP_MAX,
) -> Cycle:
    """Build one three-week cycle for every exercise.

    Each exercise's week holds the main-work ladder first and then the
    supplemental sets, in template order. ``cycle_index`` is the position of
    this cycle in the whole block and drives the training max increment.
    """
    exercises = tuple(exercises)
    main_weeks = main_work_template(progression_type, week_progression)
    # Resolved up front so an invalid combination fails before any week is built.
    supplemental_weeks = (
        supplemental_template(supplemental, progression_type, template_type) if supplemental else None
    )

    weeks: list[Week] = []
    for week_idx, main_sets in enumerate(main_weeks):
        week_exercises: list[Exercise] = []
        for cfg in exercises:
            training_max = resolve_training_max(cfg, cycle_index, input_kind)
            sets = materialize(main_sets, training_max)
            if supplemental_weeks is not None:
                sets += materialize(supplemental_weeks[week_idx], training_max)
            week_exercises.append(
                Exercise(
                    name=cfg.name,
                    sets=sets,
                    one_rep_max=estimated_one_rep_max(cfg, input_kind),
                    training_max=training_max,
                )
            )
        weeks.append(Week(exercises=tuple(week_exercises), kind=WEEK_REGULAR))

    return Cycle(
        weeks=tuple(weeks),
        progression_type=progression_type,
        template_type=template_type,
        week_progression=week_progression,
    )
