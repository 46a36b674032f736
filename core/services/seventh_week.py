from __future__ import annotations

from typing import Iterable

from core.models import INPUT_ONE_REP_MAX, Exercise, ExerciseConfig, SeventhWeek
from core.services.templates import materialize, seventh_week_template
from core.services.training_max import estimated_one_rep_max, resolve_training_max


def build_seventh_week(
    exercises: Iterable[ExerciseConfig],
    protocol: str,
    cycle_index: int = 0,
    tests_next_cycle: bool = False,
    input_kind: str = INPUT_ONE_REP_MAX,
) -> SeventhWeek:
    """Build a single deload / TM test / PR test week.

    With ``tests_next_cycle`` the training max is taken one increment ahead,
    so a TM test validates the next block's starting training max. A deload
    uses the training max already earned by ``cycle_index``.
    """
    descriptors = seventh_week_template(protocol)
    effective_cycle_index = cycle_index + (1 if tests_next_cycle else 0)

    week_exercises = []
    for cfg in exercises:
        training_max = resolve_training_max(cfg, effective_cycle_index, input_kind)
        week_exercises.append(
            Exercise(
                name=cfg.name,
                sets=materialize(descriptors, training_max),
                one_rep_max=estimated_one_rep_max(cfg, input_kind),
                training_max=training_max,
            )
        )
    return SeventhWeek(exercises=tuple(week_exercises), protocol=protocol)
