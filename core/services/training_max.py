"""Training max resolution with cycle-based progressive overload.

Upper body lifts (Press, Bench Press) gain 5 lbs per completed cycle, lower
body lifts (Squat, Deadlift) gain 10 lbs. No rounding happens here; only set
weights are floored to 5 lbs.
"""

from __future__ import annotations

from core.models import INPUT_TRAINING_MAX, UPPER_BODY_LIFTS, ExerciseConfig

UPPER_BODY_INCREMENT = 5
LOWER_BODY_INCREMENT = 10


def increment_for(lift: str) -> int:
    return UPPER_BODY_INCREMENT if lift in UPPER_BODY_LIFTS else LOWER_BODY_INCREMENT


def base_training_max(exercise: ExerciseConfig, input_kind: str = "1rm") -> float:
    """Starting training max: the raw value for ``tm`` input, else 1RM * percentage."""
    if input_kind == INPUT_TRAINING_MAX:
        return exercise.input_value
    return exercise.input_value * exercise.training_max_percentage


def resolve_training_max(exercise: ExerciseConfig, cycle_index: int, input_kind: str = "1rm") -> float:
    return base_training_max(exercise, input_kind) + increment_for(exercise.name) * cycle_index


def estimated_one_rep_max(exercise: ExerciseConfig, input_kind: str = "1rm") -> float:
    if input_kind == INPUT_TRAINING_MAX:
        return exercise.input_value / exercise.training_max_percentage
    return exercise.input_value
