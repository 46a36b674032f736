from __future__ import annotations

from datetime import date

from core.models import (
    AmrapSet,
    CycleGroupConfig,
    ExerciseConfig,
    RepRangeSet,
    SeventhWeekStrategy,
    StandardSet,
    TrainingBlockConfig,
    WorkSet,
)
from core.services.formatting import (
    block_weeks,
    cycle_count_label,
    format_set,
    format_training_max,
    format_weight,
    seventh_week_label,
    training_max_summary,
)
from core.services.training_block import create_training_block


def _block(after_anchor="tm_test"):
    return create_training_block(
        TrainingBlockConfig(
            name="Spring",
            start_date=date(2024, 3, 20),
            exercises=(
                ExerciseConfig(name="Squat", input_value=315, training_max_percentage=0.85),
                ExerciseConfig(name="Press", input_value=135, training_max_percentage=0.85),
            ),
            leader_cycles=CycleGroupConfig(count=2, progression_type="5s_pro", supplemental_template="SSL"),
            anchor_cycles=CycleGroupConfig(count=1, progression_type="traditional", supplemental_template="FSL"),
            seventh_week_strategy=SeventhWeekStrategy(after_leader="deload", after_anchor=after_anchor),
        )
    )


def test_format_weight_rounds_down():
    assert format_weight(174.04) == 170
    assert format_weight(175) == 175
    assert format_weight(4.9) == 0


def test_format_standard_set():
    s = WorkSet(descriptor=StandardSet(reps=5, percentage=0.65), weight=170)
    assert format_set(s) == "5×170 lbs (65%)"
    assert format_set(s, include_percentage=False) == "5×170 lbs"


def test_format_amrap_and_rep_range_sets():
    amrap = WorkSet(descriptor=AmrapSet(percentage=1.0), weight=255)
    rep_range = WorkSet(descriptor=RepRangeSet(min_reps=3, max_reps=5, percentage=1.0), weight=255)
    assert format_set(amrap) == "AMRAP×255 lbs (100%)"
    assert format_set(rep_range) == "3-5×255 lbs (100%)"


def test_format_training_max():
    assert format_training_max(200) == "200 lbs"
    assert format_training_max(267.75) == "267.75 lbs"


def test_seventh_week_labels():
    assert seventh_week_label("deload") == "Deload Week"
    assert seventh_week_label("tm_test", final=True) == "Final TM Test Week"
    assert seventh_week_label("pr_test") == "PR Test Week"


def test_block_weeks_labels_and_order():
    weeks = block_weeks(_block())
    assert [w.label for w in weeks] == [
        "Leader 1 - Week 1",
        "Week 2",
        "Week 3",
        "Leader 2 - Week 4",
        "Week 5",
        "Week 6",
        "Deload Week",
        "Anchor 1 - Week 8",
        "Week 9",
        "Week 10",
        "Final TM Test Week",
    ]
    assert [w.kind for w in weeks].count("seventh_week") == 2
    assert [w.week_number for w in weeks] == list(range(1, 12))


def test_block_weeks_dates_step_weekly():
    weeks = block_weeks(_block())
    assert weeks[0].start_date == date(2024, 3, 20)
    assert weeks[1].start_date == date(2024, 3, 27)
    assert weeks[-1].start_date == date(2024, 5, 29)


def test_final_deload_label():
    assert block_weeks(_block(after_anchor="deload"))[-1].label == "Final Deload Week"


def test_training_max_summary_uses_first_week():
    summary = training_max_summary(_block())
    assert list(summary) == ["Squat", "Press"]
    assert summary["Squat"] == 315 * 0.85


def test_cycle_count_label():
    assert cycle_count_label(_block()) == "3 cycles / 11 weeks"
