from __future__ import annotations

from core.models import AmrapSet, ExerciseConfig, RepRangeSet
from core.services.seventh_week import build_seventh_week

SQUAT_TM = ExerciseConfig(name="Squat", input_value=200, training_max_percentage=1.0)
BENCH_TM = ExerciseConfig(name="Bench Press", input_value=200, training_max_percentage=1.0)


def test_deload_uses_current_training_max():
    week = build_seventh_week([SQUAT_TM], "deload", cycle_index=1, input_kind="tm")
    squat = week.exercises[0]
    assert week.protocol == "deload"
    assert squat.training_max == 210
    assert [s.weight for s in squat.sets] == [80, 105, 125]


def test_tm_test_looks_one_cycle_ahead():
    week = build_seventh_week([SQUAT_TM, BENCH_TM], "tm_test", cycle_index=1, tests_next_cycle=True, input_kind="tm")
    squat, bench = week.exercises
    assert squat.training_max == 220
    assert bench.training_max == 210
    assert [s.weight for s in squat.sets] == [150, 175, 195, 220]
    assert isinstance(squat.sets[-1].descriptor, RepRangeSet)


def test_pr_test_ends_with_amrap():
    week = build_seventh_week([BENCH_TM], "pr_test", input_kind="tm")
    bench = week.exercises[0]
    assert len(bench.sets) == 4
    assert bench.sets[-1].descriptor == AmrapSet(percentage=1.0)
    assert bench.sets[-1].weight == 200


def test_seventh_week_has_no_supplemental_work():
    for protocol, expected in (("deload", 3), ("tm_test", 4), ("pr_test", 4)):
        week = build_seventh_week([SQUAT_TM], protocol, input_kind="tm")
        assert len(week.exercises[0].sets) == expected
