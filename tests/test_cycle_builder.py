from __future__ import annotations

import pytest

from core.models import ExerciseConfig, StandardSet
from core.services.cycle_builder import build_cycle
from core.services.templates import TemplateConfigurationError

PRESS_TM = ExerciseConfig(name="Press", input_value=200, training_max_percentage=1.0)
SQUAT_TM = ExerciseConfig(name="Squat", input_value=200, training_max_percentage=1.0)


def _weights(exercise):
    return [s.weight for s in exercise.sets]


def test_cycle_has_three_regular_weeks():
    cycle = build_cycle([PRESS_TM, SQUAT_TM], "traditional", "leader", input_kind="tm")
    assert len(cycle.weeks) == 3
    assert all(w.kind == "regular" for w in cycle.weeks)
    assert [e.name for e in cycle.weeks[0].exercises] == ["Press", "Squat"]
    assert cycle.progression_type == "traditional"
    assert cycle.template_type == "leader"
    assert cycle.week_progression == "5/3/1"


def test_main_work_without_supplemental():
    cycle = build_cycle([PRESS_TM], "traditional", "leader", input_kind="tm")
    assert _weights(cycle.weeks[0].exercises[0]) == [130, 150, 170]
    assert _weights(cycle.weeks[1].exercises[0]) == [140, 160, 180]
    assert _weights(cycle.weeks[2].exercises[0]) == [150, 170, 190]


def test_fsl_sets_follow_main_sets():
    cycle = build_cycle([PRESS_TM], "traditional", "leader", "FSL", input_kind="tm")
    week1 = cycle.weeks[0].exercises[0]
    assert len(week1.sets) == 8
    assert _weights(week1) == [130, 150, 170] + [130] * 5
    assert all(s.descriptor == StandardSet(reps=5, percentage=0.65) for s in week1.sets[3:])
    assert _weights(cycle.weeks[1].exercises[0])[3:] == [140] * 5
    assert _weights(cycle.weeks[2].exercises[0])[3:] == [150] * 5


def test_bbb_leader_adds_five_sets_of_ten():
    cycle = build_cycle([SQUAT_TM], "5s_pro", "leader", "BBB", input_kind="tm")
    for week in cycle.weeks:
        supplemental = week.exercises[0].sets[3:]
        assert [s.descriptor.reps for s in supplemental] == [10] * 5
        assert [s.weight for s in supplemental] == [100] * 5


def test_bbb_anchor_raises():
    with pytest.raises(TemplateConfigurationError):
        build_cycle([SQUAT_TM], "traditional", "anchor", "BBB", input_kind="tm")


def test_cycle_index_raises_training_max():
    cycle = build_cycle([PRESS_TM, SQUAT_TM], "traditional", "anchor", cycle_index=2, input_kind="tm")
    press, squat = cycle.weeks[0].exercises
    assert press.training_max == 210
    assert squat.training_max == 220
    assert _weights(press) == [135, 155, 175]
    assert all(e.training_max == press.training_max for w in cycle.weeks for e in w.exercises if e.name == "Press")


def test_351_week_progression_runs_triples_first():
    cycle = build_cycle([PRESS_TM], "traditional", "leader", week_progression="3/5/1", input_kind="tm")
    assert [s.descriptor.reps for s in cycle.weeks[0].exercises[0].sets] == [3, 3, 3]
    assert cycle.week_progression == "3/5/1"


def test_one_rep_max_input_records_both_maxes():
    bench = ExerciseConfig(name="Bench Press", input_value=225, training_max_percentage=0.85)
    cycle = build_cycle([bench], "traditional", "leader")
    ex = cycle.weeks[0].exercises[0]
    assert ex.one_rep_max == 225
    assert ex.training_max == pytest.approx(191.25)
    assert all(s.weight % 5 == 0 for s in ex.sets)
