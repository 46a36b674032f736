"""Training block assembly: leader cycles, a seventh week, anchor cycles and a
final seventh week.

Assembly runs as a fixed sequence of phases::

    leader -> seventh_week -> anchor -> final_seventh_week -> done

A single cycle counter is threaded through every phase, so training maxes
keep growing across the leader/anchor boundary. The seventh weeks evaluate
the training max of the last completed cycle; only a final TM test looks one
increment ahead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from core.logging_config import get_logger
from core.models import (
    ANCHOR,
    LEADER,
    TM_TEST,
    Cycle,
    SeventhWeek,
    TrainingBlock,
    TrainingBlockConfig,
)
from core.services.cycle_builder import build_cycle
from core.services.seventh_week import build_seventh_week

logger = get_logger(__name__)

PHASE_LEADER = "leader"
PHASE_SEVENTH_WEEK = "seventh_week"
PHASE_ANCHOR = "anchor"
PHASE_FINAL_SEVENTH_WEEK = "final_seventh_week"
PHASE_DONE = "done"


@dataclass
class AssemblyState:
    config: TrainingBlockConfig
    cycles_completed: int = 0
    leader_cycles: list[Cycle] = field(default_factory=list)
    seventh_week: Optional[SeventhWeek] = None
    anchor_cycles: list[Cycle] = field(default_factory=list)
    final_seventh_week: Optional[SeventhWeek] = None

    @property
    def last_cycle_index(self) -> int:
        return max(0, self.cycles_completed - 1)


def _build_cycle_group(state: AssemblyState, template_type: str) -> list[Cycle]:
    cfg = state.config
    group = cfg.leader_cycles if template_type == LEADER else cfg.anchor_cycles
    cycles = []
    for _ in range(group.count):
        cycles.append(
            build_cycle(
                cfg.exercises,
                group.progression_type,
                template_type,
                group.supplemental_template,
                cycle_index=state.cycles_completed,
                week_progression=cfg.week_progression,
                input_kind=cfg.input_kind,
            )
        )
        state.cycles_completed += 1
    return cycles


def _leader_phase(state: AssemblyState) -> str:
    state.leader_cycles = _build_cycle_group(state, LEADER)
    return PHASE_SEVENTH_WEEK


def _seventh_week_phase(state: AssemblyState) -> str:
    cfg = state.config
    state.seventh_week = build_seventh_week(
        cfg.exercises,
        cfg.seventh_week_strategy.after_leader,
        cycle_index=state.last_cycle_index,
        tests_next_cycle=False,
        input_kind=cfg.input_kind,
    )
    return PHASE_ANCHOR


def _anchor_phase(state: AssemblyState) -> str:
    state.anchor_cycles = _build_cycle_group(state, ANCHOR)
    return PHASE_FINAL_SEVENTH_WEEK


def _final_seventh_week_phase(state: AssemblyState) -> str:
    cfg = state.config
    protocol = cfg.seventh_week_strategy.after_anchor
    state.final_seventh_week = build_seventh_week(
        cfg.exercises,
        protocol,
        cycle_index=state.last_cycle_index,
        tests_next_cycle=protocol == TM_TEST,
        input_kind=cfg.input_kind,
    )
    return PHASE_DONE


PHASE_STEPS: dict[str, Callable[[AssemblyState], str]] = {
    PHASE_LEADER: _leader_phase,
    PHASE_SEVENTH_WEEK: _seventh_week_phase,
    PHASE_ANCHOR: _anchor_phase,
    PHASE_FINAL_SEVENTH_WEEK: _final_seventh_week_phase,
}


def run_phases(config: TrainingBlockConfig) -> AssemblyState:
    state = AssemblyState(config=config)
    phase = PHASE_LEADER
    while phase != PHASE_DONE:
        next_phase = PHASE_STEPS[phase](state)
        logger.debug("training_block_phase", extra={"ctx_phase": phase, "ctx_cycles_completed": state.cycles_completed})
        phase = next_phase
    return state


def create_training_block(config: TrainingBlockConfig) -> TrainingBlock:
    """Generate a complete training block from its configuration.

    Raises ``TemplateConfigurationError`` (BBB on an anchor cycle) or
    ``ValueError`` (unknown template vocabulary) before anything is returned.
    """
    state = run_phases(config)
    block = TrainingBlock(
        name=config.name,
        start_date=config.start_date,
        leader_cycles=tuple(state.leader_cycles),
        seventh_week=state.seventh_week,
        anchor_cycles=tuple(state.anchor_cycles),
        final_seventh_week=state.final_seventh_week,
    )
    logger.info(
        "training_block_created",
        extra={
            "ctx_name": config.name,
            "ctx_leader_cycles": len(block.leader_cycles),
            "ctx_anchor_cycles": len(block.anchor_cycles),
            "ctx_after_leader": block.seventh_week.protocol,
            "ctx_after_anchor": block.final_seventh_week.protocol,
            "ctx_exercises": len(config.exercises),
        },
    )
    return block
