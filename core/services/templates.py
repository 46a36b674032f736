"""Percentage/rep tables for 5/3/1 Forever main work, supplemental work and
seventh-week protocols.

Every lookup returns set descriptors only. Weights are computed by the caller
against whichever training max is in force (see ``materialize``).

Reference: Wendler, 5/3/1 Forever (2017).
"""

from __future__ import annotations

from core.models import (
    ANCHOR,
    BBB,
    DELOAD,
    FIVES_PRO,
    FSL,
    LEADER,
    PR_TEST,
    PROGRESSION_TYPES,
    SEVENTH_WEEK_PROTOCOLS,
    SSL,
    SUPPLEMENTAL_TEMPLATES,
    TEMPLATE_TYPES,
    TM_TEST,
    TRADITIONAL,
    WEEK_PROGRESSION_351,
    WEEK_PROGRESSION_531,
    WEEK_PROGRESSIONS,
    AmrapSet,
    RepRangeSet,
    SetDescriptor,
    StandardSet,
    WorkSet,
)

SUPPLEMENTAL_SET_COUNT = 5

WeekTemplate = tuple[SetDescriptor, ...]


class TemplateConfigurationError(ValueError):
    """Raised for template combinations 5/3/1 Forever does not allow."""


def _ladder(*pairs: tuple[int, float]) -> WeekTemplate:
    return tuple(StandardSet(reps=reps, percentage=pct) for reps, pct in pairs)


# Main work: (week1, week2, week3) as (reps, percentage) ladders.
_FIVES_WEEK = _ladder((5, 0.65), (5, 0.75), (5, 0.85))
_THREES_WEEK = _ladder((3, 0.70), (3, 0.80), (3, 0.90))
_ONES_WEEK = _ladder((5, 0.75), (3, 0.85), (1, 0.95))

_MAIN_WORK: dict[tuple[str, str], tuple[WeekTemplate, WeekTemplate, WeekTemplate]] = {
    (TRADITIONAL, WEEK_PROGRESSION_531): (_FIVES_WEEK, _THREES_WEEK, _ONES_WEEK),
    (TRADITIONAL, WEEK_PROGRESSION_351): (_THREES_WEEK, _FIVES_WEEK, _ONES_WEEK),
}
# 5s PRO keeps the percentage ladder and replaces every rep count with 5.
_MAIN_WORK.update(
    {
        (FIVES_PRO, variant): tuple(tuple(StandardSet(reps=5, percentage=s.percentage) for s in week) for week in weeks)
        for (_, variant), weeks in list(_MAIN_WORK.items())
    }
)

# Supplemental: (reps, percentage per week). FSL follows the first main set
# of the standard 5/3/1 ladder, SSL the second.
_SUPPLEMENTAL: dict[str, tuple[int, tuple[float, float, float]]] = {
    FSL: (5, (0.65, 0.70, 0.75)),
    SSL: (5, (0.75, 0.80, 0.85)),
    BBB: (10, (0.50, 0.50, 0.50)),
}

_SEVENTH_WEEK: dict[str, WeekTemplate] = {
    DELOAD: _ladder((5, 0.40), (5, 0.50), (5, 0.60)),
    TM_TEST: _ladder((5, 0.70), (5, 0.80), (5, 0.90)) + (RepRangeSet(min_reps=3, max_reps=5, percentage=1.00),),
    PR_TEST: _ladder((5, 0.70), (5, 0.80), (5, 0.90)) + (AmrapSet(percentage=1.00),),
}


def _require(value: str, allowed: tuple[str, ...], field: str) -> None:
    if value not in allowed:
        raise ValueError(f"{field} must be one of {list(allowed)}, got {value!r}")


def main_work_template(progression_type: str, week_progression: str = WEEK_PROGRESSION_531) -> tuple[WeekTemplate, WeekTemplate, WeekTemplate]:
    """Return the three weekly main-work ladders for a progression type.

    ``3/5/1`` swaps the first two weeks so the triples week runs first.
    """
    _require(progression_type, PROGRESSION_TYPES, "progression_type")
    _require(week_progression, WEEK_PROGRESSIONS, "week_progression")
    return _MAIN_WORK[(progression_type, week_progression)]


def supplemental_template(kind: str, progression_type: str = TRADITIONAL, template_type: str = LEADER) -> tuple[WeekTemplate, WeekTemplate, WeekTemplate]:
    """Return three weeks of five identical supplemental sets.

    BBB is a leader-only template; asking for it on an anchor cycle raises
    ``TemplateConfigurationError``.
    """
    _require(kind, SUPPLEMENTAL_TEMPLATES, "supplemental_template")
    _require(progression_type, PROGRESSION_TYPES, "progression_type")
    _require(template_type, TEMPLATE_TYPES, "template_type")
    if kind == BBB and template_type == ANCHOR:
        raise TemplateConfigurationError(
            "BBB (Boring But Big) can only be used as a leader template, not as an anchor."
        )
    reps, percentages = _SUPPLEMENTAL[kind]
    return tuple(
        tuple(StandardSet(reps=reps, percentage=pct) for _ in range(SUPPLEMENTAL_SET_COUNT))
        for pct in percentages
    )


def seventh_week_template(protocol: str) -> WeekTemplate:
    """Fixed set list for a seventh-week protocol. No supplemental work."""
    _require(protocol, SEVENTH_WEEK_PROTOCOLS, "protocol")
    return _SEVENTH_WEEK[protocol]


def materialize(descriptors: WeekTemplate, training_max: float) -> tuple[WorkSet, ...]:
    return tuple(WorkSet.at(d, training_max) for d in descriptors)


def template_catalog() -> dict:
    """All tables in a JSON-friendly shape, keyed the way the API exposes them."""

    def _describe(week: WeekTemplate) -> list[dict]:
        rows = []
        for s in week:
            row = {"type": s.kind, "percentage": s.percentage}
            if isinstance(s, StandardSet):
                row["reps"] = s.reps
            elif isinstance(s, RepRangeSet):
                row["min_reps"] = s.min_reps
                row["max_reps"] = s.max_reps
            rows.append(row)
        return rows

    return {
        "main_work": {
            f"{progression}:{variant}": [_describe(w) for w in weeks]
            for (progression, variant), weeks in _MAIN_WORK.items()
        },
        "supplemental": {
            kind: [_describe(w) for w in supplemental_template(kind)] for kind in SUPPLEMENTAL_TEMPLATES
        },
        "seventh_week": {protocol: _describe(_SEVENTH_WEEK[protocol]) for protocol in SEVENTH_WEEK_PROTOCOLS},
    }
