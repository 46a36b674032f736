from __future__ import annotations

from datetime import date

import pandas as pd
import streamlit as st
from pydantic import ValidationError

from core.config import get_settings
from core.logging_config import get_logger, setup_logging
from core.models import (
    BBB,
    DELOAD,
    FIVES_PRO,
    FSL,
    INPUT_ONE_REP_MAX,
    INPUT_TRAINING_MAX,
    MAIN_LIFTS,
    PROGRESSION_TYPES,
    SEVENTH_WEEK_PROTOCOLS,
    SSL,
    TM_TEST,
    TRADITIONAL,
    WEEK_PROGRESSIONS,
    TrainingBlock,
)
from core.services.export import block_csv, training_maxes_from_rows
from core.services.formatting import PROTOCOL_LABELS, block_weeks, cycle_count_label, format_set, format_training_max, training_max_summary
from core.services.training_block import create_training_block
from core.validators import TrainingBlockConfigInput

settings = get_settings()
setup_logging(settings.log_level)
logger = get_logger(__name__)

st.set_page_config(page_title="5/3/1 Forever Planner", layout="wide")

DEFAULT_ONE_REP_MAXES = {"Squat": 315, "Bench Press": 225, "Deadlift": 405, "Press": 135}
NO_SUPPLEMENTAL = "None"
BLOCK_KEY = "training_block"
CARRIED_MAXES_KEY = "carried_training_maxes"


def extend_existing_plan_panel():
    st.sidebar.subheader("Extend existing plan")
    uploaded = st.sidebar.file_uploader("Previous plan (CSV export)", type=["csv"])
    if uploaded is None:
        return
    try:
        rows = pd.read_csv(uploaded, dtype=str).fillna("").values.tolist()
        st.session_state[CARRIED_MAXES_KEY] = training_maxes_from_rows(rows)
        st.sidebar.success("Training maxes loaded from the final week.")
    except ValueError as e:
        st.sidebar.error(str(e))


def config_form() -> TrainingBlockConfigInput | None:
    carried = st.session_state.get(CARRIED_MAXES_KEY) or {}
    with st.form("block_config"):
        c1, c2 = st.columns(2)
        name = c1.text_input("Block name", value=settings.default_block_name)
        start_date = c2.date_input("Start date", value=date.today())

        input_kind = INPUT_TRAINING_MAX if carried else INPUT_ONE_REP_MAX
        st.subheader("Training Maxes" if carried else "Main Lifts (1RM)")
        tm_pct = st.slider(
            "Training max %",
            min_value=0.70,
            max_value=1.00,
            value=settings.default_training_max_percentage,
            step=0.05,
            disabled=bool(carried),
        )
        lift_cols = st.columns(len(MAIN_LIFTS))
        values = {}
        for col, lift in zip(lift_cols, MAIN_LIFTS):
            values[lift] = col.number_input(lift, min_value=0.0, value=float(carried.get(lift, DEFAULT_ONE_REP_MAXES[lift])), step=5.0)

        st.subheader("Program Configuration")
        week_progression = st.selectbox("Week progression", list(WEEK_PROGRESSIONS))
        l1, l2, l3 = st.columns(3)
        leader_count = l1.selectbox("Leader cycles", [1, 2, 3], index=1)
        leader_progression = l2.selectbox("Leader progression", list(PROGRESSION_TYPES), index=PROGRESSION_TYPES.index(FIVES_PRO))
        leader_supplemental = l3.selectbox("Leader supplemental", [NO_SUPPLEMENTAL, FSL, SSL, BBB], index=2)
        a1, a2, a3 = st.columns(3)
        anchor_count = a1.selectbox("Anchor cycles", [1, 2])
        anchor_progression = a2.selectbox("Anchor progression", list(PROGRESSION_TYPES), index=PROGRESSION_TYPES.index(TRADITIONAL))
        anchor_supplemental = a3.selectbox("Anchor supplemental", [NO_SUPPLEMENTAL, FSL, SSL], index=1)
        s1, s2 = st.columns(2)
        after_leader = s1.selectbox(
            "After leader", list(SEVENTH_WEEK_PROTOCOLS), index=SEVENTH_WEEK_PROTOCOLS.index(DELOAD), format_func=PROTOCOL_LABELS.get
        )
        after_anchor = s2.selectbox(
            "After anchor", list(SEVENTH_WEEK_PROTOCOLS), index=SEVENTH_WEEK_PROTOCOLS.index(TM_TEST), format_func=PROTOCOL_LABELS.get
        )
        submitted = st.form_submit_button("Generate Training Block")

    if not submitted:
        return None
    try:
        return TrainingBlockConfigInput(
            name=name,
            start_date=start_date,
            input_kind=input_kind,
            exercises=[
                {"name": lift, "input_value": values[lift], "training_max_percentage": 1.0 if carried else tm_pct}
                for lift in MAIN_LIFTS
            ],
            week_progression=week_progression,
            leader_cycles={
                "count": leader_count,
                "progression_type": leader_progression,
                "supplemental_template": None if leader_supplemental == NO_SUPPLEMENTAL else leader_supplemental,
            },
            anchor_cycles={
                "count": anchor_count,
                "progression_type": anchor_progression,
                "supplemental_template": None if anchor_supplemental == NO_SUPPLEMENTAL else anchor_supplemental,
            },
            seventh_week_strategy={"after_leader": after_leader, "after_anchor": after_anchor},
        )
    except ValidationError as e:
        for err in e.errors():
            st.error(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}")
        return None


def render_block(block: TrainingBlock):
    st.header(block.name)
    st.caption(f"Starts {block.start_date.isoformat()} | {cycle_count_label(block)}")

    st.subheader("Training Max")
    summary = training_max_summary(block)
    st.dataframe(
        pd.DataFrame([{lift: format_training_max(tm, settings.unit_label) for lift, tm in summary.items()}], index=["Training Max"]),
        use_container_width=True,
    )

    st.subheader("Schedule")
    lifts = list(summary)
    rows = []
    for week in block_weeks(block):
        row = {"Week": week.label, "Date": week.start_date}
        by_name = {ex.name: ex for ex in week.exercises}
        for lift in lifts:
            ex = by_name.get(lift)
            row[lift] = "\n".join(format_set(s, unit=settings.unit_label) for s in ex.sets) if ex else ""
        rows.append(row)
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)

    st.download_button(
        "Download CSV",
        data=block_csv(block, unit=settings.unit_label),
        file_name=f"{block.name}.csv",
        mime="text/csv",
    )


def main():
    st.title("5/3/1 Forever Planner")
    extend_existing_plan_panel()
    payload = config_form()
    if payload is not None:
        try:
            st.session_state[BLOCK_KEY] = create_training_block(payload.to_config())
        except ValueError as e:
            logger.warning("training_block_rejected", extra={"ctx_reason": str(e)})
            st.error(str(e))
    block = st.session_state.get(BLOCK_KEY)
    if block is not None:
        render_block(block)


if __name__ == "__main__":
    main()
