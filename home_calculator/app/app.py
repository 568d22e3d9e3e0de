from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))


import streamlit as st

from home_calculator.app.fields import (
    FINANCE_INPUTS,
    PROPERTY_INPUTS,
    InputConfig,
    format_currency_input,
    strip_to_numeric,
)
from home_calculator.core.calculator import CalculationResult, calculate
from home_calculator.core.formatting import format_currency
from home_calculator.core.inputs import CalculatorInputs
from home_calculator.core.report import (
    checklist_table,
    for_display,
    lifetime_breakdown_table,
    monthly_breakdown_table,
)
from home_calculator.core.scenarios import default_inputs

logger = logging.getLogger(__name__)

st.set_page_config(page_title="Home Buying Calculator", layout="wide")

STATUS_COLORS = {"good": "#dcfce7", "warning": "#fef9c3", "bad": "#fee2e2"}


def _widget_key(config: InputConfig) -> str:
    return f"field_{config.name}"


def _init_state() -> None:
    if "inputs" not in st.session_state:
        st.session_state["inputs"] = default_inputs().to_dict()
    for config in PROPERTY_INPUTS + FINANCE_INPUTS:
        key = _widget_key(config)
        if key not in st.session_state:
            raw = st.session_state["inputs"][config.name]
            st.session_state[key] = format_currency_input(raw) if config.is_currency else raw


def _on_change(config: InputConfig) -> None:
    key = _widget_key(config)
    raw = strip_to_numeric(st.session_state[key])
    st.session_state["inputs"][config.name] = raw
    st.session_state[key] = format_currency_input(raw) if config.is_currency else raw


def render_field(config: InputConfig) -> None:
    st.text_input(
        config.label,
        key=_widget_key(config),
        placeholder=config.placeholder,
        on_change=_on_change,
        args=(config,),
    )
    if config.sublabel:
        st.caption(config.sublabel)


def render_form() -> CalculatorInputs:
    st.subheader("Property Details")
    for config in PROPERTY_INPUTS:
        render_field(config)
    st.subheader("Your Finances")
    for config in FINANCE_INPUTS:
        render_field(config)
    return CalculatorInputs.from_mapping(st.session_state["inputs"])


def render_summary(result: CalculationResult) -> None:
    summary = result.summary
    st.subheader("Financial Summary")
    cols = st.columns(2)
    cols[0].metric("Total Monthly Cost", format_currency(summary.total_monthly_cost))
    cols[0].table(for_display(monthly_breakdown_table(summary)))
    cols[1].metric("Total Lifetime Cost", format_currency(summary.total_lifetime_cost))
    cols[1].caption(f"Estimated total spent over {summary.loan_term:g} years")
    cols[1].table(for_display(lifetime_breakdown_table(summary)))


def render_checklist(result: CalculationResult) -> None:
    st.subheader("Affordability Checklist")
    df = checklist_table(result)
    styled = df.style.apply(
        lambda row: [f"background-color: {STATUS_COLORS[row['Status']]}"] * len(row), axis=1
    )
    st.table(styled)


def main():
    logging.basicConfig(level=logging.INFO)
    st.title("Home Buying Calculator")
    _init_state()

    form_col, results_col = st.columns(2)
    with form_col:
        inputs = render_form()

    result = calculate(inputs)
    with results_col:
        if result is None:
            logger.info("Required fields missing; showing prompt.")
            st.info("Enter required fields to see your affordability assessment")
        else:
            render_summary(result)
            render_checklist(result)


if __name__ == "__main__":
    main()
