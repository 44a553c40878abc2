# app.py
import math

import streamlit as st
import plotly.graph_objects as go

from config import APP_NAME, BASE_CASE, DEFAULTS, INPUT_LIMITS
from ui import inject_css, header, helptext, kpi_card, trend_label
from simulation import SimulationInputs, check_inputs
from scenarios import build_scenarios
from comparison import compare, RISKS, STRATEGIES
from exporters import chart_frame, export_trajectories, export_summary, export_inputs
from formatting import format_currency, format_compact, format_years, format_pct_change
from log_setup import get_logger

logger = get_logger(__name__)

# ------------- Page setup -------------
st.set_page_config(page_title=APP_NAME, page_icon="🧮", layout="wide")
inject_css()
header(APP_NAME, "Analyze different retirement scenarios and see how various factors impact your financial future")


def _limits(field):
    lo, hi, step = INPUT_LIMITS[field]
    return dict(min_value=lo, max_value=hi, step=step)


# ------------- Sidebar (inputs) -------------
st.sidebar.header("Retirement parameters")
current_age = st.sidebar.number_input("Current age", value=DEFAULTS["current_age"], **_limits("current_age"))
retirement_age = st.sidebar.number_input("Retirement age", value=DEFAULTS["retirement_age"], **_limits("retirement_age"))

current_savings = st.sidebar.number_input(
    "Current savings", value=DEFAULTS["current_savings"], **_limits("current_savings"))
monthly_contribution = st.sidebar.number_input(
    "Monthly contribution", value=DEFAULTS["monthly_contribution"], **_limits("monthly_contribution"))
retirement_expenses = st.sidebar.number_input(
    "Monthly retirement expenses", value=DEFAULTS["retirement_expenses"], **_limits("retirement_expenses"),
    help="What you expect to spend each month once retired.")

lo, hi, step = INPUT_LIMITS["expected_return"]
expected_return = st.sidebar.slider("Expected annual return (%)", lo, hi, DEFAULTS["expected_return"], step)
lo, hi, step = INPUT_LIMITS["inflation_rate"]
inflation_rate = st.sidebar.slider("Expected inflation rate (%)", lo, hi, DEFAULTS["inflation_rate"], step)

inputs = SimulationInputs(
    current_age=int(current_age),
    retirement_age=int(retirement_age),
    current_savings=float(current_savings),
    monthly_contribution=float(monthly_contribution),
    expected_return=float(expected_return),
    inflation_rate=float(inflation_rate),
    retirement_expenses=float(retirement_expenses),
)

try:
    check_inputs(inputs)
except ValueError as exc:
    logger.warning("Rejected inputs: %s", exc)
    st.error(str(exc))
    st.stop()


@st.cache_data(show_spinner=False)
def run_cached(inputs_dict):
    return build_scenarios(SimulationInputs(**inputs_dict))


scenarios = run_cached(inputs.__dict__)
base = scenarios[0]

# ------------- Base case quick stats -------------
st.sidebar.markdown("#### Base Case results")
st.sidebar.write(f"Years to retirement: **{inputs.years_to_retirement}**")
st.sidebar.write(f"Total savings: **{format_currency(base.final_amount)}**")
st.sidebar.write(f"Monthly income: **{format_currency(base.monthly_income)}**")
if base.degenerate:
    st.sidebar.warning("Retirement age is not after current age: no growth is projected.")

# ------------- Chart -------------
st.markdown("### Savings growth projection")
wide = chart_frame(scenarios)
fig = go.Figure()
for s in scenarios:
    fig.add_trace(go.Scatter(
        x=wide["age"], y=wide[s.name], mode="lines", name=s.name,
        line=dict(color=s.color, width=3 if s.name == BASE_CASE else 2),
        customdata=[format_compact(v) for v in wide[s.name]],
        hovertemplate="%{customdata}",
    ))
fig.update_layout(
    xaxis_title="Age", yaxis_title="Balance (nominal)",
    hovermode="x unified", margin=dict(l=30, r=20, t=30, b=30), height=400,
)
st.plotly_chart(fig, use_container_width=True)
helptext("Lines show nominal balances. Real (today's money) values are in the trajectory export.")

# ------------- Comparison -------------
st.markdown("### What-if scenario analysis")
table = compare(scenarios)
for row in table.itertuples(index=False):
    st.markdown(
        f"<div class='card{' base' if row.is_base else ''}' style='border-left: 4px solid {row.color}'>"
        f"<b>{row.name}</b> {'<span class=badge>Current Plan</span>' if row.is_base else ''}"
        f"<div class='caption'>{row.insight}</div></div>",
        unsafe_allow_html=True,
    )
    c1, c2, c3 = st.columns(3)
    savings_sub = "" if row.is_base else trend_label(row.savings_trend, format_pct_change(row.savings_diff_pct))
    income_sub = "" if row.is_base else trend_label(row.income_trend, format_pct_change(row.income_diff_pct))
    c1.markdown(kpi_card("Total savings", format_currency(row.final_amount), savings_sub), unsafe_allow_html=True)
    share = row.savings_share_pct / 100 if math.isfinite(row.savings_share_pct) else 0.0
    c1.progress(min(1.0, max(0.0, share)))
    c2.markdown(kpi_card("Monthly income", format_currency(row.monthly_income), income_sub), unsafe_allow_html=True)
    c3.markdown(kpi_card("Income duration", format_years(row.years_of_income), "Based on expenses"),
                unsafe_allow_html=True)

st.markdown("#### Key insights")
left, right = st.columns(2)
left.markdown("**Risks to consider:**\n" + "\n".join(f"- {r}" for r in RISKS))
right.markdown("**Optimization strategies:**\n" + "\n".join(f"- {s}" for s in STRATEGIES))

# ------------- Export -------------
st.markdown("### Export")
e1, e2, e3 = st.columns(3)
name_traj, data_traj = export_trajectories(scenarios)
e1.download_button("⬇️ Trajectories (CSV)", data_traj, file_name=name_traj, mime="text/csv")
name_sum, data_sum = export_summary(scenarios)
e2.download_button("⬇️ Scenario summary (CSV)", data_sum, file_name=name_sum, mime="text/csv")
name_in, data_in = export_inputs(inputs)
e3.download_button("⬇️ Your inputs (JSON)", data_in, file_name=name_in, mime="application/json")
