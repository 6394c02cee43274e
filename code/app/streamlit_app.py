# streamlit_app.py
import logging
import os
import sys
from typing import Dict

import streamlit as st

# Ensure the code/ directory is on sys.path so `app` and `finance` import when Streamlit runs this file.
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from app.core.debounce import LatestResultSlot  # noqa: E402
from app.core.models import AdviceResponse  # noqa: E402
from app.core.pipeline import find_housing_options, get_deep_dive_plan, get_financial_advice  # noqa: E402
from finance.allocation import rebalance  # noqa: E402
from finance.budget import build_budget  # noqa: E402
from finance.constants import (  # noqa: E402
    BANK_RETURN_RATE,
    CATEGORIES,
    DEFAULT_INVEST_RATIO,
    INVESTMENT_RETURN_RATE,
    US_STATES,
)
from finance.growth import final_balances, simulate_growth  # noqa: E402
from finance.mortgage import simulate_amortization, standard_monthly_payment  # noqa: E402
from finance.schemas import FinancialProfile  # noqa: E402

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

TIERS = [30000, 40000, 50000, 60000, 70000, 80000, 90000, 100000, 120000, 150000, 200000]
STATE_NAMES = [s.name for s in US_STATES]
ADVICE_POLL_SECONDS = 1.0


def money(value: float) -> str:
    return f"${value:,.0f}"


def render_advice(result: AdviceResponse) -> None:
    st.markdown(result.markdown)
    if result.sources:
        st.caption("Sources")
        for source in result.sources:
            st.markdown(f"- [{source.title}]({source.url})")


# --- State ------------------------------------------------------------------
def reset_budget() -> None:
    profile = FinancialProfile(annual_income=st.session_state.income, state=st.session_state.state)
    budget = build_budget(profile)
    st.session_state.budget = budget
    st.session_state.allocations = dict(budget.allocations)
    for category in CATEGORIES:
        st.session_state[f"alloc_{category}"] = round(budget.allocations[category], 2)


def on_allocation_edit(category: str) -> None:
    budget = st.session_state.budget
    updated = rebalance(
        st.session_state.allocations,
        category,
        st.session_state[f"alloc_{category}"],
        budget.net_monthly_income,
    )
    st.session_state.allocations = updated
    for c in CATEGORIES:
        st.session_state[f"alloc_{c}"] = round(updated[c], 2)


def set_tier(tier: int) -> None:
    st.session_state.income = float(tier)
    reset_budget()


st.set_page_config(page_title="Your Rich Dad", layout="wide")
st.title("Your Rich Dad")
st.caption("Smart Budgeting & Wealth Projection")

if "income" not in st.session_state:
    st.session_state.income = 60000.0
    st.session_state.state = "California"
    reset_budget()
if "advice_slot" not in st.session_state:
    st.session_state.advice_slot = LatestResultSlot()
    st.session_state.advice_key = None

# --- Sidebar: details --------------------------------------------------------
with st.sidebar:
    st.header("Your Details")
    st.selectbox("State", STATE_NAMES, key="state", on_change=reset_budget)
    st.caption("*Determines your estimated state tax burden.")
    st.number_input("Annual income", min_value=0.0, step=5000.0, key="income", on_change=reset_budget)
    cols = st.columns(3)
    for i, tier in enumerate(TIERS):
        cols[i % 3].button(f"${tier // 1000}k", key=f"tier_{tier}", on_click=set_tier, args=(tier,))

budget = st.session_state.budget
allocations: Dict[str, float] = st.session_state.allocations

main_col, advisor_col = st.columns([2, 1])

with main_col:
    # --- Monthly plan ---------------------------------------------------------
    st.subheader("Your Monthly Plan")
    taxes = budget.taxes
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Net monthly", money(budget.net_monthly_income))
    m2.metric("Federal", money(taxes.federal))
    m3.metric("State", money(taxes.state))
    m4.metric("FICA", money(taxes.fica))

    for category in CATEGORIES:
        st.number_input(
            category.capitalize(),
            min_value=0.0,
            step=10.0,
            key=f"alloc_{category}",
            on_change=on_allocation_edit,
            args=(category,),
        )
    st.button("Reset to recommended allocations", on_click=reset_budget)

    # --- Wealth projection ----------------------------------------------------
    st.subheader("Wealth Projection")
    g1, g2, g3 = st.columns(3)
    bank_pct = g1.number_input("Bank savings rate (%)", min_value=0.0, value=BANK_RETURN_RATE * 100, step=0.01)
    invest_pct = g2.number_input("Investing rate (%)", min_value=0.0, value=INVESTMENT_RETURN_RATE * 100, step=0.1)
    split = g3.slider("Share invested", min_value=0.0, max_value=1.0, value=DEFAULT_INVEST_RATIO, step=0.05)
    series = simulate_growth(allocations["savings"], split, invest_pct / 100, bank_pct / 100, 30)
    st.line_chart({
        "Investing": [round(p.invest_balance) for p in series],
        "Bank Savings": [round(p.bank_balance) for p in series],
    })
    summary = final_balances(series)
    st.write(
        f"After 30 years: {money(summary['invest'])} invested, {money(summary['bank'])} in the bank "
        f"(gap {money(series[-1].difference)})."
    )

    # --- Housing -------------------------------------------------------------
    st.subheader("Housing")
    find_tab, optimize_tab = st.tabs(["Find Housing", "Optimize Mortgage"])
    with find_tab:
        location = st.text_input("City, State or Zip", value=st.session_state.state)
        dwelling_type = st.radio("Type", ["rent", "buy"], horizontal=True)
        if st.button("Search") and location.strip():
            with st.spinner("Searching listings..."):
                st.session_state.housing_results = find_housing_options(location, dwelling_type, allocations["housing"])
        if st.session_state.get("housing_results"):
            render_advice(st.session_state.housing_results)

    with optimize_tab:
        o1, o2 = st.columns(2)
        loan_balance = o1.number_input("Loan balance", min_value=0.0, value=300000.0, step=5000.0)
        rate_pct = o2.number_input("Interest rate (%)", min_value=0.0, value=6.5, step=0.125)
        payment = o1.number_input("Monthly payment (P&I)", min_value=0.0, value=2500.0, step=50.0)
        extra = o2.slider("Extra principal / month", min_value=0.0, max_value=max(payment, 1.0), value=0.0, step=25.0)
        st.caption(f"A 30-year loan at this rate needs about {money(standard_monthly_payment(loan_balance, rate_pct, 30))}/month.")
        result = simulate_amortization(loan_balance, rate_pct, payment, extra)
        if result is None:
            st.warning("Payment does not cover the monthly interest, so the loan never pays off.")
        else:
            r1, r2, r3 = st.columns(3)
            r1.metric("Interest saved", money(result.interest_saved))
            r2.metric("Time saved", f"{result.time_saved_months} months")
            r3.metric(
                "Payoff",
                f"{result.accelerated_payoff_years:.1f} yrs",
                delta=f"{result.standard_payoff_years:.1f} yrs standard",
                delta_color="off",
            )
            st.line_chart({
                "Standard": [round(p.standard_balance) for p in result.balance_series],
                "Accelerated": [round(p.accelerated_balance) for p in result.balance_series],
            })

with advisor_col:
    # --- AI advisor -----------------------------------------------------------
    st.subheader("AI Advisor")
    slot: LatestResultSlot = st.session_state.advice_slot
    advice_key = (st.session_state.income, st.session_state.state, tuple(round(allocations[c]) for c in CATEGORIES))
    if advice_key != st.session_state.advice_key:
        st.session_state.advice_key = advice_key
        slot.submit(get_financial_advice, st.session_state.income, st.session_state.state, dict(allocations))

    # Polls the slot on its own while a debounced call is outstanding.
    @st.fragment(run_every=ADVICE_POLL_SECONDS if slot.pending else None)
    def advice_panel() -> None:
        if slot.pending:
            st.caption("Analyzing your budget...")
        latest = slot.latest()
        if latest is not None:
            render_advice(latest)

    advice_panel()

    st.markdown("---")
    if st.button("Generate 20-year deep dive"):
        with st.spinner("Building your roadmap..."):
            st.session_state.deep_dive = get_deep_dive_plan(st.session_state.income, st.session_state.state)
    if st.session_state.get("deep_dive"):
        with st.expander("Deep dive plan", expanded=True):
            st.markdown(st.session_state.deep_dive.markdown)
