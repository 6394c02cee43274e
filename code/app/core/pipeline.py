import logging
from dataclasses import asdict
from typing import Any, Dict, Mapping, Optional

from finance.allocation import rebalance
from finance.budget import budget_to_dict, build_budget
from finance.growth import final_balances, simulate_growth
from finance.mortgage import simulate_amortization, standard_monthly_payment
from finance.schemas import FinancialProfile
from finance.whatif import run_extra_principal_scenarios

from .models import (
    AdviceResponse,
    Allocations,
    BudgetRequest,
    BudgetResponse,
    GrowthRequest,
    GrowthResponse,
    MortgageRequest,
    MortgageResponse,
    MortgageResult,
    RebalanceRequest,
)
from .prompts import build_advice_prompt, build_housing_prompt, build_plan_prompt
from .tools import clamp_llm_allocations, clamp_llm_income, clamp_llm_monthly, clean_llm_location
from app.ai.advisor_client import (
    ADVISOR_PLAN_MODEL,
    extract_citations,
    extract_text,
    has_api_key,
    query_advisor,
)

logger = logging.getLogger(__name__)

ADVICE_MISSING_KEY = "API Key is missing. Please check your environment configuration."
ADVICE_FAILED = "Sorry, I encountered an error while analyzing your budget."
ADVICE_EMPTY = "I couldn't generate advice at this moment."

HOUSING_MISSING_KEY = "API Key is missing."
HOUSING_FAILED = "Unable to search for housing at this time."
HOUSING_EMPTY = "No listings found."

PLAN_MISSING_KEY = "API Key missing."
PLAN_FAILED = "An error occurred while generating the deep dive plan. Please try again later."
PLAN_EMPTY = "Unable to generate plan."


def run_budget(payload: BudgetRequest) -> BudgetResponse:
    profile = FinancialProfile(
        annual_income=payload.income,
        state=payload.state,
        filing_status=payload.filing_status,
    )
    return BudgetResponse(**budget_to_dict(build_budget(profile), payload.income))


def run_rebalance(payload: RebalanceRequest) -> Allocations:
    updated = rebalance(
        payload.allocations.model_dump(),
        payload.category,
        payload.new_value,
        payload.total_budget,
    )
    return Allocations(**updated)


def run_growth(payload: GrowthRequest) -> GrowthResponse:
    series = simulate_growth(
        payload.monthly_contribution,
        payload.split_ratio,
        payload.invest_rate,
        payload.bank_rate,
        payload.years,
    )
    summary = final_balances(series)
    return GrowthResponse(
        series=[asdict(p) for p in series],
        final_invest=summary["invest"],
        final_bank=summary["bank"],
        final_total=summary["total"],
        total_contributions=summary["contributions"],
    )


def run_mortgage(payload: MortgageRequest) -> MortgageResponse:
    result = simulate_amortization(
        payload.loan_balance,
        payload.interest_rate_pct,
        payload.monthly_payment,
        payload.extra_principal,
        payload.max_months,
    )
    suggested = standard_monthly_payment(payload.loan_balance, payload.interest_rate_pct, 30)
    if result is None:
        return MortgageResponse(feasible=False, suggested_payment_30yr=suggested)
    return MortgageResponse(
        feasible=True,
        suggested_payment_30yr=suggested,
        result=MortgageResult(
            standard_payoff_years=result.standard_payoff_years,
            accelerated_payoff_years=result.accelerated_payoff_years,
            **asdict(result),
        ),
    )


def run_mortgage_scenarios(payload: MortgageRequest) -> Dict[str, Any]:
    custom = None
    if payload.extra_principal > 0:
        custom = [{"name": "requested", "extra_principal": payload.extra_principal}]
    return run_extra_principal_scenarios(
        payload.loan_balance,
        payload.interest_rate_pct,
        payload.monthly_payment,
        custom,
    )


def _ask(
    prompt: str,
    missing_key: str,
    failed: str,
    empty: str,
    model: Optional[str] = None,
    reasoning_effort: Optional[str] = None,
    search: bool = False,
) -> AdviceResponse:
    if not has_api_key():
        return AdviceResponse(markdown=missing_key)
    try:
        response = query_advisor(prompt, model=model, reasoning_effort=reasoning_effort, search=search)
    except Exception:
        logger.exception("Advisor request failed")
        return AdviceResponse(markdown=failed)
    text = extract_text(response)
    return AdviceResponse(markdown=text or empty, sources=extract_citations(response))


def get_financial_advice(income: float, state: str, allocations: Mapping[str, float]) -> AdviceResponse:
    prompt = build_advice_prompt(
        clamp_llm_income(income),
        clean_llm_location(state),
        clamp_llm_allocations(allocations),
    )
    return _ask(prompt, ADVICE_MISSING_KEY, ADVICE_FAILED, ADVICE_EMPTY, search=True)


def find_housing_options(location: str, dwelling_type: str, monthly_budget: float) -> AdviceResponse:
    prompt = build_housing_prompt(clean_llm_location(location), dwelling_type, clamp_llm_monthly(monthly_budget))
    return _ask(prompt, HOUSING_MISSING_KEY, HOUSING_FAILED, HOUSING_EMPTY, search=True)


def get_deep_dive_plan(income: float, state: str) -> AdviceResponse:
    prompt = build_plan_prompt(clamp_llm_income(income), clean_llm_location(state))
    response = _ask(
        prompt,
        PLAN_MISSING_KEY,
        PLAN_FAILED,
        PLAN_EMPTY,
        model=ADVISOR_PLAN_MODEL,
        reasoning_effort="high",
    )
    # The roadmap is plain narrative; citations are not surfaced for it.
    return AdviceResponse(markdown=response.markdown)
