import logging
import os
from dataclasses import asdict
from typing import Any, Dict, List

from fastapi import FastAPI

from app.ai.advisor_client import check_advisor_online
from app.core.models import (
    AdviceRequest,
    AdviceResponse,
    Allocations,
    BudgetRequest,
    BudgetResponse,
    GrowthRequest,
    GrowthResponse,
    HousingRequest,
    MortgageRequest,
    MortgageResponse,
    PlanRequest,
    RebalanceRequest,
    StateInfo,
)
from app.core.pipeline import (
    find_housing_options,
    get_deep_dive_plan,
    get_financial_advice,
    run_budget,
    run_growth,
    run_mortgage,
    run_mortgage_scenarios,
    run_rebalance,
)
from finance.constants import US_STATES

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Rich Dad Budget API")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/health/advisor")
def advisor_health():
    return {"online": check_advisor_online()}


@app.get("/states", response_model=List[StateInfo])
def states():
    return [asdict(s) for s in US_STATES]


@app.post("/budget", response_model=BudgetResponse)
def budget(payload: BudgetRequest):
    return run_budget(payload)


@app.post("/budget/rebalance", response_model=Allocations)
def budget_rebalance(payload: RebalanceRequest):
    return run_rebalance(payload)


@app.post("/growth", response_model=GrowthResponse)
def growth(payload: GrowthRequest):
    return run_growth(payload)


@app.post("/mortgage", response_model=MortgageResponse)
def mortgage(payload: MortgageRequest):
    return run_mortgage(payload)


@app.post("/mortgage/scenarios")
def mortgage_scenarios(payload: MortgageRequest) -> Dict[str, Any]:
    return run_mortgage_scenarios(payload)


@app.post("/advice", response_model=AdviceResponse)
def advice(payload: AdviceRequest):
    return get_financial_advice(payload.income, payload.state, payload.allocations.model_dump())


@app.post("/housing", response_model=AdviceResponse)
def housing(payload: HousingRequest):
    return find_housing_options(payload.location, payload.dwelling_type, payload.monthly_budget)


@app.post("/plan", response_model=AdviceResponse)
def plan(payload: PlanRequest):
    return get_deep_dive_plan(payload.income, payload.state)
