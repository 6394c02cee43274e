from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from finance.constants import (
    BANK_RETURN_RATE,
    DEFAULT_HORIZON_YEARS,
    DEFAULT_INVEST_RATIO,
    INVESTMENT_RETURN_RATE,
    MAX_AMORTIZATION_MONTHS,
)

Category = Literal["housing", "food", "general", "savings"]


class Allocations(BaseModel):
    housing: float = Field(ge=0)
    food: float = Field(ge=0)
    general: float = Field(ge=0)
    savings: float = Field(ge=0)


class StateInfo(BaseModel):
    name: str
    abbreviation: str
    base_rate: float
    has_no_income_tax: bool


class Taxes(BaseModel):
    federal: float
    state: float
    fica: float
    total: float


class BudgetRequest(BaseModel):
    income: float = Field(ge=0)
    state: str = "California"
    filing_status: Literal["single", "married"] = "single"


class BudgetResponse(BaseModel):
    net_monthly_income: float
    taxes: Taxes
    allocations: Allocations
    state: StateInfo
    effective_tax_rate: Optional[float] = None


class RebalanceRequest(BaseModel):
    allocations: Allocations
    category: Category
    new_value: float
    total_budget: float = Field(ge=0)


class GrowthRequest(BaseModel):
    monthly_contribution: float = Field(ge=0)
    split_ratio: float = Field(ge=0, le=1, default=DEFAULT_INVEST_RATIO)
    invest_rate: float = Field(ge=0, le=1, default=INVESTMENT_RETURN_RATE)
    bank_rate: float = Field(ge=0, le=1, default=BANK_RETURN_RATE)
    years: int = Field(ge=1, le=100, default=DEFAULT_HORIZON_YEARS)


class GrowthPointModel(BaseModel):
    year: int
    invest_balance: float
    bank_balance: float
    contributions: float
    difference: float


class GrowthResponse(BaseModel):
    series: List[GrowthPointModel]
    final_invest: float
    final_bank: float
    final_total: float
    total_contributions: float


class MortgageRequest(BaseModel):
    loan_balance: float = Field(ge=0, default=300000.0)
    interest_rate_pct: float = Field(ge=0, le=50, default=6.5)
    monthly_payment: float = Field(ge=0, default=2500.0)
    extra_principal: float = Field(ge=0, default=0.0)
    max_months: int = Field(ge=1, le=1200, default=MAX_AMORTIZATION_MONTHS)


class BalancePointModel(BaseModel):
    year: int
    standard_balance: float
    accelerated_balance: float


class MortgageResult(BaseModel):
    interest_saved: float
    time_saved_months: int
    standard_payoff_months: int
    accelerated_payoff_months: int
    standard_payoff_years: float
    accelerated_payoff_years: float
    standard_total_interest: float
    accelerated_total_interest: float
    balance_series: List[BalancePointModel]


class MortgageResponse(BaseModel):
    feasible: bool
    result: Optional[MortgageResult] = None
    suggested_payment_30yr: float = 0.0


class Source(BaseModel):
    url: str
    title: str


class AdviceRequest(BaseModel):
    income: float = Field(ge=0)
    state: str
    allocations: Allocations


class HousingRequest(BaseModel):
    location: str = Field(min_length=1)
    dwelling_type: Literal["rent", "buy"] = "rent"
    monthly_budget: float = Field(ge=0)


class PlanRequest(BaseModel):
    income: float = Field(ge=0)
    state: str


class AdviceResponse(BaseModel):
    markdown: str
    sources: List[Source] = []
