from dataclasses import dataclass, field
from typing import Dict, List, Literal

FilingStatus = Literal["single", "married"]


@dataclass(frozen=True)
class FinancialProfile:
    annual_income: float
    state: str = "California"
    # Brackets are single-filer only; "married" is carried through but not modelled.
    filing_status: FilingStatus = "single"


@dataclass(frozen=True)
class StateTaxInfo:
    name: str
    abbreviation: str
    base_rate: float
    has_no_income_tax: bool = False


@dataclass(frozen=True)
class TaxBreakdown:
    federal: float
    state: float
    fica: float
    total: float


@dataclass
class BudgetBreakdown:
    net_monthly_income: float
    taxes: TaxBreakdown
    allocations: Dict[str, float]
    state: StateTaxInfo


@dataclass(frozen=True)
class GrowthPoint:
    year: int
    invest_balance: float
    bank_balance: float
    contributions: float
    difference: float


@dataclass(frozen=True)
class BalancePoint:
    year: int
    standard_balance: float
    accelerated_balance: float


@dataclass
class AmortizationResult:
    interest_saved: float
    time_saved_months: int
    standard_payoff_months: int
    accelerated_payoff_months: int
    standard_total_interest: float
    accelerated_total_interest: float
    balance_series: List[BalancePoint] = field(default_factory=list)

    @property
    def standard_payoff_years(self) -> float:
        return self.standard_payoff_months / 12.0

    @property
    def accelerated_payoff_years(self) -> float:
        return self.accelerated_payoff_months / 12.0

# Outputs are dataclasses; the API layer converts them with dataclasses.asdict.
