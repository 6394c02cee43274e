# code/finance/budget.py
import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from .allocation import initial_allocations
from .constants import ALLOCATION_TEMPLATE
from .schemas import BudgetBreakdown, FinancialProfile, StateTaxInfo
from .tax import estimate_tax, lookup_state
from .utils import non_negative

logger = logging.getLogger(__name__)


def net_monthly_income(annual_income: float, total_tax: float) -> float:
    return max(0.0, non_negative(annual_income) - total_tax) / 12.0


def build_budget(profile: FinancialProfile, states: Optional[List[StateTaxInfo]] = None) -> BudgetBreakdown:
    """
    Derive taxes and the recommended monthly plan from a profile.

    Called again from scratch whenever income or state changes, which is also
    how user edits to the allocations get reset.
    """
    state = lookup_state(profile.state, states)
    if profile.filing_status != "single":
        logger.debug("Filing status %s estimated with single-filer brackets", profile.filing_status)

    taxes = estimate_tax(profile.annual_income, state.base_rate)
    net_monthly = net_monthly_income(profile.annual_income, taxes.total)
    return BudgetBreakdown(
        net_monthly_income=net_monthly,
        taxes=taxes,
        allocations=initial_allocations(net_monthly, ALLOCATION_TEMPLATE),
        state=state,
    )


def effective_tax_rate(budget: BudgetBreakdown, annual_income: float) -> Optional[float]:
    income = non_negative(annual_income)
    if income == 0:
        return None
    return budget.taxes.total / income


def budget_to_dict(budget: BudgetBreakdown, annual_income: float) -> Dict[str, Any]:
    rate = effective_tax_rate(budget, annual_income)
    return {
        # Allocations stay unrounded so they keep summing to the net income.
        "net_monthly_income": budget.net_monthly_income,
        "taxes": {k: round(v, 2) for k, v in asdict(budget.taxes).items()},
        "allocations": dict(budget.allocations),
        "state": asdict(budget.state),
        "effective_tax_rate": None if rate is None else round(rate, 4),
    }
