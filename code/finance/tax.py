import logging
from typing import List, Optional, Sequence, Tuple

from .constants import FEDERAL_BRACKETS, FICA_RATE, STANDARD_DEDUCTION, US_STATES
from .schemas import StateTaxInfo, TaxBreakdown
from .utils import non_negative

logger = logging.getLogger(__name__)


def taxable_income(annual_income: float) -> float:
    return max(0.0, non_negative(annual_income) - STANDARD_DEDUCTION)


def federal_tax(taxable: float, brackets: Sequence[Tuple[float, float, float]] = FEDERAL_BRACKETS) -> float:
    """Progressive tax on already-deducted income.

    Picks the highest bracket whose floor is at or below ``taxable`` and adds
    the marginal slice to the cumulative tax owed at that floor.
    """
    taxable = non_negative(taxable)
    floor, rate, cumulative = brackets[0]
    for bracket in brackets:
        if bracket[0] <= taxable:
            floor, rate, cumulative = bracket
        else:
            break
    return cumulative + (taxable - floor) * rate


def estimate_tax(annual_income: float, state_base_rate: float) -> TaxBreakdown:
    income = non_negative(annual_income)
    rate = non_negative(state_base_rate)
    taxable = taxable_income(income)

    federal = federal_tax(taxable)
    fica = income * FICA_RATE
    state = max(0.0, taxable * rate)
    return TaxBreakdown(federal=federal, state=state, fica=fica, total=federal + state + fica)


def lookup_state(name: Optional[str], states: Optional[List[StateTaxInfo]] = None) -> StateTaxInfo:
    table = states if states is not None else US_STATES
    cleaned = (name or "").strip().lower()
    for info in table:
        if cleaned in (info.name.lower(), info.abbreviation.lower()):
            return info
    logger.warning("Unknown state %r, falling back to %s", name, table[0].name)
    return table[0]
