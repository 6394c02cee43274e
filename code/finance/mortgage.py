from typing import List, Optional

from .constants import HOME_PRICE_TO_MONTHLY_PAYMENT, MAX_AMORTIZATION_MONTHS
from .schemas import AmortizationResult, BalancePoint
from .utils import non_negative


def standard_monthly_payment(principal: float, annual_rate_percent: float, term_years: int) -> float:
    term_months = int(term_years) * 12
    principal = non_negative(principal)
    if term_months <= 0 or principal <= 0:
        return 0.0
    r = non_negative(annual_rate_percent) / 100.0 / 12.0
    if r == 0:
        return round(principal / term_months, 2)
    payment = principal * (r * (1 + r) ** term_months) / ((1 + r) ** term_months - 1)
    return round(payment, 2)


def estimate_home_price(monthly_budget: float) -> float:
    return non_negative(monthly_budget) * HOME_PRICE_TO_MONTHLY_PAYMENT


def simulate_amortization(
    principal: float,
    annual_rate_percent: float,
    monthly_payment: float,
    extra_principal: float = 0.0,
    max_months: int = MAX_AMORTIZATION_MONTHS,
) -> Optional[AmortizationResult]:
    """Pay the loan down month by month with and without extra principal.

    Returns None when the rate is not positive or the payment does not cover
    the first month's interest, since the balance would never reach zero.
    """
    balance = non_negative(principal)
    payment = non_negative(monthly_payment)
    extra = non_negative(extra_principal)
    r = float(annual_rate_percent) / 100.0 / 12.0
    # `not r > 0` also rejects NaN.
    if not r > 0 or not payment > balance * r:
        return None

    standard = balance
    accelerated = balance
    standard_interest = 0.0
    accelerated_interest = 0.0
    standard_months = 0
    accelerated_months = 0
    series: List[BalancePoint] = []

    month = 0
    limit = max(0, int(max_months))
    while True:
        if month % 12 == 0 and (standard > 0 or accelerated > 0):
            series.append(
                BalancePoint(
                    year=month // 12,
                    standard_balance=max(0.0, standard),
                    accelerated_balance=max(0.0, accelerated),
                )
            )
        if month >= limit or (standard <= 0 and accelerated <= 0):
            break

        if standard > 0:
            interest = standard * r
            standard_interest += interest
            standard -= min(standard, payment - interest)
            standard_months += 1

        if accelerated > 0:
            interest = accelerated * r
            accelerated_interest += interest
            accelerated -= min(accelerated, payment + extra - interest)
            accelerated_months += 1

        month += 1

    return AmortizationResult(
        interest_saved=standard_interest - accelerated_interest,
        time_saved_months=max(0, standard_months - accelerated_months),
        standard_payoff_months=standard_months,
        accelerated_payoff_months=accelerated_months,
        standard_total_interest=standard_interest,
        accelerated_total_interest=accelerated_interest,
        balance_series=series,
    )
