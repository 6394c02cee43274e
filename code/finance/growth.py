from typing import Dict, List

from .constants import (
    BANK_RETURN_RATE,
    DEFAULT_HORIZON_YEARS,
    DEFAULT_INVEST_RATIO,
    INVESTMENT_RETURN_RATE,
)
from .schemas import GrowthPoint
from .utils import clamp, non_negative


def simulate_growth(
    monthly_contribution: float,
    split_ratio: float = DEFAULT_INVEST_RATIO,
    invest_rate: float = INVESTMENT_RETURN_RATE,
    bank_rate: float = BANK_RETURN_RATE,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> List[GrowthPoint]:
    """Year-by-year balances for the investing and bank tracks.

    Each point holds the balance at the start of that year. A year's twelve
    contributions are added before that year's growth is applied.
    """
    monthly = non_negative(monthly_contribution)
    split = clamp(non_negative(split_ratio), 0.0, 1.0)
    invest_rate = non_negative(invest_rate)
    bank_rate = non_negative(bank_rate)
    years = max(1, int(horizon_years))

    monthly_invest = monthly * split
    monthly_bank = monthly * (1 - split)

    invest = 0.0
    bank = 0.0
    series: List[GrowthPoint] = []
    for year in range(years + 1):
        series.append(
            GrowthPoint(
                year=year,
                invest_balance=invest,
                bank_balance=bank,
                contributions=monthly * 12 * year,
                difference=invest - bank,
            )
        )
        invest = (invest + monthly_invest * 12) * (1 + invest_rate)
        bank = (bank + monthly_bank * 12) * (1 + bank_rate)
    return series


def final_balances(series: List[GrowthPoint]) -> Dict[str, float]:
    if not series:
        return {"invest": 0.0, "bank": 0.0, "total": 0.0, "contributions": 0.0, "growth": 0.0}
    last = series[-1]
    total = last.invest_balance + last.bank_balance
    return {
        "invest": last.invest_balance,
        "bank": last.bank_balance,
        "total": total,
        "contributions": last.contributions,
        "growth": total - last.contributions,
    }
