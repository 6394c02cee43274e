from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .mortgage import simulate_amortization
from .schemas import AmortizationResult
from .utils import non_negative, round_or_none


def generate_default_extras() -> List[Dict[str, Any]]:
    return [
        {"name": "extra_100", "extra_principal": 100.0},
        {"name": "extra_250", "extra_principal": 250.0},
        {"name": "extra_500", "extra_principal": 500.0},
        {"name": "extra_1000", "extra_principal": 1000.0},
    ]


def _summary(result: AmortizationResult) -> Dict[str, Any]:
    return {
        "payoff_months": result.accelerated_payoff_months,
        "payoff_years": round_or_none(result.accelerated_payoff_years, 1),
        "total_interest": round_or_none(result.accelerated_total_interest),
    }


def run_extra_principal_scenarios(
    principal: float,
    annual_rate_percent: float,
    monthly_payment: float,
    custom_scenarios: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    defs = generate_default_extras()
    if custom_scenarios:
        defs.extend(custom_scenarios)

    baseline = simulate_amortization(principal, annual_rate_percent, monthly_payment, 0.0)
    if baseline is None:
        return {
            "baseline": None,
            "scenarios": [],
            "metadata": {"feasible": False, "count": 0},
        }

    scenarios_out = []
    for d in defs:
        extra = non_negative(d.get("extra_principal", 0.0))
        result = simulate_amortization(principal, annual_rate_percent, monthly_payment, extra)
        # Baseline is feasible and extra only raises the payment, so result is never None here.
        scenarios_out.append({
            "name": d.get("name", f"extra_{extra:.0f}"),
            "params": {"extra_principal": extra},
            "result": _summary(result),
            "delta": {
                "interest_saved": round_or_none(result.interest_saved),
                "months_saved": result.time_saved_months,
            },
        })

    return {
        "baseline": _summary(baseline),
        "scenarios": scenarios_out,
        "metadata": {
            "feasible": True,
            "count": len(scenarios_out),
            "generated_at": datetime.now(timezone.utc).isoformat(),
        },
    }
