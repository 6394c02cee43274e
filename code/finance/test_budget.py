import pytest

from finance.allocation import rebalance
from finance.budget import budget_to_dict, build_budget, effective_tax_rate
from finance.schemas import FinancialProfile
from finance.whatif import run_extra_principal_scenarios


def test_sixty_thousand_in_texas():
    budget = build_budget(FinancialProfile(annual_income=60000, state="Texas"))
    assert budget.taxes.federal == pytest.approx(5216.0)
    assert budget.taxes.fica == pytest.approx(4590.0)
    assert budget.taxes.state == 0.0
    net = (60000 - 5216 - 4590) / 12
    assert budget.net_monthly_income == pytest.approx(net)
    assert budget.allocations == pytest.approx({
        "housing": 0.35 * net,
        "food": 0.15 * net,
        "general": 0.20 * net,
        "savings": 0.30 * net,
    })
    assert sum(budget.allocations.values()) == pytest.approx(net, abs=0.001)


def test_state_rate_reduces_net_income():
    texas = build_budget(FinancialProfile(60000, "TX"))
    california = build_budget(FinancialProfile(60000, "California"))
    assert california.taxes.state == pytest.approx(45400 * 0.06)
    assert california.net_monthly_income < texas.net_monthly_income


def test_filing_status_uses_single_brackets():
    single = build_budget(FinancialProfile(90000, "Florida", "single"))
    married = build_budget(FinancialProfile(90000, "Florida", "married"))
    assert single.taxes == married.taxes


def test_zero_income():
    budget = build_budget(FinancialProfile(0, "Ohio"))
    assert budget.net_monthly_income == 0.0
    assert effective_tax_rate(budget, 0) is None
    assert rebalance(budget.allocations, "food", 100, budget.net_monthly_income) == budget.allocations


def test_edits_after_build_keep_the_total():
    budget = build_budget(FinancialProfile(85000, "New York"))
    plan = budget.allocations
    for category, value in (("housing", 2500), ("food", 50), ("savings", 0), ("general", 4000)):
        plan = rebalance(plan, category, value, budget.net_monthly_income)
        assert sum(plan.values()) == pytest.approx(budget.net_monthly_income, abs=0.001)


def test_budget_to_dict():
    out = budget_to_dict(build_budget(FinancialProfile(60000, "Texas")), 60000)
    assert out["taxes"]["total"] == pytest.approx(9806.0)
    assert out["state"]["abbreviation"] == "TX"
    assert out["effective_tax_rate"] == pytest.approx(0.1634, abs=1e-4)


def test_extra_principal_scenarios():
    out = run_extra_principal_scenarios(300000, 6.5, 2500)
    assert out["metadata"]["feasible"]
    assert [s["params"]["extra_principal"] for s in out["scenarios"]] == [100.0, 250.0, 500.0, 1000.0]
    saved = [s["delta"]["months_saved"] for s in out["scenarios"]]
    assert saved == sorted(saved)
    assert saved[0] > 0


def test_custom_scenario_is_appended():
    out = run_extra_principal_scenarios(300000, 6.5, 2500, [{"name": "bonus", "extra_principal": 2000}])
    assert out["scenarios"][-1]["name"] == "bonus"
    assert out["metadata"]["count"] == 5


def test_infeasible_scenarios():
    out = run_extra_principal_scenarios(300000, 6.5, 1000)
    assert out == {"baseline": None, "scenarios": [], "metadata": {"feasible": False, "count": 0}}
