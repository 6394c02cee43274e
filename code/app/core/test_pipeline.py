import pytest

from app.core import pipeline
from app.core.models import BudgetRequest, MortgageRequest, RebalanceRequest
from app.core.sample_payloads import SAMPLE_ADVICE_REQUEST, SAMPLE_BUDGET_REQUEST, SAMPLE_REBALANCE_REQUEST


@pytest.fixture
def with_key(monkeypatch):
    monkeypatch.setattr(pipeline, "has_api_key", lambda: True)


def _reply(text, sources=()):
    annotations = [{"type": "url_citation", "url_citation": s} for s in sources]
    return {"choices": [{"message": {"content": text, "annotations": annotations}}]}


def test_run_budget_sample():
    out = pipeline.run_budget(BudgetRequest(**SAMPLE_BUDGET_REQUEST))
    assert out.taxes.federal == pytest.approx(5216.0)
    assert out.state.name == "Texas"
    total = out.allocations.housing + out.allocations.food + out.allocations.general + out.allocations.savings
    assert total == pytest.approx(out.net_monthly_income, abs=0.001)


def test_run_rebalance_sample():
    out = pipeline.run_rebalance(RebalanceRequest(**SAMPLE_REBALANCE_REQUEST))
    assert out.housing == pytest.approx(500.0)
    assert out.savings == pytest.approx(150.0)


def test_run_mortgage_infeasible():
    out = pipeline.run_mortgage(MortgageRequest(monthly_payment=1000))
    assert not out.feasible
    assert out.result is None


def test_run_mortgage_scenarios_includes_requested_extra():
    out = pipeline.run_mortgage_scenarios(MortgageRequest(extra_principal=300))
    assert out["scenarios"][-1]["params"]["extra_principal"] == 300.0


def test_advice_without_key(monkeypatch):
    monkeypatch.setattr(pipeline, "has_api_key", lambda: False)
    out = pipeline.get_financial_advice(60000, "Texas", SAMPLE_ADVICE_REQUEST["allocations"])
    assert out.markdown == pipeline.ADVICE_MISSING_KEY
    assert out.sources == []
    assert pipeline.find_housing_options("Austin, TX", "rent", 1500).markdown == pipeline.HOUSING_MISSING_KEY
    assert pipeline.get_deep_dive_plan(60000, "Texas").markdown == pipeline.PLAN_MISSING_KEY


def test_advice_with_sources(monkeypatch, with_key):
    prompts = []

    def fake_query(prompt, **kwargs):
        prompts.append(prompt)
        return _reply("Housing is on target.", [{"url": "https://rent.example", "title": "Rent index"}])

    monkeypatch.setattr(pipeline, "query_advisor", fake_query)
    out = pipeline.get_financial_advice(60000, "Texas", SAMPLE_ADVICE_REQUEST["allocations"])
    assert out.markdown == "Housing is on target."
    assert out.sources[0].url == "https://rent.example"
    assert "Housing: $1,464" in prompts[0]
    assert "$60,000" in prompts[0]


def test_upstream_failure_becomes_placeholder(monkeypatch, with_key):
    def fail(prompt, **kwargs):
        raise RuntimeError("quota exceeded")

    monkeypatch.setattr(pipeline, "query_advisor", fail)
    assert pipeline.get_financial_advice(60000, "Texas", {}).markdown == pipeline.ADVICE_FAILED
    assert pipeline.find_housing_options("Austin", "buy", 2000).markdown == pipeline.HOUSING_FAILED
    assert pipeline.get_deep_dive_plan(60000, "Texas").markdown == pipeline.PLAN_FAILED


def test_empty_reply_uses_fallback_text(monkeypatch, with_key):
    monkeypatch.setattr(pipeline, "query_advisor", lambda prompt, **kwargs: _reply(""))
    assert pipeline.get_financial_advice(60000, "Texas", {}).markdown == pipeline.ADVICE_EMPTY
    assert pipeline.find_housing_options("Austin", "rent", 1500).markdown == pipeline.HOUSING_EMPTY
    assert pipeline.get_deep_dive_plan(60000, "Texas").markdown == pipeline.PLAN_EMPTY


def test_buy_search_quotes_home_price(monkeypatch, with_key):
    prompts = []
    monkeypatch.setattr(pipeline, "query_advisor", lambda prompt, **kwargs: prompts.append(prompt) or _reply("ok"))
    pipeline.find_housing_options("Austin,\nTX", "buy", 2000)
    assert "approx. home price $360,000" in prompts[0]
    assert "near Austin, TX that" in prompts[0]


def test_plan_uses_plan_model(monkeypatch, with_key):
    calls = []

    def fake_query(prompt, **kwargs):
        calls.append(kwargs)
        return _reply("## Years 1-5", [{"url": "https://x.example", "title": "X"}])

    monkeypatch.setattr(pipeline, "query_advisor", fake_query)
    out = pipeline.get_deep_dive_plan(85000, "Ohio")
    assert out.markdown == "## Years 1-5"
    assert out.sources == []
    assert calls[0]["model"] == pipeline.ADVISOR_PLAN_MODEL
    assert calls[0]["reasoning_effort"] == "high"


def test_advice_and_housing_request_search_but_plan_does_not(monkeypatch, with_key):
    calls = []
    monkeypatch.setattr(pipeline, "query_advisor", lambda prompt, **kwargs: calls.append(kwargs) or _reply("ok"))
    pipeline.get_financial_advice(60000, "Texas", SAMPLE_ADVICE_REQUEST["allocations"])
    pipeline.find_housing_options("Austin, TX", "rent", 1500)
    pipeline.get_deep_dive_plan(60000, "Texas")
    assert [c["search"] for c in calls] == [True, True, False]
