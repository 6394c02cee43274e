SAMPLE_BUDGET_REQUEST = {
    "income": 60000,
    "state": "Texas",
    "filing_status": "single",
}

SAMPLE_REBALANCE_REQUEST = {
    "allocations": {"housing": 350.0, "food": 150.0, "general": 200.0, "savings": 300.0},
    "category": "housing",
    "new_value": 500.0,
    "total_budget": 1000.0,
}

SAMPLE_GROWTH_REQUEST = {
    "monthly_contribution": 1254.85,
    "split_ratio": 0.4,
    "invest_rate": 0.07,
    "bank_rate": 0.036,
    "years": 30,
}

SAMPLE_MORTGAGE_REQUEST = {
    "loan_balance": 300000,
    "interest_rate_pct": 6.5,
    "monthly_payment": 2500,
    "extra_principal": 500,
}

SAMPLE_ADVICE_REQUEST = {
    "income": 60000,
    "state": "Texas",
    "allocations": {"housing": 1463.99, "food": 627.43, "general": 836.57, "savings": 1254.85},
}
