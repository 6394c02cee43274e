from typing import Dict

from finance.mortgage import estimate_home_price


def format_currency(value: float) -> str:
    return f"${value:,.0f}"


def build_advice_prompt(income: float, state: str, allocations: Dict[str, float]) -> str:
    return f"""
I am a user living in {state} with an annual income of {format_currency(income)}.
My current estimated monthly budget is:
- Housing: {format_currency(allocations['housing'])}
- Food: {format_currency(allocations['food'])}
- General Spending: {format_currency(allocations['general'])}
- Savings/Investments: {format_currency(allocations['savings'])}

Please provide a brief, helpful financial assessment.
Search for the current cost of living index or average rent in {state} to see if my housing budget is realistic.
Keep it under 200 words. Format with Markdown.
""".strip()


def build_housing_prompt(location: str, dwelling_type: str, monthly_budget: float) -> str:
    if dwelling_type == "rent":
        budget_string = f"{format_currency(monthly_budget)}/month"
    else:
        budget_string = (
            f"a monthly mortgage of {format_currency(monthly_budget)} "
            f"(approx. home price {format_currency(estimate_home_price(monthly_budget))})"
        )
    return f"""
Find 3-4 specific real estate listings or rental communities in or near {location} that would fit a budget of {budget_string}.

Focus on finding actual links to Zillow, Redfin, Apartments.com, or local listings.

For each finding, provide:
- A brief description (Neighborhood, Beds/Baths).
- Estimated Price.

Format the response in Markdown.
""".strip()


def build_plan_prompt(income: float, state: str) -> str:
    return f"""
Create a comprehensive, 20-year financial roadmap for a user earning {format_currency(income)} annually in {state}.

Consider:
1. State-specific tax implications.
2. Inflation and cost of living adjustments for {state}.
3. Investment strategies for the savings portion (assume a balanced portfolio).
4. Milestones (buying a home, emergency fund, retirement).

Structure the response clearly with Markdown headings, bullet points, and a year-by-year or phase-by-phase breakdown.
Be realistic but encouraging.
""".strip()
