"""
Fixed financial constants for the budget calculators.

Tax figures approximate the 2024 federal rules for a single filer. State rates
are simplified effective rates applied to federal taxable income, not the real
state bracket schedules.
"""

from typing import Dict, List, Tuple

from .schemas import StateTaxInfo

# =============================================================================
# FEDERAL / PAYROLL
# =============================================================================

STANDARD_DEDUCTION = 14600.0

# (bracket floor, marginal rate, cumulative tax owed at the floor)
FEDERAL_BRACKETS: List[Tuple[float, float, float]] = [
    (0.0, 0.10, 0.0),
    (11600.0, 0.12, 1160.0),
    (47150.0, 0.22, 5426.0),
    (100525.0, 0.24, 17168.5),
    (191950.0, 0.32, 39110.5),
    (243725.0, 0.35, 55678.5),
    (609350.0, 0.37, 183647.25),
]

FICA_RATE = 0.0765  # 6.2% social security + 1.45% medicare, no wage cap

# =============================================================================
# BUDGET TEMPLATE
# =============================================================================

CATEGORIES: Tuple[str, ...] = ("housing", "food", "general", "savings")

ALLOCATION_TEMPLATE: Dict[str, float] = {
    "housing": 0.35,
    "food": 0.15,
    "general": 0.20,
    "savings": 0.30,
}

ALLOCATION_EPSILON = 0.001

# =============================================================================
# GROWTH / HOUSING
# =============================================================================

DEFAULT_INVEST_RATIO = 0.4
INVESTMENT_RETURN_RATE = 0.07
BANK_RETURN_RATE = 0.036  # high-yield savings APY
DEFAULT_HORIZON_YEARS = 30

MAX_AMORTIZATION_MONTHS = 720  # 60 years
HOME_PRICE_TO_MONTHLY_PAYMENT = 180

# =============================================================================
# STATES
# =============================================================================

US_STATES: List[StateTaxInfo] = [
    StateTaxInfo("Alabama", "AL", 0.040),
    StateTaxInfo("Alaska", "AK", 0.0, True),
    StateTaxInfo("Arizona", "AZ", 0.025),
    StateTaxInfo("Arkansas", "AR", 0.039),
    StateTaxInfo("California", "CA", 0.060),
    StateTaxInfo("Colorado", "CO", 0.044),
    StateTaxInfo("Connecticut", "CT", 0.050),
    StateTaxInfo("Delaware", "DE", 0.052),
    StateTaxInfo("District of Columbia", "DC", 0.060),
    StateTaxInfo("Florida", "FL", 0.0, True),
    StateTaxInfo("Georgia", "GA", 0.0539),
    StateTaxInfo("Hawaii", "HI", 0.068),
    StateTaxInfo("Idaho", "ID", 0.058),
    StateTaxInfo("Illinois", "IL", 0.0495),
    StateTaxInfo("Indiana", "IN", 0.0305),
    StateTaxInfo("Iowa", "IA", 0.044),
    StateTaxInfo("Kansas", "KS", 0.050),
    StateTaxInfo("Kentucky", "KY", 0.040),
    StateTaxInfo("Louisiana", "LA", 0.035),
    StateTaxInfo("Maine", "ME", 0.060),
    StateTaxInfo("Maryland", "MD", 0.0475),
    StateTaxInfo("Massachusetts", "MA", 0.050),
    StateTaxInfo("Michigan", "MI", 0.0425),
    StateTaxInfo("Minnesota", "MN", 0.060),
    StateTaxInfo("Mississippi", "MS", 0.047),
    StateTaxInfo("Missouri", "MO", 0.045),
    StateTaxInfo("Montana", "MT", 0.055),
    StateTaxInfo("Nebraska", "NE", 0.050),
    StateTaxInfo("Nevada", "NV", 0.0, True),
    StateTaxInfo("New Hampshire", "NH", 0.0, True),
    StateTaxInfo("New Jersey", "NJ", 0.045),
    StateTaxInfo("New Mexico", "NM", 0.045),
    StateTaxInfo("New York", "NY", 0.058),
    StateTaxInfo("North Carolina", "NC", 0.045),
    StateTaxInfo("North Dakota", "ND", 0.0195),
    StateTaxInfo("Ohio", "OH", 0.030),
    StateTaxInfo("Oklahoma", "OK", 0.0475),
    StateTaxInfo("Oregon", "OR", 0.080),
    StateTaxInfo("Pennsylvania", "PA", 0.0307),
    StateTaxInfo("Rhode Island", "RI", 0.045),
    StateTaxInfo("South Carolina", "SC", 0.055),
    StateTaxInfo("South Dakota", "SD", 0.0, True),
    StateTaxInfo("Tennessee", "TN", 0.0, True),
    StateTaxInfo("Texas", "TX", 0.0, True),
    StateTaxInfo("Utah", "UT", 0.0465),
    StateTaxInfo("Vermont", "VT", 0.060),
    StateTaxInfo("Virginia", "VA", 0.0525),
    StateTaxInfo("Washington", "WA", 0.0, True),
    StateTaxInfo("West Virginia", "WV", 0.048),
    StateTaxInfo("Wisconsin", "WI", 0.053),
    StateTaxInfo("Wyoming", "WY", 0.0, True),
]
