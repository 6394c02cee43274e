from typing import Dict, Mapping

from finance.constants import CATEGORIES
from finance.utils import clamp

LLM_INCOME_MAX = 10000000.0
LLM_MONTHLY_MAX = 1000000.0
LLM_LOCATION_MAX_CHARS = 120


def clamp_llm_income(value: float) -> float:
    return clamp(float(value), 0.0, LLM_INCOME_MAX)


def clamp_llm_monthly(value: float) -> float:
    return clamp(float(value), 0.0, LLM_MONTHLY_MAX)


def clamp_llm_allocations(allocations: Mapping[str, float]) -> Dict[str, float]:
    return {category: clamp_llm_monthly(allocations.get(category, 0.0)) for category in CATEGORIES}


def clean_llm_location(value: str) -> str:
    # Single line, bounded length; the value is pasted straight into a prompt.
    cleaned = " ".join((value or "").split())
    return cleaned[:LLM_LOCATION_MAX_CHARS]
