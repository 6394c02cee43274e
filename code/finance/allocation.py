from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

from .constants import ALLOCATION_EPSILON, ALLOCATION_TEMPLATE, CATEGORIES
from .utils import clamp, non_negative


@dataclass(frozen=True)
class RebalancePolicy:
    # Donors drained first to last when a category grows.
    withdrawal_order: Tuple[str, ...] = ("savings", "general", "food", "housing")
    # Freed money lands in the first of these that was not the edited category.
    deposit_order: Tuple[str, ...] = ("savings", "general")
    # Rounding drift is settled here.
    absorb_category: str = "savings"


DEFAULT_POLICY = RebalancePolicy()


def initial_allocations(net_monthly: float, template: Mapping[str, float] = ALLOCATION_TEMPLATE) -> Dict[str, float]:
    net = non_negative(net_monthly)
    return {category: net * template.get(category, 0.0) for category in CATEGORIES}


def _absorb(allocations: Dict[str, float], error: float, policy: RebalancePolicy) -> None:
    target = policy.absorb_category
    allocations[target] += error
    if allocations[target] >= 0:
        return
    # Only reachable when the input already overshot the budget.
    shortfall = -allocations[target]
    allocations[target] = 0.0
    for source in policy.withdrawal_order:
        if shortfall < ALLOCATION_EPSILON:
            break
        available = allocations[source]
        if source == target or available <= 0:
            continue
        take = min(available, shortfall)
        allocations[source] -= take
        shortfall -= take


def rebalance(
    current: Mapping[str, float],
    category: str,
    new_value: float,
    total_budget: float,
    policy: RebalancePolicy = DEFAULT_POLICY,
) -> Dict[str, float]:
    """Set ``category`` to ``new_value`` and move money between the other
    categories so the set still sums to ``total_budget``.

    Increases are funded from ``policy.withdrawal_order``; decreases are
    deposited into the first eligible ``policy.deposit_order`` target. Any
    remaining drift beyond ``ALLOCATION_EPSILON`` goes to
    ``policy.absorb_category``.
    """
    allocations = dict(current)
    if category not in allocations:
        raise KeyError(f"Unknown allocation category: {category}")
    named = (*policy.withdrawal_order, *policy.deposit_order, policy.absorb_category)
    unknown = [c for c in named if c not in allocations]
    if unknown:
        raise KeyError(f"Policy names categories missing from the allocations: {unknown}")
    if total_budget <= 0:
        return allocations

    safe_value = clamp(non_negative(new_value), 0.0, total_budget)
    delta = safe_value - allocations[category]
    if abs(delta) < ALLOCATION_EPSILON:
        return allocations

    allocations[category] = safe_value

    if delta > 0:
        remaining = delta
        for source in policy.withdrawal_order:
            if source == category:
                continue
            if abs(remaining) < ALLOCATION_EPSILON:
                break
            available = allocations[source]
            if available <= 0:
                continue
            take = min(available, remaining)
            allocations[source] -= take
            remaining -= take
    else:
        freed = -delta
        for target in policy.deposit_order:
            if target == category:
                continue
            allocations[target] += freed
            break

    error = total_budget - sum(allocations.values())
    if abs(error) > ALLOCATION_EPSILON:
        _absorb(allocations, error, policy)
    return allocations
