"""Helpers for picking a rate out of a rate-shopping result."""

from typing import Callable, Dict, Iterable, List, Optional, Sequence

from atoship.config.constants import (
    BALANCED_COST_WEIGHT,
    BALANCED_SPEED_WEIGHT,
    PREMIUM_CARRIERS,
)
from atoship.models.shipping import ShippingRate


def _require(rates: Iterable[ShippingRate]) -> List[ShippingRate]:
    rates = list(rates)
    if not rates:
        raise ValueError("No rates available for selection")
    return rates


def _days(rate: ShippingRate) -> float:
    # Unknown transit time ranks last
    return rate.estimated_days if rate.estimated_days is not None else float("inf")


def cheapest(rates: Iterable[ShippingRate]) -> ShippingRate:
    """Lowest amount; first one wins on ties."""
    return min(_require(rates), key=lambda r: r.amount)


def fastest(rates: Iterable[ShippingRate]) -> ShippingRate:
    """Fewest estimated days, cheaper first on ties."""
    return min(_require(rates), key=lambda r: (_days(r), r.amount))


def balanced(
    rates: Iterable[ShippingRate],
    cost_weight: float = BALANCED_COST_WEIGHT,
    speed_weight: float = BALANCED_SPEED_WEIGHT,
) -> ShippingRate:
    """
    Best cost/speed trade-off.

    Amount and days are each normalized by their maximum across the
    candidates, then combined with the given weights; lowest score wins.
    """
    rates = _require(rates)
    max_cost = max(r.amount for r in rates) or 1.0
    known_days = [r.estimated_days for r in rates if r.estimated_days is not None]
    max_days = max(known_days) if known_days else 0
    max_days = max_days or 1

    def score(rate: ShippingRate) -> float:
        days = rate.estimated_days if rate.estimated_days is not None else max_days
        return (rate.amount / max_cost) * cost_weight + (days / max_days) * speed_weight

    return min(rates, key=score)


def premium(
    rates: Iterable[ShippingRate],
    carriers: Sequence[str] = PREMIUM_CARRIERS,
) -> ShippingRate:
    """Fastest rate from a preferred carrier, else the balanced pick."""
    rates = _require(rates)
    preferred = {c.lower() for c in carriers}
    premium_rates = [r for r in rates if r.carrier.lower() in preferred]
    if premium_rates:
        return fastest(premium_rates)
    return balanced(rates)


STRATEGIES: Dict[str, Callable[[List[ShippingRate]], ShippingRate]] = {
    "cost": cheapest,
    "speed": fastest,
    "balanced": balanced,
    "premium": premium,
}


def select_rate(
    rates: Iterable[ShippingRate],
    strategy: str = "cost",
    max_amount: Optional[float] = None,
) -> ShippingRate:
    """
    Pick a rate by strategy name ("cost", "speed", "balanced", "premium").

    Args:
        rates: Candidate rates
        strategy: Strategy name
        max_amount: Drop rates above this amount first; ignored when no
            rate fits under it

    Raises:
        ValueError: No rates, or unknown strategy
    """
    rates = _require(rates)
    try:
        pick = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"Unknown rate selection strategy: {strategy}") from None

    if max_amount is not None:
        affordable = [r for r in rates if r.amount <= max_amount]
        rates = affordable or rates

    return pick(rates)
