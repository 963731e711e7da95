"""Per-genre pricing rules.

Each genre maps to a ``PricingRule`` record holding an amount function and a
credits function. Genres are added by building a new policy with
``PricingPolicy.with_genre``; existing rules are never edited.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Tuple

from .exceptions import InvalidInputError, UnknownGenreError
from .models import Genre

# ---------------------------------------------------------------------------
# Price anchors, all in cents
# Tragedy:  40000 base, +1000 per seat over 30
# Comedy:   30000 base, +10000 and +500 per seat over 20, +300 per seat
# Credits:  1 per seat over 30, comedy adds 1 per 5 seats
# ---------------------------------------------------------------------------
_CREDIT_THRESHOLD = 30

_TRAGEDY_BASE      = 40000
_TRAGEDY_THRESHOLD = 30
_TRAGEDY_PER_SEAT  = 1000

_COMEDY_BASE       = 30000
_COMEDY_THRESHOLD  = 20
_COMEDY_SURCHARGE  = 10000
_COMEDY_OVER_SEAT  = 500
_COMEDY_PER_SEAT   = 300
_COMEDY_CREDIT_DIV = 5


def base_credits(audience: int) -> int:
    return max(audience - _CREDIT_THRESHOLD, 0)


def tragedy_amount(audience: int) -> int:
    result = _TRAGEDY_BASE
    if audience > _TRAGEDY_THRESHOLD:
        result += _TRAGEDY_PER_SEAT * (audience - _TRAGEDY_THRESHOLD)
    return result


def comedy_amount(audience: int) -> int:
    result = _COMEDY_BASE
    if audience > _COMEDY_THRESHOLD:
        result += _COMEDY_SURCHARGE + _COMEDY_OVER_SEAT * (audience - _COMEDY_THRESHOLD)
    result += _COMEDY_PER_SEAT * audience
    return result


def comedy_credits(audience: int) -> int:
    return base_credits(audience) + audience // _COMEDY_CREDIT_DIV


@dataclass(frozen=True)
class PricingRule:
    amount: Callable[[int], int]
    credits: Callable[[int], int] = base_credits


class PricingPolicy:
    def __init__(self, rules: Mapping[str, PricingRule]):
        # Genre members are stored by their plain tag
        self._rules = MappingProxyType({
            g.value if isinstance(g, Genre) else g: r for g, r in rules.items()
        })

    @property
    def genres(self) -> Tuple[str, ...]:
        return tuple(self._rules)

    def rule_for(self, genre: str) -> PricingRule:
        try:
            return self._rules[genre]
        except KeyError:
            raise UnknownGenreError(genre) from None

    def compute_amount(self, genre: str, audience: int) -> int:
        _check_audience(audience)
        return self.rule_for(genre).amount(audience)

    def compute_credits(self, genre: str, audience: int) -> int:
        _check_audience(audience)
        return self.rule_for(genre).credits(audience)

    def with_genre(self, genre: str, rule: PricingRule) -> "PricingPolicy":
        """Return a new policy that also prices ``genre`` with ``rule``."""
        return PricingPolicy({**self._rules, genre: rule})


def _check_audience(audience: int) -> None:
    if isinstance(audience, bool) or not isinstance(audience, int) or audience < 0:
        raise InvalidInputError(f"Audience must be a non-negative integer: {audience!r}")


DEFAULT_POLICY = PricingPolicy({
    Genre.TRAGEDY: PricingRule(amount=tragedy_amount),
    Genre.COMEDY:  PricingRule(amount=comedy_amount, credits=comedy_credits),
})


def compute_amount(genre: str, audience: int, policy: PricingPolicy = DEFAULT_POLICY) -> int:
    return policy.compute_amount(genre, audience)


def compute_credits(genre: str, audience: int, policy: PricingPolicy = DEFAULT_POLICY) -> int:
    return policy.compute_credits(genre, audience)
