from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .exceptions import InvalidInputError


class Genre(str, Enum):
    COMEDY = "comedy"
    TRAGEDY = "tragedy"


@dataclass(frozen=True)
class Play:
    name: str
    type: str  # Genre tag; unknown tags are rejected at pricing time


@dataclass(frozen=True)
class Performance:
    play_id: str
    audience: int

    def __post_init__(self) -> None:
        if isinstance(self.audience, bool) or not isinstance(self.audience, int):
            raise InvalidInputError(f"Audience must be an integer: {self.audience!r}")
        if self.audience < 0:
            raise InvalidInputError(f"Audience cannot be negative: {self.audience}")


@dataclass(frozen=True)
class Invoice:
    customer: str
    performances: Tuple[Performance, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable from callers, store it immutably
        object.__setattr__(self, "performances", tuple(self.performances))


@dataclass(frozen=True)
class EnrichedPerformance:
    play_id: str
    audience: int
    play: Play
    amount: int          # Minor currency units (cents)
    volume_credits: int


@dataclass(frozen=True)
class StatementData:
    customer: str
    performances: Tuple[EnrichedPerformance, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "performances", tuple(self.performances))

    @property
    def total_amount(self) -> int:
        return sum(p.amount for p in self.performances)

    @property
    def total_volume_credits(self) -> int:
        return sum(p.volume_credits for p in self.performances)
