import logging

from .builder import StatementBuilder, create_statement_data
from .exceptions import InvalidInputError, StatementError, UnknownGenreError, UnresolvedPlayError
from .models import EnrichedPerformance, Genre, Invoice, Performance, Play, StatementData
from .pricing import DEFAULT_POLICY, PricingPolicy, PricingRule, compute_amount, compute_credits
from .render import format_usd, render_plain_text

__all__ = [
    "StatementBuilder",
    "create_statement_data",
    "PricingPolicy",
    "PricingRule",
    "DEFAULT_POLICY",
    "compute_amount",
    "compute_credits",
    "Genre",
    "Play",
    "Performance",
    "Invoice",
    "EnrichedPerformance",
    "StatementData",
    "format_usd",
    "render_plain_text",
    "StatementError",
    "InvalidInputError",
    "UnresolvedPlayError",
    "UnknownGenreError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
