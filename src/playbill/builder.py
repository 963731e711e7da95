import logging
from typing import List, Mapping, Tuple

import structlog

from .exceptions import UnknownGenreError, UnresolvedPlayError
from .models import EnrichedPerformance, Invoice, Performance, Play, StatementData
from .pricing import DEFAULT_POLICY, PricingPolicy

# Events go through stdlib logging, silent until the host adds a handler
logger = structlog.wrap_logger(logging.getLogger(__name__))


def _resolve_plays(
    performances: Tuple[Performance, ...], catalog: Mapping[str, Play]
) -> List[Tuple[Performance, Play]]:
    resolved = []
    for perf in performances:
        play = catalog.get(perf.play_id)
        if play is None:
            logger.warning("unresolved_play", play_id=perf.play_id)
            raise UnresolvedPlayError(perf.play_id)
        resolved.append((perf, play))
    return resolved


def _enrich(perf: Performance, play: Play, policy: PricingPolicy) -> EnrichedPerformance:
    try:
        rule = policy.rule_for(play.type)
    except UnknownGenreError:
        logger.warning("unknown_genre", play_id=perf.play_id, genre=play.type)
        raise

    return EnrichedPerformance(
        play_id=perf.play_id,
        audience=perf.audience,
        play=play,
        amount=rule.amount(perf.audience),
        volume_credits=rule.credits(perf.audience),
    )


class StatementBuilder:
    def __init__(self, policy: PricingPolicy = DEFAULT_POLICY):
        self.policy = policy

    def build(self, invoice: Invoice, catalog: Mapping[str, Play]) -> StatementData:
        # Every play id is checked before any performance is priced
        resolved = _resolve_plays(invoice.performances, catalog)

        statement = StatementData(
            customer=invoice.customer,
            performances=tuple(_enrich(perf, play, self.policy) for perf, play in resolved),
        )

        logger.debug(
            "statement_built",
            customer=statement.customer,
            performances=len(statement.performances),
            total_amount=statement.total_amount,
            total_volume_credits=statement.total_volume_credits,
        )
        return statement


def create_statement_data(
    invoice: Invoice,
    catalog: Mapping[str, Play],
    policy: PricingPolicy = DEFAULT_POLICY,
) -> StatementData:
    return StatementBuilder(policy).build(invoice, catalog)
