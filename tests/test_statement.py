import dataclasses

import pytest
import structlog.testing

from playbill import (
    DEFAULT_POLICY,
    InvalidInputError,
    Invoice,
    Performance,
    Play,
    PricingRule,
    StatementBuilder,
    UnknownGenreError,
    UnresolvedPlayError,
    create_statement_data,
)

PLAYS = {
    "hamlet":  Play(name="Hamlet", type="tragedy"),
    "as-like": Play(name="As You Like It", type="comedy"),
    "othello": Play(name="Othello", type="tragedy"),
}


def _invoice(*perfs, customer="BigCo"):
    return Invoice(customer=customer, performances=[Performance(pid, n) for pid, n in perfs])


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------

class TestPerformance:
    def test_negative_audience(self):
        with pytest.raises(InvalidInputError):
            Performance("hamlet", -1)

    def test_non_integer_audience(self):
        with pytest.raises(InvalidInputError):
            Performance("hamlet", 12.5)

    def test_bool_audience(self):
        with pytest.raises(InvalidInputError):
            Performance("hamlet", True)

    def test_zero_audience_is_valid(self):
        assert Performance("hamlet", 0).audience == 0


# ---------------------------------------------------------------------------
# Building statements
# ---------------------------------------------------------------------------

class TestBuild:
    def test_small_invoice_totals(self):
        data = create_statement_data(_invoice(("hamlet", 30), ("as-like", 20)), PLAYS)
        assert data.customer == "BigCo"
        assert data.total_amount == 76000
        assert data.total_volume_credits == 4

    def test_enriched_fields(self):
        data = create_statement_data(_invoice(("hamlet", 55), ("as-like", 35)), PLAYS)
        hamlet, comedy = data.performances
        assert hamlet.play == PLAYS["hamlet"]
        assert (hamlet.play_id, hamlet.audience) == ("hamlet", 55)
        assert (hamlet.amount, hamlet.volume_credits) == (65000, 25)
        assert (comedy.amount, comedy.volume_credits) == (58000, 12)

    def test_preserves_order_and_duplicates(self):
        perfs = [("othello", 40), ("hamlet", 10), ("othello", 40)]
        data = create_statement_data(_invoice(*perfs), PLAYS)
        assert [(p.play_id, p.audience) for p in data.performances] == perfs

    def test_totals_are_sums(self):
        data = create_statement_data(
            _invoice(("hamlet", 55), ("as-like", 35), ("othello", 40)), PLAYS
        )
        assert data.total_amount == sum(p.amount for p in data.performances) == 173000
        assert data.total_volume_credits == sum(p.volume_credits for p in data.performances) == 47

    def test_rebuild_is_identical(self):
        invoice = _invoice(("hamlet", 55), ("as-like", 35))
        builder = StatementBuilder()
        assert builder.build(invoice, PLAYS) == builder.build(invoice, PLAYS)

    def test_empty_invoice(self):
        data = create_statement_data(_invoice(), PLAYS)
        assert data.performances == ()
        assert data.total_amount == 0
        assert data.total_volume_credits == 0

    def test_result_is_immutable(self):
        data = create_statement_data(_invoice(("hamlet", 30)), PLAYS)
        with pytest.raises(dataclasses.FrozenInstanceError):
            data.customer = "Other"
        with pytest.raises(AttributeError):
            data.total_amount = 1
        with pytest.raises(dataclasses.FrozenInstanceError):
            data.performances[0].amount = 1

    def test_catalog_not_mutated(self):
        catalog = dict(PLAYS)
        create_statement_data(_invoice(("hamlet", 30)), catalog)
        assert catalog == PLAYS

    def test_custom_policy(self):
        catalog = {**PLAYS, "henry-v": Play(name="Henry V", type="history")}
        policy = DEFAULT_POLICY.with_genre("history", PricingRule(amount=lambda a: 25000))
        data = StatementBuilder(policy).build(_invoice(("henry-v", 35)), catalog)
        assert data.total_amount == 25000
        assert data.total_volume_credits == 5


class TestBuildFailures:
    def test_unresolved_play(self):
        with pytest.raises(UnresolvedPlayError) as exc_info:
            create_statement_data(_invoice(("hamlet", 30), ("lear", 10)), PLAYS)
        assert exc_info.value.play_id == "lear"

    def test_unresolved_play_checked_before_pricing(self):
        catalog = {"bad": Play(name="Bad", type="history")}
        # The unknown genre comes first, but resolution runs before any pricing
        with pytest.raises(UnresolvedPlayError):
            create_statement_data(_invoice(("bad", 10), ("lear", 10)), catalog)

    def test_pricing_not_called_when_unresolved(self):
        calls = []
        rule = PricingRule(amount=lambda a: calls.append(a) or 0)
        policy = DEFAULT_POLICY.with_genre("tragedy", rule)
        with pytest.raises(UnresolvedPlayError):
            StatementBuilder(policy).build(_invoice(("hamlet", 30), ("lear", 10)), PLAYS)
        assert calls == []

    def test_unknown_genre(self):
        catalog = {**PLAYS, "henry-v": Play(name="Henry V", type="history")}
        with pytest.raises(UnknownGenreError) as exc_info:
            create_statement_data(_invoice(("hamlet", 30), ("henry-v", 10)), catalog)
        assert exc_info.value.genre == "history"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class TestLogging:
    def test_library_writes_nothing_by_default(self, capsys):
        create_statement_data(_invoice(("hamlet", 30)), PLAYS)
        with pytest.raises(UnresolvedPlayError):
            create_statement_data(_invoice(("lear", 10)), PLAYS)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_statement_built_event(self):
        with structlog.testing.capture_logs() as logs:
            create_statement_data(_invoice(("hamlet", 55)), PLAYS)
        built = [e for e in logs if e["event"] == "statement_built"]
        assert len(built) == 1
        assert built[0]["total_amount"] == 65000
        assert built[0]["log_level"] == "debug"

    def test_unresolved_play_warning(self):
        with structlog.testing.capture_logs() as logs:
            with pytest.raises(UnresolvedPlayError):
                create_statement_data(_invoice(("lear", 10)), PLAYS)
        assert {"event": "unresolved_play", "play_id": "lear", "log_level": "warning"} in logs

    def test_unknown_genre_warning(self):
        catalog = {"henry-v": Play(name="Henry V", type="history")}
        with structlog.testing.capture_logs() as logs:
            with pytest.raises(UnknownGenreError):
                create_statement_data(_invoice(("henry-v", 10)), catalog)
        assert {
            "event": "unknown_genre",
            "play_id": "henry-v",
            "genre": "history",
            "log_level": "warning",
        } in logs
