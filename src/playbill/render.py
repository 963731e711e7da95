from decimal import Decimal

from .models import StatementData


def format_usd(minor_units: int) -> str:
    """Format cents as US dollars, e.g. 123450 -> '$1,234.50'."""
    return f"${Decimal(minor_units) / 100:,.2f}"


def render_plain_text(data: StatementData) -> str:
    result = f"Statement for {data.customer}\n"
    for perf in data.performances:
        result += f" {perf.play.name}: {format_usd(perf.amount)} ({perf.audience} seats)\r\n"
    result += f"Amount owed is {format_usd(data.total_amount)}\n"
    result += f"You earned {data.total_volume_credits} credits\n"
    return result
