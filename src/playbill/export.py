import html

import pandas as pd

from .models import StatementData
from .render import format_usd


def to_df(statement: StatementData) -> pd.DataFrame:
    rows = [
        {
            "play":           p.play.name,
            "audience":       p.audience,
            "amount":         p.amount,
            "volume_credits": p.volume_credits,
        }
        for p in statement.performances
    ]
    return pd.DataFrame(rows, columns=["play", "audience", "amount", "volume_credits"])


def render_html(statement: StatementData) -> str:
    df = to_df(statement)
    table = pd.DataFrame({
        "play":  df["play"],
        "seats": df["audience"],
        "cost":  df["amount"].map(format_usd),
    })

    result = f"<h1>Statement for {html.escape(statement.customer)}</h1>\n"
    result += table.to_html(index=False, escape=True) + "\n"
    result += f"<p>Amount owed is <em>{format_usd(statement.total_amount)}</em></p>\n"
    result += f"<p>You earned <em>{statement.total_volume_credits}</em> credits</p>\n"
    return result
