from __future__ import annotations

import pandas as pd

from .calculator import CalculationResult, Summary
from .formatting import format_currency

MONTHLY_ROWS = [
    ("Mortgage (P&I)", ("mortgage",)),
    ("Taxes & Insurance", ("tax", "insurance")),
    ("HOA Fees", ("hoa",)),
    ("Maintenance", ("maintenance",)),
    ("Renovations", ("renovations",)),
    ("Utilities", ("utilities",)),
]

STATUS_ICONS = {"good": "✓", "warning": "⚠", "bad": "✗"}


def monthly_breakdown_table(summary: Summary) -> pd.DataFrame:
    costs = summary.monthly_breakdown.as_dict()
    rows = [(label, sum(costs[key] for key in keys)) for label, keys in MONTHLY_ROWS]
    return pd.DataFrame(rows, columns=["Line item", "Amount"])


def lifetime_breakdown_table(summary: Summary) -> pd.DataFrame:
    costs = summary.lifetime_breakdown.as_dict()
    rows = [("Down Payment", summary.down_payment)]
    rows += [(f"Total {label}", sum(costs[key] for key in keys)) for label, keys in MONTHLY_ROWS]
    return pd.DataFrame(rows, columns=["Line item", "Amount"])


def checklist_table(result: CalculationResult) -> pd.DataFrame:
    df = pd.DataFrame(
        [(item.label, item.value, item.description, item.status.value) for item in result.checklist],
        columns=["Heuristic", "Value", "Assessment", "Status"],
    )
    df.insert(0, "", df["Status"].map(STATUS_ICONS))
    return df


def for_display(df: pd.DataFrame) -> pd.DataFrame:
    """Round the Amount column to whole dollars with thousands grouping."""
    out = df.copy()
    out["Amount"] = out["Amount"].map(format_currency)
    return out
