from __future__ import annotations

import math


def format_currency(amount: float) -> str:
    """Whole dollars with thousands grouping, e.g. ``$4,909``."""
    if not math.isfinite(amount):
        return f"${amount}"
    rounded = round(amount)
    if rounded < 0:
        return f"-${-rounded:,.0f}"
    return f"${rounded:,.0f}"


def format_number(value: float) -> str:
    return f"{value:g}"
