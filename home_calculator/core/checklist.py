from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .formatting import format_currency as money
from .formatting import format_number as num
from .thresholds import Band, Thresholds


class Status(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    BAD = "bad"


class Direction(Enum):
    AT_LEAST = "at_least"  # higher is better
    AT_MOST = "at_most"  # lower is better

    def meets(self, value: float, bound: float) -> bool:
        if self is Direction.AT_LEAST:
            return value >= bound
        return value <= bound


@dataclass(frozen=True)
class ChecklistItem:
    label: str
    value: str
    description: str
    status: Status


def grade(value: float, band: Band, direction: Direction) -> Status:
    """Both bounds are inclusive: hitting the good bound is good, hitting the warning bound is a warning."""
    if direction.meets(value, band.good):
        return Status.GOOD
    if direction.meets(value, band.warning):
        return Status.WARNING
    return Status.BAD


def _item(label: str, value: str, status: Status, descriptions: dict) -> ChecklistItem:
    return ChecklistItem(label=label, value=value, description=descriptions[status], status=status)


def down_payment_item(percent: float, down_payment: float, thresholds: Thresholds) -> ChecklistItem:
    band = thresholds.down_payment
    return _item(
        "Down Payment",
        f"{percent:.1f}% ({money(down_payment)})",
        grade(percent, band, Direction.AT_LEAST),
        {
            Status.GOOD: f"Excellent! {num(band.good)}%+ avoids PMI",
            Status.WARNING: f"Good, but PMI may apply below {num(band.good)}%",
            Status.BAD: f"Low down payment (under {num(band.warning)}%) - expect PMI and higher costs",
        },
    )


def monthly_budget_item(total_monthly: float, desired: float, thresholds: Thresholds) -> ChecklistItem:
    band = thresholds.monthly_budget
    overage = total_monthly - desired
    return _item(
        "Monthly Housing Budget",
        f"{money(total_monthly)} vs {money(desired)} target",
        grade(overage, band, Direction.AT_MOST),
        {
            Status.GOOD: f"Fits your {money(desired)} budget (within a {money(band.good)} buffer)",
            Status.WARNING: f"{money(overage)} over your desired budget - tight but workable",
            Status.BAD: f"{money(overage)} over your desired budget, more than {money(band.warning)} above target",
        },
    )


def back_end_item(ratio: float, thresholds: Thresholds) -> ChecklistItem:
    band = thresholds.back_end_ratio
    return _item(
        "Back-End Ratio (DTI)",
        f"{ratio:.1f}%",
        grade(ratio, band, Direction.AT_MOST),
        {
            Status.GOOD: f"Total debt is manageable (at or under {num(band.good)}% of income)",
            Status.WARNING: f"Total debt is on the higher side (above {num(band.good)}% of income)",
            Status.BAD: f"Total debt exceeds the {num(band.warning)}% most lenders allow",
        },
    )


def price_to_income_item(ratio: float, thresholds: Thresholds) -> ChecklistItem:
    band = thresholds.price_to_income
    return _item(
        "Price-to-Income Ratio",
        f"{ratio:.1f}x",
        grade(ratio, band, Direction.AT_MOST),
        {
            Status.GOOD: f"Home price is conservative relative to income ({num(band.good)}x or less)",
            Status.WARNING: f"Home price is reasonable but stretching (up to {num(band.warning)}x income)",
            Status.BAD: f"Home price is very high relative to income (over {num(band.warning)}x)",
        },
    )


def front_end_item(ratio: float, thresholds: Thresholds) -> ChecklistItem:
    band = thresholds.front_end_ratio
    return _item(
        "Front-End Ratio",
        f"{ratio:.1f}%",
        grade(ratio, band, Direction.AT_MOST),
        {
            Status.GOOD: f"Housing costs are well within the recommended {num(band.good)}% of income",
            Status.WARNING: f"Housing costs are slightly high but manageable (under {num(band.warning)}%)",
            Status.BAD: f"Housing costs are too high relative to income (over {num(band.warning)}%)",
        },
    )


def months_covered(fund: float, total_monthly: float) -> float:
    if total_monthly <= 0:
        return 0.0
    return fund / total_monthly


def emergency_fund_item(fund: float, total_monthly: float, thresholds: Thresholds) -> ChecklistItem:
    band = thresholds.emergency_fund
    covered = months_covered(fund, total_monthly)
    target_months = months_covered(band.good, total_monthly)
    return _item(
        "Emergency Fund",
        money(fund),
        grade(fund, band, Direction.AT_LEAST),
        {
            Status.GOOD: f"Great! You have ~{covered:.1f} months of housing costs covered",
            Status.WARNING: f"You have ~{covered:.1f} months covered. Aim for at least {money(band.good)}",
            Status.BAD: (
                f"Build emergency fund to at least {money(band.good)} "
                f"(~{target_months:.1f} months of housing costs)"
            ),
        },
    )
