from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple, Union

from home_calculator.validation.checks import parse_inputs, validate_settings

from .budget import CostBreakdown, lifetime_costs, monthly_costs
from .checklist import (
    ChecklistItem,
    back_end_item,
    down_payment_item,
    emergency_fund_item,
    front_end_item,
    monthly_budget_item,
    months_covered,
    price_to_income_item,
)
from .inputs import CalculatorInputs, ParsedInputs
from .thresholds import DEFAULT_SETTINGS, CalculatorSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Metrics:
    loan_amount: float
    monthly_income: float
    front_end_ratio: float
    back_end_ratio: float
    down_payment_percent: float
    price_to_income: float
    budget_overage: float
    months_covered: float


@dataclass(frozen=True)
class Summary:
    total_monthly_cost: float
    total_lifetime_cost: float
    loan_term: float
    down_payment: float
    monthly_breakdown: CostBreakdown
    lifetime_breakdown: CostBreakdown
    metrics: Metrics


@dataclass(frozen=True)
class CalculationResult:
    checklist: Tuple[ChecklistItem, ...]
    summary: Summary


def _metrics(parsed: ParsedInputs, total_monthly: float) -> Metrics:
    monthly_income = parsed.monthly_income
    return Metrics(
        loan_amount=parsed.loan_principal,
        monthly_income=monthly_income,
        front_end_ratio=total_monthly / monthly_income * 100,
        back_end_ratio=(total_monthly + parsed.monthly_debts) / monthly_income * 100,
        down_payment_percent=parsed.down_payment * 100 / parsed.purchase_price,
        price_to_income=parsed.purchase_price / parsed.annual_income,
        budget_overage=total_monthly - parsed.desired_monthly_housing,
        months_covered=months_covered(parsed.emergency_fund, total_monthly),
    )


def _checklist(parsed: ParsedInputs, total_monthly: float, metrics: Metrics, settings: CalculatorSettings):
    thresholds = settings.thresholds
    return (
        down_payment_item(metrics.down_payment_percent, parsed.down_payment, thresholds),
        monthly_budget_item(total_monthly, parsed.desired_monthly_housing, thresholds),
        back_end_item(metrics.back_end_ratio, thresholds),
        price_to_income_item(metrics.price_to_income, thresholds),
        front_end_item(metrics.front_end_ratio, thresholds),
        emergency_fund_item(parsed.emergency_fund, total_monthly, thresholds),
    )


def calculate(
    inputs: Union[CalculatorInputs, Mapping[str, str], None],
    settings: Optional[CalculatorSettings] = None,
) -> Optional[CalculationResult]:
    """Turn raw form values into a cost summary and a graded affordability checklist.

    Returns ``None`` when purchase price, down payment or annual income is
    missing or zero; the form should then ask for the required fields.
    Malformed optional fields fall back to their defaults instead of raising.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS
    else:
        validate_settings(settings)
    if not isinstance(inputs, CalculatorInputs):
        inputs = CalculatorInputs.from_mapping(inputs)

    parsed = parse_inputs(inputs, settings)
    if not parsed.has_required():
        logger.debug("Skipping calculation: purchase price, down payment and income are required.")
        return None

    monthly = monthly_costs(parsed)
    total_monthly = monthly.total
    lifetime = lifetime_costs(monthly, parsed.loan_term)
    total_lifetime = parsed.down_payment + total_monthly * 12 * max(parsed.loan_term, 0.0)
    metrics = _metrics(parsed, total_monthly)

    summary = Summary(
        total_monthly_cost=total_monthly,
        total_lifetime_cost=total_lifetime,
        loan_term=parsed.loan_term,
        down_payment=parsed.down_payment,
        monthly_breakdown=monthly,
        lifetime_breakdown=lifetime,
        metrics=metrics,
    )
    return CalculationResult(checklist=_checklist(parsed, total_monthly, metrics, settings), summary=summary)
