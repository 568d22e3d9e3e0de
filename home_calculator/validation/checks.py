from __future__ import annotations

import logging
import math
from typing import Optional

from home_calculator.core.inputs import CalculatorInputs, ParsedInputs
from home_calculator.core.thresholds import Band, CalculatorSettings, FormulaDefaults, Thresholds

logger = logging.getLogger(__name__)

_STRIPPED_CHARS = str.maketrans("", "", "$, ")


def parse_optional_number(text: Optional[str], default: float) -> float:
    """Parse form text to a float, falling back to ``default`` only when the text is not a number.

    An explicit ``0`` is a real value and is returned as-is. Currency symbols,
    thousands separators and surrounding whitespace are ignored.
    """
    if text is None:
        return default
    cleaned = str(text).strip().translate(_STRIPPED_CHARS)
    if not cleaned:
        return default
    try:
        value = float(cleaned)
    except ValueError:
        logger.debug("Unparseable number %r, using default %s", text, default)
        return default
    if not math.isfinite(value):
        logger.debug("Non-finite number %r, using default %s", text, default)
        return default
    return value


def default_housing_budget(annual_income: float, thresholds: Thresholds) -> float:
    """Budget implied by the front-end ratio target when the user gives none."""
    return annual_income / 12.0 * thresholds.front_end_ratio.good / 100.0


def parse_inputs(inputs: CalculatorInputs, settings: CalculatorSettings) -> ParsedInputs:
    defaults = settings.defaults
    income = parse_optional_number(inputs.annual_income, 0.0)
    return ParsedInputs(
        purchase_price=parse_optional_number(inputs.purchase_price, 0.0),
        down_payment=parse_optional_number(inputs.down_payment, 0.0),
        interest_rate=parse_optional_number(inputs.interest_rate, defaults.interest_rate),
        loan_term=parse_optional_number(inputs.loan_term, defaults.loan_term),
        property_tax=parse_optional_number(inputs.property_tax, defaults.property_tax),
        home_insurance=parse_optional_number(inputs.home_insurance, defaults.home_insurance),
        hoa_fees=parse_optional_number(inputs.hoa_fees, defaults.hoa_fees),
        maintenance_annual=parse_optional_number(inputs.maintenance_annual, defaults.maintenance_annual),
        renovations_annual=parse_optional_number(inputs.renovations_annual, defaults.renovations_annual),
        utilities=parse_optional_number(inputs.utilities, defaults.utilities),
        annual_income=income,
        monthly_debts=parse_optional_number(inputs.monthly_debts, 0.0),
        emergency_fund=parse_optional_number(inputs.emergency_fund, 0.0),
        desired_monthly_housing=parse_optional_number(
            inputs.desired_monthly_housing, default_housing_budget(income, settings.thresholds)
        ),
        safety_multiplier=parse_optional_number(inputs.safety_multiplier, defaults.safety_multiplier),
    )


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def _validate_lower_is_better(band: Band, name: str) -> None:
    _require(band.good >= 0, f"{name} good threshold cannot be negative.")
    _require(band.good <= band.warning, f"{name} good threshold must not exceed its warning threshold.")


def _validate_higher_is_better(band: Band, name: str) -> None:
    _require(band.warning >= 0, f"{name} warning threshold cannot be negative.")
    _require(band.good >= band.warning, f"{name} good threshold must not be below its warning threshold.")


def validate_thresholds(thresholds: Thresholds) -> None:
    _validate_higher_is_better(thresholds.down_payment, "Down payment")
    _require(thresholds.down_payment.good <= 100, "Down payment good threshold cannot exceed 100%.")
    _validate_lower_is_better(thresholds.front_end_ratio, "Front-end ratio")
    _validate_lower_is_better(thresholds.back_end_ratio, "Back-end ratio")
    _validate_lower_is_better(thresholds.price_to_income, "Price-to-income ratio")
    _validate_higher_is_better(thresholds.emergency_fund, "Emergency fund")
    _validate_lower_is_better(thresholds.monthly_budget, "Monthly budget buffer")


def validate_defaults(defaults: FormulaDefaults) -> None:
    _require(defaults.interest_rate >= 0, "Default interest rate cannot be negative.")
    _require(defaults.loan_term > 0, "Default loan term must be positive.")
    _require(defaults.property_tax >= 0, "Default property tax rate cannot be negative.")
    _require(defaults.home_insurance >= 0, "Default home insurance rate cannot be negative.")
    _require(defaults.hoa_fees >= 0, "Default HOA fees cannot be negative.")
    _require(defaults.maintenance_annual >= 0, "Default maintenance cannot be negative.")
    _require(defaults.renovations_annual >= 0, "Default renovations cannot be negative.")
    _require(defaults.utilities >= 0, "Default utilities cannot be negative.")
    _require(defaults.safety_multiplier > -100, "Default safety multiplier must be above -100%.")


def validate_settings(settings: CalculatorSettings) -> None:
    validate_thresholds(settings.thresholds)
    validate_defaults(settings.defaults)
