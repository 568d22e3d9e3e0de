from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Band:
    good: float
    warning: float


@dataclass(frozen=True)
class Thresholds:
    down_payment: Band = Band(good=20, warning=10)  # percent of price
    front_end_ratio: Band = Band(good=28, warning=33)  # percent of gross monthly income
    back_end_ratio: Band = Band(good=36, warning=43)
    price_to_income: Band = Band(good=3, warning=4)
    emergency_fund_minimum: float = 20_000
    # Dollars over the desired monthly housing budget
    budget_buffer_warning: float = 250
    budget_buffer_bad: float = 500

    @property
    def emergency_fund(self) -> Band:
        """Full minimum is good, half of it still counts as a warning."""
        return Band(good=self.emergency_fund_minimum, warning=self.emergency_fund_minimum / 2)

    @property
    def monthly_budget(self) -> Band:
        return Band(good=self.budget_buffer_warning, warning=self.budget_buffer_bad)


@dataclass(frozen=True)
class FormulaDefaults:
    interest_rate: float = 7.0
    loan_term: float = 30
    property_tax: float = 1.2
    home_insurance: float = 0.5
    hoa_fees: float = 0.0
    maintenance_annual: float = 8_000
    renovations_annual: float = 10_000
    utilities: float = 300
    safety_multiplier: float = 0.0


@dataclass(frozen=True)
class CalculatorSettings:
    thresholds: Thresholds = field(default_factory=Thresholds)
    defaults: FormulaDefaults = field(default_factory=FormulaDefaults)


THRESHOLDS = Thresholds()
FORMULA_DEFAULTS = FormulaDefaults()
DEFAULT_SETTINGS = CalculatorSettings(thresholds=THRESHOLDS, defaults=FORMULA_DEFAULTS)
