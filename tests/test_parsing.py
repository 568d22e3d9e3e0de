import unittest

from home_calculator.core.inputs import CalculatorInputs
from home_calculator.core.thresholds import DEFAULT_SETTINGS, FORMULA_DEFAULTS
from home_calculator.validation.checks import default_housing_budget, parse_inputs, parse_optional_number


class TestParseOptionalNumber(unittest.TestCase):

    def test_plain_numbers(self):
        self.assertEqual(parse_optional_number("5.3", 7.0), 5.3)
        self.assertEqual(parse_optional_number("450000", 0.0), 450000.0)
        self.assertEqual(parse_optional_number("-2", 0.0), -2.0)

    def test_empty_and_missing_fall_back(self):
        self.assertEqual(parse_optional_number("", 7.0), 7.0)
        self.assertEqual(parse_optional_number("   ", 7.0), 7.0)
        self.assertEqual(parse_optional_number(None, 30.0), 30.0)

    def test_garbage_falls_back(self):
        self.assertEqual(parse_optional_number("abc", 1.2), 1.2)
        self.assertEqual(parse_optional_number("12abc", 1.2), 1.2)
        self.assertEqual(parse_optional_number("1.2.3", 0.5), 0.5)

    def test_non_finite_falls_back(self):
        self.assertEqual(parse_optional_number("nan", 300.0), 300.0)
        self.assertEqual(parse_optional_number("inf", 300.0), 300.0)

    def test_zero_is_a_real_value(self):
        """An explicit 0 must not be replaced by a nonzero default."""
        self.assertEqual(parse_optional_number("0", 8000.0), 0.0)
        self.assertEqual(parse_optional_number("0.0", 7.0), 0.0)

    def test_currency_formatting_is_ignored(self):
        self.assertEqual(parse_optional_number("$1,200", 0.0), 1200.0)
        self.assertEqual(parse_optional_number(" 2,500 ", 0.0), 2500.0)


class TestParseInputs(unittest.TestCase):

    def test_blank_record_uses_defaults(self):
        parsed = parse_inputs(CalculatorInputs(), DEFAULT_SETTINGS)
        self.assertEqual(parsed.purchase_price, 0.0)
        self.assertEqual(parsed.down_payment, 0.0)
        self.assertEqual(parsed.annual_income, 0.0)
        self.assertEqual(parsed.monthly_debts, 0.0)
        self.assertEqual(parsed.emergency_fund, 0.0)
        self.assertEqual(parsed.interest_rate, FORMULA_DEFAULTS.interest_rate)
        self.assertEqual(parsed.loan_term, FORMULA_DEFAULTS.loan_term)
        self.assertEqual(parsed.property_tax, FORMULA_DEFAULTS.property_tax)
        self.assertEqual(parsed.home_insurance, FORMULA_DEFAULTS.home_insurance)
        self.assertEqual(parsed.maintenance_annual, FORMULA_DEFAULTS.maintenance_annual)
        self.assertEqual(parsed.renovations_annual, FORMULA_DEFAULTS.renovations_annual)
        self.assertEqual(parsed.utilities, FORMULA_DEFAULTS.utilities)
        self.assertEqual(parsed.hoa_fees, 0.0)
        self.assertEqual(parsed.safety_multiplier, 0.0)
        self.assertFalse(parsed.has_required())

    def test_missing_budget_follows_front_end_target(self):
        parsed = parse_inputs(CalculatorInputs(annual_income="120000"), DEFAULT_SETTINGS)
        self.assertAlmostEqual(parsed.desired_monthly_housing, 2800.0)
        self.assertAlmostEqual(default_housing_budget(120000, DEFAULT_SETTINGS.thresholds), 2800.0)

    def test_loan_principal_never_negative(self):
        parsed = parse_inputs(CalculatorInputs(purchase_price="100000", down_payment="150000"), DEFAULT_SETTINGS)
        self.assertEqual(parsed.loan_principal, 0.0)


class TestCalculatorInputs(unittest.TestCase):

    def test_from_mapping_accepts_form_field_names(self):
        inputs = CalculatorInputs.from_mapping(
            {"purchasePrice": "300000", "downPayment": "60000", "annual_income": 90000, "unknown": "x"}
        )
        self.assertEqual(inputs.purchase_price, "300000")
        self.assertEqual(inputs.down_payment, "60000")
        self.assertEqual(inputs.annual_income, "90000")
        self.assertEqual(inputs.interest_rate, "")

    def test_none_values_become_empty(self):
        inputs = CalculatorInputs.from_mapping({"interestRate": None})
        self.assertEqual(inputs.interest_rate, "")

    def test_missing_mapping_is_an_empty_form(self):
        self.assertEqual(CalculatorInputs.from_mapping(None), CalculatorInputs())

    def test_round_trip_through_dict(self):
        inputs = CalculatorInputs(purchase_price="1", safety_multiplier="10")
        self.assertEqual(CalculatorInputs.from_mapping(inputs.to_dict()), inputs)


if __name__ == "__main__":
    unittest.main()
