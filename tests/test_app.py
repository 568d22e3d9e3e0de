import unittest
from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parents[1] / "home_calculator" / "app" / "app.py")


class TestCalculatorPage(unittest.TestCase):

    def setUp(self):
        self.at = AppTest.from_file(APP_PATH, default_timeout=30)
        self.at.run()

    def test_renders_defaults(self):
        self.assertFalse(self.at.exception)
        self.assertEqual(self.at.text_input(key="field_purchase_price").value, "$450,000")
        self.assertEqual(self.at.text_input(key="field_interest_rate").value, "5.3")
        # Monthly breakdown, lifetime breakdown and checklist
        self.assertEqual(len(self.at.table), 3)

    def test_number_field_shows_the_value_it_calculates_with(self):
        self.at.text_input(key="field_interest_rate").input("5,3").run()
        self.assertFalse(self.at.exception)
        self.assertEqual(self.at.session_state["inputs"]["interest_rate"], "53")
        self.assertEqual(self.at.text_input(key="field_interest_rate").value, "53")

    def test_currency_field_is_reformatted(self):
        self.at.text_input(key="field_down_payment").input("$120000.").run()
        self.assertEqual(self.at.session_state["inputs"]["down_payment"], "120000.")
        self.assertEqual(self.at.text_input(key="field_down_payment").value, "$120,000")

    def test_missing_required_field_prompts(self):
        self.at.text_input(key="field_purchase_price").input("").run()
        self.assertFalse(self.at.exception)
        self.assertEqual(self.at.info[0].value, "Enter required fields to see your affordability assessment")
        self.assertEqual(len(self.at.table), 0)

    def test_extreme_term_does_not_crash(self):
        self.at.text_input(key="field_loan_term").input("20000").run()
        self.assertFalse(self.at.exception)
        self.assertEqual(len(self.at.table), 3)


if __name__ == "__main__":
    unittest.main()
