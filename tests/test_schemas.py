import pytest
from pydantic import ValidationError

from src.models.advice import AffordabilityPolicy
from src.schemas import CalculationRequest, describe_errors

VALID = {
    "loan_amount": 250000,
    "down_payment": 50000,
    "annual_rate_pct": 6,
    "term_years": 30,
    "monthly_income": 5000,
    "monthly_expenses": 3000,
}


class TestCalculationRequest:
    def test_numeric_strings_coerced(self):
        req = CalculationRequest(**{k: str(v) for k, v in VALID.items()})
        assert req.loan_amount == 250000.0
        assert req.term_years == 30

    def test_defaults(self):
        req = CalculationRequest(loan_amount=1000, annual_rate_pct=5, term_years=1, monthly_income=100)
        assert req.name == ""
        assert req.down_payment == 0
        assert req.monthly_expenses == 0
        assert req.policy is None

    def test_policy_parsed(self):
        req = CalculationRequest(**VALID, policy="ratio")
        assert req.policy == AffordabilityPolicy.RATIO

    @pytest.mark.parametrize("field,value", [
        ("loan_amount", -1),
        ("down_payment", -0.01),
        ("annual_rate_pct", -5),
        ("term_years", 0),
        ("term_years", -10),
        ("monthly_income", -100),
        ("monthly_expenses", -100),
        ("loan_amount", "abc"),
        ("loan_amount", ""),
        ("loan_amount", None),
        ("loan_amount", float("nan")),
        ("annual_rate_pct", float("inf")),
    ])
    def test_invalid_values_rejected(self, field, value):
        with pytest.raises(ValidationError):
            CalculationRequest(**{**VALID, field: value})

    def test_down_payment_above_price_allowed(self):
        req = CalculationRequest(**{**VALID, "down_payment": 300000})
        assert req.to_loan_input().financed_amount == -50000

    def test_to_inputs(self):
        req = CalculationRequest(**VALID, name="Ada")
        loan = req.to_loan_input()
        person = req.to_person_input()
        assert loan.periodic_rate == pytest.approx(0.005)
        assert loan.period_count == 360
        assert loan.financed_amount == 200000
        assert person.disposable_income == 2000
        assert person.name == "Ada"


class TestDescribeErrors:
    def test_one_line_per_field(self):
        with pytest.raises(ValidationError) as exc_info:
            CalculationRequest(**{**VALID, "loan_amount": -1, "term_years": 0})
        lines = describe_errors(exc_info.value)
        assert len(lines) == 2
        assert lines[0].startswith("loan_amount: ")
        assert lines[1].startswith("term_years: ")
