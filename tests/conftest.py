"""Canonical test fixtures.

Fixture: $250K purchase, $50K down, 6% rate, 30yr fixed -> $200K financed
at 0.5%/month over 360 months (~$1,199.10/mo).
Borrower: $5,000/mo salary, $3,000/mo expenses.
"""

import pytest

from src.models.loan import LoanInput, PersonInput
from src.schemas import CalculationRequest


@pytest.fixture
def canonical_loan() -> LoanInput:
    return LoanInput(
        principal=250000.0,
        down_payment=50000.0,
        annual_rate_pct=6.0,
        term_years=30,
    )


@pytest.fixture
def canonical_person() -> PersonInput:
    return PersonInput(monthly_income=5000.0, monthly_expenses=3000.0, name="Ada")


@pytest.fixture
def canonical_request() -> CalculationRequest:
    return CalculationRequest(
        name="Ada",
        loan_amount=250000,
        down_payment=50000,
        annual_rate_pct=6,
        term_years=30,
        monthly_income=5000,
        monthly_expenses=3000,
    )
