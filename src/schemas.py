"""Pydantic schema for the raw fields collected by the console and dashboard."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.models.advice import AffordabilityPolicy
from src.models.loan import LoanInput, PersonInput


class CalculationRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    name: str = ""

    # Loan
    loan_amount: float = Field(..., ge=0, description="Purchase price / loan amount before down payment")
    down_payment: float = Field(0.0, ge=0)
    annual_rate_pct: float = Field(..., ge=0, description="Annual interest rate as a percentage, e.g. 6 for 6%")
    term_years: int = Field(..., gt=0)

    # Budget
    monthly_income: float = Field(..., ge=0)
    monthly_expenses: float = Field(0.0, ge=0)

    policy: AffordabilityPolicy | None = None

    def to_loan_input(self) -> LoanInput:
        return LoanInput(
            principal=self.loan_amount,
            down_payment=self.down_payment,
            annual_rate_pct=self.annual_rate_pct,
            term_years=self.term_years,
        )

    def to_person_input(self) -> PersonInput:
        return PersonInput(
            monthly_income=self.monthly_income,
            monthly_expenses=self.monthly_expenses,
            name=self.name,
        )


def describe_errors(exc: ValidationError) -> list[str]:
    """One 'field: reason' line per validation error."""
    lines = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "input"
        lines.append(f"{field}: {err['msg']}")
    return lines
