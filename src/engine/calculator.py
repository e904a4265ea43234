"""Single entry point shared by the console and dashboard front-ends.

Request in, CalculationResult out. Chains the amortization engine into
the affordability advisor using the configured thresholds.
"""

import logging
import math
from dataclasses import dataclass

from src.config import settings
from src.engine.affordability import compute_affordability
from src.engine.amortization import calculate_payment
from src.models.advice import AffordabilityAdvice, AffordabilityPolicy
from src.models.loan import LoanInput, PaymentResult, PersonInput
from src.schemas import CalculationRequest

logger = logging.getLogger(__name__)


class CalculationError(ValueError):
    """The inputs passed validation but produced a non-finite payment."""


@dataclass(frozen=True)
class CalculationResult:
    loan: LoanInput
    person: PersonInput
    payment: PaymentResult
    advice: AffordabilityAdvice

    @property
    def name(self) -> str:
        return self.person.name


def resolve_policy(
    requested: AffordabilityPolicy | str | None = None,
) -> AffordabilityPolicy:
    """Explicit policy, else the configured default."""
    if requested is None:
        requested = settings.default_policy
    return AffordabilityPolicy(requested)


def run_calculation(
    request: CalculationRequest,
    policy: AffordabilityPolicy | str | None = None,
) -> CalculationResult:
    loan = request.to_loan_input()
    person = request.to_person_input()
    chosen = resolve_policy(policy if policy is not None else request.policy)

    logger.debug(
        "Calculating: financed=%s rate=%s periods=%s income=%s expenses=%s policy=%s",
        loan.financed_amount, loan.periodic_rate, loan.period_count,
        person.monthly_income, person.monthly_expenses, chosen.value,
    )

    try:
        payment = calculate_payment(loan)
    except (ZeroDivisionError, OverflowError, ValueError) as e:
        raise CalculationError(f"Monthly payment could not be computed: {e}") from e

    if not math.isfinite(payment.monthly_payment):
        raise CalculationError(f"Monthly payment is not a finite number: {payment.monthly_payment}")
    if not (math.isfinite(payment.total_cost) and math.isfinite(payment.total_interest)):
        raise CalculationError(f"Total cost of the loan is not a finite number: {payment.total_cost}")

    advice = compute_affordability(
        person.monthly_income,
        person.monthly_expenses,
        payment.monthly_payment,
        policy=chosen,
        savings_rate=settings.recommended_savings_rate,
        low_ratio=settings.low_burden_ratio,
        moderate_ratio=settings.moderate_burden_ratio,
    )

    logger.info(
        "Monthly payment %.2f over %d months: %s",
        payment.monthly_payment, payment.period_count, advice.classification.value,
    )
    return CalculationResult(loan=loan, person=person, payment=payment, advice=advice)
