"""Level-payment amortization.

Pure functions: float in, float out. No I/O, no input validation.
Callers reject a zero or negative term before calling; a zero period
count raises ZeroDivisionError from either branch.
"""

import math

from src.models.loan import LoanInput, PaymentResult


def monthly_payment(financed_amount: float, periodic_rate: float, period_count: int) -> float:
    """Periodic payment that fully amortizes financed_amount over period_count periods."""
    if periodic_rate == 0:
        return financed_amount / period_count

    # M = P * [r(1+r)^n] / [(1+r)^n - 1], with (1+r)^n - 1 taken via
    # expm1/log1p so rates near zero keep their precision
    growth = math.expm1(period_count * math.log1p(periodic_rate))
    return financed_amount * periodic_rate * (growth + 1) / growth


def calculate_payment(loan: LoanInput) -> PaymentResult:
    """Convert annual percent/years to monthly terms and compute the payment."""
    financed = loan.financed_amount
    n = loan.period_count
    return PaymentResult(
        monthly_payment=monthly_payment(financed, loan.periodic_rate, n),
        period_count=n,
        financed_amount=financed,
    )
