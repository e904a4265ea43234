"""Text rendering of a CalculationResult, shared by both front-ends."""

from src.engine.calculator import CalculationResult


def format_currency(amount: float) -> str:
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def report_lines(result: CalculationResult) -> list[str]:
    payment = result.payment
    advice = result.advice

    greeting = f"Hello {result.name}, your" if result.name else "Your"
    lines = [
        f"{greeting} monthly mortgage payment is: {format_currency(payment.monthly_payment)}",
        f"Total cost of the loan over {result.loan.term_years} years: {format_currency(payment.total_cost)}",
        f"Your disposable income each month: {format_currency(advice.disposable_income)}",
        advice.message,
        f"It's recommended that you save at least {format_currency(advice.recommended_savings)} per month.",
    ]
    if advice.savings_message:
        lines.append(advice.savings_message)
    return lines
