"""Budget affordability of a monthly payment.

Two policies, selected by the caller:

    absolute_headroom: payment vs. (income - expenses), plus a savings
        target of 20% of income compared against the payment.
    ratio: payment as a share of (income - expenses):
        < 30%  low burden
        < 50%  moderate burden
        else   high burden
"""

from src.models.advice import AffordabilityAdvice, AffordabilityPolicy, Classification, SavingsGoal
from src.models.loan import PersonInput

RECOMMENDED_SAVINGS_RATE = 0.2
LOW_BURDEN_RATIO = 0.3
MODERATE_BURDEN_RATIO = 0.5

AFFORDABLE_MESSAGE = "You can comfortably afford the monthly mortgage payment."
SHORTFALL_MESSAGE = "You need to save an additional ${gap:,.2f} each month to afford the mortgage payment."
REACHABLE_MESSAGE = "You are on track to afford a home within your financial reach!"
UNREACHABLE_MESSAGE = "Consider adjusting your financial goals or exploring homes in a lower price range."

RATIO_MESSAGES = {
    Classification.LOW_BURDEN: "Your mortgage is affordable based on your financial details.",
    Classification.MODERATE_BURDEN: "Your mortgage payments are manageable but consider lowering other expenses.",
    Classification.HIGH_BURDEN: (
        "Your mortgage payments may be too high; consider a larger down payment or a lower loan amount."
    ),
}


def absolute_headroom_advice(
    income: float,
    expenses: float,
    payment: float,
    savings_rate: float = RECOMMENDED_SAVINGS_RATE,
) -> AffordabilityAdvice:
    disposable = PersonInput(monthly_income=income, monthly_expenses=expenses).disposable_income

    if disposable >= payment:
        classification = Classification.AFFORDABLE
        shortfall = 0.0
        message = AFFORDABLE_MESSAGE
    else:
        classification = Classification.SHORTFALL
        shortfall = payment - disposable
        message = SHORTFALL_MESSAGE.format(gap=shortfall)

    recommended = income * savings_rate
    if recommended < payment:
        goal, goal_message = SavingsGoal.UNREACHABLE, UNREACHABLE_MESSAGE
    else:
        goal, goal_message = SavingsGoal.REACHABLE, REACHABLE_MESSAGE

    return AffordabilityAdvice(
        policy=AffordabilityPolicy.ABSOLUTE_HEADROOM,
        classification=classification,
        message=message,
        recommended_savings=recommended,
        disposable_income=disposable,
        shortfall=shortfall,
        savings_goal=goal,
        savings_message=goal_message,
    )


def ratio_advice(
    income: float,
    expenses: float,
    payment: float,
    savings_rate: float = RECOMMENDED_SAVINGS_RATE,
    low_ratio: float = LOW_BURDEN_RATIO,
    moderate_ratio: float = MODERATE_BURDEN_RATIO,
) -> AffordabilityAdvice:
    disposable = PersonInput(monthly_income=income, monthly_expenses=expenses).disposable_income

    # A negative ratio would otherwise read as "affordable"
    if disposable <= 0:
        classification = Classification.HIGH_BURDEN
    elif payment < disposable * low_ratio:
        classification = Classification.LOW_BURDEN
    elif payment < disposable * moderate_ratio:
        classification = Classification.MODERATE_BURDEN
    else:
        classification = Classification.HIGH_BURDEN

    return AffordabilityAdvice(
        policy=AffordabilityPolicy.RATIO,
        classification=classification,
        message=RATIO_MESSAGES[classification],
        recommended_savings=income * savings_rate,
        disposable_income=disposable,
    )


def compute_affordability(
    income: float,
    expenses: float,
    payment: float,
    policy: AffordabilityPolicy = AffordabilityPolicy.ABSOLUTE_HEADROOM,
    savings_rate: float = RECOMMENDED_SAVINGS_RATE,
    low_ratio: float = LOW_BURDEN_RATIO,
    moderate_ratio: float = MODERATE_BURDEN_RATIO,
) -> AffordabilityAdvice:
    """Classify a monthly payment against monthly income and expenses."""
    if policy is AffordabilityPolicy.RATIO:
        return ratio_advice(income, expenses, payment, savings_rate, low_ratio, moderate_ratio)
    return absolute_headroom_advice(income, expenses, payment, savings_rate)
