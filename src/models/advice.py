from dataclasses import dataclass
from enum import Enum


class AffordabilityPolicy(Enum):
    ABSOLUTE_HEADROOM = "absolute_headroom"
    RATIO = "ratio"


class Classification(Enum):
    # Absolute-headroom policy
    AFFORDABLE = "affordable"
    SHORTFALL = "shortfall"
    # Ratio policy
    LOW_BURDEN = "low_burden"
    MODERATE_BURDEN = "moderate_burden"
    HIGH_BURDEN = "high_burden"


class SavingsGoal(Enum):
    REACHABLE = "reachable"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class AffordabilityAdvice:
    policy: AffordabilityPolicy
    classification: Classification
    message: str
    recommended_savings: float
    disposable_income: float
    shortfall: float = 0.0  # Payment minus disposable income, headroom only
    savings_goal: SavingsGoal | None = None
    savings_message: str | None = None
