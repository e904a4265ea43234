from dataclasses import dataclass


@dataclass(frozen=True)
class LoanInput:
    principal: float
    down_payment: float = 0.0  # Not checked against principal
    annual_rate_pct: float = 0.0  # e.g. 6 for 6%
    term_years: int = 30

    @property
    def periodic_rate(self) -> float:
        return self.annual_rate_pct / 100 / 12

    @property
    def period_count(self) -> int:
        return self.term_years * 12

    @property
    def financed_amount(self) -> float:
        return self.principal - self.down_payment


@dataclass(frozen=True)
class PersonInput:
    monthly_income: float
    monthly_expenses: float = 0.0
    name: str = ""

    @property
    def disposable_income(self) -> float:
        # May be negative
        return self.monthly_income - self.monthly_expenses


@dataclass(frozen=True)
class PaymentResult:
    monthly_payment: float
    period_count: int
    financed_amount: float

    @property
    def total_cost(self) -> float:
        return self.monthly_payment * self.period_count

    @property
    def total_interest(self) -> float:
        return self.total_cost - self.financed_amount
