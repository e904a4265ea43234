"""Console mortgage calculator.

Usage:
    python -m src.cli
    python -m src.cli --loan-amount 250000 --down-payment 50000 --rate 6 --term 30 \
        --income 5000 --expenses 3000 --policy ratio

Any field not given as a flag is prompted for.
"""

import argparse
import logging
import sys
from typing import Callable

from pydantic import ValidationError

from src.config import settings
from src.engine.calculator import CalculationError, run_calculation
from src.models.advice import AffordabilityPolicy
from src.report import report_lines
from src.schemas import CalculationRequest, describe_errors

logger = logging.getLogger(__name__)

# Prompt order follows the session: loan details first, then the budget
PROMPTS = [
    ("name", "Enter your name: "),
    ("loan_amount", "Enter loan amount: "),
    ("annual_rate_pct", "Enter annual interest rate (as a percentage, e.g., 5 for 5%): "),
    ("term_years", "Enter loan term (in years): "),
    ("down_payment", "Enter down payment amount: "),
    ("monthly_income", "Enter your monthly salary: "),
    ("monthly_expenses", "Enter your monthly expenses: "),
]

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

FLAG_MAP = {
    "name": "name",
    "loan_amount": "loan_amount",
    "rate": "annual_rate_pct",
    "term": "term_years",
    "down_payment": "down_payment",
    "income": "monthly_income",
    "expenses": "monthly_expenses",
    "policy": "policy",
}


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def collect_request(
    values: dict,
    ask: Callable[[str], str] | None = None,
    say: Callable[[str], None] | None = None,
) -> CalculationRequest:
    """Prompt for missing fields until they validate.

    Fields already present in `values` are not re-asked; a validation
    error on one of them is raised to the caller.
    """
    ask = ask or input
    say = say or print
    given = set(values)
    values = dict(values)

    while True:
        for field, prompt in PROMPTS:
            if field not in values:
                values[field] = ask(prompt).strip()

        try:
            return CalculationRequest(**values)
        except ValidationError as e:
            bad = {str(err["loc"][0]) for err in e.errors() if err["loc"]}
            if bad & given:
                raise
            say("Please enter valid numeric values.")
            for line in describe_errors(e):
                say(f"  {line}")
            for field in bad:
                values.pop(field, None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mortgage payment and affordability calculator")
    parser.add_argument("--name", help="Your name (for the greeting)")
    parser.add_argument("--loan-amount", type=float, help="Loan amount before down payment")
    parser.add_argument("--down-payment", type=float, help="Down payment amount")
    parser.add_argument("--rate", type=float, help="Annual interest rate as a percentage, e.g. 5 for 5%%")
    parser.add_argument("--term", type=int, help="Loan term in years")
    parser.add_argument("--income", type=float, help="Monthly salary")
    parser.add_argument("--expenses", type=float, help="Monthly expenses")
    parser.add_argument(
        "--policy",
        choices=[p.value for p in AffordabilityPolicy],
        default=None,
        help=f"Affordability policy (default: {settings.default_policy})",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level.upper(),
        help=f"Logging level (default: {settings.log_level})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    values = {}
    for cli_name, field in FLAG_MAP.items():
        val = getattr(args, cli_name)
        if val is not None:
            values[field] = val

    try:
        request = collect_request(values)
    except ValidationError as e:
        parser.error("; ".join(describe_errors(e)))
    except EOFError:
        print("\nInput ended before all values were entered.", file=sys.stderr)
        return 1

    try:
        result = run_calculation(request)
    except CalculationError as e:
        logger.warning("Calculation failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _header("Mortgage Summary")
    for line in report_lines(result):
        print(f"  {line}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
