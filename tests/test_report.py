from src.engine.calculator import run_calculation
from src.models.advice import AffordabilityPolicy
from src.report import format_currency, report_lines


class TestFormatCurrency:
    def test_two_decimals_with_grouping(self):
        assert format_currency(1234.5) == "$1,234.50"
        assert format_currency(0) == "$0.00"

    def test_negative(self):
        assert format_currency(-500) == "-$500.00"


class TestReportLines:
    def test_headroom_report(self, canonical_request):
        lines = report_lines(run_calculation(canonical_request, AffordabilityPolicy.ABSOLUTE_HEADROOM))
        assert lines[0] == "Hello Ada, your monthly mortgage payment is: $1,199.10"
        assert lines[1] == "Total cost of the loan over 30 years: $431,676.38"
        assert lines[2] == "Your disposable income each month: $2,000.00"
        assert lines[3] == "You can comfortably afford the monthly mortgage payment."
        assert lines[4] == "It's recommended that you save at least $1,000.00 per month."
        assert len(lines) == 6

    def test_ratio_report_has_no_savings_goal_line(self, canonical_request):
        lines = report_lines(run_calculation(canonical_request, AffordabilityPolicy.RATIO))
        assert len(lines) == 5
        assert "too high" in lines[3]

    def test_anonymous_greeting(self, canonical_request):
        request = canonical_request.model_copy(update={"name": ""})
        lines = report_lines(run_calculation(request))
        assert lines[0].startswith("Your monthly mortgage payment is: ")
