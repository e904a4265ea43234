"""Plotly Dash mortgage calculator form."""

import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path so `src.*` imports work
# even when Dash's reloader spawns a child process.
_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import plotly.graph_objects as go
from dash import Dash, html, dcc, callback, Input, Output, State, no_update
from pydantic import ValidationError

from src.config import settings
from src.engine.calculator import CalculationError, CalculationResult, run_calculation
from src.models.advice import AffordabilityPolicy
from src.report import format_currency, report_lines
from src.schemas import CalculationRequest, describe_errors

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Please enter valid numeric values."

BTN_STYLE = {
    "padding": "0.75rem 2rem",
    "fontSize": "1rem",
    "backgroundColor": "#1a1a2e",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
}

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

# (component id, label, request field)
FORM_FIELDS = [
    ("salary-input", "Monthly Salary", "monthly_income"),
    ("expenses-input", "Monthly Expenses", "monthly_expenses"),
    ("loan-amount-input", "Loan Amount", "loan_amount"),
    ("down-payment-input", "Down Payment", "down_payment"),
    ("rate-input", "Annual Interest Rate (%)", "annual_rate_pct"),
    ("term-input", "Loan Term (years)", "term_years"),
]

POLICY_OPTIONS = [
    {"label": "Absolute headroom", "value": AffordabilityPolicy.ABSOLUTE_HEADROOM.value},
    {"label": "Share of disposable income", "value": AffordabilityPolicy.RATIO.value},
]

CLASSIFICATION_COLORS = {
    "affordable": "#2ecc71",
    "low_burden": "#2ecc71",
    "moderate_burden": "#f39c12",
    "shortfall": "#e94560",
    "high_burden": "#e94560",
}


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "140px"})


def build_request(name, values: dict, policy) -> CalculationRequest:
    """Form values keyed by request field -> validated request.

    Empty inputs arrive as None and fail validation like bad ones do.
    """
    return CalculationRequest(name=name or "", policy=policy, **values)


def calculate_from_form(name, values: dict, policy) -> tuple[list[str], CalculationResult | None]:
    """Lines to display plus the result, or error lines and None."""
    try:
        request = build_request(name, values, policy)
    except ValidationError as e:
        logger.debug("Form rejected: %s", describe_errors(e))
        return [INVALID_INPUT_MESSAGE, *describe_errors(e)], None

    try:
        result = run_calculation(request)
    except CalculationError as e:
        logger.warning("Calculation failed: %s", e)
        return [str(e)], None

    return report_lines(result), result


def cost_breakdown_figure(result: CalculationResult) -> go.Figure:
    payment = result.payment
    fig = go.Figure()
    fig.add_trace(go.Pie(
        labels=["Principal", "Interest"],
        values=[max(payment.financed_amount, 0.0), max(payment.total_interest, 0.0)],
        marker={"colors": ["#1a1a2e", "#e94560"]},
        hole=0.4,
    ))
    fig.update_layout(
        title=f"Total Cost {format_currency(payment.total_cost)}",
        height=320,
        margin={"t": 50, "b": 10, "l": 10, "r": 10},
    )
    return fig


app = Dash(
    __name__,
    suppress_callback_exceptions=True,
    title="Mortgage Calculator",
)

app.layout = html.Div([
    html.Nav([
        html.H1("Mortgage Calculator", style={"fontSize": "1.5rem", "margin": "0 auto", "maxWidth": "900px"}),
    ], style={
        "backgroundColor": "#1a1a2e",
        "color": "white",
        "padding": "1rem",
        "marginBottom": "2rem",
    }),

    html.Div([
        html.Div([
            _field("Name", dcc.Input(id="name-input", type="text", style=FIELD_STYLE)),
            _field("Affordability Policy", dcc.Dropdown(
                id="policy-select",
                options=POLICY_OPTIONS,
                value=settings.default_policy,
                clearable=False,
            )),
        ], style={"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"}),
        html.Div([
            _field(label, dcc.Input(id=component_id, type="number", min=0, style=FIELD_STYLE))
            for component_id, label, _ in FORM_FIELDS[:3]
        ], style={"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"}),
        html.Div([
            _field(label, dcc.Input(id=component_id, type="number", min=0, style=FIELD_STYLE))
            for component_id, label, _ in FORM_FIELDS[3:]
        ], style={"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"}),
        html.Div([
            html.Button("Calculate", id="calculate-btn", n_clicks=0, style=BTN_STYLE),
            html.Button("Reset", id="reset-btn", n_clicks=0, style={**BTN_STYLE, "backgroundColor": "#555"}),
        ], style={"display": "flex", "gap": "0.5rem", "marginBottom": "1.5rem"}),

        html.H4("Monthly Payment & Recommendation"),
        html.Div(id="result-area"),
        dcc.Graph(id="cost-chart", style={"display": "none"}),
    ], style={"maxWidth": "900px", "margin": "0 auto", "padding": "0 1rem"}),
])


@callback(
    [
        Output("result-area", "children"),
        Output("cost-chart", "figure"),
        Output("cost-chart", "style"),
    ],
    Input("calculate-btn", "n_clicks"),
    [State("name-input", "value"), State("policy-select", "value")]
    + [State(component_id, "value") for component_id, _, _ in FORM_FIELDS],
    prevent_initial_call=True,
)
def calculate(n_clicks, name, policy, *field_values):
    values = {field: value for (_, _, field), value in zip(FORM_FIELDS, field_values)}
    lines, result = calculate_from_form(name, values, policy)

    if result is None:
        return html.Div([html.P(line) for line in lines], style={"color": "#e94560"}), no_update, {"display": "none"}

    advice = result.advice
    color = CLASSIFICATION_COLORS.get(advice.classification.value, "#333")
    children = html.Div([
        html.P(
            f"Monthly Payment: {format_currency(result.payment.monthly_payment)}",
            style={"fontSize": "1.25rem", "fontWeight": "bold"},
        ),
        *[
            html.P(line, style={"color": color, "fontWeight": "bold"}) if line == advice.message else html.P(line)
            for line in lines
        ],
    ])
    return children, cost_breakdown_figure(result), {"display": "block"}


@callback(
    [Output("name-input", "value")]
    + [Output(component_id, "value") for component_id, _, _ in FORM_FIELDS]
    + [Output("result-area", "children", allow_duplicate=True), Output("cost-chart", "style", allow_duplicate=True)],
    Input("reset-btn", "n_clicks"),
    prevent_initial_call=True,
)
def reset_fields(n_clicks):
    return [""] + [None] * len(FORM_FIELDS) + [[], {"display": "none"}]


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper())
    app.run(debug=settings.debug, port=settings.dashboard_port)
