# Сторінка з формою, таблицею розподілу та діаграмою

import logging
import math

from fastapi import APIRouter, Query, status
from fastapi.responses import HTMLResponse

from core.config import settings
from core.templates import env as templates_env
from models.distribution import ErrorResponse
from services import distribution_service

logger = logging.getLogger(__name__)

router = APIRouter()

# Палітра діаграми, по кольору на кожен рядок звіту
CHART_COLORS = [
    "#3366cc", "#dc3912", "#ff9900", "#109618", "#990099",
    "#0099c6", "#dd4477", "#66aa00", "#b82e2e", "#316395",
    "#994499", "#22aa99", "#aaaa11",
]


def _parse_amount(raw: str | None) -> float | None:
    # Порожнє поле форми приходить як ""
    if raw is None or not raw.strip():
        return None
    try:
        amount = float(raw)
    except ValueError:
        return None
    # nan та inf вважаємо порожнім значенням
    return amount if math.isfinite(amount) else None


def build_diagnostics(report, employer_cost: float | None) -> list[tuple[str, float]]:
    rows = [
        ("Total withheld (gross - net)", report.withheld),
        ("Estimated personal income tax", report.personal_income_tax),
        ("Employee contributions", report.employee_contributions),
        ("Employer contributions", report.employer_contributions),
    ]
    if employer_cost is not None:
        rows.append(("Employer cost difference (cost - gross)", employer_cost - report.gross_salary))
    return rows


@router.get("/", response_class=HTMLResponse)
def index_page(
    gross_salary: str | None = Query(None, alias="grossSalary"),
    net_salary: str | None = Query(None, alias="netSalary"),
    employer_cost: str | None = Query(None, alias="employerCost"),
):
    """
    Рендерить форму; якщо передано брутто й нетто, то ще й результати.
    """
    context = {
        "title": settings.APP_TITLE,
        "currency": settings.CURRENCY_SYMBOL,
        "form": {
            "grossSalary": gross_salary or "",
            "netSalary": net_salary or "",
            "employerCost": employer_cost or "",
        },
        "report": None,
        "diagnostics": [],
        "chart": None,
        "error": None,
    }
    status_code = status.HTTP_200_OK

    if gross_salary is not None or net_salary is not None:
        gross = _parse_amount(gross_salary)
        net = _parse_amount(net_salary)
        if gross is None or net is None:
            context["error"] = "Please enter valid numeric values for gross and net salary."
            status_code = status.HTTP_400_BAD_REQUEST
        else:
            result = distribution_service.compute_distribution(gross, net)
            if isinstance(result, ErrorResponse):
                logger.warning(f"Rejected salary values on page gross={gross} net={net}: {result.error}")
                context["error"] = result.error
                status_code = status.HTTP_400_BAD_REQUEST
            else:
                context["report"] = result
                context["diagnostics"] = build_diagnostics(result, _parse_amount(employer_cost))
                context["chart"] = {
                    "labels": [entry.name for entry in result.breakdown],
                    "values": [entry.amount for entry in result.breakdown],
                    "colors": CHART_COLORS,
                }

    template = templates_env.get_template("index.html")
    return HTMLResponse(content=template.render(**context), status_code=status_code)
