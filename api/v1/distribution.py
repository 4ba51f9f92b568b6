# API роутер для розрахунку розподілу зарплати

import logging

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from models.distribution import DistributionReport, ErrorResponse
from services import distribution_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/calculate",
    response_model=DistributionReport,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def calculate_distribution_endpoint(
    gross_salary: float = Query(alias="grossSalary"),
    net_salary: float = Query(alias="netSalary"),
):
    """
    Повертає внески, орієнтовний податок на доходи та його розподіл
    за статтями видатків. Суми не округлюються.
    """
    result = distribution_service.compute_distribution(gross_salary, net_salary)
    if isinstance(result, ErrorResponse):
        logger.warning(f"Rejected salary values gross={gross_salary} net={net_salary}: {result.error}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=result.model_dump())
    return result
