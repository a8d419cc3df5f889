"""POST /v1/bmi and POST /v1/age - personal calculators"""

import time
from fastapi import APIRouter, Request

from toolhub.api.v1.schemas import AgeRequest, AgeResponse, BmiRequest, BmiResponse
from toolhub.api.dependencies import get_request_id
from toolhub.api.errors import calculation_errors
from toolhub.domain.age import calculate_age
from toolhub.domain.bmi import calculate_bmi
from toolhub.infrastructure.observability.metrics import record_calculation
from toolhub.infrastructure.observability.logging import log_calculation

router = APIRouter()


@router.post("/bmi", response_model=BmiResponse)
def bmi(request_body: BmiRequest, request: Request):
    start_time = time.time()
    request_id = get_request_id(request)

    with calculation_errors("bmi", request_id):
        result = calculate_bmi(request_body.weight_kg, request_body.height_cm)

    record_calculation("bmi")
    log_calculation(request_id, "bmi", (time.time() - start_time) * 1000, category=result.category)

    return BmiResponse(
        bmi=float(result.bmi),
        category=result.category,
        weight_kg=float(result.weight_kg),
        height_cm=float(result.height_cm),
    )


@router.post("/age", response_model=AgeResponse)
def age(request_body: AgeRequest, request: Request):
    """Age as of today in years, months and days"""
    start_time = time.time()
    request_id = get_request_id(request)

    with calculation_errors("age", request_id):
        result = calculate_age(request_body.birth_date)

    record_calculation("age")
    log_calculation(request_id, "age", (time.time() - start_time) * 1000)

    return AgeResponse(
        years=result.years,
        months=result.months,
        days=result.days,
        summary=result.summary,
        birth_date_formatted=result.birth_date_formatted,
        today_formatted=result.today_formatted,
    )
