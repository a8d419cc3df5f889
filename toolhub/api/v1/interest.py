"""Sales tax, simple interest and compound interest endpoints"""

import time
from fastapi import APIRouter, Request

from toolhub.api.v1.schemas import (
    AnnualBreakdownSchema,
    CompoundInterestRequest,
    CompoundInterestResponse,
    SalesTaxRequest,
    SalesTaxResponse,
    SimpleInterestRequest,
    SimpleInterestResponse,
)
from toolhub.api.dependencies import get_request_id
from toolhub.api.errors import calculation_errors
from toolhub.domain.interest import (
    calculate_compound_interest,
    calculate_sales_tax,
    calculate_simple_interest,
)
from toolhub.infrastructure.observability.metrics import record_calculation
from toolhub.infrastructure.observability.logging import log_calculation

router = APIRouter()


def _finish(request_id: str, tool: str, start_time: float) -> None:
    duration_ms = (time.time() - start_time) * 1000
    record_calculation(tool)
    log_calculation(request_id, tool, duration_ms)


@router.post("/sales-tax", response_model=SalesTaxResponse)
def sales_tax(request_body: SalesTaxRequest, request: Request):
    start_time = time.time()
    request_id = get_request_id(request)

    with calculation_errors("sales_tax", request_id):
        result = calculate_sales_tax(request_body.amount_cents, request_body.tax_rate)

    _finish(request_id, "sales_tax", start_time)
    return SalesTaxResponse(
        amount_cents=result.amount_cents,
        tax_rate_applied=float(result.tax_rate_percent),
        tax_cents=result.tax_cents,
        total_cents=result.total_cents,
    )


@router.post("/simple-interest", response_model=SimpleInterestResponse)
def simple_interest(request_body: SimpleInterestRequest, request: Request):
    start_time = time.time()
    request_id = get_request_id(request)

    with calculation_errors("simple_interest", request_id):
        result = calculate_simple_interest(
            request_body.principal_cents,
            request_body.rate,
            request_body.time_years,
        )

    _finish(request_id, "simple_interest", start_time)
    return SimpleInterestResponse(
        principal_cents=result.principal_cents,
        rate=float(result.rate_percent),
        time_years=float(result.time_years),
        interest_cents=result.interest_cents,
        total_cents=result.total_cents,
    )


@router.post("/compound-interest", response_model=CompoundInterestResponse)
def compound_interest(request_body: CompoundInterestRequest, request: Request):
    """Future value with periodic compounding and optional year-end contributions"""
    start_time = time.time()
    request_id = get_request_id(request)

    with calculation_errors("compound_interest", request_id):
        result = calculate_compound_interest(
            request_body.principal_cents,
            request_body.annual_interest_rate,
            request_body.investment_term_years,
            request_body.compounding_frequency,
            request_body.annual_contribution_cents,
        )

    _finish(request_id, "compound_interest", start_time)
    return CompoundInterestResponse(
        future_value_cents=result.future_value_cents,
        total_invested_cents=result.total_invested_cents,
        total_interest_cents=result.total_interest_cents,
        annual_breakdown=[
            AnnualBreakdownSchema(
                year=row.year,
                starting_balance_cents=row.starting_balance_cents,
                interest_cents=row.interest_cents,
                contribution_cents=row.contribution_cents,
                ending_balance_cents=row.ending_balance_cents,
            )
            for row in result.annual_breakdown
        ],
    )
