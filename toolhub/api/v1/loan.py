"""POST /v1/loan - Loan payment and amortization schedule"""

import time
from fastapi import APIRouter, Request

from toolhub.api.v1.schemas import LoanRequest, LoanResponse, AmortizationEntrySchema
from toolhub.api.dependencies import get_request_id
from toolhub.api.errors import calculation_errors
from toolhub.domain.amortization import amortize
from toolhub.infrastructure.observability.metrics import record_calculation
from toolhub.infrastructure.observability.logging import log_calculation

router = APIRouter()

TOOL = "loan"


@router.post("/loan", response_model=LoanResponse)
def calculate_loan(request_body: LoanRequest, request: Request):
    """
    Monthly payment, totals and full amortization schedule for a loan.

    Totals come from the schedule itself, so they include the adjusted
    final payment.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    with calculation_errors(TOOL, request_id):
        schedule = amortize(
            request_body.loan_amount_cents,
            request_body.annual_interest_rate,
            request_body.loan_term_years,
        )

    duration_ms = (time.time() - start_time) * 1000
    record_calculation(TOOL)
    log_calculation(request_id, TOOL, duration_ms, periods=len(schedule.entries))

    return LoanResponse(
        monthly_payment_cents=schedule.payment_cents,
        total_payment_cents=schedule.total_payment_cents,
        total_interest_cents=schedule.total_interest_cents,
        amortization_schedule=[
            AmortizationEntrySchema(
                month=entry.period,
                principal_cents=entry.principal_cents,
                interest_cents=entry.interest_cents,
                payment_cents=entry.payment_cents,
                remaining_balance_cents=entry.remaining_balance_cents,
            )
            for entry in schedule.entries
        ],
    )
