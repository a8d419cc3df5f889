"""POST /v1/income-tax - Progressive income tax calculation"""

import time
from decimal import Decimal
from fastapi import APIRouter, Request

from toolhub.api.v1.schemas import IncomeTaxRequest, IncomeTaxResponse, LineItemSchema
from toolhub.api.dependencies import get_request_id
from toolhub.api.errors import calculation_errors
from toolhub.domain.brackets import DEFAULT_INCOME_TAX_BRACKETS, allocate
from toolhub.domain.models import Bracket
from toolhub.domain.money import to_decimal
from toolhub.infrastructure.observability.metrics import record_calculation
from toolhub.infrastructure.observability.logging import log_calculation

router = APIRouter()

TOOL = "income_tax"


@router.post("/income-tax", response_model=IncomeTaxResponse)
def income_tax(request_body: IncomeTaxRequest, request: Request):
    """
    Compute income tax on a progressive bracket table.

    Uses the built-in table unless the request supplies its own brackets
    (ascending thresholds, last one open-ended).
    """
    start_time = time.time()
    request_id = get_request_id(request)

    with calculation_errors(TOOL, request_id):
        if request_body.brackets:
            brackets = tuple(
                Bracket(upper_threshold_cents=b.upper_threshold_cents, rate=to_decimal(b.rate))
                for b in request_body.brackets
            )
        else:
            brackets = DEFAULT_INCOME_TAX_BRACKETS

        result = allocate(request_body.income_cents, brackets)

    duration_ms = (time.time() - start_time) * 1000
    record_calculation(TOOL)
    log_calculation(request_id, TOOL, duration_ms, total_tax_cents=result.total_amount_cents)

    return IncomeTaxResponse(
        income_cents=result.quantity_cents,
        total_tax_cents=result.total_amount_cents,
        effective_tax_rate=float(result.effective_rate),
        breakdown=[
            LineItemSchema(
                description=item.description,
                taxable_cents=item.taxable_cents,
                amount_cents=item.amount_cents,
                rate_percent=float(item.rate * Decimal(100)),
            )
            for item in result.line_items
        ],
    )
