"""POST /v1/csv-to-json - CSV text conversion"""

import time
from fastapi import APIRouter, Request

from toolhub.api.v1.schemas import CsvToJsonRequest, CsvToJsonResponse
from toolhub.api.dependencies import get_request_id
from toolhub.api.errors import calculation_errors
from toolhub.domain.csv_convert import convert_csv_to_json
from toolhub.infrastructure.observability.metrics import record_calculation
from toolhub.infrastructure.observability.logging import log_calculation

router = APIRouter()


@router.post("/csv-to-json", response_model=CsvToJsonResponse)
def csv_to_json(request_body: CsvToJsonRequest, request: Request):
    """Convert CSV with a header row to a JSON array; mismatched rows are reported, not fatal"""
    start_time = time.time()
    request_id = get_request_id(request)

    with calculation_errors("csv_to_json", request_id):
        result = convert_csv_to_json(request_body.csv_text)

    record_calculation("csv_to_json")
    log_calculation(
        request_id,
        "csv_to_json",
        (time.time() - start_time) * 1000,
        row_count=len(result.records),
        skipped_count=len(result.skipped_lines),
    )

    return CsvToJsonResponse(
        json_text=result.json_text,
        row_count=len(result.records),
        skipped_lines=result.skipped_lines,
    )
