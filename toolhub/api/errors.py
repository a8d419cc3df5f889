"""Mapping of domain exceptions to HTTP responses"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException

from toolhub.domain.exceptions import InvalidArgumentError
from toolhub.infrastructure.observability.metrics import record_invalid_argument


@contextmanager
def calculation_errors(tool: str, request_id: str) -> Iterator[None]:
    """
    Translate calculator failures raised inside the block.

    InvalidArgumentError -> 422 with the validation message
    anything else        -> 500, details only in the log
    """
    try:
        yield
    except InvalidArgumentError as e:
        record_invalid_argument(tool)
        logging.warning(f"Invalid input for {tool}: {e}", extra={"request_id": request_id, "tool": tool})
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logging.error(f"Unexpected error in {tool}: {e}", extra={"request_id": request_id, "tool": tool})
        raise HTTPException(status_code=500, detail="Internal server error")
