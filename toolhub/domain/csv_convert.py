"""CSV text to JSON array conversion"""

import csv
import io
import json
import logging
from typing import Dict, List, Tuple

from toolhub.domain.exceptions import InvalidArgumentError
from toolhub.domain.models import CsvConversionResult

logger = logging.getLogger(__name__)

JSON_INDENT = 2


def _is_blank(row: List[str]) -> bool:
    return not row or (len(row) == 1 and not row[0].strip())


def csv_to_records(csv_text: str) -> Tuple[List[Dict[str, str]], List[int]]:
    """
    Parse CSV text into one dict per data row, keyed by the header row.

    - Surrounding whitespace of the text and of every field is trimmed
    - Quoted fields may contain commas, newlines and doubled quotes ("")
    - Blank lines are skipped
    - A row whose field count differs from the header is dropped and
      logged; its starting line number is returned

    Returns:
        (records, skipped line numbers)

    Raises:
        InvalidArgumentError: The csv module could not parse the text
    """
    text = csv_text.strip()
    if not text:
        return [], []

    reader = csv.reader(io.StringIO(text), skipinitialspace=True)
    records: List[Dict[str, str]] = []
    skipped: List[int] = []

    try:
        headers = [field.strip() for field in next(reader)]
        start_line = reader.line_num + 1
        for row in reader:
            line_number = start_line
            start_line = reader.line_num + 1
            if _is_blank(row):
                continue

            if len(row) != len(headers):
                logger.warning(
                    f"Skipping line {line_number} due to column mismatch: "
                    f"expected {len(headers)}, got {len(row)}",
                    extra={"line_number": line_number},
                )
                skipped.append(line_number)
                continue

            records.append({header: value.strip() for header, value in zip(headers, row)})
    except csv.Error as e:
        raise InvalidArgumentError(f"Conversion failed: {e}")

    return records, skipped


def convert_csv_to_json(csv_text: str) -> CsvConversionResult:
    """CSV text to a pretty-printed JSON array of objects (2-space indent)"""
    records, skipped = csv_to_records(csv_text)
    return CsvConversionResult(
        records=records,
        skipped_lines=skipped,
        json_text=json.dumps(records, indent=JSON_INDENT, ensure_ascii=False),
    )
