from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .errors import ConversionResult, ErrorKind

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ','


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def load_document(json_text: str) -> Any:
    """Parse standard JSON, keeping non-integer numbers as exact `Decimal`s."""
    return json.loads(json_text, parse_float=Decimal, parse_constant=_reject_constant)


def normalize_delimiter(delimiter: Optional[str]) -> str:
    if delimiter is None or not delimiter.strip():
        return DEFAULT_DELIMITER
    return delimiter


def _render_json(value: Any) -> str:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, dict):
        return '{' + ','.join(
            json.dumps(k, ensure_ascii=False) + ':' + _render_json(v) for k, v in value.items()
        ) + '}'
    if isinstance(value, list):
        return '[' + ','.join(_render_json(v) for v in value) + ']'
    return json.dumps(value, ensure_ascii=False)


def stringify_value(value: Any) -> str:
    """Render a JSON value as cell text.

    Strings render their raw text; every other value renders its compact
    JSON literal (`1`, `2.50`, `true`, `null`, `{"a":1}`). Non-integer
    numbers keep the precision they were written with.
    """
    if isinstance(value, str):
        return value
    return _render_json(value)


def escape_field(field: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Quote a field when it holds a quote, the delimiter or a line break."""
    # Hand-rolled because csv.writer only accepts single-character delimiters.
    if not field:
        return ''
    if '"' in field or (delimiter and delimiter in field) or '\n' in field or '\r' in field:
        return '"' + field.replace('"', '""') + '"'
    return field


def derive_headers(first_item: Dict[str, Any]) -> List[str]:
    return list(first_item.keys())


def build_rows(items: List[Any], headers: List[str]) -> List[List[str]]:
    """Map every array element onto the header set.

    Non-object elements produce a row of empty cells; absent keys produce
    an empty cell.
    """
    rows: List[List[str]] = []
    for item in items:
        if not isinstance(item, dict):
            rows.append([''] * len(headers))
            continue
        rows.append([stringify_value(item[h]) if h in item else '' for h in headers])
    return rows


def _convert(json_text: Optional[str], delimiter: str) -> ConversionResult:
    if json_text is None or not json_text.strip():
        return ConversionResult.failure(ErrorKind.EMPTY_INPUT)

    try:
        data = load_document(json_text)
    except ValueError as e:
        logger.info("Rejected malformed JSON: %s", e)
        return ConversionResult.failure(ErrorKind.INVALID_JSON)

    if not isinstance(data, list) or not data:
        return ConversionResult.failure(ErrorKind.NOT_AN_ARRAY)

    if not isinstance(data[0], dict):
        return ConversionResult.failure(ErrorKind.FIRST_ITEM_NOT_OBJECT)

    headers = derive_headers(data[0])
    lines = [delimiter.join(escape_field(h, delimiter) for h in headers)]
    for row in build_rows(data, headers):
        lines.append(delimiter.join(escape_field(cell, delimiter) for cell in row))

    text = '\n'.join(lines)
    # Lone surrogate escapes ("\ud800") parse but cannot be written as UTF-8.
    text.encode('utf-8')
    return ConversionResult.success(text)


def convert(json_text: Optional[str], delimiter: Optional[str] = DEFAULT_DELIMITER) -> ConversionResult:
    """Convert a JSON array of objects into delimited text.

    The header row comes from the first element's keys, in order. Rows are
    joined with a bare line feed and there is no trailing newline.

    Validation failures are returned in the result, never raised. Any
    other exception is logged and reported as an internal error; no
    partial output is ever returned.
    """
    delimiter = normalize_delimiter(delimiter)
    try:
        result = _convert(json_text, delimiter)
    except Exception as e:
        logger.exception("Unexpected failure while converting JSON to CSV")
        return ConversionResult.failure(ErrorKind.INTERNAL_ERROR, str(e))

    if not result.ok:
        logger.info("Conversion rejected: %s", result.error.kind.value)
    return result
