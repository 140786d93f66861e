from __future__ import annotations

import logging
import os
import tempfile
from typing import Optional

import pandas as pd

from .converter import build_rows, convert, derive_headers, load_document
from .io_utils import read_json_text

logger = logging.getLogger(__name__)

PREVIEW_LIMIT = 5


def convert_handler(json_text: Optional[str], delimiter: Optional[str]):
    result = convert(json_text, delimiter)
    if not result.ok:
        return "", result.error.message
    return result.text, "Conversion successful."


def preview_rows_handler(json_text: Optional[str], delimiter: Optional[str], limit: int = PREVIEW_LIMIT):
    """Tabular preview of the first rows, or None when the input does not convert."""
    if not convert(json_text, delimiter).ok:
        return None

    items = load_document(json_text)
    headers = derive_headers(items[0])
    rows = build_rows(items[:max(1, int(limit))], headers)
    return pd.DataFrame(rows, columns=headers)


def convert_and_preview_handler(json_text: Optional[str], delimiter: Optional[str]):
    csv_text, message = convert_handler(json_text, delimiter)
    return csv_text, message, preview_rows_handler(json_text, delimiter)


def load_uploaded_json(file_obj):
    if file_obj is None:
        return "", "No file uploaded."

    try:
        text = read_json_text(file_obj)
    except (OSError, UnicodeDecodeError) as e:
        return "", f"Error reading file: {str(e)}"

    return text, "File loaded. Press Convert to generate the CSV."


def export_csv_handler(json_text: Optional[str], delimiter: Optional[str], file_name: Optional[str] = None):
    result = convert(json_text, delimiter)
    if not result.ok:
        return None, result.error.message

    if not file_name or not file_name.strip():
        file_name = "output"
    file_name = os.path.basename(file_name.strip())
    if not file_name.lower().endswith(".csv"):
        file_name += ".csv"

    path = os.path.join(tempfile.gettempdir(), file_name)

    try:
        with open(path, 'w', newline='', encoding='utf-8') as f:
            f.write(result.text)
    except OSError as e:
        logger.exception("Failed to write CSV export to %s", path)
        return None, f"Error during export: {str(e)}"

    return path, f"Export successful! Saved to {path}"
