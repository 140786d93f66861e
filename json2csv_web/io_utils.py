from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


def read_json_text(file_obj) -> str:
    """Read raw JSON text from an uploaded file or file path.

    The text is returned unparsed; validation is the converter's job.
    """
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8-sig')
        return content

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8-sig') as f:
        return f.read()


def load_example_json(path: Union[str, Path]) -> str:
    """Return the example document's text, or "" when it cannot be read."""
    try:
        path = Path(path)
        if not path.is_file():
            return ""
        return path.read_text(encoding='utf-8-sig')
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not load example JSON from %s: %s", path, e)
        return ""
