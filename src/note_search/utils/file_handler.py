"""
File handling utilities for reading exported entries.

All file operations use Path objects for cross-platform compatibility.
"""

import json
from pathlib import Path
from typing import Any, List

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from note_search.exceptions import DocumentStoreError, FileHandlerError
from note_search.schemas.document import Document

_DOCUMENT_LIST = TypeAdapter(List[Document])


def read_json(file_path: Path) -> Any:
    """
    Read JSON file.

    Args:
        file_path: Path to JSON file

    Returns:
        Parsed JSON value
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileHandlerError(f"File not found: {file_path}")

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise FileHandlerError(f"Invalid JSON in {file_path}: {e}")


def load_documents(file_path: Path) -> List[Document]:
    """
    Load entries from a JSON file.

    Accepts either a list of entries or an object with an ``entries`` list.

    Args:
        file_path: Path to JSON file

    Returns:
        Documents in file order
    """
    data = read_json(file_path)
    if isinstance(data, dict):
        data = data.get("entries", [])

    try:
        documents = _DOCUMENT_LIST.validate_python(data)
    except ValidationError as e:
        raise DocumentStoreError(f"Invalid entries in {file_path}: {e}")

    logger.info(f"Loaded {len(documents)} entries from {file_path}")
    return documents
