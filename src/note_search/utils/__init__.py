"""Utils package exports"""

from note_search.utils.logger import setup_logger
from note_search.utils.file_handler import load_documents, read_json

__all__ = [
    "setup_logger",
    "load_documents",
    "read_json",
]
