"""
Logger setup using loguru.

Console and file handlers keep records from the note_search package at the
configured level; records from other modules only get through at WARNING
or above.
"""

import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from loguru import logger

from note_search.config import settings

PACKAGE = "note_search"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def package_filter(package: str = PACKAGE) -> Callable[[Dict], bool]:
    """Keep package records and warnings from anywhere else."""
    warning_no = logger.level("WARNING").no

    def keep(record: Dict) -> bool:
        name = record["name"] or ""
        if name == package or name.startswith(package + "."):
            return True
        return record["level"].no >= warning_no

    return keep


def setup_logger(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    rotation: str = "10 MB",
    retention: str = "1 week"
) -> List[int]:
    """
    Configure loguru logger.

    Args:
        level: Log level name, any case (settings.log_level if omitted)
        log_file: Path to log file (settings.log_file if omitted)
        rotation: Log rotation policy
        retention: Log retention policy

    Returns:
        IDs of the installed handlers
    """
    logger.remove()

    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file
    keep = package_filter()

    handler_ids = [
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, filter=keep, colorize=True)
    ]

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        handler_ids.append(logger.add(
            str(log_file),
            format=FILE_FORMAT,
            level=level,
            filter=keep,
            rotation=rotation,
            retention=retention,
            compression="zip",
            diagnose=False
        ))

        logger.info(f"Logging note-search output to file: {log_file}")

    logger.debug(f"Logger configured with level: {level}")
    return handler_ids
