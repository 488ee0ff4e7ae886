"""
Shared loguru setup for scan sessions.

A scan session writes a detailed DEBUG log file into its own directory and
echoes INFO and above to the console. The session log opens with a provenance
banner so a results file can be traced back to the command that produced it.
Context prefixes and wrappers live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

# Console colors for levels that need to stand out during a scan
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    level_colors: Optional[dict] = None,
) -> Path:
    """
    Start a logging session for one context.

    Replaces any existing loguru handlers with a session log file
    ({log_dir}/{context_name}.log) and a colorized console handler, then
    writes the provenance banner.

    Args:
        context_name: Context identifier, used as the log file name (e.g., "scan")
        log_dir: Session directory, created if missing
        extra_provenance: Extra banner lines, such as the OCR engine and language
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})

    Returns:
        Path to the session log file

    Example:
        from scout.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="scan",
            log_dir=Path("outs/logs/scan_20251114_123456"),
            extra_provenance={"OCR engine": "tesseract"}
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    colors = {**LEVEL_COLORS, **(level_colors or {})}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Write the session banner: how the scan was invoked and where from.

    Extra context entries follow the standard lines, one "key: value" per line.
    """
    logger.info("=" * 80)
    logger.info(f"Script: {sys.argv[0]}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
