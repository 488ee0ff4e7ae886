"""
Scanning context logger.

Provides logging interface for scanning context with automatic [scan] prefix.
All scanning modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from scout.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[scan]"


def setup_scanning_logger(log_dir: Path) -> Path:
    """
    Setup logger for scanning context.

    Configures loguru with provenance tracking and scanning-specific context.

    Args:
        log_dir: Directory for this scanning session

    Returns:
        Path to log file

    Example:
        from scout.contexts.scanning.logger import setup_scanning_logger

        log_file = setup_scanning_logger(log_dir)
    """
    return _setup_logger(
        context_name="scan",
        log_dir=log_dir,
        extra_provenance={
            "Tesseract": os.getenv("TESSERACT_CMD", "tesseract"),
            "Tessdata": os.getenv("TESSDATA_DIR"),
        },
    )


# Wrapper functions with automatic [scan] prefix


def _log_info(message: str) -> None:
    """Log info message with [scan] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [scan] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [scan] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [scan] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [scan] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level scanning-specific logging helpers


def log_image_scan_start(image_path: Path) -> None:
    _log_info(f"Scanning image: {image_path.name}")
    _log_debug(f"  Path: {image_path}")


def log_image_scan_result(result) -> None:
    """
    Log the outcome of one image scan.

    Counts and warnings go to the console; each vacancy goes to the debug log.

    Args:
        result: ImageScanResult from VacancyImageScanner.scan_image()
    """
    name = Path(result.image_path).name
    if result.vacancies:
        _log_success(
            f"{name}: {len(result.vacancies)} vacancies "
            f"({result.eligible_count} eligible, confidence {result.ocr_confidence:.1f})"
        )
    else:
        _log_info(f"{name}: no vacancies extracted")

    for warning in result.warnings:
        _log_warning(f"  {name}: {warning}")

    for vacancy in result.vacancies:
        _log_debug(f"  {vacancy}")


def log_directory_summary(directory: Path, summary) -> None:
    """Log the totals of a directory scan (summary is a ScanSummary)."""
    _log_info(f"Directory scan complete: {directory}")
    _log_info(f"  Images scanned: {summary.images_scanned}")
    _log_info(f"  Vacancies: {summary.total_vacancies}")
    _log_info(f"  Eligible: {summary.eligible_count}, ineligible: {summary.ineligible_count}")
