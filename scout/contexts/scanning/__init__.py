"""
Scanning Context

Responsibilities:
- Validates screenshot paths and enumerates image folders
- Orchestrates OCR, extraction and eligibility per image
- Reports non-fatal problems as scan warnings
- Aggregates per-image results into directory summaries

Owns: Scan orchestration, scanner configuration, eligibility gate, scan results
Never: Implements OCR or field heuristics itself
"""

from scout.contexts.scanning.config import ScannerSettings, load_scanner_settings
from scout.contexts.scanning.eligibility import (
    EligibilityAssessment,
    EligibilityGate,
    filter_eligible,
    is_eligible,
)
from scout.contexts.scanning.exceptions import ScanInputError
from scout.contexts.scanning.image_scanner import VacancyImageScanner
from scout.contexts.scanning.scan_data_structure import (
    SUPPORTED_EXTENSIONS,
    ImageScanResult,
    ScanIssue,
    ScanSummary,
    ScanWarning,
)


def scan_image(image_path, scanner: VacancyImageScanner = None) -> ImageScanResult:
    """Scan one screenshot with a default-configured scanner."""
    return (scanner or VacancyImageScanner(settings=load_scanner_settings())).scan_image(image_path)


def scan_directory(directory, search_pattern: str = "*.*", scanner: VacancyImageScanner = None) -> ScanSummary:
    """Scan a folder of screenshots with a default-configured scanner."""
    scanner = scanner or VacancyImageScanner(settings=load_scanner_settings())
    return scanner.scan_directory(directory, search_pattern)


__all__ = [
    # Entry points
    "scan_image",
    "scan_directory",
    "VacancyImageScanner",
    # Results
    "ImageScanResult",
    "ScanSummary",
    "ScanWarning",
    "ScanIssue",
    "ScanInputError",
    "SUPPORTED_EXTENSIONS",
    # Eligibility
    "EligibilityGate",
    "EligibilityAssessment",
    "is_eligible",
    "filter_eligible",
    # Configuration
    "ScannerSettings",
    "load_scanner_settings",
]
