"""
Scan data structures: targets, warnings, per-image results and summaries.

Results are plain containers built fresh for each scan call. Nothing here is
persisted; to_dict() exists for JSON export by the CLI.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from scout.contexts.extraction.vacancy_data_structure import ExtractedVacancy
from scout.contexts.scanning.eligibility import EligibilityAssessment
from scout.contexts.scanning.exceptions import ScanInputError

SUPPORTED_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".tiff", ".tif"})


def is_supported_image(path: Path) -> bool:
    """True if the file extension (case-insensitive) is a supported image type."""
    return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS


@dataclass(frozen=True)
class ScanTarget:
    """An image path about to be scanned."""

    path: Path

    @property
    def extension(self) -> str:
        return self.path.suffix.lower()

    def validate(self) -> "ScanTarget":
        """
        Check the target can be handed to an OCR adapter.

        Raises:
            ScanInputError: If the file doesn't exist or the extension isn't supported
        """
        if not self.path.is_file():
            raise ScanInputError("Image file not found.", image_path=self.path)
        if self.extension not in SUPPORTED_EXTENSIONS:
            raise ScanInputError(
                f"Unsupported image extension '{self.path.suffix}'. "
                f"Supported: {', '.join(sorted(SUPPORTED_EXTENSIONS))}.",
                image_path=self.path,
            )
        return self


class ScanIssue(Enum):
    """Category of a non-fatal scan diagnostic."""

    INPUT_ERROR = "input_error"
    OCR_ENGINE_ERROR = "ocr_engine_error"
    NO_TEXT_EXTRACTED = "no_text_extracted"
    LOW_CONFIDENCE = "low_confidence"


@dataclass(frozen=True)
class ScanWarning:
    """Diagnostic attached to a scan result instead of an exception."""

    category: ScanIssue
    message: str

    def __str__(self) -> str:
        return f"{self.category.value}: {self.message}"


@dataclass
class ImageScanResult:
    """
    Outcome of scanning one image.

    Attributes:
        image_path: The scanned file
        ocr_text: Raw OCR text, before normalization ("" when OCR didn't run)
        vacancies: Records extracted, in block order
        assessments: Eligibility assessment per vacancy (same order)
        ocr_confidence: Mean OCR confidence, 0-100
        warnings: Non-fatal diagnostics
    """

    image_path: Path
    ocr_text: str = ""
    vacancies: list[ExtractedVacancy] = field(default_factory=list)
    assessments: list[EligibilityAssessment] = field(default_factory=list)
    ocr_confidence: float = 0.0
    warnings: list[ScanWarning] = field(default_factory=list)

    @property
    def eligible_count(self) -> int:
        return sum(1 for assessment in self.assessments if assessment.is_eligible)

    @property
    def ineligible_count(self) -> int:
        return len(self.assessments) - self.eligible_count

    def has_warning(self, category: ScanIssue) -> bool:
        return any(warning.category is category for warning in self.warnings)

    def to_dict(self) -> dict:
        return {
            "image_path": str(self.image_path),
            "ocr_confidence": self.ocr_confidence,
            "vacancies": [
                {**vacancy.to_dict(), "eligibility": assessment.to_dict()}
                for vacancy, assessment in zip(self.vacancies, self.assessments)
            ],
            "warnings": [
                {"category": warning.category.value, "message": warning.message}
                for warning in self.warnings
            ],
        }


@dataclass
class ScanSummary:
    """Aggregate outcome of a directory scan."""

    images_scanned: int = 0
    total_vacancies: int = 0
    eligible_count: int = 0
    ineligible_count: int = 0
    results: list[ImageScanResult] = field(default_factory=list)

    @classmethod
    def from_results(cls, results: list[ImageScanResult]) -> "ScanSummary":
        return cls(
            images_scanned=len(results),
            total_vacancies=sum(len(result.vacancies) for result in results),
            eligible_count=sum(result.eligible_count for result in results),
            ineligible_count=sum(result.ineligible_count for result in results),
            results=list(results),
        )

    def to_dict(self) -> dict:
        return {
            "images_scanned": self.images_scanned,
            "total_vacancies": self.total_vacancies,
            "eligible_count": self.eligible_count,
            "ineligible_count": self.ineligible_count,
            "results": [result.to_dict() for result in self.results],
        }
