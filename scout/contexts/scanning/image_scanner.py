"""
Vacancy image scanner: the pipeline from screenshot to assessed vacancies.

    image → OCR → normalize → segment → assemble → eligibility

Per-image problems (missing file, unsupported type, OCR failure, blank or
low-confidence text) become ScanWarnings on the result rather than exceptions,
so one bad screenshot never aborts a directory scan.
"""

from pathlib import Path
from typing import Optional, Union

from scout.contexts.extraction.assembler import assemble_vacancy
from scout.contexts.extraction.normalizer import normalize_ocr_text
from scout.contexts.extraction.segmenter import segment_listing_blocks
from scout.contexts.extraction.vocabulary import Vocabulary, get_default_vocabulary, load_vocabulary
from scout.contexts.recognition import OcrAdapter, OcrEngineError, TesseractAdapter
from scout.contexts.scanning.config import ScannerSettings
from scout.contexts.scanning.eligibility import EligibilityAssessor, EligibilityGate
from scout.contexts.scanning.exceptions import ScanInputError
from scout.contexts.scanning.logger import (
    _log_debug,
    _log_warning,
    log_directory_summary,
    log_image_scan_result,
    log_image_scan_start,
)
from scout.contexts.scanning.scan_data_structure import (
    ImageScanResult,
    ScanIssue,
    ScanSummary,
    ScanTarget,
    ScanWarning,
    is_supported_image,
)


def build_source_id(image_path: Path) -> str:
    """Stable identifier of a screenshot: "image-{file stem}"."""
    return f"image-{Path(image_path).stem}"


class VacancyImageScanner:
    """
    Extracts vacancies from screenshots of job boards and feeds.

    Args:
        ocr_adapter: OCR engine (TesseractAdapter built from settings if None)
        eligibility_gate: Assessor run on every vacancy (EligibilityGate if None)
        settings: Scanner settings (defaults if None)
        vocabulary: Extraction vocabulary (from settings.vocabulary_path, else
            the packaged vocabulary, if None)

    Example:
        >>> scanner = VacancyImageScanner()
        >>> result = scanner.scan_image(Path("screens/linkedin_01.png"))
        >>> [v.title for v in result.vacancies]
    """

    def __init__(
        self,
        ocr_adapter: Optional[OcrAdapter] = None,
        eligibility_gate: Optional[EligibilityAssessor] = None,
        settings: Optional[ScannerSettings] = None,
        vocabulary: Optional[Vocabulary] = None,
    ):
        self.settings = settings or ScannerSettings()

        if ocr_adapter is None:
            ocr = self.settings.ocr
            ocr_adapter = TesseractAdapter(
                tesseract_cmd=ocr.tesseract_cmd,
                language=ocr.language,
                tessdata_dir=ocr.tessdata_dir,
                timeout_s=ocr.timeout_s,
            )
        self.ocr_adapter = ocr_adapter
        self.eligibility_gate = eligibility_gate or EligibilityGate()

        if vocabulary is None:
            if self.settings.vocabulary_path is not None:
                vocabulary = load_vocabulary(self.settings.vocabulary_path)
            else:
                vocabulary = get_default_vocabulary()
        self.vocabulary = vocabulary

    def _warn(self, result: ImageScanResult, category: ScanIssue, message: str) -> ImageScanResult:
        result.warnings.append(ScanWarning(category, message))
        return result

    def scan_image(self, image_path: Union[str, Path]) -> ImageScanResult:
        """
        Scan one screenshot.

        Never raises: input problems and OCR failures of any kind are reported
        as warnings on an otherwise empty result. A low OCR confidence adds an
        advisory warning but extraction still runs.

        Args:
            image_path: Path to a .png/.jpg/.jpeg/.bmp/.tiff/.tif file

        Returns:
            ImageScanResult with vacancies, assessments, confidence and warnings
        """
        image_path = Path(image_path)
        result = ImageScanResult(image_path=image_path)
        log_image_scan_start(image_path)

        try:
            ScanTarget(image_path).validate()
        except ScanInputError as e:
            _log_warning(str(e))
            return self._warn(result, ScanIssue.INPUT_ERROR, str(e))

        try:
            ocr_output = self.ocr_adapter.recognize(image_path)
        except OcrEngineError as e:
            _log_warning(f"OCR failed for {image_path.name}: {e}")
            return self._warn(result, ScanIssue.OCR_ENGINE_ERROR, str(e))
        except Exception as e:
            # Any other adapter failure
            _log_warning(f"OCR failed for {image_path.name}: {type(e).__name__}: {e}")
            return self._warn(result, ScanIssue.OCR_ENGINE_ERROR, f"OCR engine error: {e}")

        result.ocr_text = ocr_output.text
        result.ocr_confidence = ocr_output.confidence

        if not ocr_output.text.strip():
            return self._warn(
                result, ScanIssue.NO_TEXT_EXTRACTED, f"No text extracted from {image_path.name}."
            )

        threshold = self.settings.low_confidence_threshold
        if ocr_output.confidence < threshold:
            self._warn(
                result,
                ScanIssue.LOW_CONFIDENCE,
                f"OCR confidence {ocr_output.confidence:.1f} is below {threshold:.1f}; "
                "extracted fields may be unreliable.",
            )

        source_id = build_source_id(image_path)
        blocks = segment_listing_blocks(normalize_ocr_text(ocr_output.text))
        _log_debug(f"  {len(blocks)} blocks segmented")

        # Index counts every block so ids stay stable when extraction rules change
        for block_index, block in enumerate(blocks):
            vacancy = assemble_vacancy(
                block,
                source_id,
                block_index,
                vocabulary=self.vocabulary,
                settings=self.settings.extraction,
            )
            if vacancy is None:
                continue
            result.vacancies.append(vacancy)
            result.assessments.append(self.eligibility_gate.assess(vacancy))

        log_image_scan_result(result)
        return result

    def scan_directory(self, directory: Union[str, Path], search_pattern: str = "*.*") -> ScanSummary:
        """
        Scan every supported image in a directory (non-recursive).

        Files are matched with search_pattern, filtered to supported
        extensions and scanned in lexicographic path order. Unsupported files
        are skipped silently.

        Args:
            directory: Folder holding screenshots
            search_pattern: Glob applied inside the folder; empty or absolute
                patterns fall back to "*.*"

        Returns:
            ScanSummary (all zeros if the folder doesn't exist)
        """
        directory = Path(directory)
        if not directory.is_dir():
            _log_warning(f"Directory not found: {directory}")
            return ScanSummary()

        if not search_pattern or Path(search_pattern).is_absolute():
            _log_warning(f"Unusable search pattern '{search_pattern}', falling back to '*.*'")
            search_pattern = "*.*"

        images = sorted(
            (path for path in directory.glob(search_pattern) if path.is_file() and is_supported_image(path)),
            key=str,
        )
        _log_debug(f"  {len(images)} supported images matched '{search_pattern}'")

        summary = ScanSummary.from_results([self.scan_image(path) for path in images])
        log_directory_summary(directory, summary)
        return summary
