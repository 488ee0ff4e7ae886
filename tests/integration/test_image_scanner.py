"""
Integration tests for single-image scanning: OCR, extraction and eligibility
wired together behind a scripted OCR engine.
"""

import pytest

from scout.contexts.extraction.vacancy_data_structure import RemotePolicy
from scout.contexts.recognition import OcrEngineError, OcrOutput
from scout.contexts.scanning import (
    EligibilityAssessment,
    ScanIssue,
    ScannerSettings,
    VacancyImageScanner,
    scan_image,
)

TWO_LISTINGS = (
    "Senior .NET Developer\nAcme Corp\nLondon, UK (Remote)\n$90K - $120K\n"
    "\n"
    "Lead C# Engineer\nHooli\nBerlin, Germany (On-site)\nPermanent\n"
)


@pytest.mark.integration
def test_scan_extracts_and_assesses(fake_ocr, make_image):
    image = make_image("feed.png")
    scanner = VacancyImageScanner(ocr_adapter=fake_ocr(default=OcrOutput(TWO_LISTINGS, 88.5)))

    result = scanner.scan_image(image)

    assert [v.vacancy_id for v in result.vacancies] == ["image-feed-0", "image-feed-1"]
    assert [v.company for v in result.vacancies] == ["Acme Corp", "Hooli"]
    assert len(result.assessments) == 2
    assert [a.is_eligible for a in result.assessments] == [True, False]
    assert (result.eligible_count, result.ineligible_count) == (1, 1)
    assert result.ocr_confidence == 88.5
    assert result.ocr_text == TWO_LISTINGS
    assert result.warnings == []


@pytest.mark.integration
def test_missing_file(fake_ocr, tmp_path):
    adapter = fake_ocr()
    scanner = VacancyImageScanner(ocr_adapter=adapter)

    result = scanner.scan_image(tmp_path / "missing.png")

    assert result.vacancies == []
    assert [w.category for w in result.warnings] == [ScanIssue.INPUT_ERROR]
    assert adapter.calls == []


@pytest.mark.integration
def test_unsupported_extension(fake_ocr, make_image):
    scanner = VacancyImageScanner(ocr_adapter=fake_ocr())

    result = scanner.scan_image(make_image("notes.txt"))

    assert result.vacancies == []
    assert result.has_warning(ScanIssue.INPUT_ERROR)
    assert ".txt" in result.warnings[0].message


@pytest.mark.integration
def test_extension_is_case_insensitive(fake_ocr, make_image):
    scanner = VacancyImageScanner(ocr_adapter=fake_ocr())

    result = scanner.scan_image(make_image("FEED.JPEG"))

    assert len(result.vacancies) == 1
    assert result.vacancies[0].vacancy_id == "image-FEED-0"


@pytest.mark.integration
def test_ocr_engine_error(fake_ocr, make_image):
    error = OcrEngineError("Tessdata folder missing at '/nope'.")
    scanner = VacancyImageScanner(ocr_adapter=fake_ocr(outputs={"feed.png": error}))

    result = scanner.scan_image(make_image("feed.png"))

    assert result.vacancies == []
    assert [w.category for w in result.warnings] == [ScanIssue.OCR_ENGINE_ERROR]
    assert "Tessdata folder missing" in result.warnings[0].message


@pytest.mark.integration
def test_unexpected_adapter_exception(fake_ocr, make_image):
    error = RuntimeError("engine crashed while processing page")
    scanner = VacancyImageScanner(ocr_adapter=fake_ocr(outputs={"feed.png": error}))

    result = scanner.scan_image(make_image("feed.png"))

    assert result.vacancies == []
    assert [w.category for w in result.warnings] == [ScanIssue.OCR_ENGINE_ERROR]
    assert result.warnings[0].message == "OCR engine error: engine crashed while processing page"


@pytest.mark.integration
def test_region_restricted_listing(fake_ocr, make_image):
    text = "Senior .NET Developer\nAcme Corp\nLondon, UK (Remote)\nUK-only applicants"
    scanner = VacancyImageScanner(ocr_adapter=fake_ocr(default=OcrOutput(text, 90.0)))

    result = scanner.scan_image(make_image("feed.png"))

    assert [v.title for v in result.vacancies] == ["Senior .NET Developer"]
    assert result.vacancies[0].geo_restrictions == ["UK-only"]
    assert len(result.assessments) == 1
    assert result.warnings == []


@pytest.mark.integration
def test_blank_ocr_text(fake_ocr, make_image):
    scanner = VacancyImageScanner(ocr_adapter=fake_ocr(default=OcrOutput("  \n\n ", 95.0)))

    result = scanner.scan_image(make_image("feed.png"))

    assert result.vacancies == []
    assert [w.category for w in result.warnings] == [ScanIssue.NO_TEXT_EXTRACTED]


@pytest.mark.integration
def test_low_confidence_is_advisory(fake_ocr, make_image):
    text = "Senior .NET Developer\nAcme Corp"
    scanner = VacancyImageScanner(ocr_adapter=fake_ocr(default=OcrOutput(text, 12.0)))

    result = scanner.scan_image(make_image("feed.png"))

    assert len(result.vacancies) == 1
    assert [w.category for w in result.warnings] == [ScanIssue.LOW_CONFIDENCE]


@pytest.mark.integration
def test_confidence_threshold_is_configurable(fake_ocr, make_image):
    scanner = VacancyImageScanner(
        ocr_adapter=fake_ocr(default=OcrOutput("Senior .NET Developer", 50.0)),
        settings=ScannerSettings(low_confidence_threshold=60.0),
    )

    assert scanner.scan_image(make_image("feed.png")).has_warning(ScanIssue.LOW_CONFIDENCE)


@pytest.mark.integration
def test_dropped_blocks_still_count_towards_ids(fake_ocr, make_image):
    text = "Easy Apply\nPromoted\n\nSenior .NET Developer\nAcme Corp"
    scanner = VacancyImageScanner(ocr_adapter=fake_ocr(default=OcrOutput(text, 90.0)))

    result = scanner.scan_image(make_image("feed.png"))

    assert [v.vacancy_id for v in result.vacancies] == ["image-feed-1"]


@pytest.mark.integration
def test_text_without_titles_yields_no_vacancies(fake_ocr, make_image):
    text = "Acme Corp\nLondon, UK (Remote)\n$90K - $120K"
    scanner = VacancyImageScanner(ocr_adapter=fake_ocr(default=OcrOutput(text, 90.0)))

    result = scanner.scan_image(make_image("feed.png"))

    assert result.vacancies == []
    assert result.warnings == []


@pytest.mark.integration
def test_ocr_text_is_normalized_before_extraction(fake_ocr, make_image):
    text = "Senior .NET Developer\nAcme\u00a0Corp\nLondon, UK (Remote)"
    scanner = VacancyImageScanner(ocr_adapter=fake_ocr(default=OcrOutput(text, 90.0)))

    result = scanner.scan_image(make_image("feed.png"))

    assert result.vacancies[0].company == "Acme Corp"
    assert result.ocr_text == text


@pytest.mark.integration
def test_rescanning_is_deterministic(fake_ocr, make_image):
    image = make_image("feed.png")
    scanner = VacancyImageScanner(ocr_adapter=fake_ocr(default=OcrOutput(TWO_LISTINGS, 80.0)))

    first = scanner.scan_image(image)
    second = scanner.scan_image(image)

    assert first.to_dict() == second.to_dict()


@pytest.mark.integration
def test_custom_eligibility_gate(fake_ocr, make_image):
    class RejectEverything:
        def assess(self, vacancy):
            return EligibilityAssessment(vacancy.vacancy_id, False, "Ineligible - rejected")

    scanner = VacancyImageScanner(ocr_adapter=fake_ocr(), eligibility_gate=RejectEverything())

    result = scanner.scan_image(make_image("feed.png"))

    assert result.vacancies[0].remote_policy == RemotePolicy.FULLY_REMOTE
    assert result.eligible_count == 0
    assert result.assessments[0].summary == "Ineligible - rejected"


@pytest.mark.integration
@pytest.mark.parametrize("path", ["", ".", "no/such/dir/image.png", "feed"])
def test_scan_image_never_raises(fake_ocr, path):
    result = VacancyImageScanner(ocr_adapter=fake_ocr()).scan_image(path)

    assert result.vacancies == []
    assert result.has_warning(ScanIssue.INPUT_ERROR)


@pytest.mark.integration
def test_module_level_scan_image(fake_ocr, make_image):
    scanner = VacancyImageScanner(ocr_adapter=fake_ocr())

    result = scan_image(make_image("feed.png"), scanner=scanner)

    assert result.vacancies[0].title == "Senior .NET Developer"
