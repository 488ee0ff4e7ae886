"""
Vacancy assembler: turns one listing block into an ExtractedVacancy.

The title gates everything else. Blocks without a title-like line are UI
fragments or cropped cards and produce no record; every other field is
best-effort and independent.
"""

from typing import Optional

from scout.contexts.extraction.defaults import ExtractionSettings
from scout.contexts.extraction.field_extractors import (
    detect_company,
    detect_engagement_type,
    detect_geo_restrictions,
    detect_location,
    detect_remote_policy,
    detect_salary,
    detect_seniority,
    detect_skills,
    detect_title,
)
from scout.contexts.extraction.vacancy_data_structure import (
    SOURCE_PLATFORM,
    ExtractedVacancy,
    ListingBlock,
)
from scout.contexts.extraction.vocabulary import Vocabulary, get_default_vocabulary


def build_vacancy_id(source_id: str, block_index: int) -> str:
    return f"{source_id}-{block_index}"


def assemble_vacancy(
    block: ListingBlock,
    source_id: str,
    block_index: int,
    vocabulary: Optional[Vocabulary] = None,
    settings: Optional[ExtractionSettings] = None,
) -> Optional[ExtractedVacancy]:
    """
    Build a vacancy record from a listing block.

    Args:
        block: Block produced by the segmenter
        source_id: Identifier of the screenshot (e.g., "image-feed_01")
        block_index: Position of the block among all blocks of the source,
            dropped blocks included
        vocabulary: Skills and UI noise phrases (packaged vocabulary if None)
        settings: Extraction constants (defaults if None)

    Returns:
        ExtractedVacancy, or None when the block has no title
    """
    vocabulary = vocabulary or get_default_vocabulary()
    settings = settings or ExtractionSettings()

    lines = block.lines
    text = block.text

    title_match = detect_title(lines, max_length=settings.title_max_length)
    if title_match is None:
        return None

    company = detect_company(
        lines,
        title_match.line_index,
        ui_noise_phrases=vocabulary.ui_noise_phrases,
        max_length=settings.company_max_length,
        min_length=settings.min_company_length,
    )
    location = detect_location(lines)
    salary = detect_salary(
        text,
        hours_per_year=settings.hours_per_year,
        months_per_year=settings.months_per_year,
        default_currency=settings.default_currency,
    )

    return ExtractedVacancy(
        vacancy_id=build_vacancy_id(source_id, block_index),
        title=title_match.title,
        company=company,
        city=location.city,
        country=location.country,
        remote_policy=detect_remote_policy(text, location.qualifier),
        seniority_level=detect_seniority(text),
        engagement_type=detect_engagement_type(text),
        salary_min=salary.minimum,
        salary_max=salary.maximum,
        salary_currency=salary.currency,
        required_skills=detect_skills(text, vocabulary.skills),
        geo_restrictions=detect_geo_restrictions(text),
        raw_block_text=text,
        source_platform=SOURCE_PLATFORM,
    )
