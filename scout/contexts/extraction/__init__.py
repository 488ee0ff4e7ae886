"""
Extraction Context

Responsibilities:
- Normalizes raw OCR text
- Segments OCR text into one block per listing
- Extracts typed vacancy fields (title, company, location, salary, policies, skills)
- Assembles ExtractedVacancy records

Owns: Listing segmentation, field heuristics, vacancy data structures, extraction vocabulary
Never: Runs OCR, touches the filesystem beyond its vocabulary file, or decides eligibility
"""

from scout.contexts.extraction.assembler import assemble_vacancy
from scout.contexts.extraction.defaults import ExtractionSettings
from scout.contexts.extraction.normalizer import normalize_ocr_text
from scout.contexts.extraction.segmenter import segment_listing_blocks
from scout.contexts.extraction.vacancy_data_structure import (
    EngagementType,
    ExtractedVacancy,
    ListingBlock,
    RemotePolicy,
    SeniorityLevel,
)
from scout.contexts.extraction.vocabulary import Vocabulary, get_default_vocabulary, load_vocabulary

__all__ = [
    # Pipeline steps
    "normalize_ocr_text",
    "segment_listing_blocks",
    "assemble_vacancy",
    # Data structures
    "ListingBlock",
    "ExtractedVacancy",
    "RemotePolicy",
    "SeniorityLevel",
    "EngagementType",
    # Configuration
    "ExtractionSettings",
    "Vocabulary",
    "load_vocabulary",
    "get_default_vocabulary",
]
