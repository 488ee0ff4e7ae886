"""
Block segmenter: splits OCR text into one block per listing.

Screenshots of job boards usually separate cards with whitespace, which
survives OCR as blank lines. When it doesn't (dense feeds, cropped captures),
a second pass starts a new block at every title-like line.
"""

from enum import Enum

from scout.contexts.extraction.field_extractors import looks_like_title
from scout.contexts.extraction.vacancy_data_structure import ListingBlock


class SegmenterState(Enum):
    """States of the title-driven fallback pass."""

    ACCUMULATING_EMPTY = "accumulating_empty"
    ACCUMULATING_NON_EMPTY = "accumulating_non_empty"


def _split_on_blank_lines(lines: list[str]) -> list[ListingBlock]:
    blocks = []
    current = []

    for line in lines:
        stripped = line.strip()
        if stripped:
            current.append(stripped)
        elif current:
            blocks.append(ListingBlock(tuple(current)))
            current = []

    if current:
        blocks.append(ListingBlock(tuple(current)))
    return blocks


def _split_on_titles(lines: list[str]) -> list[ListingBlock]:
    blocks = []
    current = []
    state = SegmenterState.ACCUMULATING_EMPTY

    for line in lines:
        stripped = line.strip()
        if not stripped:
            continue

        if looks_like_title(stripped) and state is SegmenterState.ACCUMULATING_NON_EMPTY:
            blocks.append(ListingBlock(tuple(current)))
            current = []

        current.append(stripped)
        state = SegmenterState.ACCUMULATING_NON_EMPTY

    if current:
        blocks.append(ListingBlock(tuple(current)))
    return blocks


def segment_listing_blocks(text: str) -> list[ListingBlock]:
    """
    Split OCR text into ordered listing blocks.

    Strategy:
    1. Split on runs of blank lines; more than one block means the layout
       already separated the listings.
    2. Otherwise re-split the same lines, opening a new block at each
       title-like line that follows content.
    3. If neither pass produced a block, keep every non-blank line as one block.

    Blocks are disjoint and, concatenated, reproduce the non-blank stripped
    input lines in order. Accepts "\\n", "\\r\\n" and "\\r" line endings.

    Args:
        text: OCR text (ideally already normalized)

    Returns:
        List of ListingBlock; empty only for empty or whitespace-only input
    """
    if not text or not text.strip():
        return []

    lines = text.splitlines()

    blocks = _split_on_blank_lines(lines)
    if len(blocks) > 1:
        return blocks

    blocks = _split_on_titles(lines)
    if blocks:
        return blocks

    return [ListingBlock(tuple(line.strip() for line in lines if line.strip()))]
