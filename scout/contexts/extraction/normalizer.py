"""
OCR text normalizer for the Extraction context.

Cleans characters that OCR engines emit but the extraction patterns don't
expect, before the text is segmented into listing blocks.

Dashes, middle dots and currency symbols are left untouched: the salary and
location patterns rely on them.
"""

import unicodedata

# Unicode replacements: problematic char → ASCII equivalent
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space
    "\u202f": " ",  # narrow no-break space
    "\u2009": " ",  # thin space
    # Zero-width characters, removed
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM
    # Quotes
    "\u2018": "'",  # left single quote
    "\u2019": "'",  # right single quote
    "\u201c": '"',  # left double quote
    "\u201d": '"',  # right double quote
    # Unicode line/paragraph separators
    "\u2028": "\n",
    "\u2029": "\n\n",
}


def normalize_ocr_text(text: str) -> str:
    """
    Normalize OCR output ahead of segmentation.

    Applies NFC composition (base letter + combining mark become one character),
    unifies line endings to "\\n", and replaces the characters listed in
    UNICODE_REPLACEMENTS. NFKC is not applied since it rewrites "½" and
    full-width digits inside salary figures.

    Args:
        text: Raw text returned by an OCR adapter

    Returns:
        Normalized text with the same line structure
    """
    text = unicodedata.normalize("NFC", text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text
