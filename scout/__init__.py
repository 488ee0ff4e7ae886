"""
SCOUT - Screenshot Capture Of Undigitized Tech-listings

Turns screenshots of job boards and social feeds into structured vacancy records
that the rest of a job-search toolkit can score and rank.

Architecture:
- Recognition Context: OCR engine adapters (image to raw text + confidence)
- Extraction Context: Listing segmentation and field extraction (text to vacancies)
- Scanning Context: Image and directory orchestration, eligibility, warnings
"""

__version__ = "0.1.0"
