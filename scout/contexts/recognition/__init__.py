"""
Recognition Context

Responsibilities:
- Runs an OCR engine over a single screenshot image
- Reports recognized text with a 0-100 mean confidence
- Converts engine failures into OcrEngineError

Owns: OCR engine invocation and output decoding
Never: Interprets the recognized text
"""

from scout.contexts.recognition.exceptions import OcrEngineError
from scout.contexts.recognition.ocr_adapter import OcrAdapter, OcrOutput, TesseractAdapter

__all__ = ["OcrAdapter", "OcrEngineError", "OcrOutput", "TesseractAdapter"]
