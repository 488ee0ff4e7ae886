"""Custom exceptions for the recognition context."""

from pathlib import Path
from typing import Optional


class OcrEngineError(Exception):
    """
    Exception raised when the OCR engine is unavailable or fails on an image.

    Attributes:
        message: Error description
        image_path: Image being processed when the failure happened
        stderr: Diagnostic output captured from the engine, if any
    """

    def __init__(
        self,
        message: str,
        image_path: Optional[Path] = None,
        stderr: Optional[str] = None,
    ):
        self.message = message
        self.image_path = image_path
        self.stderr = stderr

        parts = [message]

        if stderr:
            # Keep the first lines only; tesseract can be chatty
            snippet = stderr.strip()
            snippet = snippet[:200] + "..." if len(snippet) > 200 else snippet
            if snippet:
                parts.append(f"Engine output: {snippet}")

        super().__init__(" ".join(parts))
