"""Custom exceptions for the scanning context."""

from pathlib import Path
from typing import Optional


class ScanInputError(Exception):
    """
    Exception raised when an image cannot be scanned at all.

    Attributes:
        message: Error description
        image_path: The offending path
    """

    def __init__(self, message: str, image_path: Optional[Path] = None):
        self.message = message
        self.image_path = image_path

        parts = [message]
        if image_path is not None:
            parts.append(f"Path: {image_path}")

        super().__init__(" ".join(parts))
