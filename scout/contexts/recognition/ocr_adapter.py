"""
OCR adapters for the Recognition context.

An adapter turns one image file into an OcrOutput (text + mean confidence).
The default adapter shells out to the Tesseract CLI and asks for TSV output,
which carries per-word confidences alongside the recognized words.

Each recognize() call starts its own tesseract process, so adapters hold no
engine state between images and are safe to reuse across scans.
"""

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Union

from scout.contexts.recognition.exceptions import OcrEngineError

# TSV column indices (tesseract 4/5)
_TSV_LEVEL = 0
_TSV_PAGE = 1
_TSV_BLOCK = 2
_TSV_PAR = 3
_TSV_LINE = 4
_TSV_CONF = 10
_TSV_TEXT = 11

# Level 5 rows are words; higher levels carry conf -1 and no text
_WORD_LEVEL = "5"

TESSDATA_HELP = (
    "Download eng.traineddata from https://github.com/tesseract-ocr/tessdata "
    "and place it in the tessdata folder."
)


@dataclass(frozen=True)
class OcrOutput:
    """
    Text recognized from one image.

    Attributes:
        text: Recognized text, lines separated by newlines, blocks by blank lines
        confidence: Mean word confidence, 0-100
    """

    text: str
    confidence: float

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 100.0:
            raise ValueError(f"OCR confidence must be within 0-100, got {self.confidence}")


class OcrAdapter(Protocol):
    """Anything that can recognize text in an image file."""

    def recognize(self, image_path: Path) -> OcrOutput:
        """Raises OcrEngineError when the engine is unavailable or fails."""
        ...


def parse_tesseract_tsv(tsv: str) -> OcrOutput:
    """
    Rebuild plain text and mean confidence from tesseract TSV output.

    Words on the same line are joined by spaces. A change of line starts a new
    line; a change of paragraph or block inserts a blank line, matching the
    layout of tesseract's plain-text output.

    Args:
        tsv: Raw TSV written by `tesseract <image> stdout tsv`

    Returns:
        OcrOutput with reconstructed text and mean word confidence (0.0 if no words)
    """
    lines: list[str] = []
    current_words: list[str] = []
    confidences: list[float] = []
    previous_paragraph = None
    previous_line = None

    for row in tsv.splitlines()[1:]:
        columns = row.split("\t")
        if len(columns) <= _TSV_TEXT or columns[_TSV_LEVEL] != _WORD_LEVEL:
            continue

        word = columns[_TSV_TEXT].strip()
        if not word:
            continue

        paragraph = (columns[_TSV_PAGE], columns[_TSV_BLOCK], columns[_TSV_PAR])
        line = paragraph + (columns[_TSV_LINE],)

        if line != previous_line and current_words:
            lines.append(" ".join(current_words))
            current_words = []
            if paragraph != previous_paragraph:
                lines.append("")

        current_words.append(word)
        previous_paragraph = paragraph
        previous_line = line

        try:
            confidence = float(columns[_TSV_CONF])
        except ValueError:
            continue
        if confidence >= 0:
            confidences.append(confidence)

    if current_words:
        lines.append(" ".join(current_words))

    mean_confidence = sum(confidences) / len(confidences) if confidences else 0.0
    return OcrOutput(text="\n".join(lines), confidence=min(mean_confidence, 100.0))


class TesseractAdapter:
    """
    OCR adapter backed by the tesseract command-line tool.

    Args:
        tesseract_cmd: Executable name or path
        language: Tesseract language code (e.g., "eng")
        tessdata_dir: Optional folder holding *.traineddata files
        timeout_s: Seconds before a single recognition is abandoned
    """

    def __init__(
        self,
        tesseract_cmd: str = "tesseract",
        language: str = "eng",
        tessdata_dir: Optional[Union[str, Path]] = None,
        timeout_s: float = 60.0,
    ):
        self.tesseract_cmd = tesseract_cmd
        self.language = language
        self.tessdata_dir = Path(tessdata_dir) if tessdata_dir else None
        self.timeout_s = timeout_s

    def _build_command(self, image_path: Path) -> list[str]:
        cmd = [self.tesseract_cmd, str(image_path), "stdout", "-l", self.language]
        if self.tessdata_dir is not None:
            cmd.extend(["--tessdata-dir", str(self.tessdata_dir)])
        cmd.append("tsv")
        return cmd

    def _check_engine(self) -> None:
        if shutil.which(self.tesseract_cmd) is None:
            raise OcrEngineError(
                f"Tesseract executable '{self.tesseract_cmd}' not found. "
                "Install tesseract-ocr or set TESSERACT_CMD."
            )

        if self.tessdata_dir is not None and not self.tessdata_dir.is_dir():
            raise OcrEngineError(f"Tessdata folder missing at '{self.tessdata_dir}'. {TESSDATA_HELP}")

    def recognize(self, image_path: Path) -> OcrOutput:
        """
        Run tesseract over one image.

        Raises:
            OcrEngineError: Engine missing, tessdata missing, non-zero exit or timeout
        """
        image_path = Path(image_path)
        self._check_engine()

        try:
            completed = subprocess.run(
                self._build_command(image_path),
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout_s,
            )
        except subprocess.TimeoutExpired as e:
            raise OcrEngineError(
                f"Tesseract timed out after {self.timeout_s:.0f}s", image_path=image_path
            ) from e
        except OSError as e:
            raise OcrEngineError(f"Could not start tesseract: {e}", image_path=image_path) from e

        if completed.returncode != 0:
            raise OcrEngineError(
                f"Tesseract exited with code {completed.returncode} for {image_path.name}",
                image_path=image_path,
                stderr=completed.stderr,
            )

        return parse_tesseract_tsv(completed.stdout)
