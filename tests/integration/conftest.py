"""Shared fixtures for scanner integration tests: a scripted OCR engine and fake images."""

from pathlib import Path

import pytest

from scout.contexts.recognition import OcrOutput

LISTING_TEXT = "Senior .NET Developer\nAcme Corp\nLondon, UK (Remote)\n$90K - $120K"


class FakeOcrAdapter:
    """
    OCR adapter returning scripted outputs by file name.

    Values may be OcrOutput instances or exceptions to raise. Files without a
    script get the default output.
    """

    def __init__(self, outputs=None, default=None):
        self.outputs = outputs or {}
        self.default = default or OcrOutput(text=LISTING_TEXT, confidence=91.0)
        self.calls = []

    def recognize(self, image_path: Path) -> OcrOutput:
        self.calls.append(Path(image_path).name)
        output = self.outputs.get(Path(image_path).name, self.default)
        if isinstance(output, Exception):
            raise output
        return output


@pytest.fixture
def fake_ocr():
    return FakeOcrAdapter


@pytest.fixture
def make_image(tmp_path):
    def _make_image(name: str, directory: Path = None) -> Path:
        path = (directory or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\x89PNG fake image bytes")
        return path

    return _make_image
