"""
Scanner configuration.

Settings come from scanner_defaults.yaml (or the file named by
SCANNER_CONFIG_PATH), with environment variables layered on top for the
machine-specific bits: where tesseract and its language data live, and which
vocabulary file to use.

Example:
    >>> settings = load_scanner_settings()
    >>> settings.ocr.tesseract_cmd
    'tesseract'
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from scout.contexts.extraction.defaults import ExtractionSettings

load_dotenv()
DEFAULT_SCANNER_CONFIG_PATH = Path(
    os.getenv("SCANNER_CONFIG_PATH", Path(__file__).parent / "scanner_defaults.yaml")
)

LOW_CONFIDENCE_THRESHOLD = 30.0

# Environment variable → ocr setting
OCR_ENV_OVERRIDES = {
    "TESSERACT_CMD": "tesseract_cmd",
    "TESSDATA_DIR": "tessdata_dir",
    "TESSERACT_LANG": "language",
}


@dataclass(frozen=True)
class OcrSettings:
    """How the default Tesseract adapter is invoked."""

    tesseract_cmd: str = "tesseract"
    language: str = "eng"
    tessdata_dir: Optional[str] = None
    timeout_s: float = 60.0

    def __post_init__(self):
        if self.timeout_s <= 0:
            raise ValueError(f"OCR timeout must be positive, got {self.timeout_s}")


@dataclass(frozen=True)
class ScannerSettings:
    """
    Complete scanner configuration.

    Attributes:
        low_confidence_threshold: Confidence below which scans carry an advisory warning
        extraction: Field extraction constants
        ocr: Default OCR adapter settings
        vocabulary_path: Vocabulary YAML override (None for the packaged vocabulary)
    """

    low_confidence_threshold: float = LOW_CONFIDENCE_THRESHOLD
    extraction: ExtractionSettings = field(default_factory=ExtractionSettings)
    ocr: OcrSettings = field(default_factory=OcrSettings)
    vocabulary_path: Optional[Path] = None

    def __post_init__(self):
        if not 0.0 <= self.low_confidence_threshold <= 100.0:
            raise ValueError(
                f"low_confidence_threshold must be within 0-100, got {self.low_confidence_threshold}"
            )


def _check_keys(section: Dict[str, Any], allowed, section_name: str, config_path: Path) -> None:
    unknown = set(section) - set(allowed)
    if unknown:
        raise ValueError(f"Unknown keys in '{section_name}' of {config_path}: {sorted(unknown)}")


def _section(data: Dict[str, Any], name: str, config_path: Path) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' in {config_path} must be a mapping")
    return section


def load_scanner_settings(config_path: Optional[Path] = None) -> ScannerSettings:
    """
    Load scanner settings from YAML and apply environment overrides.

    Args:
        config_path: Path to the YAML file (defaults to DEFAULT_SCANNER_CONFIG_PATH)

    Returns:
        ScannerSettings

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the file has unknown keys or out-of-range values
    """
    if config_path is None:
        config_path = DEFAULT_SCANNER_CONFIG_PATH
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Scanner config not found: {config_path}")

    data = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Scanner config {config_path} must contain a mapping")

    top_level_keys = [f.name for f in fields(ScannerSettings)]
    _check_keys(data, top_level_keys, "root", config_path)

    extraction_data = _section(data, "extraction", config_path)
    _check_keys(extraction_data, [f.name for f in fields(ExtractionSettings)], "extraction", config_path)

    ocr_data = dict(_section(data, "ocr", config_path))
    _check_keys(ocr_data, [f.name for f in fields(OcrSettings)], "ocr", config_path)

    for env_var, key in OCR_ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value:
            ocr_data[key] = value

    vocabulary_path = os.getenv("SCOUT_VOCABULARY_PATH") or data.get("vocabulary_path")

    return ScannerSettings(
        low_confidence_threshold=float(data.get("low_confidence_threshold", LOW_CONFIDENCE_THRESHOLD)),
        extraction=ExtractionSettings(**extraction_data),
        ocr=OcrSettings(**ocr_data),
        vocabulary_path=Path(vocabulary_path) if vocabulary_path else None,
    )
