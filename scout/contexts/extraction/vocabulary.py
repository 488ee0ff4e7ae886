"""
Extraction vocabulary: known skills and job-board UI noise.

The vocabulary lives in YAML (vocabulary.yaml next to this module by default)
so it can be extended without touching detection code. Set
SCOUT_VOCABULARY_PATH to point at a replacement file.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_VOCABULARY_PATH = Path(
    os.getenv("SCOUT_VOCABULARY_PATH", Path(__file__).parent / "vocabulary.yaml")
)

VOCABULARY_KEYS = ("skills", "ui_noise_phrases")


@dataclass(frozen=True)
class Vocabulary:
    """
    Word lists used by the field extractors.

    Attributes:
        skills: Technology tokens, in the order they are reported
        ui_noise_phrases: Phrases marking a line as platform chrome, not content
    """

    skills: tuple[str, ...] = ()
    ui_noise_phrases: tuple[str, ...] = ()


def _as_string_tuple(values, key: str, config_path: Path) -> tuple[str, ...]:
    if values is None:
        return ()
    if not isinstance(values, list):
        raise ValueError(f"'{key}' in {config_path} must be a list, got {type(values).__name__}")

    cleaned = []
    for value in values:
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"'{key}' in {config_path} contains a non-string or blank entry: {value!r}")
        cleaned.append(value.strip())
    return tuple(cleaned)


def load_vocabulary(config_path: Optional[Path] = None) -> Vocabulary:
    """
    Load a vocabulary YAML file.

    Args:
        config_path: Path to the YAML file (defaults to DEFAULT_VOCABULARY_PATH)

    Returns:
        Vocabulary with skills and UI noise phrases

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file has unknown keys or malformed lists
    """
    if config_path is None:
        config_path = DEFAULT_VOCABULARY_PATH
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Vocabulary file not found: {config_path}")

    data = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Vocabulary file {config_path} must contain a mapping")

    unknown = set(data) - set(VOCABULARY_KEYS)
    if unknown:
        raise ValueError(f"Unknown vocabulary keys in {config_path}: {sorted(unknown)}")

    return Vocabulary(
        skills=_as_string_tuple(data.get("skills"), "skills", config_path),
        ui_noise_phrases=_as_string_tuple(data.get("ui_noise_phrases"), "ui_noise_phrases", config_path),
    )


@lru_cache(maxsize=1)
def get_default_vocabulary() -> Vocabulary:
    """Vocabulary loaded once from DEFAULT_VOCABULARY_PATH."""
    return load_vocabulary(DEFAULT_VOCABULARY_PATH)
