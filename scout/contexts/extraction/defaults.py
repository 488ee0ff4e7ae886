"""
Default values for SCOUT field extraction.

Provides the normalization constants and length limits shared by:
- field_extractors.py (salary annualization, title/company truncation)
- assembler.py (builds one ExtractedVacancy per block)
- scanning/config.py (YAML overrides are layered on top of these)

The annualization constants are empirical (40h x 52 weeks; 12 months), kept
overridable rather than treated as exact.
"""

from dataclasses import dataclass

HOURS_PER_YEAR = 2080
MONTHS_PER_YEAR = 12
DEFAULT_CURRENCY = "USD"

TITLE_MAX_LENGTH = 120
COMPANY_MAX_LENGTH = 100
MIN_COMPANY_LENGTH = 3


@dataclass(frozen=True)
class ExtractionSettings:
    """Tunable constants for field extraction."""

    hours_per_year: float = HOURS_PER_YEAR
    months_per_year: float = MONTHS_PER_YEAR
    default_currency: str = DEFAULT_CURRENCY
    title_max_length: int = TITLE_MAX_LENGTH
    company_max_length: int = COMPANY_MAX_LENGTH
    min_company_length: int = MIN_COMPANY_LENGTH

    def __post_init__(self):
        if self.hours_per_year <= 0 or self.months_per_year <= 0:
            raise ValueError("Annualization factors must be positive")
        if self.title_max_length <= 0 or self.company_max_length <= 0:
            raise ValueError("Maximum lengths must be positive")
