"""
Vacancy data structures for the Extraction context.

ListingBlock is the unit the segmenter produces; ExtractedVacancy is the
structured record the assembler builds from one block. The classification
enums carry an explicit UNKNOWN member so "not detected" is always stated,
never implied by a missing value.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

SOURCE_PLATFORM = "image-scan"


class RemotePolicy(Enum):
    """How much in-person presence a role requires."""

    FULLY_REMOTE = "FullyRemote"
    REMOTE_FRIENDLY = "RemoteFriendly"
    HYBRID = "Hybrid"
    ON_SITE = "OnSite"
    UNKNOWN = "Unknown"


class SeniorityLevel(Enum):
    """Seniority advertised by a listing."""

    PRINCIPAL = "Principal"
    LEAD = "Lead"
    SENIOR = "Senior"
    MIDDLE = "Middle"
    JUNIOR = "Junior"
    UNKNOWN = "Unknown"


class EngagementType(Enum):
    """Contractual relationship offered by a listing."""

    CONTRACT_B2B = "ContractB2B"
    FREELANCE = "Freelance"
    INSIDE_IR35 = "InsideIR35"
    EMPLOYMENT = "Employment"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ListingBlock:
    """
    Contiguous run of non-blank OCR lines believed to describe one listing.

    Lines are stored stripped; a block always holds at least one line.
    """

    lines: tuple[str, ...]

    def __post_init__(self):
        if not self.lines:
            raise ValueError("ListingBlock requires at least one line")
        if any(not line.strip() for line in self.lines):
            raise ValueError("ListingBlock lines must be non-blank")

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True)
class TitleMatch:
    """Title found in a block and the index of the line it came from."""

    title: str
    line_index: int


@dataclass(frozen=True)
class LocationMatch:
    """
    Location found in a block.

    Attributes:
        city: First region of "City, Country" (empty for a single region)
        country: Second region, or the only region
        qualifier: Work-mode hint next to the location (e.g., "Remote"), if any
    """

    city: str = ""
    country: str = ""
    qualifier: Optional[str] = None


@dataclass(frozen=True)
class SalaryRange:
    """Annualized salary bounds. Bounds are None when no salary was found."""

    minimum: Optional[float] = None
    maximum: Optional[float] = None
    currency: str = "USD"


@dataclass
class ExtractedVacancy:
    """
    Structured vacancy extracted from one listing block.

    The identifier is "{source_id}-{block_index}", so re-scanning an unchanged
    screenshot reproduces the same identifiers and field values.
    """

    vacancy_id: str
    title: str
    company: str = ""
    city: str = ""
    country: str = ""
    remote_policy: RemotePolicy = RemotePolicy.UNKNOWN
    seniority_level: SeniorityLevel = SeniorityLevel.UNKNOWN
    engagement_type: EngagementType = EngagementType.UNKNOWN
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    salary_currency: str = "USD"
    required_skills: list[str] = field(default_factory=list)
    geo_restrictions: list[str] = field(default_factory=list)
    raw_block_text: str = ""
    source_platform: str = SOURCE_PLATFORM

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise ValueError(f"Vacancy {self.vacancy_id!r} requires a non-empty title")

    @property
    def location(self) -> str:
        """Display form of the location: "City, Country", either part alone, or ""."""
        return ", ".join(part for part in (self.city, self.country) if part)

    def to_dict(self) -> dict:
        """Plain-dict form with enum values as strings (JSON-ready)."""
        return {
            "id": self.vacancy_id,
            "title": self.title,
            "company": self.company,
            "city": self.city,
            "country": self.country,
            "remote_policy": self.remote_policy.value,
            "seniority_level": self.seniority_level.value,
            "engagement_type": self.engagement_type.value,
            "salary_min": self.salary_min,
            "salary_max": self.salary_max,
            "salary_currency": self.salary_currency,
            "required_skills": list(self.required_skills),
            "geo_restrictions": list(self.geo_restrictions),
            "raw_block_text": self.raw_block_text,
            "source_platform": self.source_platform,
        }

    def __str__(self) -> str:
        return (
            f"[{self.source_platform}] {self.title} at {self.company} "
            f"({self.seniority_level.value}, {self.remote_policy.value})"
        )
