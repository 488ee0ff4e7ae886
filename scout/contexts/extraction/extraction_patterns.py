"""
Reusable patterns and ordered rule tables for OCR listing extraction.

Pattern classes follow the same convention throughout the contexts:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Module-level tuples fixing the order patterns are tried in

Classification rules (remote policy, seniority, engagement type) are ordered
(label, pattern) tuples. The first rule whose pattern matches decides the
label, so priority is read straight off the table.
"""

import re
from dataclasses import dataclass

from scout.contexts.extraction.vacancy_data_structure import (
    EngagementType,
    RemotePolicy,
    SeniorityLevel,
)

# =============================================================================
# TITLE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class TitlePatterns:
    """
    Regex patterns for recognizing job-title lines.

    DOMAIN_TITLE catches the technology-specific titles the scanner is tuned
    for; GENERAL_TITLE catches any short line ending in a role noun.
    """

    # Optional seniority prefix + technology token + role noun - e.g., "Senior .NET Developer"
    DOMAIN_TITLE: re.Pattern = re.compile(
        r"(?:Senior|Sr\.?|Lead|Principal|Staff|Mid[- ]?Level|Junior|Jr\.?|Full[- ]?Stack)?\s*"
        r"(?:\.?NET|C#|Dotnet|ASP\.?NET|Azure)\s*"
        r"(?:Developer|Engineer|Architect|Consultant|Specialist|Lead|Manager|DevOps|Backend|Full[- ]?Stack)",
        re.IGNORECASE,
    )

    # Up to 60 characters then a generic role noun - e.g., "Backend Engineer II"
    GENERAL_TITLE: re.Pattern = re.compile(
        r"^.{0,60}(?:Developer|Engineer|Architect|Consultant|Specialist|Tech Lead|Team Lead|Manager|DevOps)\b",
        re.IGNORECASE,
    )


# Priority order: every line is tried against DOMAIN_TITLE before GENERAL_TITLE
TITLE_PATTERNS = (
    TitlePatterns.DOMAIN_TITLE,
    TitlePatterns.GENERAL_TITLE,
)


# =============================================================================
# LOCATION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class LocationPatterns:
    """
    Regex patterns for extracting locations from single OCR lines.

    Supports:
    - Region[, Region2] (Qualifier) - e.g., "London, UK (Remote)"
    - Company · Location [· Qualifier] - e.g., "Acme · Berlin, Germany · Hybrid"
    """

    # Parenthetical qualifier; regions stop at commas, qualifier is a single token
    PARENTHETICAL: re.Pattern = re.compile(
        r"([\w.' -]+?(?:,\s*[\w.' -]+?)?)\s*\(([\w-]+)\)"
    )

    # LinkedIn-style middle-dot (or bullet) separated card line
    DELIMITED: re.Pattern = re.compile(
        r"^\s*([^·•]+?)\s*[·•]\s*([^·•]+?)\s*(?:[·•]\s*(.+?)\s*)?$"
    )

    # A bare work-mode word where a location would be
    WORK_MODE: re.Pattern = re.compile(r"^(?:remote|hybrid|on[- ]?site|in[- ]?office)$", re.IGNORECASE)


# =============================================================================
# SALARY PATTERNS
# =============================================================================

_AMOUNT = r"\d[\d,]*(?:\.\d+)?"
_PERIOD = r"(?:hourly|hours?|hrs?|monthly|months?|mo|yearly|years?|yrs?|annually|annum)\b"
_RANGE_SEPARATOR = r"\s*(?:[-–—]|to)\s*"


@dataclass(frozen=True)
class SalaryPatterns:
    """
    Regex patterns for extracting salary ranges.

    K_RANGE is tried first; RANGE is the general two-amount form with optional
    K suffixes and a rate period after either amount.
    """

    # "$80K - $110K" (both amounts K-suffixed)
    K_RANGE: re.Pattern = re.compile(
        rf"[\$€£]\s*({_AMOUNT})\s*[Kk]{_RANGE_SEPARATOR}[\$€£]?\s*({_AMOUNT})\s*[Kk]"
    )

    # "$40/hr - $60/hr", "£45,000 - £55,000", "€5,000 - €6,500 per month"
    RANGE: re.Pattern = re.compile(
        rf"[\$€£]\s*(?P<low>{_AMOUNT})\s*(?P<low_k>[Kk](?![a-z]))?"
        rf"(?:\s*(?:/|per\s+|an?\s+)\s*(?P<low_period>{_PERIOD}))?"
        rf"{_RANGE_SEPARATOR}"
        rf"[\$€£]?\s*(?P<high>{_AMOUNT})\s*(?P<high_k>[Kk](?![a-z]))?"
        rf"(?:\s*(?:/|per\s+|an?\s+)?\s*(?P<high_period>{_PERIOD}))?",
        re.IGNORECASE,
    )


# Currency symbol to ISO code; checked in this order, first present wins
CURRENCY_SYMBOLS = (
    ("€", "EUR"),
    ("£", "GBP"),
)


# =============================================================================
# GEOGRAPHIC RESTRICTION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class GeoRestrictionPatterns:
    """
    Regex patterns for hiring restrictions that limit where a candidate can live.
    """

    # "UK-only", "US based"; region codes must be uppercase to skip "contact us only"
    REGION_LIMITED: re.Pattern = re.compile(r"\b(?P<region>UK|EU|US|AU)[- ](?P<scope>(?i:only|based))\b")

    NO_VISA_SPONSORSHIP: re.Pattern = re.compile(
        r"\bno\s+visa\s+sponsorship\b|\bunable\s+to\s+sponsor\b|\bwithout\s+(?:visa\s+)?sponsorship\b",
        re.IGNORECASE,
    )

    SECURITY_CLEARANCE: re.Pattern = re.compile(
        r"\bsecurity\s+clearance\b|\bclearance\s+required\b", re.IGNORECASE
    )

    WORK_AUTHORIZATION: re.Pattern = re.compile(
        r"\bwork\s+authori[sz]ation\b|\bauthori[sz]ed\s+to\s+work\b|\bright\s+to\s+work\b",
        re.IGNORECASE,
    )


# Fixed-label restrictions; REGION_LIMITED is labelled from its match
GEO_RESTRICTION_RULES = (
    ("No-Visa-Sponsorship", GeoRestrictionPatterns.NO_VISA_SPONSORSHIP),
    ("Security-Clearance-Required", GeoRestrictionPatterns.SECURITY_CLEARANCE),
    ("Work-Auth-Required", GeoRestrictionPatterns.WORK_AUTHORIZATION),
)


# =============================================================================
# CLASSIFICATION RULE TABLES
# =============================================================================

REMOTE_POLICY_RULES = (
    (RemotePolicy.FULLY_REMOTE, re.compile(r"fully\s+remote|100%\s*remote", re.IGNORECASE)),
    (RemotePolicy.REMOTE_FRIENDLY, re.compile(r"remote[- ]friendly", re.IGNORECASE)),
    (RemotePolicy.HYBRID, re.compile(r"hybrid", re.IGNORECASE)),
    (RemotePolicy.ON_SITE, re.compile(r"on[- ]?site|office", re.IGNORECASE)),
    # Word boundary so "remote" inside another word is ignored
    (RemotePolicy.FULLY_REMOTE, re.compile(r"\bremote\b", re.IGNORECASE)),
)

# Checked top-down, so "Senior Staff Engineer" resolves to PRINCIPAL
SENIORITY_RULES = (
    (SeniorityLevel.PRINCIPAL, re.compile(r"\b(?:principal|staff)\b", re.IGNORECASE)),
    (SeniorityLevel.LEAD, re.compile(r"\blead(?:er)?\b", re.IGNORECASE)),
    (SeniorityLevel.SENIOR, re.compile(r"\bsenior\b|\bsr\b", re.IGNORECASE)),
    (SeniorityLevel.MIDDLE, re.compile(r"\bmid[- ]?level\b|\bmiddle\b", re.IGNORECASE)),
    (SeniorityLevel.JUNIOR, re.compile(r"\bjunior\b|\bjr\b", re.IGNORECASE)),
)

# "contract" is broad, so the B2B rule runs before the narrower ones
ENGAGEMENT_RULES = (
    (
        EngagementType.CONTRACT_B2B,
        re.compile(r"\bb2b\b|\bc2c\b|contractor|outside\s+ir35|\b1099\b|contract", re.IGNORECASE),
    ),
    (EngagementType.FREELANCE, re.compile(r"freelance|project[- ]based", re.IGNORECASE)),
    (EngagementType.INSIDE_IR35, re.compile(r"inside\s+ir35|\bpaye\b", re.IGNORECASE)),
    (
        EngagementType.EMPLOYMENT,
        re.compile(r"permanent|full[- ]time\s+employee|\bfte\s+only\b", re.IGNORECASE),
    ),
)
