"""
Field extractors for OCR listing blocks.

Each detector is a pure function over a block's lines or text and is
independent of the others. Detectors with more than one strategy try them in
the order fixed by a module-level tuple (TITLE_PATTERNS, LOCATION_STRATEGIES,
SALARY_STRATEGIES, the *_RULES tables), so priority lives in data rather
than in nested conditionals.

None of the detectors raise on odd input: absent fields come back as empty
strings, None bounds or an UNKNOWN enum member.
"""

from typing import Callable, Optional, Sequence

from scout.contexts.extraction.defaults import (
    COMPANY_MAX_LENGTH,
    DEFAULT_CURRENCY,
    HOURS_PER_YEAR,
    MIN_COMPANY_LENGTH,
    MONTHS_PER_YEAR,
    TITLE_MAX_LENGTH,
)
from scout.contexts.extraction.extraction_patterns import (
    CURRENCY_SYMBOLS,
    ENGAGEMENT_RULES,
    GEO_RESTRICTION_RULES,
    REMOTE_POLICY_RULES,
    SENIORITY_RULES,
    TITLE_PATTERNS,
    GeoRestrictionPatterns,
    LocationPatterns,
    SalaryPatterns,
)
from scout.contexts.extraction.vacancy_data_structure import (
    EngagementType,
    LocationMatch,
    RemotePolicy,
    SalaryRange,
    SeniorityLevel,
    TitleMatch,
)


def _first_matching_label(text: str, rules, default):
    """Return the label of the first (label, pattern) rule that matches text."""
    for label, pattern in rules:
        if pattern.search(text):
            return label
    return default


# =============================================================================
# TITLE
# =============================================================================


def looks_like_title(line: str) -> bool:
    """True if the line matches any title pattern. Shared with the segmenter."""
    return any(pattern.search(line) for pattern in TITLE_PATTERNS)


def detect_title(lines: Sequence[str], max_length: int = TITLE_MAX_LENGTH) -> Optional[TitleMatch]:
    """
    Find the job title in a block.

    Every line is tried against the first pattern before any line is tried
    against the next one, so a technology-specific title further down beats a
    generic one near the top.

    Args:
        lines: Block lines, stripped
        max_length: Titles are truncated to this many characters

    Returns:
        TitleMatch with the (truncated) line and its index, or None
    """
    for pattern in TITLE_PATTERNS:
        for index, line in enumerate(lines):
            if pattern.search(line):
                return TitleMatch(title=line[:max_length], line_index=index)
    return None


# =============================================================================
# COMPANY
# =============================================================================


def is_ui_noise(line: str, ui_noise_phrases: Sequence[str]) -> bool:
    """True if the line contains any platform UI phrase (case-insensitive)."""
    lowered = line.lower()
    return any(phrase.lower() in lowered for phrase in ui_noise_phrases)


def is_location_shaped(line: str) -> bool:
    return LocationPatterns.PARENTHETICAL.search(line) is not None


def is_salary_shaped(line: str) -> bool:
    return SalaryPatterns.RANGE.search(line) is not None or SalaryPatterns.K_RANGE.search(line) is not None


def detect_company(
    lines: Sequence[str],
    title_index: int,
    ui_noise_phrases: Sequence[str] = (),
    max_length: int = COMPANY_MAX_LENGTH,
    min_length: int = MIN_COMPANY_LENGTH,
) -> str:
    """
    Find the company name: the first plausible line after the title.

    Skips UI noise, location-shaped lines, salary-shaped lines and lines
    shorter than min_length.

    Returns:
        Company name truncated to max_length, or "" if no line qualifies
    """
    for line in lines[title_index + 1 :]:
        if is_ui_noise(line, ui_noise_phrases):
            continue
        if is_location_shaped(line):
            continue
        if is_salary_shaped(line):
            continue
        if len(line) < min_length:
            continue
        return line[:max_length]
    return ""


# =============================================================================
# LOCATION
# =============================================================================


def _split_regions(location: str) -> tuple[str, str]:
    """Split "City, Country" into (city, country); a single region is the country."""
    if "," in location:
        city, country = location.split(",", 1)
        return city.strip(), country.strip()
    return "", location.strip()


def _match_parenthetical_location(line: str) -> Optional[LocationMatch]:
    """'London, UK (Remote)' style."""
    match = LocationPatterns.PARENTHETICAL.search(line)
    if not match:
        return None
    city, country = _split_regions(match.group(1))
    return LocationMatch(city=city, country=country, qualifier=match.group(2))


def _match_delimited_location(line: str) -> Optional[LocationMatch]:
    """'Acme · Berlin, Germany · Hybrid' style."""
    match = LocationPatterns.DELIMITED.search(line)
    if not match:
        return None

    location, qualifier = match.group(2), match.group(3)

    # "Acme · Remote": the middle segment is a work mode, not a place
    if LocationPatterns.WORK_MODE.match(location):
        return LocationMatch(qualifier=qualifier or location)

    city, country = _split_regions(location)
    return LocationMatch(city=city, country=country, qualifier=qualifier)


LOCATION_STRATEGIES: tuple[Callable[[str], Optional[LocationMatch]], ...] = (
    _match_parenthetical_location,
    _match_delimited_location,
)


def detect_location(lines: Sequence[str]) -> LocationMatch:
    """
    Find the location and its work-mode qualifier.

    Each strategy is tried on every line before the next strategy is tried.
    Title-like and salary-shaped lines are never read as locations.

    Returns:
        LocationMatch (empty city/country and no qualifier when nothing matched)
    """
    candidates = [line for line in lines if not looks_like_title(line) and not is_salary_shaped(line)]

    for strategy in LOCATION_STRATEGIES:
        for line in candidates:
            location = strategy(line)
            if location is not None:
                return location
    return LocationMatch()


# =============================================================================
# SALARY
# =============================================================================


def detect_currency(text: str, default_currency: str = DEFAULT_CURRENCY) -> str:
    """ISO code for the first currency symbol present (€ then £), else the default."""
    for symbol, code in CURRENCY_SYMBOLS:
        if symbol in text:
            return code
    return default_currency


def _parse_amount(raw: str) -> Optional[float]:
    try:
        return float(raw.replace(",", ""))
    except ValueError:
        return None


def annualize(
    amount: float,
    period: Optional[str],
    hours_per_year: float = HOURS_PER_YEAR,
    months_per_year: float = MONTHS_PER_YEAR,
) -> float:
    """
    Convert an amount quoted per period into a yearly figure.

    Hourly periods (hr, hour, hourly) use hours_per_year, monthly periods
    (mo, month, monthly) use months_per_year; yearly or missing periods are
    returned unchanged.
    """
    period = (period or "").lower()
    if period.startswith("h"):
        amount *= hours_per_year
    elif period.startswith("mo"):
        amount *= months_per_year
    return round(amount, 2)


def _match_k_range(text: str) -> Optional[tuple[float, float, Optional[str]]]:
    """'$80K - $110K' → (80000, 110000, None)."""
    match = SalaryPatterns.K_RANGE.search(text)
    if not match:
        return None
    low, high = _parse_amount(match.group(1)), _parse_amount(match.group(2))
    if low is None or high is None:
        return None
    return low * 1000, high * 1000, None


def _match_general_range(text: str) -> Optional[tuple[float, float, Optional[str]]]:
    """'$40/hr - $60/hr' → (40, 60, 'hr'); a K on either amount scales both."""
    match = SalaryPatterns.RANGE.search(text)
    if not match:
        return None
    low, high = _parse_amount(match.group("low")), _parse_amount(match.group("high"))
    if low is None or high is None:
        return None
    if match.group("low_k") or match.group("high_k"):
        low, high = low * 1000, high * 1000
    period = match.group("high_period") or match.group("low_period")
    return low, high, period


SALARY_STRATEGIES = (
    _match_k_range,
    _match_general_range,
)


def detect_salary(
    text: str,
    hours_per_year: float = HOURS_PER_YEAR,
    months_per_year: float = MONTHS_PER_YEAR,
    default_currency: str = DEFAULT_CURRENCY,
) -> SalaryRange:
    """
    Find a salary range and express it as an annual figure.

    Currency is detected from symbols anywhere in the text, independently of
    whether an amount is found.

    Returns:
        SalaryRange; minimum/maximum are None when no range pattern matched
    """
    currency = detect_currency(text, default_currency)

    for strategy in SALARY_STRATEGIES:
        found = strategy(text)
        if found is None:
            continue
        low, high, period = found
        return SalaryRange(
            minimum=annualize(low, period, hours_per_year, months_per_year),
            maximum=annualize(high, period, hours_per_year, months_per_year),
            currency=currency,
        )

    return SalaryRange(currency=currency)


# =============================================================================
# CLASSIFICATIONS
# =============================================================================


def detect_remote_policy(text: str, location_qualifier: Optional[str] = None) -> RemotePolicy:
    """Classify remote policy from block text plus the location qualifier hint."""
    combined = f"{text} {location_qualifier}" if location_qualifier else text
    return _first_matching_label(combined, REMOTE_POLICY_RULES, RemotePolicy.UNKNOWN)


def detect_seniority(text: str) -> SeniorityLevel:
    return _first_matching_label(text, SENIORITY_RULES, SeniorityLevel.UNKNOWN)


def detect_engagement_type(text: str) -> EngagementType:
    return _first_matching_label(text, ENGAGEMENT_RULES, EngagementType.UNKNOWN)


# =============================================================================
# SKILLS AND RESTRICTIONS
# =============================================================================


def detect_skills(text: str, skills: Sequence[str]) -> list[str]:
    """
    Find vocabulary skills mentioned in the text.

    Tokens of 4 characters or fewer must match exact-case ("SQL", "C#", "REST")
    so they don't fire inside ordinary words; longer tokens match
    case-insensitively.

    Returns:
        Skills in vocabulary order, de-duplicated case-insensitively
    """
    lowered = text.lower()
    found = []
    seen = set()

    for skill in skills:
        key = skill.lower()
        if key in seen:
            continue
        detected = skill in text if len(skill) <= 4 else key in lowered
        if detected:
            found.append(skill)
            seen.add(key)

    return found


def detect_geo_restrictions(text: str) -> list[str]:
    """
    Find hiring restrictions tied to where a candidate lives or may work.

    Returns:
        Normalized labels such as "UK-only", "US-based", "No-Visa-Sponsorship",
        unique and in order of first appearance
    """
    restrictions = []

    for match in GeoRestrictionPatterns.REGION_LIMITED.finditer(text):
        label = f"{match.group('region')}-{match.group('scope').lower()}"
        if label not in restrictions:
            restrictions.append(label)

    for label, pattern in GEO_RESTRICTION_RULES:
        if pattern.search(text) and label not in restrictions:
            restrictions.append(label)

    return restrictions
