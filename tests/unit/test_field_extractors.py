"""Unit tests for the per-field detectors."""

import pytest

from scout.contexts.extraction.field_extractors import (
    annualize,
    detect_company,
    detect_currency,
    detect_engagement_type,
    detect_geo_restrictions,
    detect_location,
    detect_remote_policy,
    detect_salary,
    detect_seniority,
    detect_skills,
    detect_title,
    is_ui_noise,
    looks_like_title,
)
from scout.contexts.extraction.vacancy_data_structure import (
    EngagementType,
    LocationMatch,
    RemotePolicy,
    SeniorityLevel,
)

# =============================================================================
# TITLE
# =============================================================================


class TestDetectTitle:
    @pytest.mark.unit
    def test_domain_title_found(self):
        match = detect_title(["Promoted", "Senior .NET Developer", "Acme Corp"])

        assert match.title == "Senior .NET Developer"
        assert match.line_index == 1

    @pytest.mark.unit
    def test_domain_pattern_beats_earlier_general_title(self):
        match = detect_title(["Backend Engineer", "Lead C# Engineer"])

        assert match.title == "Lead C# Engineer"
        assert match.line_index == 1

    @pytest.mark.unit
    def test_general_title_when_no_domain_title(self):
        match = detect_title(["Globex", "Machine Learning Engineer", "Remote"])

        assert match.title == "Machine Learning Engineer"
        assert match.line_index == 1

    @pytest.mark.unit
    def test_no_title(self):
        assert detect_title(["Acme Corp", "London, UK (Remote)", "$90K - $120K"]) is None

    @pytest.mark.unit
    def test_title_truncated(self):
        line = "Senior .NET Developer " + "x" * 300

        match = detect_title([line])

        assert len(match.title) == 120
        assert detect_title([line], max_length=30).title == line[:30]

    @pytest.mark.unit
    def test_looks_like_title(self):
        assert looks_like_title("Azure Cloud Architect")
        assert looks_like_title("Team Lead")
        assert not looks_like_title("Acme Corp")


# =============================================================================
# COMPANY
# =============================================================================


class TestDetectCompany:
    @pytest.mark.unit
    def test_first_plausible_line_after_title(self):
        lines = [
            "Senior .NET Developer",
            "Easy Apply",
            "London, UK (Remote)",
            "$90K - $120K",
            "IT",
            "Acme Corp",
        ]

        assert detect_company(lines, 0, ui_noise_phrases=["Easy Apply"]) == "Acme Corp"

    @pytest.mark.unit
    def test_lines_before_title_ignored(self):
        lines = ["Globex", "Senior .NET Developer"]

        assert detect_company(lines, 1) == ""

    @pytest.mark.unit
    def test_company_truncated(self):
        lines = ["Azure Developer", "A" * 150]

        assert detect_company(lines, 0) == "A" * 100
        assert detect_company(lines, 0, max_length=10) == "A" * 10

    @pytest.mark.unit
    def test_noise_matching_is_case_insensitive(self):
        assert is_ui_noise("EASY APPLY now", ["Easy Apply"])
        assert not is_ui_noise("Acme Corp", ["Easy Apply"])


# =============================================================================
# LOCATION
# =============================================================================


class TestDetectLocation:
    @pytest.mark.unit
    def test_city_country_with_qualifier(self):
        location = detect_location(["Senior .NET Developer", "Acme Corp", "London, UK (Remote)"])

        assert location == LocationMatch(city="London", country="UK", qualifier="Remote")

    @pytest.mark.unit
    def test_single_region_is_country(self):
        location = detect_location(["Germany (Hybrid)"])

        assert location.city == ""
        assert location.country == "Germany"
        assert location.qualifier == "Hybrid"

    @pytest.mark.unit
    def test_delimited_card_line(self):
        location = detect_location(["Platform Engineer", "Acme · Berlin, Germany · Hybrid"])

        assert location == LocationMatch(city="Berlin", country="Germany", qualifier="Hybrid")

    @pytest.mark.unit
    def test_delimited_work_mode_becomes_qualifier(self):
        location = detect_location(["Globex • Remote"])

        assert location == LocationMatch(qualifier="Remote")

    @pytest.mark.unit
    def test_parenthetical_tried_on_all_lines_before_delimited(self):
        location = detect_location(["Acme · Paris, France", "Madrid, Spain (On-site)"])

        assert location.city == "Madrid"
        assert location.qualifier == "On-site"

    @pytest.mark.unit
    def test_no_location(self):
        assert detect_location(["Senior .NET Developer", "Acme Corp"]) == LocationMatch()


# =============================================================================
# SALARY
# =============================================================================


class TestDetectSalary:
    @pytest.mark.unit
    def test_k_range(self):
        salary = detect_salary("$80K - $110K")

        assert salary.minimum == 80000
        assert salary.maximum == 110000
        assert salary.currency == "USD"

    @pytest.mark.unit
    def test_hourly_range_is_annualized(self):
        salary = detect_salary("$40/hr - $60/hr")

        assert salary.minimum == 83200
        assert salary.maximum == 124800

    @pytest.mark.unit
    def test_monthly_range_in_euros(self):
        salary = detect_salary("€5,000 - €6,500 per month")

        assert salary.minimum == 60000
        assert salary.maximum == 78000
        assert salary.currency == "EUR"

    @pytest.mark.unit
    def test_plain_range_in_pounds(self):
        salary = detect_salary("£45,000 - £55,000")

        assert (salary.minimum, salary.maximum, salary.currency) == (45000, 55000, "GBP")

    @pytest.mark.unit
    def test_k_on_one_amount_scales_both(self):
        salary = detect_salary("$90 - $120K")

        assert (salary.minimum, salary.maximum) == (90000, 120000)

    @pytest.mark.unit
    def test_configurable_hours_per_year(self):
        salary = detect_salary("$50/hr - $60/hr", hours_per_year=2000)

        assert (salary.minimum, salary.maximum) == (100000, 120000)

    @pytest.mark.unit
    def test_no_salary_still_reports_currency(self):
        salary = detect_salary("Competitive pay in £, great team")

        assert salary.minimum is None
        assert salary.maximum is None
        assert salary.currency == "GBP"

    @pytest.mark.unit
    def test_currency_defaults(self):
        assert detect_currency("no symbols here") == "USD"
        assert detect_currency("no symbols here", default_currency="CAD") == "CAD"
        assert detect_currency("£ and €") == "EUR"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "period,expected",
        [("hr", 2080), ("hourly", 2080), ("mo", 12), ("month", 12), ("yr", 1), ("annum", 1), (None, 1)],
    )
    def test_annualize(self, period, expected):
        assert annualize(1, period) == expected


# =============================================================================
# CLASSIFICATIONS
# =============================================================================


class TestClassifications:
    @pytest.mark.unit
    def test_fully_remote_beats_hybrid(self):
        assert detect_remote_policy("Hybrid option, or fully remote") == RemotePolicy.FULLY_REMOTE

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("100% remote team", RemotePolicy.FULLY_REMOTE),
            ("Remote-friendly company", RemotePolicy.REMOTE_FRIENDLY),
            ("Hybrid, 2 days a week", RemotePolicy.HYBRID),
            ("On-site in Warsaw", RemotePolicy.ON_SITE),
            ("Work from our office", RemotePolicy.ON_SITE),
            ("Remote", RemotePolicy.FULLY_REMOTE),
            ("Collaborate remotely", RemotePolicy.UNKNOWN),
            ("", RemotePolicy.UNKNOWN),
        ],
    )
    def test_remote_policy(self, text, expected):
        assert detect_remote_policy(text) == expected

    @pytest.mark.unit
    def test_location_qualifier_is_a_hint(self):
        assert detect_remote_policy("Senior .NET Developer", "Remote") == RemotePolicy.FULLY_REMOTE
        assert detect_remote_policy("Senior .NET Developer", None) == RemotePolicy.UNKNOWN

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Senior Staff Engineer", SeniorityLevel.PRINCIPAL),
            ("Principal Architect", SeniorityLevel.PRINCIPAL),
            ("Tech Lead", SeniorityLevel.LEAD),
            ("Sr. .NET Developer", SeniorityLevel.SENIOR),
            ("Mid-level Engineer", SeniorityLevel.MIDDLE),
            ("Jr. Developer", SeniorityLevel.JUNIOR),
            ("Seniority not specified", SeniorityLevel.UNKNOWN),
            ("Team Leader .NET", SeniorityLevel.LEAD),
            ("Team leadership skills", SeniorityLevel.UNKNOWN),
        ],
    )
    def test_seniority(self, text, expected):
        assert detect_seniority(text) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("B2B contract", EngagementType.CONTRACT_B2B),
            ("Outside IR35", EngagementType.CONTRACT_B2B),
            ("Freelance, project-based", EngagementType.FREELANCE),
            ("Inside IR35", EngagementType.INSIDE_IR35),
            ("PAYE only", EngagementType.INSIDE_IR35),
            ("Permanent position", EngagementType.EMPLOYMENT),
            ("Full-time employee", EngagementType.EMPLOYMENT),
            ("Great benefits", EngagementType.UNKNOWN),
        ],
    )
    def test_engagement_type(self, text, expected):
        assert detect_engagement_type(text) == expected


# =============================================================================
# SKILLS AND RESTRICTIONS
# =============================================================================


@pytest.mark.unit
def test_short_skills_match_exact_case():
    text = "Strong C# and .NET, docker, kubernetes and some sql"
    skills = ["C#", ".NET", "Docker", "Kubernetes", "SQL"]

    assert detect_skills(text, skills) == ["C#", ".NET", "Docker", "Kubernetes"]


@pytest.mark.unit
def test_skills_follow_vocabulary_order_and_dedupe():
    skills = ["Kubernetes", "Docker", "docker"]

    assert detect_skills("Docker and Kubernetes", skills) == ["Kubernetes", "Docker"]


@pytest.mark.unit
def test_geo_restrictions():
    text = "UK-only role. No visa sponsorship. Must be authorized to work in the UK."

    assert detect_geo_restrictions(text) == ["UK-only", "No-Visa-Sponsorship", "Work-Auth-Required"]


@pytest.mark.unit
def test_geo_restrictions_region_variants():
    assert detect_geo_restrictions("US based applicants; EU-only") == ["US-based", "EU-only"]
    assert detect_geo_restrictions("Contact us only by email") == []
    assert detect_geo_restrictions("Security clearance required") == ["Security-Clearance-Required"]
