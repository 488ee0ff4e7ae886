"""
Eligibility gate for extracted vacancies.

A hard filter, not a score: a vacancy is eligible only when it can be worked
as a B2B/contractor engagement, remotely, with no geographic restriction that
excludes the candidate. Unknown engagement type or remote policy passes
(benefit of the doubt).

The scanner depends only on the EligibilityAssessor protocol, so a different
gate can be injected without touching scanning code.
"""

from dataclasses import dataclass, field
from typing import Iterable, Protocol

from scout.contexts.extraction.vacancy_data_structure import (
    EngagementType,
    ExtractedVacancy,
    RemotePolicy,
)

EXCLUDED_ENGAGEMENT_TYPES = frozenset({EngagementType.EMPLOYMENT, EngagementType.INSIDE_IR35})
EXCLUDED_REMOTE_POLICIES = frozenset({RemotePolicy.ON_SITE, RemotePolicy.HYBRID})

# Compared lowercase
EXCLUSIONARY_GEO_RESTRICTIONS = frozenset(
    restriction.lower()
    for restriction in (
        "UK-only",
        "EU-only",
        "US-only",
        "AU-only",
        "UK-based",
        "EU-based",
        "US-based",
        "AU-based",
        "Work-Auth-Required",
        "No-Visa-Sponsorship",
        "Security-Clearance-Required",
    )
)


@dataclass(frozen=True)
class EligibilityRule:
    """Outcome of one eligibility rule."""

    rule_name: str
    passed: bool
    reason: str

    def to_dict(self) -> dict:
        return {"rule": self.rule_name, "passed": self.passed, "reason": self.reason}


@dataclass(frozen=True)
class EligibilityAssessment:
    """
    Verdict for one vacancy with per-rule detail.

    Attributes:
        vacancy_id: Identifier of the assessed vacancy
        is_eligible: True iff every rule passed
        summary: One-line human-readable verdict
        rules: Every rule evaluated, in order
    """

    vacancy_id: str
    is_eligible: bool
    summary: str
    rules: tuple[EligibilityRule, ...] = field(default_factory=tuple)

    @property
    def reasons(self) -> list[str]:
        return [rule.reason for rule in self.rules]

    @property
    def failed_rules(self) -> list[EligibilityRule]:
        return [rule for rule in self.rules if not rule.passed]

    def to_dict(self) -> dict:
        return {
            "is_eligible": self.is_eligible,
            "summary": self.summary,
            "rules": [rule.to_dict() for rule in self.rules],
        }


class EligibilityAssessor(Protocol):
    """Anything that can judge a vacancy."""

    def assess(self, vacancy: ExtractedVacancy) -> EligibilityAssessment: ...


class EligibilityGate:
    """Default rule-based gate for remote B2B/contractor work."""

    def _engagement_rule(self, vacancy: ExtractedVacancy) -> EligibilityRule:
        engagement = vacancy.engagement_type.value
        if vacancy.engagement_type in EXCLUDED_ENGAGEMENT_TYPES:
            return EligibilityRule(
                "Engagement Type", False, f"{engagement} - payroll employment is not available"
            )
        return EligibilityRule(
            "Engagement Type", True, f"{engagement} - eligible for B2B/contractor work"
        )

    def _remote_rule(self, vacancy: ExtractedVacancy) -> EligibilityRule:
        policy = vacancy.remote_policy.value
        if vacancy.remote_policy in EXCLUDED_REMOTE_POLICIES:
            return EligibilityRule("Remote Policy", False, f"{policy} - requires physical presence")
        return EligibilityRule("Remote Policy", True, f"{policy} - remote work possible")

    def _geo_rule(self, vacancy: ExtractedVacancy) -> EligibilityRule:
        restricted = [
            restriction
            for restriction in vacancy.geo_restrictions
            if restriction.lower() in EXCLUSIONARY_GEO_RESTRICTIONS
        ]
        if restricted:
            return EligibilityRule(
                "Geographic Restrictions", False, f"Restricted: {', '.join(restricted)}"
            )
        return EligibilityRule(
            "Geographic Restrictions", True, "No exclusionary geographic restrictions detected"
        )

    def assess(self, vacancy: ExtractedVacancy) -> EligibilityAssessment:
        """
        Evaluate every rule against a vacancy.

        Rules:
        1. Engagement Type: Employment and InsideIR35 fail
        2. Remote Policy: OnSite and Hybrid fail
        3. Geographic Restrictions: any exclusionary restriction fails

        Returns:
            EligibilityAssessment with all three rules, even when an early one fails
        """
        rules = (
            self._engagement_rule(vacancy),
            self._remote_rule(vacancy),
            self._geo_rule(vacancy),
        )

        failed = sum(1 for rule in rules if not rule.passed)
        if failed:
            summary = f"Ineligible - {failed} rule(s) failed"
        else:
            summary = "Eligible - B2B/contractor remote work is possible"

        return EligibilityAssessment(
            vacancy_id=vacancy.vacancy_id,
            is_eligible=failed == 0,
            summary=summary,
            rules=rules,
        )


def is_eligible(vacancy: ExtractedVacancy, gate: EligibilityAssessor = None) -> bool:
    """True if the vacancy passes every rule of the gate (default gate if None)."""
    gate = gate or EligibilityGate()
    return gate.assess(vacancy).is_eligible


def filter_eligible(
    vacancies: Iterable[ExtractedVacancy], gate: EligibilityAssessor = None
) -> list[ExtractedVacancy]:
    """Keep only eligible vacancies, preserving order."""
    gate = gate or EligibilityGate()
    return [vacancy for vacancy in vacancies if gate.assess(vacancy).is_eligible]
