"""Data models for HTML scan findings and reports."""

from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    ERROR = "Error"
    WARNING = "Warning"
    SUGGESTION = "Suggestion"

    @property
    def rank(self) -> int:
        return {
            Severity.ERROR: 2,
            Severity.WARNING: 1,
            Severity.SUGGESTION: 0,
        }[self]

    def __ge__(self, other: "Severity") -> bool:
        return self.rank >= other.rank

    def __gt__(self, other: "Severity") -> bool:
        return self.rank > other.rank

    def __le__(self, other: "Severity") -> bool:
        return self.rank <= other.rank

    def __lt__(self, other: "Severity") -> bool:
        return self.rank < other.rank


class RiskLevel(Enum):
    """Security level derived from the score. HIGH means well protected."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class Finding:
    rule_id: str
    severity: Severity
    message: str
    remediation: str
    guideline: str | None = None
    cwe_id: str | None = None
    line: int = 1

    @property
    def location(self) -> str:
        return f"line {self.line}"

    def to_dict(self) -> dict:
        return {
            "rule_id": self.rule_id,
            "severity": self.severity.value,
            "message": self.message,
            "remediation": self.remediation,
            "guideline": self.guideline,
            "cwe_id": self.cwe_id,
            "line": self.line,
        }


@dataclass(frozen=True)
class Summary:
    external_links_without_noopener: int = 0
    forms_count: int = 0
    iframes_count: int = 0
    insecure_resources_count: int = 0

    def to_dict(self) -> dict:
        return {
            "external_links_without_noopener": self.external_links_without_noopener,
            "forms_count": self.forms_count,
            "iframes_count": self.iframes_count,
            "insecure_resources_count": self.insecure_resources_count,
        }


@dataclass(frozen=True)
class Report:
    score: int
    risk_level: RiskLevel
    errors: tuple[Finding, ...] = ()
    warnings: tuple[Finding, ...] = ()
    suggestions: tuple[Finding, ...] = ()
    summary: Summary = field(default_factory=Summary)
    truncated: bool = False

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def suggestion_count(self) -> int:
        return len(self.suggestions)

    @property
    def total_issues(self) -> int:
        return self.error_count + self.warning_count + self.suggestion_count

    @property
    def findings(self) -> list[Finding]:
        """All findings, errors first, each bucket in detector order."""
        return [*self.errors, *self.warnings, *self.suggestions]

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "risk_level": self.risk_level.value,
            "counts": {
                "errors": self.error_count,
                "warnings": self.warning_count,
                "suggestions": self.suggestion_count,
                "total_issues": self.total_issues,
            },
            "summary": self.summary.to_dict(),
            "truncated": self.truncated,
            "errors": [f.to_dict() for f in self.errors],
            "warnings": [f.to_dict() for f in self.warnings],
            "suggestions": [f.to_dict() for f in self.suggestions],
        }
