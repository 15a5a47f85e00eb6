"""Rule table: severity and score deduction for every rule id."""

from dataclasses import dataclass

from htmlscan.compliance import guideline_for
from htmlscan.models import Severity


@dataclass(frozen=True)
class Rule:
    rule_id: str
    title: str
    severity: Severity
    weight: int
    owasp_id: str | None = None
    cwe_id: str | None = None

    @property
    def guideline(self) -> str | None:
        return guideline_for(self.owasp_id)


_RULE_LIST = [
    Rule("inline-event-handler", "Inline event handler", Severity.ERROR, 10, "A03:2021", "CWE-79"),
    Rule("dangerous-code-high", "High-risk dynamic code", Severity.WARNING, 5, "A03:2021", "CWE-95"),
    Rule("dangerous-code-medium", "Medium-risk dynamic code", Severity.WARNING, 2, "A03:2021", "CWE-79"),
    Rule("missing-csp", "Missing Content Security Policy", Severity.ERROR, 15, "A05:2021", "CWE-693"),
    Rule("unsafe-csp", "Unsafe CSP directives", Severity.WARNING, 5, "A05:2021", "CWE-693"),
    Rule("missing-frame-options", "Missing X-Frame-Options", Severity.SUGGESTION, 0, "A05:2021", "CWE-1021"),
    Rule("unsafe-external-link", "External link without rel=noopener", Severity.ERROR, 5, "A01:2021", "CWE-1022"),
    Rule("insecure-resource", "Resource loaded over HTTP", Severity.WARNING, 3, "A02:2021", "CWE-319"),
    Rule("form-missing-csrf", "POST form without CSRF token", Severity.WARNING, 5, "A01:2021", "CWE-352"),
    Rule("insecure-form-action", "Form submitting over HTTP", Severity.ERROR, 10, "A02:2021", "CWE-319"),
    Rule("unsandboxed-iframe", "Iframe without sandbox", Severity.WARNING, 5, "A03:2021", "CWE-1021"),
    Rule("password-autocomplete", "Password input without autocomplete", Severity.SUGGESTION, 0, "A02:2021", "CWE-522"),
    Rule("mixed-content", "Mixed content", Severity.ERROR, 10, "A02:2021", "CWE-319"),
    Rule("missing-meta-description", "Missing meta description", Severity.SUGGESTION, 0),
    Rule("missing-open-graph", "Missing Open Graph tags", Severity.SUGGESTION, 0),
    Rule("image-lazy-loading", "Image without lazy loading", Severity.SUGGESTION, 0),
    Rule("sensitive-comment", "Sensitive data in HTML comment", Severity.ERROR, 10, "A01:2021", "CWE-615"),
    Rule("missing-referrer-policy", "Missing Referrer-Policy", Severity.SUGGESTION, 0, "A01:2021", "CWE-200"),
]

RULES: dict[str, Rule] = {rule.rule_id: rule for rule in _RULE_LIST}


def deduction_for(rule_id: str) -> int:
    """Score deduction for one finding of the given rule. Suggestions cost nothing."""
    rule = RULES[rule_id]
    if rule.severity == Severity.SUGGESTION:
        return 0
    return rule.weight
