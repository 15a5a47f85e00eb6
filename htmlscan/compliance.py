"""OWASP Top 10 2021 categories used as finding guidelines."""

from htmlscan.models import Finding, Report, Severity

OWASP_TOP_10: dict[str, dict] = {
    "A01:2021": {"name": "Broken Access Control"},
    "A02:2021": {"name": "Cryptographic Failures"},
    "A03:2021": {"name": "Injection"},
    "A04:2021": {"name": "Insecure Design"},
    "A05:2021": {"name": "Security Misconfiguration"},
    "A06:2021": {"name": "Vulnerable and Outdated Components"},
    "A07:2021": {"name": "Identification and Authentication Failures"},
    "A08:2021": {"name": "Software and Data Integrity Failures"},
    "A09:2021": {"name": "Security Logging and Monitoring Failures"},
    "A10:2021": {"name": "Server-Side Request Forgery"},
}


def guideline_for(owasp_id: str | None) -> str | None:
    """Render an OWASP category id as 'OWASP A03:2021 - Injection'."""
    if owasp_id is None:
        return None
    return f"OWASP {owasp_id} - {OWASP_TOP_10[owasp_id]['name']}"


def map_finding_to_owasp(finding: Finding) -> str | None:
    """Map a finding back to its OWASP Top 10 2021 category id."""
    if not finding.guideline or not finding.guideline.startswith("OWASP "):
        return None
    owasp_id = finding.guideline.split()[1]
    return owasp_id if owasp_id in OWASP_TOP_10 else None


def group_by_owasp(report: Report, min_severity: Severity = Severity.SUGGESTION) -> dict[str, list[Finding]]:
    """Group findings by OWASP Top 10 category."""
    groups: dict[str, list[Finding]] = {}

    for f in report.findings:
        if f.severity < min_severity:
            continue
        owasp = map_finding_to_owasp(f)
        if owasp:
            groups.setdefault(owasp, []).append(f)

    return groups
