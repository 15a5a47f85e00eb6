"""SARIF v2.1.0 output formatter for HTMLScan reports."""

import json
from datetime import datetime, timezone

from htmlscan import __version__
from htmlscan.models import Report, Severity
from htmlscan.rules.table import RULES, Rule

SARIF_SCHEMA = "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/main/sarif-2.1/schema/sarif-schema-2.1.0.json"

SEVERITY_TO_SARIF_LEVEL = {
    Severity.ERROR: "error",
    Severity.WARNING: "warning",
    Severity.SUGGESTION: "note",
}

# CWE taxonomy reference
CWE_TAXONOMY = {
    "name": "CWE",
    "organization": "MITRE",
    "shortDescription": {"text": "Common Weakness Enumeration"},
    "informationUri": "https://cwe.mitre.org/",
}


def _full_description(rule: Rule) -> str:
    refs = [ref for ref in (rule.guideline, rule.cwe_id) if ref]
    if not refs:
        return f"{rule.title}."
    return f"{rule.title} ({', '.join(refs)})."


def _rule_descriptor(rule: Rule) -> dict:
    """Describe a rule from the rule table alone; per-finding text belongs on results."""
    descriptor = {
        "id": rule.rule_id,
        "shortDescription": {"text": rule.title},
        "fullDescription": {"text": _full_description(rule)},
        "defaultConfiguration": {
            "level": SEVERITY_TO_SARIF_LEVEL[rule.severity]
        },
        "properties": {
            "tags": ["security"] if rule.owasp_id else ["seo"],
            "deduction": rule.weight,
        },
    }
    if rule.guideline:
        descriptor["properties"]["tags"].append(rule.guideline)
    if rule.cwe_id:
        descriptor["properties"]["tags"].append(rule.cwe_id)
        descriptor["relationships"] = [
            {
                "target": {
                    "id": rule.cwe_id,
                    "toolComponent": {"name": "CWE"},
                },
                "kinds": ["superset"],
            }
        ]
    return descriptor


def render_sarif(report: Report, min_severity: Severity = Severity.SUGGESTION, artifact: str = "input.html") -> str:
    """Render a report as SARIF v2.1.0 JSON."""
    findings = [f for f in report.findings if f.severity >= min_severity]

    # Collect unique rules
    rules_map: dict[str, dict] = {}
    for f in findings:
        if f.rule_id not in rules_map:
            rules_map[f.rule_id] = _rule_descriptor(RULES[f.rule_id])

    sarif_results = []
    for f in findings:
        sarif_result = {
            "ruleId": f.rule_id,
            "level": SEVERITY_TO_SARIF_LEVEL[f.severity],
            "message": {"text": f.message},
            "properties": {"remediation": f.remediation},
            "locations": [
                {
                    "physicalLocation": {
                        "artifactLocation": {"uri": artifact},
                        "region": {"startLine": f.line},
                    }
                }
            ],
        }
        if f.cwe_id:
            sarif_result["taxa"] = [
                {
                    "id": f.cwe_id,
                    "toolComponent": {"name": "CWE"},
                }
            ]
        sarif_results.append(sarif_result)

    cwe_taxa = []
    seen_cwes = set()
    for f in findings:
        if f.cwe_id and f.cwe_id not in seen_cwes:
            seen_cwes.add(f.cwe_id)
            cwe_taxa.append({
                "id": f.cwe_id,
                "shortDescription": {"text": f.cwe_id},
            })

    sarif = {
        "$schema": SARIF_SCHEMA,
        "version": "2.1.0",
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": "HTMLScan",
                        "version": __version__,
                        "rules": list(rules_map.values()),
                    }
                },
                "results": sarif_results,
                "taxonomies": [
                    {
                        **CWE_TAXONOMY,
                        "taxa": cwe_taxa,
                    }
                ] if cwe_taxa else [],
                "invocations": [
                    {
                        "executionSuccessful": True,
                        "endTimeUtc": datetime.now(timezone.utc).isoformat(),
                    }
                ],
                "properties": {
                    "securityScore": report.score,
                    "securityLevel": report.risk_level.value,
                },
            }
        ],
    }

    return json.dumps(sarif, indent=2)
