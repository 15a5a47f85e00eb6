"""Scan engine: run detectors, score findings and assemble the report."""

import logging

from htmlscan.config import Config
from htmlscan.models import Finding, Report, RiskLevel, Severity, Summary
from htmlscan.rules import DETECTORS, deduction_for
from htmlscan.rules.forms import find_forms
from htmlscan.rules.injection import IFRAME_TAG
from htmlscan.rules.links import find_unsafe_links
from htmlscan.rules.transport import find_insecure_resources

logger = logging.getLogger(__name__)

MAX_SCORE = 100
MIN_SCORE = 0


def compute_score(findings: list[Finding]) -> int:
    """Start at 100, subtract each finding's rule weight, clamp to [0, 100]."""
    score = MAX_SCORE
    for f in findings:
        score -= deduction_for(f.rule_id)
    return max(MIN_SCORE, min(MAX_SCORE, score))


def risk_level(score: int) -> RiskLevel:
    if score >= 90:
        return RiskLevel.HIGH
    if score >= 70:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def build_summary(text: str) -> Summary:
    """Informational tallies re-derived from the raw text."""
    return Summary(
        external_links_without_noopener=len(find_unsafe_links(text)),
        forms_count=len(find_forms(text)),
        iframes_count=len(IFRAME_TAG.findall(text)),
        insecure_resources_count=len(find_insecure_resources(text)),
    )


def run_detectors(text: str, disabled: list[str] | None = None) -> list[Finding]:
    """Run every enabled detector in registry order.

    A detector that raises contributes nothing; the remaining detectors still run.
    """
    skip = set(disabled or ())
    findings: list[Finding] = []
    for name, detector_cls in DETECTORS.items():
        if name in skip:
            continue
        try:
            findings.extend(detector_cls().detect(text))
        except Exception:
            logger.exception("Detector %s failed; treating it as having no findings", name)
    return findings


def assemble_report(findings: list[Finding], summary: Summary, truncated: bool = False) -> Report:
    score = compute_score(findings)
    return Report(
        score=score,
        risk_level=risk_level(score),
        errors=tuple(f for f in findings if f.severity == Severity.ERROR),
        warnings=tuple(f for f in findings if f.severity == Severity.WARNING),
        suggestions=tuple(f for f in findings if f.severity == Severity.SUGGESTION),
        summary=summary,
        truncated=truncated,
    )


def scan(text: str, config: Config | None = None) -> Report:
    """Scan markup text and return a fresh report. Never raises on odd input."""
    config = config or Config()
    text = text or ""

    truncated = len(text) > config.max_input_size
    if truncated:
        logger.warning(
            "Input of %d characters truncated to %d before scanning",
            len(text), config.max_input_size,
        )
        text = text[: config.max_input_size]

    findings = run_detectors(text, config.disabled_detectors)
    try:
        summary = build_summary(text)
    except Exception:
        logger.exception("Summary tallies failed; reporting zero counts")
        summary = Summary()
    return assemble_report(findings, summary, truncated=truncated)
