"""Script injection detectors: inline handlers, dynamic code, unsandboxed iframes."""

import re

from htmlscan.models import Finding
from htmlscan.rules.base import BaseDetector, LineIndex, tag_pattern

INLINE_HANDLER = re.compile(r"""\s(on\w+)\s*=\s*["'][^"']*["']""", re.IGNORECASE)

DANGEROUS_PATTERNS: list[dict] = [
    {
        "name": "eval()",
        "pattern": re.compile(r"eval\s*\(", re.IGNORECASE),
        "risk": "High",
    },
    {
        "name": "innerHTML",
        "pattern": re.compile(r"innerHTML\s*=", re.IGNORECASE),
        "risk": "Medium",
    },
    {
        "name": "document.write()",
        "pattern": re.compile(r"document\.write\s*\(", re.IGNORECASE),
        "risk": "High",
    },
    {
        "name": "javascript: protocol",
        "pattern": re.compile(r"javascript:", re.IGNORECASE),
        "risk": "High",
    },
]

IFRAME_TAG = tag_pattern("iframe")
SANDBOX_ATTR = re.compile(r"sandbox\s*=", re.IGNORECASE)


class InlineEventHandlerDetector(BaseDetector):
    name = "inline-event-handlers"
    rule_ids = ("inline-event-handler",)

    def detect(self, text: str) -> list[Finding]:
        lines = LineIndex(text)
        findings = []
        for match in INLINE_HANDLER.finditer(text):
            event = match.group(1)
            findings.append(
                self._finding(
                    "inline-event-handler",
                    f"Inline event handler detected: {event} (XSS vulnerability)",
                    f"Remove inline {event} handler and use addEventListener() instead to prevent XSS attacks",
                    line=lines.line_of(match.start(1)),
                )
            )
        return findings


class DangerousCodeDetector(BaseDetector):
    """One finding per dangerous pattern present, however often it occurs."""

    name = "dangerous-code"
    rule_ids = ("dangerous-code-high", "dangerous-code-medium")

    def detect(self, text: str) -> list[Finding]:
        lines = LineIndex(text)
        findings = []
        for entry in DANGEROUS_PATTERNS:
            match = entry["pattern"].search(text)
            if not match:
                continue
            rule_id = "dangerous-code-high" if entry["risk"] == "High" else "dangerous-code-medium"
            findings.append(
                self._finding(
                    rule_id,
                    f"Potentially dangerous code detected: {entry['name']} ({entry['risk']} risk)",
                    f"Avoid using {entry['name']} as it can lead to XSS vulnerabilities. Use safer alternatives.",
                    line=lines.line_of(match.start()),
                )
            )
        return findings


class IframeSandboxDetector(BaseDetector):
    name = "iframe-sandbox"
    rule_ids = ("unsandboxed-iframe",)

    def detect(self, text: str) -> list[Finding]:
        lines = LineIndex(text)
        findings = []
        for match in IFRAME_TAG.finditer(text):
            if SANDBOX_ATTR.search(match.group(0)):
                continue
            findings.append(
                self._finding(
                    "unsandboxed-iframe",
                    "Iframe missing sandbox attribute",
                    "Add sandbox attribute to iframe to restrict capabilities and prevent XSS",
                    line=lines.line_of(match.start()),
                )
            )
        return findings
