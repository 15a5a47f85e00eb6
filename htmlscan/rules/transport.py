"""Transport security detectors: plain HTTP resources and mixed content."""

import re

from htmlscan.models import Finding
from htmlscan.rules.base import BaseDetector, LineIndex

INSECURE_RESOURCE = re.compile(r"""(src|href|action)\s*=\s*["']http://([^"']+)["']""", re.IGNORECASE)
HTTPS_MARKER = re.compile(r"https://", re.IGNORECASE)
INSECURE_SRC = re.compile(r"""src\s*=\s*["']http://[^"']+["']""", re.IGNORECASE)


def find_insecure_resources(text: str) -> list[re.Match]:
    return list(INSECURE_RESOURCE.finditer(text))


class InsecureResourceDetector(BaseDetector):
    name = "insecure-resources"
    rule_ids = ("insecure-resource",)

    def detect(self, text: str) -> list[Finding]:
        lines = LineIndex(text)
        return [
            self._finding(
                "insecure-resource",
                f"Insecure resource loaded over HTTP: {match.group(2)}",
                "Use HTTPS instead of HTTP to prevent man-in-the-middle attacks",
                line=lines.line_of(match.start()),
            )
            for match in find_insecure_resources(text)
        ]


class MixedContentDetector(BaseDetector):
    """A single finding for the whole document, not one per resource."""

    name = "mixed-content"
    rule_ids = ("mixed-content",)

    def detect(self, text: str) -> list[Finding]:
        if not HTTPS_MARKER.search(text):
            return []
        first = INSECURE_SRC.search(text)
        if first is None:
            return []
        return [
            self._finding(
                "mixed-content",
                "Mixed content detected: HTTPS page loading HTTP resources",
                "Use HTTPS for all resources on HTTPS pages to prevent mixed content warnings "
                "and security issues",
                line=LineIndex(text).line_of(first.start()),
            )
        ]
