"""Policy declaration detectors for <meta> equivalents of security headers."""

import re

from htmlscan.models import Finding
from htmlscan.rules.base import BaseDetector, attr_pattern, tag_pattern

META_TAG = tag_pattern("meta")
CSP_EQUIV = attr_pattern("http-equiv", "Content-Security-Policy")
FRAME_OPTIONS_EQUIV = attr_pattern("http-equiv", "X-Frame-Options")
REFERRER_NAME = attr_pattern("name", "referrer")
# The content value is closed by the same quote that opened it, so
# 'self' and 'unsafe-inline' survive inside a double-quoted attribute.
CONTENT_ATTR = re.compile(r"""content\s*=\s*(["'])(.*?)\1""", re.IGNORECASE | re.DOTALL)
UNSAFE_DIRECTIVES = ("'unsafe-inline'", "'unsafe-eval'")


def find_meta(text: str, attribute: re.Pattern) -> str | None:
    """First <meta> tag carrying the given attribute, or None."""
    for tag in META_TAG.finditer(text):
        if attribute.search(tag.group(0)):
            return tag.group(0)
    return None


def csp_content(text: str) -> str | None:
    """Content of the first CSP meta tag, '' when it has none, None when absent."""
    meta = find_meta(text, CSP_EQUIV)
    if meta is None:
        return None
    content = CONTENT_ATTR.search(meta)
    return content.group(2) if content else ""


class ContentSecurityPolicyDetector(BaseDetector):
    name = "content-security-policy"
    rule_ids = ("missing-csp", "unsafe-csp")

    def detect(self, text: str) -> list[Finding]:
        content = csp_content(text)
        if content is None:
            return [
                self._finding(
                    "missing-csp",
                    "Missing Content Security Policy (CSP) header",
                    "Add <meta http-equiv=\"Content-Security-Policy\" content=\"default-src 'self'\"> "
                    "to prevent XSS attacks",
                )
            ]

        lowered = content.lower()
        if any(directive in lowered for directive in UNSAFE_DIRECTIVES):
            return [
                self._finding(
                    "unsafe-csp",
                    "CSP contains unsafe directives (unsafe-inline or unsafe-eval)",
                    "Remove unsafe-inline and unsafe-eval from CSP. Use nonces or hashes instead.",
                )
            ]
        return []


class FrameOptionsDetector(BaseDetector):
    name = "frame-options"
    rule_ids = ("missing-frame-options",)

    def detect(self, text: str) -> list[Finding]:
        if find_meta(text, FRAME_OPTIONS_EQUIV):
            return []
        return [
            self._finding(
                "missing-frame-options",
                "Missing X-Frame-Options header (clickjacking protection)",
                "Add <meta http-equiv=\"X-Frame-Options\" content=\"DENY\"> or configure on server",
            )
        ]


class ReferrerPolicyDetector(BaseDetector):
    name = "referrer-policy"
    rule_ids = ("missing-referrer-policy",)

    def detect(self, text: str) -> list[Finding]:
        if find_meta(text, REFERRER_NAME):
            return []
        return [
            self._finding(
                "missing-referrer-policy",
                "Missing Referrer-Policy header",
                "Add <meta name=\"referrer\" content=\"strict-origin-when-cross-origin\"> "
                "to control referrer information",
            )
        ]
