"""Credential leak detector for HTML comments."""

import re
from collections.abc import Iterator

from htmlscan.models import Finding
from htmlscan.rules.base import BaseDetector, LineIndex

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"

SENSITIVE_PATTERNS: list[dict] = [
    {"name": "password", "pattern": re.compile(r"password\s*[:=]\s*\w+", re.IGNORECASE)},
    {"name": "API key", "pattern": re.compile(r"api[_-]?key\s*[:=]\s*\w+", re.IGNORECASE)},
    {"name": "secret", "pattern": re.compile(r"secret\s*[:=]\s*\w+", re.IGNORECASE)},
    {"name": "token", "pattern": re.compile(r"token\s*[:=]\s*\w+", re.IGNORECASE)},
]


def iter_comments(text: str) -> Iterator[tuple[int, str]]:
    """Yield (body offset, body) for each closed comment.

    An unclosed comment ends the walk: nothing after it can be closed either.
    """
    pos = text.find(COMMENT_OPEN)
    while pos != -1:
        body_start = pos + len(COMMENT_OPEN)
        end = text.find(COMMENT_CLOSE, body_start)
        if end == -1:
            return
        yield body_start, text[body_start:end]
        pos = text.find(COMMENT_OPEN, end + len(COMMENT_CLOSE))


class SensitiveCommentDetector(BaseDetector):
    """One finding per (comment, credential kind) pair."""

    name = "sensitive-comments"
    rule_ids = ("sensitive-comment",)

    def detect(self, text: str) -> list[Finding]:
        lines = LineIndex(text)
        findings = []
        for body_start, body in iter_comments(text):
            for entry in SENSITIVE_PATTERNS:
                match = entry["pattern"].search(body)
                if not match:
                    continue
                findings.append(
                    self._finding(
                        "sensitive-comment",
                        f"Sensitive data found in HTML comment: {entry['name']}",
                        "Remove sensitive information from HTML comments. "
                        "Comments are visible in page source.",
                        line=lines.line_of(body_start + match.start()),
                    )
                )
        return findings
