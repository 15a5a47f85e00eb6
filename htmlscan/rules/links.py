"""Reverse tabnabbing detector for links opening a new browsing context."""

import re

from htmlscan.models import Finding
from htmlscan.rules.base import BaseDetector, LineIndex, attr_pattern, tag_pattern

LINK_TAG = tag_pattern("a")
EXTERNAL_HREF = attr_pattern("href", r"https?://[^\"']+")
TARGET_BLANK = attr_pattern("target", "_blank")
REL_NOOPENER = attr_pattern("rel", r"[^\"']*noopener[^\"']*")


def find_unsafe_links(text: str) -> list[re.Match]:
    """External links with target=_blank and no rel=noopener."""
    unsafe = []
    for match in LINK_TAG.finditer(text):
        tag = match.group(0)
        if EXTERNAL_HREF.search(tag) and TARGET_BLANK.search(tag) and not REL_NOOPENER.search(tag):
            unsafe.append(match)
    return unsafe


class ExternalLinkDetector(BaseDetector):
    name = "external-links"
    rule_ids = ("unsafe-external-link",)

    def detect(self, text: str) -> list[Finding]:
        lines = LineIndex(text)
        return [
            self._finding(
                "unsafe-external-link",
                "External link missing rel=\"noopener\" (tabnabbing vulnerability)",
                "Add rel=\"noopener noreferrer\" to external links with target=\"_blank\" "
                "to prevent tabnabbing attacks",
                line=lines.line_of(match.start()),
            )
            for match in find_unsafe_links(text)
        ]
