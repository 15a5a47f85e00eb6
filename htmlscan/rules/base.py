"""Abstract base detector and shared matching helpers."""

import re
from abc import ABC, abstractmethod
from bisect import bisect_right

from htmlscan.models import Finding
from htmlscan.rules.table import RULES


class LineIndex:
    """Maps character offsets to 1-based line numbers in O(log n) per lookup."""

    def __init__(self, text: str):
        self._newlines = [m.start() for m in re.finditer("\n", text)]

    def line_of(self, index: int) -> int:
        return bisect_right(self._newlines, index - 1) + 1


def tag_pattern(name: str) -> re.Pattern:
    """Opening tag matcher that never runs past the next '<'.

    Unterminated tags end at the following '<' instead of the end of the
    text, which keeps matching linear on repeated tag starts.
    """
    return re.compile(rf"<{name}\b[^<>]*>", re.IGNORECASE)


def attr_pattern(name: str, value: str = r"[^\"']*") -> re.Pattern:
    """Case-insensitive attribute matcher accepting single or double quotes."""
    return re.compile(rf"""{name}\s*=\s*["']{value}["']""", re.IGNORECASE)


class BaseDetector(ABC):
    name: str = "base"
    rule_ids: tuple[str, ...] = ()

    @abstractmethod
    def detect(self, text: str) -> list[Finding]:
        ...

    def _finding(self, rule_id: str, message: str, remediation: str, line: int = 1) -> Finding:
        rule = RULES[rule_id]
        return Finding(
            rule_id=rule_id,
            severity=rule.severity,
            message=message,
            remediation=remediation,
            guideline=rule.guideline,
            cwe_id=rule.cwe_id,
            line=line,
        )
