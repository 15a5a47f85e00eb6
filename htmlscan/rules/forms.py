"""Form detectors: CSRF tokens, insecure submission targets, password autocomplete."""

import re

from htmlscan.models import Finding
from htmlscan.rules.base import BaseDetector, LineIndex, attr_pattern, tag_pattern

FORM_TAG = tag_pattern("form")
INPUT_TAG = tag_pattern("input")
CSRF_NAME = attr_pattern("name", r"(?:csrf|_token|authenticity_token)[^\"']*")
POST_METHOD = attr_pattern("method", "post")
ACTION_ATTR = re.compile(r"""action\s*=\s*["']([^"']+)["']""", re.IGNORECASE)
PASSWORD_TYPE = attr_pattern("type", "password")
AUTOCOMPLETE_ATTR = re.compile(r"autocomplete\s*=", re.IGNORECASE)


def find_forms(text: str) -> list[re.Match]:
    return list(FORM_TAG.finditer(text))


def has_csrf_input(text: str) -> bool:
    return any(CSRF_NAME.search(tag.group(0)) for tag in INPUT_TAG.finditer(text))


class CsrfTokenDetector(BaseDetector):
    """Flags POST forms when the document carries no recognized token field.

    The token lookup is document-wide: a single csrf input anywhere in the
    text satisfies every form.
    """

    name = "form-csrf"
    rule_ids = ("form-missing-csrf",)

    def detect(self, text: str) -> list[Finding]:
        if has_csrf_input(text):
            return []
        lines = LineIndex(text)
        return [
            self._finding(
                "form-missing-csrf",
                "Form missing CSRF token protection",
                "Add CSRF token to POST forms to prevent cross-site request forgery attacks",
                line=lines.line_of(form.start()),
            )
            for form in find_forms(text)
            if POST_METHOD.search(form.group(0))
        ]


class FormActionDetector(BaseDetector):
    name = "form-action"
    rule_ids = ("insecure-form-action",)

    def detect(self, text: str) -> list[Finding]:
        lines = LineIndex(text)
        findings = []
        for form in find_forms(text):
            action = ACTION_ATTR.search(form.group(0))
            if action and action.group(1).lower().startswith("http://"):
                findings.append(
                    self._finding(
                        "insecure-form-action",
                        "Form submitting to insecure HTTP endpoint",
                        "Use HTTPS for form submissions to protect sensitive data",
                        line=lines.line_of(form.start()),
                    )
                )
        return findings


class PasswordAutocompleteDetector(BaseDetector):
    name = "password-autocomplete"
    rule_ids = ("password-autocomplete",)

    def detect(self, text: str) -> list[Finding]:
        lines = LineIndex(text)
        findings = []
        for tag in INPUT_TAG.finditer(text):
            source = tag.group(0)
            if PASSWORD_TYPE.search(source) and not AUTOCOMPLETE_ATTR.search(source):
                findings.append(
                    self._finding(
                        "password-autocomplete",
                        "Password input missing autocomplete attribute",
                        "Add autocomplete=\"new-password\" or autocomplete=\"current-password\" "
                        "for better security",
                        line=lines.line_of(tag.start()),
                    )
                )
        return findings
