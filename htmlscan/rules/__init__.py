"""Detector registry for HTMLScan, in execution order."""

from htmlscan.rules.base import BaseDetector
from htmlscan.rules.comments import SensitiveCommentDetector
from htmlscan.rules.forms import CsrfTokenDetector, FormActionDetector, PasswordAutocompleteDetector
from htmlscan.rules.injection import DangerousCodeDetector, IframeSandboxDetector, InlineEventHandlerDetector
from htmlscan.rules.links import ExternalLinkDetector
from htmlscan.rules.policy import ContentSecurityPolicyDetector, FrameOptionsDetector, ReferrerPolicyDetector
from htmlscan.rules.seo import LazyLoadingDetector, MetaDescriptionDetector, OpenGraphDetector
from htmlscan.rules.table import RULES, Rule, deduction_for
from htmlscan.rules.transport import InsecureResourceDetector, MixedContentDetector

DETECTORS: dict[str, type[BaseDetector]] = {
    "inline-event-handlers": InlineEventHandlerDetector,
    "dangerous-code": DangerousCodeDetector,
    "content-security-policy": ContentSecurityPolicyDetector,
    "frame-options": FrameOptionsDetector,
    "external-links": ExternalLinkDetector,
    "insecure-resources": InsecureResourceDetector,
    "form-csrf": CsrfTokenDetector,
    "form-action": FormActionDetector,
    "iframe-sandbox": IframeSandboxDetector,
    "password-autocomplete": PasswordAutocompleteDetector,
    "mixed-content": MixedContentDetector,
    "meta-description": MetaDescriptionDetector,
    "open-graph": OpenGraphDetector,
    "lazy-loading": LazyLoadingDetector,
    "sensitive-comments": SensitiveCommentDetector,
    "referrer-policy": ReferrerPolicyDetector,
}

__all__ = [
    "BaseDetector",
    "Rule",
    "RULES",
    "DETECTORS",
    "deduction_for",
]
