"""Discovery metadata and media loading hints. These never affect the score."""

from htmlscan.models import Finding
from htmlscan.rules.base import BaseDetector, LineIndex, attr_pattern, tag_pattern
from htmlscan.rules.policy import find_meta

DESCRIPTION_NAME = attr_pattern("name", "description")
OPEN_GRAPH_PROPERTY = attr_pattern("property", r"og:[^\"']*")
IMG_TAG = tag_pattern("img")
LAZY_LOADING = attr_pattern("loading", "lazy")


class MetaDescriptionDetector(BaseDetector):
    name = "meta-description"
    rule_ids = ("missing-meta-description",)

    def detect(self, text: str) -> list[Finding]:
        if find_meta(text, DESCRIPTION_NAME):
            return []
        return [
            self._finding(
                "missing-meta-description",
                "Missing meta description for SEO",
                "Add <meta name=\"description\" content=\"...\"> in <head> for better SEO",
            )
        ]


class OpenGraphDetector(BaseDetector):
    name = "open-graph"
    rule_ids = ("missing-open-graph",)

    def detect(self, text: str) -> list[Finding]:
        if find_meta(text, OPEN_GRAPH_PROPERTY):
            return []
        return [
            self._finding(
                "missing-open-graph",
                "Missing Open Graph tags for social sharing",
                "Add og:title, og:description, og:image meta tags for better social media sharing",
            )
        ]


class LazyLoadingDetector(BaseDetector):
    name = "lazy-loading"
    rule_ids = ("image-lazy-loading",)

    def detect(self, text: str) -> list[Finding]:
        lines = LineIndex(text)
        return [
            self._finding(
                "image-lazy-loading",
                "Image missing lazy loading",
                "Add loading=\"lazy\" to images below the fold for better performance",
                line=lines.line_of(img.start()),
            )
            for img in IMG_TAG.finditer(text)
            if not LAZY_LOADING.search(img.group(0))
        ]
