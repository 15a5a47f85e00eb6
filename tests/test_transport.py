"""Tests for insecure transport detectors."""

from htmlscan.models import Severity
from htmlscan.rules.transport import InsecureResourceDetector, MixedContentDetector


class TestInsecureResourceDetector:
    def test_http_script(self):
        findings = InsecureResourceDetector().detect('<script src="http://cdn.example.com/app.js"></script>')
        assert len(findings) == 1
        assert findings[0].severity == Severity.WARNING
        assert "cdn.example.com/app.js" in findings[0].message
        assert findings[0].guideline == "OWASP A02:2021 - Cryptographic Failures"

    def test_every_occurrence(self):
        text = """<link href="http://a.example/style.css">
<img src='http://b.example/logo.png'>
<form action="http://c.example/submit"></form>"""
        findings = InsecureResourceDetector().detect(text)
        assert [f.line for f in findings] == [1, 2, 3]

    def test_https_ignored(self):
        assert InsecureResourceDetector().detect('<img src="https://b.example/logo.png">') == []


class TestMixedContentDetector:
    def test_mixed_content(self):
        text = """<a href="https://secure.example">x</a>
<img src="http://insecure.example/a.png">
<img src="http://insecure.example/b.png">"""
        findings = MixedContentDetector().detect(text)
        assert len(findings) == 1
        assert findings[0].severity == Severity.ERROR
        assert findings[0].line == 2

    def test_no_https_marker(self):
        assert MixedContentDetector().detect('<img src="http://insecure.example/a.png">') == []

    def test_http_link_is_not_mixed_content(self):
        # Only src attributes count as loaded resources.
        text = '<a href="https://a.example">a</a><a href="http://b.example">b</a>'
        assert MixedContentDetector().detect(text) == []
