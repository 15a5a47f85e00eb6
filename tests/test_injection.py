"""Tests for script injection detectors."""

from htmlscan.models import Severity
from htmlscan.rules.injection import DangerousCodeDetector, IframeSandboxDetector, InlineEventHandlerDetector


class TestInlineEventHandlerDetector:
    def test_onclick_detected(self):
        findings = InlineEventHandlerDetector().detect('<button onclick="go()">Go</button>')
        assert len(findings) == 1
        assert findings[0].severity == Severity.ERROR
        assert "onclick" in findings[0].message
        assert findings[0].guideline == "OWASP A03:2021 - Injection"
        assert findings[0].cwe_id == "CWE-79"

    def test_every_handler_reported(self):
        text = """<img src="a.png" onerror='steal()'>
<body onload="init()">
<div ONMOUSEOVER="x()"></div>"""
        findings = InlineEventHandlerDetector().detect(text)
        assert [f.line for f in findings] == [1, 2, 3]
        assert "ONMOUSEOVER" in findings[2].message

    def test_no_handlers(self):
        assert InlineEventHandlerDetector().detect('<button type="button">Go</button>') == []

    def test_unquoted_handler_ignored(self):
        # Only quoted attribute values count as handlers.
        assert InlineEventHandlerDetector().detect("<button onclick=go()>Go</button>") == []


class TestDangerousCodeDetector:
    def test_eval_is_high_risk(self):
        findings = DangerousCodeDetector().detect("<script>eval(payload)</script>")
        assert len(findings) == 1
        assert findings[0].rule_id == "dangerous-code-high"
        assert findings[0].severity == Severity.WARNING
        assert "High risk" in findings[0].message

    def test_inner_html_is_medium_risk(self):
        findings = DangerousCodeDetector().detect("<script>el.innerHTML = data;</script>")
        assert [f.rule_id for f in findings] == ["dangerous-code-medium"]

    def test_one_finding_per_pattern_not_per_match(self):
        text = "<script>eval(a); eval(b); EVAL (c);</script>"
        findings = DangerousCodeDetector().detect(text)
        assert len(findings) == 1

    def test_all_patterns(self):
        text = """<script>
eval(a);
el.innerHTML = b;
document.write(c);
</script>
<a href="javascript:void(0)">x</a>"""
        findings = DangerousCodeDetector().detect(text)
        assert [f.rule_id for f in findings] == [
            "dangerous-code-high",
            "dangerous-code-medium",
            "dangerous-code-high",
            "dangerous-code-high",
        ]
        assert findings[0].line == 2
        assert findings[3].line == 6

    def test_clean_script(self):
        assert DangerousCodeDetector().detect("<script>console.log('hi')</script>") == []


class TestIframeSandboxDetector:
    def test_missing_sandbox(self):
        findings = IframeSandboxDetector().detect('<iframe src="https://example.com"></iframe>')
        assert len(findings) == 1
        assert findings[0].severity == Severity.WARNING

    def test_sandbox_present(self):
        text = '<iframe src="https://example.com" sandbox="allow-scripts"></iframe>'
        assert IframeSandboxDetector().detect(text) == []

    def test_bare_sandbox_attribute_not_recognized(self):
        # Only sandbox=... is matched, a valueless attribute is still flagged.
        assert len(IframeSandboxDetector().detect("<iframe src='x.html' sandbox></iframe>")) == 1

    def test_one_per_iframe(self):
        text = "<IFRAME src='a'></IFRAME>\n<iframe src='b' sandbox=''></iframe>\n<iframe src='c'></iframe>"
        findings = IframeSandboxDetector().detect(text)
        assert [f.line for f in findings] == [1, 3]
