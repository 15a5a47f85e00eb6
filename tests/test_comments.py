"""Tests for the sensitive comment detector."""

from htmlscan.models import Severity
from htmlscan.rules.comments import SensitiveCommentDetector, iter_comments


class TestSensitiveCommentDetector:
    def test_password_in_comment(self):
        findings = SensitiveCommentDetector().detect("<!-- password: hunter2 -->")
        assert len(findings) == 1
        assert findings[0].severity == Severity.ERROR
        assert findings[0].message.endswith("password")
        assert findings[0].cwe_id == "CWE-615"

    def test_each_kind_in_each_comment(self):
        text = """<p>page</p>
<!--
  api_key=abc123
  secret = s3cr3t
-->
<!-- TOKEN: deadbeef -->"""
        findings = SensitiveCommentDetector().detect(text)
        assert [f.message.rsplit(": ", 1)[1] for f in findings] == ["API key", "secret", "token"]
        assert [f.line for f in findings] == [3, 4, 6]

    def test_same_kind_counted_once_per_comment(self):
        text = "<!-- password=a password=b -->"
        assert len(SensitiveCommentDetector().detect(text)) == 1

    def test_outside_comment_ignored(self):
        assert SensitiveCommentDetector().detect("<p>password: hunter2</p>") == []

    def test_harmless_comment(self):
        assert SensitiveCommentDetector().detect("<!-- navigation starts here -->") == []


class TestIterComments:
    def test_yields_bodies_with_offsets(self):
        text = "a<!--one-->b<!-- two -->"
        assert list(iter_comments(text)) == [(5, "one"), (16, " two ")]

    def test_nested_opener_belongs_to_body(self):
        assert list(iter_comments("<!--a--><!-- open <!--b-->")) == [(4, "a"), (12, " open <!--b")]

    def test_unclosed_comment_ends_walk(self):
        assert list(iter_comments("<!--a--> <!-- open")) == [(4, "a")]
        assert list(iter_comments("<!-- never closed")) == []

    def test_credentials_after_unclosed_comment_ignored(self):
        assert SensitiveCommentDetector().detect("<!-- x " + "<!--" * 1000 + " password: y") == []
