"""Tests for the SARIF formatter."""

import json

from htmlscan.formatters.sarif import render_sarif
from htmlscan.models import Severity
from htmlscan.scoring import scan


class TestSarif:
    def test_document_shape(self):
        text = '<button onclick="go()">x</button>'
        data = json.loads(render_sarif(scan(text), artifact="page.html"))
        assert data["version"] == "2.1.0"
        run = data["runs"][0]
        assert run["tool"]["driver"]["name"] == "HTMLScan"
        assert run["properties"]["securityScore"] == 75
        rule_ids = {r["id"] for r in run["tool"]["driver"]["rules"]}
        assert {"inline-event-handler", "missing-csp"} <= rule_ids

    def test_result_levels_and_locations(self):
        text = "<p>x</p>\n<iframe src='https://e.example'></iframe>"
        run = json.loads(render_sarif(scan(text), artifact="page.html"))["runs"][0]
        iframe = next(r for r in run["results"] if r["ruleId"] == "unsandboxed-iframe")
        assert iframe["level"] == "warning"
        location = iframe["locations"][0]["physicalLocation"]
        assert location["artifactLocation"]["uri"] == "page.html"
        assert location["region"]["startLine"] == 2

    def test_cwe_taxonomy(self):
        run = json.loads(render_sarif(scan("")))["runs"][0]
        taxa = {t["id"] for t in run["taxonomies"][0]["taxa"]}
        assert "CWE-693" in taxa

    def test_severity_filter(self):
        run = json.loads(render_sarif(scan(""), min_severity=Severity.WARNING))["runs"][0]
        assert all(r["level"] != "note" for r in run["results"])

    def test_rule_description_is_not_instance_specific(self):
        text = (
            "<html><head><meta http-equiv='Content-Security-Policy' content=\"default-src 'self'\"></head>"
            "<body><img src='http://cdn.one.example/a.png'>\n"
            "<img src='http://cdn.two.example/b.png'></body></html>"
        )
        run = json.loads(render_sarif(scan(text)))["runs"][0]
        rule = next(r for r in run["tool"]["driver"]["rules"] if r["id"] == "insecure-resource")
        description = rule["fullDescription"]["text"]
        assert "cdn.one.example" not in description
        assert description.startswith("Resource loaded over HTTP")
        assert "CWE-319" in description
        messages = [r["message"]["text"] for r in run["results"] if r["ruleId"] == "insecure-resource"]
        assert any("cdn.one.example" in m for m in messages)
        assert any("cdn.two.example" in m for m in messages)

    def test_remediation_travels_with_each_result(self):
        text = '<button onclick="go()">a</button><div onmouseover="x()">b</div>'
        run = json.loads(render_sarif(scan(text)))["runs"][0]
        handlers = [r for r in run["results"] if r["ruleId"] == "inline-event-handler"]
        remediations = {r["properties"]["remediation"] for r in handlers}
        assert any("onclick" in r for r in remediations)
        assert any("onmouseover" in r for r in remediations)
        rule = next(r for r in run["tool"]["driver"]["rules"] if r["id"] == "inline-event-handler")
        assert "onclick" not in json.dumps(rule)
