"""Report generation - plain text export, rich terminal tables and JSON output."""

import json
import re
from datetime import datetime

from rich.console import Console
from rich.table import Table

from htmlscan.compliance import OWASP_TOP_10, group_by_owasp
from htmlscan.models import Finding, Report, RiskLevel, Severity

SEVERITY_COLORS = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.SUGGESTION: "cyan",
}

LEVEL_COLORS = {
    RiskLevel.HIGH: "bold green",
    RiskLevel.MEDIUM: "bold yellow",
    RiskLevel.LOW: "bold red",
}

SCORE_LINE = re.compile(r"^Security Score: (\d+)/100$", re.MULTILINE)


def _export_line(f: Finding) -> str:
    return f"- {f.message} ({f.guideline or 'Security'}): {f.remediation}"


def render_text(report: Report) -> str:
    """Plain-text export suitable for the clipboard or a .txt file.

    Built from the report alone, so the same report always renders the same text.
    """
    lines = [
        "HTML Security Scan Report",
        "==========================",
        "",
        f"Security Score: {report.score}/100",
        f"Security Level: {report.risk_level.value}",
        f"Errors: {report.error_count}",
        f"Warnings: {report.warning_count}",
        f"Suggestions: {report.suggestion_count}",
    ]
    for heading, bucket in (
        ("Errors", report.errors),
        ("Warnings", report.warnings),
        ("Suggestions", report.suggestions),
    ):
        lines.append("")
        lines.append(f"{heading}:")
        lines.extend(_export_line(f) for f in bucket)
    return "\n".join(lines)


def parse_score(text: str) -> int | None:
    """Read the score back out of a plain-text export."""
    match = SCORE_LINE.search(text)
    return int(match.group(1)) if match else None


def _visible(report: Report, min_severity: Severity) -> list[Finding]:
    return [f for f in report.findings if f.severity >= min_severity]


def render_table(report: Report, min_severity: Severity = Severity.SUGGESTION) -> None:
    console = Console()
    findings = _visible(report, min_severity)

    if not findings:
        console.print("\n[bold green]No findings above the severity threshold.[/]")
        _print_summary(console, report)
        return

    table = Table(title="HTMLScan Findings", show_lines=True)
    table.add_column("Severity", width=10)
    table.add_column("Message", width=50)
    table.add_column("Line", width=6)
    table.add_column("Guideline", width=30)
    table.add_column("CWE", width=10)

    for f in findings:
        color = SEVERITY_COLORS[f.severity]
        table.add_row(
            f"[{color}]{f.severity.value}[/]",
            f.message,
            str(f.line),
            f.guideline or "",
            f.cwe_id or "",
        )

    console.print()
    console.print(table)
    _print_summary(console, report)


def _print_summary(console: Console, report: Report) -> None:
    level_color = LEVEL_COLORS[report.risk_level]
    parts = []
    for sev, count in (
        (Severity.ERROR, report.error_count),
        (Severity.WARNING, report.warning_count),
        (Severity.SUGGESTION, report.suggestion_count),
    ):
        if count > 0:
            parts.append(f"[{SEVERITY_COLORS[sev]}]{sev.value}: {count}[/]")

    console.print(
        f"\n[bold]Security Score:[/] {report.score}/100 "
        f"([{level_color}]{report.risk_level.value}[/])"
    )
    console.print(f"[bold]Summary:[/] {report.total_issues} issue(s) | {' | '.join(parts) if parts else 'Clean'}")
    s = report.summary
    console.print(
        f"Unsafe links: {s.external_links_without_noopener} | Forms: {s.forms_count} | "
        f"Iframes: {s.iframes_count} | Insecure resources: {s.insecure_resources_count}"
    )
    if report.truncated:
        console.print("[yellow]Input exceeded the size limit and was truncated before scanning.[/]")
    console.print()


def render_json(report: Report, min_severity: Severity = Severity.SUGGESTION) -> str:
    output = {
        "$schema": "htmlscan-v1",
        "generated_at": datetime.now().isoformat(),
        **report.to_dict(),
    }
    for key, sev in (("errors", Severity.ERROR), ("warnings", Severity.WARNING), ("suggestions", Severity.SUGGESTION)):
        if sev < min_severity:
            output[key] = []

    return json.dumps(output, indent=2)


def render_owasp(report: Report, min_severity: Severity = Severity.SUGGESTION) -> None:
    """Render findings grouped by OWASP Top 10 2021 categories."""
    console = Console()
    groups = group_by_owasp(report, min_severity)

    if not groups:
        console.print("\n[bold green]No findings mapped to OWASP Top 10 categories.[/]\n")
        return

    console.print("\n[bold]OWASP Top 10 2021 Compliance Report[/]\n")

    for owasp_id in sorted(groups.keys()):
        findings = groups[owasp_id]
        cat_name = OWASP_TOP_10[owasp_id]["name"]
        console.print(f"[bold]{owasp_id} - {cat_name}[/] ({len(findings)} finding(s))")

        table = Table(show_lines=False, box=None, padding=(0, 2))
        table.add_column("Severity", width=10)
        table.add_column("Message", width=60)
        table.add_column("Line", width=6)

        for f in findings:
            color = SEVERITY_COLORS[f.severity]
            table.add_row(
                f"[{color}]{f.severity.value}[/]",
                f.message,
                str(f.line),
            )
        console.print(table)
        console.print()
