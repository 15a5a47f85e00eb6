"""Click-based CLI interface for HTMLScan."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from htmlscan.config import Config, load_config
from htmlscan.fetch import FetchError, fetch_markup
from htmlscan.formatters.sarif import render_sarif
from htmlscan.models import Severity
from htmlscan.report import render_json, render_owasp, render_table, render_text
from htmlscan.rules import DETECTORS, RULES
from htmlscan.samples import DEMO_HTML
from htmlscan.scoring import scan

SEVERITY_CHOICES = [s.value for s in Severity]


def _scan_options(func):
    options = [
        click.option("--format", "fmt", type=click.Choice(["table", "text", "json", "sarif"]), default="table"),
        click.option("--severity", "min_severity", type=click.Choice(SEVERITY_CHOICES), default=None,
                     help="Hide findings below this severity (scoring is unaffected)."),
        click.option("--output", "-o", type=str, default=None, help="Write the report to a file."),
        click.option("--exit-code", is_flag=True, help="Exit with code 1 if the score is below --fail-under."),
        click.option("--fail-under", type=click.IntRange(0, 100), default=None,
                     help="Minimum passing score for --exit-code (default from config: 70)."),
        click.option("--compliance", type=click.Choice(["owasp"]), default=None, help="Compliance report (owasp)."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _run_scan(config: Config, text, artifact, fmt, min_severity, output, exit_code, fail_under, compliance):
    report = scan(text, config)
    sev = Severity(min_severity) if min_severity else config.min_severity

    if fmt == "table":
        render_table(report, min_severity=sev)
        if output:
            Path(output).write_text(render_json(report, min_severity=sev))
            click.echo(f"JSON report also written to {output}")
    else:
        if fmt == "sarif":
            text_out = render_sarif(report, min_severity=sev, artifact=artifact)
        elif fmt == "json":
            text_out = render_json(report, min_severity=sev)
        else:
            text_out = render_text(report)
        if output:
            Path(output).write_text(text_out)
            click.echo(f"Report written to {output}")
        else:
            click.echo(text_out)

    if compliance == "owasp":
        render_owasp(report, min_severity=sev)

    threshold = config.fail_under if fail_under is None else fail_under
    if exit_code and report.score < threshold:
        sys.exit(1)


@click.group()
@click.version_option(package_name="htmlscan")
@click.option("--config", "config_path", type=click.Path(), default=None,
              help="Path to .htmlscan.yml config file.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx, config_path, verbose):
    """HTMLScan - Static security analysis for HTML markup."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config(config_path, project_root=str(Path.cwd()))
    except (FileNotFoundError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command("scan")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@_scan_options
@click.pass_context
def scan_file(ctx, path, fmt, min_severity, output, exit_code, fail_under, compliance):
    """Scan an HTML file. Use '-' to read from stdin."""
    if path == "-":
        text = click.get_text_stream("stdin").read()
        artifact = "stdin"
    else:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
        artifact = path
    _run_scan(ctx.obj["config"], text, artifact, fmt, min_severity, output, exit_code, fail_under, compliance)


@cli.command()
@click.argument("url")
@click.option("--timeout", type=float, default=10.0, help="Request timeout in seconds.")
@_scan_options
@click.pass_context
def scan_url(ctx, url, timeout, fmt, min_severity, output, exit_code, fail_under, compliance):
    """Download a page and scan its markup."""
    try:
        text = fetch_markup(url, timeout=timeout)
    except FetchError as exc:
        raise click.ClickException(str(exc)) from exc
    _run_scan(ctx.obj["config"], text, url, fmt, min_severity, output, exit_code, fail_under, compliance)


@cli.command()
@_scan_options
@click.pass_context
def demo(ctx, fmt, min_severity, output, exit_code, fail_under, compliance):
    """Scan the bundled demo document."""
    _run_scan(ctx.obj["config"], DEMO_HTML, "demo.html", fmt, min_severity, output, exit_code, fail_under, compliance)


@cli.command("rules")
def list_rules():
    """List detectors and the severity and deduction of each rule."""
    console = Console()
    table = Table(title="HTMLScan Rules")
    table.add_column("Detector", width=24)
    table.add_column("Rule", width=26)
    table.add_column("Severity", width=10)
    table.add_column("Deduction", width=9)
    table.add_column("Guideline", width=40)

    for name, detector_cls in DETECTORS.items():
        for rule_id in detector_cls.rule_ids:
            rule = RULES[rule_id]
            table.add_row(name, rule_id, rule.severity.value, str(rule.weight), rule.guideline or "")

    console.print(table)
