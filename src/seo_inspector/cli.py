"""CLI interface for seo-inspector."""

import dataclasses
import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from . import __version__
from .auditor import audit_url
from .config import PSI_STRATEGIES, load_settings
from .exceptions import AuditError
from .fetcher import Acquisition
from .models import AuditReport, Finding, Level


console = Console()
err_console = Console(stderr=True)

COMMANDS = ["scan", "--help", "--version"]


def level_style(level: Level) -> str:
    """Get Rich style for a finding level."""
    return {
        Level.GOOD: "green",
        Level.INFO: "blue",
        Level.RISKY: "yellow",
        Level.BAD: "red",
    }.get(level, "white")


def level_icon(level: Level) -> str:
    """Get icon for a finding level."""
    return {
        Level.GOOD: "✓",
        Level.INFO: "ℹ",
        Level.RISKY: "⚠",
        Level.BAD: "✗",
    }.get(level, "•")


def score_color(score: int) -> str:
    """Get color for a score value."""
    if score >= 80:
        return "green"
    elif score >= 60:
        return "yellow"
    elif score >= 40:
        return "orange1"
    else:
        return "red"


def print_score_bar(score: int, width: int = 20) -> Text:
    """Create a visual score bar."""
    filled = int((score / 100) * width)
    empty = width - filled
    color = score_color(score)

    bar = Text()
    bar.append("█" * filled, style=color)
    bar.append("░" * empty, style="dim")
    bar.append(f" {score}/100", style=f"bold {color}")
    return bar


def print_finding(finding: Finding, show_fix: bool = True) -> None:
    style = level_style(finding.level)
    icon = level_icon(finding.level)
    console.print(f"  [{style}]{icon}[/] {finding.title} [dim]({finding.weight:+d})[/dim]")
    if finding.detail:
        # page-derived text may contain [brackets]; keep it out of markup
        console.print(Text(f"    {finding.detail}", style="dim"))
    if show_fix and finding.fix:
        console.print(Text(f"    → {finding.fix}", style="cyan"))


def print_result(page: Acquisition, report: AuditReport, verbose: bool = False) -> None:
    """Print audit result to console."""

    # Header
    console.print()
    console.print(Panel(
        Text.assemble(
            (report.meta.final_url, "bold"),
            "\n",
            (f"Fetched in {page.fetch_time_ms}ms", "dim"),
        ),
        title="🔍 SEO Audit",
        border_style="blue"
    ))

    # Overall score
    console.print()
    console.print("  SEO Score: ", end="")
    console.print(print_score_bar(report.score, width=25))
    console.print()

    # Page metadata
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Meta", style="cyan")
    table.add_column("Value")
    meta = report.meta
    for label, value in (
        ("Title", meta.title),
        ("Description", meta.description),
        ("Canonical", meta.canonical),
        ("OG image", meta.og_image),
        ("Twitter image", meta.twitter_image),
    ):
        table.add_row(label, Text(value) if value else Text("missing", style="dim"))
    console.print(table)

    sections = [("Problems", report.bad), ("Risks", report.risky)]
    if verbose:
        sections += [("Passed", report.good), ("Notes", report.info)]

    for heading, findings in sections:
        if not findings:
            continue
        console.print(f"\n[bold]{heading}:[/bold]\n")
        for finding in findings:
            print_finding(finding)

    # Top fixes
    top_fixes = report.top_fixes
    if top_fixes:
        console.print("\n[bold]🎯 Top Fixes:[/bold]\n")
        for i, finding in enumerate(top_fixes[:3], 1):
            console.print(f"  {i}. [bold]{finding.title}[/bold]")
            console.print(Text(f"     {finding.fix}", style="cyan"))
            console.print()

    # Footer
    console.print("[dim]─" * 50 + "[/dim]")
    console.print(f"[dim]seo-inspector v{__version__}[/dim]")
    console.print()


def setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__)
def cli(ctx):
    """SEO Inspector - instant SEO health check for a single page.

    \b
    Quick start:
        seo-inspector scan example.com
        seo-inspector scan example.com --psi
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("url")
@click.option("--psi", "use_psi", is_flag=True, help="Include the PageSpeed Insights performance score")
@click.option("--psi-key", envvar="GOOGLE_PSI_API_KEY", help="PageSpeed Insights API key")
@click.option("--strategy", type=click.Choice(PSI_STRATEGIES), default=None,
              help="PageSpeed Insights strategy (default: mobile)")
@click.option("-v", "--verbose", is_flag=True, help="Show all findings, not just issues")
@click.option("-t", "--timeout", type=float, default=None, help="Request timeout in seconds")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.option("--debug", is_flag=True, help="Log network activity to stderr")
def scan(url: str, use_psi: bool, psi_key: str | None, strategy: str | None, verbose: bool,
         timeout: float | None, json_output: bool, debug: bool):
    """Audit a URL for SEO health.

    \b
    Examples:
        seo-inspector scan example.com
        seo-inspector scan example.com --verbose
        seo-inspector scan example.com --psi --json
    """
    setup_logging(debug)

    settings = load_settings()
    overrides = {}
    if psi_key:
        overrides["psi_api_key"] = psi_key
    if strategy:
        overrides["psi_strategy"] = strategy
    if timeout is not None and timeout > 0:
        overrides["timeout"] = timeout
    settings = dataclasses.replace(settings, **overrides)

    try:
        if json_output:
            page, report = audit_url(url, use_perf_score=use_psi, settings=settings)
        else:
            with console.status(f"[bold blue]Scanning {escape(url)}...[/bold blue]"):
                page, report = audit_url(url, use_perf_score=use_psi, settings=settings)
    except AuditError as e:
        if json_output:
            click.echo(json.dumps({"ok": False, "error": str(e)}, ensure_ascii=False, indent=2))
        else:
            console.print(f"\n[red]Error:[/red] {escape(str(e))}")
        sys.exit(e.exit_code)

    if json_output:
        output = {"ok": True, "result": report.to_dict()}
        click.echo(json.dumps(output, ensure_ascii=False, indent=2))
    else:
        print_result(page, report, verbose=verbose)


# Convenience: allow `seo-inspector URL` as shortcut for `seo-inspector scan URL`
def main():
    """Entry point that handles both `seo-inspector URL` and `seo-inspector scan URL`."""
    args = sys.argv[1:]

    # If first arg looks like a URL (not a command), insert 'scan'
    if args and not args[0].startswith('-') and args[0] not in COMMANDS:
        # Check if it looks like a URL/domain
        if '.' in args[0] or args[0].startswith('localhost'):
            sys.argv.insert(1, 'scan')

    cli()


if __name__ == "__main__":
    main()
