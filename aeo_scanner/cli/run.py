"""CLI commands."""
from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from aeo_scanner import __version__
from aeo_scanner.config.profiles import ScoringProfile, get_profile
from aeo_scanner.config.settings import settings
from aeo_scanner.engine.aggregator import AnalysisResult
from aeo_scanner.engine.analyzer import analyze_page
from aeo_scanner.fetcher.html_fetcher import FetchError, fetch_page
from aeo_scanner.report.formatter import OutputFormat, format_report

app = typer.Typer(
    add_completion=False,
    help="AEO Scanner - Score web pages for AI answer-engine extraction",
)
console = Console()

# Scores below this exit with status 1
PASSING_SCORE = 50


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or settings.debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _resolve_profile(name: str | None) -> ScoringProfile:
    if name is None:
        return settings.scoring.profile
    try:
        return get_profile(name)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _emit(result: AnalysisResult, output: str, save: str | None, url: str) -> None:
    if output not in ("cli", "json", "markdown"):
        console.print(f"[red]Error:[/red] Invalid output format '{output}'. Use cli, json, or markdown.")
        raise typer.Exit(1)
    output_format: OutputFormat = output  # type: ignore

    report = format_report(result.to_dict(), output_format, url=url)

    if save:
        save_path = Path(save)
        save_path.write_text(report, encoding="utf-8")
        console.print(f"\n[green]Report saved to:[/green] {save_path}")
    else:
        console.print("")
        if output_format == "cli":
            console.print(report)
        else:
            console.print(report, markup=False)

    if result.score < PASSING_SCORE:
        raise typer.Exit(1)


@app.command()
def run(
    target: str = typer.Argument(..., help="URL to analyze"),
    output: str = typer.Option(
        "cli",
        "--output",
        "-o",
        help="Output format: cli, json, markdown",
    ),
    save: str | None = typer.Option(
        None,
        "--save",
        "-s",
        help="Save report to file",
    ),
    profile: str | None = typer.Option(
        None,
        "--profile",
        "-p",
        help="Scoring profile: strict or lenient",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """Fetch a URL and analyze it for AEO (Answer Engine Optimization).

    Examples:
        aeo-scanner run https://example.com/blog/what-is-aeo
        aeo-scanner run https://example.com -o json
        aeo-scanner run https://example.com -o markdown -s report.md
    """
    _configure_logging(verbose)
    scoring_profile = _resolve_profile(profile)

    console.print(Panel.fit(
        f"[bold cyan]AEO Scanner[/bold cyan]\n[dim]Analyzing:[/dim] {target}",
        border_style="cyan",
    ))

    try:
        with console.status("[bold blue]Fetching page...", spinner="dots"):
            page = fetch_page(target)

        with console.status("[bold blue]Running AEO checks...", spinner="dots"):
            result = analyze_page(
                page.html,
                target,
                page.status_code,
                page.headers,
                page.final_url,
                profile=scoring_profile,
            )
    except ValueError as e:
        console.print(f"\n[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except FetchError as e:
        console.print(f"\n[red]Fetch Error:[/red] {e}")
        raise typer.Exit(1)

    _emit(result, output, save, target)


@app.command()
def file(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Local HTML file"),
    url: str = typer.Option(..., "--url", "-u", help="URL the page is served from"),
    output: str = typer.Option("cli", "--output", "-o", help="Output format: cli, json, markdown"),
    save: str | None = typer.Option(None, "--save", "-s", help="Save report to file"),
    profile: str | None = typer.Option(None, "--profile", "-p", help="Scoring profile: strict or lenient"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Analyze a local HTML file as if it were served from URL with status 200.

    Example:
        aeo-scanner file draft.html --url https://example.com/blog/draft
    """
    _configure_logging(verbose)
    scoring_profile = _resolve_profile(profile)

    try:
        result = analyze_page(path.read_text(encoding="utf-8"), url, profile=scoring_profile)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _emit(result, output, save, url)


@app.command()
def check(
    target: str = typer.Argument(..., help="URL to quick-check"),
) -> None:
    """Quick check - prints only the score and page type.

    Example:
        aeo-scanner check https://example.com
    """
    try:
        with console.status("[bold blue]Analyzing...", spinner="dots"):
            page = fetch_page(target)
            result = analyze_page(page.html, target, page.status_code, page.headers, page.final_url)
    except (ValueError, FetchError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    color = "green" if result.score >= 75 else "yellow" if result.score >= PASSING_SCORE else "red"
    console.print(f"[{color}]{result.score}/100[/{color}] ({result.page_type.value}) - {target}")

    if result.score < PASSING_SCORE:
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]AEO Scanner[/bold] v{__version__}")
    console.print(f"[dim]Answer Engine Optimization analyzer ({settings.scoring.profile_name} profile)[/dim]")


if __name__ == "__main__":
    app()
