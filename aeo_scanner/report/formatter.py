"""Report formatting utilities."""
from __future__ import annotations

import json
from typing import Literal

from rich.markup import escape

OutputFormat = Literal["cli", "json", "markdown"]


def _score_color(percentage: int) -> str:
    if percentage >= 75:
        return "green"
    if percentage >= 50:
        return "yellow"
    return "red"


def _percentage(points: int, max_points: int) -> int:
    return round(points / max_points * 100) if max_points else 0


def format_report(results: dict, output: OutputFormat = "cli", url: str = "") -> str:
    """Format analysis results for output.

    Args:
        results: ``AnalysisResult.to_dict()`` output
        output: Output format - 'cli', 'json', or 'markdown'
        url: Analyzed URL, shown in the report header

    Returns:
        Formatted string representation of results
    """
    if output == "json":
        return _format_json(results, url)
    elif output == "markdown":
        return _format_markdown(results, url)
    else:
        return _format_cli(results, url)


def _format_json(results: dict, url: str) -> str:
    """Format results as JSON."""
    payload = {"url": url, **results} if url else results
    return json.dumps(payload, ensure_ascii=False, indent=2)


def _format_cli(results: dict, url: str) -> str:
    """Format results for terminal display with Rich-compatible markup."""
    lines = []
    score = results.get("score", 0)
    page_type = results.get("pageType", "content")

    lines.append("[bold cyan]AEO Analysis Report[/bold cyan]")
    if url:
        lines.append(f"[dim]URL:[/dim] {escape(url)}")
    lines.append(f"[dim]Page type:[/dim] {page_type}")
    lines.append("")

    color = _score_color(score)
    lines.append(f"[bold]AEO Score:[/bold] [{color}]{score}/100[/{color}]")
    lines.append("")

    lines.append("[bold]Checks:[/bold]")
    for check in results.get("checks", []):
        points = check.get("points", 0)
        max_points = check.get("maxPoints", 0)
        percentage = _percentage(points, max_points)

        bar_width = 20
        filled = int(bar_width * percentage / 100)
        bar = "█" * filled + "░" * (bar_width - filled)
        bar_color = _score_color(percentage)

        if check.get("isOptional"):
            status = "[blue]optional[/blue]"
        elif check.get("pass"):
            status = "[green]✓ pass[/green]"
        else:
            status = "[red]✗ fail[/red]"

        lines.append(
            f"  {check.get('title', ''):20} [{bar_color}]{bar}[/{bar_color}] "
            f"{points}/{max_points} {status}"
        )
        for detail in check.get("details", []):
            lines.append(f"      [dim]{escape(detail)}[/dim]")

    lines.append("")

    recommendations = results.get("recommendations", [])
    if recommendations:
        lines.append("[bold]Recommendations:[/bold]")
        for i, recommendation in enumerate(recommendations, 1):
            lines.append(f"  {i}. {escape(recommendation)}")
    else:
        lines.append("[green]No recommendations - every check passed.[/green]")

    return "\n".join(lines)


def _format_markdown(results: dict, url: str) -> str:
    """Format results as Markdown."""
    lines = []

    lines.append("# AEO Analysis Report")
    lines.append("")
    if url:
        lines.append(f"**URL:** {url}")
    lines.append(f"**Page type:** {results.get('pageType', 'content')}")
    lines.append("")

    lines.append("## AEO Score")
    lines.append("")
    lines.append(f"**{results.get('score', 0)}/100**")
    lines.append("")

    lines.append("## Checks")
    lines.append("")
    lines.append("| Check | Points | Max | Status |")
    lines.append("|-------|--------|-----|--------|")

    checks = results.get("checks", [])
    for check in checks:
        if check.get("isOptional"):
            status = "➖ optional"
        elif check.get("pass"):
            status = "✅ pass"
        else:
            status = "❌ fail"
        lines.append(
            f"| {check.get('title', '')} | {check.get('points', 0)} | "
            f"{check.get('maxPoints', 0)} | {status} |"
        )

    lines.append("")

    for check in checks:
        details = check.get("details", [])
        if not details:
            continue
        lines.append(f"### {check.get('title', '')}")
        lines.append("")
        for detail in details:
            lines.append(f"- {detail}")
        lines.append("")

    recommendations = results.get("recommendations", [])
    if recommendations:
        lines.append("## Recommendations")
        lines.append("")
        for i, recommendation in enumerate(recommendations, 1):
            lines.append(f"{i}. {recommendation}")
        lines.append("")

    return "\n".join(lines)
