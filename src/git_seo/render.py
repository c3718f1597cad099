"""Render SEO reports as colored terminal text, JSON, and comparison tables."""

from __future__ import annotations

import json

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from git_seo.models import SEOReport
from git_seo.report import pick_winner

_RULE_WIDTH = 50


def _score_style(percentage: float) -> str:
    if percentage >= 80:
        return "green"
    if percentage >= 50:
        return "yellow"
    return "red"


def _heading(console: Console, title: str, char: str = "=") -> None:
    console.print(title, style="bold cyan")
    console.print(char * _RULE_WIDTH, style="cyan")


def _print_recommendations(console: Console, recommendations: list[str]) -> None:
    for i, rec in enumerate(recommendations, start=1):
        console.print(f"  [yellow]{i}.[/yellow] {escape(rec)}", highlight=False)


# ─── JSON ────────────────────────────────────────────────────


def report_to_dict(report: SEOReport) -> dict[str, object]:
    """Serialize a report into the public JSON document shape."""
    return {
        "repository": {
            "forge": str(report.repo.forge),
            "owner": report.repo.owner,
            "name": report.repo.name,
            "url": report.repo.url,
        },
        "scores": {
            "total": report.total_score,
            "max": report.max_possible,
            "percentage": report.percentage,
            "categories": [
                {
                    "name": str(s.category),
                    "score": s.score,
                    "max": s.max_score,
                    "details": s.details,
                }
                for s in report.scores
            ],
        },
        "recommendations": list(report.recommendations),
        "analyzed_at": report.analyzed_at.isoformat() if report.analyzed_at else "",
    }


def format_json_report(report: SEOReport) -> str:
    return json.dumps(report_to_dict(report), indent=2)


# ─── Text ────────────────────────────────────────────────────


def print_text_report(report: SEOReport, console: Console, *, verbose: bool = False) -> None:
    """Print the human-readable report with a colorized category breakdown."""
    console.print()
    _heading(console, "Git SEO Analysis Report")
    console.print(f"[bold]Repository:[/bold] {escape(report.repo.full_name)}", highlight=False)
    console.print(f"[bold]Forge:[/bold] {report.repo.forge.value.capitalize()}")
    console.print()

    style = _score_style(report.percentage)
    console.print(
        f"[bold]Overall Score:[/bold] [bold {style}]{report.total_score:.1f}/"
        f"{report.max_possible:.1f} ({report.percentage}%)[/bold {style}]",
        highlight=False,
    )
    console.print()

    _heading(console, "Category Scores", "-")
    for s in report.scores:
        line = (
            f"  {s.category.value.capitalize():<12}"
            f"[{_score_style(s.percentage)}]{s.score:>5.1f}/{s.max_score:.1f}"
            f"[/{_score_style(s.percentage)}]"
        )
        if verbose:
            line += f"  [dim]{escape(s.details)}[/dim]"
        console.print(line, highlight=False)

    if report.recommendations:
        console.print()
        _heading(console, "Recommendations", "-")
        _print_recommendations(console, report.recommendations)

    if report.analyzed_at is not None:
        console.print()
        console.print(f"Analyzed at: {report.analyzed_at.isoformat()}", style="dim")


# ─── Comparison ──────────────────────────────────────────────


def print_comparison(report1: SEOReport, report2: SEOReport, console: Console) -> None:
    """Print per-category scores of two reports side by side and declare a winner."""
    name1 = report1.repo.full_name
    name2 = report2.repo.full_name

    table = Table(title="Repository Comparison", title_style="bold cyan")
    table.add_column("Category", style="bold")
    table.add_column(escape(name1[:20]), justify="right", header_style="cyan")
    table.add_column(escape(name2[:20]), justify="right", header_style="magenta")

    for s1, s2 in zip(report1.scores, report2.scores, strict=True):
        style1 = "green" if s1.score >= s2.score else "red"
        style2 = "green" if s2.score >= s1.score else "red"
        table.add_row(
            s1.category.value.capitalize(),
            f"[{style1}]{s1.score:.1f}/{s1.max_score:.1f}[/{style1}]",
            f"[{style2}]{s2.score:.1f}/{s2.max_score:.1f}[/{style2}]",
        )

    pct1, pct2 = report1.percentage, report2.percentage
    style1 = "green" if pct1 >= pct2 else "red"
    style2 = "green" if pct2 >= pct1 else "red"
    table.add_section()
    table.add_row(
        "TOTAL",
        f"[bold {style1}]{report1.total_score:.1f} ({pct1}%)[/bold {style1}]",
        f"[bold {style2}]{report2.total_score:.1f} ({pct2}%)[/bold {style2}]",
    )

    console.print()
    console.print(table)
    console.print()

    winner = pick_winner(report1, report2)
    if winner is None:
        console.print("Result: [bold yellow]Tie![/bold yellow]")
    else:
        winner_name = name1 if winner == 1 else name2
        console.print(f"Winner: [bold green]{escape(winner_name)}[/bold green]", highlight=False)


# ─── Optimization ────────────────────────────────────────────


def print_optimization(report: SEOReport, console: Console, *, apply: bool = False) -> None:
    """Print the recommendation list. ``apply`` only prints a notice: no forge writes."""
    console.print()
    _heading(console, "Optimization Recommendations")

    if not report.recommendations:
        console.print("No recommendations - repository is well optimized!", style="green")
    else:
        _print_recommendations(console, report.recommendations)

    if apply:
        console.print()
        console.print("[bold yellow]Note:[/bold yellow] Automatic optimization not yet implemented.")
        console.print("Please apply recommendations manually.")
