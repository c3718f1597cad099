"""Command-line interface: analyze, compare and optimize repositories."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os

from rich.console import Console

from git_seo.errors import GitSeoError
from git_seo.fetcher.client import DefaultForgeFetcher, create_http_client
from git_seo.models import SEOReport
from git_seo.render import (
    format_json_report,
    print_comparison,
    print_optimization,
    print_text_report,
)
from git_seo.report import analyze_repo, compare_repos


async def _analyze(url: str) -> SEOReport:
    async with create_http_client() as http_client:
        return await analyze_repo(url, DefaultForgeFetcher(http_client))


async def _compare(url1: str, url2: str) -> tuple[SEOReport, SEOReport]:
    async with create_http_client() as http_client:
        return await compare_repos(url1, url2, DefaultForgeFetcher(http_client))


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="git-seo",
        description=(
            "Analyze, compare, and optimize git repositories for better discoverability "
            "across GitHub, GitLab and Bitbucket."
        ),
    )
    commands = parser.add_subparsers(dest="command", required=True)

    analyze = commands.add_parser("analyze", help="Analyze a repository's SEO score.")
    analyze.add_argument("url", help="Repository URL (GitHub, GitLab, or Bitbucket).")
    analyze.add_argument(
        "-j", "--json", action="store_true", help="Output results as JSON."
    )
    analyze.add_argument(
        "-v", "--verbose", action="store_true", help="Show per-category details."
    )

    compare = commands.add_parser("compare", help="Compare SEO scores of two repositories.")
    compare.add_argument("repo1", help="First repository URL.")
    compare.add_argument("repo2", help="Second repository URL.")

    optimize = commands.add_parser("optimize", help="List optimization suggestions.")
    optimize.add_argument("url", help="Repository URL.")
    optimize.add_argument(
        "-a",
        "--apply",
        action="store_true",
        help="Attempt to apply optimizations (not yet implemented).",
    )
    return parser.parse_args(argv)


def _configure_logging() -> None:
    name = os.environ.get("GIT_SEO_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelNamesMapping().get(name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )


def run_cli(
    argv: list[str] | None = None,
    console: Console | None = None,
    err_console: Console | None = None,
) -> int:
    """Run the CLI and return the process exit code."""
    args = _parse_args(argv)
    console = console or Console()
    err_console = err_console or Console(stderr=True)

    try:
        if args.command == "analyze":
            report = asyncio.run(_analyze(args.url))
            if args.json:
                console.print(
                    format_json_report(report), markup=False, highlight=False, soft_wrap=True
                )
            else:
                print_text_report(report, console, verbose=args.verbose)
        elif args.command == "compare":
            console.print("Analyzing repositories...")
            report1, report2 = asyncio.run(_compare(args.repo1, args.repo2))
            print_comparison(report1, report2, console)
        elif args.command == "optimize":
            report = asyncio.run(_analyze(args.url))
            print_optimization(report, console, apply=args.apply)
    except GitSeoError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}", highlight=False)
        return 1
    return 0


def main() -> None:
    """Entry point for the `git-seo` CLI."""
    _configure_logging()
    raise SystemExit(run_cli())


if __name__ == "__main__":
    main()
