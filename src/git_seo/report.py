"""Assemble full analysis reports: resolve, fetch, analyze, score, recommend."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime

from git_seo.analysis.readme import analyze_readme
from git_seo.fetcher.base import ForgeFetcherPort
from git_seo.forge.resolver import resolve_repo
from git_seo.models import DEFAULT_WEIGHTS, SEOReport, ScoringWeights
from git_seo.scoring.engine import calculate_scores
from git_seo.scoring.recommendations import generate_recommendations

logger = logging.getLogger(__name__)


async def analyze_repo(
    url: str,
    fetcher: ForgeFetcherPort,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    now: datetime | None = None,
) -> SEOReport:
    """Run the complete analysis pipeline for one repository URL.

    Raises UnresolvableUrlError if the URL matches no known forge. Fetch
    failures do not raise; they lower the score instead.

    The README is fetched after metadata because its URL depends on the
    repository's default branch.
    """
    repo = resolve_repo(url)
    logger.info(
        "Analyzing repository forge=%s owner=%s name=%s", repo.forge, repo.owner, repo.name
    )

    metadata = await fetcher.fetch_metadata(repo)
    readme_text = await fetcher.fetch_readme(repo, metadata.default_branch)
    readme = analyze_readme(readme_text)

    analyzed_at = now if now is not None else datetime.now(tz=UTC)
    scores, total, max_possible = calculate_scores(
        metadata, readme, weights=weights, now=analyzed_at
    )
    recommendations = generate_recommendations(metadata, readme, scores)

    return SEOReport(
        repo=repo,
        metadata=metadata,
        readme=readme,
        scores=scores,
        total_score=total,
        max_possible=max_possible,
        recommendations=recommendations,
        analyzed_at=analyzed_at,
    )


async def compare_repos(
    url1: str,
    url2: str,
    fetcher: ForgeFetcherPort,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    now: datetime | None = None,
) -> tuple[SEOReport, SEOReport]:
    """Analyze two repositories concurrently.

    Both URLs are resolved before any fetch starts, so an unresolvable URL
    fails the comparison without leaving the other analysis running.
    """
    resolve_repo(url1)
    resolve_repo(url2)
    reference = now if now is not None else datetime.now(tz=UTC)
    report1, report2 = await asyncio.gather(
        analyze_repo(url1, fetcher, weights=weights, now=reference),
        analyze_repo(url2, fetcher, weights=weights, now=reference),
    )
    return report1, report2


def pick_winner(report1: SEOReport, report2: SEOReport) -> int | None:
    """Return 1 or 2 for the report with the strictly higher percentage, None on a tie."""
    if report1.percentage > report2.percentage:
        return 1
    if report2.percentage > report1.percentage:
        return 2
    return None
