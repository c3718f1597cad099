"""compare_repositories tool -- side-by-side scores for two repositories."""

from __future__ import annotations

from mcp.server.fastmcp import Context

from git_seo.errors import GitSeoError
from git_seo.models import SEOReport
from git_seo.report import compare_repos, pick_winner
from git_seo.tools._helpers import get_context


def _summary(report: SEOReport) -> dict[str, object]:
    return {
        "repository": report.repo.full_name,
        "forge": str(report.repo.forge),
        "total": report.total_score,
        "percentage": report.percentage,
    }


async def compare_repositories(repo1: str, repo2: str, ctx: Context) -> dict[str, object]:
    """Compare the discoverability scores of two repositories.

    Both repositories are analyzed concurrently.

    Args:
        repo1: First repository URL.
        repo2: Second repository URL.

    Returns:
        Dict with: success, repositories (per-repo totals), categories
        (name, max and each repo's score, in fixed category order), and
        winner ("owner/name" of the strictly higher percentage, or null on a tie).
    """
    try:
        app_ctx = get_context(ctx)
        report1, report2 = await compare_repos(repo1, repo2, app_ctx.fetcher)
    except GitSeoError as exc:
        return {"success": False, "error": str(exc)}
    except Exception as exc:
        await ctx.error(f"Unexpected error in compare_repositories: {exc}")
        return {"success": False, "error": f"Internal error: {type(exc).__name__}"}

    winner = pick_winner(report1, report2)
    return {
        "success": True,
        "repositories": [_summary(report1), _summary(report2)],
        "categories": [
            {
                "name": str(s1.category),
                "max": s1.max_score,
                "scores": [s1.score, s2.score],
            }
            for s1, s2 in zip(report1.scores, report2.scores, strict=True)
        ],
        "winner": None if winner is None else (report1, report2)[winner - 1].repo.full_name,
    }
