"""optimize_repository tool -- prioritized recommendations only."""

from __future__ import annotations

from mcp.server.fastmcp import Context

from git_seo.errors import GitSeoError
from git_seo.report import analyze_repo
from git_seo.tools._helpers import get_context


async def optimize_repository(url: str, ctx: Context) -> dict[str, object]:
    """List the changes that would most improve a repository's discoverability.

    Recommendations are ordered: description, topics, license, then README
    improvements. Nothing is applied automatically.

    Args:
        url: Repository URL on GitHub, GitLab or Bitbucket.
    """
    try:
        app_ctx = get_context(ctx)
        report = await analyze_repo(url, app_ctx.fetcher)
    except GitSeoError as exc:
        return {"success": False, "error": str(exc)}
    except Exception as exc:
        await ctx.error(f"Unexpected error in optimize_repository: {exc}")
        return {"success": False, "error": f"Internal error: {type(exc).__name__}"}

    return {
        "success": True,
        "repository": report.repo.full_name,
        "percentage": report.percentage,
        "recommendations": list(report.recommendations),
        "well_optimized": not report.recommendations,
    }
