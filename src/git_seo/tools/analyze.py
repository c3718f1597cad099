"""analyze_repository tool -- full discoverability report for one repository."""

from __future__ import annotations

from mcp.server.fastmcp import Context

from git_seo.errors import GitSeoError
from git_seo.render import report_to_dict
from git_seo.report import analyze_repo
from git_seo.tools._helpers import get_context


async def analyze_repository(url: str, ctx: Context) -> dict[str, object]:
    """Score a repository's discoverability and list recommendations.

    Args:
        url: Repository URL on GitHub, GitLab or Bitbucket
            (e.g. "https://github.com/owner/repo" or "git@gitlab.com:owner/repo.git").

    Returns:
        Dict with: success, repository (forge/owner/name/url), scores
        (total, max, percentage, per-category score/max/details),
        recommendations, and analyzed_at.
    """
    try:
        app_ctx = get_context(ctx)
        report = await analyze_repo(url, app_ctx.fetcher)
        return {"success": True, **report_to_dict(report)}
    except GitSeoError as exc:
        return {"success": False, "error": str(exc)}
    except Exception as exc:
        await ctx.error(f"Unexpected error in analyze_repository: {exc}")
        return {"success": False, "error": f"Internal error: {type(exc).__name__}"}
