"""MCP server exposing repository discoverability analysis as tools."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from git_seo.fetcher.base import ForgeFetcherPort
from git_seo.fetcher.client import DefaultForgeFetcher, create_http_client
from git_seo.tools.analyze import analyze_repository
from git_seo.tools.compare import compare_repositories
from git_seo.tools.optimize import optimize_repository


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared state across all tool invocations."""

    fetcher: ForgeFetcherPort


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Manage shared adapter lifecycle -- the composition root."""
    async with create_http_client() as http_client:
        yield AppContext(fetcher=DefaultForgeFetcher(http_client))


mcp = FastMCP(
    "git-seo",
    instructions=(
        "git-seo scores how discoverable a GitHub, GitLab or Bitbucket repository is "
        "(0-100 across metadata, readme, social, activity and quality) and lists "
        "concrete improvements.\n\n"
        "- **analyze_repository** -- Full score breakdown plus recommendations.\n"
        "- **compare_repositories** -- Score two repositories side by side.\n"
        "- **optimize_repository** -- Only the prioritized recommendation list.\n\n"
        "git-seo never modifies repositories; present recommendations for the user "
        "to apply."
    ),
    lifespan=app_lifespan,
)

# ─── Read-only tools ──────────────────────────────────────────
mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))(analyze_repository)
mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))(compare_repositories)
mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))(optimize_repository)
