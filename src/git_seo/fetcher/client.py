"""Fetch repository metadata and README content from forge HTTP APIs."""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import replace

import httpx

from git_seo import __version__
from git_seo.forge.parsers import parse_languages, parse_metadata, primary_language
from git_seo.forge.resolver import build_api_url, build_languages_url, build_readme_url
from git_seo.models import Forge, RepoIdentifier, RepoMetadata

logger = logging.getLogger(__name__)

USER_AGENT = f"git-seo/{__version__}"

# Query parameters appended to the metadata request, per forge.
_METADATA_PARAMS: dict[Forge, dict[str, str]] = {
    Forge.GITLAB: {"license": "true"},
}


# ─── Auth ──────────────────────────────────────────────────


def _forge_headers(forge: Forge) -> dict[str, str]:
    """Request headers for forge API calls.

    ``GITHUB_TOKEN`` is only ever sent to GitHub and never logged.
    """
    headers = {"User-Agent": USER_AGENT}
    if forge == Forge.GITHUB:
        headers["Accept"] = "application/vnd.github+json"
        token = os.environ.get("GITHUB_TOKEN", "").strip()
        if token:
            headers["Authorization"] = f"Bearer {token}"
    return headers


# ─── Requests ──────────────────────────────────────────────


async def _get_json(
    http_client: httpx.AsyncClient,
    url: str,
    headers: dict[str, str],
    params: dict[str, str] | None = None,
) -> object | None:
    """GET a JSON document. Returns None on any non-200, network or decode failure."""
    try:
        resp = await http_client.get(url, headers=headers, params=params)
    except httpx.HTTPError as exc:
        logger.warning("Failed to fetch %s: %s", url, exc)
        return None

    if resp.status_code != 200:
        logger.warning("Failed to fetch metadata (HTTP %d) from %s", resp.status_code, url)
        return None

    try:
        return resp.json()
    except ValueError:
        logger.warning("Malformed JSON body from %s", url)
        return None


async def _fetch_languages(
    repo: RepoIdentifier,
    http_client: httpx.AsyncClient,
) -> dict[str, int]:
    url = build_languages_url(repo)
    if url is None:
        return {}
    try:
        resp = await http_client.get(url, headers=_forge_headers(repo.forge))
        if resp.status_code != 200:
            logger.debug(
                "No language breakdown for %s (HTTP %d)", repo.full_name, resp.status_code
            )
            return {}
        return parse_languages(resp.json())
    except (httpx.HTTPError, ValueError):
        logger.debug("Failed to fetch languages for %s, returning empty", repo.full_name)
        return {}


async def fetch_metadata(
    repo: RepoIdentifier,
    http_client: httpx.AsyncClient,
) -> RepoMetadata:
    """Fetch repository metadata and language breakdown concurrently.

    Raises UnsupportedForgeError for forges without an API builder.
    Every other failure degrades to ``RepoMetadata()`` with a warning.
    """
    api_url = build_api_url(repo)
    headers = _forge_headers(repo.forge)

    data, languages = await asyncio.gather(
        _get_json(http_client, api_url, headers, _METADATA_PARAMS.get(repo.forge)),
        _fetch_languages(repo, http_client),
    )
    if data is None:
        return RepoMetadata()

    metadata = parse_metadata(repo.forge, data)
    if not languages:
        return metadata
    return replace(
        metadata,
        languages=languages,
        language=metadata.language or primary_language(languages),
    )


async def fetch_readme(
    repo: RepoIdentifier,
    branch: str,
    http_client: httpx.AsyncClient,
) -> str | None:
    """Fetch raw README.md text. Returns None if not found or unreachable."""
    readme_url = build_readme_url(repo, branch)
    try:
        resp = await http_client.get(readme_url, headers={"User-Agent": USER_AGENT})
    except httpx.HTTPError as exc:
        logger.warning("Failed to fetch README from %s: %s", readme_url, exc)
        return None

    if resp.status_code != 200:
        logger.warning("README not available (HTTP %d) at %s", resp.status_code, readme_url)
        return None
    return resp.text


class DefaultForgeFetcher:
    """Adapter for ForgeFetcherPort -- holds httpx client."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client

    async def fetch_metadata(self, repo: RepoIdentifier) -> RepoMetadata:
        """Fetch and parse repository metadata from the forge API."""
        return await fetch_metadata(repo, self._http)

    async def fetch_readme(self, repo: RepoIdentifier, branch: str) -> str | None:
        """Fetch raw README.md content for the given branch."""
        return await fetch_readme(repo, branch, self._http)


def create_http_client() -> httpx.AsyncClient:
    """Build the shared AsyncClient used by the CLI and the MCP server."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(30.0, connect=10.0),
        follow_redirects=True,
        limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
    )
