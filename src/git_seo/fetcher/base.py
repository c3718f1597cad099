"""Ports: forge metadata and README fetching."""

from __future__ import annotations

from typing import Protocol

from git_seo.models import RepoIdentifier, RepoMetadata


class ForgeFetcherPort(Protocol):
    """Port for fetching repository data from a forge.

    Implementations never raise on fetch failure: metadata degrades to
    ``RepoMetadata()`` and a missing README is reported as None.
    """

    async def fetch_metadata(self, repo: RepoIdentifier) -> RepoMetadata:
        """Fetch and parse repository metadata from the forge API."""
        ...

    async def fetch_readme(self, repo: RepoIdentifier, branch: str) -> str | None:
        """Fetch raw README.md content for the given branch."""
        ...
