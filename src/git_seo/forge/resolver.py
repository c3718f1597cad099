"""Resolve repository URLs to forges and build forge API/README URLs."""

from __future__ import annotations

import re
from collections.abc import Callable
from urllib.parse import quote as urlquote

from git_seo.errors import UnresolvableUrlError, UnsupportedForgeError
from git_seo.models import Forge, RepoIdentifier

# ─── URL parsing ───────────────────────────────────────────

# HTTPS (github.com/owner/repo) and SSH (git@github.com:owner/repo) forms.
_FORGE_PATTERNS: dict[Forge, re.Pattern[str]] = {
    Forge.GITHUB: re.compile(r"github\.com[/:]([^/]+)/([^/.]+)"),
    Forge.GITLAB: re.compile(r"gitlab\.com[/:]([^/]+)/([^/.]+)"),
    Forge.BITBUCKET: re.compile(r"bitbucket\.org[/:]([^/]+)/([^/.]+)"),
}


def parse_repo_url(url: str) -> RepoIdentifier:
    """Parse a repository URL and detect its forge.

    Returns an identifier with ``Forge.UNKNOWN`` and empty owner/name when
    no known forge matches. Use ``resolve_repo`` to get an error instead.
    """
    normalized = url.strip()
    if normalized.endswith(".git"):
        normalized = normalized[:-4]

    for forge, pattern in _FORGE_PATTERNS.items():
        m = pattern.search(normalized)
        if m:
            return RepoIdentifier(forge=forge, owner=m.group(1), name=m.group(2), url=url)

    return RepoIdentifier(forge=Forge.UNKNOWN, owner="", name="", url=url)


def resolve_repo(url: str) -> RepoIdentifier:
    """Parse a repository URL, raising UnresolvableUrlError for unknown forges."""
    repo = parse_repo_url(url)
    if repo.forge == Forge.UNKNOWN:
        raise UnresolvableUrlError(f"Could not detect forge from URL: {url}")
    return repo


# ─── URL builders ──────────────────────────────────────────


def _gitlab_project_path(repo: RepoIdentifier) -> str:
    return urlquote(f"{repo.owner}/{repo.name}", safe="")


_API_BUILDERS: dict[Forge, Callable[[RepoIdentifier], str]] = {
    Forge.GITHUB: lambda r: f"https://api.github.com/repos/{r.owner}/{r.name}",
    Forge.GITLAB: lambda r: f"https://gitlab.com/api/v4/projects/{_gitlab_project_path(r)}",
    Forge.BITBUCKET: lambda r: (
        f"https://api.bitbucket.org/2.0/repositories/{r.owner}/{r.name}"
    ),
}

_README_BUILDERS: dict[Forge, Callable[[RepoIdentifier, str], str]] = {
    Forge.GITHUB: lambda r, branch: (
        f"https://raw.githubusercontent.com/{r.owner}/{r.name}/{branch}/README.md"
    ),
    Forge.GITLAB: lambda r, branch: (
        f"https://gitlab.com/api/v4/projects/{_gitlab_project_path(r)}"
        f"/repository/files/README.md/raw?ref={urlquote(branch, safe='')}"
    ),
    Forge.BITBUCKET: lambda r, branch: (
        f"https://bitbucket.org/{r.owner}/{r.name}/raw/{branch}/README.md"
    ),
}

# Forges that expose a language breakdown endpoint next to the repo API URL.
_LANGUAGES_SUFFIX: dict[Forge, str] = {
    Forge.GITHUB: "/languages",
    Forge.GITLAB: "/languages",
}


def build_api_url(repo: RepoIdentifier) -> str:
    """Build the repository metadata API URL for the identifier's forge."""
    builder = _API_BUILDERS.get(repo.forge)
    if builder is None:
        raise UnsupportedForgeError(f"Unsupported forge: {repo.forge}")
    return builder(repo)


def build_readme_url(repo: RepoIdentifier, branch: str = "main") -> str:
    """Build the raw README.md URL for the identifier's forge and branch."""
    builder = _README_BUILDERS.get(repo.forge)
    if builder is None:
        raise UnsupportedForgeError(f"Unsupported forge: {repo.forge}")
    return builder(repo, branch or "main")


def build_languages_url(repo: RepoIdentifier) -> str | None:
    """Build the language breakdown URL, or None if the forge has no such endpoint."""
    suffix = _LANGUAGES_SUFFIX.get(repo.forge)
    if suffix is None:
        return None
    return build_api_url(repo) + suffix
