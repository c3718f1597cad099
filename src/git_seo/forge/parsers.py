"""Parse forge-specific API payloads into forge-agnostic RepoMetadata."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from git_seo.models import Forge, RepoMetadata


def _str(value: object) -> str:
    """JSON null and non-string values become ''."""
    return value if isinstance(value, str) else ""


def _count(value: object) -> int:
    """Coerce a JSON count to a non-negative int (null/garbage -> 0)."""
    if isinstance(value, bool):
        return 0
    try:
        return max(0, int(value))  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return 0


def _topics(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [t for t in value if isinstance(t, str) and t]


def _nested_str(data: Mapping[str, Any], key: str, inner: str) -> str:
    nested = data.get(key)
    if not isinstance(nested, Mapping):
        return ""
    return _str(nested.get(inner))


def parse_github_metadata(data: Mapping[str, Any]) -> RepoMetadata:
    return RepoMetadata(
        name=_str(data.get("name")),
        description=_str(data.get("description")),
        topics=_topics(data.get("topics")),
        license=_nested_str(data, "license", "spdx_id"),
        stars=_count(data.get("stargazers_count")),
        forks=_count(data.get("forks_count")),
        watchers=_count(data.get("subscribers_count")),
        open_issues=_count(data.get("open_issues_count")),
        default_branch=_str(data.get("default_branch")) or "main",
        created_at=_str(data.get("created_at")),
        updated_at=_str(data.get("updated_at")),
        language=_str(data.get("language")),
    )


def parse_gitlab_metadata(data: Mapping[str, Any]) -> RepoMetadata:
    """GitLab only includes ``license`` when queried with ``license=true``."""
    return RepoMetadata(
        name=_str(data.get("name")),
        description=_str(data.get("description")),
        topics=_topics(data.get("topics")),
        license=_nested_str(data, "license", "key"),
        stars=_count(data.get("star_count")),
        forks=_count(data.get("forks_count")),
        open_issues=_count(data.get("open_issues_count")),
        default_branch=_str(data.get("default_branch")) or "main",
        created_at=_str(data.get("created_at")),
        updated_at=_str(data.get("last_activity_at")),
    )


def parse_bitbucket_metadata(data: Mapping[str, Any]) -> RepoMetadata:
    return RepoMetadata(
        name=_str(data.get("name")),
        description=_str(data.get("description")),
        default_branch=_nested_str(data, "mainbranch", "name") or "main",
        created_at=_str(data.get("created_on")),
        updated_at=_str(data.get("updated_on")),
        language=_str(data.get("language")),
    )


_PARSERS: dict[Forge, Callable[[Mapping[str, Any]], RepoMetadata]] = {
    Forge.GITHUB: parse_github_metadata,
    Forge.GITLAB: parse_gitlab_metadata,
    Forge.BITBUCKET: parse_bitbucket_metadata,
}


def parse_metadata(forge: Forge, data: object) -> RepoMetadata:
    """Dispatch to the forge's parser. Unknown forges or non-object payloads yield zero values."""
    parser = _PARSERS.get(forge)
    if parser is None or not isinstance(data, Mapping):
        return RepoMetadata()
    return parser(data)


def parse_languages(data: object) -> dict[str, int]:
    """Parse a ``{language: bytes-or-percent}`` payload, dropping non-numeric entries."""
    if not isinstance(data, Mapping):
        return {}
    languages: dict[str, int] = {}
    for name, amount in data.items():
        if isinstance(name, str) and isinstance(amount, int | float) and not isinstance(
            amount, bool
        ):
            languages[name] = max(0, round(amount))
    return languages


def primary_language(languages: Mapping[str, int]) -> str:
    """Return the language with the largest share, or '' when empty."""
    if not languages:
        return ""
    return max(languages.items(), key=lambda item: item[1])[0]
