"""Shared test fixtures."""

from __future__ import annotations

import pytest

from git_seo.models import ReadmeAnalysis, RepoMetadata


@pytest.fixture(autouse=True)
def _no_github_token(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's GITHUB_TOKEN out of request headers under test."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)


@pytest.fixture
def good_metadata() -> RepoMetadata:
    return RepoMetadata(
        name="test-project",
        description="A test project for demonstration purposes with good description length",
        topics=["test", "python", "cli", "seo", "analysis"],
        license="MIT",
        stars=100,
        forks=25,
        watchers=50,
    )


@pytest.fixture
def good_readme() -> ReadmeAnalysis:
    return ReadmeAnalysis(
        exists=True,
        length=2000,
        has_badges=True,
        badge_count=3,
        has_install_section=True,
        has_usage_section=True,
        has_contributing_section=True,
        heading_count=5,
        code_block_count=4,
    )
