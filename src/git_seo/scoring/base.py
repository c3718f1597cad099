"""Ports: category scorers."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from git_seo.models import ReadmeAnalysis, RepoMetadata, ScoreComponent, ScoringWeights


class CategoryScorerPort(Protocol):
    """A pure function scoring one category from metadata and README analysis."""

    def __call__(
        self,
        metadata: RepoMetadata,
        readme: ReadmeAnalysis,
        *,
        weights: ScoringWeights,
        now: datetime,
    ) -> ScoreComponent:
        """Return the category's ScoreComponent, clamped to [0, max_score]."""
        ...
