"""Compute the weighted discoverability score across five categories."""

from __future__ import annotations

import math
from datetime import UTC, datetime

from git_seo.models import (
    DEFAULT_WEIGHTS,
    Category,
    ReadmeAnalysis,
    RepoMetadata,
    ScoreComponent,
    ScoringWeights,
)
from git_seo.scoring.base import CategoryScorerPort

# ─── Helpers ─────────────────────────────────────────────────


def _component(
    category: Category, score: float, max_score: float, details: str
) -> ScoreComponent:
    return ScoreComponent(
        category=category,
        score=max(0.0, min(score, max_score)),
        max_score=max_score,
        details=details,
    )


def _utc_naive(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(UTC).replace(tzinfo=None)


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO 8601 timestamp using at most its first 19 characters.

    Fractional seconds and timezone suffixes are ignored. Returns None for
    empty or unparsable input.
    """
    if not value:
        return None
    try:
        return _utc_naive(datetime.fromisoformat(value[:19]))
    except ValueError:
        return None


def _now_utc() -> datetime:
    return datetime.now(tz=UTC).replace(tzinfo=None)


# ─── Category scorers ────────────────────────────────────────


def score_metadata(
    metadata: RepoMetadata,
    readme: ReadmeAnalysis | None = None,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    now: datetime | None = None,
) -> ScoreComponent:
    """Name (5), description (8), topics (7) and license (5)."""
    score = 0.0
    details: list[str] = []

    name = metadata.name
    if name:
        score += 2.0
        if "-" in name or "_" in name:
            score += 1.5
        if 5 <= len(name) <= 30:
            score += 1.5
    else:
        details.append("Missing repository name")

    desc_len = len(metadata.description)
    if desc_len > 0:
        score += 3.0
        if desc_len >= 50:
            score += 2.0
        if 100 <= desc_len <= 350:
            score += 3.0
    else:
        details.append("No description set")

    topic_count = len(metadata.topics)
    if topic_count > 0:
        score += float(min(topic_count, 5))
        if topic_count >= 5:
            score += 2.0
    else:
        details.append("No topics/tags configured")

    if metadata.license:
        score += 5.0
    else:
        details.append("No license detected")

    detail_str = "; ".join(details) if details else "All metadata present"
    return _component(Category.METADATA, score, weights.metadata, detail_str)


def score_readme(
    metadata: RepoMetadata | None,
    readme: ReadmeAnalysis,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    now: datetime | None = None,
) -> ScoreComponent:
    """Existence (5), length (5), badges (5), sections (10), code examples (5)."""
    if not readme.exists:
        return _component(Category.README, 0.0, weights.readme, "README.md not found")

    score = 5.0
    details: list[str] = []

    if readme.length >= 500:
        score += 2.5
    if readme.length >= 1500:
        score += 2.5

    if readme.has_badges:
        score += float(min(readme.badge_count, 5))
    else:
        details.append("No badges found")

    if readme.has_install_section:
        score += 3.0
    else:
        details.append("Missing installation section")

    if readme.has_usage_section:
        score += 4.0
    else:
        details.append("Missing usage/examples section")

    # Contributing is optional: no detail when absent.
    if readme.has_contributing_section:
        score += 3.0

    if readme.code_block_count > 0:
        score += float(min(readme.code_block_count, 5))
    else:
        details.append("No code examples")

    detail_str = "; ".join(details) if details else "README well-structured"
    return _component(Category.README, score, weights.readme, detail_str)


def _log_points(count: int, factor: float, cap: float) -> float:
    return min(math.log10(max(count, 0) + 1) * factor, cap)


def score_social(
    metadata: RepoMetadata,
    readme: ReadmeAnalysis | None = None,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    now: datetime | None = None,
) -> ScoreComponent:
    """Stars (10), forks (5) and watchers (5) on a log10 scale."""
    score = (
        _log_points(metadata.stars, 3.0, 10.0)
        + _log_points(metadata.forks, 2.0, 5.0)
        + _log_points(metadata.watchers, 2.0, 5.0)
    )
    detail_str = (
        f"Stars: {metadata.stars}, Forks: {metadata.forks}, Watchers: {metadata.watchers}"
    )
    return _component(Category.SOCIAL, score, weights.social, detail_str)


def _recency(days_since: float) -> tuple[float, str]:
    if days_since < 7:
        return 10.0, "Updated within last week"
    if days_since < 30:
        return 7.0, "Updated within last month"
    if days_since < 90:
        return 4.0, "Updated within last 3 months"
    if days_since < 365:
        return 2.0, "Updated within last year"
    return 0.0, "No updates in over a year"


def score_activity(
    metadata: RepoMetadata,
    readme: ReadmeAnalysis | None = None,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    now: datetime | None = None,
) -> ScoreComponent:
    """Update recency (10) and open issue engagement (5).

    ``now`` is the reference time for recency; defaults to current UTC.
    """
    score = 0.0
    details: list[str] = []

    updated = parse_timestamp(metadata.updated_at)
    if updated is None:
        details.append("Could not parse update date")
    else:
        reference = _utc_naive(now) if now is not None else _now_utc()
        days_since = (reference - updated).total_seconds() / 86400
        points, detail = _recency(days_since)
        score += points
        details.append(detail)

    issues = metadata.open_issues
    if 0 < issues < 100:
        score += 5.0
    elif issues >= 100:
        score += 2.0
        details.append(f"High issue count ({issues})")

    return _component(Category.ACTIVITY, score, weights.activity, "; ".join(details))


def score_quality(
    metadata: RepoMetadata,
    readme: ReadmeAnalysis,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    now: datetime | None = None,
) -> ScoreComponent:
    """Primary language (3), license (3) and README structure (4).

    License is also scored under metadata; here it counts as a quality signal.
    """
    score = 0.0
    details: list[str] = []

    if metadata.language:
        score += 3.0
    else:
        details.append("Primary language not detected")

    if metadata.license:
        score += 3.0

    if readme.heading_count >= 3:
        score += 2.0
    if readme.code_block_count >= 2:
        score += 2.0

    detail_str = "; ".join(details) if details else "Quality indicators present"
    return _component(Category.QUALITY, score, weights.quality, detail_str)


# ─── Aggregation ─────────────────────────────────────────────

# Fixed order: report comparison aligns two score lists by position.
CATEGORY_SCORERS: tuple[CategoryScorerPort, ...] = (
    score_metadata,
    score_readme,
    score_social,
    score_activity,
    score_quality,
)


def calculate_scores(
    metadata: RepoMetadata,
    readme: ReadmeAnalysis,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    now: datetime | None = None,
) -> tuple[list[ScoreComponent], float, float]:
    """Score every category.

    Returns:
        ``(scores, total, max_possible)`` where scores are ordered metadata,
        readme, social, activity, quality.
    """
    reference = now if now is not None else _now_utc()
    scores = [
        scorer(metadata, readme, weights=weights, now=reference)
        for scorer in CATEGORY_SCORERS
    ]
    total = sum(s.score for s in scores)
    max_possible = sum(s.max_score for s in scores)
    return scores, total, max_possible
