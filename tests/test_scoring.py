"""Tests for the scoring engine (scoring/engine.py)."""

from __future__ import annotations

import math
from datetime import UTC, datetime, timedelta

import pytest

from git_seo.models import (
    DEFAULT_WEIGHTS,
    Category,
    ReadmeAnalysis,
    RepoMetadata,
    ScoringWeights,
)
from git_seo.scoring.engine import (
    CATEGORY_SCORERS,
    calculate_scores,
    parse_timestamp,
    score_activity,
    score_metadata,
    score_quality,
    score_readme,
    score_social,
)

NOW = datetime(2026, 1, 10, 12, 0, 0)


def _updated(days_ago: float) -> RepoMetadata:
    stamp = (NOW - timedelta(days=days_ago)).strftime("%Y-%m-%dT%H:%M:%SZ")
    return RepoMetadata(updated_at=stamp)


# ─── Aggregation ─────────────────────────────────────────────


class TestCalculateScores:
    def test_good_repository(self, good_metadata, good_readme):
        scores, total, max_possible = calculate_scores(good_metadata, good_readme, now=NOW)

        assert len(scores) == 5
        assert total > 0
        assert total <= max_possible
        assert max_possible == 100.0

    def test_fixed_category_order(self, good_metadata, good_readme):
        scores, _, _ = calculate_scores(good_metadata, good_readme, now=NOW)
        assert [s.category for s in scores] == [
            Category.METADATA,
            Category.README,
            Category.SOCIAL,
            Category.ACTIVITY,
            Category.QUALITY,
        ]
        assert len(CATEGORY_SCORERS) == len(scores)

    def test_scorer_table_order_matches_categories(self):
        categories = [
            scorer(RepoMetadata(), ReadmeAnalysis(), now=NOW).category
            for scorer in CATEGORY_SCORERS
        ]
        assert categories == list(Category)

    def test_total_is_sum_of_components(self, good_metadata, good_readme):
        scores, total, _ = calculate_scores(good_metadata, good_readme, now=NOW)
        assert total == pytest.approx(sum(s.score for s in scores))

    def test_max_scores_match_weights(self):
        scores, _, max_possible = calculate_scores(RepoMetadata(), ReadmeAnalysis(), now=NOW)
        assert [s.max_score for s in scores] == [25.0, 30.0, 20.0, 15.0, 10.0]
        assert max_possible == DEFAULT_WEIGHTS.total

    def test_idempotent(self, good_metadata, good_readme):
        first = calculate_scores(good_metadata, good_readme, now=NOW)
        second = calculate_scores(good_metadata, good_readme, now=NOW)
        assert first == second

    def test_all_components_within_bounds(self):
        maxed = RepoMetadata(
            name="a-good-name",
            description="x" * 200,
            topics=[f"t{i}" for i in range(20)],
            license="MIT",
            stars=10**9,
            forks=10**9,
            watchers=10**9,
            open_issues=50,
            updated_at=NOW.isoformat(),
            language="Python",
        )
        readme = ReadmeAnalysis(
            exists=True,
            length=10_000,
            has_badges=True,
            badge_count=50,
            has_install_section=True,
            has_usage_section=True,
            has_contributing_section=True,
            heading_count=50,
            code_block_count=50,
        )
        scores, total, max_possible = calculate_scores(maxed, readme, now=NOW)
        for s in scores:
            assert 0 <= s.score <= s.max_score
        assert total == pytest.approx(max_possible)

    def test_alternate_weights_clamp_scores(self, good_metadata, good_readme):
        weights = ScoringWeights(metadata=10, readme=10, social=10, activity=10, quality=10)
        scores, total, max_possible = calculate_scores(
            good_metadata, good_readme, weights=weights, now=NOW
        )
        assert max_possible == 50
        assert scores[0].score == 10
        assert all(s.score <= 10 for s in scores)


# ─── Metadata ────────────────────────────────────────────────


class TestScoreMetadata:
    def test_good_metadata(self, good_metadata):
        # name 5 + description 5 (70 chars) + topics 7 + license 5
        result = score_metadata(good_metadata)
        assert result.score == 22.0
        assert result.details == "All metadata present"

    def test_empty_metadata(self):
        result = score_metadata(RepoMetadata())
        assert result.score == 0.0
        assert "Missing repository name" in result.details
        assert "No description set" in result.details
        assert "No topics/tags configured" in result.details
        assert "No license detected" in result.details
        assert result.details.count("; ") == 3

    def test_name_quality(self):
        assert score_metadata(RepoMetadata(name="abc")).score == 2.0
        assert score_metadata(RepoMetadata(name="abcde")).score == 3.5
        assert score_metadata(RepoMetadata(name="my_tool")).score == 5.0
        assert score_metadata(RepoMetadata(name="x" * 31)).score == 2.0

    def test_optimal_description_length(self):
        assert score_metadata(RepoMetadata(description="x" * 49)).score == 3.0
        assert score_metadata(RepoMetadata(description="x" * 50)).score == 5.0
        assert score_metadata(RepoMetadata(description="x" * 100)).score == 8.0
        assert score_metadata(RepoMetadata(description="x" * 351)).score == 5.0

    def test_topics(self):
        assert score_metadata(RepoMetadata(topics=["a", "b"])).score == 2.0
        assert score_metadata(RepoMetadata(topics=list("abcde"))).score == 7.0
        assert score_metadata(RepoMetadata(topics=list("abcdefghij"))).score == 7.0


# ─── README ──────────────────────────────────────────────────


class TestScoreReadme:
    def test_missing_readme(self):
        result = score_readme(RepoMetadata(), ReadmeAnalysis(exists=False))
        assert result.score == 0.0
        assert result.details == "README.md not found"

    def test_missing_ignores_other_fields(self):
        readme = ReadmeAnalysis(exists=False, length=5000, badge_count=5, has_badges=True)
        result = score_readme(RepoMetadata(), readme)
        assert result.score == 0.0
        assert result.details == "README.md not found"

    def test_good_readme(self, good_readme):
        # 5 + 5 length + 3 badges + 3 + 4 + 3 sections + 4 code
        result = score_readme(RepoMetadata(), good_readme)
        assert result.score == 27.0
        assert result.details == "README well-structured"

    def test_bare_readme(self):
        result = score_readme(RepoMetadata(), ReadmeAnalysis(exists=True, length=100))
        assert result.score == 5.0
        assert result.details == (
            "No badges found; Missing installation section; "
            "Missing usage/examples section; No code examples"
        )

    def test_contributing_is_silent(self):
        readme = ReadmeAnalysis(exists=True, has_contributing_section=False)
        assert "ontribut" not in score_readme(RepoMetadata(), readme).details

    def test_length_tiers(self):
        assert score_readme(None, ReadmeAnalysis(exists=True, length=499)).score == 5.0
        assert score_readme(None, ReadmeAnalysis(exists=True, length=500)).score == 7.5
        assert score_readme(None, ReadmeAnalysis(exists=True, length=1500)).score == 10.0


# ─── Social ──────────────────────────────────────────────────


class TestScoreSocial:
    def test_logarithmic_terms(self, good_metadata):
        expected = (
            math.log10(101) * 3.0 + math.log10(26) * 2.0 + math.log10(51) * 2.0
        )
        assert score_social(good_metadata).score == pytest.approx(expected)

    def test_zero_counts(self):
        result = score_social(RepoMetadata())
        assert result.score == 0.0
        assert result.details == "Stars: 0, Forks: 0, Watchers: 0"

    def test_caps(self):
        result = score_social(RepoMetadata(stars=10**12, forks=10**12, watchers=10**12))
        assert result.score == 20.0

    def test_detail_reports_raw_counts(self, good_metadata):
        assert score_social(good_metadata).details == "Stars: 100, Forks: 25, Watchers: 50"

    @pytest.mark.parametrize("field", ["stars", "forks", "watchers"])
    def test_monotonic(self, field):
        previous = -1.0
        for n in (0, 1, 9, 10, 99, 1000, 10**5, 10**7):
            current = score_social(RepoMetadata(**{field: n})).score
            assert current >= previous
            previous = current


# ─── Activity ────────────────────────────────────────────────


class TestScoreActivity:
    @pytest.mark.parametrize(
        ("days", "points", "detail"),
        [
            (3, 10.0, "Updated within last week"),
            (10, 7.0, "Updated within last month"),
            (60, 4.0, "Updated within last 3 months"),
            (200, 2.0, "Updated within last year"),
            (400, 0.0, "No updates in over a year"),
        ],
    )
    def test_recency_tiers(self, days, points, detail):
        result = score_activity(_updated(days), now=NOW)
        assert result.score == points
        assert result.details == detail

    def test_updated_three_days_ago_with_issues(self):
        metadata = RepoMetadata(updated_at=_updated(3).updated_at, open_issues=12)
        result = score_activity(metadata, now=NOW)
        assert result.score == 15.0
        assert "updated within last week" in result.details.lower()

    def test_fractional_seconds_and_offset_tolerated(self):
        metadata = RepoMetadata(updated_at="2026-01-07T12:00:00.123456+05:00")
        result = score_activity(metadata, now=NOW)
        assert result.details == "Updated within last week"

    def test_aware_now_accepted(self):
        result = score_activity(_updated(3), now=NOW.replace(tzinfo=UTC))
        assert result.score == 10.0

    def test_unparsable_date(self):
        result = score_activity(RepoMetadata(updated_at="not-a-date"), now=NOW)
        assert result.score == 0.0
        assert result.details == "Could not parse update date"

    def test_empty_date(self):
        result = score_activity(RepoMetadata(), now=NOW)
        assert result.score == 0.0
        assert result.details == "Could not parse update date"

    def test_high_issue_count(self):
        metadata = RepoMetadata(updated_at=_updated(3).updated_at, open_issues=150)
        result = score_activity(metadata, now=NOW)
        assert result.score == 12.0
        assert result.details == "Updated within last week; High issue count (150)"

    def test_zero_issues_contribute_nothing(self):
        assert score_activity(_updated(400), now=NOW).score == 0.0


class TestParseTimestamp:
    def test_zulu(self):
        assert parse_timestamp("2024-06-01T12:30:00Z") == datetime(2024, 6, 1, 12, 30)

    def test_empty(self):
        assert parse_timestamp("") is None

    def test_garbage(self):
        assert parse_timestamp("yesterday") is None


# ─── Quality ─────────────────────────────────────────────────


class TestScoreQuality:
    def test_all_signals(self, good_readme):
        metadata = RepoMetadata(language="Python", license="MIT")
        result = score_quality(metadata, good_readme)
        assert result.score == 10.0
        assert result.details == "Quality indicators present"

    def test_missing_language(self, good_metadata, good_readme):
        result = score_quality(good_metadata, good_readme)
        assert result.score == 7.0
        assert result.details == "Primary language not detected"

    def test_readme_structure_thresholds(self):
        readme = ReadmeAnalysis(exists=True, heading_count=2, code_block_count=1)
        assert score_quality(RepoMetadata(), readme).score == 0.0
        readme = ReadmeAnalysis(exists=True, heading_count=3, code_block_count=2)
        assert score_quality(RepoMetadata(), readme).score == 4.0
