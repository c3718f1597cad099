"""Generate actionable recommendations from raw metadata and README analysis."""

from __future__ import annotations

from git_seo.models import ReadmeAnalysis, RepoMetadata, ScoreComponent


def generate_recommendations(
    metadata: RepoMetadata,
    readme: ReadmeAnalysis,
    scores: list[ScoreComponent] | None = None,
) -> list[str]:
    """Return recommendations in a fixed rule order, one per unmet condition.

    Rules inspect metadata and README signals directly, not the numeric
    scores; ``scores`` is accepted so callers can pass the full analysis.
    """
    recs: list[str] = []

    if not metadata.description:
        recs.append("Add a repository description (50-350 characters recommended)")
    elif len(metadata.description) < 50:
        recs.append("Expand description to at least 50 characters for better discoverability")

    if len(metadata.topics) < 5:
        recs.append("Add more topics/tags (aim for 5-10 relevant keywords)")

    if not metadata.license:
        recs.append("Add a LICENSE file (MIT, Apache-2.0, or GPL recommended)")

    if not readme.exists:
        recs.append("Create a README.md file - this is critical for discoverability")
        return recs

    if not readme.has_badges:
        recs.append("Add status badges (build status, version, license)")
    if not readme.has_install_section:
        recs.append("Add an Installation section to README")
    if not readme.has_usage_section:
        recs.append("Add a Usage section with code examples")
    if readme.code_block_count == 0:
        recs.append("Include code examples in fenced code blocks")
    if readme.length < 500:
        recs.append("Expand README content (aim for 1000+ characters)")

    return recs
