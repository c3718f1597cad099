"""Domain models for git-seo. All frozen dataclasses -- no mutation after creation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

# ─── Enumerations ─────────────────────────────────────────────


class Forge(StrEnum):
    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"
    UNKNOWN = "unknown"


class Category(StrEnum):
    METADATA = "metadata"
    README = "readme"
    SOCIAL = "social"
    ACTIVITY = "activity"
    QUALITY = "quality"


# ─── Repository Models ────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class RepoIdentifier:
    """A repository URL resolved to its forge, owner and name."""

    forge: Forge
    owner: str
    name: str
    url: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True, slots=True)
class RepoMetadata:
    """Forge-agnostic repository metadata.

    Every field has a zero value so a failed or partial fetch yields a
    usable (low-scoring) instance instead of an error.
    """

    name: str = ""
    description: str = ""
    topics: list[str] = field(default_factory=list)
    license: str = ""
    stars: int = 0
    forks: int = 0
    watchers: int = 0
    open_issues: int = 0
    default_branch: str = "main"
    created_at: str = ""
    updated_at: str = ""
    language: str = ""
    languages: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ReadmeAnalysis:
    """Structural signals extracted from README markdown."""

    exists: bool = False
    length: int = 0
    has_badges: bool = False
    badge_count: int = 0
    has_install_section: bool = False
    has_usage_section: bool = False
    has_screenshots: bool = False
    has_contributing_section: bool = False
    heading_count: int = 0
    code_block_count: int = 0


# ─── Scoring Models ───────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ScoringWeights:
    """Maximum points per category. The defaults sum to 100."""

    metadata: float = 25.0
    readme: float = 30.0
    social: float = 20.0
    activity: float = 15.0
    quality: float = 10.0

    @property
    def total(self) -> float:
        return self.metadata + self.readme + self.social + self.activity + self.quality


DEFAULT_WEIGHTS = ScoringWeights()


@dataclass(frozen=True, slots=True)
class ScoreComponent:
    """Score for a single category, with a human-readable explanation."""

    category: Category
    score: float
    max_score: float
    details: str

    @property
    def percentage(self) -> float:
        if self.max_score <= 0:
            return 0.0
        return round(self.score / self.max_score * 100, 1)


# ─── Report Models ────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SEOReport:
    """Complete analysis result for one repository."""

    repo: RepoIdentifier
    metadata: RepoMetadata
    readme: ReadmeAnalysis
    scores: list[ScoreComponent] = field(default_factory=list)
    total_score: float = 0.0
    max_possible: float = 100.0
    recommendations: list[str] = field(default_factory=list)
    analyzed_at: datetime | None = None

    @property
    def percentage(self) -> float:
        if self.max_possible <= 0:
            return 0.0
        return round(self.total_score / self.max_possible * 100, 1)
