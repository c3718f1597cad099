"""Extract structural discoverability signals from README markdown text."""

from __future__ import annotations

import re

from git_seo.models import ReadmeAnalysis

# ─── Regex patterns ──────────────────────────────────────────

# Markdown image links; group 1 is the target URL.
_IMAGE_RE = re.compile(r"!\[.*?\]\((.*?)\)")

_BADGE_HOST_RE = re.compile(r"shields\.io|img\.shields|badge", re.IGNORECASE)

_INSTALL_RE = re.compile(
    r"^#{1,3}\s*(?:install|installation|getting started|setup)",
    re.IGNORECASE | re.MULTILINE,
)
_USAGE_RE = re.compile(
    r"^#{1,3}\s*(?:usage|how to use|quick start|examples?)",
    re.IGNORECASE | re.MULTILINE,
)
_CONTRIBUTING_RE = re.compile(
    r"^#{1,3}\s*(?:contribut|development)",
    re.IGNORECASE | re.MULTILINE,
)

_HEADING_RE = re.compile(r"^#{1,6}\s+", re.MULTILINE)

_CODE_FENCE = "```"


def count_images(content: str) -> tuple[int, int]:
    """Return ``(total_images, badge_images)``.

    A badge is an image whose target URL points at a badge service, so
    badges are always a subset of images.
    """
    targets = _IMAGE_RE.findall(content)
    badges = sum(1 for target in targets if _BADGE_HOST_RE.search(target))
    return len(targets), badges


def analyze_readme_content(content: str) -> ReadmeAnalysis:
    """Analyze README markdown for discoverability signals.

    Never fails: malformed markdown just yields lower counts. An unterminated
    code fence is ignored (fences are paired by integer division).
    """
    total_images, badge_count = count_images(content)
    screenshot_count = total_images - badge_count

    return ReadmeAnalysis(
        exists=True,
        length=len(content),
        has_badges=badge_count > 0,
        badge_count=badge_count,
        has_install_section=_INSTALL_RE.search(content) is not None,
        has_usage_section=_USAGE_RE.search(content) is not None,
        has_screenshots=screenshot_count > 0,
        has_contributing_section=_CONTRIBUTING_RE.search(content) is not None,
        heading_count=len(_HEADING_RE.findall(content)),
        code_block_count=content.count(_CODE_FENCE) // 2,
    )


def analyze_readme(content: str | None) -> ReadmeAnalysis:
    """Analyze fetched README content, or return the absent analysis for None."""
    if content is None:
        return ReadmeAnalysis(exists=False)
    return analyze_readme_content(content)
