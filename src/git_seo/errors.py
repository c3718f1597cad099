"""Exception hierarchy for git-seo.

All exceptions inherit from GitSeoError (single catch point).
Fetch failures are not exceptions: they degrade to zero-valued results.
"""

from __future__ import annotations


class GitSeoError(Exception):
    """Base exception for all git-seo errors."""


class UnresolvableUrlError(GitSeoError):
    """The URL does not point to a repository on any known forge."""


class UnsupportedForgeError(GitSeoError):
    """No URL builder or parser is registered for a resolved forge."""
