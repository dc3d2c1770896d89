"""Version and changelog derivation from version control."""

from .git import GitHistory, VersionHistory, derive_version, parse_changes, run_git

__all__ = ["GitHistory", "VersionHistory", "derive_version", "parse_changes", "run_git"]
