"""Version and change-history extraction from a git checkout.

Both queries are read-only. The runner that executes git is injectable so the
parsing and failure handling can be exercised without a real repository.
"""
from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from datetime import datetime
from email.utils import format_datetime
from typing import Callable, List, Optional

from constants import Constants
from errors import HistoryUnavailableError
from common.logging_utils import extra_context, is_debug_enabled

logger = logging.getLogger(__name__)

GitRunner = Callable[[List[str]], str]
Clock = Callable[[], datetime]


def run_git(args: List[str], cwd: Optional[str] = None) -> str:
    """Run ``git <args>`` and return its stdout.

    Raises:
        subprocess.CalledProcessError: git exited non-zero.
        OSError: git is not on the execution path.
    """
    completed = subprocess.run(
        ["git"] + list(args),
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return completed.stdout


def derive_version(tag_output: str) -> str:
    """Turn ``git describe`` output into a packaging version.

    Packaging versions must begin with a digit, so the trailing line terminator
    and exactly one leading ``v``/``V`` are removed.
    """
    version = tag_output.rstrip("\r\n")
    if version[:1] and version[0] in Constants.VERSION_PREFIXES:
        version = version[1:]
    if not version:
        raise HistoryUnavailableError("no version tag found")
    return version


def parse_changes(log_output: str) -> List[str]:
    """Split one-summary-per-line log output, newest first, as git stored it."""
    text = log_output.rstrip("\r\n")
    if not text:
        return []
    return text.splitlines()


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class VersionHistory:
    """Version, change summaries (newest first) and synthesis date of a changelog."""

    version: str
    date: str
    changes: List[str] = field(default_factory=list)


class GitHistory:
    """Derive a version and a change list from git state."""

    def __init__(self, cwd: Optional[str] = None, run: Optional[GitRunner] = None,
                 clock: Optional[Clock] = None):
        self.cwd = cwd
        self._run = run or (lambda args: run_git(args, cwd=self.cwd))
        self._clock = clock or _now

    def _query(self, args: List[str], what: str) -> str:
        if is_debug_enabled(logger):
            logger.debug(
                "git query",
                extra=extra_context(event="vcs_query", component="history", action=what,
                                    target=" ".join(args)),
            )
        try:
            return self._run(args)
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or "").strip() if isinstance(exc.stderr, str) else ""
            raise HistoryUnavailableError(
                f"unavailable version history: {what} failed"
                + (f" ({stderr})" if stderr else "")
            ) from exc
        except OSError as exc:
            raise HistoryUnavailableError(
                f"unavailable version history: cannot run git ({exc})"
            ) from exc

    def latest_version(self) -> str:
        """Return the version of the most recent reachable ``v``-prefixed tag."""
        args = ["describe", "--abbrev=0", "--tags"]
        args += [f"--match={pattern}" for pattern in Constants.TAG_MATCH_PATTERNS]
        return derive_version(self._query(args, "describe"))

    def changes(self) -> List[str]:
        """Return one summary line per mainline commit, newest first.

        Following first parents only folds the commits of a merged side branch
        into the single merge entry.
        """
        output = self._query(
            ["--no-pager", "log", "--first-parent", "--pretty=format:%s"], "log"
        )
        return parse_changes(output)

    def timestamp(self) -> str:
        """Return the current time in RFC 2822 form, as changelogs require."""
        return format_datetime(self._clock())

    def extract(self) -> VersionHistory:
        version = self.latest_version()
        changes = self.changes()
        logger.info("Derived version %s with %d change(s)", version, len(changes))
        return VersionHistory(version=version, date=self.timestamp(), changes=changes)
