"""Contract shared by every packaging backend."""
from __future__ import annotations

from abc import ABC, abstractmethod

from descriptor.models import PackageDescriptor


class Frameworker(ABC):
    """Builds the framework needed to create a distributable package.

    A Debian backend, for example, creates a ``debian/`` directory with its
    control files and tells the user which command finishes the build.
    """

    #: Name the backend is registered under, e.g. "debian".
    target: str = ""

    @abstractmethod
    def info(self) -> str:
        """Instruction for the step the user performs after ``framework`` succeeds."""

    @abstractmethod
    def framework(self, descriptor: PackageDescriptor) -> None:
        """Write every file the packaging target needs.

        Raises on the first failing step; nothing is retried or skipped.
        """
