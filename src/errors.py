"""Exception types raised while generating a packaging scaffold.

Operating-system failures (an existing output directory, an unreadable init
script) are not wrapped; they propagate as the builtin ``OSError`` subclasses.
"""

from __future__ import annotations

from typing import Iterable, List


class SanepackError(Exception):
    """Base class for all sanepack failures."""


class DescriptorError(SanepackError, ValueError):
    """Raised when a package descriptor cannot be read or has the wrong shape."""


class MissingFieldError(DescriptorError):
    """Raised when a backend requires descriptor fields that are not set."""

    def __init__(self, fields: Iterable[str], target: str = ""):
        self.fields: List[str] = list(fields)
        self.target = target
        prefix = f"{target}: " if target else ""
        super().__init__(
            f"{prefix}missing required field(s): {', '.join(self.fields)}"
        )


class HistoryUnavailableError(SanepackError):
    """Raised when no version or change history can be read from version control."""


class TemplateNotFoundError(SanepackError):
    """Raised when a named template (or the template directory) does not exist."""


class RenderError(SanepackError):
    """Raised when a template fails to render."""


class UnsupportedTargetError(SanepackError, ValueError):
    """Raised when no backend is registered for a packaging target."""


class ConfigError(SanepackError, ValueError):
    """Raised when the run configuration file cannot be used."""
