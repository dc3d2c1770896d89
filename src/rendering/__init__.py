"""Template rendering collaborators used by the packaging backends."""

from .renderer import (
    DEFAULT_TEMPLATE_ROOT,
    TemplateRenderer,
    copy_verbatim,
    write_lines,
    write_text,
)

__all__ = [
    "DEFAULT_TEMPLATE_ROOT",
    "TemplateRenderer",
    "copy_verbatim",
    "write_lines",
    "write_text",
]
