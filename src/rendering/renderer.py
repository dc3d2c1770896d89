"""Template rendering and plain file output for packaging backends."""
from __future__ import annotations

import dataclasses
import logging
import os
import shutil
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
)

from errors import RenderError, TemplateNotFoundError

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = "template"
DEFAULT_TEMPLATE_ROOT = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")


def _context(data: Any) -> Mapping[str, Any]:
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return dataclasses.asdict(data)
    if isinstance(data, Mapping):
        return data
    raise TypeError(f"cannot render {type(data).__name__}; expected a dataclass or mapping")


def write_text(destination: str, text: str) -> None:
    with open(destination, "w", encoding="utf-8") as f:
        f.write(text)


def write_lines(destination: str, lines: Iterable[str]) -> None:
    """Write one entry per line; an empty iterable produces an empty file."""
    write_text(destination, "".join(f"{line}\n" for line in lines))


def copy_verbatim(source: str, destination: str, mode: Optional[int] = None) -> None:
    """Copy ``source`` byte for byte, optionally setting permission bits."""
    shutil.copyfile(source, destination)
    if mode is not None:
        os.chmod(destination, mode)


class TemplateRenderer:
    """Renders named ``*.template`` files from one directory with Jinja2."""

    def __init__(self, template_dir: str):
        self.template_dir = template_dir
        self._env: Optional[Environment] = None

    def load(self) -> List[str]:
        """Prepare the environment and return the available template names.

        Raises:
            TemplateNotFoundError: The directory is missing or holds no templates.
        """
        if not os.path.isdir(self.template_dir):
            raise TemplateNotFoundError(f"template directory not found: {self.template_dir}")
        env = Environment(
            loader=FileSystemLoader(self.template_dir),
            undefined=StrictUndefined,
            trim_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )
        names = env.list_templates(extensions=[TEMPLATE_SUFFIX])
        if not names:
            raise TemplateNotFoundError(f"no *.{TEMPLATE_SUFFIX} files in {self.template_dir}")
        self._env = env
        logger.debug("Loaded templates from %s: %s", self.template_dir, ", ".join(names))
        return names

    @property
    def env(self) -> Environment:
        if self._env is None:
            self.load()
        return self._env  # type: ignore[return-value]

    def render_string(self, name: str, data: Any) -> str:
        """Render template ``name`` with ``data`` (a dataclass or mapping)."""
        try:
            template = self.env.get_template(name)
        except TemplateNotFound as exc:
            raise TemplateNotFoundError(f"template not found: {name}") from exc
        except TemplateError as exc:
            raise RenderError(f"{name}: {exc}") from exc
        try:
            return template.render(_context(data))
        except TemplateError as exc:
            raise RenderError(f"{name}: {exc}") from exc

    def render(self, name: str, data: Any, destination: str) -> None:
        """Render ``name`` into ``destination``; nothing is written if rendering fails."""
        text = self.render_string(name, data)
        write_text(destination, text)

    def copy_template(self, name: str, destination: str, mode: Optional[int] = None) -> None:
        """Copy a template file verbatim, without placeholder substitution."""
        source = os.path.join(self.template_dir, name)
        if not os.path.isfile(source):
            raise TemplateNotFoundError(f"template not found: {name}")
        copy_verbatim(source, destination, mode)
