"""Debian packaging backend: writes a ``debian/`` directory for dpkg-buildpackage."""
from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from assembly.control import ControlFile, build_control
from common.logging_utils import Timer, extra_context, is_debug_enabled
from constants import Constants, PackagingTargets
from descriptor.models import Copyright, PackageDescriptor, Person
from history.git import GitHistory
from rendering.renderer import (
    DEFAULT_TEMPLATE_ROOT,
    TemplateRenderer,
    copy_verbatim,
    write_lines,
    write_text,
)
from .base import Frameworker

logger = logging.getLogger(__name__)


@dataclass
class DebianChangelog:
    """Values rendered into ``debian/changelog``."""

    name: str
    version: str
    date: str
    maintainer: Person
    distribution: str = Constants.DEBIAN_DISTRIBUTION
    urgency: str = Constants.DEBIAN_URGENCY
    changes: List[str] = field(default_factory=list)


class DebianFrameworker(Frameworker):
    """Creates ``debian/`` with control, changelog, copyright, compat, rules and lists."""

    target = PackagingTargets.DEBIAN.value

    def __init__(self, template_dir: Optional[str] = None,
                 output_dir: str = Constants.DEBIAN_OUTPUT_DIR,
                 history: Optional[GitHistory] = None,
                 renderer: Optional[TemplateRenderer] = None):
        """Initialize the backend.

        Args:
            template_dir: Root template directory; templates are read from its
                ``debian/`` subdirectory. Defaults to the bundled templates.
            output_dir: Directory to create; must not exist yet.
            history: Version/changelog source. Defaults to git in the current directory.
            renderer: Template renderer; built from ``template_dir`` when omitted.
        """
        root = template_dir or DEFAULT_TEMPLATE_ROOT
        self.template_dir = os.path.join(root, self.target)
        self.output_dir = output_dir
        self.history = history or GitHistory()
        self.renderer = renderer or TemplateRenderer(self.template_dir)

    def info(self) -> str:
        return Constants.DEBIAN_INFO

    def _path(self, name: str) -> str:
        return os.path.join(self.output_dir, name)

    def _step(self, name: str, action: Callable[[], None]) -> None:
        logger.debug("Attempting to create %s", self._path(name))
        with Timer() as t:
            action()
        if is_debug_enabled(logger):
            logger.debug(
                "Created packaging file",
                extra=extra_context(event="file_written", component="debian", action=name,
                                    target=self._path(name), duration_ms=t.duration_ms()),
            )

    def framework(self, descriptor: PackageDescriptor) -> None:
        """Write the Debian scaffold for ``descriptor``, stopping at the first failure."""
        # Validation happens before anything touches the filesystem.
        control = build_control(
            descriptor,
            helper_dependency=Constants.DEBIAN_HELPER_DEPENDENCY,
            standards_version=Constants.DEBIAN_STANDARDS_VERSION,
            target=self.target,
        )

        self.renderer.load()
        logger.debug("Attempting to create %s/", self.output_dir)
        os.mkdir(self.output_dir)

        name = descriptor.name
        self._step("changelog", lambda: self.changelog(name, descriptor.maintainer))
        self._step("control", lambda: self.control(control))
        self._step("compat", self.compat)
        self._step("copyright", lambda: self.copyright(descriptor))
        self._step("rules", self.rules)
        self._step("docs", lambda: self.docs(descriptor.docs))
        self._step(f"{name}.manpages", lambda: self.manpages(name, descriptor.manpages))
        if descriptor.init_script:
            self._step(f"{name}.init", lambda: self.initscript(name, descriptor.init_script))
        else:
            logger.debug("Skipped creating %s", self._path(f"{name}.init"))
        logger.info("Wrote Debian packaging files to %s", self.output_dir)

    def changelog(self, name: str, maintainer: Person) -> None:
        """Render ``changelog`` from the version control history."""
        history = self.history.extract()
        changelog = DebianChangelog(
            name=name,
            version=history.version,
            date=history.date,
            maintainer=maintainer,
            changes=history.changes,
        )
        self.renderer.render("changelog.template", changelog, self._path("changelog"))

    def control(self, control: ControlFile) -> None:
        """Render ``control`` from the assembled field record."""
        self.renderer.render("control.template", control, self._path("control"))

    def compat(self) -> None:
        """Write the debhelper compatibility level."""
        write_text(self._path("compat"), f"{Constants.DEBIAN_COMPAT_VERSION}\n")

    def copyright(self, descriptor: PackageDescriptor) -> None:
        """Render ``copyright``, carrying the project homepage into the record."""
        record = descriptor.copyright or Copyright(name=descriptor.name)
        record = dataclasses.replace(record, homepage=descriptor.homepage or record.homepage)
        self.renderer.render("copyright.template", record, self._path("copyright"))

    def rules(self) -> None:
        """Copy the ``rules`` makefile verbatim and mark it executable."""
        # rules is a makefile; it must not pass through placeholder substitution.
        self.renderer.copy_template("rules", self._path("rules"), mode=Constants.DEBIAN_RULES_MODE)

    def docs(self, documents: List[str]) -> None:
        """List the documentation files to install, one per line."""
        write_lines(self._path("docs"), documents)

    def manpages(self, name: str, manpages: List[str]) -> None:
        """List the manual pages to install as ``<name>.manpages``."""
        write_lines(self._path(f"{name}.manpages"), manpages)

    def initscript(self, name: str, init_script: str) -> None:
        """Copy the init script verbatim to ``<name>.init``."""
        copy_verbatim(init_script, self._path(f"{name}.init"))
