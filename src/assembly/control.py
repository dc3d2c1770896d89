"""Control-file field assembly.

Turns the list-valued descriptor fields into the scalar values a control
template renders, and decides which optional fields appear at all.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from descriptor.models import OPTIONAL_RELATIONS, PackageDescriptor, Person
from errors import MissingFieldError

SEPARATOR = ", "

# Fields whose line is emitted only when the descriptor supplies a value.
OPTIONAL_FIELDS = ("homepage",) + OPTIONAL_RELATIONS


def concat(items: Optional[Iterable[str]], sep: str = SEPARATOR) -> str:
    """Join ``items`` with ``sep``; ``None`` and ``[]`` both give ``""``."""
    if not items:
        return ""
    return sep.join(items)


def inclusion_flags(descriptor: PackageDescriptor) -> Dict[str, bool]:
    """Map each optional field name to whether its line should be rendered."""
    return {name: bool(getattr(descriptor, name)) for name in OPTIONAL_FIELDS}


def missing_fields(descriptor: PackageDescriptor) -> List[str]:
    """Return the names of the required control fields that are not set."""
    missing = [
        name for name in ("name", "description", "section", "priority", "architecture")
        if not getattr(descriptor, name)
    ]
    if not descriptor.maintainer.name:
        missing.append("maintainer.name")
    if not descriptor.maintainer.email:
        missing.append("maintainer.email")
    # Empty dependency lists are legitimate; only an undeclared list is missing.
    if descriptor.build_depends is None:
        missing.append("build_depends")
    if descriptor.depends is None:
        missing.append("depends")
    return missing


def require_fields(descriptor: PackageDescriptor, target: str = "") -> None:
    """Raise ``MissingFieldError`` listing every unset required field."""
    missing = missing_fields(descriptor)
    if missing:
        raise MissingFieldError(missing, target=target)


def format_long_description(text: Optional[str]) -> str:
    """Indent an extended description as control-file continuation lines."""
    if not text:
        return ""
    lines = []
    for line in text.strip("\n").splitlines():
        lines.append(f" {line}" if line.strip() else " .")
    return "\n".join(lines)


@dataclass
class ControlFile:  # pylint: disable=too-many-instance-attributes
    """Everything the control template needs, already flattened to strings."""

    name: str
    section: str
    priority: str
    architecture: str
    standards_version: str
    description: str
    maintainer: Person
    build_depends: str
    depends: str
    homepage: str = ""
    long_description: str = ""
    recommends: str = ""
    suggests: str = ""
    conflicts: str = ""
    provides: str = ""
    replaces: str = ""
    include: Dict[str, bool] = field(default_factory=dict)


def build_control(descriptor: PackageDescriptor, helper_dependency: str,
                  standards_version: str, target: str = "") -> ControlFile:
    """Validate ``descriptor`` and assemble its control record.

    The run-time dependency list gains ``helper_dependency`` in the rendered
    record only; the descriptor itself is left untouched.

    Raises:
        MissingFieldError: A required field is absent.
    """
    require_fields(descriptor, target=target)
    depends = list(descriptor.depends or []) + [helper_dependency]
    return ControlFile(
        name=descriptor.name,
        section=descriptor.section,
        priority=descriptor.priority,
        architecture=descriptor.architecture,
        standards_version=standards_version,
        description=descriptor.description,
        maintainer=descriptor.maintainer,
        build_depends=concat(descriptor.build_depends),
        depends=concat(depends),
        homepage=descriptor.homepage or "",
        long_description=format_long_description(descriptor.long_description),
        include=inclusion_flags(descriptor),
        **{name: concat(getattr(descriptor, name)) for name in OPTIONAL_RELATIONS},
    )
