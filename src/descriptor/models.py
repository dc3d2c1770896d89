"""Data models for the package descriptor."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Optional

from errors import DescriptorError

logger = logging.getLogger(__name__)

# Optional relationship lists: None means the field was omitted, [] means "none".
OPTIONAL_RELATIONS = ("recommends", "suggests", "conflicts", "provides", "replaces")


def _expect_str(data: Dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DescriptorError(f"{where}{key}: expected a string, got {type(value).__name__}")
    return value


def _expect_optional_str(data: Dict[str, Any], key: str, where: str) -> Optional[str]:
    if data.get(key) is None:
        return None
    return _expect_str(data, key, where)


def _expect_str_list(data: Dict[str, Any], key: str, where: str) -> Optional[List[str]]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise DescriptorError(f"{where}{key}: expected a list of strings")
    return list(value)


def _expect_mapping(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise DescriptorError(f"{where}: expected a mapping, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Person:
    """A (display name, contact address) identity."""

    name: str = ""
    email: str = ""

    def is_complete(self) -> bool:
        return bool(self.name) and bool(self.email)

    @classmethod
    def from_dict(cls, data: Any, where: str = "person") -> "Person":
        data = _expect_mapping(data, where)
        prefix = f"{where}."
        return cls(name=_expect_str(data, "name", prefix), email=_expect_str(data, "email", prefix))


@dataclass(frozen=True)
class FileCopyright:
    """Copyright terms for the files matching ``glob``."""

    glob: str
    license: str
    year: int
    owner: Person = field(default_factory=Person)

    @classmethod
    def from_dict(cls, data: Any, where: str = "file") -> "FileCopyright":
        data = _expect_mapping(data, where)
        prefix = f"{where}."
        year = data.get("year", 0)
        if isinstance(year, bool) or not isinstance(year, int):
            raise DescriptorError(f"{prefix}year: expected an integer")
        return cls(
            glob=_expect_str(data, "glob", prefix),
            license=_expect_str(data, "license", prefix),
            year=year,
            owner=Person.from_dict(data.get("owner") or {}, f"{prefix}owner"),
        )


@dataclass(frozen=True)
class Copyright:
    """Project-wide licensing record with per-glob file entries."""

    name: str
    license: str = ""
    homepage: Optional[str] = None
    files: List[FileCopyright] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, where: str = "copyright") -> "Copyright":
        data = _expect_mapping(data, where)
        prefix = f"{where}."
        raw_files = data.get("files") or []
        if not isinstance(raw_files, list):
            raise DescriptorError(f"{prefix}files: expected a list")
        return cls(
            name=_expect_str(data, "name", prefix),
            license=_expect_str(data, "license", prefix),
            homepage=_expect_optional_str(data, "homepage", prefix),
            files=[FileCopyright.from_dict(f, f"{prefix}files[{i}]") for i, f in enumerate(raw_files)],
        )


@dataclass(frozen=True)
class PackageDescriptor:  # pylint: disable=too-many-instance-attributes
    """Project metadata consumed by a packaging backend.

    ``build_depends`` and ``depends`` are required lists: an empty list is a
    legitimate value, ``None`` means the document never declared them. The
    optional relationship lists keep the same distinction but both states
    render nothing.
    """

    name: str = ""
    description: str = ""
    maintainer: Person = field(default_factory=Person)
    build_depends: Optional[List[str]] = None
    depends: Optional[List[str]] = None
    owners: List[Person] = field(default_factory=list)
    long_description: Optional[str] = None
    homepage: Optional[str] = None
    section: str = ""
    priority: str = ""
    architecture: str = ""
    recommends: Optional[List[str]] = None
    suggests: Optional[List[str]] = None
    conflicts: Optional[List[str]] = None
    provides: Optional[List[str]] = None
    replaces: Optional[List[str]] = None
    copyright: Optional[Copyright] = None
    manpages: List[str] = field(default_factory=list)
    docs: List[str] = field(default_factory=list)
    init_script: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "PackageDescriptor":
        """Build a descriptor from a decoded JSON/YAML document.

        Raises:
            DescriptorError: If a value has the wrong type.
        """
        data = _expect_mapping(data, "descriptor")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.debug("Ignoring unknown descriptor keys: %s", ", ".join(unknown))

        raw_owners = data.get("owners") or []
        if not isinstance(raw_owners, list):
            raise DescriptorError("owners: expected a list")
        copyright_data = data.get("copyright")

        return cls(
            name=_expect_str(data, "name", ""),
            description=_expect_str(data, "description", ""),
            maintainer=Person.from_dict(data.get("maintainer") or {}, "maintainer"),
            build_depends=_expect_str_list(data, "build_depends", ""),
            depends=_expect_str_list(data, "depends", ""),
            owners=[Person.from_dict(o, f"owners[{i}]") for i, o in enumerate(raw_owners)],
            long_description=_expect_optional_str(data, "long_description", ""),
            homepage=_expect_optional_str(data, "homepage", ""),
            section=_expect_str(data, "section", ""),
            priority=_expect_str(data, "priority", ""),
            architecture=_expect_str(data, "architecture", ""),
            copyright=Copyright.from_dict(copyright_data) if copyright_data is not None else None,
            manpages=_expect_str_list(data, "manpages", "") or [],
            docs=_expect_str_list(data, "docs", "") or [],
            init_script=_expect_optional_str(data, "init_script", ""),
            **{key: _expect_str_list(data, key, "") for key in OPTIONAL_RELATIONS},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON/YAML-ready mapping, omitting unset optional values."""
        return {k: v for k, v in asdict(self).items() if v is not None}
