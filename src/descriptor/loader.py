"""Reading, writing and synthesizing package descriptor files."""
from __future__ import annotations

import json
import logging
import os
from datetime import date
from typing import Any, Optional

import yaml

from constants import Constants
from errors import DescriptorError
from history.git import GitRunner, run_git
from .models import Copyright, FileCopyright, PackageDescriptor, Person

logger = logging.getLogger(__name__)


def _is_yaml(path: str) -> bool:
    return path.lower().endswith(Constants.YAML_SUFFIXES)


def load_descriptor(path: str) -> PackageDescriptor:
    """Load a descriptor from a JSON (default) or YAML file.

    Raises:
        FileNotFoundError: The file does not exist.
        DescriptorError: The file cannot be decoded or has the wrong shape.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            if _is_yaml(path):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as exc:
            raise DescriptorError(f"could not decode {path}: {exc}") from exc
    logger.debug("Decoded descriptor file %s", path)
    if data is None:
        raise DescriptorError(f"{path} is empty")
    return PackageDescriptor.from_dict(data)


def write_descriptor(path: str, descriptor: PackageDescriptor) -> None:
    """Serialize ``descriptor`` to ``path`` (YAML for .yml/.yaml, JSON otherwise)."""
    payload = descriptor.to_dict()
    with open(path, "w", encoding="utf-8") as f:
        if _is_yaml(path):
            yaml.safe_dump(payload, f, sort_keys=False)
        else:
            json.dump(payload, f, indent="\t")
            f.write("\n")
    logger.debug("Wrote descriptor to %s", path)


def _git_config(run: GitRunner, key: str) -> str:
    try:
        return run(["config", "--global", key]).rstrip("\n")
    except Exception as exc:  # pylint: disable=broad-exception-caught
        # A template is still useful with blank identity fields.
        logger.debug("Could not read git %s: %s", key, exc)
        return ""


def template_descriptor(cwd: Optional[str] = None, run: Optional[GitRunner] = None,
                        today: Optional[date] = None) -> PackageDescriptor:
    """Synthesize a placeholder descriptor for the user to edit.

    The project name is the basename of the working directory and the current
    user (owner and maintainer) comes from the global git configuration.
    """
    cwd = cwd or os.getcwd()
    run = run or run_git
    year = (today or date.today()).year

    name = os.path.basename(os.path.normpath(cwd))
    logger.debug("Found project name: %r", name)
    user = Person(name=_git_config(run, "user.name"), email=_git_config(run, "user.email"))
    logger.debug("Found current user: %r <%r>", user.name, user.email)

    return PackageDescriptor(
        name=name,
        description=Constants.PLACEHOLDER_DESCRIPTION,
        maintainer=user,
        owners=[user],
        build_depends=[Constants.PLACEHOLDER_BUILD_DEPENDS],
        depends=[Constants.PLACEHOLDER_DEPENDS],
        section=Constants.PLACEHOLDER_SECTION,
        priority=Constants.PLACEHOLDER_PRIORITY,
        architecture=Constants.PLACEHOLDER_ARCHITECTURE,
        manpages=[Constants.PLACEHOLDER_MANPAGE],
        copyright=Copyright(
            name=name,
            license=Constants.PLACEHOLDER_LICENSE,
            files=[FileCopyright(glob="*", license=Constants.PLACEHOLDER_FILE_LICENSE,
                                 year=year, owner=user)],
        ),
    )


def create_descriptor_file(path: str, **kwargs: Any) -> PackageDescriptor:
    """Write a template descriptor to ``path`` and return it."""
    descriptor = template_descriptor(**kwargs)
    write_descriptor(path, descriptor)
    return descriptor
