"""Packaging backends.

Callers select a backend by target name and use it only through the
``Frameworker`` contract:
- base.py: the contract (``info`` and ``framework``)
- debian.py: the Debian ``debian/`` directory backend
"""

from typing import Any, Dict, Type

from errors import UnsupportedTargetError
from .base import Frameworker
from .debian import DebianFrameworker

BACKENDS: Dict[str, Type[Frameworker]] = {
    DebianFrameworker.target: DebianFrameworker,
}

SUPPORTED_TARGETS = sorted(BACKENDS)


def get_backend(target: str, **options: Any) -> Frameworker:
    """Instantiate the backend registered for ``target``.

    Raises:
        UnsupportedTargetError: No backend handles ``target``.
    """
    backend_cls = BACKENDS.get(target.lower())
    if backend_cls is None:
        raise UnsupportedTargetError(
            f"unsupported packaging target {target!r}; choose from {', '.join(SUPPORTED_TARGETS)}"
        )
    return backend_cls(**options)


__all__ = [
    "BACKENDS",
    "SUPPORTED_TARGETS",
    "DebianFrameworker",
    "Frameworker",
    "get_backend",
]
