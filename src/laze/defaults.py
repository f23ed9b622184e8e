from __future__ import annotations

"""Module-level access to the process-wide default registry.

These wrap `REGISTRY` for code that prefers global access. Tests and
libraries that want isolation should construct their own `LazyRegistry`.
"""

from typing import Any, Callable

from ._version import __version__
from .core.constraints import Predicate
from .core.registry import REGISTRY
from .core.results import ReadResult


def version() -> str:
    return __version__


def define(name: str, producer: Callable[[], Any]) -> None:
    REGISTRY.define(name, producer)


def defined(name: str) -> bool:
    return REGISTRY.defined(name)


def evaluated(name: str) -> bool:
    return REGISTRY.evaluated(name)


def read(name: str) -> Any:
    return REGISTRY.read(name)


def try_read(name: str) -> ReadResult:
    return REGISTRY.try_read(name)


def constraint(name: str, predicate: Predicate) -> None:
    REGISTRY.constraint(name, predicate)
