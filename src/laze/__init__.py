from __future__ import annotations

from ._version import __version__
from .core.constraints import Constraint, finite, for_keys, instance_of
from .core.entries import Materialized, Pending
from .core.errors import (
    CircularEvaluation,
    ConstraintResultError,
    ConstraintViolation,
    RegistryError,
    UndefinedKey,
)
from .core.registry import REGISTRY, LazyRegistry
from .core.results import ReadResult
from .core.settings import RegistrySettings
from .defaults import constraint, define, defined, evaluated, read, try_read, version

__all__ = [
    "__version__",
    "version",
    "define",
    "defined",
    "evaluated",
    "read",
    "try_read",
    "constraint",
    "LazyRegistry",
    "REGISTRY",
    "RegistrySettings",
    "Constraint",
    "for_keys",
    "instance_of",
    "finite",
    "Pending",
    "Materialized",
    "ReadResult",
    "RegistryError",
    "UndefinedKey",
    "ConstraintViolation",
    "ConstraintResultError",
    "CircularEvaluation",
]
