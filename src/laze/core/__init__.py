from __future__ import annotations

from .constraints import Constraint, check_predicate_result, finite, for_keys, instance_of
from .entries import EntrySlot, EntryState, Materialized, Pending
from .errors import (
    CircularEvaluation,
    ConstraintResultError,
    ConstraintViolation,
    RegistryError,
    UndefinedKey,
)
from .registry import REGISTRY, LazyRegistry
from .results import ReadResult
from .settings import RegistrySettings

__all__ = [
    "LazyRegistry",
    "REGISTRY",
    "RegistrySettings",
    "Constraint",
    "check_predicate_result",
    "for_keys",
    "instance_of",
    "finite",
    "Pending",
    "Materialized",
    "EntryState",
    "EntrySlot",
    "ReadResult",
    "RegistryError",
    "UndefinedKey",
    "ConstraintViolation",
    "ConstraintResultError",
    "CircularEvaluation",
]
