from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

import numpy as np

from .errors import ConstraintResultError


Predicate = Callable[[str, Any], bool]


@dataclass(frozen=True)
class Constraint:
    """A named predicate run against every candidate value at materialization.

    Names are for diagnostics only and need not be unique.
    """

    name: str
    predicate: Predicate

    def check(self, key: str, value: Any, *, strict: bool = True) -> bool:
        return check_predicate_result(self.name, key, self.predicate(key, value), strict=strict)


def check_predicate_result(constraint: str, key: str, result: object, *, strict: bool = True) -> bool:
    """Return the boolean outcome of a predicate call.

    In strict mode anything other than `bool` / `numpy.bool_` is rejected, so a
    predicate that forgets to return (None) is not mistaken for a failure.
    Arrays with more than one element have no truth value in either mode.
    """
    if isinstance(result, (bool, np.bool_)):
        return bool(result)
    if strict:
        raise ConstraintResultError(constraint, key, result)
    if isinstance(result, np.ndarray) and result.size != 1:
        raise ConstraintResultError(constraint, key, result)
    return bool(result)


def _key_filter(keys: str | Iterable[str] | None) -> frozenset[str] | None:
    if keys is None:
        return None
    if isinstance(keys, str):
        return frozenset((keys,))
    return frozenset(str(k) for k in keys)


def for_keys(keys: str | Iterable[str], check: Callable[[Any], bool]) -> Predicate:
    """Build a predicate applying `check(value)` only to the given keys.

    Every other key passes.
    """
    wanted = _key_filter(keys)

    def predicate(key: str, value: Any) -> bool:
        if key not in wanted:  # type: ignore[operator]
            return True
        return bool(check(value))

    return predicate


def instance_of(*types: type, keys: str | Iterable[str] | None = None) -> Predicate:
    if not types:
        raise ValueError("instance_of requires at least one type")
    wanted = _key_filter(keys)

    def predicate(key: str, value: Any) -> bool:
        if wanted is not None and key not in wanted:
            return True
        return isinstance(value, types)

    return predicate


def finite(keys: str | Iterable[str] | None = None) -> Predicate:
    """Numbers and numeric arrays must not contain NaN or inf.

    Non-numeric values pass untouched.
    """
    wanted = _key_filter(keys)

    def predicate(key: str, value: Any) -> bool:
        if wanted is not None and key not in wanted:
            return True
        if isinstance(value, bool):
            return True
        if isinstance(value, (int, float, np.number)):
            return bool(np.isfinite(value))
        if isinstance(value, np.ndarray):
            if not np.issubdtype(value.dtype, np.number):
                return True
            return bool(np.all(np.isfinite(value)))
        return True

    return predicate
