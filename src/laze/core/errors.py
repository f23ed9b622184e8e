from __future__ import annotations


class RegistryError(Exception):
    """Base class for errors raised by a lazy registry."""


class UndefinedKey(RegistryError, KeyError):
    """Raised when reading or inspecting a name that was never defined."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Undefined lazy constant: {self.key}"


class ConstraintViolation(RegistryError, ValueError):
    """A candidate value was rejected by a registered constraint.

    The entry stays pending, so a later read calls its producer again.
    """

    def __init__(self, constraint: str, key: str) -> None:
        super().__init__(constraint, key)
        self.constraint = constraint
        self.key = key

    def __str__(self) -> str:
        return f"Constraint '{self.constraint}' failed for lazy constant: {self.key}"


class ConstraintResultError(RegistryError, TypeError):
    def __init__(self, constraint: str, key: str, result: object) -> None:
        super().__init__(constraint, key, result)
        self.constraint = constraint
        self.key = key
        self.result = result

    def __str__(self) -> str:
        return (
            f"Constraint '{self.constraint}' returned {type(self.result).__name__} "
            f"for lazy constant: {self.key} (expected bool)"
        )


class CircularEvaluation(RegistryError, RuntimeError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Lazy constant {self.key!r} was read while its producer was running"
