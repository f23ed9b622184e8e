from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import RegistryError


@dataclass(frozen=True)
class ReadResult:
    """Outcome of `LazyRegistry.try_read`: a value or a registry error, never both."""

    key: str
    value: Any = None
    error: RegistryError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default: Any) -> Any:
        if self.error is not None:
            return default
        return self.value
