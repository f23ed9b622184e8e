from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Union


Producer = Callable[[], Any]


@dataclass(frozen=True)
class Pending:
    """A defined entry whose producer has not run successfully yet."""

    producer: Producer


@dataclass(frozen=True)
class Materialized:
    """An evaluated entry. Absorbing: nothing replaces it."""

    value: Any


EntryState = Union[Pending, Materialized]


@dataclass(eq=False)
class EntrySlot:
    """Mutable holder for one name.

    `state` is only swapped while `lock` is held. Readers may look at
    `state` without the lock once it is `Materialized`.
    """

    name: str
    state: EntryState
    lock: threading.RLock = field(default_factory=threading.RLock)
    # Thread id currently running the producer, if any.
    evaluating: int | None = None

    @property
    def evaluated(self) -> bool:
        return isinstance(self.state, Materialized)
