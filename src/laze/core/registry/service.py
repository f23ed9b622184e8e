from __future__ import annotations

import logging
import threading
from typing import Any, Callable

from ..constraints import Constraint, Predicate
from ..entries import EntrySlot, Materialized, Pending
from ..errors import CircularEvaluation, ConstraintViolation, RegistryError, UndefinedKey
from ..freezing import freeze_value
from ..results import ReadResult
from ..settings import RegistrySettings


logger = logging.getLogger(__name__)


class LazyRegistry:
    """Name-keyed store of lazily evaluated, constrained values.

    Each entry moves through `UNDEFINED -> Pending -> Materialized`. A pending
    entry may be redefined any number of times; a materialized one never changes.

    Locking:
    - `_lock` guards the name -> slot mapping and the constraint list.
    - Each slot has its own lock held across producer call, constraint checks
      and commit, so one name is evaluated by at most one thread at a time.
    - Reading an already materialized slot takes no lock.
    """

    def __init__(self, settings: RegistrySettings | None = None) -> None:
        self._lock = threading.RLock()
        self._entries: dict[str, EntrySlot] = {}
        self._constraints: list[Constraint] = []
        self.settings = settings if settings is not None else RegistrySettings()

    @staticmethod
    def _validate_name(name: str) -> str:
        if not isinstance(name, str):
            raise TypeError(f"name must be a string, got {type(name).__name__}")
        if not name:
            raise ValueError("name cannot be empty")
        return name

    def _require_slot(self, name: str) -> EntrySlot:
        slot = self._entries.get(name)
        if slot is None:
            raise UndefinedKey(name)
        return slot

    def define(self, name: str, producer: Callable[[], Any]) -> None:
        """Bind `name` to `producer` unless `name` is already materialized."""
        key = self._validate_name(name)
        if not callable(producer):
            raise TypeError(f"producer for {key!r} must be callable, got {type(producer).__name__}")

        with self._lock:
            slot = self._entries.get(key)
            if slot is None:
                self._entries[key] = EntrySlot(name=key, state=Pending(producer))
                logger.debug("Defined lazy constant %r", key)
                return

        # Waits for an in-flight evaluation of the same name.
        with slot.lock:
            if slot.evaluated:
                logger.debug("Ignoring redefinition of materialized constant %r", key)
                return
            slot.state = Pending(producer)
            logger.debug("Redefined lazy constant %r", key)

    def defined(self, name: str) -> bool:
        return name in self._entries

    def evaluated(self, name: str) -> bool:
        return self._require_slot(name).evaluated

    def read(self, name: str) -> Any:
        """Return the value of `name`, running its producer on first access.

        Raises:
            UndefinedKey: `name` was never defined.
            ConstraintViolation: a constraint rejected the produced value. The
                entry stays pending and the next read calls the producer again.
            ConstraintResultError: a constraint returned a non-boolean.
            CircularEvaluation: the producer read its own name.
        """
        slot = self._require_slot(name)
        state = slot.state
        if isinstance(state, Materialized):
            return state.value
        return self._materialize(slot)

    def try_read(self, name: str) -> ReadResult:
        """Like `read`, but registry errors about `name` are returned instead of raised.

        Errors raised by a nested read inside the producer (another key) still
        propagate, so `result.error.key == result.key` always holds.
        """
        try:
            return ReadResult(key=name, value=self.read(name))
        except RegistryError as exc:
            if getattr(exc, "key", None) != name:
                raise
            return ReadResult(key=name, error=exc)

    def _materialize(self, slot: EntrySlot) -> Any:
        me = threading.get_ident()
        with slot.lock:
            if slot.evaluating == me:
                raise CircularEvaluation(slot.name)
            state = slot.state
            # Another thread may have finished while we waited for the lock.
            if isinstance(state, Materialized):
                return state.value

            with self._lock:
                constraints = tuple(self._constraints)

            slot.evaluating = me
            try:
                candidate = state.producer()
                for c in constraints:
                    if not c.check(slot.name, candidate, strict=self.settings.strict_predicates):
                        logger.debug("Constraint %r rejected lazy constant %r", c.name, slot.name)
                        raise ConstraintViolation(c.name, slot.name)
                value = freeze_value(candidate, self.settings)
                slot.state = Materialized(value)
            finally:
                slot.evaluating = None

            logger.debug("Materialized lazy constant %r", slot.name)
            return value

    def constraint(self, name: str, predicate: Predicate) -> None:
        """Register a predicate checked against every later materialization."""
        if not callable(predicate):
            raise TypeError(f"predicate for constraint {name!r} must be callable, got {type(predicate).__name__}")
        with self._lock:
            self._constraints.append(Constraint(name=str(name), predicate=predicate))

    def constraints(self) -> tuple[Constraint, ...]:
        with self._lock:
            return tuple(self._constraints)

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._entries)

    def reset(self) -> None:
        with self._lock:
            self._entries.clear()
            self._constraints.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


REGISTRY = LazyRegistry()
