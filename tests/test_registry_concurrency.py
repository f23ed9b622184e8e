from __future__ import annotations

import threading
import time

import pytest

from laze.core.errors import ConstraintViolation
from laze.core.registry import LazyRegistry


def test_concurrent_first_reads_call_producer_once() -> None:
    reg = LazyRegistry()
    calls: list[int] = []
    calls_lock = threading.Lock()

    def slow() -> object:
        with calls_lock:
            calls.append(1)
        time.sleep(0.05)
        return object()

    reg.define("SLOW", slow)

    barrier = threading.Barrier(8)
    results: list[object] = []
    results_lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        value = reg.read("SLOW")
        with results_lock:
            results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5.0)

    assert len(calls) == 1
    assert len(results) == 8
    assert all(r is results[0] for r in results)


def test_define_waits_for_in_flight_evaluation() -> None:
    reg = LazyRegistry()
    started = threading.Event()
    release = threading.Event()

    def blocking() -> str:
        started.set()
        release.wait(timeout=5.0)
        return "first"

    reg.define("NAME", blocking)

    reader = threading.Thread(target=reg.read, args=("NAME",))
    reader.start()
    assert started.wait(timeout=5.0)

    writer = threading.Thread(target=reg.define, args=("NAME", lambda: "second"))
    writer.start()
    time.sleep(0.05)
    # Redefinition cannot slip in while the producer is running.
    assert writer.is_alive()

    release.set()
    reader.join(timeout=5.0)
    writer.join(timeout=5.0)

    assert reg.read("NAME") == "first"


def test_independent_names_evaluate_in_parallel() -> None:
    reg = LazyRegistry()
    a_started = threading.Event()
    b_done = threading.Event()

    def a() -> str:
        a_started.set()
        # Would deadlock if evaluating A blocked B.
        assert b_done.wait(timeout=5.0)
        return "a"

    reg.define("A", a)
    reg.define("B", lambda: "b")

    reader = threading.Thread(target=reg.read, args=("A",))
    reader.start()
    assert a_started.wait(timeout=5.0)

    assert reg.read("B") == "b"
    b_done.set()
    reader.join(timeout=5.0)

    assert reg.read("A") == "a"


def test_define_replaces_producer_after_failed_evaluation() -> None:
    reg = LazyRegistry()
    started = threading.Event()
    release = threading.Event()
    errors: list[BaseException] = []

    def blocking() -> str:
        started.set()
        release.wait(timeout=5.0)
        raise OSError("not ready")

    def reader() -> None:
        try:
            reg.read("NAME")
        except OSError as exc:
            errors.append(exc)

    reg.define("NAME", blocking)

    t_reader = threading.Thread(target=reader)
    t_reader.start()
    assert started.wait(timeout=5.0)

    writer = threading.Thread(target=reg.define, args=("NAME", lambda: "second"))
    writer.start()
    time.sleep(0.05)
    assert writer.is_alive()

    release.set()
    t_reader.join(timeout=5.0)
    writer.join(timeout=5.0)

    assert len(errors) == 1
    assert not reg.evaluated("NAME")
    assert reg.read("NAME") == "second"


def test_constraint_registered_mid_evaluation_applies_next_time() -> None:
    reg = LazyRegistry()
    started = threading.Event()
    release = threading.Event()
    results: list[object] = []

    def blocking() -> dict[str, int]:
        started.set()
        release.wait(timeout=5.0)
        return {"v": 1}

    reg.define("A", blocking)
    reg.define("B", lambda: "b")

    reader = threading.Thread(target=lambda: results.append(reg.read("A")))
    reader.start()
    assert started.wait(timeout=5.0)

    # Registered after A's evaluation started: A's snapshot does not include it.
    reg.constraint("reject", lambda k, v: False)
    release.set()
    reader.join(timeout=5.0)

    assert results == [{"v": 1}]
    assert reg.evaluated("A")
    with pytest.raises(ConstraintViolation):
        reg.read("B")


def test_materialized_read_does_not_take_slot_lock() -> None:
    reg = LazyRegistry()
    reg.define("FAST", lambda: 1)
    assert reg.read("FAST") == 1

    slot = reg._entries["FAST"]
    holding = threading.Event()
    done = threading.Event()

    def holder() -> None:
        with slot.lock:
            holding.set()
            done.wait(timeout=5.0)

    t_holder = threading.Thread(target=holder)
    t_holder.start()
    assert holding.wait(timeout=5.0)

    results: list[int] = []
    t_reader = threading.Thread(target=lambda: results.append(reg.read("FAST")))
    t_reader.start()
    t_reader.join(timeout=1.0)
    try:
        assert not t_reader.is_alive()
        assert results == [1]
    finally:
        done.set()
        t_holder.join(timeout=5.0)
        t_reader.join(timeout=5.0)
