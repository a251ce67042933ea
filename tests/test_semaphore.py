import threading

import pytest

from fearless.synchro.semaphore import Semaphore


def _start_waiter(sem):
    done = threading.Event()

    def waiter():
        sem.wait()
        done.set()

    thread = threading.Thread(target=waiter, daemon=True)
    thread.start()
    return thread, done


def test_wait_blocks_when_permits_run_out():
    sem = Semaphore(2)
    sem.wait()
    sem.wait()
    thread, done = _start_waiter(sem)
    assert not done.wait(0.1)
    sem.signal()
    assert done.wait(2.0)
    thread.join(2.0)
    assert not thread.is_alive()


def test_zero_capacity_blocks_until_signal():
    sem = Semaphore(0)
    thread, done = _start_waiter(sem)
    assert not done.wait(0.1)
    sem.signal()
    assert done.wait(2.0)


def test_context_manager_returns_permit():
    sem = Semaphore(1)
    with sem as entered:
        assert entered is sem
    thread, done = _start_waiter(sem)
    assert done.wait(2.0)
    thread.join(2.0)


def test_exclusive_counting():
    sem = Semaphore(1)
    state = {"count": 0, "active": 0, "max_active": 0}
    state_lock = threading.Lock()

    def work():
        for _ in range(500):
            with sem:
                with state_lock:
                    state["active"] += 1
                    state["max_active"] = max(state["max_active"], state["active"])
                state["count"] += 1
                with state_lock:
                    state["active"] -= 1

    threads = [threading.Thread(target=work) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert state["count"] == 4 * 500
    assert state["max_active"] == 1
    thread, done = _start_waiter(sem)
    assert done.wait(2.0)
    thread.join(2.0)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Semaphore(-1)