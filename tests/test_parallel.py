import threading
import time

from gorgon.outcome import Failure, Success
from gorgon.parallel import parallel_map


def test_results_follow_input_order():
    def slow_identity(i):
        # later items finish first
        time.sleep((5 - i) * 0.01)
        return i

    outcomes = parallel_map(range(5), slow_identity)
    assert outcomes == [Success(i) for i in range(5)]


def test_failure_does_not_abort_siblings():
    finished = []

    def work(i):
        if i == 2:
            raise ValueError("item 2 broke")
        finished.append(i)
        return i * 10

    outcomes = parallel_map(range(4), work)
    assert sorted(finished) == [0, 1, 3]
    assert outcomes[0] == Success(0)
    assert outcomes[3] == Success(30)
    assert isinstance(outcomes[2], Failure)
    assert outcomes[2].message == "item 2 broke"
    assert isinstance(outcomes[2].error, ValueError)


def test_none_and_outcome_returns():
    outcomes = parallel_map(
        ["none", "outcome", "value"],
        lambda kind: {"none": None, "outcome": Failure("nope"), "value": "v"}[kind],
    )
    assert outcomes == [Success(), Failure("nope"), Success("v")]


def test_empty_input():
    assert parallel_map([], lambda item: item) == []


def test_items_run_concurrently():
    barrier = threading.Barrier(3, timeout=5)

    def wait(i):
        barrier.wait()
        return i

    assert parallel_map(range(3), wait, max_workers=3) == [Success(0), Success(1), Success(2)]


def test_worker_cap():
    active = []
    peak = []
    lock = threading.Lock()

    def work(i):
        with lock:
            active.append(i)
            peak.append(len(active))
        time.sleep(0.01)
        with lock:
            active.remove(i)
        return i

    outcomes = parallel_map(range(6), work, max_workers=1)
    assert [o.value for o in outcomes] == list(range(6))
    assert max(peak) == 1
