"""Fork-join execution of independent work items.

``parallel_map`` runs one task per item on a thread pool, waits for all of
them, and returns one Outcome per item in input order. An exception raised by a
task is captured as that item's Failure and never disturbs its siblings.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, TypeVar

from .outcome import Failure, Outcome, Success, failure_from_exception

T = TypeVar("T")


def _to_outcome(future: Future) -> Outcome:
    try:
        result = future.result()
    except Exception as exc:
        return failure_from_exception(exc)
    if isinstance(result, (Success, Failure)):
        return result
    return Success(result)


def parallel_map(
    items: Iterable[T],
    func: Callable[[T], Any],
    max_workers: int | None = None,
) -> list[Outcome]:
    """Apply ``func`` to every item concurrently.

    Args:
        items: Work items; each is passed to ``func`` on its own task.
        func: Work function. A None return becomes ``Success()``, an Outcome is
            passed through, anything else becomes ``Success(value)``.
        max_workers: Optional cap on concurrent threads. None uses the
            thread pool's default sizing.

    Returns:
        One Outcome per item, in the order the items were given.
    """
    items = list(items)
    if not items:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(func, item) for item in items]
    # Leaving the context manager joins every task.
    return [_to_outcome(future) for future in futures]
