"""Per-item outcomes and their aggregation.

Every unit of work in a parallel build phase produces an ``Outcome``: either a
``Success`` (optionally carrying a value) or a ``Failure`` with a message. A
phase folds its outcomes left to right with ``collect_outcomes``:

- success + success: the new value, if any, is appended to the collected list.
- success + failure: the failure replaces the accumulator.
- failure + success: the failure is kept.
- failure + failure: the messages are joined with ", ".

Failures are therefore sticky and additive, so one aggregate failure reports
every sibling that went wrong, in input order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce
from typing import Any, Union

from .errors import AggregateError

MESSAGE_SEPARATOR = ", "


@dataclass(frozen=True)
class Success:
    """A unit of work that completed.

    Attributes:
        value: Result of the work, or None when it produced nothing.
    """

    value: Any = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """A unit of work that failed.

    Attributes:
        message: Human-readable description of what went wrong.
        error: The exception behind the failure, when there was one.
    """

    message: str
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[Success, Failure]


def failure_from_exception(exc: BaseException) -> Failure:
    """Wrap an exception as a Failure, preferring a GorgonError's own message."""
    message = getattr(exc, "message", None) or str(exc) or type(exc).__name__
    return Failure(message, exc)


def merge_outcomes(acc: Outcome, outcome: Outcome) -> Outcome:
    """Merge one outcome into the accumulated result.

    Args:
        acc: Accumulated outcome; a Success here always holds a list.
        outcome: Outcome of the next item.

    Returns:
        The new accumulated outcome.
    """
    if isinstance(acc, Failure):
        if isinstance(outcome, Failure):
            message = f"{acc.message}{MESSAGE_SEPARATOR}{outcome.message}"
            return Failure(message, AggregateError(message))
        return acc
    if isinstance(outcome, Failure):
        return outcome
    if outcome.value is None:
        return acc
    return Success([*acc.value, outcome.value])


def collect_outcomes(outcomes: Iterable[Outcome]) -> Outcome:
    """Fold outcomes into one overall result.

    Args:
        outcomes: Per-item outcomes in input order.

    Returns:
        Success holding the list of produced values (empty when no item produced
        one), or the aggregate Failure.
    """
    return reduce(merge_outcomes, outcomes, Success([]))
