"""Background execution of fetches with callback completion."""

from __future__ import annotations

from concurrent.futures import Executor, Future
from dataclasses import dataclass
from typing import Any, Callable

from core.errors import ImageServiceError


@dataclass(frozen=True)
class FetchOutcome:
    """Completion of a fetch. Results live on the resource, not here."""

    ok: bool
    error: ImageServiceError | None = None


OnComplete = Callable[[FetchOutcome], None]


def run_fetch(operation: Callable[..., None], *args: Any) -> FetchOutcome:
    """Run a fetch and convert service errors into a failed outcome."""
    try:
        operation(*args)
    except ImageServiceError as exc:
        return FetchOutcome(ok=False, error=exc)
    return FetchOutcome(ok=True)


def submit_fetch(
    executor: Executor,
    operation: Callable[..., None],
    *args: Any,
    on_complete: OnComplete | None = None,
) -> "Future[FetchOutcome]":
    """Schedule ``operation(*args)`` on an executor.

    Typical operations are bound ``fetch_data``/``fetch_info`` methods. The
    returned future is the caller's handle; cancelling it before it starts
    skips the fetch and the callback.

    Args:
        executor: Executor the fetch runs on.
        operation: Callable raising ImageServiceError on failure.
        *args: Arguments for the operation, e.g. a SizeVariant.
        on_complete: Called with the FetchOutcome once the fetch finishes.

    Returns:
        Future resolving to the FetchOutcome.
    """

    def task() -> FetchOutcome:
        outcome = run_fetch(operation, *args)
        if on_complete is not None:
            on_complete(outcome)
        return outcome

    return executor.submit(task)
