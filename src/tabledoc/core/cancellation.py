"""Cooperative cancellation checks."""

import asyncio

from .exceptions import OperationCancelledError


def raise_if_cancelled(cancel: asyncio.Event | None, operation: str) -> None:
    """Abort ``operation`` if the caller has set its cancellation event.

    Raises:
        OperationCancelledError: If ``cancel`` is set.
    """
    if cancel is not None and cancel.is_set():
        raise OperationCancelledError(f"{operation} cancelled")
