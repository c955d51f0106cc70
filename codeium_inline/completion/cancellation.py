# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Cancellation primitives.

CancellationToken is the handle the editor holds for a completion
request. AbortSignal is owned by a single completion session and
cancels the asyncio task running the network call when it fires.
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from codeium_inline.api.errors import Code, ConnectError

logger = logging.getLogger(__name__)

T = TypeVar("T")

CancellationCallback = Callable[[], None]


def _invoke(callback: CancellationCallback) -> None:
    try:
        callback()
    except Exception:
        logger.exception(f"Cancellation callback {callback!r} failed")


class CancellationToken:
    """Signals that the result of a request is no longer wanted.

    Each registered callback runs at most once. A callback registered
    after cancellation runs immediately.
    """

    def __init__(self) -> None:
        self._cancelled = False
        self._callbacks: list[CancellationCallback] = []

    @property
    def is_cancellation_requested(self) -> bool:
        return self._cancelled

    def on_cancellation_requested(self, callback: CancellationCallback) -> Callable[[], None]:
        """Register a callback to run on cancellation.

        Args:
            callback: Function called with no arguments

        Returns:
            A function that unregisters the callback
        """
        if self._cancelled:
            _invoke(callback)
            return lambda: None

        self._callbacks.append(callback)

        def dispose() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return dispose

    def cancel(self) -> None:
        """Request cancellation. Calling this more than once has no effect."""
        if self._cancelled:
            return
        self._cancelled = True
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            _invoke(callback)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(cancelled={self._cancelled})"


class AbortSignal:
    """Abort signal for the network calls of one session.

    Awaitables run through guard() execute as tasks; abort() cancels
    them and the guard raises ConnectError with Code.CANCELED in place
    of the bare CancelledError.
    """

    def __init__(self) -> None:
        self._aborted = False
        self._tasks: set[asyncio.Future] = set()

    @property
    def aborted(self) -> bool:
        return self._aborted

    def abort(self) -> None:
        if self._aborted:
            return
        self._aborted = True
        for task in list(self._tasks):
            task.cancel()

    async def guard(self, awaitable: Awaitable[T]) -> T:
        """Await ``awaitable`` so that abort() cancels it.

        Raises:
            ConnectError: With Code.CANCELED if the signal was aborted
            asyncio.CancelledError: If the calling task itself was cancelled
        """
        if self._aborted:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise ConnectError("operation was aborted", Code.CANCELED)

        task = asyncio.ensure_future(awaitable)
        self._tasks.add(task)
        try:
            return await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if self._aborted and not (current is not None and current.cancelling()):
                raise ConnectError("operation was aborted", Code.CANCELED) from None
            raise
        finally:
            self._tasks.discard(task)
