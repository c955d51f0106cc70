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

"""Completion status reporting.

The reporter moves between IDLE, PROCESSING, SUCCESS and ERROR and
forwards every change to two callbacks supplied by the embedder: one
for the status and one for the human readable message. The status
callback always runs before the message callback.
"""

import logging
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Status(str, Enum):
    """Status of the most recent completion request."""

    IDLE = "idle"
    PROCESSING = "processing"
    SUCCESS = "success"
    ERROR = "error"


StatusCallback = Callable[[Status], None]
MessageCallback = Callable[[str], None]


class StatusReporter:
    """Holds the current status and message and notifies the embedder."""

    def __init__(
        self,
        on_status_change: Optional[StatusCallback] = None,
        on_message_change: Optional[MessageCallback] = None,
    ):
        """Initialize the reporter in the IDLE state.

        Args:
            on_status_change: Called with the new Status
            on_message_change: Called with the new message
        """
        self._on_status_change = on_status_change
        self._on_message_change = on_message_change
        self._status = Status.IDLE
        self._message = ""

    @property
    def status(self) -> Status:
        return self._status

    @property
    def message(self) -> str:
        return self._message

    def report(self, status: Status, message: str) -> None:
        """Set status then message, notifying both callbacks."""
        self._status = status
        if self._on_status_change is not None:
            try:
                self._on_status_change(status)
            except Exception:
                logger.exception("Status callback failed")

        self._message = message
        if self._on_message_change is not None:
            try:
                self._on_message_change(message)
            except Exception:
                logger.exception("Message callback failed")

    def processing(self, message: str) -> None:
        self.report(Status.PROCESSING, message)

    def success(self, message: str) -> None:
        self.report(Status.SUCCESS, message)

    def error(self, message: str) -> None:
        self.report(Status.ERROR, message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status={self._status.value!r}, message={self._message!r})"
