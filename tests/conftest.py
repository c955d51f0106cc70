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

"""Shared fixtures for completion tests."""

from typing import Callable, Optional
from unittest.mock import AsyncMock

import pytest

from codeium_inline.api.models import (
    Completion,
    CompletionItem,
    CompletionRange,
    GetCompletionsResponse,
    Metadata,
)
from codeium_inline.completion.status import Status, StatusReporter


class StatusRecorder:
    """Records status and message callbacks in call order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    def on_status_change(self, status: Status) -> None:
        self.events.append(("status", status))

    def on_message_change(self, message: str) -> None:
        self.events.append(("message", message))

    @property
    def statuses(self) -> list[Status]:
        return [value for kind, value in self.events if kind == "status"]

    @property
    def messages(self) -> list[str]:
        return [value for kind, value in self.events if kind == "message"]


@pytest.fixture
def recorder() -> StatusRecorder:
    return StatusRecorder()


@pytest.fixture
def reporter(recorder: StatusRecorder) -> StatusReporter:
    return StatusReporter(recorder.on_status_change, recorder.on_message_change)


@pytest.fixture
def metadata() -> Metadata:
    return Metadata(
        ide_name="python",
        extension_name="codeium-inline",
        api_key="test-key",
        session_id="python-editor-test",
    )


@pytest.fixture
def make_item() -> Callable[..., CompletionItem]:
    """Factory for wire completion items (offsets in UTF-8 bytes)."""

    def _make(
        text: Optional[str] = "pass",
        start: Optional[int] = 0,
        end: Optional[int] = 0,
        completion_id: str = "completion-1",
    ) -> CompletionItem:
        completion = None if text is None else Completion(completion_id=completion_id, text=text)
        range_ = None if start is None else CompletionRange(start_offset=start, end_offset=end)
        return CompletionItem(completion=completion, range=range_)

    return _make


@pytest.fixture
def make_response() -> Callable[..., GetCompletionsResponse]:
    def _make(*items: CompletionItem) -> GetCompletionsResponse:
        return GetCompletionsResponse(completion_items=list(items))

    return _make


@pytest.fixture
def client() -> AsyncMock:
    """Language server client double returning no completions by default."""
    mock = AsyncMock()
    mock.get_completions.return_value = GetCompletionsResponse()
    mock.accept_completion.return_value = None
    return mock
