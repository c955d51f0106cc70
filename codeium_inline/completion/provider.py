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

"""Inline completion provider interface and the Codeium implementation.

The provider is the object an editor integration talks to. It owns
the session identity, the cross-file context documents and the status
reporter, and starts one CompletionSession per request. Sessions are
not serialized: overlapping requests run concurrently, each with its
own cancellation token.
"""

import asyncio
import logging
import uuid
from typing import Optional, Protocol, runtime_checkable

from codeium_inline.api.client import LanguageServerAPI, LanguageServerClient
from codeium_inline.api.models import AcceptCompletionRequest, DocumentInfo, Metadata
from codeium_inline.completion.cancellation import CancellationToken
from codeium_inline.completion.document import Document
from codeium_inline.completion.protocol import InlineCompletionList, Position
from codeium_inline.completion.session import CompletionSession
from codeium_inline.completion.status import (
    MessageCallback,
    Status,
    StatusCallback,
    StatusReporter,
)
from codeium_inline.config import CompletionSettings

logger = logging.getLogger(__name__)


@runtime_checkable
class InlineCompletionProvider(Protocol):
    """Protocol for inline completion providers."""

    async def provide_inline_completions(
        self,
        document: Document,
        position: Position,
        token: Optional[CancellationToken] = None,
    ) -> Optional[InlineCompletionList]:
        """Provide inline (ghost text) completions.

        Args:
            document: The document being edited
            position: Cursor position
            token: Cancellation token for this request

        Returns:
            InlineCompletionList, or None if there is nothing to show
        """
        ...

    def accepted_last_completion(self, completion_id: str) -> Optional[asyncio.Task]:
        """Report that the completion with ``completion_id`` was accepted."""
        ...


class CodeiumCompletionProvider:
    """Inline completion provider backed by the Codeium language server.

    Example:
        provider = CodeiumCompletionProvider.from_settings(
            CompletionSettings.from_env(),
            on_status_change=print,
            on_message_change=print,
        )
        result = await provider.provide_inline_completions(
            TextDocument("def add(a, b):\\n    ", "python"),
            Position(line=1, character=4),
            CancellationToken(),
        )
    """

    def __init__(
        self,
        client: LanguageServerAPI,
        on_status_change: Optional[StatusCallback] = None,
        on_message_change: Optional[MessageCallback] = None,
        settings: Optional[CompletionSettings] = None,
    ):
        """Initialize the provider.

        Args:
            client: Language server transport
            on_status_change: Called when the status changes
            on_message_change: Called when the status message changes
            settings: Provider settings (defaults if not provided)
        """
        self._client = client
        self._settings = settings or CompletionSettings()
        self._session_id = f"{self._settings.ide_name}-editor-{uuid.uuid4()}"
        self._reporter = StatusReporter(on_status_change, on_message_change)
        self._background_tasks: set[asyncio.Task] = set()

        # Other documents to include as context in the prompt
        self.other_documents: list[DocumentInfo] = []

    @classmethod
    def from_settings(
        cls,
        settings: CompletionSettings,
        on_status_change: Optional[StatusCallback] = None,
        on_message_change: Optional[MessageCallback] = None,
    ) -> "CodeiumCompletionProvider":
        """Create a provider with an HTTP client built from ``settings``."""
        client = LanguageServerClient(settings.api_url, timeout=settings.timeout)
        return cls(client, on_status_change, on_message_change, settings)

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def settings(self) -> CompletionSettings:
        return self._settings

    @property
    def status(self) -> Status:
        return self._reporter.status

    @property
    def message(self) -> str:
        return self._reporter.message

    def get_metadata(self) -> Metadata:
        settings = self._settings
        return Metadata(
            ide_name=settings.ide_name,
            ide_version=settings.ide_version or "unknown",
            extension_name=settings.extension_name,
            extension_version=settings.extension_version or "unknown",
            api_key=settings.api_key,
            session_id=self._session_id,
        )

    def get_auth_header(self) -> dict[str, str]:
        return {"Authorization": f"Basic {self._settings.api_key}-{self._session_id}"}

    async def provide_inline_completions(
        self,
        document: Document,
        position: Position,
        token: Optional[CancellationToken] = None,
    ) -> Optional[InlineCompletionList]:
        """Generate inline completions at a cursor position.

        Args:
            document: The document being edited
            position: Cursor position in code units
            token: Cancellation token; a fresh one is used if omitted

        Returns:
            InlineCompletionList (possibly empty), or None when the request
            was cancelled, failed or produced no completions
        """
        session = CompletionSession(
            client=self._client,
            reporter=self._reporter,
            metadata=self.get_metadata(),
            headers=self.get_auth_header(),
            other_documents=self.other_documents,
            multiline_threshold=self._settings.multiline_model_threshold,
        )
        return await session.run(document, position, token or CancellationToken())

    def accepted_last_completion(self, completion_id: str) -> Optional[asyncio.Task]:
        """Record that the last completion shown was accepted by the user.

        The acknowledgment is sent in the background; failures are logged
        and never raised. Must be called from a running event loop.

        Args:
            completion_id: Unique ID of the accepted completion

        Returns:
            The background task, or None if no event loop is running
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(f"No running event loop; dropping acceptance of {completion_id}")
            return None

        task = loop.create_task(self._accept_completion(completion_id))
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)
        return task

    async def _accept_completion(self, completion_id: str) -> None:
        try:
            await self._client.accept_completion(
                AcceptCompletionRequest(
                    metadata=self.get_metadata(),
                    completion_id=completion_id,
                ),
                headers=self.get_auth_header(),
            )
        except Exception as e:
            logger.warning(f"Failed to report accepted completion {completion_id}: {e}")

    async def aclose(self) -> None:
        """Wait for pending acknowledgments and close the client."""
        if self._background_tasks:
            await asyncio.gather(*self._background_tasks, return_exceptions=True)
        close = getattr(self._client, "aclose", None)
        if close is not None:
            await close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(session_id={self._session_id!r})"
