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

"""A single completion request, from payload building to mapped result.

Outcomes:
- cancelled: no result, status left untouched
- transport or service failure: no result, ERROR
- no items: no result, SUCCESS with a "no completions" message
- items: the mappable items (possibly none), SUCCESS with their count
"""

import logging
from typing import Optional, Sequence

from codeium_inline.api.client import LanguageServerAPI
from codeium_inline.api.errors import ConnectError
from codeium_inline.api.language import Language, language_id_to_enum
from codeium_inline.api.models import (
    DocumentInfo,
    EditorOptions,
    GetCompletionsRequest,
    GetCompletionsResponse,
    Metadata,
    MultilineConfig,
)
from codeium_inline.completion.cancellation import AbortSignal, CancellationToken
from codeium_inline.completion.document import Document
from codeium_inline.completion.mapper import create_inline_completion_item
from codeium_inline.completion.protocol import InlineCompletionList, Position
from codeium_inline.completion.status import StatusReporter
from codeium_inline.completion.utf import num_code_units_to_num_utf8_bytes

logger = logging.getLogger(__name__)

MAX_OTHER_DOCUMENTS = 10

GENERATING_MESSAGE = "Generating completions..."
ERROR_MESSAGE = "Something went wrong; please try again."
NO_COMPLETIONS_MESSAGE = "No completions were generated"


def generated_message(count: int) -> str:
    if count == 1:
        return "Generated 1 completion"
    return f"Generated {count} completions"


def document_info(
    document: Document,
    position: Optional[Position] = None,
    absolute_path: Optional[str] = None,
) -> DocumentInfo:
    """Build the wire description of a document.

    Args:
        document: Source document
        position: Cursor position; the cursor offset is 0 when omitted
        absolute_path: Path of the document on disk, if known

    Returns:
        DocumentInfo with the cursor offset in UTF-8 bytes
    """
    text = document.get_text()
    cursor_offset = 0
    if position is not None:
        cursor_offset = num_code_units_to_num_utf8_bytes(text, document.offset_at(position))

    language = language_id_to_enum(document.language_id)
    if language is Language.UNSPECIFIED:
        logger.warning(f"Unknown language: {document.language_id}")

    return DocumentInfo(
        text=text,
        editor_language=document.language_id,
        language=language,
        cursor_offset=cursor_offset,
        line_ending="\n",
        absolute_path=absolute_path,
    )


class CompletionSession:
    """Drives one completion request to a result or to cancellation."""

    def __init__(
        self,
        client: LanguageServerAPI,
        reporter: StatusReporter,
        metadata: Metadata,
        headers: dict[str, str],
        other_documents: Sequence[DocumentInfo] = (),
        multiline_threshold: Optional[float] = None,
    ):
        """Initialize the session.

        Args:
            client: Language server transport
            reporter: Status reporter shared with other sessions
            metadata: Request metadata (identity and API key)
            headers: Authorization headers for the call
            other_documents: Cross-file context; only the first 10 are sent
            multiline_threshold: Optional multi-line model threshold
        """
        self._client = client
        self._reporter = reporter
        self._metadata = metadata
        self._headers = headers
        self._other_documents = other_documents
        self._multiline_threshold = multiline_threshold
        self.signal = AbortSignal()

    def build_request(self, document: Document, position: Position) -> GetCompletionsRequest:
        """Build the completion request for a cursor position."""
        options = document.formatting_options

        other_documents = list(self._other_documents)
        if len(other_documents) > MAX_OTHER_DOCUMENTS:
            logger.warning(
                f"Too many other documents: {len(other_documents)} (max {MAX_OTHER_DOCUMENTS})"
            )
            other_documents = other_documents[:MAX_OTHER_DOCUMENTS]

        return GetCompletionsRequest(
            metadata=self._metadata,
            document=document_info(document, position),
            editor_options=EditorOptions(
                tab_size=options.tab_size,
                insert_spaces=options.insert_spaces,
            ),
            other_documents=other_documents,
            multiline_config=(
                MultilineConfig(threshold=self._multiline_threshold)
                if self._multiline_threshold
                else None
            ),
        )

    async def run(
        self,
        document: Document,
        position: Position,
        token: CancellationToken,
    ) -> Optional[InlineCompletionList]:
        """Request completions and map them for the editor.

        Args:
            document: Snapshot of the document
            position: Cursor position
            token: Cancellation token of the request

        Returns:
            InlineCompletionList on success, None otherwise
        """
        # Hook the token up before the first await.
        dispose = token.on_cancellation_requested(self.signal.abort)
        try:
            return await self._run(document, position)
        finally:
            dispose()

    async def _run(
        self, document: Document, position: Position
    ) -> Optional[InlineCompletionList]:
        self._reporter.processing(GENERATING_MESSAGE)

        try:
            request = self.build_request(document, position)
        except Exception as e:
            logger.error(f"Failed to build completion request: {e}")
            self._reporter.error(ERROR_MESSAGE)
            return None

        try:
            response: GetCompletionsResponse = await self.signal.guard(
                self._client.get_completions(
                    request,
                    signal=self.signal,
                    headers=self._headers,
                )
            )
        except ConnectError as e:
            if e.is_canceled:
                logger.debug("Completion request cancelled")
                return None
            logger.warning(f"Completion request failed: {e}")
            self._reporter.error(ERROR_MESSAGE)
            return None
        except Exception as e:
            logger.warning(f"Completion request failed: {e}")
            self._reporter.error(ERROR_MESSAGE)
            return None

        if not response.completion_items:
            self._reporter.success(NO_COMPLETIONS_MESSAGE)
            return None

        try:
            items = [
                item
                for item in (
                    create_inline_completion_item(completion_item, document)
                    for completion_item in response.completion_items
                )
                if item is not None
            ]
        except Exception as e:
            logger.error(f"Failed to map completion items: {e}")
            self._reporter.error(ERROR_MESSAGE)
            return None

        dropped = len(response.completion_items) - len(items)
        if dropped:
            logger.debug(f"Dropped {dropped} unmappable completion items")

        self._reporter.success(generated_message(len(items)))
        return InlineCompletionList(items=items)
