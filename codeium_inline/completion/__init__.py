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

"""Inline completion API for editor integration.

Example usage:
    from codeium_inline.completion import (
        CancellationToken,
        CodeiumCompletionProvider,
        Position,
        TextDocument,
    )
    from codeium_inline.config import CompletionSettings

    provider = CodeiumCompletionProvider.from_settings(
        CompletionSettings.from_env(),
        on_status_change=lambda status: print(status.value),
        on_message_change=print,
    )

    document = TextDocument("def hello():\\n    ", language_id="python")
    token = CancellationToken()
    result = await provider.provide_inline_completions(
        document, Position(line=1, character=4), token
    )
    if result is not None:
        for item in result.items:
            print(item.range, item.insert_text)

        # Once the user accepts a suggestion
        provider.accepted_last_completion(result.items[0].completion_id)
"""

from codeium_inline.completion.cancellation import AbortSignal, CancellationToken
from codeium_inline.completion.document import Document, TextDocument, detect_language_id
from codeium_inline.completion.mapper import create_inline_completion_item
from codeium_inline.completion.protocol import (
    ACCEPT_COMPLETION_COMMAND,
    FormattingOptions,
    InlineCompletionItem,
    InlineCompletionList,
    Position,
    Range,
)
from codeium_inline.completion.provider import (
    CodeiumCompletionProvider,
    InlineCompletionProvider,
)
from codeium_inline.completion.session import (
    MAX_OTHER_DOCUMENTS,
    CompletionSession,
    document_info,
)
from codeium_inline.completion.status import Status, StatusReporter
from codeium_inline.completion.utf import (
    num_code_units_to_num_utf8_bytes,
    num_utf8_bytes_to_num_code_units,
)

__all__ = [
    # Protocol types
    "ACCEPT_COMPLETION_COMMAND",
    "FormattingOptions",
    "InlineCompletionItem",
    "InlineCompletionList",
    "Position",
    "Range",
    # Documents
    "Document",
    "TextDocument",
    "detect_language_id",
    # Cancellation
    "AbortSignal",
    "CancellationToken",
    # Status
    "Status",
    "StatusReporter",
    # Offsets
    "num_code_units_to_num_utf8_bytes",
    "num_utf8_bytes_to_num_code_units",
    # Request handling
    "CompletionSession",
    "MAX_OTHER_DOCUMENTS",
    "create_inline_completion_item",
    "document_info",
    # Providers
    "CodeiumCompletionProvider",
    "InlineCompletionProvider",
]
