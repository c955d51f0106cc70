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

"""Language server wire layer: messages, errors and the HTTP client."""

from codeium_inline.api.client import LanguageServerAPI, LanguageServerClient
from codeium_inline.api.errors import Code, ConnectError
from codeium_inline.api.language import Language, language_id_to_enum
from codeium_inline.api.models import (
    AcceptCompletionRequest,
    Completion,
    CompletionItem,
    CompletionRange,
    DocumentInfo,
    EditorOptions,
    GetCompletionsRequest,
    GetCompletionsResponse,
    Metadata,
    MultilineConfig,
)

__all__ = [
    # Client
    "LanguageServerAPI",
    "LanguageServerClient",
    # Errors
    "Code",
    "ConnectError",
    # Languages
    "Language",
    "language_id_to_enum",
    # Messages
    "AcceptCompletionRequest",
    "Completion",
    "CompletionItem",
    "CompletionRange",
    "DocumentInfo",
    "EditorOptions",
    "GetCompletionsRequest",
    "GetCompletionsResponse",
    "Metadata",
    "MultilineConfig",
]
