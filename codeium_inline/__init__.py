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

"""Codeium inline completions for Python editor integrations.

Package Structure:
    config.py          - CompletionSettings (API key, URL, identity)
    api/               - Wire messages, Connect errors, HTTP client
    completion/        - Offsets, documents, sessions and the provider
    __main__.py        - Console front end (python -m codeium_inline)
"""

from codeium_inline.completion import (
    CancellationToken,
    CodeiumCompletionProvider,
    InlineCompletionItem,
    InlineCompletionList,
    Position,
    Range,
    Status,
    TextDocument,
)
from codeium_inline.config import CompletionSettings

__all__ = [
    "CancellationToken",
    "CodeiumCompletionProvider",
    "CompletionSettings",
    "InlineCompletionItem",
    "InlineCompletionList",
    "Position",
    "Range",
    "Status",
    "TextDocument",
]
