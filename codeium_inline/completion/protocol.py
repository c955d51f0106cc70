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

"""Editor-facing inline completion types.

Positions follow the LSP convention: 0-based lines and 0-based
characters counted in UTF-16 code units. Wire types (byte offsets)
live in codeium_inline.api.models.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

ACCEPT_COMPLETION_COMMAND = "codeium.acceptCompletion"


@dataclass(frozen=True, order=True)
class Position:
    """A position in a document, in code units."""

    line: int
    character: int

    def __post_init__(self) -> None:
        if self.line < 0 or self.character < 0:
            raise ValueError(f"Position must be non-negative: {self.line}:{self.character}")


@dataclass(frozen=True)
class Range:
    """A range between two positions, start never after end."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Range start {self.start} is after end {self.end}")

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True)
class FormattingOptions:
    """Indentation settings of the editor model."""

    tab_size: int = 4
    insert_spaces: bool = True


@dataclass
class InlineCompletionItem:
    """An inline completion (ghost text) ready for the editor.

    The command is executed by the editor when the user accepts the
    suggestion; its first argument is the completion id used to report
    acceptance.
    """

    insert_text: str  # The text to insert
    range: Range  # Range to replace
    completion_id: str  # Acceptance token
    command: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.command:
            self.command = {
                "id": ACCEPT_COMPLETION_COMMAND,
                "title": "Accept Completion",
                "arguments": [self.completion_id, self.insert_text],
            }

    @property
    def text(self) -> str:
        """Alias of insert_text for editors that read ``text``."""
        return self.insert_text


@dataclass
class InlineCompletionList:
    """A collection of inline completion items."""

    items: list[InlineCompletionItem] = field(default_factory=list)

    def __iter__(self):
        return iter(self.items)

    def first(self) -> Optional[InlineCompletionItem]:
        return self.items[0] if self.items else None
