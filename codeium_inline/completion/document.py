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

"""Read-only document view used by the completion provider.

The provider only needs the text, the language id, the formatting
options and conversions between positions and flat offsets, all in
UTF-16 code units. Editors expose their own model through the Document
protocol; TextDocument implements it over a plain string.
"""

import bisect
import logging
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from codeium_inline.completion.protocol import FormattingOptions, Position
from codeium_inline.completion.utf import num_code_units

logger = logging.getLogger(__name__)


@runtime_checkable
class Document(Protocol):
    """Protocol for editor documents."""

    @property
    def language_id(self) -> str:
        """Editor language identifier (e.g. 'python')."""
        ...

    @property
    def formatting_options(self) -> FormattingOptions:
        """Tab size and indentation style of the document."""
        ...

    def get_text(self) -> str:
        """Return the full text."""
        ...

    def offset_at(self, position: Position) -> int:
        """Convert a position to a code unit offset."""
        ...

    def position_at(self, offset: int) -> Position:
        """Convert a code unit offset to a position."""
        ...


class TextDocument:
    """Document backed by an immutable string.

    Lines are separated by ``\\n``; a ``\\r`` before it belongs to the
    line ending, not to the line content. Out-of-range positions and
    offsets are clamped to the document.
    """

    def __init__(
        self,
        text: str,
        language_id: str = "plaintext",
        formatting_options: Optional[FormattingOptions] = None,
        path: Optional[Path] = None,
    ):
        """Initialize the document.

        Args:
            text: Full document text
            language_id: Editor language identifier
            formatting_options: Indentation settings (defaults: 4, spaces)
            path: File the text came from, if any
        """
        self._text = text
        self._language_id = language_id
        self._formatting_options = formatting_options or FormattingOptions()
        self.path = path

        self._line_starts: list[int] = []
        self._line_lengths: list[int] = []
        offset = 0
        for line in text.split("\n"):
            content = line[:-1] if line.endswith("\r") else line
            self._line_starts.append(offset)
            self._line_lengths.append(num_code_units(content))
            offset += num_code_units(line) + 1
        self._length = offset - 1

    @classmethod
    def from_file(
        cls,
        path: Path,
        language_id: Optional[str] = None,
        formatting_options: Optional[FormattingOptions] = None,
    ) -> "TextDocument":
        """Load a document from disk, detecting the language if not given."""
        text = path.read_text(encoding="utf-8")
        if language_id is None:
            language_id = detect_language_id(path, text)
        return cls(text, language_id, formatting_options, path=path)

    @property
    def language_id(self) -> str:
        return self._language_id

    @property
    def formatting_options(self) -> FormattingOptions:
        return self._formatting_options

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    @property
    def length(self) -> int:
        """Length of the text in code units."""
        return self._length

    def get_text(self) -> str:
        return self._text

    def offset_at(self, position: Position) -> int:
        if position.line >= self.line_count:
            return self._length
        start = self._line_starts[position.line]
        return start + min(position.character, self._line_lengths[position.line])

    def position_at(self, offset: int) -> Position:
        offset = max(0, min(offset, self._length))
        line = bisect.bisect_right(self._line_starts, offset) - 1
        character = min(offset - self._line_starts[line], self._line_lengths[line])
        return Position(line=line, character=character)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(language_id={self._language_id!r}, "
            f"lines={self.line_count}, length={self._length})"
        )


# File extensions to editor language ids
EXTENSION_LANGUAGE_IDS = {
    ".py": "python",
    ".pyi": "python",
    ".js": "javascript",
    ".jsx": "javascriptreact",
    ".ts": "typescript",
    ".tsx": "typescriptreact",
    ".rs": "rust",
    ".go": "go",
    ".java": "java",
    ".c": "c",
    ".cpp": "cpp",
    ".h": "c",
    ".hpp": "cpp",
    ".cs": "csharp",
    ".rb": "ruby",
    ".php": "php",
    ".swift": "swift",
    ".kt": "kotlin",
    ".scala": "scala",
    ".r": "r",
    ".sql": "sql",
    ".sh": "shellscript",
    ".bash": "shellscript",
    ".zsh": "shellscript",
    ".md": "markdown",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
    ".xml": "xml",
    ".html": "html",
    ".css": "css",
    ".scss": "scss",
    ".less": "less",
    ".vue": "vue",
    ".svelte": "svelte",
    ".lua": "lua",
    ".dart": "dart",
    ".proto": "proto",
}


def detect_language_id(path: Path, content: str = "") -> str:
    """Detect the editor language id from a file path and content.

    Args:
        path: Path to the file
        content: File content, used for shebang detection

    Returns:
        Language identifier ('plaintext' if unknown)
    """
    ext = path.suffix.lower()
    if ext in EXTENSION_LANGUAGE_IDS:
        return EXTENSION_LANGUAGE_IDS[ext]
    if path.name == "Dockerfile":
        return "dockerfile"
    if path.name == "Makefile":
        return "makefile"

    # Try shebang
    if content.startswith("#!"):
        first_line = content.split("\n")[0]
        if "python" in first_line:
            return "python"
        if "node" in first_line:
            return "javascript"
        if "ruby" in first_line:
            return "ruby"
        if "bash" in first_line or "sh" in first_line:
            return "shellscript"

    logger.debug(f"Could not detect language for {path}")
    return "plaintext"
