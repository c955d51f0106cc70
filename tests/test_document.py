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

"""Tests for TextDocument and editor position types."""

from pathlib import Path

import pytest

from codeium_inline.completion.document import Document, TextDocument, detect_language_id
from codeium_inline.completion.protocol import FormattingOptions, Position, Range

EMOJI = "\U0001F600"


class TestPositionAndRange:
    """Tests for Position and Range invariants."""

    def test_positions_are_ordered(self):
        """Test document order comparison."""
        assert Position(0, 5) < Position(1, 0)
        assert Position(2, 1) < Position(2, 3)

    def test_negative_position_rejected(self):
        """Test that negative coordinates raise."""
        with pytest.raises(ValueError):
            Position(-1, 0)

    def test_inverted_range_rejected(self):
        """Test that a range ending before it starts raises."""
        with pytest.raises(ValueError):
            Range(Position(1, 0), Position(0, 4))

    def test_empty_range(self):
        """Test an empty range."""
        assert Range(Position(3, 2), Position(3, 2)).is_empty


class TestTextDocument:
    """Tests for offset and position conversion."""

    def test_implements_document_protocol(self):
        """Test that TextDocument satisfies the Document protocol."""
        assert isinstance(TextDocument("x"), Document)

    def test_defaults(self):
        """Test default language and formatting options."""
        document = TextDocument("x")
        assert document.language_id == "plaintext"
        assert document.formatting_options == FormattingOptions(tab_size=4, insert_spaces=True)

    def test_offset_at(self):
        """Test flat offsets of positions."""
        document = TextDocument("ab\ncd")
        assert document.offset_at(Position(0, 0)) == 0
        assert document.offset_at(Position(0, 2)) == 2
        assert document.offset_at(Position(1, 1)) == 4

    def test_position_at(self):
        """Test positions of flat offsets."""
        document = TextDocument("ab\ncd")
        assert document.position_at(2) == Position(0, 2)
        assert document.position_at(3) == Position(1, 0)
        assert document.position_at(5) == Position(1, 2)

    def test_code_units_for_astral_characters(self):
        """Test that characters above U+FFFF count as two code units."""
        document = TextDocument(EMOJI + "x\ny")
        assert document.length == 5
        assert document.offset_at(Position(0, 3)) == 3
        assert document.offset_at(Position(1, 0)) == 4
        assert document.position_at(4) == Position(1, 0)

    def test_crlf_line_endings(self):
        """Test that a carriage return belongs to the line ending."""
        document = TextDocument("ab\r\ncd")
        assert document.length == 6
        assert document.offset_at(Position(0, 10)) == 2
        assert document.offset_at(Position(1, 0)) == 4
        assert document.position_at(3) == Position(0, 2)

    def test_clamps_out_of_range(self):
        """Test clamping of positions and offsets outside the document."""
        document = TextDocument("ab\ncd")
        assert document.offset_at(Position(0, 99)) == 2
        assert document.offset_at(Position(7, 0)) == 5
        assert document.position_at(-3) == Position(0, 0)
        assert document.position_at(100) == Position(1, 2)

    def test_empty_document(self):
        """Test an empty document."""
        document = TextDocument("")
        assert document.line_count == 1
        assert document.length == 0
        assert document.position_at(0) == Position(0, 0)

    def test_trailing_newline(self):
        """Test that a trailing newline starts an empty last line."""
        document = TextDocument("a\n")
        assert document.line_count == 2
        assert document.position_at(2) == Position(1, 0)

    def test_round_trip(self):
        """Test offset_at(position_at(offset)) for every offset."""
        document = TextDocument("é" + EMOJI + "\n\tx\r\ny")
        for offset in range(document.length + 1):
            position = document.position_at(offset)
            if offset == 7:
                # Inside the CRLF; maps back to the end of the line content
                assert document.offset_at(position) == 6
            else:
                assert document.offset_at(position) == offset

    def test_from_file(self, tmp_path):
        """Test loading a document from disk."""
        path = tmp_path / "sample.py"
        path.write_text("import os\n", encoding="utf-8")

        document = TextDocument.from_file(path)

        assert document.language_id == "python"
        assert document.get_text() == "import os\n"
        assert document.path == path


class TestDetectLanguageId:
    """Tests for language detection."""

    def test_by_extension(self):
        """Test detection from file extensions."""
        assert detect_language_id(Path("main.py")) == "python"
        assert detect_language_id(Path("App.tsx")) == "typescriptreact"
        assert detect_language_id(Path("lib.rs")) == "rust"

    def test_by_shebang(self):
        """Test detection from a shebang line."""
        assert detect_language_id(Path("tool"), "#!/usr/bin/env python3\n") == "python"
        assert detect_language_id(Path("run"), "#!/bin/bash\n") == "shellscript"

    def test_unknown(self):
        """Test fallback for unknown files."""
        assert detect_language_id(Path("notes.unknown"), "hello") == "plaintext"
