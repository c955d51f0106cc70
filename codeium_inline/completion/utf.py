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

"""Offset translation between UTF-16 code units and UTF-8 bytes.

Editors count positions in UTF-16 code units while the language server
counts offsets in UTF-8 bytes. Both functions scan the text from the
start and stop as soon as the requested offset is reached, so the cost
is proportional to the offset, not to the document.

Boundary policy:
- A character above U+FFFF is 2 code units and 4 bytes. A high
  surrogate immediately followed by a low surrogate is treated the same.
- A lone surrogate is 1 code unit and 3 bytes.
- An offset that falls inside a code point rounds down to the start of
  that code point; a surrogate pair is never split.
- Offsets at or below 0 translate to 0; offsets past the end translate
  to the size of the whole text.
"""

from typing import Iterator


def num_utf8_bytes_for_code_point(code_point: int) -> int:
    """Number of UTF-8 bytes used to encode a code point."""
    if code_point < 0x80:
        return 1
    if code_point < 0x800:
        return 2
    if code_point < 0x10000:
        return 3
    return 4


def _is_high_surrogate(char: str) -> bool:
    return 0xD800 <= ord(char) <= 0xDBFF


def _is_low_surrogate(char: str) -> bool:
    return 0xDC00 <= ord(char) <= 0xDFFF


def iter_code_point_sizes(text: str) -> Iterator[tuple[int, int]]:
    """Yield (code_units, utf8_bytes) for each code point of ``text``."""
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if (
            _is_high_surrogate(char)
            and index + 1 < length
            and _is_low_surrogate(text[index + 1])
        ):
            yield 2, 4
            index += 2
            continue
        code_point = ord(char)
        if code_point > 0xFFFF:
            yield 2, 4
        else:
            yield 1, num_utf8_bytes_for_code_point(code_point)
        index += 1


def num_code_units_to_num_utf8_bytes(text: str, num_code_units: int) -> int:
    """Convert a code unit offset into a UTF-8 byte offset.

    Args:
        text: Document text
        num_code_units: Offset in UTF-16 code units

    Returns:
        Offset in UTF-8 bytes
    """
    if num_code_units <= 0:
        return 0

    code_units = 0
    utf8_bytes = 0
    for unit_count, byte_count in iter_code_point_sizes(text):
        if code_units + unit_count > num_code_units:
            break
        code_units += unit_count
        utf8_bytes += byte_count
        if code_units == num_code_units:
            break
    return utf8_bytes


def num_utf8_bytes_to_num_code_units(text: str, num_utf8_bytes: int) -> int:
    """Convert a UTF-8 byte offset into a code unit offset.

    Args:
        text: Document text
        num_utf8_bytes: Offset in UTF-8 bytes

    Returns:
        Offset in UTF-16 code units
    """
    if num_utf8_bytes <= 0:
        return 0

    code_units = 0
    utf8_bytes = 0
    for unit_count, byte_count in iter_code_point_sizes(text):
        if utf8_bytes + byte_count > num_utf8_bytes:
            break
        code_units += unit_count
        utf8_bytes += byte_count
        if utf8_bytes == num_utf8_bytes:
            break
    return code_units


def num_code_units(text: str) -> int:
    """Length of ``text`` in UTF-16 code units."""
    return sum(unit_count for unit_count, _ in iter_code_point_sizes(text))
