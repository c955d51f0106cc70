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

"""Conversion of wire completion items into editor inline completions."""

import logging
from typing import Optional

from codeium_inline.api.models import CompletionItem
from codeium_inline.completion.document import Document
from codeium_inline.completion.protocol import InlineCompletionItem, Range
from codeium_inline.completion.utf import num_utf8_bytes_to_num_code_units

logger = logging.getLogger(__name__)


def create_inline_completion_item(
    completion_item: CompletionItem,
    document: Document,
) -> Optional[InlineCompletionItem]:
    """Convert a completion item from the server into an inline completion.

    Args:
        completion_item: Item with completion text and a UTF-8 byte range
        document: The document the completion was requested for

    Returns:
        Inline completion item, or None if the item has no text, no range,
        or a range whose start is after its end
    """
    completion = completion_item.completion
    if completion is None or completion.text is None or completion_item.range is None:
        return None

    start_offset = completion_item.range.start_offset
    end_offset = completion_item.range.end_offset
    if start_offset > end_offset:
        logger.debug(
            f"Dropping completion {completion.completion_id}: "
            f"inverted range {start_offset}..{end_offset}"
        )
        return None

    text = document.get_text()
    start_position = document.position_at(num_utf8_bytes_to_num_code_units(text, start_offset))
    end_position = document.position_at(num_utf8_bytes_to_num_code_units(text, end_offset))

    return InlineCompletionItem(
        insert_text=completion.text,
        range=Range(start=start_position, end=end_position),
        completion_id=completion.completion_id,
    )
