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

"""Wire messages exchanged with the language server.

Messages are serialized with the protobuf JSON mapping: camelCase field
names, unset fields omitted. All offsets are measured in UTF-8 bytes.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from codeium_inline.api.language import Language


class WireModel(BaseModel):
    """Base for wire messages: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict using wire field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Metadata(WireModel):
    """Identity of the calling editor and extension."""

    ide_name: str = Field(description="Name of the IDE")
    ide_version: str = Field(default="unknown", description="IDE version")
    extension_name: str = Field(description="Name of the calling extension")
    extension_version: str = Field(default="unknown", description="Extension version")
    api_key: str = Field(default="", description="API key")
    session_id: str = Field(description="Per-provider session identifier")


class DocumentInfo(WireModel):
    """A document sent as completion context."""

    text: str = Field(description="Full document text")
    editor_language: str = Field(description="Editor language id")
    language: Language = Field(default=Language.UNSPECIFIED, description="Language enum")
    cursor_offset: int = Field(default=0, ge=0, description="Cursor offset in UTF-8 bytes")
    line_ending: str = Field(default="\n", description="Line ending marker")
    absolute_path: Optional[str] = Field(default=None, description="Path on disk, if any")


class EditorOptions(WireModel):
    """Formatting options of the editor."""

    tab_size: int = Field(default=4, ge=1, description="Tab width in columns")
    insert_spaces: bool = Field(default=True, description="Indent with spaces")


class MultilineConfig(WireModel):
    """Threshold above which the server may return multi-line completions."""

    threshold: float


class GetCompletionsRequest(WireModel):
    """Request for completions at a cursor offset."""

    metadata: Metadata
    document: DocumentInfo
    editor_options: EditorOptions
    other_documents: list[DocumentInfo] = Field(default_factory=list, max_length=10)
    multiline_config: Optional[MultilineConfig] = None


class Completion(WireModel):
    completion_id: str = ""
    text: Optional[str] = None


class CompletionRange(WireModel):
    """Byte range in the original document replaced by a completion."""

    start_offset: int = 0
    end_offset: int = 0


class CompletionItem(WireModel):
    """One completion returned by the server."""

    completion: Optional[Completion] = None
    range: Optional[CompletionRange] = None


class GetCompletionsResponse(WireModel):
    completion_items: Optional[list[CompletionItem]] = None


class AcceptCompletionRequest(WireModel):
    """Acknowledgment that a shown completion was accepted."""

    metadata: Metadata
    completion_id: str
