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

"""Connect protocol error codes and the error raised by the API client."""

from enum import Enum
from typing import Any, Optional


class Code(str, Enum):
    """Connect error codes, as they appear in JSON error bodies."""

    CANCELED = "canceled"
    UNKNOWN = "unknown"
    INVALID_ARGUMENT = "invalid_argument"
    DEADLINE_EXCEEDED = "deadline_exceeded"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    PERMISSION_DENIED = "permission_denied"
    RESOURCE_EXHAUSTED = "resource_exhausted"
    FAILED_PRECONDITION = "failed_precondition"
    ABORTED = "aborted"
    OUT_OF_RANGE = "out_of_range"
    UNIMPLEMENTED = "unimplemented"
    INTERNAL = "internal"
    UNAVAILABLE = "unavailable"
    DATA_LOSS = "data_loss"
    UNAUTHENTICATED = "unauthenticated"


# Fallback mapping used when the server returns no Connect error body
HTTP_STATUS_TO_CODE = {
    400: Code.INVALID_ARGUMENT,
    401: Code.UNAUTHENTICATED,
    403: Code.PERMISSION_DENIED,
    404: Code.UNIMPLEMENTED,
    408: Code.DEADLINE_EXCEEDED,
    409: Code.ABORTED,
    412: Code.FAILED_PRECONDITION,
    413: Code.RESOURCE_EXHAUSTED,
    415: Code.INTERNAL,
    429: Code.UNAVAILABLE,
    431: Code.RESOURCE_EXHAUSTED,
    499: Code.CANCELED,
    502: Code.UNAVAILABLE,
    503: Code.UNAVAILABLE,
    504: Code.UNAVAILABLE,
}


class ConnectError(Exception):
    """Error returned by (or on the way to) the language server."""

    def __init__(self, message: str, code: Code = Code.UNKNOWN):
        super().__init__(f"[{code.value}] {message}" if message else f"[{code.value}]")
        self.code = code
        self.raw_message = message

    @property
    def is_canceled(self) -> bool:
        return self.code is Code.CANCELED

    @classmethod
    def from_response(cls, status_code: int, body: Optional[Any]) -> "ConnectError":
        """Build an error from an HTTP status and a decoded JSON error body.

        Args:
            status_code: HTTP status of the failed call
            body: Decoded JSON body, or None if the body was not JSON

        Returns:
            ConnectError with the server's code when present, otherwise
            a code derived from the HTTP status
        """
        code = HTTP_STATUS_TO_CODE.get(status_code, Code.UNKNOWN)
        message = f"HTTP {status_code}"
        if isinstance(body, dict):
            try:
                code = Code(body.get("code", code.value))
            except ValueError:
                code = Code.UNKNOWN
            message = body.get("message") or message
        return cls(message, code)

    def __repr__(self) -> str:
        return f"ConnectError(code={self.code.value!r}, message={self.raw_message!r})"
