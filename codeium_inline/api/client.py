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

"""Language server client speaking the Connect protocol over HTTP.

Each RPC is a unary Connect call: a JSON POST to
``{base_url}/{service}/{Method}``. Failures, including transport errors,
are raised as ConnectError so callers handle a single error type.
"""

import json
import logging
from typing import Any, Optional, Protocol, runtime_checkable

import httpx

from codeium_inline.api.errors import Code, ConnectError
from codeium_inline.api.models import (
    AcceptCompletionRequest,
    GetCompletionsRequest,
    GetCompletionsResponse,
    WireModel,
)

logger = logging.getLogger(__name__)

SERVICE_NAME = "exa.language_server_pb.LanguageServerService"
CONNECT_PROTOCOL_VERSION = "1"


@runtime_checkable
class LanguageServerAPI(Protocol):
    """The two calls the completion provider needs from a transport.

    ``signal`` is an abort signal exposing an ``aborted`` flag; the
    caller also cancels the awaiting task when it fires.
    """

    async def get_completions(
        self,
        request: GetCompletionsRequest,
        *,
        signal: Optional[Any] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> GetCompletionsResponse:
        ...

    async def accept_completion(
        self,
        request: AcceptCompletionRequest,
        *,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        ...


class LanguageServerClient:
    """httpx-backed implementation of LanguageServerAPI."""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Root URL of the language server API
            timeout: Per-request timeout in seconds (None disables it)
            http_client: Preconfigured httpx client (owned by the caller)
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    async def get_completions(
        self,
        request: GetCompletionsRequest,
        *,
        signal: Optional[Any] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> GetCompletionsResponse:
        """Request completions for a document.

        Args:
            request: Completion request
            signal: Abort signal; an already aborted signal short-circuits
            headers: Extra headers (authorization)

        Returns:
            Decoded completion response

        Raises:
            ConnectError: On any failure, including cancellation
        """
        if signal is not None and getattr(signal, "aborted", False):
            raise ConnectError("request aborted before it was sent", Code.CANCELED)
        payload = await self._unary("GetCompletions", request, headers)
        return GetCompletionsResponse.model_validate(payload)

    async def accept_completion(
        self,
        request: AcceptCompletionRequest,
        *,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        """Acknowledge an accepted completion. The response body is ignored."""
        await self._unary("AcceptCompletion", request, headers)

    def _url(self, method: str) -> str:
        return f"{self.base_url}/{SERVICE_NAME}/{method}"

    async def _unary(
        self,
        method: str,
        message: WireModel,
        headers: Optional[dict[str, str]],
    ) -> dict[str, Any]:
        """Execute one unary Connect call and return the decoded JSON body."""
        request_headers = {
            "Content-Type": "application/json",
            "Connect-Protocol-Version": CONNECT_PROTOCOL_VERSION,
        }
        if headers:
            request_headers.update(headers)

        try:
            response = await self._http.post(
                self._url(method),
                content=json.dumps(message.to_wire()),
                headers=request_headers,
            )
        except httpx.TimeoutException as e:
            raise ConnectError(f"{method} timed out: {e}", Code.DEADLINE_EXCEEDED) from e
        except httpx.HTTPError as e:
            raise ConnectError(f"{method} failed: {e}", Code.UNAVAILABLE) from e

        if response.status_code != 200:
            try:
                body = response.json()
            except ValueError:
                body = None
            error = ConnectError.from_response(response.status_code, body)
            logger.debug(f"{method} returned {response.status_code}: {error!r}")
            raise error

        if not response.content:
            return {}
        try:
            payload = response.json()
        except ValueError as e:
            raise ConnectError(f"{method} returned invalid JSON", Code.INTERNAL) from e
        if not isinstance(payload, dict):
            raise ConnectError(f"{method} returned a non-object body", Code.INTERNAL)
        return payload

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "LanguageServerClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r})"
