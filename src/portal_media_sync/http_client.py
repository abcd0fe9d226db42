"""Signed HTTP client for the portal management API."""

import json
import logging
from typing import Any, Optional, Union

import httpx

from .exceptions import (
    ForbiddenError,
    NotFoundError,
    RequestError,
    TransportError,
    UnauthorizedError,
    UnhandledResponseError,
)

log = logging.getLogger(__name__)

Body = Union[str, bytes, dict, list]


class SignedHttpClient:
    """
    Issues management API requests carrying a SAS credential.

    The client keeps no state between calls; every request opens its own
    ``httpx.Client``. Certificate verification is configured per instance
    so disabling it never affects unrelated requests.
    """

    def __init__(
        self,
        verify_ssl: bool = True,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self._transport = transport

    @staticmethod
    def build_headers(credential: str, content: Optional[bytes] = None) -> dict[str, str]:
        headers = {
            "If-Match": "*",
            "Content-Type": "application/json",
            "Authorization": credential,
        }
        if content:
            headers["Content-Length"] = str(len(content))
        return headers

    @staticmethod
    def _encode_body(body: Optional[Body]) -> Optional[bytes]:
        if body is None:
            return None
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        if isinstance(body, str):
            return body.encode("utf-8")
        return body

    def send(
        self,
        method: str,
        url: str,
        credential: str,
        body: Optional[Body] = None,
    ) -> Any:
        """
        Send a request and return the parsed response payload.

        Returns:
            The decoded JSON document when the body starts with ``{``,
            otherwise the body as a plain string. Some endpoints answer with
            an unquoted literal (e.g. ``OK``), which is returned as-is.

        Raises:
            NotFoundError: On 404.
            UnauthorizedError: On 401.
            ForbiddenError: On 403.
            UnhandledResponseError: On any other non-success status.
            TransportError: If no response was received.
            RequestError: If the response could not be read or the URL is invalid.
        """
        content = self._encode_body(body) or None
        headers = self.build_headers(credential, content)

        log.debug("%s %s", method, url)
        try:
            with httpx.Client(
                verify=self.verify_ssl,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = client.request(method, url, content=content, headers=headers)
        except httpx.TransportError as e:
            raise TransportError(url, e) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RequestError(f"Request to {url} failed: {e}", cause=e) from e

        return self._interpret(url, response)

    @staticmethod
    def _interpret(url: str, response: httpx.Response) -> Any:
        status = response.status_code
        if status in (200, 201):
            data = response.text
            if not data.startswith("{"):
                return data
            try:
                return json.loads(data)
            except ValueError as e:
                raise RequestError(f"Malformed JSON response from {url}", cause=e) from e
        if status == 404:
            raise NotFoundError(url)
        if status == 401:
            raise UnauthorizedError()
        if status == 403:
            raise ForbiddenError()

        log.debug("Unhandled status %d from %s: %s", status, url, response.text)
        raise UnhandledResponseError(url, status, response.reason_phrase)
