"""HTTP transport used for image bytes and metadata requests."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

import requests

from core.errors import TransportError

DEFAULT_TIMEOUT = 20.0


class ResponseFormat(str, Enum):
    """Shape the caller expects back from a request."""

    DATA = "data"
    JSON = "json"


class HttpTransport:
    """Thin wrapper over a requests session that maps failures to TransportError."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = "",
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout
        if user_agent:
            self.session.headers["User-Agent"] = user_agent

    def request(
        self,
        method: str,
        url: str,
        headers: Dict[str, str] | None = None,
        expected_format: ResponseFormat = ResponseFormat.DATA,
        params: Dict[str, Any] | None = None,
    ) -> Any:
        """Issue a request.

        Args:
            method: HTTP method.
            url: Absolute URL.
            headers: Extra request headers.
            expected_format: DATA for raw bytes, JSON for a decoded object.
            params: Query parameters.

        Returns:
            Response bytes, or the decoded JSON object.

        Raises:
            TransportError: On connectivity failure, non-2xx status, or an
                undecodable JSON body.
        """
        try:
            resp = self.session.request(method, url, headers=headers, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise TransportError(TransportError.HTTP_STATUS, f"{method} {url} failed: {exc}", status) from exc
        except requests.RequestException as exc:
            raise TransportError(TransportError.NETWORK, f"{method} {url} failed: {exc}") from exc

        if expected_format is ResponseFormat.JSON:
            try:
                return resp.json()
            except ValueError as exc:
                raise TransportError(
                    TransportError.DECODE, f"{method} {url} returned a non-JSON body", resp.status_code
                ) from exc
        return resp.content

    def get(self, url: str, **kwargs: Any) -> Any:
        return self.request("GET", url, **kwargs)
