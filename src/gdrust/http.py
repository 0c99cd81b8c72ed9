# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""HTTP access for the tool catalog, release metadata and archive downloads."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

import requests

from . import __version__
from .config import Settings

LOGGER = logging.getLogger(__name__)


class _HttpResponse(Protocol):
    """Minimal subset of ``requests.Response`` used by gdrust."""

    status_code: int
    content: bytes
    text: str

    @property
    def ok(self) -> bool:
        """Return ``True`` when the status code signals success."""
        ...

    def json(self) -> Any:
        """Return the decoded JSON body."""
        ...


class _Session(Protocol):
    """Callable surface of ``requests.Session`` used by :class:`HttpClient`."""

    def get(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> _HttpResponse:
        """Issue a GET request for ``url``."""
        ...


class HttpStatusError(RuntimeError):
    """Raised when a request completes with a non-success HTTP status."""

    def __init__(self, url: str, status_code: int) -> None:
        """Initialise the error with the failing URL and status.

        Args:
            url: Requested URL.
            status_code: HTTP status returned by the server.
        """

        super().__init__(f"GET {url} returned HTTP {status_code}")
        self.url = url
        self.status_code = status_code


class HttpClient:
    """Small GET-only client wrapping a :class:`requests.Session`."""

    def __init__(self, *, session: _Session | None = None, timeout: float | None = None) -> None:
        """Initialise the client.

        Args:
            session: Session used for requests; a new ``requests.Session`` when omitted.
            timeout: Optional timeout in seconds; ``None`` waits indefinitely.
        """

        self._session: _Session = session if session is not None else requests.Session()
        self._timeout = timeout
        self._headers = {"User-Agent": f"gdrust/{__version__}"}

    @classmethod
    def from_settings(cls, settings: Settings) -> HttpClient:
        """Return a client configured from ``settings``.

        Args:
            settings: Runtime settings providing the request timeout.

        Returns:
            HttpClient: Configured client instance.
        """

        return cls(timeout=settings.request_timeout)

    def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> _HttpResponse:
        """Return the response for ``url`` regardless of its status.

        Args:
            url: Absolute URL to fetch.
            headers: Extra request headers.

        Returns:
            _HttpResponse: Response object.
        """

        merged = {**self._headers, **dict(headers or {})}
        LOGGER.debug("GET url=%s", url)
        return self._session.get(url, headers=merged, timeout=self._timeout)

    def _checked(self, url: str, headers: Mapping[str, str] | None) -> _HttpResponse:
        response = self.get(url, headers=headers)
        if not response.ok:
            raise HttpStatusError(url, response.status_code)
        return response

    def get_json(self, url: str, *, headers: Mapping[str, str] | None = None) -> Any:
        """Return the decoded JSON body for ``url``.

        Raises:
            HttpStatusError: If the server answers with a non-success status.
        """

        return self._checked(url, headers).json()

    def get_text(self, url: str, *, headers: Mapping[str, str] | None = None) -> str:
        """Return the body of ``url`` as text.

        Raises:
            HttpStatusError: If the server answers with a non-success status.
        """

        return self._checked(url, headers).text

    def get_bytes(self, url: str, *, headers: Mapping[str, str] | None = None) -> bytes:
        """Return the full body of ``url`` held in memory.

        Raises:
            HttpStatusError: If the server answers with a non-success status.
        """

        return self._checked(url, headers).content


__all__ = ["HttpClient", "HttpStatusError"]
