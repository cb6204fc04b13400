"""Shared HTTP transport for the directory REST adapter.

This module provides a thin wrapper around ``requests.Session`` so the adapter
shares timeout policy and API-key header construction. Each call makes exactly
one attempt; failures are raised to the caller as typed errors.

Dependencies:
    - ``requests`` for network I/O.
    - ``aidex.adapters.api_errors`` for typed transport failures.

Call context:
    - Constructed by ``aidex.adapters.directory_rest.DirectoryRestAdapter``.
    - View-models and use cases never touch it; they go through
      ``DirectoryPort``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from aidex.adapters.api_errors import ApiError, ApiTimeoutError


@dataclass
class HttpConfig:
    """Timeout configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Default timeout in seconds for JSON API calls.
    """
    request_timeout_s: int = 10


class ApiSession:
    """Requests wrapper with directory API-key headers.

    The class is transport-only. Callers decide how to map non-2xx responses
    into typed errors.
    """

    def __init__(self, api_key: Optional[str], cfg: HttpConfig) -> None:
        """Create a session.

        Args:
            api_key: Anonymous API key sent as ``apikey`` and bearer token.
            cfg: Shared timeout settings.
        """
        self.session = requests.Session()
        self.api_key = api_key
        self.cfg = cfg

    def _headers(self, accept: str = "application/json") -> Dict[str, str]:
        headers = {"Accept": accept}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        accept: str = "application/json",
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """Send a single GET request.

        Args:
            url: Absolute endpoint URL.
            params: Optional query parameter mapping.
            accept: ``Accept`` header value.
            timeout: Optional timeout override in seconds.

        Returns:
            ``requests.Response`` for any status code.

        Raises:
            ApiTimeoutError: On timeout or connection failure.
            ApiError: For any other ``requests`` failure.
        """
        context = f"GET {url}"
        try:
            return self.session.get(
                url,
                params=params,
                headers=self._headers(accept=accept),
                timeout=timeout or self.cfg.request_timeout_s,
            )
        except (req_exc.Timeout, req_exc.ConnectionError) as exc:
            raise ApiTimeoutError(f"Timeout contacting {url}", context=context) from exc
        except req_exc.RequestException as exc:
            raise ApiError(str(exc), context=context) from exc


__all__ = ["ApiSession", "HttpConfig"]
