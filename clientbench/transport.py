"""HTTP transport for the target and reporting clusters.

A thin client over ``requests.Session`` covering the handful of endpoints the
stock scenarios and the reporter need. Retries and request timeouts live here
rather than in the reporter.

Usage:
    from clientbench.transport import SearchClient

    with SearchClient("http://localhost:9200", timeout=300, retries=10) as client:
        client.ping()
        client.bulk("metrics-intake-2026-10", [({"index": {}}, {"a": 1})])
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from clientbench.version.clientbench_version import CLIENTBENCH_VERSION

RETRY_STATUSES = (502, 503, 504)


class TransportError(Exception):
    """Raised when a request fails at the network or HTTP level."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class SearchClient:
    """Minimal client for an Elasticsearch-compatible HTTP API.

    Example:
        >>> client = SearchClient("http://localhost:9200")
        >>> client.index("test-bench-get", {"title": "Test"}, id="1")
        >>> client.get("test-bench-get", "1")["_source"]["title"]
        'Test'
    """

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        retries: int = 0,
        backoff_factor: float = 0.0,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            url: Base URL of the cluster, credentials may be embedded.
            timeout: Per-request timeout in seconds (None waits forever).
            retries: Retries for connection errors and 502/503/504 responses.
            backoff_factor: Backoff factor between retries.
            session: Pre-built session, mainly for tests.
        """
        self.url = url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = CLIENTBENCH_VERSION.user_agent()

        if retries:
            adapter = HTTPAdapter(
                max_retries=Retry(
                    total=retries,
                    backoff_factor=backoff_factor,
                    status_forcelist=RETRY_STATUSES,
                    allowed_methods=None,
                    raise_on_status=False,
                )
            )
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    @property
    def logger(self) -> logging.Logger:
        """Get the logger for the transport."""
        from clientbench.utils.logger import Logger

        return Logger.component("transport")

    def __enter__(self) -> SearchClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()

    # -------------------------------------------------------------------------
    # Request plumbing
    # -------------------------------------------------------------------------

    def perform_request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: Any = None,
        headers: dict[str, str] | None = None,
        ignore: Iterable[int] = (),
    ) -> requests.Response:
        """Send a request and return the response.

        Args:
            method: HTTP method.
            path: Path relative to the base URL.
            params: Query string parameters.
            body: dict/list (sent as JSON) or str/bytes (sent as is).
            headers: Extra request headers.
            ignore: Error status codes to return instead of raising.

        Raises:
            TransportError: On network failure or an HTTP error status.
        """
        url = f"{self.url}/{path.lstrip('/')}"
        request_headers = {"Accept": "application/json"}
        if headers:
            request_headers.update(headers)

        data: str | bytes | None = None
        if isinstance(body, dict | list):
            data = json.dumps(body)
            request_headers.setdefault("Content-Type", "application/json")
        elif body is not None:
            data = body
            request_headers.setdefault("Content-Type", "application/json")

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                data=data,
                headers=request_headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            self.logger.debug(f"{method} {url} -> {e!r}")
            raise TransportError(f"{method} {url} failed: {e}") from e

        self.logger.debug(
            f"{method} {url} -> {response.status_code} "
            f"({response.elapsed.total_seconds():.3f}s)"
        )

        if response.status_code >= 400 and response.status_code not in set(ignore):
            raise TransportError(
                f"{method} {url} returned {response.status_code}",
                status_code=response.status_code,
                body=self._decode(response),
            )
        return response

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        """Return the JSON body, the raw text, or None when empty."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def _json(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        result = self._decode(self.perform_request(method, path, **kwargs))
        return result if isinstance(result, dict) else {}

    # -------------------------------------------------------------------------
    # API
    # -------------------------------------------------------------------------

    def ping(self) -> bool:
        """Return True if the cluster answers HEAD / with a 2xx status."""
        try:
            response = self.perform_request("HEAD", "/")
        except TransportError:
            return False
        return 200 <= response.status_code < 300

    def info(self) -> dict[str, Any]:
        """Return basic cluster information."""
        return self._json("GET", "/")

    def get(self, index: str, id: str) -> dict[str, Any]:
        """Fetch a document by id."""
        return self._json("GET", f"/{index}/_doc/{id}")

    def index(
        self, index: str, body: dict[str, Any] | str | bytes, id: str | None = None
    ) -> dict[str, Any]:
        """Index a document, creating an id when none is given."""
        if id is None:
            return self._json("POST", f"/{index}/_doc", body=body)
        return self._json("PUT", f"/{index}/_doc/{id}", body=body)

    def create_index(
        self, index: str, body: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Create an index."""
        return self._json("PUT", f"/{index}", body=body)

    def delete_index(self, index: str, ignore: Iterable[int] = (404,)) -> dict[str, Any]:
        """Delete an index, ignoring a missing one by default."""
        return self._json("DELETE", f"/{index}", ignore=ignore)

    def refresh(self, index: str) -> dict[str, Any]:
        """Refresh an index so recent writes become searchable."""
        return self._json("POST", f"/{index}/_refresh")

    def bulk(
        self,
        index: str,
        operations: Sequence[tuple[dict[str, Any], dict[str, Any]]],
    ) -> Any:
        """Submit (action, document) pairs as one NDJSON bulk request.

        The decoded body is returned as is, so an empty or non-JSON reply
        reaches the caller instead of passing for an empty mapping.
        """
        lines = []
        for action, document in operations:
            lines.append(json.dumps(action))
            lines.append(json.dumps(document))
        payload = "\n".join(lines) + "\n"

        response = self.perform_request(
            "POST",
            f"/{index}/_bulk",
            body=payload.encode("utf-8"),
            headers={"Content-Type": "application/x-ndjson"},
        )
        return self._decode(response)
