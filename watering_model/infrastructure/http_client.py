"""JSON-over-HTTP transport built on requests."""

import logging
from typing import Any, Dict, Optional

import requests

from ..domain.errors import TransportError

logger = logging.getLogger(__name__)


class JsonHttpClient:
    """Send a request and return the decoded JSON body."""

    def __init__(
        self,
        base_url: str = "",
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize client.

        Args:
            base_url: Prefix for relative endpoints
            headers: Headers sent with every request
            timeout: Per-request timeout in seconds
            session: Session to reuse (a new one is created when omitted)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        if headers:
            self.session.headers.update(headers)

    def url_for(self, endpoint: str) -> str:
        if endpoint.startswith(("http://", "https://")) or not self.base_url:
            return endpoint
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def request(
        self,
        method: str,
        endpoint: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make a request.

        Args:
            method: HTTP method ('GET', 'PUT', ...)
            endpoint: Path relative to base_url, or an absolute URL
            payload: JSON body

        Returns:
            Decoded JSON, or an empty dict for bodiless responses

        Raises:
            TransportError: on connection failures, timeouts, non-2xx
                statuses and undecodable bodies
        """
        url = self.url_for(endpoint)
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.exceptions.Timeout as err:
            raise TransportError(f"Request timed out: {method} {url}") from err
        except requests.exceptions.RequestException as err:
            raise TransportError(f"Request failed: {method} {url}: {err}") from err

        if not 200 <= response.status_code < 300:
            raise TransportError(
                f"Request failed: {method} {url}: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )

        if response.status_code == 204 or not response.content:
            return {}

        try:
            return response.json()
        except ValueError as err:
            raise TransportError(f"Invalid JSON from {method} {url}") from err

    def get(self, endpoint: str) -> Any:
        return self.request("GET", endpoint)

    def put(self, endpoint: str, payload: Dict[str, Any]) -> Any:
        return self.request("PUT", endpoint, payload)
