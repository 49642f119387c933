"""Shared HTTP client plumbing."""

from typing import Any, Dict, Optional, Type
from urllib.parse import urljoin

import requests
from loguru import logger

from .. import __version__
from .exceptions import APIError, DecodeError, FetchError


class APIClient:
    """Thin wrapper around a requests session for a single REST service."""

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        verify_ssl: bool = True,
    ):
        """Initialize API client.

        Args:
            base_url: Service root URL, API prefix included
            token: Access token, sent as ``Authorization: token <value>``
            verify_ssl: Whether to validate TLS certificates
        """
        self.base_url = base_url.rstrip('/')
        self.token = token or ''
        self.session = requests.Session()
        self.session.verify = verify_ssl
        self.logger = logger.bind(component=self.__class__.__name__)

        if self.token:
            self.session.headers.update({'Authorization': f'token {self.token}'})

        self.session.headers.update({'User-Agent': f'github2gogs/{__version__}'})

    def _build_url(self, endpoint: str) -> str:
        """Build full API URL from endpoint.

        Args:
            endpoint: API endpoint path

        Returns:
            Full API URL
        """
        return urljoin(self.base_url + '/', endpoint.lstrip('/'))

    @staticmethod
    def _status_text(response: requests.Response) -> str:
        """Render a response status the way HTTP status lines do, e.g. ``404 Not Found``."""
        reason = response.reason or ''
        return f'{response.status_code} {reason}'.strip()

    @staticmethod
    def _error_body(response: requests.Response) -> Any:
        """Body of a failed response, decoded when it is JSON."""
        try:
            return response.json()
        except ValueError:
            return response.text or None

    def _request(
        self,
        method: str,
        endpoint: str,
        expected_status: int = 200,
        error_class: Type[APIError] = FetchError,
        **kwargs,
    ) -> requests.Response:
        """Send a request and check the status code.

        Args:
            method: HTTP method
            endpoint: API endpoint
            expected_status: The only status code treated as success
            error_class: Exception raised on transport failure or bad status
            **kwargs: Additional request arguments

        Returns:
            Raw HTTP response

        Raises:
            APIError: ``error_class`` for network errors and unexpected status codes
        """
        url = self._build_url(endpoint)
        self.logger.debug(f'{method} {url}')

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            self.logger.error(f'Network error during {method} request: {e}')
            raise error_class(str(e))

        if response.status_code != expected_status:
            raise error_class(
                self._status_text(response),
                status_code=response.status_code,
                response_data=self._error_body(response),
            )

        return response

    def _decode(self, response: requests.Response) -> Any:
        """Decode a JSON response body.

        Raises:
            DecodeError: If the body is not valid JSON
        """
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(
                f'Invalid JSON in response: {e}', status_code=response.status_code
            )

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET an endpoint and return the decoded JSON body.

        Args:
            endpoint: API endpoint
            params: Query parameters

        Returns:
            Decoded response data
        """
        response = self._request('GET', endpoint, params=params)
        return self._decode(response)

    def close(self):
        """Close the client session."""
        self.session.close()
        self.logger.debug('Client session closed')

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
