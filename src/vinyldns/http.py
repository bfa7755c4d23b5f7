"""
Simple HTTP client for the VinylDNS Python client.

Performs a single request/response cycle against the configured API host.
Sends a static bearer token when an API key is configured; request signing
is not supported.
"""

import logging
from typing import Optional, Dict, Any, Union
from urllib.parse import quote

import requests

from .errors import ApiError, NetworkError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10
DEFAULT_USER_AGENT = 'vinyldns-python'


class HTTPClient:
    """Simple HTTP client for the VinylDNS REST API."""

    def __init__(self, opts: Dict[str, Any]):
        """Initialize HTTP client.

        Args:
            opts: Configuration options including baseUrl, apiKey, timeout, userAgent
        """
        self.base_url = opts.get('baseUrl', '').rstrip('/')
        self.api_key = opts.get('apiKey')
        self.timeout = opts.get('timeout', DEFAULT_TIMEOUT)
        self.user_agent = opts.get('userAgent') or DEFAULT_USER_AGENT

    def _headers(self, has_body: bool = True) -> Dict[str, str]:
        """Build request headers.

        Args:
            has_body: Whether request has a body (for Content-Type)

        Returns:
            Dictionary of headers
        """
        headers: Dict[str, str] = {
            'Accept': 'application/json',
            'User-Agent': self.user_agent,
        }

        if self.api_key:
            headers['Authorization'] = f'Bearer {self.api_key}'

        if has_body:
            headers['Content-Type'] = 'application/json'

        return headers

    def request(
        self,
        path: str,
        method: str = 'GET',
        body: Optional[Any] = None,
    ) -> Union[Dict[str, Any], str, None]:
        """
        Make HTTP request to the VinylDNS API.

        Args:
            path: Request path (e.g., '/zones')
            method: HTTP method
            body: Optional request body

        Returns:
            Parsed JSON response, text, or None for 204 responses

        Raises:
            ApiError: On non-success HTTP status
            NetworkError: On connection failure or timeout
            TransportError: On a JSON response that cannot be decoded
        """
        url = f"{self.base_url}{path}"
        has_body = body is not None and method not in ['GET', 'DELETE']
        headers = self._headers(has_body)

        logger.debug("%s %s", method, url)
        try:
            response = requests.request(
                method,
                url,
                headers=headers,
                json=body if has_body else None,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise NetworkError(f'Request failed: {str(e)}') from e

        # Handle 204 No Content
        if response.status_code == 204:
            return None

        content_type = response.headers.get('content-type', '')
        is_json = 'application/json' in content_type

        # Handle error responses
        if not response.ok:
            error_data = None
            if is_json:
                try:
                    error_data = response.json()
                except ValueError:
                    pass
            if not isinstance(error_data, dict):
                error_data = {'error': f'HTTP {response.status_code}', 'message': response.text}
            raise ApiError(response.status_code, error_data)

        # Parse successful responses
        if is_json:
            try:
                return response.json()
            except ValueError as e:
                raise TransportError(f'Malformed JSON response from {url}', response.status_code) from e
        return response.text

    @staticmethod
    def encode_url_component(component: str) -> str:
        """Encode URL component (similar to encodeURIComponent in JS).

        Args:
            component: String to encode

        Returns:
            URL-encoded string
        """
        return quote(component, safe='')
