"""
Error classes for the VinylDNS Python client.

Everything raised by the client derives from VinylDNSError. Failures of the
underlying HTTP exchange are TransportErrors; bad caller input is a
ValidationError and is raised before any request is sent.
"""

from typing import Any, Dict, Optional


class VinylDNSError(Exception):
    """Base exception class for the VinylDNS client."""

    def __init__(self, message: str, status_code: Optional[int] = None, response: Optional[Dict[str, Any]] = None):
        """Initialize VinylDNS error.

        Args:
            message: Error message
            status_code: HTTP status code (optional)
            response: Full error response from API (optional)
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response


class TransportError(VinylDNSError):
    """A request could not be completed or its response could not be used."""


class ApiError(TransportError):
    """API request error with status code and response details."""

    def __init__(self, status_code: int, response: Dict[str, Any]):
        """Initialize API error.

        Args:
            status_code: HTTP status code
            response: Error response from API
        """
        message = response.get('error', 'API request failed')
        if 'message' in response:
            message = f"{message}: {response['message']}"
        super().__init__(message, status_code, response)


class NetworkError(TransportError):
    """Network-related error (connection timeout, DNS failure, etc.)."""


class ValidationError(VinylDNSError):
    """Input validation error."""


class NotFoundError(VinylDNSError):
    """A requested item is missing from an otherwise valid response."""
