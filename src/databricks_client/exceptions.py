"""Exceptions raised by the Databricks REST API client.

Transport failures are not wrapped: they surface as the ``httpx`` exception
raised by the underlying transport.
"""


class DatabricksError(Exception):
    """Base exception for all Databricks client errors."""


class InvalidParametersError(DatabricksError, ValueError):
    """Raised before any request is sent when call parameters conflict."""


class ApiResponseError(DatabricksError):
    """Raised when the API answers with a status code outside 2xx."""

    def __init__(self, status_code: int, body: str, method: str, url: str):
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        msg = f"Failed to return a 2XX response ({status_code}): {body}"
        super().__init__(msg)


class ResponseDecodeError(DatabricksError):
    """Raised when a successful response body cannot be decoded."""


class ExpiredTokenError(DatabricksError):
    """Raised when a token file holds a JWT that has already expired."""


class NetrcError(DatabricksError):
    """Raised when a netrc file exists but cannot be parsed."""
