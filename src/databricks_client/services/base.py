"""Base class of the endpoint group handles."""

import base64
from typing import TYPE_CHECKING, Any

import httpx

from ..exceptions import ResponseDecodeError

if TYPE_CHECKING:
    from ..client import Body, DatabricksClient, Params

API_VERSION = "2.0"


class Service:
    """Handle on one endpoint group of a :class:`DatabricksClient`.

    Carries nothing but the client it was minted from and an optional
    per-handle timeout, so handles are cheap to create and discard. Every
    operation is a single call into :meth:`DatabricksClient.request` against
    ``{API_VERSION}/{resource}/{action}``.
    """

    resource = ""

    def __init__(self, client: "DatabricksClient", timeout: float | None = None):
        self._client = client
        self.timeout = timeout

    @property
    def base_url(self) -> str:
        return self._client.base_url

    @property
    def http_client(self) -> httpx.Client:
        return self._client.http_client

    def _endpoint(self, action: str) -> str:
        return f"{API_VERSION}/{self.resource}/{action}"

    def _get(
        self,
        action: str,
        params: "Params | None" = None,
        response_model: Any = None,
    ) -> Any:
        return self._client.request(
            "GET",
            self._endpoint(action),
            params=params,
            response_model=response_model,
            timeout=httpx.USE_CLIENT_DEFAULT if self.timeout is None else self.timeout,
        )

    def _post(
        self,
        action: str,
        body: "Body | None" = None,
        response_model: Any = None,
    ) -> Any:
        return self._client.request(
            "POST",
            self._endpoint(action),
            body=body,
            response_model=response_model,
            timeout=httpx.USE_CLIENT_DEFAULT if self.timeout is None else self.timeout,
        )


def decode_base64(value: str, field: str) -> bytes:
    """Decode a base64 field of a successful response."""
    try:
        return base64.b64decode(value, validate=True)
    except ValueError as exc:
        msg = f"Response field {field!r} is not valid base64: {exc}"
        raise ResponseDecodeError(msg) from exc
