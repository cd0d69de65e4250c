"""Databricks REST API client.

Owns the account's base URL and the HTTP transport, mints one handle per
endpoint group, and implements the request/response contract every endpoint
shares: serialize, send exactly once, classify the status, decode.
"""

import time
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TypeAlias, TypeVar, overload

import httpx
import pydantic
import structlog

from .auth import BearerAuth, NetrcAuth
from .exceptions import ApiResponseError, ResponseDecodeError
from .services import (
    ClusterService,
    DBFSService,
    GroupsService,
    JobsService,
    LibrariesService,
    ProfilesService,
    SecretsService,
    TokenService,
    WorkspaceService,
)

logger = structlog.get_logger(__name__)

DEFAULT_DOMAIN = "cloud.databricks.com"

DEFAULT_TIMEOUT = 30.0

_HEADERS = {"Accept": "application/json"}

M = TypeVar("M", bound=pydantic.BaseModel)

ClientOption: TypeAlias = Callable[["DatabricksClient"], None]
Params: TypeAlias = Mapping[str, Any] | pydantic.BaseModel
Body: TypeAlias = Mapping[str, Any] | pydantic.BaseModel
TimeoutArg: TypeAlias = float | None | type(httpx.USE_CLIENT_DEFAULT)


def with_http_client(http_client: httpx.Client) -> ClientOption:
    """Use a caller-supplied ``httpx.Client`` as the transport.

    The client is not closed by :meth:`DatabricksClient.close`.
    """

    def apply(client: "DatabricksClient") -> None:
        client._http_client = http_client
        client._owns_http_client = False

    return apply


def with_auth(auth: httpx.Auth) -> ClientOption:
    """Decorate every request with the given ``httpx.Auth``."""

    def apply(client: "DatabricksClient") -> None:
        client.auth = auth

    return apply


def with_bearer_token(token: str) -> ClientOption:
    """Authenticate with a personal access token."""

    def apply(client: "DatabricksClient") -> None:
        client.auth = BearerAuth(token)

    return apply


def with_token_file(token_file: str | Path) -> ClientOption:
    """Authenticate with a token read from a file.

    Construction fails if the file is missing or holds an expired JWT.
    """

    def apply(client: "DatabricksClient") -> None:
        client.auth = BearerAuth.from_token_file(token_file)

    return apply


def with_netrc(path: str | Path | None = None) -> ClientOption:
    """Authenticate with credentials from a netrc file."""

    def apply(client: "DatabricksClient") -> None:
        client.auth = NetrcAuth(path)

    return apply


def _encode_params(params: Params | None) -> dict[str, Any]:
    if params is None:
        return {}
    if isinstance(params, pydantic.BaseModel):
        params = params.model_dump(mode="json")

    query = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        query[key] = value
    return query


def _encode_body(body: Body | None) -> dict[str, Any] | None:
    if body is None:
        return None
    if isinstance(body, pydantic.BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return {key: value for key, value in body.items() if value is not None}


def _decode(response: httpx.Response, response_model: type[M]) -> M:
    # An empty or null body decodes to the model's zero value.
    if response.content.strip() in (b"", b"null"):
        return response_model()
    try:
        return response_model.model_validate_json(response.content)
    except pydantic.ValidationError as exc:
        msg = f"Failed to decode {response_model.__name__} response: {exc}"
        raise ResponseDecodeError(msg) from exc


class DatabricksClient:
    """HTTP client for the Databricks REST API of one account.

    Options are applied in order at construction; the first one that raises
    aborts construction. After that the client is never mutated, so the
    endpoint group handles it returns can be used from several threads as
    long as the transport can.

    Can be used as a context manager for automatic cleanup.
    """

    def __init__(
        self,
        account: str,
        *options: ClientOption,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize the client.

        Args:
            account: Databricks account (deployment) name; the API lives at
                ``https://{account}.cloud.databricks.com/api/``.
            *options: Client options such as :func:`with_bearer_token`.
            timeout: Timeout in seconds of the default transport. Ignored
                when a transport is supplied with :func:`with_http_client`.

        Raises:
            ValueError: If account is empty or timeout is not positive.
        """
        if not account:
            msg = "account cannot be empty"
            raise ValueError(msg)
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)

        self.account = account
        self.base_url = f"https://{account}.{DEFAULT_DOMAIN}/api/"
        self.auth: httpx.Auth | None = None
        self._http_client: httpx.Client | None = None
        self._owns_http_client = False

        for option in options:
            option(self)

        if self._http_client is None:
            self._http_client = httpx.Client(timeout=timeout)
            self._owns_http_client = True

    @property
    def http_client(self) -> httpx.Client:
        """The transport every request goes through."""
        return self._http_client

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and cleanup resources."""
        self.close()

    def close(self):
        """Close the transport if this client created it."""
        if self._owns_http_client and not self._http_client.is_closed:
            self._http_client.close()

    @overload
    def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Params | None = None,
        body: Body | None = None,
        response_model: type[M],
        timeout: TimeoutArg = httpx.USE_CLIENT_DEFAULT,
    ) -> M: ...

    @overload
    def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Params | None = None,
        body: Body | None = None,
        response_model: None = None,
        timeout: TimeoutArg = httpx.USE_CLIENT_DEFAULT,
    ) -> None: ...

    def request(
        self,
        method,
        endpoint,
        *,
        params=None,
        body=None,
        response_model=None,
        timeout=httpx.USE_CLIENT_DEFAULT,
    ):
        """Send one request to the API and decode the response.

        Args:
            method: HTTP method, ``GET`` for reads and ``POST`` for writes.
            endpoint: Path below the base URL (e.g., "2.0/clusters/get").
            params: Query parameters; ``None`` values are dropped and
                booleans are sent as ``true``/``false``.
            body: JSON body; ``None`` fields are dropped.
            response_model: Model the response body is decoded into. When
                ``None`` the body is ignored.
            timeout: Deadline for this request; defaults to the transport's.

        Returns:
            The decoded response, or ``None`` without a response model.

        Raises:
            httpx.HTTPError: If the transport fails to complete the exchange.
            ApiResponseError: If the status code is outside 200-299.
            ResponseDecodeError: If a successful body does not match the
                response model.
        """
        url = self.base_url + endpoint
        query = _encode_params(params)
        start_time = time.time()

        try:
            logger.debug(
                "Making API request",
                method=method,
                endpoint=endpoint,
                params=query,
            )
            response = self._http_client.request(
                method,
                url,
                params=query or None,
                json=_encode_body(body),
                headers=_HEADERS,
                auth=self.auth if self.auth is not None else httpx.USE_CLIENT_DEFAULT,
                timeout=timeout,
            )
        except httpx.HTTPError:
            logger.debug(
                "API request failed",
                method=method,
                endpoint=endpoint,
                duration_seconds=round(time.time() - start_time, 3),
                exc_info=True,
            )
            raise

        duration = time.time() - start_time
        logger.debug(
            "API request completed",
            endpoint=endpoint,
            status_code=response.status_code,
            duration_seconds=round(duration, 3),
        )

        if not 200 <= response.status_code <= 299:  # noqa: PLR2004
            raise ApiResponseError(
                status_code=response.status_code,
                body=response.text,
                method=method,
                url=url,
            )

        if response_model is None:
            return None
        return _decode(response, response_model)

    def cluster(self, timeout: float | None = None) -> ClusterService:
        """Return a handle for the Clusters API."""
        return ClusterService(self, timeout=timeout)

    def dbfs(self, timeout: float | None = None) -> DBFSService:
        """Return a handle for the DBFS API."""
        return DBFSService(self, timeout=timeout)

    def groups(self, timeout: float | None = None) -> GroupsService:
        """Return a handle for the Groups API."""
        return GroupsService(self, timeout=timeout)

    def jobs(self, timeout: float | None = None) -> JobsService:
        """Return a handle for the Jobs API."""
        return JobsService(self, timeout=timeout)

    def libraries(self, timeout: float | None = None) -> LibrariesService:
        """Return a handle for the Libraries API."""
        return LibrariesService(self, timeout=timeout)

    def profiles(self, timeout: float | None = None) -> ProfilesService:
        """Return a handle for the Instance Profiles API."""
        return ProfilesService(self, timeout=timeout)

    def secrets(self, timeout: float | None = None) -> SecretsService:
        """Return a handle for the Secrets API."""
        return SecretsService(self, timeout=timeout)

    def token(self, timeout: float | None = None) -> TokenService:
        """Return a handle for the Token API."""
        return TokenService(self, timeout=timeout)

    def workspace(self, timeout: float | None = None) -> WorkspaceService:
        """Return a handle for the Workspace API."""
        return WorkspaceService(self, timeout=timeout)
