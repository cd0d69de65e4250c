"""Databricks REST API client.

Typed, synchronous client for the Databricks REST API 2.0: clusters, DBFS,
groups, jobs, libraries, instance profiles, secrets, tokens and workspace
objects, all sharing one ``httpx`` transport.

Exports:
    DatabricksClient: Client owning the base URL and the transport.
    with_*: Construction options for transport and authentication.
    BearerAuth, NetrcAuth: ``httpx.Auth`` implementations.
    ClientConfig, load_config, create_client, client_from_config,
        configure_logging: Build a client from a JSON config file.
    types: Module containing Pydantic models for requests and responses.
"""

from . import types
from .auth import BearerAuth, NetrcAuth
from .client import (
    DEFAULT_TIMEOUT,
    DatabricksClient,
    with_auth,
    with_bearer_token,
    with_http_client,
    with_netrc,
    with_token_file,
)
from .config import (
    ClientConfig,
    client_from_config,
    configure_logging,
    create_client,
    load_config,
)
from .exceptions import (
    ApiResponseError,
    DatabricksError,
    ExpiredTokenError,
    InvalidParametersError,
    NetrcError,
    ResponseDecodeError,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TIMEOUT",
    "ApiResponseError",
    "BearerAuth",
    "ClientConfig",
    "DatabricksClient",
    "DatabricksError",
    "ExpiredTokenError",
    "InvalidParametersError",
    "NetrcAuth",
    "NetrcError",
    "ResponseDecodeError",
    "client_from_config",
    "configure_logging",
    "create_client",
    "load_config",
    "types",
    "with_auth",
    "with_bearer_token",
    "with_http_client",
    "with_netrc",
    "with_token_file",
]
