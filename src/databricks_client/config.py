"""Configuration file support for building a :class:`DatabricksClient`."""

import json
import logging
import os
import pathlib

import pydantic
import structlog

from .client import (
    DEFAULT_TIMEOUT,
    ClientOption,
    DatabricksClient,
    with_bearer_token,
    with_netrc,
    with_token_file,
)

CONFIG_ENV_VAR = "DATABRICKS_CLIENT_CONFIG_PATH"
logger = structlog.get_logger(__name__)


class ClientConfig(pydantic.BaseModel):
    """Configuration for a Databricks REST API client."""

    account: str = pydantic.Field(
        description="Databricks account (deployment) name",
        min_length=1,
    )
    token: str | None = pydantic.Field(
        None,
        description="Personal access token",
    )
    token_file: str | None = pydantic.Field(
        None,
        description="Path to file containing a personal access token",
    )
    netrc: bool = pydantic.Field(
        False,
        description="Read credentials from a netrc file",
    )
    netrc_file: str | None = pydantic.Field(
        None,
        description="netrc file location; defaults to $NETRC or ~/.netrc",
    )
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    log_level: str = pydantic.Field("INFO", description="Logging level")

    @pydantic.model_validator(mode="after")
    def _one_credential_source(self) -> "ClientConfig":
        sources = [self.token is not None, self.token_file is not None, self.netrc]
        if sum(sources) > 1:
            msg = "Only one of token, token_file or netrc may be configured"
            raise ValueError(msg)
        return self


def configure_logging(log_level_name: str) -> None:
    """Configure structlog for logfmt output."""
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.LogfmtRenderer(
                key_order=("timestamp", "level", "msg"),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def load_config(config_path: str | pathlib.Path) -> ClientConfig:
    """Load configuration from JSON file."""
    path = pathlib.Path(config_path)
    if not path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with path.open("r") as f:
        data = json.load(f)

    return ClientConfig(**data)


def _auth_options(config: ClientConfig) -> list[ClientOption]:
    if config.token is not None:
        return [with_bearer_token(config.token)]
    if config.token_file is not None:
        return [with_token_file(config.token_file)]
    if config.netrc:
        return [with_netrc(config.netrc_file)]
    return []


def create_client(config: ClientConfig) -> DatabricksClient:
    """Construct a client from validated config."""
    client = DatabricksClient(
        config.account,
        *_auth_options(config),
        timeout=config.timeout,
    )
    logger.info("Created Databricks client", base_url=client.base_url)
    return client


def client_from_config(config_path: str | None = None) -> DatabricksClient:
    """Create a client using a config path or the environment default."""
    resolved_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not resolved_path:
        msg = f"No configuration path given and {CONFIG_ENV_VAR} is not set"
        raise ValueError(msg)
    config = load_config(resolved_path)
    configure_logging(config.log_level)
    return create_client(config)
