"""Authentication decorators for the Databricks transport.

Both schemes are ``httpx.Auth`` implementations: they decorate each outgoing
request before the underlying transport sends it, so they compose with any
``httpx.Client`` a caller supplies.
"""

import base64
import json
import netrc
import os
import sys
import time
from collections.abc import Generator
from pathlib import Path

import httpx
import structlog

from .exceptions import ExpiredTokenError, NetrcError

logger = structlog.get_logger(__name__)


def validate_jwt_not_expired(token: str) -> None:
    """Check that a JWT token has not expired.

    Decodes the JWT payload without verifying the signature and checks
    the ``exp`` claim against the current time. Personal access tokens
    (``dapi...``) are not JWTs and are accepted as-is; so are JWTs that
    cannot be decoded or carry no ``exp`` claim.

    Args:
        token: The raw token string.

    Raises:
        ExpiredTokenError: If the token's ``exp`` claim is in the past.
    """
    parts = token.split(".")
    if len(parts) != 3:  # noqa: PLR2004
        logger.debug("Token is not a JWT, skipping expiry check")
        return

    try:
        # JWT base64url encoding omits padding; restore it
        payload_b64 = parts[1]
        padding = 4 - len(payload_b64) % 4
        if padding != 4:  # noqa: PLR2004
            payload_b64 += "=" * padding

        payload = json.loads(base64.urlsafe_b64decode(payload_b64))
    except (ValueError, json.JSONDecodeError):
        logger.warning("Failed to decode JWT payload, skipping expiry check")
        return

    exp = payload.get("exp") if isinstance(payload, dict) else None
    if exp is None:
        logger.warning("JWT has no 'exp' claim, skipping expiry check")
        return

    now = time.time()
    if now >= exp:
        msg = f"Databricks token has expired (exp={exp}, now={int(now)})"
        raise ExpiredTokenError(msg)

    logger.debug("JWT expiry validated", expires_in_seconds=int(exp - now))


def read_token_file(token_file: str | Path) -> str:
    """Read a token from a file and reject it if it is an expired JWT.

    Raises:
        FileNotFoundError: If the token file does not exist.
        ValueError: If the file is empty.
        ExpiredTokenError: If the token is an expired JWT.
    """
    token_path = Path(token_file)
    if not token_path.exists():
        msg = f"Token file not found: {token_file}"
        raise FileNotFoundError(msg)
    token = token_path.read_text().strip()
    if not token:
        msg = f"Token file is empty: {token_file}"
        raise ValueError(msg)
    validate_jwt_not_expired(token)
    return token


class BearerAuth(httpx.Auth):
    """Sends a personal access token as an ``Authorization: Bearer`` header."""

    def __init__(self, token: str):
        if not token:
            msg = "token cannot be empty"
            raise ValueError(msg)
        self._token = token

    @classmethod
    def from_token_file(cls, token_file: str | Path) -> "BearerAuth":
        """Build bearer auth from a file holding the token."""
        return cls(read_token_file(token_file))

    def auth_flow(
        self,
        request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


def default_netrc_path() -> Path:
    """Return the netrc location: ``$NETRC`` or the per-platform home file."""
    if env_path := os.environ.get("NETRC"):
        return Path(env_path)
    filename = "_netrc" if sys.platform == "win32" else ".netrc"
    return Path.home() / filename


class NetrcAuth(httpx.Auth):
    """Adds basic auth for the request host from the user's netrc file.

    The file is looked up on every request. Nothing is added when the URL
    already carries a user name, when the file is missing or is a directory,
    or when it has no entry for the host.
    """

    def __init__(self, path: str | Path | None = None):
        self._path = Path(path) if path is not None else None

    def _credentials(self, host: str) -> tuple[str, str] | None:
        path = self._path or default_netrc_path()
        if not path.exists() or path.is_dir():
            return None

        try:
            entries = netrc.netrc(str(path))
        except netrc.NetrcParseError as exc:
            msg = f"Error parsing netrc file at {str(path)!r}: {exc}"
            raise NetrcError(msg) from exc

        machine = entries.authenticators(host)
        if machine is None:
            return None
        login, _, password = machine
        return login, password or ""

    def auth_flow(
        self,
        request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        if request.url.username:
            yield request
            return

        credentials = self._credentials(request.url.host)
        if credentials is None:
            logger.debug("No netrc entry for host", host=request.url.host)
            yield request
            return

        yield from httpx.BasicAuth(*credentials).auth_flow(request)
