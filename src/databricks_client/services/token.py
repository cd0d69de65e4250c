"""Token API: personal access tokens of the calling user."""

from pydantic import Field

from ..types import ApiModel, PublicTokenInfo, TokenCreateResponse
from .base import Service


class _TokenList(ApiModel):
    token_infos: list[PublicTokenInfo] = Field(default_factory=list)


class TokenService(Service):
    """Operations on ``2.0/token``."""

    resource = "token"

    def create(
        self,
        lifetime_seconds: int | None = None,
        comment: str | None = None,
    ) -> TokenCreateResponse:
        """Create a token.

        Without ``lifetime_seconds`` the token never expires. Fails with
        QUOTA_EXCEEDED once the user holds too many tokens.
        """
        return self._post(
            "create",
            {"lifetime_seconds": lifetime_seconds, "comment": comment},
            TokenCreateResponse,
        )

    def revoke(self, token_id: str) -> None:
        """Revoke a token. Fails with RESOURCE_DOES_NOT_EXIST if unknown."""
        self._post("delete", {"token_id": token_id})

    def list(self) -> list[PublicTokenInfo]:
        """Return all valid tokens of the calling user."""
        return self._get("list", response_model=_TokenList).token_infos
