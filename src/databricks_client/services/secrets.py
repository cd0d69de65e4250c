"""Secrets API: secret scopes, secrets and the ACLs guarding them.

Scope and key names are limited to alphanumerics, dashes, underscores and
periods, at most 128 characters. A workspace holds at most 100 scopes and a
scope at most 1000 secrets of up to 128 KB each.
"""

import base64

from pydantic import Field

from ..exceptions import InvalidParametersError
from ..types import AclItem, ApiModel, SecretMetadata, SecretScope
from .base import Service


class _ScopeList(ApiModel):
    scopes: list[SecretScope] = Field(default_factory=list)


class _SecretList(ApiModel):
    secrets: list[SecretMetadata] = Field(default_factory=list)


class _AclList(ApiModel):
    items: list[AclItem] = Field(default_factory=list)


class SecretsService(Service):
    """Operations on ``2.0/secrets``."""

    resource = "secrets"

    def create_scope(
        self,
        scope: str,
        initial_manage_principal: str | None = None,
    ) -> None:
        """Create a secret scope.

        ``initial_manage_principal`` may only be ``"users"``, granting MANAGE
        to every user; without it only the creator can manage the scope.
        """
        self._post(
            "scopes/create",
            {"scope": scope, "initial_manage_principal": initial_manage_principal},
        )

    def delete_scope(self, scope: str) -> None:
        """Delete a secret scope and every secret in it."""
        self._post("scopes/delete", {"scope": scope})

    def list_scopes(self) -> list[SecretScope]:
        """Return all secret scopes of the workspace."""
        return self._get("scopes/list", response_model=_ScopeList).scopes

    def put_secret(
        self,
        scope: str,
        key: str,
        string_value: str | None = None,
        bytes_value: bytes | None = None,
    ) -> None:
        """Store a secret, overwriting any secret with the same key.

        Requires WRITE or MANAGE on the scope.

        Raises:
            InvalidParametersError: Unless exactly one of ``string_value``
                and ``bytes_value`` is given.
        """
        if (string_value is None) == (bytes_value is None):
            msg = "Must specify exactly one of string_value OR bytes_value"
            raise InvalidParametersError(msg)
        self._post(
            "put",
            {
                "scope": scope,
                "key": key,
                "string_value": string_value,
                "bytes_value": (
                    base64.b64encode(bytes_value).decode("ascii")
                    if bytes_value is not None
                    else None
                ),
            },
        )

    def delete_secret(self, scope: str, key: str) -> None:
        """Delete a secret. Requires WRITE or MANAGE on the scope."""
        self._post("delete", {"scope": scope, "key": key})

    def list_secrets(self, scope: str) -> list[SecretMetadata]:
        """Return the keys stored in a scope, without their values.

        Requires READ on the scope.
        """
        return self._get("list", {"scope": scope}, _SecretList).secrets

    def put_acl(self, scope: str, principal: str, permission: str) -> None:
        """Grant ``principal`` a permission on a scope, replacing any ACL.

        Permissions are MANAGE, WRITE and READ, each implying the next.
        Requires MANAGE on the scope.
        """
        self._post(
            "acls/put",
            {"scope": scope, "principal": principal, "permission": permission},
        )

    def delete_acl(self, scope: str, principal: str) -> None:
        """Remove the ACL of ``principal`` on a scope."""
        self._post("acls/delete", {"scope": scope, "principal": principal})

    def get_acl(self, scope: str, principal: str) -> AclItem:
        """Return the permission ``principal`` holds on a scope."""
        return self._get(
            "acls/get",
            {"scope": scope, "principal": principal},
            AclItem,
        )

    def list_acls(self, scope: str) -> list[AclItem]:
        """Return the ACLs set on a scope. Requires MANAGE on the scope."""
        return self._get("acls/list", {"scope": scope}, _AclList).items
