"""Groups API: manage groups and their user and group members."""

from pydantic import Field

from ..exceptions import InvalidParametersError
from ..types import ApiModel, PrincipalName
from .base import Service


class _MemberList(ApiModel):
    members: list[PrincipalName] = Field(default_factory=list)


class _GroupNameList(ApiModel):
    group_names: list[str] = Field(default_factory=list)


def _check_one_principal(user_name: str | None, group_name: str | None) -> None:
    if user_name and group_name:
        msg = "Must specify either user_name OR group_name, not both"
        raise InvalidParametersError(msg)


class GroupsService(Service):
    """Operations on ``2.0/groups``."""

    resource = "groups"

    def add_member(
        self,
        parent_name: str,
        user_name: str | None = None,
        group_name: str | None = None,
    ) -> None:
        """Add a user or a group to the group ``parent_name``.

        Raises:
            InvalidParametersError: Unless exactly one of a user and a group
                is given.
        """
        if bool(user_name) == bool(group_name):
            msg = "Must specify exactly one of user_name OR group_name"
            raise InvalidParametersError(msg)
        self._post(
            "add-member",
            {
                "user_name": user_name or None,
                "group_name": group_name or None,
                "parent_name": parent_name,
            },
        )

    def create(self, group_name: str) -> None:
        """Create a group. Fails with RESOURCE_ALREADY_EXISTS if taken."""
        self._post("create", {"group_name": group_name})

    def members(self, group_name: str) -> list[PrincipalName]:
        """Return the direct members of a group."""
        return self._get(
            "list-members",
            {"group_name": group_name},
            _MemberList,
        ).members

    def parents(
        self,
        user_name: str | None = None,
        group_name: str | None = None,
    ) -> list[str]:
        """Return the groups a user or a group directly belongs to.

        Raises:
            InvalidParametersError: If both a user and a group are given.
        """
        _check_one_principal(user_name, group_name)
        return self._get(
            "list-parents",
            {"user_name": user_name or None, "group_name": group_name or None},
            _GroupNameList,
        ).group_names

    def user_parents(self, user_name: str) -> list[str]:
        """Return the groups a user directly belongs to."""
        return self.parents(user_name=user_name)

    def group_parents(self, group_name: str) -> list[str]:
        """Return the groups a group directly belongs to."""
        return self.parents(group_name=group_name)

    def remove_user(self, user_name: str, parent_name: str) -> None:
        """Remove a user from the group ``parent_name``."""
        self._post(
            "remove-member",
            {"user_name": user_name, "parent_name": parent_name},
        )

    def remove_group(self, group_name: str, parent_name: str) -> None:
        """Remove a group from the group ``parent_name``."""
        self._post(
            "remove-member",
            {"group_name": group_name, "parent_name": parent_name},
        )

    def delete(self, group_name: str) -> None:
        """Delete a group."""
        self._post("delete", {"group_name": group_name})

    def list(self) -> list[str]:
        """Return the names of all groups in the organization."""
        return self._get("list", response_model=_GroupNameList).group_names
