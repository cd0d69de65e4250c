"""Tests for the Groups API handle."""

import pytest

from databricks_client import InvalidParametersError, types

URL = "https://acme.cloud.databricks.com/api/2.0/groups/"


def test_parents_with_both_principals_sends_nothing(make_client):
    """Asking for the parents of a user and a group at once fails locally."""
    client, transport = make_client()
    with pytest.raises(InvalidParametersError, match="not both"):
        client.groups().parents(user_name="alice", group_name="admins")
    assert transport.requests == []


def test_add_member_with_both_principals_sends_nothing(make_client):
    client, transport = make_client()
    with pytest.raises(InvalidParametersError):
        client.groups().add_member("admins", user_name="alice", group_name="ops")
    assert transport.requests == []


def test_add_member_without_principal_sends_nothing(make_client):
    """Adding a member needs a user or a group."""
    client, transport = make_client()
    with pytest.raises(InvalidParametersError, match="exactly one"):
        client.groups().add_member("admins")
    assert transport.requests == []


def test_add_member_user(make_client):
    client, transport = make_client()
    client.groups().add_member("admins", user_name="alice")

    assert str(transport.last.url) == URL + "add-member"
    assert transport.last_json() == {"user_name": "alice", "parent_name": "admins"}


def test_user_parents(make_client):
    """Parents are listed with a GET and unwrapped from group_names."""
    client, transport = make_client(200, {"group_names": ["admins", "ops"]})
    actual = client.groups().user_parents("alice")

    assert transport.last.method == "GET"
    assert transport.last.url.path == "/api/2.0/groups/list-parents"
    assert dict(transport.last.url.params) == {"user_name": "alice"}
    assert actual == ["admins", "ops"]


def test_group_parents(make_client):
    client, transport = make_client(200, {"group_names": ["all"]})
    assert client.groups().group_parents("ops") == ["all"]
    assert dict(transport.last.url.params) == {"group_name": "ops"}


def test_members_unwraps_members(make_client):
    client, transport = make_client(
        200,
        {"members": [{"user_name": "alice"}, {"group_name": "ops"}]},
    )
    actual = client.groups().members("admins")

    assert transport.last.url.path == "/api/2.0/groups/list-members"
    assert actual == [
        types.PrincipalName(user_name="alice"),
        types.PrincipalName(group_name="ops"),
    ]


def test_list_unwraps_group_names(make_client):
    client, transport = make_client(200, {"group_names": ["admins", "users"]})
    assert client.groups().list() == ["admins", "users"]
    assert transport.last.method == "GET"


def test_remove_members_name_the_parent(make_client):
    """Removing a member always names the group it is removed from."""
    client, transport = make_client()
    groups = client.groups()

    groups.remove_user("alice", "admins")
    assert str(transport.last.url) == URL + "remove-member"
    assert transport.last_json() == {"user_name": "alice", "parent_name": "admins"}

    groups.remove_group("ops", "admins")
    assert transport.last_json() == {"group_name": "ops", "parent_name": "admins"}


def test_create_and_delete(make_client):
    client, transport = make_client()
    client.groups().create("ops")
    assert str(transport.last.url) == URL + "create"
    client.groups().delete("ops")
    assert str(transport.last.url) == URL + "delete"
    assert transport.last_json() == {"group_name": "ops"}
