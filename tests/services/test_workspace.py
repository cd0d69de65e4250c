"""Tests for the Workspace API handle."""

import base64

import pytest

from databricks_client import ResponseDecodeError, types

URL = "https://acme.cloud.databricks.com/api/2.0/workspace/"

SOURCE = b"# Databricks notebook source\nprint('hello')\n"


def test_export_decodes_content(make_client):
    """Exported notebooks are returned as bytes."""
    client, transport = make_client(
        200,
        {"content": base64.b64encode(SOURCE).decode()},
    )
    actual = client.workspace().export("/Users/me/etl", types.ExportFormat.SOURCE)

    assert transport.last.method == "GET"
    assert transport.last.url.path == "/api/2.0/workspace/export"
    assert dict(transport.last.url.params) == {
        "path": "/Users/me/etl",
        "format": "SOURCE",
    }
    assert actual == SOURCE


def test_export_invalid_content_raises(make_client):
    client, _ = make_client(200, {"content": "%%%"})
    with pytest.raises(ResponseDecodeError, match="content"):
        client.workspace().export("/Users/me/etl")


def test_import_encodes_content(make_client):
    client, transport = make_client()
    client.workspace().import_(
        "/Users/me/etl",
        SOURCE,
        language=types.Language.PYTHON,
        overwrite=True,
    )

    assert str(transport.last.url) == URL + "import"
    assert transport.last_json() == {
        "path": "/Users/me/etl",
        "content": base64.b64encode(SOURCE).decode(),
        "language": "PYTHON",
        "format": "SOURCE",
        "overwrite": True,
    }


def test_import_dbc_without_language_omits_it(make_client):
    client, transport = make_client()
    client.workspace().import_("/Users/me/dir", b"PK", format=types.ExportFormat.DBC)

    actual_body = transport.last_json()
    assert "language" not in actual_body
    assert actual_body["format"] == "DBC"


def test_get_status(make_client):
    client, transport = make_client(
        200,
        {
            "object_type": types.ObjectType.NOTEBOOK,
            "path": "/Users/me/etl",
            "language": "PYTHON",
            "object_id": 123,
        },
    )
    actual = client.workspace().get_status("/Users/me/etl")

    assert transport.last.url.path == "/api/2.0/workspace/get-status"
    assert actual.object_type == "NOTEBOOK"
    assert actual.object_id == 123


def test_list_unwraps_objects(make_client):
    client, transport = make_client(
        200,
        {
            "objects": [
                {"object_type": "DIRECTORY", "path": "/Users/me/dir"},
                {"object_type": "NOTEBOOK", "path": "/Users/me/etl"},
            ],
        },
    )
    actual = client.workspace().list("/Users/me")

    assert transport.last.method == "GET"
    assert transport.last.url.params["path"] == "/Users/me"
    assert [o.object_type for o in actual] == ["DIRECTORY", "NOTEBOOK"]


def test_delete_and_mkdirs(make_client):
    client, transport = make_client()
    workspace = client.workspace()

    workspace.delete("/Users/me/dir", recursive=True)
    assert str(transport.last.url) == URL + "delete"
    assert transport.last_json() == {"path": "/Users/me/dir", "recursive": True}

    workspace.mkdirs("/Users/me/new")
    assert str(transport.last.url) == URL + "mkdirs"
    assert transport.last_json() == {"path": "/Users/me/new"}
