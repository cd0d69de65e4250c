"""Properties every operation of every endpoint group shares."""

import httpx
import pytest

from databricks_client import ApiResponseError, types

OPERATIONS = {
    "cluster.create": lambda c: c.cluster().create(types.ClusterCreateRequest()),
    "cluster.edit": lambda c: c.cluster().edit(types.ClusterEditRequest()),
    "cluster.start": lambda c: c.cluster().start("c"),
    "cluster.restart": lambda c: c.cluster().restart("c"),
    "cluster.resize_workers": lambda c: c.cluster().resize_workers("c", 1),
    "cluster.resize_autoscale": lambda c: c.cluster().resize_autoscale(
        "c",
        types.Autoscale(min_workers=1, max_workers=2),
    ),
    "cluster.terminate": lambda c: c.cluster().terminate("c"),
    "cluster.delete": lambda c: c.cluster().delete("c"),
    "cluster.get": lambda c: c.cluster().get("c"),
    "cluster.pin": lambda c: c.cluster().pin("c"),
    "cluster.unpin": lambda c: c.cluster().unpin("c"),
    "cluster.list": lambda c: c.cluster().list(),
    "cluster.zones": lambda c: c.cluster().zones(),
    "cluster.node_types": lambda c: c.cluster().node_types(),
    "cluster.spark_versions": lambda c: c.cluster().spark_versions(),
    "cluster.events": lambda c: c.cluster().events(types.ClusterEventRequest()),
    "dbfs.add_block": lambda c: c.dbfs().add_block(1, b"x"),
    "dbfs.close": lambda c: c.dbfs().close(1),
    "dbfs.create": lambda c: c.dbfs().create("/x"),
    "dbfs.delete": lambda c: c.dbfs().delete("/x"),
    "dbfs.get_status": lambda c: c.dbfs().get_status("/x"),
    "dbfs.list": lambda c: c.dbfs().list("/x"),
    "dbfs.mkdirs": lambda c: c.dbfs().mkdirs("/x"),
    "dbfs.move": lambda c: c.dbfs().move("/x", "/y"),
    "dbfs.put": lambda c: c.dbfs().put("/x", b"x"),
    "dbfs.read": lambda c: c.dbfs().read("/x"),
    "groups.add_member": lambda c: c.groups().add_member("g", user_name="u"),
    "groups.create": lambda c: c.groups().create("g"),
    "groups.members": lambda c: c.groups().members("g"),
    "groups.list": lambda c: c.groups().list(),
    "groups.user_parents": lambda c: c.groups().user_parents("u"),
    "groups.group_parents": lambda c: c.groups().group_parents("g"),
    "groups.remove_user": lambda c: c.groups().remove_user("u", "g"),
    "groups.remove_group": lambda c: c.groups().remove_group("h", "g"),
    "groups.delete": lambda c: c.groups().delete("g"),
    "jobs.create": lambda c: c.jobs().create(types.JobCreateRequest()),
    "jobs.list": lambda c: c.jobs().list(),
    "jobs.delete": lambda c: c.jobs().delete(1),
    "jobs.get": lambda c: c.jobs().get(1),
    "jobs.reset": lambda c: c.jobs().reset(1, types.JobSettings()),
    "jobs.run_now": lambda c: c.jobs().run_now(types.JobRunNowRequest(job_id=1)),
    "jobs.runs_submit": lambda c: c.jobs().runs_submit(types.JobSubmitRequest()),
    "jobs.runs_list": lambda c: c.jobs().runs_list(types.JobRunListRequest()),
    "jobs.runs_get": lambda c: c.jobs().runs_get(1),
    "jobs.runs_export": lambda c: c.jobs().runs_export(1),
    "jobs.runs_cancel": lambda c: c.jobs().runs_cancel(1),
    "jobs.runs_get_output": lambda c: c.jobs().runs_get_output(1),
    "jobs.runs_delete": lambda c: c.jobs().runs_delete(1),
    "libraries.all_cluster_statuses": lambda c: c.libraries().all_cluster_statuses(),
    "libraries.cluster_status": lambda c: c.libraries().cluster_status("c"),
    "libraries.install": lambda c: c.libraries().install("c", []),
    "libraries.uninstall": lambda c: c.libraries().uninstall("c", []),
    "profiles.add": lambda c: c.profiles().add("arn"),
    "profiles.list": lambda c: c.profiles().list(),
    "profiles.remove": lambda c: c.profiles().remove("arn"),
    "secrets.create_scope": lambda c: c.secrets().create_scope("s"),
    "secrets.delete_scope": lambda c: c.secrets().delete_scope("s"),
    "secrets.list_scopes": lambda c: c.secrets().list_scopes(),
    "secrets.put_secret": lambda c: c.secrets().put_secret("s", "k", "v"),
    "secrets.delete_secret": lambda c: c.secrets().delete_secret("s", "k"),
    "secrets.list_secrets": lambda c: c.secrets().list_secrets("s"),
    "secrets.put_acl": lambda c: c.secrets().put_acl("s", "p", "READ"),
    "secrets.delete_acl": lambda c: c.secrets().delete_acl("s", "p"),
    "secrets.get_acl": lambda c: c.secrets().get_acl("s", "p"),
    "secrets.list_acls": lambda c: c.secrets().list_acls("s"),
    "token.create": lambda c: c.token().create(),
    "token.list": lambda c: c.token().list(),
    "token.revoke": lambda c: c.token().revoke("t"),
    "workspace.delete": lambda c: c.workspace().delete("/x"),
    "workspace.export": lambda c: c.workspace().export("/x"),
    "workspace.get_status": lambda c: c.workspace().get_status("/x"),
    "workspace.import": lambda c: c.workspace().import_("/x", b"x"),
    "workspace.list": lambda c: c.workspace().list("/x"),
    "workspace.mkdirs": lambda c: c.workspace().mkdirs("/x"),
}

READS = {
    "cluster.get",
    "cluster.list",
    "cluster.zones",
    "cluster.node_types",
    "cluster.spark_versions",
    "dbfs.get_status",
    "dbfs.list",
    "dbfs.read",
    "groups.members",
    "groups.list",
    "groups.user_parents",
    "groups.group_parents",
    "jobs.list",
    "jobs.get",
    "jobs.runs_list",
    "jobs.runs_get",
    "jobs.runs_export",
    "jobs.runs_get_output",
    "libraries.all_cluster_statuses",
    "libraries.cluster_status",
    "profiles.list",
    "secrets.list_scopes",
    "secrets.list_secrets",
    "secrets.get_acl",
    "secrets.list_acls",
    "token.list",
    "workspace.export",
    "workspace.get_status",
    "workspace.list",
}


@pytest.mark.parametrize("name", sorted(OPERATIONS))
def test_transport_failure_propagates(failing_client, name):
    """A connection error surfaces unchanged from every operation."""
    with pytest.raises(httpx.ConnectError):
        OPERATIONS[name](failing_client)


@pytest.mark.parametrize("name", sorted(OPERATIONS))
def test_non_success_status_fails(make_client, name):
    """A 418 fails every operation after exactly one request."""
    client, transport = make_client(418, {"cluster_id": "ignored"})
    with pytest.raises(ApiResponseError, match="418"):
        OPERATIONS[name](client)
    assert len(transport.requests) == 1


@pytest.mark.parametrize("name", sorted(OPERATIONS))
def test_method_and_path(make_client, name):
    """Reads are GETs, everything else is a POST below the 2.0 API."""
    client, transport = make_client(200, b"")
    OPERATIONS[name](client)

    assert len(transport.requests) == 1
    assert transport.last.method == ("GET" if name in READS else "POST")
    assert transport.last.url.path.startswith("/api/2.0/")
    if transport.last.method == "GET":
        assert transport.last.content == b""
