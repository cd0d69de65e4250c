"""Clusters API: create, resize, inspect and tear down Spark clusters."""

from pydantic import Field

from ..types import (
    ApiModel,
    Autoscale,
    ClusterCreateRequest,
    ClusterEditRequest,
    ClusterEventRequest,
    ClusterEventResponse,
    ClusterInfo,
    ClusterZoneResponse,
    NodeType,
    SparkVersion,
)
from .base import Service


class _CreateResponse(ApiModel):
    cluster_id: str = ""


class _ClusterList(ApiModel):
    clusters: list[ClusterInfo] = Field(default_factory=list)


class _NodeTypeList(ApiModel):
    node_types: list[NodeType] = Field(default_factory=list)


class _SparkVersionList(ApiModel):
    versions: list[SparkVersion] = Field(default_factory=list)


class ClusterService(Service):
    """Operations on ``2.0/clusters``."""

    resource = "clusters"

    def create(self, create_req: ClusterCreateRequest) -> str:
        """Create a new cluster and return its ID."""
        res = self._post("create", create_req, _CreateResponse)
        return res.cluster_id

    def edit(self, edit_req: ClusterEditRequest) -> None:
        """Edit the configuration of an existing cluster."""
        self._post("edit", edit_req)

    def start(self, cluster_id: str) -> None:
        """Start a terminated cluster.

        The cluster keeps its ID and attributes and starts with its last
        size (the minimum size for autoscaling clusters). Nothing happens if
        the cluster is not TERMINATED. Clusters launched to run a job cannot
        be started.
        """
        self._post("start", {"cluster_id": cluster_id})

    def restart(self, cluster_id: str) -> None:
        """Restart a cluster. Nothing happens unless it is RUNNING."""
        self._post("restart", {"cluster_id": cluster_id})

    def resize_workers(self, cluster_id: str, num_workers: int) -> None:
        """Resize a RUNNING cluster to a fixed number of workers."""
        self._post("resize", {"cluster_id": cluster_id, "num_workers": num_workers})

    def resize_autoscale(self, cluster_id: str, autoscale: Autoscale) -> None:
        """Resize a RUNNING cluster to autoscale between the given bounds."""
        self._post(
            "resize",
            {"cluster_id": cluster_id, "autoscale": autoscale.model_dump()},
        )

    def terminate(self, cluster_id: str) -> None:
        """Terminate a cluster; it stays listed and can be started again."""
        self._post("delete", {"cluster_id": cluster_id})

    def delete(self, cluster_id: str) -> None:
        """Permanently delete a cluster, terminating it first if running."""
        self._post("permanent-delete", {"cluster_id": cluster_id})

    def get(self, cluster_id: str) -> ClusterInfo:
        """Describe a cluster, running or terminated in the last 30 days."""
        return self._get("get", {"cluster_id": cluster_id}, ClusterInfo)

    def pin(self, cluster_id: str) -> None:
        """Keep the cluster in the list returned by :meth:`list`."""
        self._post("pin", {"cluster_id": cluster_id})

    def unpin(self, cluster_id: str) -> None:
        """Allow the cluster to eventually drop out of :meth:`list`."""
        self._post("unpin", {"cluster_id": cluster_id})

    def zones(self) -> ClusterZoneResponse:
        """List the availability zones clusters can be created in."""
        return self._get("list-zones", response_model=ClusterZoneResponse)

    def node_types(self) -> list[NodeType]:
        """List the node types clusters can be launched with."""
        return self._get("list-node-types", response_model=_NodeTypeList).node_types

    def spark_versions(self) -> list[SparkVersion]:
        """List the runtime versions clusters can be launched with."""
        return self._get("spark-versions", response_model=_SparkVersionList).versions

    def events(self, event_req: ClusterEventRequest) -> ClusterEventResponse:
        """Fetch one page of events about the activity of a cluster.

        ``next_page`` in the response holds the request for the following
        page, if there is one.
        """
        return self._post("events", event_req, ClusterEventResponse)

    def list(self) -> list[ClusterInfo]:
        """List pinned, active and recently terminated clusters.

        Returns every pinned and active cluster, up to 70 interactive
        clusters and up to 30 job clusters terminated in the last 30 days.
        """
        return self._get("list", response_model=_ClusterList).clusters
