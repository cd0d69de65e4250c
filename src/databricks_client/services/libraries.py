"""Libraries API: install and track libraries on clusters."""

from collections.abc import Iterable

from pydantic import Field

from ..types import ApiModel, ClusterLibraryStatuses, Library, LibraryFullStatus
from .base import Service


class _AllStatuses(ApiModel):
    statuses: list[ClusterLibraryStatuses] = Field(default_factory=list)


def _library_body(cluster_id: str, libraries: Iterable[Library]) -> dict:
    return {
        "cluster_id": cluster_id,
        "libraries": [
            library.model_dump(mode="json", exclude_none=True)
            for library in libraries
        ],
    }


class LibrariesService(Service):
    """Operations on ``2.0/libraries``.

    Statuses cover libraries installed through the API or the UI and
    libraries set to be installed on all clusters; for the latter
    ``is_library_for_all_clusters`` is true even if the library was also
    installed on the cluster directly.
    """

    resource = "libraries"

    def all_cluster_statuses(self) -> list[ClusterLibraryStatuses]:
        """Return the status of all libraries on all clusters."""
        return self._get(
            "all-cluster-statuses",
            response_model=_AllStatuses,
        ).statuses

    def cluster_status(self, cluster_id: str) -> list[LibraryFullStatus]:
        """Return the status of the libraries on one cluster."""
        return self._get(
            "cluster-status",
            {"cluster_id": cluster_id},
            ClusterLibraryStatuses,
        ).library_statuses

    def install(self, cluster_id: str, libraries: Iterable[Library]) -> None:
        """Install libraries on a cluster.

        Installation happens in the background after the call returns.
        """
        self._post("install", _library_body(cluster_id, libraries))

    def uninstall(self, cluster_id: str, libraries: Iterable[Library]) -> None:
        """Mark libraries for removal; they go away on the next restart."""
        self._post("uninstall", _library_body(cluster_id, libraries))
