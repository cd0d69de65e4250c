"""Endpoint groups of the Databricks REST API.

One handle class per resource family. Handles are minted by
:class:`databricks_client.DatabricksClient` and share its transport.
"""

from .base import API_VERSION, Service
from .cluster import ClusterService
from .dbfs import DBFSService
from .groups import GroupsService
from .jobs import JobsService
from .libraries import LibrariesService
from .profiles import ProfilesService
from .secrets import SecretsService
from .token import TokenService
from .workspace import WorkspaceService

__all__ = [
    "API_VERSION",
    "ClusterService",
    "DBFSService",
    "GroupsService",
    "JobsService",
    "LibrariesService",
    "ProfilesService",
    "SecretsService",
    "Service",
    "TokenService",
    "WorkspaceService",
]
