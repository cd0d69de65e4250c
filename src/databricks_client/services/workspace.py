"""Workspace API: notebooks, libraries and folders in the workspace tree."""

import base64

from pydantic import Field

from ..types import ApiModel, ExportFormat, ObjectInfo
from .base import Service, decode_base64


class _ExportResponse(ApiModel):
    content: str = ""


class _ObjectList(ApiModel):
    objects: list[ObjectInfo] = Field(default_factory=list)


class WorkspaceService(Service):
    """Operations on ``2.0/workspace``."""

    resource = "workspace"

    def delete(self, path: str, recursive: bool = False) -> None:
        """Delete an object or a directory.

        A non-empty directory fails with DIRECTORY_NOT_EMPTY unless
        ``recursive`` is set. Recursive deletion is not atomic and cannot be
        undone.
        """
        self._post("delete", {"path": path, "recursive": recursive})

    def export(
        self,
        path: str,
        format: str = ExportFormat.SOURCE,  # noqa: A002
    ) -> bytes:
        """Export a notebook, or a whole directory in DBC format.

        Libraries cannot be exported.
        """
        res = self._get("export", {"path": path, "format": format}, _ExportResponse)
        return decode_base64(res.content, "content")

    def get_status(self, path: str) -> ObjectInfo:
        """Describe the object or directory at ``path``."""
        return self._get("get-status", {"path": path}, ObjectInfo)

    def import_(
        self,
        path: str,
        content: bytes,
        language: str | None = None,
        format: str = ExportFormat.SOURCE,  # noqa: A002
        overwrite: bool = False,
    ) -> None:
        """Import a notebook, or a whole directory in DBC format.

        ``language`` is required for the SOURCE format. Fails with
        RESOURCE_ALREADY_EXISTS if ``path`` exists and ``overwrite`` is not
        set; directories cannot be overwritten.
        """
        self._post(
            "import",
            {
                "path": path,
                "content": base64.b64encode(content).decode("ascii"),
                "language": language,
                "format": format,
                "overwrite": overwrite,
            },
        )

    def mkdirs(self, path: str) -> None:
        """Create a directory and any missing parents.

        A failed call may still have created some of the parents.
        """
        self._post("mkdirs", {"path": path})

    def list(self, path: str) -> list[ObjectInfo]:
        """List a directory, or describe the object at ``path``."""
        return self._get("list", {"path": path}, _ObjectList).objects
