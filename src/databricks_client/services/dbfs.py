"""DBFS API: files and streaming uploads on the Databricks File System.

Binary content travels base64 encoded inside the JSON bodies; callers deal in
``bytes`` only.
"""

import base64

from pydantic import Field

from ..types import ApiModel, FileInfo, ReadResult
from .base import Service, decode_base64


class _CreateResponse(ApiModel):
    handle: int = 0


class _ReadResponse(ApiModel):
    bytes_read: int = 0
    data: str = ""


class _FileList(ApiModel):
    files: list[FileInfo] = Field(default_factory=list)


class DBFSService(Service):
    """Operations on ``2.0/dbfs``.

    Large uploads go through a stream: :meth:`create` a handle, send the
    content in :meth:`add_block` calls of at most 1 MB each, then
    :meth:`close` the handle.
    """

    resource = "dbfs"

    def add_block(self, handle: int, data: bytes) -> None:
        """Append a block of data to the stream behind ``handle``."""
        self._post(
            "add-block",
            {"handle": handle, "data": base64.b64encode(data).decode("ascii")},
        )

    def close(self, handle: int) -> None:
        """Close the stream behind ``handle``."""
        self._post("close", {"handle": handle})

    def create(self, path: str, overwrite: bool = False) -> int:
        """Open a stream to write a file and return its handle.

        Handles time out after 10 minutes of inactivity.
        """
        res = self._post(
            "create",
            {"path": path, "overwrite": overwrite},
            _CreateResponse,
        )
        return res.handle

    def delete(self, path: str, recursive: bool = False) -> None:
        """Delete a file or directory.

        Deleting a non-empty directory fails with IO_ERROR unless
        ``recursive`` is set.
        """
        self._post("delete", {"path": path, "recursive": recursive})

    def get_status(self, path: str) -> FileInfo:
        """Return the file information of a file or directory."""
        return self._get("get-status", {"path": path}, FileInfo)

    def mkdirs(self, path: str) -> None:
        """Create a directory and any missing parents.

        A failed call may still have created some of the parents.
        """
        self._post("mkdirs", {"path": path})

    def move(self, source_path: str, destination_path: str) -> None:
        """Move a file or directory within DBFS."""
        self._post(
            "move",
            {"source_path": source_path, "destination_path": destination_path},
        )

    def put(self, path: str, content: bytes, overwrite: bool = False) -> None:
        """Upload a file in a single call. Content is limited to 1 MB."""
        self._post(
            "put",
            {
                "path": path,
                "contents": base64.b64encode(content).decode("ascii"),
                "overwrite": overwrite,
            },
        )

    def read(
        self,
        path: str,
        offset: int = 0,
        length: int | None = None,
    ) -> ReadResult:
        """Read up to ``length`` bytes (at most 1 MB) starting at ``offset``.

        Reading past the end of the file returns what is left.
        """
        res = self._get(
            "read",
            {"path": path, "offset": offset, "length": length},
            _ReadResponse,
        )
        return ReadResult(
            bytes_read=res.bytes_read,
            data=decode_base64(res.data, "data"),
        )

    def list(self, path: str) -> list[FileInfo]:
        """List a directory, or describe the file at ``path``."""
        return self._get("list", {"path": path}, _FileList).files
