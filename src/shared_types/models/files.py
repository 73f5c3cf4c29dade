"""File-listing schema.

A ``DirectoryListing`` is what a file-browser backend reports for one
directory: the listed path and one ``FileEntry`` per child node.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, StrictInt

from shared_types.models.base import WireModel

EntryType = Literal["file", "directory"]


class FileEntry(WireModel):
    """A single filesystem node inside a listing."""

    name: str = Field(description="Base name of the node")
    type: EntryType = Field(description="Either 'file' or 'directory'")
    size: StrictInt = Field(ge=0, description="Size in bytes")
    mtime: str = Field(description="Last modification time, ISO-8601 string")

    @property
    def is_directory(self) -> bool:
        return self.type == "directory"


def entry_sort_key(entry: FileEntry) -> tuple[bool, str, str]:
    """Sort key placing directories first, then names case-insensitively."""
    return (not entry.is_directory, entry.name.casefold(), entry.name)


class DirectoryListing(WireModel):
    """The contents of one directory, in the order the producer returned them."""

    path: str = Field(description="Directory path that was listed")
    entries: tuple[FileEntry, ...] = Field(
        description="Child entries; may be empty",
    )

    def sorted(self) -> DirectoryListing:
        """Return a copy with directories first, then names case-insensitively."""
        return self.model_copy(update={"entries": tuple(sorted(self.entries, key=entry_sort_key))})
