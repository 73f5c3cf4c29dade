"""Data models for shared-types.

This module contains Pydantic models for the file-listing and mail-message
wire formats.
"""

from shared_types.models.base import WireModel
from shared_types.models.email import EmailAttachment, EmailDetail, EmailSummary
from shared_types.models.files import DirectoryListing, EntryType, FileEntry, entry_sort_key

__all__ = [
    "DirectoryListing",
    "EmailAttachment",
    "EmailDetail",
    "EmailSummary",
    "EntryType",
    "FileEntry",
    "WireModel",
    "entry_sort_key",
]
