"""shared-types - wire schemas for file listings and email messages.

This package provides Pydantic models describing directory listings and
email summaries/details, plus validation helpers for consumers of those
shapes.
"""

__version__ = "0.1.0"

from shared_types.config import Settings, get_settings
from shared_types.exceptions import SchemaValidationError, SharedTypesError
from shared_types.models import (
    DirectoryListing,
    EmailAttachment,
    EmailDetail,
    EmailSummary,
    FileEntry,
)

__all__ = [
    "DirectoryListing",
    "EmailAttachment",
    "EmailDetail",
    "EmailSummary",
    "FileEntry",
    "SchemaValidationError",
    "Settings",
    "SharedTypesError",
    "get_settings",
    "__version__",
]
