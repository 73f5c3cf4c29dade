"""Validation at the schema-consumer boundary.

Consumers receive plain dicts or JSON from producers. The helpers here turn
those into model instances, and report any shape mismatch (missing field,
wrong primitive type, out-of-set literal) as ``SchemaValidationError`` rather
than coercing it.
"""

from __future__ import annotations

from typing import Any, TypeVar

import pydantic
import structlog

from shared_types.exceptions import SchemaValidationError, UnknownSchemaError
from shared_types.models import (
    DirectoryListing,
    EmailAttachment,
    EmailDetail,
    EmailSummary,
    FileEntry,
    WireModel,
)

logger = structlog.get_logger()

M = TypeVar("M", bound=WireModel)

SCHEMAS: dict[str, type[WireModel]] = {
    "file-entry": FileEntry,
    "directory-listing": DirectoryListing,
    "email-summary": EmailSummary,
    "email-detail": EmailDetail,
    "email-attachment": EmailAttachment,
}


def schema_name(model: type[WireModel]) -> str:
    for name, candidate in SCHEMAS.items():
        if candidate is model:
            return name
    return model.__name__


def get_schema(name: str) -> type[WireModel]:
    """Look up a registered schema by name.

    Raises:
        UnknownSchemaError: If no schema is registered under ``name``.
    """
    try:
        return SCHEMAS[name]
    except KeyError:
        known = ", ".join(sorted(SCHEMAS))
        raise UnknownSchemaError(f"Unknown schema {name!r}; expected one of: {known}") from None


def schema_error(model: type[WireModel], exc: pydantic.ValidationError) -> SchemaValidationError:
    """Convert a pydantic error for ``model`` into ``SchemaValidationError``."""
    name = schema_name(model)
    errors = exc.errors(include_url=False)
    logger.warning("schema_validation_failed", schema=name, error_count=len(errors))
    return SchemaValidationError(name, errors)


def validate(model: type[M], data: Any) -> M:
    """Validate a Python object against ``model``.

    Args:
        model: Schema model class.
        data: Candidate value, usually a dict keyed by wire names.

    Returns:
        The validated model instance.

    Raises:
        SchemaValidationError: If ``data`` does not conform to the shape.
    """
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        raise schema_error(model, exc) from exc


def validate_json(model: type[M], raw: str | bytes) -> M:
    """Validate a JSON document against ``model``.

    Malformed JSON is reported the same way as a shape mismatch.
    """
    try:
        return model.model_validate_json(raw)
    except pydantic.ValidationError as exc:
        raise schema_error(model, exc) from exc


def is_valid(model: type[WireModel], data: Any) -> bool:
    try:
        model.model_validate(data)
    except pydantic.ValidationError:
        return False
    return True


def validate_document(name: str, data: Any) -> WireModel:
    """Validate ``data`` against the schema registered as ``name``."""
    return validate(get_schema(name), data)


def json_schema(name: str) -> dict[str, Any]:
    """Return the JSON Schema for a registered schema, keyed by wire names."""
    return get_schema(name).model_json_schema(by_alias=True)


def parse_file_entry(data: Any) -> FileEntry:
    return validate(FileEntry, data)


def parse_directory_listing(data: Any) -> DirectoryListing:
    return validate(DirectoryListing, data)


def parse_email_summary(data: Any) -> EmailSummary:
    return validate(EmailSummary, data)


def parse_email_detail(data: Any) -> EmailDetail:
    return validate(EmailDetail, data)
