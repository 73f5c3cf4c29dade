"""Custom exceptions for shared-types."""

from __future__ import annotations

from typing import Any


class SharedTypesError(Exception):
    """Base exception for all shared-types errors."""


class SchemaValidationError(SharedTypesError):
    """Exception raised when a value does not conform to a schema.

    Attributes:
        schema: Name of the schema the value was checked against.
        errors: Structured error list as reported by pydantic.
    """

    def __init__(self, schema: str, errors: list[dict[str, Any]]) -> None:
        self.schema = schema
        self.errors = errors
        super().__init__(self._summarize())

    def _summarize(self) -> str:
        parts = []
        for err in self.errors:
            loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
            parts.append(f"{loc}: {err.get('msg', 'invalid')}")
        detail = "; ".join(parts) if parts else "invalid value"
        return f"{self.schema} shape mismatch: {detail}"


class UnknownSchemaError(SharedTypesError):
    """Exception raised when a schema name is not registered."""


class ConfigurationError(SharedTypesError):
    """Exception raised for configuration related errors."""
