"""Common base for wire-format models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """Immutable model that reads either field names or wire aliases.

    Output always uses the wire aliases so that dumped values match the shape
    consumers expect.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialize to a JSON string keyed by wire names."""
        return self.model_dump_json(by_alias=True, indent=indent)
