"""Filter state for list queries."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class FilterState:
    """Unordered mapping of filter key to value."""

    values: dict[str, Any] = field(default_factory=dict)

    def update(self, key: str, value: Any) -> None:
        """Set a single filter."""
        self.values = {**self.values, key: value}

    def update_many(self, values: Mapping[str, Any]) -> None:
        """Merge several filters at once."""
        self.values = {**self.values, **values}

    def clear(self) -> None:
        """Drop all filters."""
        self.values = {}

    def snapshot(self) -> dict[str, Any]:
        """Copy of the current filters."""
        return dict(self.values)
