"""Page cursor state."""

import math
from dataclasses import dataclass

from funfood.domain.exceptions import ValidationError


@dataclass
class Pagination:
    """Page/limit cursor over a server-reported total."""

    page: int = 1
    limit: int = 10
    total: int = 0

    def __post_init__(self) -> None:
        """Validate cursor."""
        if self.limit <= 0:
            raise ValidationError("Limit must be positive")
        self.page = max(self.page, 1)

    @property
    def total_pages(self) -> int:
        """Number of pages for the current total."""
        return math.ceil(self.total / self.limit)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    def next_page(self) -> None:
        """Advance one page, never past the last known page."""
        self.page = max(1, min(self.page + 1, self.total_pages))

    def prev_page(self) -> None:
        """Go back one page, never below the first."""
        self.page = max(self.page - 1, 1)

    def go_to_page(self, page: int) -> None:
        """Jump to a page, clamped to the known range."""
        if self.total_pages:
            page = min(page, self.total_pages)
        self.page = max(page, 1)

    def set_total(self, total: int) -> None:
        """Record the server-reported total."""
        if total < 0:
            raise ValidationError("Total must be non-negative")
        self.total = total

    def set_limit(self, limit: int) -> None:
        if limit <= 0:
            raise ValidationError("Limit must be positive")
        self.limit = limit
