"""Zero-based offset pagination."""
from __future__ import annotations

from dataclasses import dataclass

from store_api.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from store_api.core.exceptions import InvalidPaginationException


@dataclass(frozen=True)
class PageSpec:
    page: int = DEFAULT_PAGE
    size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        """Calculate offset for pagination."""
        return self.page * self.size

    @property
    def limit(self) -> int:
        return self.size


def resolve_page(
    page: int | None = None,
    size: int | None = None,
    default_size: int = DEFAULT_PAGE_SIZE,
) -> PageSpec:
    """
    Build a page window, substituting defaults for unset values.

    Raises InvalidPaginationException for a negative page index or a page
    size below one.
    """
    page = DEFAULT_PAGE if page is None else page
    size = default_size if size is None else size

    if page < 0:
        raise InvalidPaginationException(
            "Page index must be zero or greater", field="page_actual", value=page
        )
    if size < 1:
        raise InvalidPaginationException(
            "Page size must be greater than 0", field="page_size", value=size
        )
    return PageSpec(page=page, size=size)
