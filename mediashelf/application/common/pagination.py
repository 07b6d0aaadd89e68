"""
Limit/offset pagination shared by every paged media library listing.

A listing is *paged* when the caller supplied ``limit`` or ``offset``. Paged
responses echo the effective window; unpaged responses return everything.

Example:
    window = normalize_page_window(limit=500, offset=-5)
    # PageWindow(take=100, skip=0)

    window = normalize_page_window(limit=None, offset=10**19)
    # PageWindow(take=20, skip=MAX_OFFSET)

    window = resolve_page_window(limit=None, offset=None)
    # None: return the full listing
"""

from dataclasses import dataclass

DEFAULT_PAGE_SIZE = 20

# Maximum allowed page size
MAX_PAGE_SIZE = 100

# Largest offset passed to the database; signed 32-bit so every backend accepts it.
MAX_OFFSET = 2**31 - 1


@dataclass(frozen=True)
class PageWindow:
    """
    Effective window for a paged query.

    Attributes:
        take: Number of rows to return (the echoed ``limit``)
        skip: Number of rows to skip (the echoed ``offset``)
    """

    take: int
    skip: int

    @property
    def limit(self) -> int:
        return self.take

    @property
    def offset(self) -> int:
        return self.skip


def is_paging_requested(limit: int | None, offset: int | None) -> bool:
    """Check whether the caller asked for a window at all."""
    return limit is not None or offset is not None


def normalize_page_window(
    limit: int | None,
    offset: int | None,
    default_size: int = DEFAULT_PAGE_SIZE,
    max_size: int = MAX_PAGE_SIZE,
) -> PageWindow:
    """
    Clamp raw limit/offset into an effective window.

    ``take`` falls back to ``default_size`` when absent or not positive and is
    capped at ``max_size``. ``skip`` falls back to 0 when absent or negative and
    is capped at ``MAX_OFFSET``.
    """
    take = limit if limit is not None and limit > 0 else default_size
    take = min(take, max_size)
    skip = offset if offset is not None and offset >= 0 else 0
    skip = min(skip, MAX_OFFSET)
    return PageWindow(take=take, skip=skip)


def resolve_page_window(
    limit: int | None,
    offset: int | None,
    default_size: int = DEFAULT_PAGE_SIZE,
    max_size: int = MAX_PAGE_SIZE,
) -> PageWindow | None:
    """Return the effective window, or ``None`` for an unpaged request."""
    if not is_paging_requested(limit, offset):
        return None
    return normalize_page_window(limit, offset, default_size, max_size)
