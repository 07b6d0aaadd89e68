from typing import Protocol

from mediashelf.application.common.pagination import PageWindow
from mediashelf.domain.common.value_objects.ids import BookId, UserId
from mediashelf.domain.library.entities.book import Book


class BookRepositoryProtocol(Protocol):
    def find_by_id(self, book_id: BookId) -> Book | None: ...

    def exists(self, book_id: BookId) -> bool: ...

    def find_by_content_hash(self, content_hash: str) -> Book | None: ...

    def save(self, book: Book) -> Book: ...

    def delete(self, book_id: BookId) -> None:
        """Remove the book and every library item that references it."""
        ...

    def find_by_owner(self, owner_id: UserId, window: PageWindow | None = None) -> list[Book]:
        """Books uploaded by the owner, newest first. ``None`` returns all of them."""
        ...

    def count_by_owner(self, owner_id: UserId) -> int: ...

    def find_latest_by_owner(self, owner_id: UserId) -> Book | None: ...
