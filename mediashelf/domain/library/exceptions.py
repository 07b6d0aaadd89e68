"""Library module domain exceptions."""

from mediashelf.domain.common.exceptions import (
    AuthorizationError,
    ConflictError,
    EntityNotFoundError,
)


class LibraryNotFoundError(EntityNotFoundError):
    """Raised when a media library cannot be found."""

    def __init__(self, library_id: int) -> None:
        super().__init__("Media library", library_id)


class ChildLibraryNotFoundError(EntityNotFoundError):
    """Raised when the library to nest does not exist."""

    def __init__(self, library_id: int) -> None:
        super().__init__("Child library", library_id)


class LibraryItemNotFoundError(EntityNotFoundError):
    """Raised when an item is missing or belongs to a different library."""

    def __init__(self, item_id: int) -> None:
        super().__init__("Library item", item_id)


class BookNotFoundError(EntityNotFoundError):
    """Raised when a book cannot be found."""

    def __init__(self, book_id: int) -> None:
        super().__init__("Book", book_id)


class ReadingRecordLibraryMissingError(EntityNotFoundError):
    """Raised when a user has no reading-history system library."""

    def __init__(self, user_id: int) -> None:
        super().__init__("Reading history library for user", user_id)


class LibraryPrivateError(AuthorizationError):
    def __init__(self) -> None:
        super().__init__("Private")


class NotLibraryOwnerError(AuthorizationError):
    def __init__(self) -> None:
        super().__init__("Not owner")


class SystemLibraryLockedError(AuthorizationError):
    def __init__(self) -> None:
        super().__init__("System library locked")


class DuplicateLibraryNameError(ConflictError):
    """Raised when the owner already has a library with this name."""

    def __init__(self, name: str) -> None:
        super().__init__("Library name already exists", {"name": name})
        self.name = name


class DuplicateLibraryBookError(ConflictError):
    def __init__(self, library_id: int, book_id: int) -> None:
        super().__init__(
            "Book already in library", {"library_id": library_id, "book_id": book_id}
        )


class DuplicateLibraryNestingError(ConflictError):
    def __init__(self, library_id: int, child_library_id: int) -> None:
        super().__init__(
            "Already nested",
            {"library_id": library_id, "child_library_id": child_library_id},
        )


class SelfNestingError(ConflictError):
    def __init__(self, library_id: int) -> None:
        super().__init__("Cannot nest into itself", {"library_id": library_id})


class NotBookOwnerError(AuthorizationError):
    """Only the uploader may edit or delete a book."""

    def __init__(self) -> None:
        super().__init__("Not owner")


class DuplicateContentHashError(ConflictError):
    def __init__(self, content_hash: str) -> None:
        super().__init__(
            "Book with this content hash already exists", {"content_hash": content_hash}
        )
