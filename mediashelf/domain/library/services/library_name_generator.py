"""Destination names for copied media libraries."""

from collections.abc import Callable, Iterator

from mediashelf.domain.library.entities.media_library import MAX_LIBRARY_NAME_LENGTH


class LibraryCopyNameGenerator:
    """
    Domain service producing a free library name for a copy.

    Candidates are probed in order: ``"{name}"``, ``"{name} (copy)"``,
    ``"{name} (copy 2)"``, ``"{name} (copy 3)"`` and so on. When a candidate
    would exceed the maximum name length the base is shortened so the
    suffix survives, which keeps every candidate distinct.
    """

    def __init__(self, max_length: int = MAX_LIBRARY_NAME_LENGTH) -> None:
        self.max_length = max_length

    def candidates(self, base_name: str) -> Iterator[str]:
        yield base_name[: self.max_length]
        yield self._fit(base_name, " (copy)")
        index = 2
        while True:
            yield self._fit(base_name, f" (copy {index})")
            index += 1

    def generate(self, base_name: str, is_taken: Callable[[str], bool]) -> str:
        """
        Return the first candidate for which ``is_taken`` is false.

        Args:
            base_name: Name of the source library
            is_taken: Callback telling whether the requester already owns a
                library with the given name

        Returns:
            A name of at most ``max_length`` characters
        """
        return next(name for name in self.candidates(base_name) if not is_taken(name))

    def _fit(self, base_name: str, suffix: str) -> str:
        room = self.max_length - len(suffix)
        return f"{base_name[:room].rstrip()}{suffix}"
