"""Transaction boundary used by every mutating use case."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Port for committing a group of repository writes together.

    Use cases open it with ``with`` and call ``commit`` once at the end. Leaving
    the block through an exception rolls back; leaving it normally without a
    commit leaves the session to be discarded with the request.

        with self.unit_of_work:
            copy = self.library_repository.save(...)
            self.library_repository.add_items(...)
            self.unit_of_work.commit()
    """

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self.rollback()
