"""SQLAlchemy implementation of the Unit of Work port."""

from sqlalchemy.orm import Session

from mediashelf.application.common.unit_of_work import UnitOfWork


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of Work over the request-scoped session.

    Repositories only flush; this class owns commit and rollback, so every
    repository call made inside one ``with`` block lands in one transaction.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
