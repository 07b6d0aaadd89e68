"""Database models."""

from datetime import UTC, datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mediashelf.database import Base


def _utcnow() -> datetime:
    return datetime.now(UTC)


book_tags = Table(
    "book_tags",
    Base.metadata,
    Column("book_id", Integer, ForeignKey("books.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)

media_library_tags = Table(
    "media_library_tags",
    Base.metadata,
    Column(
        "library_id",
        Integer,
        ForeignKey("media_libraries.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class User(Base):
    """Registered account."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    hashed_password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, username='{self.username}')>"


class Tag(Base):
    """Shared key/value tag, unique on (key, value)."""

    __tablename__ = "tags"
    __table_args__ = (UniqueConstraint("key", "value", name="uq_tag_key_value"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    key: Mapped[str] = mapped_column(String(64), nullable=False)
    value: Mapped[str] = mapped_column(String(128), nullable=False)
    shown: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    def __repr__(self) -> str:
        """String representation of Tag."""
        return f"<Tag(id={self.id}, key='{self.key}', value='{self.value}')>"


class Book(Base):
    """Catalog entry uploaded by a user."""

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    content_hash: Mapped[str | None] = mapped_column(String(64), unique=True, nullable=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    tags: Mapped[list[Tag]] = relationship(secondary=book_tags, lazy="selectin")

    def __repr__(self) -> str:
        """String representation of Book."""
        return f"<Book(id={self.id}, title='{self.title}')>"


class MediaLibrary(Base):
    """User-curated collection of books and nested libraries."""

    __tablename__ = "media_libraries"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_media_library_owner_name"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_system: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    tags: Mapped[list[Tag]] = relationship(secondary=media_library_tags, lazy="selectin")

    def __repr__(self) -> str:
        """String representation of MediaLibrary."""
        return f"<MediaLibrary(id={self.id}, name='{self.name}')>"


class MediaLibraryItem(Base):
    """Membership row: a library holds one book or one nested child library."""

    __tablename__ = "media_library_items"
    __table_args__ = (
        UniqueConstraint("library_id", "book_id", name="uq_media_library_item_book"),
        UniqueConstraint(
            "library_id", "child_library_id", name="uq_media_library_item_child_library"
        ),
        CheckConstraint(
            "(book_id IS NULL) != (child_library_id IS NULL)",
            name="ck_media_library_item_single_target",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    library_id: Mapped[int] = mapped_column(
        ForeignKey("media_libraries.id", ondelete="CASCADE"), nullable=False, index=True
    )
    book_id: Mapped[int | None] = mapped_column(
        ForeignKey("books.id", ondelete="CASCADE"), nullable=True
    )
    child_library_id: Mapped[int | None] = mapped_column(
        ForeignKey("media_libraries.id", ondelete="CASCADE"), nullable=True
    )
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )

    child_library: Mapped[MediaLibrary | None] = relationship(
        foreign_keys=[child_library_id], lazy="joined"
    )

    def __repr__(self) -> str:
        """String representation of MediaLibraryItem."""
        return f"<MediaLibraryItem(id={self.id}, library_id={self.library_id})>"
