"""Tests for TagResolver application service."""

from datetime import UTC, datetime

from mediashelf.application.library.services.tag_resolver import TagResolver, TagSpec
from mediashelf.domain.common.value_objects.ids import TagId
from mediashelf.domain.library.entities.tag import Tag


class FakeTagRepository:
    """In-memory tag store that counts lookups."""

    def __init__(self, tags: list[Tag] | None = None) -> None:
        self.tags = {tag.pair: tag for tag in tags or []}
        self.lookups = 0
        self.saved: list[Tag] = []

    def find_by_pairs(self, pairs: list[tuple[str, str]]) -> list[Tag]:
        self.lookups += 1
        return [self.tags[pair] for pair in pairs if pair in self.tags]

    def save(self, tag: Tag) -> Tag:
        persisted = Tag.create_with_id(
            id=TagId(len(self.tags) + 1),
            key=tag.key,
            value=tag.value,
            shown=tag.shown,
            created_at=tag.created_at,
            updated_at=tag.updated_at,
        )
        self.tags[persisted.pair] = persisted
        self.saved.append(persisted)
        return persisted


def _existing(id: int, key: str, value: str, shown: bool = True) -> Tag:
    now = datetime.now(UTC)
    return Tag.create_with_id(
        id=TagId(id), key=key, value=value, shown=shown, created_at=now, updated_at=now
    )


class TestTagResolver:
    def test_empty_input(self) -> None:
        repository = FakeTagRepository()
        assert TagResolver(repository).resolve([]) == []
        assert repository.lookups == 0

    def test_reuses_existing_tag(self) -> None:
        existing = _existing(7, "genre", "sf", shown=False)
        repository = FakeTagRepository([existing])

        result = TagResolver(repository).resolve([TagSpec("genre", "sf", shown=True)])

        assert result == [existing]
        assert result[0].shown is False
        assert repository.saved == []

    def test_creates_missing_tag_shown_by_default(self) -> None:
        repository = FakeTagRepository()

        result = TagResolver(repository).resolve([TagSpec("genre", "sf")])

        assert len(result) == 1
        assert result[0].id.value == 1
        assert result[0].shown is True

    def test_keeps_requested_visibility_for_new_tag(self) -> None:
        repository = FakeTagRepository()

        result = TagResolver(repository).resolve([TagSpec("internal", "x", shown=False)])

        assert result[0].shown is False

    def test_single_lookup_and_input_order(self) -> None:
        repository = FakeTagRepository([_existing(1, "b", "2")])

        result = TagResolver(repository).resolve(
            [TagSpec("a", "1"), TagSpec("b", "2"), TagSpec("c", "3")]
        )

        assert [tag.pair for tag in result] == [("a", "1"), ("b", "2"), ("c", "3")]
        assert repository.lookups == 1
        assert len(repository.saved) == 2

    def test_repeated_pair_maps_to_one_tag(self) -> None:
        repository = FakeTagRepository()

        result = TagResolver(repository).resolve([TagSpec("a", "1"), TagSpec("a", "1")])

        assert result[0] is result[1]
        assert len(repository.saved) == 1
