"""Resolve key/value tag specs to persisted, shared tags."""

from dataclasses import dataclass

import structlog

from mediashelf.application.library.protocols.tag_repository import TagRepositoryProtocol
from mediashelf.domain.library.entities.tag import Tag

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class TagSpec:
    """Requested tag. ``shown`` only applies when the tag gets created."""

    key: str
    value: str
    shown: bool | None = None


class TagResolver:
    """
    Application service turning tag specs into persisted Tag entities.

    Existing tags are reused by exact ``(key, value)``; missing ones are
    created with ``shown`` defaulting to True. Output follows input order and
    a pair repeated within one call maps to the same Tag.
    """

    def __init__(self, tag_repository: TagRepositoryProtocol) -> None:
        self.tag_repository = tag_repository

    def resolve(self, specs: list[TagSpec]) -> list[Tag]:
        if not specs:
            return []

        pairs = list(dict.fromkeys((spec.key, spec.value) for spec in specs))
        resolved: dict[tuple[str, str], Tag] = {
            tag.pair: tag for tag in self.tag_repository.find_by_pairs(pairs)
        }

        created = 0
        for spec in specs:
            pair = (spec.key, spec.value)
            if pair in resolved:
                continue
            shown = True if spec.shown is None else spec.shown
            resolved[pair] = self.tag_repository.save(Tag.create(spec.key, spec.value, shown))
            created += 1

        if created:
            logger.debug("tags_created", count=created)

        return [resolved[(spec.key, spec.value)] for spec in specs]
