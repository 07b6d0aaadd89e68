from mediashelf.application.library.services.tag_resolver import TagResolver, TagSpec

__all__ = ["TagResolver", "TagSpec"]
