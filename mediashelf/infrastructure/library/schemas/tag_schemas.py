"""Pydantic schemas for key/value tags."""

from pydantic import BaseModel, Field

from mediashelf.application.library.services.tag_resolver import TagSpec


class TagInput(BaseModel):
    """Tag requested by a client."""

    key: str = Field(..., min_length=1, max_length=64, description="Tag key")
    value: str = Field(..., min_length=1, max_length=128, description="Tag value")
    shown: bool | None = Field(None, description="Visibility, used only when the tag is new")

    def to_spec(self) -> TagSpec:
        return TagSpec(key=self.key, value=self.value, shown=self.shown)


class TagPair(BaseModel):
    """Wire representation of a tag embedded in another resource."""

    key: str
    value: str
