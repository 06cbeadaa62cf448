"""Boundary records exchanged with upstream producers and downstream consumers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..domain.models import TextBlock


class TextBlockRecord(BaseModel):
    """A text block as produced by the upstream density computation."""

    model_config = ConfigDict(populate_by_name=True)

    text_density: float = Field(alias="textDensity")
    link_density: float = Field(alias="linkDensity")
    is_content: bool = Field(default=False, alias="isContent")
    text: str = ""

    def to_block(self) -> TextBlock:
        return TextBlock(
            text_density=self.text_density,
            link_density=self.link_density,
            is_content=self.is_content,
            text=self.text,
        )


class BlockLabel(BaseModel):
    index: int
    is_content: bool
    changed: bool

    @classmethod
    def from_block(cls, index: int, block: TextBlock, changed: bool) -> BlockLabel:
        return cls(index=index, is_content=block.is_content, changed=changed)
