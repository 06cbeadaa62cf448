"""Framework-agnostic domain models."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field
from typing import Optional


@dataclass(eq=False)
class TextBlock:
    """One contiguous segment of document text.

    Densities are precomputed upstream; only ``is_content`` is written by the
    classifier. Blocks compare by identity, since two blocks with the same
    densities are still different positions in a document.
    """

    text_density: float
    link_density: float
    is_content: bool = False
    text: str = ""

    def set_is_content(self, is_content: bool) -> bool:
        """Set the label and return True if it changed."""
        if is_content == self.is_content:
            return False
        self.is_content = is_content
        return True


class _EmptyBlock(TextBlock):
    """Read-only zero-density block standing in for "no block"."""

    def __init__(self) -> None:
        super().__init__(text_density=0.0, link_density=0.0)
        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, name: str, value: object) -> None:
        if self.__dict__.get("_sealed"):
            raise FrozenInstanceError(f"cannot assign to field {name!r} of EMPTY_START")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return "EMPTY_START"


# Placeholder for the positions before the first and after the last block.
EMPTY_START: TextBlock = _EmptyBlock()


@dataclass
class TextDocument:
    """An ordered sequence of text blocks in reading order."""

    text_blocks: list[TextBlock] = field(default_factory=list)
    title: Optional[str] = None

    @property
    def content_blocks(self) -> list[TextBlock]:
        return [b for b in self.text_blocks if b.is_content]

    def __len__(self) -> int:
        return len(self.text_blocks)
