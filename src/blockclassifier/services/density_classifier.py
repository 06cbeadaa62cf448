"""Content/boilerplate classification of text blocks by density rules.

The rules are a decision tree learned offline with C4.8 over text and link
densities ("Boilerplate Detection using Shallow Text Features"). Each block is
classified from its own densities and those of its direct neighbours; the
positions before the first and after the last block are filled with the
zero-density ``EMPTY_START`` block.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping, Sequence

from pydantic import ValidationError

from ..domain.errors import InvalidInputError
from ..domain.models import EMPTY_START, TextBlock, TextDocument
from ..models.records import BlockLabel, TextBlockRecord
from ..observability.logger import get_logger

logger = get_logger(__name__)

# Fitted constants. Any change alters classification results.
MAX_CURR_LINK_DENSITY = 0.333333
MAX_PREV_LINK_DENSITY = 0.555556
MAX_CURR_TEXT_DENSITY = 9
MAX_NEXT_TEXT_DENSITY = 10
MIN_PREV_TEXT_DENSITY = 4
MIN_NEXT_TEXT_DENSITY_AFTER_LINKS = 11


def is_content_verdict(prev: TextBlock, curr: TextBlock, next: TextBlock) -> bool:
    """Evaluate the decision tree for ``curr`` without touching any block."""
    if curr.link_density <= MAX_CURR_LINK_DENSITY:
        if prev.link_density <= MAX_PREV_LINK_DENSITY:
            if curr.text_density <= MAX_CURR_TEXT_DENSITY:
                if next.text_density <= MAX_NEXT_TEXT_DENSITY:
                    return prev.text_density > MIN_PREV_TEXT_DENSITY
                return True
            return next.text_density != 0
        return next.text_density > MIN_NEXT_TEXT_DENSITY_AFTER_LINKS
    return False


def classify_one(prev: TextBlock, curr: TextBlock, next: TextBlock) -> bool:
    """Label ``curr`` and return True if its label changed."""
    return curr.set_is_content(is_content_verdict(prev, curr, next))


def _windows(blocks: Sequence[TextBlock]) -> Iterator[tuple[TextBlock, TextBlock, TextBlock]]:
    last = len(blocks) - 1
    for i, curr in enumerate(blocks):
        prev = blocks[i - 1] if i > 0 else EMPTY_START
        next = blocks[i + 1] if i < last else EMPTY_START
        yield prev, curr, next


def _classify_each(blocks: Sequence[TextBlock], classify=classify_one) -> list[bool]:
    return [classify(prev, curr, next) for prev, curr, next in _windows(blocks)]


def classify_document(blocks: Sequence[TextBlock]) -> bool:
    """Classify every block in reading order.

    Returns True if any block's ``is_content`` changed. An empty sequence is
    left alone and reports no change.
    """
    return any(_classify_each(blocks))


def classify_records(records: Iterable[Mapping[str, Any]]) -> list[BlockLabel]:
    """Validate raw block records, classify them as one document and return
    one label per record, in input order.

    Only the shape of each record is checked (required fields, numeric
    densities); density ranges are the producer's responsibility.
    """
    try:
        blocks = [TextBlockRecord.model_validate(r).to_block() for r in records]
    except ValidationError as e:
        logger.warning("invalid_text_block_records", error_count=e.error_count())
        raise InvalidInputError("text block records failed validation", detail=str(e)) from e

    changes = _classify_each(blocks)
    return [BlockLabel.from_block(i, b, changed) for i, (b, changed) in enumerate(zip(blocks, changes))]


class DensityRulesClassifier:
    """Document filter applying the density decision tree to every block.

    Subclasses may override ``classify`` to adjust the per-block rule; the
    window scan stays the same.
    """

    INSTANCE: DensityRulesClassifier

    @classmethod
    def get_instance(cls) -> DensityRulesClassifier:
        return cls.INSTANCE

    def process(self, doc: TextDocument) -> bool:
        blocks = doc.text_blocks
        if not blocks:
            return False

        changed = any(_classify_each(blocks, self.classify))
        logger.debug(
            "density_classification_completed",
            title=doc.title,
            blocks=len(blocks),
            content_blocks=len(doc.content_blocks),
            changed=changed,
        )
        return changed

    def classify(self, prev: TextBlock, curr: TextBlock, next: TextBlock) -> bool:
        return classify_one(prev, curr, next)


DensityRulesClassifier.INSTANCE = DensityRulesClassifier()
