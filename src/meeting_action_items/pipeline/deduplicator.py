"""
Near-duplicate removal for extracted action items.

Two tasks are duplicates when, after lower-casing and whitespace
normalization, either one contains the other. This is deliberately
permissive: "send report" collapses into "send report to client", which
also means a short generic task can absorb an unrelated longer one.
"""

from collections.abc import Iterable

from ..logging import get_logger
from ..models.action_item import ActionItem
from .normalizer import normalize_for_comparison

logger = get_logger(__name__)


def is_near_duplicate(task_a: str, task_b: str) -> bool:
    """True when either normalized task is a substring of the other."""
    a = normalize_for_comparison(task_a)
    b = normalize_for_comparison(task_b)
    return a in b or b in a


def has_near_duplicate(task: str, existing: Iterable[ActionItem]) -> bool:
    """True when task is a near-duplicate of any existing item."""
    return any(is_near_duplicate(task, item.task) for item in existing)


class Deduplicator:
    """Order-preserving, first-occurrence-wins deduplication."""

    def dedupe(self, items: list[ActionItem]) -> list[ActionItem]:
        kept: list[ActionItem] = []
        for item in items:
            if has_near_duplicate(item.task, kept):
                continue
            kept.append(item)

        if len(kept) != len(items):
            logger.debug(
                'dedupe.collapsed',
                input_count=len(items),
                output_count=len(kept),
            )
        return kept
