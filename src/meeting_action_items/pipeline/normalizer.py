"""
Text cleanup shared by extraction and deduplication.
"""

import re

_WHITESPACE = re.compile(r'\s+')

# Bullet and label decoration trimmed from both ends of a task
_DECORATION_CHARS = ' -•*:'


def clean(raw: str) -> str:
    """
    Collapse whitespace runs and trim bullet/dash/colon decoration.

    Idempotent: clean(clean(s)) == clean(s).
    """
    collapsed = _WHITESPACE.sub(' ', raw)
    return collapsed.strip(_DECORATION_CHARS)


def normalize_for_comparison(raw: str) -> str:
    """Lower-case and whitespace-normalize text for duplicate checks."""
    return _WHITESPACE.sub(' ', raw).strip().lower()
