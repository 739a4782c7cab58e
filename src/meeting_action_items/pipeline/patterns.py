"""
Declarative table of inline cue patterns for action item detection.

Each cue is a named, compiled regular expression built around the caller's
target-name fragment, plus the index of the group holding the action
description. New cue shapes are added here without touching the extractor.

Descriptions stop at the end of the sentence or line, or right before a
due phrase the resolver understands when that phrase closes the sentence
("by Friday.", "due: March 20", "deadline: Q2"). Words like "due" or "by"
inside the task itself ("due diligence", "by 20 percent") are kept.
"""

import re
from dataclasses import dataclass

from ..errors import InvalidPatternError
from .due_dates import DUE_PHRASES

# Lookahead for a resolvable due phrase closing the description's sentence
_DUE_CUE = (
    r'\s*,?\s+(?:'
    + '|'.join(phrase.pattern.pattern for phrase in DUE_PHRASES)
    + r')\s*(?=[.,\n]|$)'
)

# Sentence/line terminator for most cues
_END_OF_LINE = r'(?=' + _DUE_CUE + r'|[.\n]|$)'

# "<name> will ..." runs to the next period or the end of the text
_END_OF_SENTENCE = r'(?=' + _DUE_CUE + r'|\.|$)'

_NOT_WORD_BEFORE = r'(?<!\w)'


@dataclass(frozen=True)
class CuePattern:
    """One inline cue shape."""

    name: str
    pattern: re.Pattern[str]
    description_group: int = 1

    def descriptions(self, text: str):
        """Yield (match, raw description) for every occurrence in text."""
        for match in self.pattern.finditer(text):
            yield match, match.group(self.description_group)


# (name, template, extra flags); {name} is replaced by the target fragment
CUE_TEMPLATES: tuple[tuple[str, str, int], ...] = (
    (
        'will',
        _NOT_WORD_BEFORE + r'(?:{name})\s+will\s+([^.]+?)' + _END_OF_SENTENCE,
        0,
    ),
    (
        'to',
        _NOT_WORD_BEFORE + r'(?:{name})\s+to\s+([^.\n]+?)' + _END_OF_LINE,
        0,
    ),
    (
        'action_label',
        r'\baction(?:\s+item)?\s*:\s*(?:{name})\s*[-–—:]\s*([^.\n]+?)' + _END_OF_LINE,
        0,
    ),
    (
        'mention',
        r'@(?:{name})[: \t][ \t]*([^.\n]+?)' + _END_OF_LINE,
        0,
    ),
    (
        'checkbox',
        r'\[ ?\][ \t]*(?:{name})[: \t][ \t]*([^.\n]+?)' + _END_OF_LINE,
        0,
    ),
    (
        'bullet',
        r'^[ \t]*[-•*][ \t]*(?:{name})[: \t][ \t]*([^.\n]+?)' + _END_OF_LINE,
        re.MULTILINE,
    ),
    (
        'dash',
        _NOT_WORD_BEFORE + r'(?:{name})[ \t]*[-–—][ \t]*([^.\n]+?)' + _END_OF_LINE,
        0,
    ),
)


def compile_name_pattern(target_name_pattern: str) -> re.Pattern[str]:
    """
    Compile the caller's target-name fragment on its own.

    Raises:
        InvalidPatternError: If the fragment is empty or not a valid regex
    """
    if not target_name_pattern or not target_name_pattern.strip():
        raise InvalidPatternError(
            'Target name pattern is empty',
            context={'pattern': target_name_pattern},
        )
    try:
        return re.compile(target_name_pattern, re.IGNORECASE)
    except re.error as exc:
        raise InvalidPatternError(
            f'Target name pattern is not a valid regular expression: {exc}',
            context={'pattern': target_name_pattern},
        ) from exc


def build_cue_patterns(target_name_pattern: str) -> tuple[CuePattern, ...]:
    """
    Build the full cue table for one target name fragment.

    The fragment is inserted as-is; callers escape it when they want a
    literal match.

    Raises:
        InvalidPatternError: If the fragment is empty or breaks any cue pattern
    """
    # Groups inside the fragment shift the description group
    description_group = compile_name_pattern(target_name_pattern).groups + 1

    cues = []
    for name, template, flags in CUE_TEMPLATES:
        source = template.replace('{name}', target_name_pattern)
        try:
            compiled = re.compile(source, re.IGNORECASE | flags)
        except re.error as exc:
            raise InvalidPatternError(
                f'Target name pattern breaks cue {name!r}: {exc}',
                context={'pattern': target_name_pattern, 'cue': name},
            ) from exc
        cues.append(
            CuePattern(name=name, pattern=compiled, description_group=description_group)
        )
    return tuple(cues)
