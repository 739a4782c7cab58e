"""
Due-date resolution from natural-language phrases.

Tries an ordered list of phrase patterns against a short context window
and turns the first match into a calendar date relative to an injected
reference time. This is a best-effort heuristic: anything it does not
recognize resolves to None, never to an exception.

Precedence (first match wins, case-insensitive):
1. by <weekday>
2. by <month> <day>[st|nd|rd|th][, <year>]
3. due[ date]: <month> <day>...
4. by end of week / by end of day / by eow / by eod
5. by <M/D> or by <M/D/YYYY>
6. deadline: <free text up to the next period or comma>
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from dateutil import parser as date_parser

from ..logging import get_logger

logger = get_logger(__name__)


WEEKDAYS: dict[str, int] = {
    'monday': 0,
    'tuesday': 1,
    'wednesday': 2,
    'thursday': 3,
    'friday': 4,
    'saturday': 5,
    'sunday': 6,
}

MONTH_PATTERN = (
    r'(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?'
    r'|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)'
)
_MONTH_DAY = MONTH_PATTERN + r'\.?\s+\d{1,2}(?:st|nd|rd|th)?(?:,?\s*\d{4})?'

_ORDINAL_SUFFIX = re.compile(r'(\d{1,2})(?:st|nd|rd|th)\b', re.IGNORECASE)
_EXPLICIT_YEAR = re.compile(r'\b\d{4}\b')

_END_OF_WEEK = {'end of week', 'eow'}
_END_OF_DAY = {'end of day', 'eod'}


@dataclass(frozen=True)
class DuePhrase:
    """One due-date cue shape, tried in table order."""

    name: str
    pattern: re.Pattern[str]


DUE_PHRASES: tuple[DuePhrase, ...] = (
    DuePhrase(
        'by_weekday',
        re.compile(r'\bby\s+(' + '|'.join(WEEKDAYS) + r')\b', re.IGNORECASE),
    ),
    DuePhrase(
        'by_month_day',
        re.compile(r'\bby\s+(' + _MONTH_DAY + r')\b', re.IGNORECASE),
    ),
    DuePhrase(
        'due_label',
        re.compile(r'\bdue(?:\s+date)?\s*:\s*(' + _MONTH_DAY + r')\b', re.IGNORECASE),
    ),
    DuePhrase(
        'by_end_of',
        re.compile(r'\bby\s+(end\s+of\s+(?:week|day)|eow|eod)\b', re.IGNORECASE),
    ),
    DuePhrase(
        'by_numeric',
        re.compile(r'\bby\s+(\d{1,2}/\d{1,2}(?:/\d{4})?)\b', re.IGNORECASE),
    ),
    DuePhrase(
        'deadline_label',
        re.compile(r'\bdeadline\s*:\s*([^.,\n]+)', re.IGNORECASE),
    ),
)


def _days_until(target_weekday: int, today: date) -> int:
    """Days until the next target weekday; never zero (same day means next week)."""
    return ((target_weekday - today.weekday() + 7) % 7) or 7


class DueDateResolver:
    """
    Resolves due-date phrases against an injected reference time.

    Usage:
        resolver = DueDateResolver()
        due = resolver.resolve("send it by Friday", reference_now)
    """

    def __init__(self, phrases: tuple[DuePhrase, ...] = DUE_PHRASES):
        self.phrases = phrases

    def resolve(self, context_text: str, reference_now: datetime) -> date | None:
        """
        Find the first due-date phrase in the context and resolve it.

        Args:
            context_text: Local text window around an action item
            reference_now: The injected "current time"

        Returns:
            The resolved calendar date, or None when nothing matches or parses
        """
        for phrase in self.phrases:
            match = phrase.pattern.search(context_text)
            if match is None:
                continue
            resolved = self.resolve_phrase(match.group(1), reference_now)
            logger.debug(
                'due_date.matched',
                phrase=phrase.name,
                captured=match.group(1),
                resolved=resolved.isoformat() if resolved else None,
            )
            return resolved
        return None

    def resolve_phrase(self, captured: str, reference_now: datetime) -> date | None:
        """Turn one captured phrase into a date relative to reference_now."""
        today = reference_now.date()
        phrase = ' '.join(captured.lower().split())

        if phrase in WEEKDAYS:
            return today + timedelta(days=_days_until(WEEKDAYS[phrase], today))
        if phrase in _END_OF_WEEK:
            return today + timedelta(days=_days_until(WEEKDAYS['friday'], today))
        if phrase in _END_OF_DAY:
            return today

        return self._parse_calendar_date(captured, today)

    def _parse_calendar_date(self, captured: str, today: date) -> date | None:
        """Generic calendar parsing with next-occurrence year rollover."""
        text = _ORDINAL_SUFFIX.sub(r'\1', captured.strip())
        if not text:
            return None

        default = datetime(today.year, today.month, today.day)
        try:
            parsed = date_parser.parse(text, default=default).date()
        except (ValueError, OverflowError):
            return None

        if parsed < today and not _EXPLICIT_YEAR.search(text):
            try:
                parsed = parsed.replace(year=parsed.year + 1)
            except ValueError:
                # Feb 29 has no counterpart next year
                return None
        return parsed
