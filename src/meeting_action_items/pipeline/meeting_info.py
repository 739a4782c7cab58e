"""
Meeting metadata derivation from a document's name and body.

Title: the document name minus the suffix that marks machine-generated
meeting notes and minus a trailing parenthesized date/time fragment.
Date: the first date phrase in the body that parses, otherwise the
document's creation timestamp.
"""

import re
from datetime import datetime, time

from dateutil import parser as date_parser

from ..config import config
from ..logging import get_logger
from ..models.action_item import MeetingInfo

logger = get_logger(__name__)

# Suffix appended to auto-generated meeting-notes documents
GENERATED_NOTES_SUFFIX = 'Anotações do Gemini'

_SUFFIX_PATTERN = re.compile(
    r'\s*[-–—]?\s*' + re.escape(GENERATED_NOTES_SUFFIX) + r'\s*$',
    re.IGNORECASE,
)
_TRAILING_PARENTHESIZED = re.compile(r'\s*\([^()]*\)\s*$')

_MONTH_NAME = (
    r'(?:January|February|March|April|May|June|July|August'
    r'|September|October|November|December)'
)

# (pattern, dayfirst) in precedence order
BODY_DATE_PATTERNS: tuple[tuple[re.Pattern[str], bool], ...] = (
    (re.compile(r'^[ \t]*(?:date|data)[ \t]*:[ \t]*([^\n]+)', re.IGNORECASE | re.MULTILINE), False),
    (re.compile(r'\b(' + _MONTH_NAME + r'\s+\d{1,2},\s*\d{4})\b', re.IGNORECASE), False),
    (re.compile(r'\b(\d{1,2}/\d{1,2}/\d{4})\b'), True),
)


class MeetingInfoExtractor:
    """Derives MeetingInfo for one document."""

    def __init__(self, default_title: str | None = None):
        self.default_title = default_title or config.DEFAULT_MEETING_TITLE

    def extract(
        self,
        document_name: str,
        document_body: str,
        document_created_at: datetime,
        document_url: str,
    ) -> MeetingInfo:
        """
        Build the MeetingInfo for a document.

        Args:
            document_name: Display name of the document
            document_body: Plain-text body
            document_created_at: Creation timestamp, used when the body has no date
            document_url: Reference back to the document

        Returns:
            MeetingInfo shared by every action item of the document
        """
        title = self.derive_title(document_name)
        meeting_date = self.derive_date(document_body, document_created_at)

        logger.debug(
            'meeting_info.extracted',
            title=title,
            meeting_date=meeting_date.isoformat(),
        )
        return MeetingInfo(title=title, date=meeting_date, document_url=document_url)

    def derive_title(self, document_name: str) -> str:
        title = _SUFFIX_PATTERN.sub('', document_name)
        title = _TRAILING_PARENTHESIZED.sub('', title)
        title = title.strip()
        return title or self.default_title

    def derive_date(self, document_body: str, document_created_at: datetime) -> datetime:
        # Missing fields fall back to the creation date so results are reproducible
        default = datetime.combine(document_created_at.date(), time())
        for pattern, dayfirst in BODY_DATE_PATTERNS:
            match = pattern.search(document_body)
            if match is None:
                continue
            try:
                return date_parser.parse(
                    match.group(1).strip(), default=default, dayfirst=dayfirst
                )
            except (ValueError, OverflowError):
                continue
        return document_created_at
