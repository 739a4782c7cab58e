"""
Action item extraction from meeting-notes text.

Two independent passes feed one candidate list:

Pass A (inline cues): every cue in the pattern table is matched over the
whole text. A sentence can satisfy several cues at once; the overlap is
absorbed by deduplication downstream.

Pass B (section scan): only lines inside a "suggested next steps" section
that mention the target name. The section opens at one of the known
heading phrases and closes at the next all-caps heading-like line.
"""

from datetime import datetime

from ..config import config
from ..logging import get_logger
from ..models.action_item import MIN_TASK_LENGTH, ActionItem, MeetingInfo
from .deduplicator import has_near_duplicate
from .due_dates import DueDateResolver
from .normalizer import clean
from .patterns import build_cue_patterns, compile_name_pattern

logger = get_logger(__name__)

# Headings that open the suggested-next-steps section of generated notes
NEXT_STEPS_HEADINGS: tuple[str, ...] = (
    'Próximas etapas sugeridas',
    'Próximos passos sugeridos',
)

# Leading decoration left over once the name is removed from a section line
_LEADING_DECORATION = ' \t-–—•*:[]'


def is_heading_line(line: str) -> bool:
    """All-caps-like line: starts uppercase, has no lowercase, longer than 3."""
    stripped = line.strip()
    if len(stripped) <= 3:
        return False
    if not stripped[0].isupper():
        return False
    return not any(ch.islower() for ch in stripped)


def opens_next_steps_section(line: str) -> bool:
    lowered = line.lower()
    return any(heading.lower() in lowered for heading in NEXT_STEPS_HEADINGS)


class ActionItemExtractor:
    """
    Extracts action items for one target person from meeting notes.

    Usage:
        extractor = ActionItemExtractor()
        items = extractor.extract(text, r"Filipe", meeting_info, reference_now)
    """

    def __init__(
        self,
        due_date_resolver: DueDateResolver | None = None,
        due_date_window: int | None = None,
    ):
        self.due_date_resolver = due_date_resolver or DueDateResolver()
        self.due_date_window = (
            config.DUE_DATE_WINDOW_CHARS if due_date_window is None else due_date_window
        )

    def extract(
        self,
        text: str,
        target_name_pattern: str,
        meeting_info: MeetingInfo,
        reference_now: datetime,
    ) -> list[ActionItem]:
        """
        Run both passes and return the accumulated (not yet deduplicated) items.

        Args:
            text: Plain-text body of the meeting notes
            target_name_pattern: Regex fragment for the target person (not escaped here)
            meeting_info: Metadata copied into every item
            reference_now: Injected current time for due-date resolution

        Returns:
            Candidate action items in discovery order, Pass A first

        Raises:
            InvalidPatternError: If target_name_pattern is empty or malformed
        """
        cues = build_cue_patterns(target_name_pattern)
        name_pattern = compile_name_pattern(target_name_pattern)

        items = self._scan_inline_cues(text, cues, meeting_info, reference_now)
        inline_count = len(items)
        logger.debug('extraction.pass_a_complete', count=inline_count)

        self._scan_next_steps_section(text, name_pattern, meeting_info, reference_now, items)
        logger.debug('extraction.pass_b_complete', count=len(items) - inline_count)

        return items

    def _scan_inline_cues(
        self,
        text: str,
        cues,
        meeting_info: MeetingInfo,
        reference_now: datetime,
    ) -> list[ActionItem]:
        items: list[ActionItem] = []
        for cue in cues:
            for match, description in cue.descriptions(text):
                task = clean(description)
                if len(task) <= MIN_TASK_LENGTH:
                    continue

                start = match.start()
                window = text[start:match.end() + self.due_date_window]
                due_date = self.due_date_resolver.resolve(window, reference_now)

                items.append(
                    ActionItem.from_meeting(
                        meeting_info,
                        task=task,
                        due_date=due_date,
                        raw_text=match.group(0),
                    )
                )
        return items

    def _scan_next_steps_section(
        self,
        text: str,
        name_pattern,
        meeting_info: MeetingInfo,
        reference_now: datetime,
        items: list[ActionItem],
    ) -> None:
        lines = text.splitlines()
        in_section = False

        for index, line in enumerate(lines):
            if opens_next_steps_section(line):
                in_section = True
                continue
            if not in_section:
                continue
            if is_heading_line(line):
                in_section = False
                continue
            if not name_pattern.search(line):
                continue

            remainder = name_pattern.sub('', line, count=1)
            task = clean(remainder.lstrip(_LEADING_DECORATION))
            if len(task) <= MIN_TASK_LENGTH:
                continue
            if has_near_duplicate(task, items):
                continue

            following = lines[index + 1] if index + 1 < len(lines) else ''
            due_date = self.due_date_resolver.resolve(
                f'{line}\n{following}', reference_now
            )

            items.append(
                ActionItem.from_meeting(
                    meeting_info,
                    task=task,
                    due_date=due_date,
                    raw_text=line,
                )
            )
