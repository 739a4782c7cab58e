"""
ActionItem and MeetingInfo value objects.

MeetingInfo is derived once per document and copied into every ActionItem
extracted from that document. Both are frozen: items are filtered or passed
through, never updated in place.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

# Descriptions this short or shorter are not action items
MIN_TASK_LENGTH = 5


class MeetingInfo(BaseModel):
    """Meeting metadata shared by all action items of one document."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description='Meeting title derived from the document name')
    date: datetime = Field(
        ..., description='Meeting date from the body, or the document creation timestamp'
    )
    document_url: str = Field(..., description='Opaque reference back to the source document')


class ActionItem(BaseModel):
    """
    A commitment extracted from meeting notes for the target person.

    Instances have no identity beyond their field values.
    """

    model_config = ConfigDict(frozen=True)

    task: str = Field(
        ..., min_length=MIN_TASK_LENGTH + 1, description='Cleaned description of the committed action'
    )
    due_date: date | None = Field(
        default=None, description='Resolved calendar date, if a due-date cue was found'
    )
    meeting_title: str = Field(..., min_length=1)
    meeting_date: datetime
    document_url: str
    raw_text: str = Field(
        default='', description='Original matched substring, kept for diagnostics'
    )

    @classmethod
    def from_meeting(
        cls,
        meeting: MeetingInfo,
        task: str,
        due_date: date | None,
        raw_text: str,
    ) -> 'ActionItem':
        """Build an action item carrying a copy of the document's meeting info."""
        return cls(
            task=task,
            due_date=due_date,
            meeting_title=meeting.title,
            meeting_date=meeting.date,
            document_url=meeting.document_url,
            raw_text=raw_text,
        )
