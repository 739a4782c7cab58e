"""
Models exchanged with the external collaborators.

SourceDocument is what a document source hands to the runner; CardRequest
is what the runner hands to a card sink.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from .action_item import ActionItem


class SourceDocument(BaseModel):
    """A meeting-notes document as supplied by the document source."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description='Stable identifier used for processed tracking')
    name: str = Field(..., description='Display name of the document')
    text: str = Field(..., description='Plain-text body')
    created_at: datetime = Field(..., description='Creation timestamp of the document')
    url: str = Field(..., description='Dereferenceable link to the document')


class CardRequest(BaseModel):
    """A card to create for one action item."""

    model_config = ConfigDict(frozen=True)

    action_item: ActionItem
    title: str = Field(..., min_length=1, description='Task text chosen by the caller (possibly rewritten)')
    due_date: date | None = None
    document_id: str
