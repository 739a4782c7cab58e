"""
Data models for the meeting action item extractor.
"""

from .action_item import ActionItem, MeetingInfo
from .document import CardRequest, SourceDocument

__all__ = [
    'ActionItem',
    'MeetingInfo',
    'CardRequest',
    'SourceDocument',
]
