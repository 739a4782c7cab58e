"""
Pipeline components for action item extraction, date resolution and deduplication.
"""

from .deduplicator import Deduplicator, is_near_duplicate
from .due_dates import DueDateResolver
from .extractor import ActionItemExtractor
from .meeting_info import MeetingInfoExtractor
from .normalizer import clean, normalize_for_comparison
from .patterns import CuePattern, build_cue_patterns
from .pipeline import ExtractionPipeline, ExtractionResult

__all__ = [
    # Main Pipeline
    'ExtractionPipeline',
    'ExtractionResult',
    # Components
    'ActionItemExtractor',
    'MeetingInfoExtractor',
    'DueDateResolver',
    'Deduplicator',
    # Helpers
    'CuePattern',
    'build_cue_patterns',
    'clean',
    'normalize_for_comparison',
    'is_near_duplicate',
]
