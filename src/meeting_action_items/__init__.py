"""
Meeting Action Items

Extracts a named person's action items, due dates and meeting metadata
from free-form meeting notes, and deduplicates them before card creation.
"""

__version__ = '0.1.0'

# Re-export key classes for convenience
from .pipeline import (
    ExtractionPipeline,
    ActionItemExtractor,
    MeetingInfoExtractor,
    DueDateResolver,
    Deduplicator,
)
from .models import ActionItem, MeetingInfo, SourceDocument, CardRequest
from .processed import ProcessedDocumentSet
from .runner import DocumentRunner, RunResult
from .logging import (
    configure_logging,
    get_logger,
    logging_context,
    PipelineTimer,
)
from .errors import (
    ActionItemsError,
    PipelineError,
    ValidationError,
    InvalidPatternError,
    CollaboratorError,
    PartialSuccessResult,
)

__all__ = [
    # Version
    '__version__',
    # Main Pipeline
    'ExtractionPipeline',
    # Components
    'ActionItemExtractor',
    'MeetingInfoExtractor',
    'DueDateResolver',
    'Deduplicator',
    # Models
    'ActionItem',
    'MeetingInfo',
    'SourceDocument',
    'CardRequest',
    # Runner
    'DocumentRunner',
    'RunResult',
    'ProcessedDocumentSet',
    # Logging
    'configure_logging',
    'get_logger',
    'logging_context',
    'PipelineTimer',
    # Errors
    'ActionItemsError',
    'PipelineError',
    'ValidationError',
    'InvalidPatternError',
    'CollaboratorError',
    'PartialSuccessResult',
]
