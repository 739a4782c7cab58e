"""
Extraction pipeline: the composition root of the extraction core.

Provides per-document processing:
1. Derive MeetingInfo from the document name and body
2. Extract candidate action items for the target person (two passes)
3. Collapse near-duplicates
4. Return the final items

The pipeline holds no per-document state and performs no I/O; the
reference time is always supplied by the caller.
"""

from dataclasses import dataclass, field
from datetime import datetime

from ..logging import PipelineTimer, get_logger
from ..models.action_item import ActionItem, MeetingInfo
from ..models.document import SourceDocument
from .deduplicator import Deduplicator
from .extractor import ActionItemExtractor
from .meeting_info import MeetingInfoExtractor

logger = get_logger(__name__)


@dataclass
class ExtractionResult:
    """Meeting metadata and final action items of one document."""

    meeting_info: MeetingInfo
    action_items: list[ActionItem] = field(default_factory=list)


class ExtractionPipeline:
    """
    End-to-end extraction over one document's text.

    Orchestrates:
    - MeetingInfoExtractor: title and date for the document
    - ActionItemExtractor: inline-cue and section-scoped passes
    - Deduplicator: first-occurrence-wins near-duplicate removal

    Usage:
        pipeline = ExtractionPipeline()
        items = pipeline.run(name, body, created_at, url, r"Filipe", reference_now)
    """

    def __init__(
        self,
        meeting_info_extractor: MeetingInfoExtractor | None = None,
        extractor: ActionItemExtractor | None = None,
        deduplicator: Deduplicator | None = None,
    ):
        self.meeting_info_extractor = meeting_info_extractor or MeetingInfoExtractor()
        self.extractor = extractor or ActionItemExtractor()
        self.deduplicator = deduplicator or Deduplicator()

    def run(
        self,
        document_name: str,
        document_body: str,
        document_created_at: datetime,
        document_url: str,
        target_name_pattern: str,
        reference_now: datetime,
    ) -> list[ActionItem]:
        """
        Extract the deduplicated action items of one document.

        See run_detailed for the arguments.

        Raises:
            InvalidPatternError: If target_name_pattern is empty or malformed
        """
        return self.run_detailed(
            document_name=document_name,
            document_body=document_body,
            document_created_at=document_created_at,
            document_url=document_url,
            target_name_pattern=target_name_pattern,
            reference_now=reference_now,
        ).action_items

    def run_detailed(
        self,
        document_name: str,
        document_body: str,
        document_created_at: datetime,
        document_url: str,
        target_name_pattern: str,
        reference_now: datetime,
    ) -> ExtractionResult:
        """
        Extract one document, keeping the derived MeetingInfo alongside the items.

        Args:
            document_name: Display name of the document
            document_body: Plain-text body
            document_created_at: Creation timestamp (fallback meeting date)
            document_url: Reference back to the document
            target_name_pattern: Regex fragment for the target person
            reference_now: Injected current time for due-date resolution

        Returns:
            ExtractionResult with the MeetingInfo and final items in discovery order

        Raises:
            InvalidPatternError: If target_name_pattern is empty or malformed
        """
        timer = PipelineTimer()

        with timer.stage('meeting_info'):
            meeting_info = self.meeting_info_extractor.extract(
                document_name=document_name,
                document_body=document_body,
                document_created_at=document_created_at,
                document_url=document_url,
            )

        with timer.stage('extraction'):
            candidates = self.extractor.extract(
                text=document_body,
                target_name_pattern=target_name_pattern,
                meeting_info=meeting_info,
                reference_now=reference_now,
            )

        with timer.stage('dedupe'):
            items = self.deduplicator.dedupe(candidates)

        logger.info(
            'pipeline.complete',
            meeting_title=meeting_info.title,
            candidates=len(candidates),
            action_items=len(items),
            **timer.summary(),
        )
        return ExtractionResult(
            meeting_info=meeting_info,
            action_items=items,
        )

    def run_document(
        self,
        document: SourceDocument,
        target_name_pattern: str,
        reference_now: datetime,
    ) -> list[ActionItem]:
        """Run the pipeline over a SourceDocument."""
        return self.run(
            document_name=document.name,
            document_body=document.text,
            document_created_at=document.created_at,
            document_url=document.url,
            target_name_pattern=target_name_pattern,
            reference_now=reference_now,
        )
