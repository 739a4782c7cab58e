"""
Document runner: drives the extraction pipeline over a document source.

Per run:
1. List candidate documents from the source
2. Skip documents already in the processed set
3. Extract action items (pipeline errors fail only that document)
4. Rewrite each task (optional) and send a card per item
5. Mark fully delivered documents as processed
6. Alert once if any document failed

Documents are handled one at a time. The processed set is owned by the
caller and passed in by reference.
"""

import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol
from uuid import uuid4

from .errors import (
    PartialSuccessResult,
    PipelineError,
    wrap_collaborator_error,
)
from .logging import get_logger, logging_context
from .models.action_item import ActionItem
from .models.document import CardRequest, SourceDocument
from .pipeline.pipeline import ExtractionPipeline
from .processed import ProcessedDocumentSet

logger = get_logger(__name__)


# =============================================================================
# Collaborator Protocols
# =============================================================================


class DocumentSource(Protocol):
    """Supplies candidate meeting-notes documents."""

    async def list_documents(self) -> list[SourceDocument]: ...


class TaskRewriter(Protocol):
    """Produces the card title for an action item (e.g. a generative rewrite)."""

    async def rewrite(self, item: ActionItem) -> str: ...


class CardSink(Protocol):
    """Creates one card per action item and returns its identifier."""

    async def create_card(self, request: CardRequest) -> str: ...


class AlertNotifier(Protocol):
    """Delivers an operator alert (e.g. email)."""

    async def notify(self, subject: str, body: str) -> None: ...


# =============================================================================
# Result Model
# =============================================================================


@dataclass
class RunResult:
    """Outcome of one runner pass over the document source."""

    run_id: str
    documents_seen: int = 0
    documents_skipped: int = 0
    cards_created: int = 0
    card_ids: list[str] = field(default_factory=list)
    outcomes: PartialSuccessResult = field(default_factory=PartialSuccessResult)
    warnings: list[str] = field(default_factory=list)
    alert_sent: bool = False

    # Timing
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None
    processing_time_ms: int | None = None

    @property
    def success(self) -> bool:
        """True when no document failed."""
        return self.outcomes.all_succeeded

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'run_id': self.run_id,
            'documents_seen': self.documents_seen,
            'documents_skipped': self.documents_skipped,
            'cards_created': self.cards_created,
            'card_ids': self.card_ids,
            'outcomes': self.outcomes.to_dict(),
            'warnings': self.warnings,
            'alert_sent': self.alert_sent,
            'processing_time_ms': self.processing_time_ms,
            'success': self.success,
        }


# =============================================================================
# DocumentRunner
# =============================================================================


class DocumentRunner:
    """
    Runs the extraction pipeline over every unprocessed document.

    Usage:
        runner = DocumentRunner(source, sink, processed)
        result = await runner.run(r"Filipe", reference_now=datetime.now())
    """

    def __init__(
        self,
        source: DocumentSource,
        sink: CardSink,
        processed: ProcessedDocumentSet,
        rewriter: TaskRewriter | None = None,
        notifier: AlertNotifier | None = None,
        pipeline: ExtractionPipeline | None = None,
    ):
        """
        Initialize with the external collaborators.

        Args:
            source: Document source to list candidate documents from
            sink: Card sink receiving one request per action item
            processed: Caller-owned processed set, updated in place
            rewriter: Optional task rewriter; items keep their task when absent
            notifier: Optional alert notifier for failed documents
            pipeline: Extraction pipeline (default-constructed when omitted)
        """
        self.source = source
        self.sink = sink
        self.processed = processed
        self.rewriter = rewriter
        self.notifier = notifier
        self.pipeline = pipeline or ExtractionPipeline()

    async def run(self, target_name_pattern: str, reference_now: datetime) -> RunResult:
        """
        Process every document the source lists that is not yet processed.

        Args:
            target_name_pattern: Regex fragment for the target person
            reference_now: Injected current time for due-date resolution

        Returns:
            RunResult with per-document outcomes

        Raises:
            DocumentSourceError: If the source cannot list documents
        """
        t0 = time.monotonic()
        result = RunResult(run_id=uuid4().hex)

        with logging_context(run_id=result.run_id):
            try:
                documents = await self.source.list_documents()
            except Exception as exc:
                error = wrap_collaborator_error(exc, 'source')
                logger.error('runner.source_failed', error=str(error))
                raise error from exc

            result.documents_seen = len(documents)
            logger.info('runner.started', documents=len(documents))

            for document in documents:
                if document.id in self.processed:
                    result.documents_skipped += 1
                    continue
                with logging_context(document_id=document.id):
                    await self._process_document(
                        document, target_name_pattern, reference_now, result
                    )

            if not result.outcomes.all_succeeded:
                await self._send_alert(result)

            result.completed_at = datetime.now()
            result.processing_time_ms = int((time.monotonic() - t0) * 1000)

            logger.info(
                'runner.complete',
                documents_seen=result.documents_seen,
                documents_skipped=result.documents_skipped,
                cards_created=result.cards_created,
                failed=result.outcomes.failure_count,
                processing_time_ms=result.processing_time_ms,
            )

        return result

    async def _process_document(
        self,
        document: SourceDocument,
        target_name_pattern: str,
        reference_now: datetime,
        result: RunResult,
    ) -> None:
        try:
            items = self.pipeline.run_document(document, target_name_pattern, reference_now)
        except PipelineError as error:
            logger.error(
                'runner.document_failed',
                stage='extraction',
                error=str(error),
                error_type=type(error).__name__,
            )
            result.outcomes.add_failure(error, item_id=document.id)
            return

        card_ids: list[str] = []
        for item in items:
            title = await self._rewrite(item, result)
            request = CardRequest(
                action_item=item,
                title=title,
                due_date=item.due_date,
                document_id=document.id,
            )
            try:
                card_id = await self.sink.create_card(request)
            except Exception as exc:
                error = wrap_collaborator_error(
                    exc, 'sink', context={'task': item.task}
                )
                logger.error(
                    'runner.document_failed',
                    stage='card',
                    error=str(error),
                    error_type=type(error).__name__,
                )
                # Left unprocessed so a later run retries the document
                result.outcomes.add_failure(
                    error, item_id=document.id, data={'card_ids': card_ids}
                )
                result.cards_created += len(card_ids)
                result.card_ids.extend(card_ids)
                return
            card_ids.append(card_id)

        self.processed.add(document.id)
        result.cards_created += len(card_ids)
        result.card_ids.extend(card_ids)
        result.outcomes.add_success(
            item_id=document.id,
            data={'action_items': len(items), 'card_ids': card_ids},
        )
        logger.info('runner.document_complete', action_items=len(items))

    async def _rewrite(self, item: ActionItem, result: RunResult) -> str:
        if self.rewriter is None:
            return item.task
        try:
            rewritten = await self.rewriter.rewrite(item)
        except Exception as exc:
            error = wrap_collaborator_error(exc, 'rewriter', context={'task': item.task})
            logger.warning('runner.rewrite_failed', error=str(error))
            result.warnings.append(str(error))
            return item.task
        return rewritten.strip() or item.task

    async def _send_alert(self, result: RunResult) -> None:
        if self.notifier is None:
            return

        failed = result.outcomes.failed
        subject = f'Action item run {result.run_id}: {len(failed)} document(s) failed'
        body = '\n'.join(f'- {r.item_id}: {r.error}' for r in failed)
        try:
            await self.notifier.notify(subject, body)
        except Exception as exc:
            error = wrap_collaborator_error(exc, 'notifier')
            logger.error('runner.alert_failed', error=str(error))
            result.warnings.append(str(error))
            return
        result.alert_sent = True
