"""
Custom exceptions and error handling for the meeting action item extractor.

Provides:
- Typed exception hierarchy for different failure modes
- Error context preservation for debugging
- Partial success handling for multi-document runs
"""

from dataclasses import dataclass, field
from typing import Any


class ActionItemsError(Exception):
    """Base exception for all meeting action item errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


# =============================================================================
# Pipeline Errors
# =============================================================================


class PipelineError(ActionItemsError):
    """Base class for pipeline-related errors."""

    pass


class ValidationError(PipelineError):
    """Input validation failed."""

    pass


class InvalidPatternError(ValidationError):
    """Target name pattern is empty or not a valid regular expression."""

    pass


# =============================================================================
# Collaborator Errors
# =============================================================================


class CollaboratorError(ActionItemsError):
    """Base class for errors raised by external collaborators."""

    pass


class DocumentSourceError(CollaboratorError):
    """Document source could not list or fetch documents."""

    pass


class CardSinkError(CollaboratorError):
    """Card sink refused or failed to create a card."""

    pass


class RewriteError(CollaboratorError):
    """Task rewriter failed to produce a rewritten task."""

    pass


class AlertError(CollaboratorError):
    """Alert notifier failed to deliver an alert."""

    pass


_COLLABORATOR_ERRORS: dict[str, type[CollaboratorError]] = {
    'source': DocumentSourceError,
    'sink': CardSinkError,
    'rewriter': RewriteError,
    'notifier': AlertError,
}


# =============================================================================
# Partial Success Handling
# =============================================================================


@dataclass
class ItemResult:
    """Result for a single document in a run."""

    item_id: str | None
    success: bool
    error: ActionItemsError | None = None
    data: dict[str, Any] = field(default_factory=dict)


@dataclass
class PartialSuccessResult:
    """
    Result of a batch operation that may partially succeed.

    Allows processing to continue even when some documents fail,
    while preserving error context for debugging.
    """

    succeeded: list[ItemResult] = field(default_factory=list)
    failed: list[ItemResult] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.succeeded)

    @property
    def failure_count(self) -> int:
        return len(self.failed)

    @property
    def total_count(self) -> int:
        return self.success_count + self.failure_count

    @property
    def all_succeeded(self) -> bool:
        return self.failure_count == 0

    @property
    def all_failed(self) -> bool:
        return self.success_count == 0

    @property
    def partial_success(self) -> bool:
        return self.success_count > 0 and self.failure_count > 0

    def add_success(
        self,
        item_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        """Record a successful document."""
        self.succeeded.append(
            ItemResult(item_id=item_id, success=True, data=data or {})
        )

    def add_failure(
        self,
        error: ActionItemsError,
        item_id: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        """Record a failed document."""
        self.failed.append(
            ItemResult(item_id=item_id, success=False, error=error, data=data or {})
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'success_count': self.success_count,
            'failure_count': self.failure_count,
            'total_count': self.total_count,
            'all_succeeded': self.all_succeeded,
            'succeeded_ids': [r.item_id for r in self.succeeded if r.item_id],
            'failed_ids': [r.item_id for r in self.failed if r.item_id],
            'errors': [
                {'item_id': r.item_id, 'error': str(r.error)}
                for r in self.failed
                if r.error
            ],
        }


# =============================================================================
# Error Handling Utilities
# =============================================================================


def wrap_collaborator_error(
    exc: Exception,
    kind: str,
    context: dict[str, Any] | None = None,
) -> CollaboratorError:
    """
    Wrap an exception raised by an external collaborator in our typed hierarchy.

    Exceptions that are already CollaboratorErrors pass through unchanged.

    Args:
        exc: The original exception
        kind: Which collaborator raised it ('source', 'sink', 'rewriter', 'notifier')
        context: Additional context for debugging

    Returns:
        Typed CollaboratorError subclass
    """
    if isinstance(exc, CollaboratorError):
        return exc

    ctx = context or {}
    ctx['original_error'] = str(exc)
    ctx['error_type'] = type(exc).__name__

    error_cls = _COLLABORATOR_ERRORS.get(kind, CollaboratorError)
    return error_cls(f"{kind} failed: {exc}", context=ctx)
