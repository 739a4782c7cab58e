"""POST /extract — run the extraction pipeline over one document."""

from datetime import datetime
from typing import Any

import structlog
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from meeting_action_items.errors import InvalidPatternError
from meeting_action_items.pipeline.pipeline import ExtractionPipeline

from ..auth import verify_worker_token
from ..config import get_settings

logger = structlog.get_logger(__name__)

router = APIRouter()


class ExtractRequest(BaseModel):
    """One document to extract action items from."""

    document_name: str
    document_body: str
    document_created_at: datetime
    document_url: str = ""
    target_name_pattern: str | None = Field(
        default=None, description="Regex fragment; falls back to TARGET_NAME_PATTERN"
    )
    reference_time: datetime | None = Field(
        default=None, description="Reference time for due dates; defaults to arrival time"
    )


@router.post("/extract")
async def extract_action_items(
    payload: dict[str, Any],
    _auth: None = Depends(verify_worker_token),
):
    """Validate a document payload and return its deduplicated action items."""
    try:
        request = ExtractRequest.model_validate(payload)
    except Exception as e:
        raise HTTPException(status_code=422, detail=str(e))

    target_name_pattern = request.target_name_pattern or get_settings().TARGET_NAME_PATTERN
    # The clock is read here, at the boundary, never inside the pipeline
    reference_now = request.reference_time or datetime.now()

    log = logger.bind(document_name=request.document_name)
    log.info("extract.received")

    pipeline = ExtractionPipeline()
    try:
        result = pipeline.run_detailed(
            document_name=request.document_name,
            document_body=request.document_body,
            document_created_at=request.document_created_at,
            document_url=request.document_url,
            target_name_pattern=target_name_pattern,
            reference_now=reference_now,
        )
    except InvalidPatternError as e:
        log.warning("extract.invalid_pattern", error=str(e))
        raise HTTPException(status_code=422, detail=e.message)

    items = result.action_items
    log.info("extract.complete", count=len(items))
    return {
        "meeting": result.meeting_info.model_dump(mode="json"),
        "action_items": [item.model_dump(mode="json") for item in items],
        "count": len(items),
    }
