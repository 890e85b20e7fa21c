"""
FastAPI API routes.
"""

import time
from datetime import timezone
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from bunyan_view import __version__
from bunyan_view.api.dependencies import get_parser
from bunyan_view.models.errors import DecodeError
from bunyan_view.parsers.bunyan_parser import BunyanParser
from bunyan_view.processing import LineProcessor


router = APIRouter()


# Request/Response Models
class FormatRequest(BaseModel):
    """Request model for formatting log content."""
    log_content: str
    color: bool = False
    strict: bool = False
    utc: bool = True


class LineError(BaseModel):
    """A line that could not be decoded."""
    line_number: int
    kind: str
    detail: str


class FormatResponse(BaseModel):
    """Response model for formatted log content."""
    output: str
    total: int
    formatted: int
    failed: int
    errors: List[LineError]
    processing_time_ms: int


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


# Routes
@router.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@router.post("/api/format", response_model=FormatResponse)
async def format_logs(request: FormatRequest):
    """
    Pretty-print posted log content.
    
    Every line is decoded and formatted independently; lines that are
    not log records are echoed (or dropped when strict) and reported in
    ``errors``.
    """
    start_time = time.time()
    
    if not request.log_content or not request.log_content.strip():
        raise HTTPException(status_code=400, detail="Log content is required")
    
    processor = LineProcessor(
        use_color=request.color,
        strict=request.strict,
        collect_errors=True,
        tz=timezone.utc if request.utc else None,
    )
    # only "\n" ends a record, JSON strings may contain a raw U+2028
    output = "".join(processor.process(request.log_content.split("\n")))
    stats = processor.stats
    
    duration_ms = int((time.time() - start_time) * 1000)
    
    return FormatResponse(
        output=output,
        total=stats.total,
        formatted=stats.formatted,
        failed=stats.failed,
        errors=[
            LineError(line_number=e.line_number, kind=e.error.kind.value, detail=e.error.detail)
            for e in stats.errors
        ],
        processing_time_ms=duration_ms,
    )


@router.post("/api/decode")
async def decode_record(raw: dict, parser: BunyanParser = Depends(get_parser)):
    """
    Decode a single JSON log record without formatting it.
    
    Returns the normalized record; 422 with the error kind when the
    object is not a valid log record.
    """
    try:
        record = parser.decode(raw)
    except DecodeError as e:
        raise HTTPException(
            status_code=422,
            detail={"kind": e.kind.value, "detail": e.detail},
        )
    
    return record.model_dump(mode="json")
