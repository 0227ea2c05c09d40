"""
Pydantic models for API requests and responses
"""
from typing import List, Dict, Any, Optional
from pydantic import BaseModel, Field

from ..config import settings


class LinkRequest(BaseModel):
    """Request model for the link endpoint"""
    html: str = Field(..., description="Page markup to link", min_length=1, max_length=settings.max_html_chars)
    url: Optional[str] = Field(None, description="Page URL, used for per-site selectors and article extraction")
    article_selector: Optional[str] = Field(
        None,
        description="Comma-separated article-body selectors; overrides the site registry",
        max_length=1000
    )
    debug: bool = Field(False, description="Include the diagnostic trace in the response")
    two_phase: bool = Field(True, description="Discover entities on the extracted article text first")


class LinkStats(BaseModel):
    """Per-page linking statistics"""
    linked: int = Field(..., description="Number of distinct entities linked")
    mode: str = Field(..., description="'two-phase' or 'single-phase'")


class MatchLogEntry(BaseModel):
    """One injected link with surrounding words"""
    text: str
    url: str
    context: str


class DebugInfo(BaseModel):
    """Diagnostic trace of one linking run"""
    selector: str = Field(..., description="Article selector that was applied")
    discovered: List[str] = Field(default_factory=list, description="Entities found during discovery")
    discovery: Optional[Dict[str, Any]] = Field(None, description="Trace of the discovery phase")
    injection: Optional[Dict[str, Any]] = Field(None, description="Trace of the injection phase")


class LinkResponse(BaseModel):
    """Response model for the link endpoint"""
    html: str = Field(..., description="Linked page markup")
    stats: LinkStats
    match_log: List[MatchLogEntry] = Field(default_factory=list, description="Injected links in document order")
    debug_info: Optional[DebugInfo] = Field(None, description="Present when debug was requested")
    processing_time: Optional[float] = Field(None, description="Processing time in seconds")


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    version: str
    catalogue_size: int
    sites_configured: int


class ErrorResponse(BaseModel):
    """Error response model"""
    error: str
    detail: Optional[str] = None
    error_code: Optional[str] = None
