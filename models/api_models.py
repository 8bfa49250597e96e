"""
Pydantic data models for API requests and responses.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ChatCompletionRequest(BaseModel):
    """
    Chat completion payload. Only ``messages`` is checked. Every other field,
    ``model`` included, is forwarded to the provider untouched.
    """
    model_config = ConfigDict(extra="allow")

    messages: List[Dict[str, Any]] = Field(..., min_length=1)


class FetchResponse(BaseModel):
    """Abstract text wrapped with its PubMed ID."""
    pmid: str
    abstract: str = ""


class StatusResponse(BaseModel):
    """Health report for /api/status."""
    status: str
    environment: str
    timestamp: str


class ErrorResponse(BaseModel):
    """Error envelope returned for every failure."""
    error: str
    details: Optional[Any] = None
