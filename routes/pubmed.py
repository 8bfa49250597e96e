"""
Route handlers for PubMed E-utilities relaying.
"""
from typing import Optional
from fastapi import APIRouter
from models.api_models import ErrorResponse, FetchResponse
from services.pubmed_service import PubMedService
from routes.relay_response import passthrough
from utils.constants import ErrorMessages
from utils.errors import RelayError, build_error_response
from utils.logger import app_logger

router = APIRouter(
    prefix="/api/pubmed",
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)


@router.get("/search")
async def search(term: Optional[str] = None, retmax: Optional[str] = None):
    """Search PubMed. retmax defaults to 30 and is capped at 100."""
    try:
        response = await PubMedService.search(term, retmax)
        return passthrough(response)
    except RelayError as e:
        app_logger.error(f"PubMed search failed: {type(e).__name__}: {e.message}")
        return build_error_response(e, ErrorMessages.SEARCH_FAILED)


@router.get("/summary")
async def summary(id: Optional[str] = None):
    """Document summaries for one PMID or a comma-separated batch."""
    try:
        response = await PubMedService.summary(id)
        return passthrough(response)
    except RelayError as e:
        app_logger.error(f"PubMed summary failed: {type(e).__name__}: {e.message}")
        return build_error_response(e, ErrorMessages.SUMMARY_FAILED)


@router.get("/fetch", response_model=FetchResponse)
async def fetch(id: Optional[str] = None, rettype: Optional[str] = None):
    """
    Plain-text abstract for a single PMID.
    Upstream failures return an empty abstract with status 200.
    """
    try:
        return await PubMedService.fetch(id, rettype)
    except RelayError as e:
        app_logger.error(f"PubMed fetch rejected: {type(e).__name__}: {e.message}")
        return build_error_response(e, ErrorMessages.FETCH_FAILED)
