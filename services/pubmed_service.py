"""
PubMed E-utilities relay service.
Builds search, summary and fetch calls with the server-held API key.
"""
from typing import Optional
import httpx
from config import Config
from models.api_models import FetchResponse
from models.relay_models import UpstreamCall
from services.upstream import UpstreamCaller
from utils.constants import EUtils, Upstream
from utils.errors import RelayError
from utils.http_client import HTTPClientManager
from utils.logger import app_logger
from utils.validators import clamp_retmax, require_pmid, require_rettype, require_term


class PubMedService:
    """Service for relaying PubMed E-utilities requests."""

    @staticmethod
    def _params(extra: dict) -> dict:
        """Common query parameters. The key is only attached when configured."""
        params = {"db": EUtils.DATABASE, **extra}
        if Config.PUBMED_API_KEY:
            params["api_key"] = Config.PUBMED_API_KEY
        return params

    @staticmethod
    def _call(endpoint: str, params: dict) -> UpstreamCall:
        return UpstreamCall(
            upstream=Upstream.PUBMED,
            method="GET",
            url=f"{Config.PUBMED_BASE_URL.rstrip('/')}/{endpoint}",
            timeout=Config.PUBMED_TIMEOUT,
            params=PubMedService._params(params),
        )

    @staticmethod
    def build_search_call(term: Optional[str], retmax: Optional[str] = None) -> UpstreamCall:
        """Validate search parameters and build the esearch call."""
        term = require_term(term)
        return PubMedService._call(EUtils.SEARCH, {
            "term": term,
            "retmax": clamp_retmax(retmax),
            "retmode": "json",
        })

    @staticmethod
    def build_summary_call(pmid: Optional[str]) -> UpstreamCall:
        """Validate one PMID or a comma-separated batch and build the esummary call."""
        pmid = require_pmid(pmid, allow_batch=True)
        return PubMedService._call(EUtils.SUMMARY, {
            "id": pmid,
            "retmode": "json",
        })

    @staticmethod
    def build_fetch_call(pmid: Optional[str], rettype: Optional[str] = None) -> UpstreamCall:
        """Validate a single PMID and build the plain-text efetch call."""
        pmid = require_pmid(pmid)
        return PubMedService._call(EUtils.FETCH, {
            "id": pmid,
            "rettype": require_rettype(rettype, EUtils.DEFAULT_RETTYPE),
            "retmode": "text",
        })

    @staticmethod
    async def search(term: Optional[str], retmax: Optional[str] = None) -> httpx.Response:
        """Relay an esearch request."""
        call = PubMedService.build_search_call(term, retmax)
        return await UpstreamCaller.send(HTTPClientManager.get_pubmed_client(), call)

    @staticmethod
    async def summary(pmid: Optional[str]) -> httpx.Response:
        """Relay an esummary request."""
        call = PubMedService.build_summary_call(pmid)
        return await UpstreamCaller.send(HTTPClientManager.get_pubmed_client(), call)

    @staticmethod
    async def fetch(pmid: Optional[str], rettype: Optional[str] = None) -> FetchResponse:
        """
        Relay an efetch request and wrap the plain text.

        Validation errors propagate. Any failure after validation yields an
        empty abstract instead of an error.
        """
        call = PubMedService.build_fetch_call(pmid, rettype)

        try:
            response = await UpstreamCaller.send(HTTPClientManager.get_pubmed_client(), call)
            abstract = response.text
        except RelayError as e:
            app_logger.warning(f"Fetch for PMID {pmid} failed ({type(e).__name__}), returning empty abstract")
            return FetchResponse(pmid=pmid, abstract="")
        except Exception:
            app_logger.warning(f"Fetch for PMID {pmid} failed unexpectedly, returning empty abstract", exc_info=True)
            return FetchResponse(pmid=pmid, abstract="")

        return FetchResponse(pmid=pmid, abstract=abstract)
