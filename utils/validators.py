"""
Inbound parameter checks shared by the PubMed routes.
"""
import re
from typing import Optional
from config import Config
from utils.constants import ErrorMessages, Patterns
from utils.errors import InvalidRequest


def require_term(term: Optional[str]) -> str:
    """Return the trimmed search term or raise InvalidRequest when blank."""
    if term is None or not term.strip():
        raise InvalidRequest(ErrorMessages.MISSING_TERM)
    return term.strip()


def require_pmid(pmid: Optional[str], allow_batch: bool = False) -> str:
    """
    Check a PubMed ID (or a comma-separated batch of them).

    Args:
        pmid: Raw ``id`` query value
        allow_batch: Accept ``123,456`` style lists

    Returns:
        The unchanged identifier

    Raises:
        InvalidRequest: When the identifier is missing or malformed
    """
    pattern = Patterns.PMID_BATCH if allow_batch else Patterns.PMID
    if not pmid or not re.fullmatch(pattern, pmid, re.ASCII):
        raise InvalidRequest(ErrorMessages.INVALID_PMID)
    return pmid


def require_rettype(rettype: Optional[str], default: str) -> str:
    """Return the efetch rettype, or the default when absent."""
    if not rettype:
        return default
    if not re.fullmatch(Patterns.RETTYPE, rettype, re.ASCII):
        raise InvalidRequest(ErrorMessages.INVALID_RETTYPE)
    return rettype


def clamp_retmax(raw: Optional[str], default: int = None, maximum: int = None) -> int:
    """
    Parse the result-count cap.
    Missing, non-numeric or non-positive values fall back to the default,
    anything above the maximum is clamped.
    """
    default = Config.DEFAULT_RETMAX if default is None else default
    maximum = Config.MAX_RETMAX if maximum is None else maximum

    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default

    if value < 1:
        return default
    return min(value, maximum)
