"""
Constants for the PubMed Relay application.
"""


class ErrorMessages:
    """Client-facing error messages."""
    # Route-specific upstream failures
    CHAT_FAILED = "chat completion request failed"
    SEARCH_FAILED = "pubmed search request failed"
    SUMMARY_FAILED = "pubmed summary request failed"
    FETCH_FAILED = "pubmed fetch request failed"

    # Shared outcomes
    SERVICE_UNAVAILABLE = "service unavailable"
    INTERNAL_ERROR = "internal error"
    NOT_FOUND = "not found"
    UNEXPECTED_ERROR = "unexpected error"

    # Validation
    INVALID_BODY = "request body must include a non-empty messages list"
    MISSING_TERM = "search term is required"
    INVALID_PMID = "invalid PubMed ID"
    INVALID_RETTYPE = "invalid rettype"


class Upstream:
    """Upstream names used in logs."""
    OPENAI, PUBMED = "openai", "pubmed"


class EUtils:
    """PubMed E-utilities endpoint paths and fixed parameters."""
    SEARCH = "esearch.fcgi"
    SUMMARY = "esummary.fcgi"
    FETCH = "efetch.fcgi"
    DATABASE = "pubmed"
    DEFAULT_RETTYPE = "abstract"


# Regular expression patterns
class Patterns:
    """Regular expression patterns for inbound parameter checks."""
    PMID = r'^\d+$'
    PMID_BATCH = r'^\d+(,\d+)*$'
    RETTYPE = r'^[a-z_]+$'
