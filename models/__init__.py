"""
Models package exports.
"""
from models.api_models import ChatCompletionRequest, FetchResponse, StatusResponse, ErrorResponse
from models.relay_models import UpstreamCall

__all__ = [
    'ChatCompletionRequest',
    'FetchResponse',
    'StatusResponse',
    'ErrorResponse',
    'UpstreamCall'
]
