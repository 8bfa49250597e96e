"""
Data models for outbound relay calls.
"""
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class UpstreamCall:
    """
    One outbound request. Built per inbound request and discarded afterwards.
    Secrets live in ``headers`` or ``params`` and must never be logged.
    """
    upstream: str
    method: str
    url: str
    timeout: float
    params: dict = field(default_factory=dict)
    json: Optional[Any] = None
    headers: dict = field(default_factory=dict)

    SECRET_PARAMS = ("api_key",)

    @property
    def safe_params(self) -> dict:
        """Query parameters with credentials removed, for logging."""
        return {k: v for k, v in self.params.items() if k not in self.SECRET_PARAMS}
