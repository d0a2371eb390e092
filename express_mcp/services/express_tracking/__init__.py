# express_mcp/services/express_tracking/__init__.py
from __future__ import annotations

from .client import ExpressClient, parse_result
from .codes import get_company_code
from .errors import ExpressQueryError, TrackingBadInput, TrackingParseError, UnsupportedCompanyError
from .presenter import format_json, format_raw, format_tracking
from .types import TrackingEvent, TrackingQuery, TrackingResult

__all__ = [
    "ExpressClient",
    "ExpressQueryError",
    "TrackingBadInput",
    "TrackingEvent",
    "TrackingParseError",
    "TrackingQuery",
    "TrackingResult",
    "UnsupportedCompanyError",
    "format_json",
    "format_raw",
    "format_tracking",
    "get_company_code",
    "parse_result",
]
