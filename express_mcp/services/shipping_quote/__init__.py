# express_mcp/services/shipping_quote/__init__.py
from __future__ import annotations

from .errors import QuoteBadInput, RateCardNotFound
from .pricing import estimate
from .presenter import format_quotes, format_quotes_json
from .recommend import compare_all
from .types import PriceQuote, RateCard
from .weight import chargeable_weight, volumetric_weight

__all__ = [
    "PriceQuote",
    "QuoteBadInput",
    "RateCard",
    "RateCardNotFound",
    "chargeable_weight",
    "compare_all",
    "estimate",
    "format_quotes",
    "format_quotes_json",
    "volumetric_weight",
]
