# express_mcp/services/shipping_quote/errors.py
from __future__ import annotations


class QuoteBadInput(ValueError):
    pass


class RateCardNotFound(LookupError):
    """快递公司不在价目表内：承运商集合是封闭的，这是配置错误。"""

    def __init__(self, courier: str):
        super().__init__(f"价目表中没有该快递公司: {courier}")
        self.courier = courier
