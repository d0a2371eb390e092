# express_mcp/services/express_tracking/errors.py
from __future__ import annotations

from typing import Optional


class TrackingBadInput(ValueError):
    pass


class UnsupportedCompanyError(ValueError):
    def __init__(self, company: str):
        super().__init__(f"不支持的快递公司: {company}")
        self.company = company


class ExpressQueryError(Exception):
    """快递100 请求失败（非 2xx 或网络错误）。"""

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TrackingParseError(ValueError):
    """返回体不是预期的 JSON 结构；raw 保留原文，供兜底输出。"""

    def __init__(self, message: str, raw: str):
        super().__init__(message)
        self.raw = raw
