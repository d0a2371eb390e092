# express_mcp/services/express_tracking/client.py
from __future__ import annotations

import hashlib
import json
import logging
from typing import Dict, Optional

import httpx
from pydantic import ValidationError

from express_mcp.core.config import KUAIDI100_QUERY_URL

from .errors import ExpressQueryError, TrackingParseError
from .types import TrackingQuery, TrackingResult

logger = logging.getLogger(__name__)


class ExpressClient:
    """
    快递100 实时查询客户端。

    签名：MD5(param + key + customer) 的 32 位大写十六进制，由快递100 接口规定。

    一次调用只发一次请求：不重试、不回退。
    """

    def __init__(
        self,
        customer: str,
        key: str,
        *,
        api_url: str = KUAIDI100_QUERY_URL,
        method: str = "POST",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.customer = customer
        self.key = key
        self.api_url = api_url
        self.method = method.upper()
        self.timeout = timeout
        self._transport = transport

    def sign(self, param: str) -> str:
        sign_str = param + self.key + self.customer
        return hashlib.md5(sign_str.encode("utf-8"), usedforsecurity=False).hexdigest().upper()

    def build_payload(self, query: TrackingQuery) -> Dict[str, str]:
        param = query.to_param()
        sign = self.sign(param)
        logger.debug("express sign param=%s sign=%s customer=%s", param, sign, self.customer)
        return {"customer": self.customer, "sign": sign, "param": param}

    async def _send(self, payload: Dict[str, str]) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            if self.method == "GET":
                return await client.get(self.api_url, params=payload)
            return await client.post(self.api_url, data=payload)

    async def query_raw(self, query: TrackingQuery) -> str:
        """发请求并返回原始响应文本；非 2xx / 网络错误 → ExpressQueryError。"""
        logger.info("express query start com=%s num=%s method=%s", query.com, query.num, self.method)
        payload = self.build_payload(query)

        try:
            resp = await self._send(payload)
        except httpx.HTTPError as exc:
            logger.error("express query transport error: %s", exc)
            raise ExpressQueryError(f"快递查询失败: 网络请求异常 {exc!r}") from exc

        logger.info("express query http status=%s", resp.status_code)
        if not resp.is_success:
            body = resp.text
            logger.error("express query http error status=%s body=%s", resp.status_code, body)
            raise ExpressQueryError(
                f"快递查询失败: API请求失败: HTTP {resp.status_code} - {body}",
                status_code=resp.status_code,
                body=body,
            )
        return resp.text

    async def query(self, query: TrackingQuery) -> TrackingResult:
        """
        查询并解析为 TrackingResult。

        返回体不是 JSON、或没有轨迹列表（例如快递100 的
        {"result": false, "returnCode": "400", "message": "..."}）→ TrackingParseError，
        raw 字段保留原文。
        """
        raw = await self.query_raw(query)
        return parse_result(raw)


def parse_result(raw: str) -> TrackingResult:
    try:
        body = json.loads(raw)
    except ValueError as exc:
        logger.warning("express response is not json: %s", exc)
        raise TrackingParseError("返回内容不是 JSON", raw) from exc

    try:
        return TrackingResult.model_validate(body)
    except ValidationError as exc:
        logger.warning("express response shape mismatch: %s", exc.errors())
        raise TrackingParseError("返回内容缺少物流轨迹", raw) from exc
