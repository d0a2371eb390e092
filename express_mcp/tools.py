# express_mcp/tools.py
from __future__ import annotations

import logging
from typing import Optional

from mcp.server.fastmcp.exceptions import ToolError

from express_mcp.services.express_tracking import (
    ExpressClient,
    ExpressQueryError,
    TrackingBadInput,
    TrackingParseError,
    TrackingQuery,
    UnsupportedCompanyError,
    format_json,
    format_raw,
    format_tracking,
    get_company_code,
)
from express_mcp.services.shipping_quote import (
    QuoteBadInput,
    RateCardNotFound,
    compare_all,
    format_quotes,
    format_quotes_json,
)

logger = logging.getLogger(__name__)

RESULT_FORMATS = ("text", "json")
ORDERS = ("desc", "asc")


def _s(v: Optional[str]) -> str:
    return (v or "").strip()


def _build_tracking_query(
    com: str,
    num: str,
    phone: str,
    origin: str,
    destination: str,
    order: str,
) -> TrackingQuery:
    com_s, num_s = _s(com), _s(num)
    if not com_s or not num_s:
        raise TrackingBadInput("快递公司(com)和快递单号(num)不能为空")
    order_s = _s(order).lower() or "desc"
    if order_s not in ORDERS:
        raise TrackingBadInput(f"order 只支持 desc / asc: {order}")

    return TrackingQuery(
        com=get_company_code(com_s),
        num=num_s,
        phone=_s(phone),
        from_=_s(origin),
        to=_s(destination),
        show="0",
        order=order_s,
    )


async def query_express(
    client: ExpressClient,
    *,
    com: str,
    num: str,
    phone: str = "",
    origin: str = "",
    destination: str = "",
    result_format: str = "text",
    order: str = "desc",
) -> str:
    """
    实时快递查询（工具入口）。

    - 输入错误 / 不支持的快递公司 / 请求失败 → ToolError
    - 返回体解析失败 → 原始内容兜底输出（不报错）
    """
    fmt = _s(result_format).lower() or "text"
    try:
        if fmt not in RESULT_FORMATS:
            raise TrackingBadInput(f"result_format 只支持 text / json: {result_format}")
        query = _build_tracking_query(com, num, phone, origin, destination, order)
    except (TrackingBadInput, UnsupportedCompanyError) as exc:
        raise ToolError(str(exc)) from exc

    try:
        result = await client.query(query)
    except TrackingParseError as exc:
        return format_raw(exc.raw)
    except ExpressQueryError as exc:
        raise ToolError(str(exc)) from exc

    if fmt == "json":
        return format_json(result)
    return f"实时查询快递成功：\n{format_tracking(result)}"


def compare_price(
    *,
    origin: str,
    destination: str,
    weight: Optional[float] = None,
    length: Optional[float] = None,
    width: Optional[float] = None,
    height: Optional[float] = None,
    result_format: str = "text",
) -> str:
    """多家快递比价（工具入口）：按价格升序，text 为文本报告，json 为报价列表。"""
    from_addr, to_addr = _s(origin), _s(destination)
    w = 1.0 if weight is None else float(weight)
    fmt = _s(result_format).lower() or "text"

    try:
        if fmt not in RESULT_FORMATS:
            raise QuoteBadInput(f"result_format 只支持 text / json: {result_format}")
        quotes = compare_all(
            weight=w,
            length=length,
            width=width,
            height=height,
            from_addr=from_addr,
            to_addr=to_addr,
        )
    except QuoteBadInput as exc:
        raise ToolError(str(exc)) from exc
    except RateCardNotFound as exc:
        logger.error("rate card missing: %s", exc.courier)
        raise ToolError(str(exc)) from exc

    if fmt == "json":
        return format_quotes_json(quotes, from_addr=from_addr, to_addr=to_addr, weight=w)

    dims = (length, width, height) if None not in (length, width, height) else None
    return format_quotes(quotes, from_addr=from_addr, to_addr=to_addr, weight=w, dims_cm=dims)
