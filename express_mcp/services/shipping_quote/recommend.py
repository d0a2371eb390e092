# express_mcp/services/shipping_quote/recommend.py
from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from .errors import QuoteBadInput
from .pricing import estimate
from .rates import courier_names, get_rate_card
from .types import PriceQuote
from .weight import volumetric_weight

logger = logging.getLogger(__name__)


def _check_amount(label: str, v: Optional[float]) -> None:
    if v is None:
        return
    f = float(v)
    if not math.isfinite(f):
        raise QuoteBadInput(f"{label} 必须是有限数值: {v}")
    if f < 0:
        raise QuoteBadInput(f"{label} 不能为负数: {v}")


def compare_all(
    weight: float = 1,
    length: Optional[float] = None,
    width: Optional[float] = None,
    height: Optional[float] = None,
    from_addr: str = "",
    to_addr: str = "",
    couriers: Optional[Sequence[str]] = None,
) -> List[PriceQuote]:
    """
    多家快递比价：按价格升序返回，每个承运商一条。

    - from_addr / to_addr 必填
    - weight / 尺寸不能为负、inf、nan → QuoteBadInput
    - couriers 为空时比较价目表内全部承运商；重复的只算一次；指定了未知承运商 → RateCardNotFound
    - 同价时保持价目表顺序（sorted 是稳定排序）
    """
    if not (from_addr or "").strip() or not (to_addr or "").strip():
        raise QuoteBadInput("寄件地和收件地不能为空")

    _check_amount("weight", weight)
    _check_amount("length", length)
    _check_amount("width", width)
    _check_amount("height", height)

    # 去重并保持传入顺序
    names = list(dict.fromkeys(couriers)) if couriers else list(courier_names())
    for name in names:
        get_rate_card(name)

    quotes: List[PriceQuote] = []
    for name in names:
        vol = volumetric_weight(name, length, width, height)
        quotes.append(estimate(name, weight, vol, from_addr, to_addr))

    ranked = sorted(quotes, key=lambda q: q.price)
    logger.debug(
        "compare_all from=%s to=%s weight=%s cheapest=%s",
        from_addr,
        to_addr,
        weight,
        ranked[0].courier if ranked else None,
    )
    return ranked
