# express_mcp/services/shipping_quote/pricing.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import List

from express_mcp.geo.cn_registry import (
    is_remote_area,
    is_same_province,
    is_same_region,
    is_special_region_pair,
    resolve_province,
)

from .rates import (
    BULK_DISCOUNT_COURIER,
    BULK_DISCOUNT_MAX_RATIO,
    BULK_DISCOUNT_PER_KG,
    BULK_DISCOUNT_THRESHOLD_KG,
    JZH_FLAT_COURIER,
    JZH_FLAT_RATE,
    REMOTE_SURCHARGE,
    get_rate_card,
)
from .types import PriceQuote, RateCard
from .weight import chargeable_weight


def _money(v: float) -> float:
    return float(Decimal(str(v)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _yuan(v: float) -> str:
    return f"{v:g}"


def _tier_rate(card: RateCard, same_city: bool, same_province: bool) -> float:
    if same_city:
        return float(card.same_city_rate)
    if same_province:
        return float(card.same_province_rate)
    return float(card.cross_province_rate)


def _area_label(from_addr: str, to_addr: str, same_city: bool, same_province: bool) -> str:
    if same_city:
        return "同城"
    if same_province:
        return "同省"
    p_to = resolve_province(to_addr)
    if p_to is not None and is_same_region(from_addr, to_addr):
        return f"跨省（同属{p_to.region}）"
    return "跨省"


def _bulk_discount(courier: str, cw: int, price: float) -> float:
    if courier != BULK_DISCOUNT_COURIER or cw <= BULK_DISCOUNT_THRESHOLD_KG:
        return 0.0
    per_kg = (cw - BULK_DISCOUNT_THRESHOLD_KG) * BULK_DISCOUNT_PER_KG
    return min(per_kg, price * BULK_DISCOUNT_MAX_RATIO)


def estimate(
    courier: str,
    actual_weight_kg: float,
    volumetric_weight_kg: float,
    from_addr: str,
    to_addr: str,
) -> PriceQuote:
    """
    单个承运商估价。按固定顺序逐步调整：

      1) 地域：同城（原样字符串相等）/ 同省 / 偏远（只看目的地）
      2) 首重档位：同城 > 同省 > 跨省（三选一）
      3) 江浙沪一口价：首重强制为 8 元
      4) 偏远加价：首重 +10（一口价同样加）
      5) 计费重：max(1, ceil(max(实重, 体积重)))
      6) 总价：首重 + (计费重-1)×续重；一口价时不随重量变化
      7) 大件优惠：超 20kg，优惠不超过总价 30%
      8) 四舍五入到分

    courier 不在价目表内 → RateCardNotFound。
    """
    card = get_rate_card(courier)

    # 1) 地域
    same_city = bool(from_addr) and from_addr == to_addr
    same_province = is_same_province(from_addr, to_addr)
    remote = is_remote_area(to_addr)

    # 2) 首重档位
    first = _tier_rate(card, same_city, same_province)

    # 3) 江浙沪一口价
    flat = card.name == JZH_FLAT_COURIER and is_special_region_pair(from_addr, to_addr)
    if flat:
        first = JZH_FLAT_RATE

    # 4) 偏远加价
    if remote:
        first += REMOTE_SURCHARGE

    # 5) 计费重
    cw = chargeable_weight(actual_weight_kg, volumetric_weight_kg)

    # 6) 总价
    additional = float(card.additional_weight_rate)
    if flat or cw <= 1:
        price = first
    else:
        price = first + (cw - 1) * additional

    # 7) 大件优惠
    discount = _bulk_discount(card.name, cw, price)
    price -= discount

    # 8) 取整
    price = _money(price)

    parts: List[str] = []
    parts.append(f"首重{_yuan(first)}元")
    if cw > 1 and not flat:
        parts.append(f"续重{_yuan(additional)}元/kg")
    parts.append(_area_label(from_addr, to_addr, same_city, same_province))
    if remote:
        parts.append(f"偏远地区加收{_yuan(REMOTE_SURCHARGE)}元")
    if flat:
        parts.append(f"江浙沪一口价{_yuan(JZH_FLAT_RATE)}元不限重")
    if discount > 0:
        parts.append(f"大件优惠-{_money(discount):.2f}元")
    if card.note and not flat:
        parts.append(card.note)

    return PriceQuote(
        courier=card.name,
        code=card.code,
        price=price,
        first_weight_rate=_money(first),
        additional_weight_rate=additional,
        volumetric_weight=float(volumetric_weight_kg or 0.0),
        chargeable_weight=cw,
        is_remote=remote,
        is_same_province=same_province,
        is_same_city=same_city,
        description="，".join(parts),
    )
