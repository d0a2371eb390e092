# express_mcp/services/shipping_quote/rates.py
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .errors import RateCardNotFound
from .types import RateCard

DEFAULT_VOLUMETRIC_DIVISOR = 8000

# 江浙沪互寄一口价（该承运商专享）
JZH_FLAT_COURIER = "中通"
JZH_FLAT_RATE = 8.0

# 偏远地区首重加价
REMOTE_SURCHARGE = 10.0

# 大件优惠：超出 20kg 部分每 kg 减 0.5 元，最多减 30%
BULK_DISCOUNT_COURIER = "德邦"
BULK_DISCOUNT_THRESHOLD_KG = 20
BULK_DISCOUNT_PER_KG = 0.5
BULK_DISCOUNT_MAX_RATIO = 0.3

# 顺序即比价时的默认顺序（同价时保持该顺序）
RATE_CARDS: Tuple[RateCard, ...] = (
    RateCard("中通", "zhongtong", 8, 10, 12, 5, note="江浙沪互寄一口价"),
    RateCard("圆通", "yuantong", 6, 8, 12, 5),
    RateCard("韵达", "yunda", 5, 7, 11, 4),
    RateCard("申通", "shentong", 5, 7, 11, 4),
    RateCard("极兔", "jtexpress", 5, 6, 10, 4),
    RateCard("邮政", "youzhengguonei", 8, 10, 15, 6, note="乡镇覆盖广"),
    RateCard("顺丰", "shunfengkuaiyun", 12, 14, 22, 10, volumetric_divisor=6000, note="时效快"),
    RateCard("京东", "jd", 10, 12, 18, 8, volumetric_divisor=6000, note="次日达覆盖广"),
    RateCard("EMS", "ems", 15, 18, 25, 12, volumetric_divisor=6000),
    RateCard("德邦", "debangwuliu", 10, 13, 20, 6, note="大件重货优惠"),
)

_BY_NAME: Mapping[str, RateCard] = MappingProxyType({c.name: c for c in RATE_CARDS})


def find_rate_card(courier: str) -> Optional[RateCard]:
    return _BY_NAME.get((courier or "").strip())


def get_rate_card(courier: str) -> RateCard:
    card = find_rate_card(courier)
    if card is None:
        raise RateCardNotFound(courier)
    return card


def volumetric_divisor(courier: str) -> int:
    card = find_rate_card(courier)
    if card is None:
        return DEFAULT_VOLUMETRIC_DIVISOR
    return card.volumetric_divisor


def courier_names() -> Tuple[str, ...]:
    return tuple(c.name for c in RATE_CARDS)
