# express_mcp/services/shipping_quote/types.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class RateCard:
    name: str  # 中文名，如“中通”
    code: str  # 快递100 公司编码
    same_city_rate: float  # 同城首重（元）
    same_province_rate: float  # 省内首重（元）
    cross_province_rate: float  # 跨省首重（元）
    additional_weight_rate: float  # 续重（元/kg）
    volumetric_divisor: int = 8000
    note: str = ""


@dataclass(frozen=True)
class PriceQuote:
    courier: str
    code: str
    price: float
    first_weight_rate: float
    additional_weight_rate: float
    volumetric_weight: float
    chargeable_weight: int
    is_remote: bool
    is_same_province: bool
    is_same_city: bool
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
