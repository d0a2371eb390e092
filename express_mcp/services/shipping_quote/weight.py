# express_mcp/services/shipping_quote/weight.py
from __future__ import annotations

import math
from decimal import ROUND_CEILING, Decimal
from typing import Optional

from .rates import volumetric_divisor


def _d(v: float) -> Decimal:
    return Decimal(str(v))


def volumetric_weight(
    courier: str,
    length: Optional[float] = None,
    width: Optional[float] = None,
    height: Optional[float] = None,
) -> float:
    """
    体积重（kg）= 长×宽×高(cm) / 抛比，向上取到 0.1kg。

    - 任一尺寸缺失 → 0（不计体积重，只按实重）
    - 抛比按承运商取，未知承运商按 8000
    """
    if length is None or width is None or height is None:
        return 0.0

    divisor = volumetric_divisor(courier)
    vol = _d(length) * _d(width) * _d(height) / Decimal(divisor)
    # 只进不舍
    tenths = (vol * 10).to_integral_value(rounding=ROUND_CEILING)
    return float(tenths / 10)


def chargeable_weight(actual_weight_kg: float, volumetric_weight_kg: float) -> int:
    """计费重：max(实重, 体积重) 向上取整，最低 1kg。"""
    raw = max(float(actual_weight_kg or 0.0), float(volumetric_weight_kg or 0.0))
    return max(1, math.ceil(raw))
