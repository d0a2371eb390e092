# express_mcp/services/shipping_quote/presenter.py
from __future__ import annotations

import json
from typing import Optional, Sequence

from .types import PriceQuote


def format_quotes(
    quotes: Sequence[PriceQuote],
    *,
    from_addr: str,
    to_addr: str,
    weight: float,
    dims_cm: Optional[tuple] = None,
) -> str:
    """比价结果转成给人看的文本（最便宜的在最前）。"""
    head = f"{from_addr} → {to_addr}，实重 {weight:g}kg"
    if dims_cm:
        length, width, height = dims_cm
        head += f"，尺寸 {length:g}×{width:g}×{height:g}cm"

    if not quotes:
        return f"{head}\n暂无可用报价"

    lines = [head, f"共 {len(quotes)} 家快递，按价格从低到高："]
    for i, q in enumerate(quotes, start=1):
        weight_text = f"计费重 {q.chargeable_weight}kg"
        if q.volumetric_weight > 0:
            weight_text += f"（体积重 {q.volumetric_weight:g}kg）"
        lines.append(f"[{i}] {q.courier}（{q.code}）：{q.price:.2f} 元，{weight_text}")
        lines.append(f"    说明：{q.description}")

    cheapest = quotes[0]
    lines.append(f"推荐：{cheapest.courier}，{cheapest.price:.2f} 元")
    return "\n".join(lines)


def format_quotes_json(quotes: Sequence[PriceQuote], *, from_addr: str, to_addr: str, weight: float) -> str:
    payload = {
        "from": from_addr,
        "to": to_addr,
        "weight": weight,
        "quotes": [q.to_dict() for q in quotes],
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)
