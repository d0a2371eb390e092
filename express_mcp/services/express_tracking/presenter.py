# express_mcp/services/express_tracking/presenter.py
from __future__ import annotations

import json

from .codes import state_label
from .types import TrackingResult


def format_events(result: TrackingResult) -> str:
    """轨迹列表 → [序号] 时间 / 详情。"""
    return "\n\n".join(
        f"[{i}] {ev.ftime or ev.time}\n    详情：{ev.context}"
        for i, ev in enumerate(result.data, start=1)
    )


def format_tracking(result: TrackingResult) -> str:
    signed = "是" if result.ischeck == "1" else "否"
    head = (
        f"快递公司：{result.com}  单号：{result.nu}\n"
        f"当前状态：{state_label(result.state)}  是否签收：{signed}"
    )
    if not result.data:
        return f"{head}\n暂无物流轨迹（{result.message or '无返回信息'}）"
    return f"{head}\n\n{format_events(result)}"


def format_json(result: TrackingResult) -> str:
    return json.dumps(result.model_dump(exclude_none=True), ensure_ascii=False, indent=2)


def format_raw(raw: str) -> str:
    """解析失败时的兜底输出。"""
    return f"快递查询返回（原始数据）：\n{raw}"
