# express_mcp/services/express_tracking/types.py
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class TrackingQuery(BaseModel):
    """快递100 实时查询 param（序列化后参与签名）。"""

    model_config = ConfigDict(populate_by_name=True)

    com: str = Field(..., min_length=1, description="快递公司编码")
    num: str = Field(..., min_length=1, description="快递单号")
    phone: str = Field(default="", description="收/寄件人手机号（顺丰等必填）")
    from_: str = Field(default="", alias="from", description="出发地城市")
    to: str = Field(default="", description="目的地城市")
    resultv2: str = Field(default="", description="行政区域解析 / 高级状态")
    show: str = Field(default="0", description="返回格式：0=json")
    order: Literal["desc", "asc"] = Field(default="desc", description="结果排序")

    def to_param(self) -> str:
        return self.model_dump_json(by_alias=True)


class TrackingEvent(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    context: str = ""
    time: str = ""
    ftime: str = ""
    status: Optional[str] = None
    statusCode: Optional[str] = None
    areaCode: Optional[str] = None
    areaName: Optional[str] = None
    areaCenter: Optional[str] = None
    location: Optional[str] = None
    areaPinYin: Optional[str] = None


class TrackingResult(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    message: str = ""
    state: str = ""  # 快递单当前状态
    status: str = ""  # 通讯状态
    condition: str = ""
    ischeck: str = ""  # 是否签收
    com: str = ""
    nu: str = ""
    data: List[TrackingEvent]
