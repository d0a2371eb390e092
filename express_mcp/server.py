# express_mcp/server.py
from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from express_mcp import tools as tool_impl
from express_mcp.core.config import AppSettings
from express_mcp.services.express_tracking import ExpressClient

SERVER_NAME = "mcp-server-express"


def build_client(settings: AppSettings) -> ExpressClient:
    return ExpressClient(
        settings.EXPRESS_CUSTOMER,
        settings.EXPRESS_AUTH_KEY,
        api_url=settings.EXPRESS_API_URL,
        method=settings.EXPRESS_HTTP_METHOD,
        timeout=settings.EXPRESS_HTTP_TIMEOUT,
    )


def create_server(settings: AppSettings, client: Optional[ExpressClient] = None) -> FastMCP:
    """注册两个工具：query_express（实时快递查询）、compare_price（运费比价）。"""
    mcp = FastMCP(name=SERVER_NAME)
    express_client = client or build_client(settings)

    @mcp.tool(name="query_express", description="实时快递查询")
    async def query_express(
        com: str = Field(description="快递公司名称或快递编码，如“中通”或 zhongtong"),
        num: str = Field(description="快递单号"),
        phone: str = Field(default="", description="收/寄件人手机号（顺丰等快递必填）"),
        origin: str = Field(default="", description="出发地城市"),
        destination: str = Field(default="", description="目的地城市"),
        result_format: str = Field(default="text", description="text：轨迹文本；json：原始结构"),
        order: str = Field(default="desc", description="轨迹排序：desc 或 asc"),
    ) -> str:
        return await tool_impl.query_express(
            express_client,
            com=com,
            num=num,
            phone=phone,
            origin=origin,
            destination=destination,
            result_format=result_format,
            order=order,
        )

    @mcp.tool(name="compare_price", description="多家快递运费估算与比价（按价格从低到高）")
    def compare_price(
        origin: str = Field(description="寄件地，如“浙江杭州”"),
        destination: str = Field(description="收件地，如“上海”"),
        weight: Optional[float] = Field(default=None, description="实际重量（kg），默认 1"),
        length: Optional[float] = Field(default=None, description="长（cm）"),
        width: Optional[float] = Field(default=None, description="宽（cm）"),
        height: Optional[float] = Field(default=None, description="高（cm）"),
        result_format: str = Field(default="text", description="text：比价文本；json：报价列表"),
    ) -> str:
        return tool_impl.compare_price(
            origin=origin,
            destination=destination,
            weight=weight,
            length=length,
            width=width,
            height=height,
            result_format=result_format,
        )

    return mcp
