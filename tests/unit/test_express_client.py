# tests/unit/test_express_client.py
from __future__ import annotations

import hashlib
import json
from typing import Any, Dict, List
from urllib.parse import parse_qs

import httpx
import pytest

from express_mcp.services.express_tracking import (
    ExpressClient,
    ExpressQueryError,
    TrackingParseError,
    TrackingQuery,
    format_raw,
    format_tracking,
)

API_URL = "https://poll.example.test/poll/query.do"

SAMPLE_RESULT: Dict[str, Any] = {
    "message": "ok",
    "state": "3",
    "status": "200",
    "condition": "F00",
    "ischeck": "1",
    "com": "yunda",
    "nu": "YD123456",
    "data": [
        {"context": "已签收，签收人：本人", "time": "2024-05-02 10:00:00", "ftime": "2024-05-02 10:00:00"},
        {
            "context": "快件已到达【杭州转运中心】",
            "time": "2024-05-01 08:00:00",
            "ftime": "2024-05-01 08:00:00",
            "areaName": "浙江,杭州市",
        },
    ],
}


def _client(handler, method: str = "POST") -> ExpressClient:
    return ExpressClient(
        "CUSTOMER1",
        "KEY1",
        api_url=API_URL,
        method=method,
        transport=httpx.MockTransport(handler),
    )


def _query() -> TrackingQuery:
    return TrackingQuery(com="yunda", num="YD123456", from_="杭州", to="上海")


def test_sign_is_upper_md5_of_param_key_customer():
    client = ExpressClient("CUSTOMER1", "KEY1")
    expected = hashlib.md5("{}KEY1CUSTOMER1".encode("utf-8")).hexdigest().upper()
    assert client.sign("{}") == expected
    assert len(expected) == 32


def test_param_uses_vendor_field_names():
    param = json.loads(_query().to_param())
    assert param["from"] == "杭州"
    assert "from_" not in param
    assert param["show"] == "0"
    assert param["order"] == "desc"


@pytest.mark.asyncio
async def test_post_form_request_and_parse():
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=SAMPLE_RESULT)

    client = _client(handler)
    result = await client.query(_query())

    assert result.nu == "YD123456"
    assert len(result.data) == 2
    assert result.data[1].areaName == "浙江,杭州市"

    req = seen[0]
    assert req.method == "POST"
    form = {k: v[0] for k, v in parse_qs(req.content.decode("utf-8")).items()}
    assert form["customer"] == "CUSTOMER1"
    assert form["sign"] == client.sign(form["param"])
    assert json.loads(form["param"])["num"] == "YD123456"


@pytest.mark.asyncio
async def test_get_variant_puts_fields_in_query_string():
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=SAMPLE_RESULT)

    client = _client(handler, method="GET")
    await client.query(_query())

    req = seen[0]
    assert req.method == "GET"
    assert req.url.params["customer"] == "CUSTOMER1"
    assert req.url.params["sign"] == client.sign(req.url.params["param"])


@pytest.mark.asyncio
async def test_non_2xx_raises_with_status_and_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="bad gateway")

    with pytest.raises(ExpressQueryError) as ei:
        await _client(handler).query(_query())
    assert ei.value.status_code == 502
    assert ei.value.body == "bad gateway"
    assert "HTTP 502" in str(ei.value)


@pytest.mark.asyncio
async def test_network_error_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ExpressQueryError) as ei:
        await _client(handler).query(_query())
    assert ei.value.status_code is None


@pytest.mark.asyncio
async def test_non_json_body_is_parse_error_with_raw_text():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    with pytest.raises(TrackingParseError) as ei:
        await _client(handler).query(_query())
    assert ei.value.raw == "<html>maintenance</html>"
    assert format_raw(ei.value.raw).endswith("<html>maintenance</html>")


@pytest.mark.asyncio
async def test_vendor_error_envelope_is_parse_error():
    body = {"result": False, "returnCode": "400", "message": "找不到对应公司"}

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)

    with pytest.raises(TrackingParseError) as ei:
        await _client(handler).query(_query())
    assert "找不到对应公司" in ei.value.raw


@pytest.mark.asyncio
async def test_format_tracking_lists_events_in_order():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=SAMPLE_RESULT)

    result = await _client(handler).query(_query())
    text = format_tracking(result)

    assert "当前状态：签收  是否签收：是" in text
    assert "[1] 2024-05-02 10:00:00\n    详情：已签收，签收人：本人" in text
    assert text.index("[1]") < text.index("[2]")
