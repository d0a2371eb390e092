# express_mcp/services/express_tracking/codes.py
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from .errors import UnsupportedCompanyError

# 中文名 → 快递100 公司编码（精确匹配）
EXPRESS_COM_MAP: Mapping[str, str] = MappingProxyType(
    {
        "中通": "zhongtong",
        "圆通": "yuantong",
        "韵达": "yunda",
        "申通": "shentong",
        "顺丰": "shunfengkuaiyun",
        "邮政": "youzhengguonei",
        "极兔": "jtexpress",
        "京东": "jd",
        "德邦": "debangwuliu",
        "中通快递": "zhongtong",
        "圆通快递": "yuantong",
        "韵达快递": "yunda",
        "申通快递": "shentong",
        "顺丰快递": "shunfengkuaiyun",
        "顺丰速运": "shunfengkuaiyun",
        "邮政快递": "youzhengguonei",
        "极兔快递": "jtexpress",
        "京东快递": "jd",
        "德邦快递": "debangwuliu",
        "德邦物流": "debangwuliu",
    }
)

# 快递100 state 取值
STATE_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "0": "在途",
        "1": "揽收",
        "2": "疑难",
        "3": "签收",
        "4": "退签",
        "5": "派件",
        "6": "退回",
        "7": "转投",
        "8": "清关",
        "14": "拒签",
    }
)

_CJK = re.compile(r"[\u4e00-\u9fa5]")


def get_company_code(company: str) -> str:
    """
    中文快递公司名 → 编码；非中文视为已是编码，原样返回（去空白）。
    中文名不在表内 → UnsupportedCompanyError。
    """
    name = (company or "").strip()
    if not _CJK.search(name):
        return name
    code = EXPRESS_COM_MAP.get(name)
    if not code:
        raise UnsupportedCompanyError(name)
    return code


def state_label(state: str) -> str:
    return STATE_LABELS.get((state or "").strip(), "未知")
