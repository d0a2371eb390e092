# express_mcp/geo/cn_registry.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Province:
    name: str
    region: str
    code: str


def _norm(s: Optional[str]) -> str:
    return (s or "").strip()


# 顺序即前缀匹配的优先级（先命中先得）
PROVINCES: Tuple[Province, ...] = (
    # 华东
    Province("上海", "华东", "310000"),
    Province("江苏", "华东", "320000"),
    Province("浙江", "华东", "330000"),
    Province("安徽", "华东", "340000"),
    Province("福建", "华东", "350000"),
    Province("江西", "华东", "360000"),
    Province("山东", "华东", "370000"),
    Province("台湾", "华东", "710000"),
    # 华北
    Province("北京", "华北", "110000"),
    Province("天津", "华北", "120000"),
    Province("河北", "华北", "130000"),
    Province("山西", "华北", "140000"),
    Province("内蒙古", "华北", "150000"),
    # 华中
    Province("河南", "华中", "410000"),
    Province("湖北", "华中", "420000"),
    Province("湖南", "华中", "430000"),
    # 华南
    Province("广东", "华南", "440000"),
    Province("广西", "华南", "450000"),
    Province("海南", "华南", "460000"),
    Province("香港", "华南", "810000"),
    Province("澳门", "华南", "820000"),
    # 西南
    Province("重庆", "西南", "500000"),
    Province("四川", "西南", "510000"),
    Province("贵州", "西南", "520000"),
    Province("云南", "西南", "530000"),
    Province("西藏", "西南", "540000"),
    # 西北
    Province("陕西", "西北", "610000"),
    Province("甘肃", "西北", "620000"),
    Province("青海", "西北", "630000"),
    Province("宁夏", "西北", "640000"),
    Province("新疆", "西北", "650000"),
    # 东北
    Province("辽宁", "东北", "210000"),
    Province("吉林", "东北", "220000"),
    Province("黑龙江", "东北", "230000"),
)

_BY_NAME: Dict[str, Province] = {p.name: p for p in PROVINCES}

# 直辖市优先匹配
MUNICIPALITIES: Tuple[str, ...] = ("北京", "上海", "天津", "重庆")

# 单字简称（前缀匹配，按顺序）
PROVINCE_ABBREVIATIONS: Tuple[Tuple[str, str], ...] = (
    ("浙", "浙江"),
    ("苏", "江苏"),
    ("粤", "广东"),
    ("鲁", "山东"),
    ("皖", "安徽"),
    ("闽", "福建"),
    ("赣", "江西"),
    ("冀", "河北"),
    ("豫", "河南"),
    ("鄂", "湖北"),
    ("湘", "湖南"),
    ("琼", "海南"),
    ("川", "四川"),
    ("蜀", "四川"),
    ("黔", "贵州"),
    ("滇", "云南"),
    ("陕", "陕西"),
    ("甘", "甘肃"),
    ("辽", "辽宁"),
    ("吉", "吉林"),
    ("黑", "黑龙江"),
)

REMOTE_PROVINCES = frozenset({"西藏", "新疆", "青海", "宁夏", "内蒙古"})
JIANG_ZHE_HU = frozenset({"江苏", "浙江", "上海"})


def get_province(name: str) -> Optional[Province]:
    return _BY_NAME.get(_norm(name))


def resolve_province(address: Optional[str]) -> Optional[Province]:
    """
    从自由文本地址解析省份（仅前缀匹配）：
    1) 直辖市
    2) 省份全称（按 PROVINCES 顺序）
    3) 单字简称
    都不命中返回 None，调用方按“未知地域”处理。
    """
    addr = _norm(address)
    if not addr:
        return None

    for city in MUNICIPALITIES:
        if addr.startswith(city):
            return _BY_NAME[city]

    for p in PROVINCES:
        if addr.startswith(p.name):
            return p

    for abbr, name in PROVINCE_ABBREVIATIONS:
        if addr.startswith(abbr):
            return _BY_NAME[name]

    return None


def is_same_province(from_addr: Optional[str], to_addr: Optional[str]) -> bool:
    if not _norm(from_addr) or not _norm(to_addr):
        return False
    # 原样字符串相同直接视为同省（未知地址也成立）
    if from_addr == to_addr:
        return True
    p_from = resolve_province(from_addr)
    p_to = resolve_province(to_addr)
    return p_from is not None and p_from == p_to


def is_same_region(from_addr: Optional[str], to_addr: Optional[str]) -> bool:
    """同属一个大区（华东、华北 ...）。"""
    p_from = resolve_province(from_addr)
    p_to = resolve_province(to_addr)
    if p_from is None or p_to is None:
        return False
    return p_from.region == p_to.region


def is_remote_area(address: Optional[str]) -> bool:
    p = resolve_province(address)
    return p is not None and p.name in REMOTE_PROVINCES


def is_jiang_zhe_hu(address: Optional[str]) -> bool:
    p = resolve_province(address)
    return p is not None and p.name in JIANG_ZHE_HU


def is_special_region_pair(from_addr: Optional[str], to_addr: Optional[str]) -> bool:
    """起止两端都在江浙沪。"""
    return is_jiang_zhe_hu(from_addr) and is_jiang_zhe_hu(to_addr)
