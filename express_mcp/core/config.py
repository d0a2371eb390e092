# express_mcp/core/config.py
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from express_mcp.core.logging import normalize_level

KUAIDI100_QUERY_URL = "https://poll.kuaidi100.com/poll/query.do"


class AppSettings(BaseSettings):
    """
    全局配置：环境变量 / .env 读取，启动参数（--customer / --auth_key）可覆盖。
    """

    # 运行环境
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # 快递100 凭据，启动时必须齐全（见 missing_credentials）
    EXPRESS_CUSTOMER: str = Field(default="", description="快递100 customer 编号")
    EXPRESS_AUTH_KEY: str = Field(default="", description="快递100 授权 key")

    # 快递100 接口
    EXPRESS_API_URL: str = Field(default=KUAIDI100_QUERY_URL)
    EXPRESS_HTTP_METHOD: Literal["POST", "GET"] = Field(default="POST")
    EXPRESS_HTTP_TIMEOUT: float = Field(default=10.0, gt=0)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        return normalize_level(str(v))

    def missing_credentials(self) -> list[str]:
        missing: list[str] = []
        if not self.EXPRESS_CUSTOMER.strip():
            missing.append("customer")
        if not self.EXPRESS_AUTH_KEY.strip():
            missing.append("auth_key")
        return missing


@lru_cache
def get_settings() -> AppSettings:
    """全局单例设置入口。"""
    return AppSettings()
