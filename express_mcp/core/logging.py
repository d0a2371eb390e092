# express_mcp/core/logging.py
import logging
import sys
from typing import Optional, TextIO

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# 每个请求都会打 INFO 的第三方 logger
_CHATTY_LOGGERS = ("httpx", "httpcore")


def normalize_level(level: str) -> str:
    """'debug' → 'DEBUG'；不认识的级别 → ValueError。"""
    name = (level or "").strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"不支持的日志级别: {level}（可选 {' / '.join(LOG_LEVELS)}）")
    return name


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """
    配置根 logger：单一 handler，默认写 stderr。
    stdout 是 MCP stdio 协议通道，日志不能写进去。
    """
    name = normalize_level(level)
    root = logging.getLogger()
    root.setLevel(name)

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    chatty_level = logging.DEBUG if name == "DEBUG" else logging.WARNING
    for logger_name in _CHATTY_LOGGERS:
        logging.getLogger(logger_name).setLevel(chatty_level)
