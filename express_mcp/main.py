# express_mcp/main.py
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from express_mcp import __version__
from express_mcp.core.config import get_settings
from express_mcp.core.logging import LOG_LEVELS, setup_logging
from express_mcp.server import SERVER_NAME, create_server

logger = logging.getLogger("express_mcp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="快递查询 / 运费比价 MCP server（stdio）",
    )
    parser.add_argument("--customer", default=None, help="快递100 customer（或环境变量 EXPRESS_CUSTOMER）")
    parser.add_argument("--auth_key", default=None, help="快递100 授权 key（或环境变量 EXPRESS_AUTH_KEY）")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="日志级别，默认取 LOG_LEVEL",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {}
    if args.customer is not None:
        overrides["EXPRESS_CUSTOMER"] = args.customer
    if args.auth_key is not None:
        overrides["EXPRESS_AUTH_KEY"] = args.auth_key
    if args.log_level is not None:
        overrides["LOG_LEVEL"] = args.log_level
    settings = get_settings().model_copy(update=overrides)

    setup_logging(settings.LOG_LEVEL)

    missing = settings.missing_credentials()
    if missing:
        # 缺凭据直接退出（exit 2）
        parser.error("缺少必需参数: " + ", ".join(f"--{m}" for m in missing))

    server = create_server(settings)
    logger.info("%s %s starting (stdio, env=%s)", SERVER_NAME, __version__, settings.ENV)
    server.run()


if __name__ == "__main__":
    main()
