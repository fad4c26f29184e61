"""structlogによるログ設定。

CLI・MCPサーバーの起動時に一度だけ呼び出す。出力は常にstderr
（stdoutはレポート出力とstdioトランスポートのために空けておく）。
"""

import logging
import sys
from typing import Literal

import structlog
from structlog.types import Processor

_configured = False


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO",
    fmt: Literal["console", "json"] = "console",
    force: bool = False,
) -> None:
    """structlogとstdlib loggingを設定する。

    Args:
        level: ログレベル。
        fmt: 出力形式。consoleは人間向け、jsonはCI・ログ収集向け。
        force: 設定済みでも再設定する。
    """
    global _configured

    if _configured and not force:
        return

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        structlog.processors.StackInfoRenderer(),
    ]
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level),
        force=True,
    )
    logging.getLogger("namelint").setLevel(getattr(logging, level))

    _configured = True
