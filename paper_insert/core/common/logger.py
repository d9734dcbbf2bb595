import os
import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

# 项目根目录下的 logs
DEFAULT_LOG_DIR = Path(__file__).resolve().parents[3] / "logs"


def setup_logger(console_level: str | None = None, log_dir: str | None = None) -> Path:
    """配置 paper_insert 的日志输出

    控制台级别取 PAPER_INSERT_LOG_LEVEL（默认 INFO），
    文件日志写入 PAPER_INSERT_LOG_DIR（默认项目根目录 logs），级别 DEBUG，按天轮转。

    Returns:
        Path: 实际使用的日志目录
    """
    console_level = console_level or os.environ.get("PAPER_INSERT_LOG_LEVEL", "INFO")
    target_dir = Path(log_dir or os.environ.get("PAPER_INSERT_LOG_DIR", DEFAULT_LOG_DIR))
    target_dir.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level)
    logger.add(
        str(target_dir / "paper_insert_{time:YYYY-MM-DD}.log"),
        rotation="00:00",
        retention="30 days",
        format=FILE_FORMAT,
        level="DEBUG",
        encoding="utf-8",
    )
    return target_dir


setup_logger()

__all__ = ["logger", "setup_logger"]
