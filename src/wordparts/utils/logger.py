"""
日誌與計時工具

所有模組透過 get_logger() 取得 "wordparts.<name>" 子 logger。
函式庫本身只掛 NullHandler，不主動輸出；需要時由使用者呼叫
setup_logger() / enable_debug_logging() 開啟。

使用方式:
    from wordparts.utils.logger import get_logger, TimingContext

    logger = get_logger("decomposition")
    with TimingContext("decompose", logger):
        ...
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "wordparts"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

_handler: Optional[logging.Handler] = None


def get_logger(name: str = "") -> logging.Logger:
    """
    取得 wordparts 命名空間下的 logger

    Args:
        name: 子模組名稱，例如 "speech.recognition"；空字串回傳根 logger

    Returns:
        logging.Logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + ".") or name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    為根 logger 掛上一個 StreamHandler（重複呼叫只會調整等級）

    Args:
        level: 日誌等級
        fmt: 輸出格式

    Returns:
        logging.Logger: wordparts 根 logger
    """
    global _handler

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(_handler)
    _handler.setLevel(level)
    root.setLevel(level)
    return root


def enable_debug_logging() -> logging.Logger:
    """一行開啟 DEBUG 日誌"""
    return setup_logger(level=logging.DEBUG)


class TimingContext:
    """
    計時 context manager

    離開區塊時以指定等級記錄耗時，並呼叫 callback(operation, elapsed)。
    callback 拋出的例外只記錄，不向外傳遞。
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger()
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms")
        if self.callback is not None:
            try:
                self.callback(self.operation, self.elapsed)
            except Exception:
                self.logger.exception("on_timing 回呼執行失敗")
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    函式計時裝飾器

    Args:
        operation: 記錄用名稱，預設為函式 qualname
        level: 日誌等級
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__
        logger = get_logger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, logger, level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
