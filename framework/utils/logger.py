import logging
import os
from datetime import datetime
from contextvars import ContextVar

LOGGER_NAME = "automation_logger"

LOG_DIR = os.path.join(os.getcwd(), "logs")
LOG_FILE = os.path.join(
    LOG_DIR,
    f"run_{datetime.now().strftime('%Y%m%d_%H%M%S')}_{os.getpid()}.log"
)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(test)s | %(page)s | %(filename)s:%(lineno)d | %(message)s"

_CURRENT_SCENARIO: ContextVar[str] = ContextVar("CURRENT_SCENARIO", default="-")


def set_current_test(name: str) -> None:
    """日志中的场景名称，场景结束时置回 "-"。"""
    _CURRENT_SCENARIO.set(name or "-")


class _ScenarioFields(logging.Filter):
    # page 由 LoggerAdapter 提供，非页面日志记为 "-"
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "test"):
            record.test = _CURRENT_SCENARIO.get()
        if not hasattr(record, "page"):
            record.page = "-"
        return True


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.addFilter(_ScenarioFields())
    return handler


def get_logger() -> logging.Logger:
    """Author: taobo.zhou
    中文：获取全局日志记录器；控制台 INFO，logs/ 下的本次运行文件 DEBUG。
    """

    logger = logging.getLogger(LOGGER_NAME)
    if getattr(logger, "_inited", False):
        return logger

    os.makedirs(LOG_DIR, exist_ok=True)
    logger.setLevel(logging.DEBUG)
    logger.addHandler(_handler(logging.StreamHandler(), logging.INFO))
    logger.addHandler(_handler(logging.FileHandler(LOG_FILE, encoding="utf-8"), logging.DEBUG))
    logger.propagate = False

    logger._inited = True
    return logger


def get_page_logger(page_name: str | None = None) -> logging.Logger:
    logger = get_logger()
    if page_name:
        logger = logging.LoggerAdapter(logger, {"page": page_name})
    return logger
