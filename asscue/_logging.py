from __future__ import annotations

__all__ = ['LogLevel', 'logger']

import sys
from abc import ABC, ABCMeta
from contextlib import suppress
from enum import IntEnum
from threading import Lock
from typing import Any, Dict

import loguru

# Default stderr handler, unless the host application already dropped it
with suppress(ValueError):
    loguru.logger.remove(0)


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


def _loguru_format(record: loguru.Record) -> str:
    if record['extra'].get('section'):
        return (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level.name: <8}</level> | "
            "<cyan>{module}</cyan>:<cyan>{line}</cyan> [{extra[section]}] - <level>{message}</level>\n{exception}"
        )
    return (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level.name: <8}</level> | "
        "<cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>\n{exception}"
    )


class SingletonMeta(ABCMeta):
    _instances: Dict[object, Any] = {}
    _lock: Lock = Lock()

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        with cls._lock:
            if cls not in cls._instances:
                cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


class Singleton(ABC, metaclass=SingletonMeta):
    ...


class Logger(Singleton):
    """
    Thin wrapper over loguru.
    The library stays quiet by default: only ERROR and above reach stderr
    until ``set_level`` is called.
    """
    __slots__ = ('__id', '__level')

    def __init__(self) -> None:
        self.__level = int(LogLevel.ERROR)
        self.__id = loguru.logger.add(sys.stderr, level=self.__level, format=_loguru_format)

    @property
    def level(self) -> int:
        return self.__level

    def set_level(self, level: int) -> None:
        """
        Replace the stderr sink with one filtering at the given level

        :param level:       Minimum level, see :py:class:`LogLevel`
        """
        loguru.logger.remove(self.__id)
        self.__level = int(level)
        self.__id = loguru.logger.add(sys.stderr, level=self.__level, format=_loguru_format)

    def trace(self, message: str, /, depth: int = 1, **extra: Any) -> None:
        loguru.logger.opt(depth=depth).bind(**extra).trace(message)

    def debug(self, message: str, /, depth: int = 1, **extra: Any) -> None:
        loguru.logger.opt(depth=depth).bind(**extra).debug(message)

    def info(self, message: str, /, depth: int = 1, **extra: Any) -> None:
        loguru.logger.opt(depth=depth).bind(**extra).info(message)

    def warning(self, message: str, /, depth: int = 1, **extra: Any) -> None:
        loguru.logger.opt(depth=depth).bind(**extra).warning(message)


logger = Logger()
