from . import names
from .base import MetricsHook, NoOpMetricsHook
from .logger import Logger, LoggerFunc, LoggerWriter, NoOpLogger, StdLogger

__all__ = [
    "Logger",
    "LoggerFunc",
    "LoggerWriter",
    "MetricsHook",
    "NoOpLogger",
    "NoOpMetricsHook",
    "StdLogger",
    "names",
]
