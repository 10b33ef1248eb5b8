# Completions
from .completions import (
    APIStatusError,
    Choice,
    Client,
    ClientConfig,
    Completion,
    CompletionError,
    Completions,
    DecodeError,
    Option,
    RequestConstructionError,
    TransportError,
    create_client,
)

# Observability
from .observability import (
    Logger,
    LoggerFunc,
    LoggerWriter,
    MetricsHook,
    NoOpLogger,
    NoOpMetricsHook,
    StdLogger,
)

__all__ = [
    # Completions
    "Choice",
    "Client",
    "ClientConfig",
    "Completion",
    "Completions",
    "Option",
    "create_client",
    # Errors
    "APIStatusError",
    "CompletionError",
    "DecodeError",
    "RequestConstructionError",
    "TransportError",
    # Observability
    "Logger",
    "LoggerFunc",
    "LoggerWriter",
    "MetricsHook",
    "NoOpLogger",
    "NoOpMetricsHook",
    "StdLogger",
]
