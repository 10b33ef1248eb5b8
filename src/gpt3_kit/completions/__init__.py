# src/gpt3_kit/completions/__init__.py

"""Completions client for gpt3-kit.

A thin synchronous client for the text completion endpoint.

Design principles:
- One call, one request: no retries, no streaming, no background work
- Options are values: each sets one parameter, applied in call order
- No leakage: callers see decoded models and CompletionError subclasses

Example:
    >>> from gpt3_kit.completions import create_client, max_tokens, temperature
    >>>
    >>> client = create_client("sk-...")
    >>> result = client.complete(
    ...     "Say hello", max_tokens(16), temperature(0.2)
    ... )
    >>> for completion in result.completions:
    ...     print(completion.text)
"""

from .base import Choice, Completion, Completions, CompletionsClient
from .client import Client
from .config import API_URL, ClientConfig
from .errors import (
    APIStatusError,
    CompletionError,
    DecodeError,
    RequestConstructionError,
    TransportError,
)
from .factory import create_client
from .options import (
    Option,
    Parameters,
    apply_options,
    engine,
    engine_version,
    logprobs,
    max_tokens,
    n,
    presets,
    stop,
    stream,
    temperature,
    top_p,
)
from .request import build_request

__all__ = [
    # Factory
    "create_client",
    # Client
    "Client",
    "CompletionsClient",
    "build_request",
    # Config
    "API_URL",
    "ClientConfig",
    # Types
    "Choice",
    "Completion",
    "Completions",
    # Options
    "Option",
    "Parameters",
    "apply_options",
    "engine",
    "engine_version",
    "logprobs",
    "max_tokens",
    "n",
    "presets",
    "stop",
    "stream",
    "temperature",
    "top_p",
    # Errors
    "APIStatusError",
    "CompletionError",
    "DecodeError",
    "RequestConstructionError",
    "TransportError",
]
