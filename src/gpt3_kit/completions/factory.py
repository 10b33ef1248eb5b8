# src/gpt3_kit/completions/factory.py

import httpx

from gpt3_kit.observability.base import MetricsHook, NoOpMetricsHook
from gpt3_kit.observability.logger import Logger

from .client import Client
from .config import ClientConfig


def create_client(
    api_key: str,
    config: ClientConfig = ClientConfig(),
    *,
    logger: Logger | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
    http_client: httpx.Client | None = None,
) -> Client:
    """Create a ready completions client.

    Args:
        api_key: API key, sent as a bearer token.
        config: Endpoint, timeout and body format. Defaults to the public
            completions endpoint with a 10 second timeout.
        logger: Optional printf-style sink held by the client.
        metrics_hook: Optional metrics hook for observability.
        http_client: Shared ``httpx.Client``. A new one using
            ``config.timeout`` is created when omitted.

    Returns:
        Configured Client.

    Example:
        >>> client = create_client("sk-...")
        >>> result = client.complete("Once upon a time", max_tokens(16))
    """
    return Client(
        api_key,
        http_client=http_client,
        config=config,
        logger=logger,
        metrics_hook=metrics_hook,
    )
