# src/gpt3_kit/completions/request.py

"""Turns a prompt and options into an HTTP request.

Pure data transformation. Nothing is sent from here.
"""

import logging
from collections.abc import Sequence

import httpx

from .config import ClientConfig
from .errors import RequestConstructionError
from .options import Option, apply_json_options, apply_options

logger = logging.getLogger(__name__)


def build_request(
    http_client: httpx.Client,
    *,
    api_key: str,
    prompt: str,
    options: Sequence[Option] = (),
    config: ClientConfig = ClientConfig(),
) -> httpx.Request:
    """Build the completion request.

    Args:
        http_client: Client whose base headers and transport apply.
        api_key: Sent as a bearer token.
        prompt: Text to complete.
        options: Applied in order after ``prompt``.
        config: Target URL, timeout and body format.

    Returns:
        An unsent ``httpx.Request``.

    Raises:
        RequestConstructionError: If the target URL is malformed, or a
            value cannot be encoded in a JSON body.
    """
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }

    try:
        if config.body_format == "json":
            payload = apply_json_options(options, {"prompt": prompt})
            return http_client.build_request(
                "POST",
                config.base_url,
                headers=headers,
                json=payload,
                timeout=config.timeout,
            )

        params = apply_options(options, {"prompt": prompt})
        return http_client.build_request(
            "POST",
            config.base_url,
            headers=headers,
            params=params,
            timeout=config.timeout,
        )
    except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
        logger.debug("Could not build request for %s: %s", config.base_url, e)
        raise RequestConstructionError(
            f"invalid completion endpoint {config.base_url!r}: {e}"
        ) from e
    except ValueError as e:
        # JSON has no nan or inf
        raise RequestConstructionError(f"cannot encode request body: {e}") from e
