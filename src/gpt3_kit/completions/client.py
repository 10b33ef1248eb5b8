# src/gpt3_kit/completions/client.py

import logging
from time import monotonic
from types import TracebackType

import httpx
from pydantic import ValidationError

from gpt3_kit.observability import names
from gpt3_kit.observability.base import MetricsHook, NoOpMetricsHook
from gpt3_kit.observability.logger import Logger

from .base import Completions, CompletionsClient
from .config import ClientConfig
from .errors import APIStatusError, CompletionError, DecodeError, TransportError
from .options import Option, apply_options
from .request import build_request

logger = logging.getLogger(__name__)


class Client(CompletionsClient):
    """Completions API client.

    Synchronous. One request per call. No retries.

    Attributes are public and may be swapped by the caller, e.g. to share one
    ``httpx.Client`` between several API clients. ``logger`` is an optional
    printf-style sink kept for the application; requests never write to it.
    """

    def __init__(
        self,
        api_key: str,
        *,
        http_client: httpx.Client | None = None,
        config: ClientConfig = ClientConfig(),
        logger: Logger | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.api_key = api_key
        self.config = config
        self.logger = logger
        self.metrics_hook = metrics_hook
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.Client(timeout=config.timeout)
        logging.getLogger(__name__).info(
            "Initialized Client with base_url=%s, timeout=%s, body_format=%s",
            config.base_url,
            config.timeout,
            config.body_format,
        )

    def complete(self, prompt: str, *options: Option) -> Completions:
        start = monotonic()
        try:
            completions = self._complete(prompt, options)
        except CompletionError as e:
            self.metrics_hook.increment(
                names.COMPLETION_ERRORS_TOTAL, labels={"kind": type(e).__name__}
            )
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.COMPLETION_REQUEST_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.COMPLETION_REQUESTS_TOTAL)
        self.metrics_hook.record_gauge(
            names.COMPLETION_RESULTS_RETURNED, len(completions.completions)
        )

        logger.info(
            "Completion: id=%s, completions=%d, latency=%.0fms",
            completions.id,
            len(completions.completions),
            elapsed_ms,
        )
        return completions

    def _complete(self, prompt: str, options: tuple[Option, ...]) -> Completions:
        request = build_request(
            self.http_client,
            api_key=self.api_key,
            prompt=prompt,
            options=options,
            config=self.config,
        )

        if apply_options(options).get("stream") == "true":
            logger.warning("stream=true is sent but the response is read in full")

        logger.debug(
            "Sending completion request: url=%s, options=%d",
            self.config.base_url,
            len(options),
        )

        try:
            # send() without stream=True reads the whole body and closes the response
            response = self.http_client.send(request)
        except httpx.RequestError as e:
            raise TransportError(f"completion request failed: {e}") from e

        if response.status_code != httpx.codes.OK:
            logger.debug("Completion request returned status %d", response.status_code)
            raise APIStatusError(response.status_code, response.text)

        return self._decode(response.content)

    def _decode(self, body: bytes) -> Completions:
        """Decode the body into the response envelope.

        This is the boundary. Raw JSON stops here. A ``null`` body decodes to
        an empty envelope, like any other absent field.
        """
        if body.strip() == b"null":
            return Completions()
        try:
            return Completions.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"invalid completions response: {e}") from e

    def close(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._owns_http_client:
            self.http_client.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
