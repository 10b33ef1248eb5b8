# src/gpt3_kit/completions/base.py

from typing import Any, Protocol

from pydantic import BaseModel, ValidationInfo, field_validator

from gpt3_kit.observability.base import MetricsHook

from .options import Option


class _Decoded(BaseModel):
    """Base for response models.

    Absent or null fields decode to their zero value. Unknown fields are
    ignored so new server fields never break decoding.
    """

    class Config:
        extra = "ignore"
        frozen = True

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_zero(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name:
            return cls.model_fields[info.field_name].get_default(
                call_default_factory=True
            )
        return value


class Choice(_Decoded):
    """One alternative completion."""

    text: str = ""
    logprob: float = 0.0
    timestamp: str = ""


class Completion(_Decoded):
    """One generated continuation of the prompt."""

    id: str = ""
    text: str = ""
    timestamp: str = ""
    logprobs: list[float] = []
    choices: list[Choice] = []


class Completions(_Decoded):
    """Top-level response envelope."""

    id: str = ""
    completions: list[Completion] = []


class CompletionsClient(Protocol):
    """Protocol for completion clients.

    Synchronous. One request per call. No retries.
    """

    metrics_hook: MetricsHook

    def complete(self, prompt: str, *options: Option) -> Completions:
        """Complete a prompt.

        Args:
            prompt: Text to continue.
            *options: Request parameters, applied in order. A later option
                overrides an earlier one with the same key.

        Returns:
            The decoded response envelope.

        Raises:
            RequestConstructionError: The request could not be built.
            TransportError: The HTTP exchange failed.
            APIStatusError: The server answered with a status other than 200.
            DecodeError: The body is not a valid completions envelope.
        """
        ...
