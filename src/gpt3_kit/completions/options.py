# src/gpt3_kit/completions/options.py

"""Request parameter options.

An option sets one named request parameter. Options are plain values:
applying one to a parameter set returns a new set and leaves the input
alone, so a list of options reduces to the same result every time.

Encoding of values in the query string:
- int: base-10 (``42`` -> ``"42"``)
- float: fixed six decimals (``0.7`` -> ``"0.700000"``)
- bool: ``"true"`` / ``"false"``
- str: unchanged
- list of str: comma-joined

Values are not range checked; ``max_tokens(-1)`` is sent as ``"-1"``.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Any

Parameters = dict[str, str]


def encode_value(value: Any) -> str:
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:.6f}"
    if isinstance(value, (list, tuple)):
        return ",".join(value)
    return str(value)


@dataclass(frozen=True)
class Option:
    """Sets ``key`` to ``value`` in a parameter set."""

    key: str
    value: Any

    def __call__(self, params: Mapping[str, str]) -> Parameters:
        return {**params, self.key: self.encoded}

    @property
    def encoded(self) -> str:
        return encode_value(self.value)

    @property
    def json_value(self) -> Any:
        """Native value for a JSON request body."""
        if isinstance(self.value, tuple):
            return list(self.value)
        return self.value


def apply_options(
    options: Iterable[Option], params: Mapping[str, str] | None = None
) -> Parameters:
    """Apply options in order. Later options win on key collisions."""
    return reduce(lambda acc, option: option(acc), options, dict(params or {}))


def apply_json_options(
    options: Iterable[Option], payload: Mapping[str, Any] | None = None
) -> dict[str, Any]:
    """Like ``apply_options`` but keeps native values for a JSON body."""
    result = dict(payload or {})
    for option in options:
        result[option.key] = option.json_value
    return result


def max_tokens(value: int) -> Option:
    """Maximum number of tokens to generate."""
    return Option("max_tokens", value)


def temperature(value: float) -> Option:
    """Sampling temperature."""
    return Option("temperature", float(value))


def top_p(value: float) -> Option:
    """Nucleus sampling probability mass."""
    return Option("top_p", float(value))


def n(value: int) -> Option:
    """Number of completions to return."""
    return Option("n", value)


def stream(value: bool) -> Option:
    """Stream flag. Sent to the server; the client still reads the full body."""
    return Option("stream", bool(value))


def logprobs(value: bool) -> Option:
    return Option("logprobs", bool(value))


def stop(value: str) -> Option:
    return Option("stop", value)


def engine(value: str) -> Option:
    return Option("engine", value)


def engine_version(value: str) -> Option:
    return Option("engine_version", value)


def presets(*names: str) -> Option:
    """Named presets, sent comma-joined."""
    return Option("presets", tuple(names))
