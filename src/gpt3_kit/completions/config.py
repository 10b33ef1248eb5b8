# src/gpt3_kit/completions/config.py

from dataclasses import dataclass
from typing import Literal

API_URL = "https://api.openai.com/v1/completions"

BodyFormat = Literal["query", "json"]


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for the completions client.

    Immutable. No defaults read from the environment; the caller supplies
    the API key.

    ``body_format="query"`` sends the prompt and options as URL query
    parameters. ``"json"`` sends them as a JSON object body instead, which
    is what a standard completions backend expects.
    """

    base_url: str = API_URL
    timeout: float = 10.0
    body_format: BodyFormat = "query"
