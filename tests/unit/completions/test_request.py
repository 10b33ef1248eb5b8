# tests/unit/completions/test_request.py

import json

import httpx
import pytest

from gpt3_kit.completions.config import API_URL, ClientConfig
from gpt3_kit.completions.errors import RequestConstructionError
from gpt3_kit.completions.options import max_tokens, presets, stream, temperature
from gpt3_kit.completions.request import build_request


@pytest.fixture
def http_client():
    with httpx.Client() as client:
        yield client


class TestBuildRequest:
    def test_defaults(self, http_client: httpx.Client) -> None:
        """Test request shape with a prompt and no options."""
        request = build_request(http_client, api_key="sk-test", prompt="Hello world")

        assert request.method == "POST"
        assert request.url.scheme == "https"
        assert request.url.host == "api.openai.com"
        assert request.url.path == "/v1/completions"
        assert request.headers["Authorization"] == "Bearer sk-test"
        assert request.headers["Content-Type"] == "application/json"
        assert dict(request.url.params) == {"prompt": "Hello world"}
        assert request.content == b""

    def test_prompt_is_url_encoded(self, http_client: httpx.Client) -> None:
        request = build_request(http_client, api_key="k", prompt="a b&c=d")

        assert request.url.params["prompt"] == "a b&c=d"
        assert b"&c=" not in request.url.query

    def test_options_in_query(self, http_client: httpx.Client) -> None:
        request = build_request(
            http_client,
            api_key="k",
            prompt="p",
            options=[max_tokens(16), temperature(0.2), presets("x", "y")],
        )

        assert dict(request.url.params) == {
            "prompt": "p",
            "max_tokens": "16",
            "temperature": "0.200000",
            "presets": "x,y",
        }

    def test_json_body_format(self, http_client: httpx.Client) -> None:
        """Test that the json format sends native values in the body."""
        request = build_request(
            http_client,
            api_key="k",
            prompt="p",
            options=[max_tokens(16), stream(True), presets("x")],
            config=ClientConfig(body_format="json"),
        )

        assert request.url == httpx.URL(API_URL)
        assert json.loads(request.content) == {
            "prompt": "p",
            "max_tokens": 16,
            "stream": True,
            "presets": ["x"],
        }

    def test_json_body_rejects_non_finite_float(self, http_client: httpx.Client) -> None:
        with pytest.raises(RequestConstructionError, match="cannot encode"):
            build_request(
                http_client,
                api_key="k",
                prompt="p",
                options=[temperature(float("inf"))],
                config=ClientConfig(body_format="json"),
            )

    def test_custom_base_url(self, http_client: httpx.Client) -> None:
        config = ClientConfig(base_url="http://localhost:8080/v1/completions")

        request = build_request(http_client, api_key="k", prompt="p", config=config)

        assert request.url.host == "localhost"
        assert request.url.port == 8080

    def test_malformed_url_raises(self, http_client: httpx.Client) -> None:
        config = ClientConfig(base_url="https://api.example.com/\x00v1")

        with pytest.raises(RequestConstructionError, match="invalid completion endpoint"):
            build_request(http_client, api_key="k", prompt="p", config=config)
