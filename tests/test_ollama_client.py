from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import openai
import pytest

from career_advisor.core.config import Settings
from career_advisor.core.errors import UpstreamError, UpstreamRateLimited, UpstreamUnavailable
from career_advisor.services.ollama_client import OllamaClient, SYSTEM_PROMPT, clean_response

REQUEST = httpx.Request("POST", "http://localhost:11434/v1/chat/completions")


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def _status_error(cls, status_code):
    response = httpx.Response(status_code, request=REQUEST)
    return cls("upstream said no", response=response, body=None)


@pytest.fixture()
def openai_client():
    return MagicMock()


@pytest.fixture()
def ollama_client(openai_client):
    settings = Settings(mongodb_uri="mongodb://localhost:27017", jwt_secret_key="x", ollama_model="mistral")
    return OllamaClient(settings, client=openai_client)


@pytest.mark.parametrize("raw, expected", [
    ("<s> Study computer science. </s>", "Study computer science."),
    ("[INST] hi [/INST] Consider engineering.", "hi  Consider engineering."),
    ("   plain answer\n", "plain answer"),
    (None, ""),
])
def test_clean_response(raw, expected):
    assert clean_response(raw) == expected


def test_chat_sends_system_prompt_and_cleans_answer(ollama_client, openai_client):
    openai_client.chat.completions.create.return_value = _completion("<s>Look into robotics programs.</s>")

    assert ollama_client.chat("What should I study?") == "Look into robotics programs."

    kwargs = openai_client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "mistral"
    assert kwargs["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert kwargs["messages"][1] == {"role": "user", "content": "What should I study?"}
    assert kwargs["stop"] == ["</s>", "[INST]"]


def test_empty_completion_is_an_upstream_error(ollama_client, openai_client):
    openai_client.chat.completions.create.return_value = _completion("  [/INST] ")

    with pytest.raises(UpstreamError):
        ollama_client.chat("hello")


@pytest.mark.parametrize("error, expected", [
    (openai.APIConnectionError(request=REQUEST), UpstreamUnavailable),
    (openai.APITimeoutError(request=REQUEST), UpstreamUnavailable),
    (_status_error(openai.AuthenticationError, 401), UpstreamUnavailable),
    (_status_error(openai.RateLimitError, 429), UpstreamRateLimited),
    (_status_error(openai.InternalServerError, 500), UpstreamError),
])
def test_openai_errors_are_translated(ollama_client, openai_client, error, expected):
    openai_client.chat.completions.create.side_effect = error

    with pytest.raises(expected) as exc:
        ollama_client.chat("hello")
    assert exc.type is expected


def test_status_codes_of_upstream_errors():
    assert UpstreamUnavailable.status_code == 503
    assert UpstreamRateLimited.status_code == 429
    assert UpstreamError.status_code == 500


def test_test_connection(ollama_client, openai_client):
    assert ollama_client.test_connection() is True

    openai_client.models.list.side_effect = openai.APIConnectionError(request=REQUEST)
    assert ollama_client.test_connection() is False


def test_default_client_has_timeout_and_no_retries():
    settings = Settings(mongodb_uri="mongodb://localhost:27017", jwt_secret_key="x", ollama_timeout_seconds=12)
    client = OllamaClient(settings).client
    assert client.timeout == 12
    assert client.max_retries == 0
    assert str(client.base_url).startswith("http://localhost:11434/v1")
