"""Tests for the Ollama generate client."""
import pytest
import requests
from unittest.mock import MagicMock

from crowdcheck.config import Settings
from crowdcheck.ollama import InferenceError, OllamaClient


def _response(payload=None, json_error=None, status_error=None):
    resp = MagicMock()
    if json_error:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    if status_error:
        resp.raise_for_status.side_effect = status_error
    return resp


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return OllamaClient("http://ollama:11434/", "llama3.2:3b", session=session)


class TestGenerate:
    def test_posts_non_streaming_request(self, client, session):
        session.post.return_value = _response({"response": " TRUE \n", "done": True})

        assert client.generate("classify this") == "TRUE"

        args, kwargs = session.post.call_args
        assert args[0] == "http://ollama:11434/api/generate"
        assert kwargs["json"] == {
            "model": "llama3.2:3b",
            "prompt": "classify this",
            "stream": False,
            "options": {"temperature": 0.1, "top_p": 0.9, "max_tokens": 150},
        }
        assert kwargs["timeout"] is None

    def test_connection_error(self, client, session):
        session.post.side_effect = requests.ConnectionError("refused")
        with pytest.raises(InferenceError):
            client.generate("x")

    def test_http_error_status(self, client, session):
        session.post.return_value = _response(status_error=requests.HTTPError("500 Server Error"))
        with pytest.raises(InferenceError):
            client.generate("x")

    def test_non_json_body(self, client, session):
        session.post.return_value = _response(json_error=ValueError("Expecting value"))
        with pytest.raises(InferenceError):
            client.generate("x")

    @pytest.mark.parametrize("payload", [{"done": True}, {"response": None}, ["TRUE"]])
    def test_missing_response_text(self, client, session, payload):
        session.post.return_value = _response(payload)
        with pytest.raises(InferenceError):
            client.generate("x")


class TestFromSettings:
    def test_primary_model(self):
        settings = Settings(_env_file=None, OLLAMA_BASE_URL="http://gpu:11434", OLLAMA_TIMEOUT=12)
        client = OllamaClient.from_settings(settings)
        assert client.generate_url == "http://gpu:11434/api/generate"
        assert client.model == settings.OLLAMA_MODEL
        assert client.timeout == 12

    def test_alternative_model(self):
        settings = Settings(_env_file=None, OLLAMA_ALTERNATIVE_MODEL="llama3.2:1b")
        client = OllamaClient.from_settings(settings, alternative=True)
        assert client.model == "llama3.2:1b"
