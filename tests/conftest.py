import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from arabic_translator.config import Settings
from arabic_translator.main import create_app
from arabic_translator.services.llm_backends import LLMBackend
from arabic_translator.services.translator import Translator

GREEN = '<span style="color:green;">{}</span>'

# بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ, harakat wrapped the way the prompt asks for
WORDS = [
    {
        "arabic": "ب"
        + GREEN.format("\u0650")
        + "س"
        + GREEN.format("\u0652")
        + "م"
        + GREEN.format("\u0650"),
        "translation": "dengan nama",
        "pronunciation": "bismi",
        "confidence": 0.99,
    },
    {
        "arabic": "ٱللَّهِ",
        "translation": "Allah",
        "pronunciation": "allāhi",
        "confidence": 0.9,
    },
    {
        "arabic": "ٱلرَّحْمَٰنِ",
        "translation": "Yang Maha Pengasih",
        "pronunciation": "ar-raḥmāni",
    },
]

ARABIC_TEXT = "بِسْمِ ٱللَّهِ"


class FakeBackend(LLMBackend):
    """Records every call and answers with a canned response or error."""

    provider = "fake"

    def __init__(self, response: str = "", api_key: str = "test-key", error=None):
        super().__init__(api_key=api_key, model="fake-model")
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def generate(
        self,
        prompt: str,
        image: bytes | None = None,
        media_type: str = "image/jpeg",
        json_schema: dict | None = None,
    ) -> str:
        self.calls.append(
            {
                "prompt": prompt,
                "image": image,
                "media_type": media_type,
                "json_schema": json_schema,
            }
        )
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings():
    return Settings(api_key="test-key", llm_provider="gemini")


@pytest.fixture
def fake_backend():
    return FakeBackend(json.dumps(WORDS))


@pytest.fixture
def translator(fake_backend):
    return Translator(fake_backend)


@pytest.fixture
def app(settings, translator):
    return create_app(settings, translator=translator)


# --- HTTP client ---


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


# --- Boundary mocks: provider SDKs ---


def _sequenced(make_reply):
    """Build an AsyncMock that replays queued texts through ``make_reply``."""
    responses = []
    call_index = {"i": 0}

    def set_response(text):
        responses.clear()
        responses.append(text)
        call_index["i"] = 0

    async def _side_effect(*args, **kwargs):
        idx = call_index["i"]
        call_index["i"] += 1
        text = responses[idx] if idx < len(responses) else responses[-1]
        return make_reply(text)

    create_mock = AsyncMock(side_effect=_side_effect)
    return create_mock, set_response


@pytest.fixture
def mock_genai():
    """Mock google.genai.Client at the SDK boundary."""

    def make_reply(text):
        response = MagicMock()
        response.text = text
        return response

    create_mock, set_response = _sequenced(make_reply)
    client = MagicMock()
    client.aio.models.generate_content = create_mock

    with patch("google.genai.Client", return_value=client) as client_cls:
        yield {
            "set_response": set_response,
            "create_mock": create_mock,
            "client_cls": client_cls,
        }


@pytest.fixture
def mock_anthropic():
    """Mock anthropic.AsyncAnthropic at the SDK boundary."""

    def make_reply(text):
        content_block = MagicMock()
        content_block.text = text
        message = MagicMock()
        message.content = [content_block]
        return message

    create_mock, set_response = _sequenced(make_reply)
    client = MagicMock()
    client.messages.create = create_mock

    with patch("anthropic.AsyncAnthropic", return_value=client):
        yield {"set_response": set_response, "create_mock": create_mock}


@pytest.fixture
def mock_openai():
    """Mock openai.AsyncOpenAI at the SDK boundary."""

    def make_reply(text):
        choice = MagicMock()
        choice.message.content = text
        response = MagicMock()
        response.choices = [choice]
        return response

    create_mock, set_response = _sequenced(make_reply)
    client = MagicMock()
    client.chat.completions.create = create_mock

    with patch("openai.AsyncOpenAI", return_value=client):
        yield {"set_response": set_response, "create_mock": create_mock}
