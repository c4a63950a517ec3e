"""Adapters that send one prompt to a hosted model and return its raw text."""

import base64
from abc import ABC, abstractmethod

import anthropic
import openai
from google import genai
from google.genai import types

from arabic_translator.config import Settings


class LLMBackend(ABC):
    """One provider SDK behind a single ``generate`` call.

    ``envelope_key`` is set by providers whose structured output cannot have an
    array at the root; the word list is then requested under that key.
    ``strict_schema`` asks for the schema variant where every field is required.
    """

    provider: str = ""
    envelope_key: str | None = None
    strict_schema: bool = False

    def __init__(self, api_key: str, model: str, max_tokens: int = 8192):
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        image: bytes | None = None,
        media_type: str = "image/jpeg",
        json_schema: dict | None = None,
    ) -> str:
        """Return the model's text output for ``prompt`` (and ``image``)."""

    def _enveloped(self, json_schema: dict) -> dict:
        return {
            "type": "object",
            "properties": {self.envelope_key: json_schema},
            "required": [self.envelope_key],
            "additionalProperties": False,
        }


def _gemini_schema(schema: dict) -> types.Schema:
    schema_type = schema["type"]
    nullable = None
    if isinstance(schema_type, list):
        nullable = "null" in schema_type
        schema_type = next(t for t in schema_type if t != "null")
    properties = schema.get("properties")
    return types.Schema(
        type=schema_type.upper(),
        description=schema.get("description"),
        nullable=nullable,
        items=_gemini_schema(schema["items"]) if "items" in schema else None,
        properties=(
            {name: _gemini_schema(prop) for name, prop in properties.items()}
            if properties
            else None
        ),
        required=schema.get("required"),
    )


class GeminiBackend(LLMBackend):
    provider = "gemini"

    async def generate(
        self,
        prompt: str,
        image: bytes | None = None,
        media_type: str = "image/jpeg",
        json_schema: dict | None = None,
    ) -> str:
        client = genai.Client(api_key=self.api_key)
        contents: list = []
        if image is not None:
            contents.append(types.Part.from_bytes(data=image, mime_type=media_type))
        contents.append(prompt)
        config_kwargs: dict = {"max_output_tokens": self.max_tokens}
        if json_schema:
            config_kwargs["response_mime_type"] = "application/json"
            config_kwargs["response_schema"] = _gemini_schema(json_schema)
        response = await client.aio.models.generate_content(
            model=self.model,
            contents=contents,
            config=types.GenerateContentConfig(**config_kwargs),
        )
        return response.text or ""


class AnthropicBackend(LLMBackend):
    provider = "anthropic"
    envelope_key = "words"

    async def generate(
        self,
        prompt: str,
        image: bytes | None = None,
        media_type: str = "image/jpeg",
        json_schema: dict | None = None,
    ) -> str:
        client = anthropic.AsyncAnthropic(api_key=self.api_key)
        content: list[dict] = []
        if image is not None:
            content.append(
                {
                    "type": "image",
                    "source": {
                        "type": "base64",
                        "media_type": media_type,
                        "data": base64.b64encode(image).decode("utf-8"),
                    },
                }
            )
        content.append({"type": "text", "text": prompt})
        kwargs: dict = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": content}],
        }
        if json_schema:
            kwargs["output_config"] = {
                "format": {
                    "type": "json_schema",
                    "schema": self._enveloped(json_schema),
                }
            }
        message = await client.messages.create(**kwargs)
        return message.content[0].text


class OpenAIBackend(LLMBackend):
    provider = "openai"
    envelope_key = "words"
    strict_schema = True

    async def generate(
        self,
        prompt: str,
        image: bytes | None = None,
        media_type: str = "image/jpeg",
        json_schema: dict | None = None,
    ) -> str:
        client = openai.AsyncOpenAI(api_key=self.api_key)
        content: list[dict] = []
        if image is not None:
            image_b64 = base64.b64encode(image).decode("utf-8")
            content.append(
                {
                    "type": "image_url",
                    "image_url": {"url": f"data:{media_type};base64,{image_b64}"},
                }
            )
        content.append({"type": "text", "text": prompt})
        kwargs: dict = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": content}],
        }
        if json_schema:
            kwargs["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": "word_translations",
                    "strict": True,
                    "schema": self._enveloped(json_schema),
                },
            }
        response = await client.chat.completions.create(**kwargs)
        return response.choices[0].message.content or ""


BACKENDS: dict[str, type[LLMBackend]] = {
    backend.provider: backend
    for backend in (GeminiBackend, AnthropicBackend, OpenAIBackend)
}


def create_backend(settings: Settings) -> LLMBackend:
    try:
        backend_cls = BACKENDS[settings.llm_provider]
    except KeyError:
        raise ValueError(
            f"Unknown LLM provider {settings.llm_provider!r}; "
            f"expected one of {sorted(BACKENDS)}"
        )
    return backend_cls(
        api_key=settings.api_key,
        model=settings.llm_model,
        max_tokens=settings.max_tokens,
    )
