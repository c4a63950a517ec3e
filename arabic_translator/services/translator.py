import json
import logging
import re

from pydantic import TypeAdapter, ValidationError

from arabic_translator.errors import (
    ConfigurationError,
    EmptyInputError,
    InvalidResponseShapeError,
    RemoteCallError,
    UnsupportedImageTypeError,
)
from arabic_translator.schemas.translation import (
    ALLOWED_IMAGE_TYPES,
    TextTranslateRequest,
    TranslateRequest,
    WordTranslation,
)
from arabic_translator.services.llm_backends import LLMBackend
from arabic_translator.services.prompts import (
    build_image_prompt,
    build_text_prompt,
    word_list_schema,
)

logger = logging.getLogger(__name__)

_WORD_LIST = TypeAdapter(list[WordTranslation])

IMAGE_FAILURE_MESSAGE = (
    "Gagal mendapatkan terjemahan gambar dari model AI. "
    "Model mungkin tidak dapat membaca teks pada gambar."
)

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)


def _strip_code_fence(text: str) -> str:
    text = text.strip()
    match = _CODE_FENCE.match(text)
    return match.group(1) if match else text


def _reject(reason: str, raw: str) -> InvalidResponseShapeError:
    logger.warning("Rejected model response (%s): %.200r", reason, raw)
    return InvalidResponseShapeError()


def parse_word_list(raw: str, envelope_key: str | None = None) -> list[WordTranslation]:
    """Parse and validate a model response into word translations.

    The whole response is rejected if any element is malformed; a partial list
    is never returned.
    """
    try:
        payload = json.loads(_strip_code_fence(raw))
    except (ValueError, RecursionError) as e:
        raise _reject("not JSON", raw) from e

    if envelope_key and isinstance(payload, dict):
        payload = payload.get(envelope_key)
    if not isinstance(payload, list):
        raise _reject("not an array", raw)
    if not payload:
        raise _reject("empty array", raw)

    try:
        words = _WORD_LIST.validate_python(payload)
    except ValidationError as e:
        raise _reject(f"{e.error_count()} invalid field(s)", raw) from e

    out_of_range = [w.confidence for w in words if not w.confidence_in_range]
    if out_of_range:
        logger.warning("Clamping out-of-range confidence values %s", out_of_range)
        words = [w.clamped() for w in words]
    return words


class Translator:
    """Turns one translate request into one model call.

    Built once at startup with its backend; nothing is cached between calls.
    """

    def __init__(self, backend: LLMBackend):
        self.backend = backend

    @property
    def configured(self) -> bool:
        return self.backend.has_credential

    async def translate(self, request: TranslateRequest) -> list[WordTranslation]:
        if not self.configured:
            raise ConfigurationError()

        failure_message = None
        call_kwargs: dict = {
            "json_schema": word_list_schema(strict=self.backend.strict_schema)
        }
        if isinstance(request, TextTranslateRequest):
            text = request.content.strip()
            if not text:
                raise EmptyInputError()
            prompt = build_text_prompt(text)
        else:
            if not request.data:
                raise EmptyInputError("Silakan unggah gambar berisi teks Arab.")
            if request.mime_type not in ALLOWED_IMAGE_TYPES:
                raise UnsupportedImageTypeError()
            prompt = build_image_prompt()
            failure_message = IMAGE_FAILURE_MESSAGE
            call_kwargs["image"] = request.data
            call_kwargs["media_type"] = request.mime_type

        try:
            raw = await self.backend.generate(prompt, **call_kwargs)
        except Exception as e:
            logger.exception("Translation request to %s failed", self.backend.provider)
            raise RemoteCallError(failure_message) from e

        words = parse_word_list(raw, self.backend.envelope_key)
        logger.info(
            "Translated %s request into %d words via %s",
            request.kind,
            len(words),
            self.backend.provider,
        )
        return words
