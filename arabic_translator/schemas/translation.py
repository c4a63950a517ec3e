import math
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator

ALLOWED_IMAGE_TYPES = ("image/png", "image/jpeg", "image/webp")


class WordTranslation(BaseModel):
    arabic: str
    translation: str
    pronunciation: str
    confidence: float | None = None

    @field_validator("confidence", mode="before")
    @classmethod
    def _numeric_confidence(cls, value):
        if value is None:
            return None
        # bool is an int subclass; a numeric string is still a string
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("confidence must be a number")
        try:
            number = float(value)
        except OverflowError as e:
            raise ValueError("confidence is too large for a float") from e
        if not math.isfinite(number):
            raise ValueError("confidence must be finite")
        return number

    @property
    def confidence_in_range(self) -> bool:
        return self.confidence is None or 0.0 <= self.confidence <= 1.0

    def clamped(self) -> "WordTranslation":
        if self.confidence_in_range:
            return self
        return self.model_copy(
            update={"confidence": min(max(self.confidence, 0.0), 1.0)}
        )


class TextTranslateRequest(BaseModel):
    kind: Literal["text"] = "text"
    content: str


class ImageTranslateRequest(BaseModel):
    kind: Literal["image"] = "image"
    data: bytes
    mime_type: str


TranslateRequest = Annotated[
    Union[TextTranslateRequest, ImageTranslateRequest], Field(discriminator="kind")
]


class TextTranslateBody(BaseModel):
    text: str


class TranslateResponse(BaseModel):
    words: list[WordTranslation]
