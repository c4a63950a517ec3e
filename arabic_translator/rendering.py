"""View models for the translation table.

Model output is never rendered as trusted markup: ``render_arabic`` keeps only
the text of the ``arabic`` field and re-creates the harakat highlighting itself.
"""

import enum
import math
import re
from dataclasses import dataclass

from markupsafe import Markup, escape

from arabic_translator.schemas.translation import WordTranslation

MARKER_THRESHOLD = 0.95
LOW_CONFIDENCE_THRESHOLD = 0.80

# tashkil, superscript alef and Quranic annotation marks
HARAKAT = re.compile("[\u064b-\u065f\u0670\u06d6-\u06ed]")


class ViewState(enum.Enum):
    IDLE = "idle"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ConfidenceMarker:
    level: str  # "medium" (amber) or "low" (red)
    percent: int

    @property
    def label(self) -> str:
        return f"Akurasi OCR: {self.percent}%"


@dataclass(frozen=True)
class WordRow:
    arabic: Markup
    pronunciation: str
    translation: str
    marker: ConfidenceMarker | None


def confidence_percent(confidence: float) -> int:
    # half-up, not banker's rounding
    return int(math.floor(confidence * 100 + 0.5))


def confidence_marker(confidence: float | None) -> ConfidenceMarker | None:
    if confidence is None or confidence >= MARKER_THRESHOLD:
        return None
    level = "medium" if confidence >= LOW_CONFIDENCE_THRESHOLD else "low"
    return ConfidenceMarker(level=level, percent=confidence_percent(confidence))


def render_arabic(markup: str) -> Markup:
    text = Markup(markup).striptags()
    return Markup("").join(
        Markup('<span class="harakat">{}</span>').format(char)
        if HARAKAT.match(char)
        else escape(char)
        for char in text
    )


def build_rows(words: list[WordTranslation]) -> list[WordRow]:
    return [
        WordRow(
            arabic=render_arabic(word.arabic),
            pronunciation=word.pronunciation,
            translation=word.translation,
            marker=confidence_marker(word.confidence),
        )
        for word in words
    ]
