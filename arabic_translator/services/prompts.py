"""Prompts and the output-shape declaration sent to the model.

Everything here is pure string/dict construction: the same input always yields
the same prompt.
"""

HARAKAT_SPAN = '<span style="color:green;">{mark}</span>'

WORD_FIELDS = {
    "arabic": (
        "The original Arabic word with full harakat. Each harakat (vowel mark) "
        "character MUST be wrapped individually in an HTML span tag with green "
        'color, like this: <span style="color:green;">َ</span>.'
    ),
    "translation": "The Indonesian translation of the word.",
    "pronunciation": "The romanized transliteration of the Arabic word.",
    "confidence": (
        "A confidence score from 0.0 to 1.0 indicating the likelihood that the "
        "Arabic word was recognized correctly. 1.0 is highest confidence."
    ),
}

REQUIRED_FIELDS = ("arabic", "translation", "pronunciation")

_CONNECTOR_GUIDANCE = (
    "Pay special attention to common connecting words (prepositions, "
    "conjunctions, particles). Translate them contextually so the Indonesian "
    "phrasing is natural and grammatically correct. For example, `هُوَ` can be "
    "'ia (adalah)', `إِلَى` should be 'kepada', the words in `وَمَا كَانَتْ` "
    "should be translated to form 'Dan tidaklah', and `إِلَّا` as 'melainkan'. "
    "Choose the best Indonesian equivalent based on the surrounding words."
)


def _annotate(*pairs: tuple[str, str]) -> str:
    return "".join(base + HARAKAT_SPAN.format(mark=mark) for base, mark in pairs)


_FATHA_SPAN = HARAKAT_SPAN.format(mark="\u064e")

_HARAKAT_EXAMPLE = _annotate(("ك", "\u064e"), ("ت", "\u064e"), ("ب", "\u064e"))

# quotes escaped so the example stays valid JSON
_EXAMPLE_ARABIC = "ٱلْ" + _annotate(("ح", "\u064e"), ("م", "\u0652"), ("د", "\u064f"))
_EXAMPLE_ARABIC = _EXAMPLE_ARABIC.replace('"', '\\"')


def word_list_schema(strict: bool = False) -> dict:
    """JSON schema of the expected response: an array of word objects.

    ``strict`` builds the variant required by providers whose strict mode
    demands every property be listed as required; ``confidence`` then becomes
    nullable instead of optional.
    """
    props = {
        name: {"type": "string", "description": WORD_FIELDS[name]}
        for name in REQUIRED_FIELDS
    }
    props["confidence"] = {
        "type": ["number", "null"] if strict else "number",
        "description": WORD_FIELDS["confidence"],
    }
    required = list(WORD_FIELDS) if strict else list(REQUIRED_FIELDS)
    return {
        "type": "array",
        "items": {
            "type": "object",
            "properties": props,
            "required": required,
            "additionalProperties": False,
        },
    }


def build_text_prompt(text: str) -> str:
    return (
        "Translate the following Arabic text into Indonesian, word by word, "
        "with high contextual accuracy for connecting words.\n\n"
        "**Key Instructions:**\n"
        "1.  **Word Segmentation:** Split the text into its individual words. "
        "Each Arabic word becomes exactly one object in the output.\n"
        "2.  **Harakat Formatting:** For each word, you MUST add the correct "
        "harakat (vowel marks). Wrap EACH harakat character individually in a "
        f"green-colored HTML span tag, like this: `{_FATHA_SPAN}`. "
        "Do NOT wrap the whole word or several harakat in one span.\n"
        f"3.  **Contextual Connectors:** {_CONNECTOR_GUIDANCE}\n"
        "4.  **Confidence:** Give every word a 'confidence' score from 0.0 to "
        "1.0 for how certain you are that the word was read correctly.\n"
        "5.  **Preserve Order:** The order of words in the output array must "
        "match the original text.\n"
        "6.  **JSON Output:** Return ONLY a valid JSON array where each object "
        "has the keys 'arabic' (with styled harakat), 'translation', "
        "'pronunciation' and 'confidence'. Do not add any explanation, "
        "introductory text, or markdown formatting.\n\n"
        f'Arabic text: "{text}"'
    )


def build_image_prompt() -> str:
    return (
        "You are a highly specialized AI model with a dual function: "
        "state-of-the-art Optical Character Recognition (OCR) for Arabic script "
        "and expert-level Arabic-to-Indonesian contextual translation. Your task "
        "is to process the following image with maximum precision.\n\n"
        "**CRITICAL DIRECTIVES - Adherence is Mandatory:**\n\n"
        "1.  **OCR ACCURACY IS PARAMOUNT:** Recognize the Arabic text with the "
        "highest possible accuracy. Carefully analyze the script, including "
        "subtle marks. Output the words in reading order, one object per word.\n\n"
        "2.  **MANDATORY HARAKAT & HTML COLORING:** For EVERY Arabic word you "
        "recognize, add the full, contextually correct harakat. You MUST wrap "
        "EACH harakat character individually in an HTML span tag styled with "
        f"green color. Example: `{_HARAKAT_EXAMPLE}`. Do NOT wrap the entire "
        "word or multiple harakat in a single span.\n\n"
        "3.  **MANDATORY CONFIDENCE SCORE:** For EVERY word, provide a "
        "`confidence` score: a number from 0.0 to 1.0 representing your "
        "certainty of the OCR accuracy for that specific word. 1.0 means "
        "perfect certainty.\n\n"
        "4.  **CONTEXTUAL TRANSLATION:** Provide a precise, word-by-word "
        f"Indonesian translation. {_CONNECTOR_GUIDANCE}\n\n"
        "**OUTPUT FORMAT - STRICTLY JSON:**\n"
        "Return ONLY a valid JSON array. Each object represents a single word "
        "and contains exactly four keys: `arabic`, `translation`, "
        "`pronunciation` (romanized transliteration), and `confidence`.\n\n"
        "Example of a single object in the array:\n"
        "{\n"
        f'  "arabic": "{_EXAMPLE_ARABIC}",\n'
        '  "translation": "segala puji",\n'
        '  "pronunciation": "al-ḥamdu",\n'
        '  "confidence": 0.98\n'
        "}\n\n"
        "Do not add any text, explanations, or markdown formatting outside of "
        "the JSON array. The response must start with `[` and end with `]`."
    )
