from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from arabic_translator.dependencies import get_translator
from arabic_translator.errors import TranslationError
from arabic_translator.schemas.translation import (
    ImageTranslateRequest,
    TextTranslateBody,
    TextTranslateRequest,
    TranslateRequest,
    TranslateResponse,
)
from arabic_translator.services.translator import Translator

router = APIRouter(prefix="/translate", tags=["translate"])


async def _translate(
    translator: Translator, request: TranslateRequest
) -> TranslateResponse:
    try:
        words = await translator.translate(request)
    except TranslationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return TranslateResponse(words=words)


@router.post("", response_model=TranslateResponse)
async def translate_text(
    body: TextTranslateBody,
    translator: Translator = Depends(get_translator),
):
    """Word-by-word translation of Arabic text, in source order."""
    return await _translate(translator, TextTranslateRequest(content=body.text))


@router.post("/image", response_model=TranslateResponse)
async def translate_image(
    file: UploadFile = File(...),
    translator: Translator = Depends(get_translator),
):
    """Recognize the Arabic text in an image and translate it word by word."""
    image_bytes = await file.read()
    return await _translate(
        translator,
        ImageTranslateRequest(data=image_bytes, mime_type=file.content_type or ""),
    )
