"""HTML pages for the browser UI.

The form posts to ``/ui/translate`` through HTMX, which swaps the returned
fragment into the results area. Errors are rendered as fragments too, so this
route always answers 200.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from arabic_translator.dependencies import get_translator
from arabic_translator.errors import ConfigurationError, TranslationError
from arabic_translator.rendering import ViewState, build_rows
from arabic_translator.schemas.translation import (
    ALLOWED_IMAGE_TYPES,
    ImageTranslateRequest,
    TextTranslateRequest,
)
from arabic_translator.services.translator import Translator

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, translator: Translator = Depends(get_translator)):
    config_error = None
    if not translator.configured:
        config_error = ConfigurationError().message
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "state": ViewState.IDLE,
            "config_error": config_error,
            "accept": ",".join(ALLOWED_IMAGE_TYPES),
        },
    )


@router.post("/ui/translate", response_class=HTMLResponse)
async def translate_form(
    request: Request,
    mode: str = Form("text"),
    text: str = Form(""),
    file: UploadFile | None = File(None),
    translator: Translator = Depends(get_translator),
):
    if mode == "image":
        # browsers send an empty part when no file was picked
        has_file = file is not None and bool(file.filename)
        body = ImageTranslateRequest(
            data=await file.read() if has_file else b"",
            mime_type=(file.content_type or "") if has_file else "",
        )
    else:
        body = TextTranslateRequest(content=text)

    try:
        words = await translator.translate(body)
    except TranslationError as e:
        context = {"state": ViewState.ERROR, "error": e.message}
    except Exception:
        logger.exception("Translation failed")
        context = {"state": ViewState.ERROR, "error": TranslationError().message}
    else:
        context = {"state": ViewState.SUCCESS, "rows": build_rows(words)}
    return templates.TemplateResponse(request, "_results.html", context)
