import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from arabic_translator.api import translate, ui
from arabic_translator.config import Settings, get_settings
from arabic_translator.services.llm_backends import create_backend
from arabic_translator.services.translator import Translator

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def create_app(
    settings: Settings | None = None, translator: Translator | None = None
) -> FastAPI:
    settings = settings or get_settings()
    if translator is None:
        translator = Translator(create_backend(settings))
    if not translator.configured:
        logger.error(
            "No API key configured (KITAB_API_KEY); every translation will fail"
        )

    app = FastAPI(title="Penerjemah Kitab Arab", version="0.1.0")
    app.state.translator = translator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Tighten in production
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    app.include_router(ui.router)
    app.include_router(translate.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
