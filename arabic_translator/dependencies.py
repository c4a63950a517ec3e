from fastapi import Request

from arabic_translator.services.translator import Translator


def get_translator(request: Request) -> Translator:
    return request.app.state.translator
