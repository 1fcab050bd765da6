"""
API routes for translation and language listing.
"""

from fastapi import APIRouter, Request
from pydantic import BaseModel
from languages import list_languages
from translator import Translator
from validators import validate_request

router = APIRouter()


class TranslateRequest(BaseModel):
    q: str
    source: str = "en"
    target: str = "es"


def get_translator(request: Request) -> Translator:
    """Get the translator created at startup."""
    return request.app.state.translator


@router.post("/translate")
async def translate_text(body: TranslateRequest, request: Request):
    """Translate text, falling back to the offline dictionary when needed."""
    validate_request(body.q, body.source, body.target)
    translator = get_translator(request)
    translated = await translator.translate_async(body.q, body.source, body.target)
    return {
        "translatedText": translated,
        "source": body.source,
        "target": body.target
    }


@router.get("/languages")
async def get_languages():
    """List supported languages in display order."""
    return {
        "languages": [
            {"code": lang.code, "name": lang.name}
            for lang in list_languages()
        ]
    }
