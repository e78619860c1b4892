from typing import Optional

from fastapi import APIRouter, Request

from ..schemas import WordCheck

router = APIRouter()


# Dictionary validation REST endpoint
@router.get('/validate', response_model=WordCheck)
async def validate_word(word: str, request: Request, language: Optional[str] = None):
    language = language or request.app.state.config.LANGUAGE
    normalized = word.strip().lower()
    valid = request.app.state.dictionary.is_valid(normalized, language)
    return WordCheck(word=normalized, language=language, valid=valid)
