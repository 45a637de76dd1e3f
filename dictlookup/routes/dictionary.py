"""Dictionary lookup routes."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Path

from dictlookup.dependencies import get_dictionary_service
from dictlookup.services.dictionary import DictionaryService, Language

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dictionary", tags=["dictionary"])

RESPONSE_EXAMPLE: dict[str, Any] = {
    "word": "class",
    "parts_of_speech": ["noun", "verb"],
    "verbs": [{"id": 0, "form_type": "simple present", "text": "class"}],
    "pronunciations": [
        {
            "part_of_speech": "noun",
            "region": "us",
            "audio_url": "https://dictionary.cambridge.org/us/media/english/us_pron/c/cla/class/class.mp3",
            "phonetic": "/klæs/",
        }
    ],
    "definitions": [
        {
            "id": 0,
            "part_of_speech": "noun",
            "source": "cald4",
            "text": "a group of students who are taught together at school, college, or university",
            "translation": "",
            "examples": [
                {"id": 0, "text": "We were in the same class at school.", "translation": ""}
            ],
        }
    ],
}


@router.get(
    "/{language}/{word}",
    summary="Look up a word in the Cambridge Dictionary",
    description=(
        "Scrapes pronunciations, definitions and examples from the Cambridge Dictionary "
        "and verb forms from Wiktionary. Results are cached."
    ),
    responses={
        200: {"content": {"application/json": {"example": RESPONSE_EXAMPLE}}},
        400: {"description": "Invalid language or word"},
        404: {"description": "Word not found"},
        503: {"description": "Dictionary site unavailable"},
    },
)
async def get_dictionary(
    language: str = Path(
        description=f"Lookup language, one of: {', '.join(Language.values())}",
        examples=["en"],
        json_schema_extra={"enum": Language.values()},
    ),
    word: str = Path(description="Word to look up", examples=["class"]),
    service: DictionaryService = Depends(get_dictionary_service),
) -> dict[str, Any]:
    """Look up a word and return the normalized entry."""
    if language not in Language.values():
        raise HTTPException(status_code=400, detail=f"Unsupported language: {language}")
    if not word.strip():
        raise HTTPException(status_code=400, detail="Word must not be empty")

    result = await service.lookup(word, language)
    return result.to_dict()
