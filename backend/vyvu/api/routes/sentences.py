"""Example sentence API routes."""

from fastapi import APIRouter, status
from pydantic import BaseModel

from vyvu.api.dependencies import DeckCatalogDep, DeckDep, api_error
from vyvu.domain.services.deck_catalog import WordNotFoundError

router = APIRouter(prefix="/api/sentences", tags=["sentences"])


class SentenceInfo(BaseModel):
    """German sentence with its Vietnamese translation."""

    german: str
    vietnamese: str


class SentenceResponse(BaseModel):
    """Example sentence lookup result (sentence is null when none exists)."""

    word_id: str
    sentence: SentenceInfo | None


@router.get(
    "/{deck}/{word_id}",
    response_model=SentenceResponse,
    responses={404: {"description": "Deck or word not found"}},
)
async def get_sentence(deck: DeckDep, word_id: str, catalog: DeckCatalogDep) -> SentenceResponse:
    """Find the example sentence for a word."""
    try:
        word = catalog.find_word(deck, word_id)
    except WordNotFoundError as e:
        raise api_error(status.HTTP_404_NOT_FOUND, "WORD_NOT_FOUND", str(e)) from None

    sentence = catalog.sentence_for(deck, word)
    return SentenceResponse(
        word_id=word.id,
        sentence=(
            SentenceInfo(german=sentence.source_text, vietnamese=sentence.target_text)
            if sentence
            else None
        ),
    )
