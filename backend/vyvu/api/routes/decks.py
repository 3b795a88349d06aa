"""Deck and word list API routes.

Handlers are sync since every one of them reads or writes the progress store.
"""

from fastapi import APIRouter, status
from pydantic import BaseModel

from vyvu.api.dependencies import DeckCatalogDep, DeckDep, api_error
from vyvu.domain.entities.vocabulary_entry import VocabularyEntry
from vyvu.domain.services.deck_catalog import DeckCatalog, WordNotFoundError
from vyvu.domain.value_objects.deck_type import DeckType
from vyvu.domain.value_objects.statistics import DeckStats

router = APIRouter(prefix="/api/decks", tags=["decks"])


# =============================================================================
# Response Models
# =============================================================================


class DeckInfo(BaseModel):
    """Deck with learned counts."""

    name: str
    title: str
    total_count: int
    learned_count: int
    unlearned_count: int
    progress: float

    @classmethod
    def from_stats(cls, stats: DeckStats) -> "DeckInfo":
        return cls(
            name=stats.name,
            title=stats.title,
            total_count=stats.total_count,
            learned_count=stats.learned_count,
            unlearned_count=stats.unlearned_count,
            progress=stats.progress,
        )


class DecksResponse(BaseModel):
    """Response for deck listing."""

    decks: list[DeckInfo]


class WordResponse(BaseModel):
    """Vocabulary entry in API responses."""

    id: str
    german: str
    german_alternatives: list[str]
    vietnamese: str
    vietnamese_alternatives: list[str]
    category: str
    category_title: str
    learned: bool
    has_sentence: bool

    @classmethod
    def from_entry(
        cls, word: VocabularyEntry, deck: DeckType, catalog: DeckCatalog
    ) -> "WordResponse":
        return cls(
            id=word.id,
            german=word.source_canonical,
            german_alternatives=list(word.source_alternates),
            vietnamese=word.target_canonical,
            vietnamese_alternatives=list(word.target_alternates),
            category=word.category.value,
            category_title=word.category.title,
            learned=catalog.is_learned(word, deck),
            has_sentence=catalog.sentence_for(deck, word) is not None,
        )


class WordListResponse(BaseModel):
    """Response for the word list of a deck."""

    deck: str
    search: str
    total_count: int
    words: list[WordResponse]


class ToggleLearnedResponse(BaseModel):
    """Response after toggling a word."""

    word_id: str
    learned: bool


# =============================================================================
# Routes
# =============================================================================


@router.get("", response_model=DecksResponse)
def list_decks(catalog: DeckCatalogDep) -> DecksResponse:
    """List all decks with learned/unlearned counts."""
    return DecksResponse(decks=[DeckInfo.from_stats(catalog.deck_stats(d)) for d in DeckType])


@router.get("/{deck}/words", response_model=WordListResponse)
def list_words(
    deck: DeckDep,
    catalog: DeckCatalogDep,
    search: str = "",
) -> WordListResponse:
    """List the words of a deck, optionally filtered.

    The search matches any German or Vietnamese form, ignoring case and
    accents ("bun" finds "bún").
    """
    words = catalog.search(deck, search)
    return WordListResponse(
        deck=deck.value,
        search=search,
        total_count=len(catalog.words(deck)),
        words=[WordResponse.from_entry(w, deck, catalog) for w in words],
    )


@router.post(
    "/{deck}/words/{word_id}/toggle",
    response_model=ToggleLearnedResponse,
    responses={404: {"description": "Deck or word not found"}},
)
def toggle_learned(
    deck: DeckDep,
    word_id: str,
    catalog: DeckCatalogDep,
) -> ToggleLearnedResponse:
    """Flip a word between learned and unlearned."""
    try:
        learned = catalog.toggle_learned(deck, word_id)
    except WordNotFoundError as e:
        raise api_error(status.HTTP_404_NOT_FOUND, "WORD_NOT_FOUND", str(e)) from None

    return ToggleLearnedResponse(word_id=word_id, learned=learned)


@router.post("/{deck}/reset", response_model=DeckInfo)
def reset_deck(deck: DeckDep, catalog: DeckCatalogDep) -> DeckInfo:
    """Forget all learned words of a deck."""
    catalog.reset_progress(deck)
    return DeckInfo.from_stats(catalog.deck_stats(deck))
