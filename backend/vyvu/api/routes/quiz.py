"""Quiz session API routes.

One quiz runs per server (single learner). Every mutating route returns the
resulting quiz state so clients never need a second request. Handlers are
plain functions because they reach the SQLite progress store; FastAPI runs
them in its threadpool.
"""

import logging

from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from vyvu.api.dependencies import DeckCatalogDep, QuizEngineDep, api_error
from vyvu.api.routes.decks import WordResponse
from vyvu.config import get_default_quiz_size
from vyvu.domain.services import quiz_setup
from vyvu.domain.services.deck_catalog import DeckCatalog, UnknownDeckError, parse_deck
from vyvu.domain.services.quiz_engine import QuizEngine
from vyvu.domain.value_objects.gamification_state import SessionRewards
from vyvu.domain.value_objects.quiz_direction import QuizDirection
from vyvu.domain.value_objects.quiz_stage import QuizStage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/quiz", tags=["quiz"])


# =============================================================================
# Request/Response Models
# =============================================================================


class StartQuizRequest(BaseModel):
    """Request body for starting a quiz.

    size -1 selects every available word; omitted uses DEFAULT_QUIZ_SIZE.
    """

    deck: str = "core"
    direction: QuizDirection = QuizDirection.DE_TO_VI
    size: int | None = None


class AnswerRequest(BaseModel):
    """Typed answer for the current word."""

    answer: str
    realtime: bool = False


class SpeakRequest(BaseModel):
    """Text to speak; omitted text speaks the prompt or the expected answer."""

    text: str | None = None
    is_source: bool = True


class RewardsResponse(BaseModel):
    """XP awarded for a completed session."""

    base_xp: int
    bonus_xp: int
    total_xp: int
    new_streak: int


class SummaryResponse(BaseModel):
    """Session result numbers."""

    total_words: int
    correct_words: int
    incorrect_words: int
    accuracy: float
    time_spent: float
    xp_earned: int


class QuizStateResponse(BaseModel):
    """Full quiz state after an operation."""

    stage: QuizStage
    session_id: str
    deck: str
    direction: QuizDirection
    current_index: int
    total_words: int
    progress: float
    accuracy: float
    correct_count: int
    seen_count: int
    prompt: str | None = None
    prompt_language: str
    answer_language: str
    reveal_answer: bool
    is_correct: bool | None = None
    answers: list[str] | None = Field(
        default=None, description="Accepted answers, only present once revealed"
    )
    current_word: WordResponse | None = None
    summary: SummaryResponse | None = None
    rewards: RewardsResponse | None = None


class AnswerResponse(BaseModel):
    """Result of an answer check."""

    correct: bool
    quiz: QuizStateResponse


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    """Error response wrapper."""

    error: ErrorDetail


# =============================================================================
# Helpers
# =============================================================================


def _rewards(rewards: SessionRewards | None) -> RewardsResponse | None:
    return RewardsResponse(**rewards.to_dict()) if rewards else None


def _state(engine: QuizEngine, catalog: DeckCatalog) -> QuizStateResponse:
    session = engine.session
    config = session.configuration
    word = engine.current_word
    in_quiz = engine.stage is QuizStage.IN_QUIZ

    summary = None
    if engine.stage is QuizStage.SUMMARY:
        stats = engine.session_statistics()
        summary = SummaryResponse(
            total_words=stats.total_words,
            correct_words=stats.correct_words,
            incorrect_words=stats.incorrect_words,
            accuracy=stats.accuracy,
            time_spent=stats.time_spent,
            xp_earned=stats.xp_earned,
        )

    return QuizStateResponse(
        stage=engine.stage,
        session_id=session.id,
        deck=config.deck.value,
        direction=config.direction,
        current_index=session.current_index,
        total_words=len(session.words),
        progress=session.progress,
        accuracy=session.accuracy,
        correct_count=len(session.correct_ids),
        seen_count=len(session.seen_ids),
        prompt=engine.prompt() if in_quiz else None,
        prompt_language=config.direction.prompt_language.value,
        answer_language=config.direction.answer_language.value,
        reveal_answer=engine.reveal_answer,
        is_correct=engine.is_correct,
        answers=list(engine.expected_answers()) if in_quiz and engine.reveal_answer else None,
        current_word=(
            WordResponse.from_entry(word, config.deck, catalog)
            if in_quiz and word and engine.reveal_answer
            else None
        ),
        summary=summary,
        rewards=_rewards(engine.last_rewards),
    )


def _require_active(engine: QuizEngine) -> None:
    """Raise 409 unless a quiz is running."""
    if engine.stage is not QuizStage.IN_QUIZ:
        raise api_error(
            status.HTTP_409_CONFLICT,
            "QUIZ_NOT_ACTIVE",
            f"No quiz in progress (stage: {engine.stage})",
        )


# =============================================================================
# Routes
# =============================================================================


@router.get("", response_model=QuizStateResponse)
def get_quiz(engine: QuizEngineDep, catalog: DeckCatalogDep) -> QuizStateResponse:
    """Current quiz state."""
    return _state(engine, catalog)


@router.post(
    "/start",
    response_model=QuizStateResponse,
    responses={
        400: {"model": ErrorResponse, "description": "No words available"},
        404: {"model": ErrorResponse, "description": "Deck not found"},
    },
)
def start_quiz(
    request: StartQuizRequest,
    engine: QuizEngineDep,
    catalog: DeckCatalogDep,
) -> QuizStateResponse:
    """Start a quiz over the deck's unlearned words.

    Once every word of the deck is learned the whole deck is used again.
    Starting while a quiz runs replaces it.
    """
    try:
        deck = parse_deck(request.deck)
    except UnknownDeckError as e:
        raise api_error(status.HTTP_404_NOT_FOUND, "DECK_NOT_FOUND", str(e)) from None

    size = request.size if request.size is not None else get_default_quiz_size()
    config = quiz_setup.build_configuration(catalog, deck, request.direction, size)

    if not engine.start_session(config):
        raise api_error(
            status.HTTP_400_BAD_REQUEST,
            "NO_WORDS_AVAILABLE",
            f"Cannot start a quiz of size {size} on deck {deck}",
        )

    return _state(engine, catalog)


@router.post(
    "/review",
    response_model=QuizStateResponse,
    responses={400: {"model": ErrorResponse, "description": "Nothing to review"}},
)
def start_review(engine: QuizEngineDep, catalog: DeckCatalogDep) -> QuizStateResponse:
    """Start a review round over the words the last session missed."""
    if not engine.start_review_round():
        raise api_error(
            status.HTTP_400_BAD_REQUEST,
            "NO_WORDS_AVAILABLE",
            "Nothing to review: finish a quiz with missed words first",
        )
    return _state(engine, catalog)


@router.post(
    "/answer",
    response_model=AnswerResponse,
    responses={409: {"model": ErrorResponse, "description": "No quiz in progress"}},
)
def answer(
    request: AnswerRequest,
    engine: QuizEngineDep,
    catalog: DeckCatalogDep,
) -> AnswerResponse:
    """Check an answer for the current word.

    With realtime=true a miss does not mark the word wrong (keystroke checks).
    """
    _require_active(engine)
    if request.realtime:
        correct = engine.evaluate_realtime(request.answer)
    else:
        correct = engine.evaluate(request.answer)
    return AnswerResponse(correct=correct, quiz=_state(engine, catalog))


@router.post(
    "/reveal",
    response_model=QuizStateResponse,
    responses={409: {"model": ErrorResponse, "description": "No quiz in progress"}},
)
def reveal(engine: QuizEngineDep, catalog: DeckCatalogDep) -> QuizStateResponse:
    """Show the answer of the current word."""
    _require_active(engine)
    engine.reveal()
    return _state(engine, catalog)


@router.post(
    "/mark-learned",
    response_model=QuizStateResponse,
    responses={409: {"model": ErrorResponse, "description": "No quiz in progress"}},
)
def mark_learned(engine: QuizEngineDep, catalog: DeckCatalogDep) -> QuizStateResponse:
    """Mark the current word as already known."""
    _require_active(engine)
    engine.mark_learned()
    return _state(engine, catalog)


@router.post("/advance", response_model=QuizStateResponse)
def advance(engine: QuizEngineDep, catalog: DeckCatalogDep) -> QuizStateResponse:
    """Go to the next word; after the last word the quiz completes."""
    engine.advance()
    return _state(engine, catalog)


@router.post("/back", response_model=QuizStateResponse)
def go_back(engine: QuizEngineDep, catalog: DeckCatalogDep) -> QuizStateResponse:
    """Go to the previous word."""
    engine.go_back()
    return _state(engine, catalog)


@router.post("/complete", response_model=QuizStateResponse)
def complete(engine: QuizEngineDep, catalog: DeckCatalogDep) -> QuizStateResponse:
    """Finish the quiz early and collect rewards."""
    engine.complete_session()
    return _state(engine, catalog)


@router.post("/reset", response_model=QuizStateResponse)
def reset(engine: QuizEngineDep, catalog: DeckCatalogDep) -> QuizStateResponse:
    """Abandon the quiz and return to setup."""
    engine.reset()
    return _state(engine, catalog)


@router.post("/speak", status_code=status.HTTP_204_NO_CONTENT)
def speak(request: SpeakRequest, engine: QuizEngineDep) -> None:
    """Speak text aloud (best-effort, never fails)."""
    text = request.text
    if text is None:
        if request.is_source:
            text = engine.prompt() or ""
        else:
            answers = engine.expected_answers()
            text = answers[0] if answers else ""
    engine.speak(text, request.is_source)
