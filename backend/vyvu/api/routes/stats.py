"""Statistics and settings API routes (sync handlers, store-backed)."""

import logging

from fastapi import APIRouter, status
from pydantic import BaseModel

from vyvu.api.dependencies import (
    DeckCatalogDep,
    GamificationEngineDep,
    ProgressStoreDep,
    api_error,
)
from vyvu.api.routes.decks import DeckInfo
from vyvu.domain.value_objects.deck_type import DeckType
from vyvu.domain.value_objects.quiz_direction import QuizDirection
from vyvu.domain.value_objects.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["stats"])


# =============================================================================
# Request/Response Models
# =============================================================================


class StatsResponse(BaseModel):
    """Aggregate progress for the home screen."""

    total_words: int
    learned_words: int
    unlearned_words: int
    overall_progress: float
    current_streak: int
    longest_streak: int
    total_xp: int
    core_progress: float
    vyvu_progress: float
    decks: list[DeckInfo]


class SettingsModel(BaseModel):
    """Learner settings."""

    tts_rate: float
    daily_goal: int
    enable_notifications: bool
    enable_haptics: bool
    preferred_deck: DeckType
    preferred_direction: QuizDirection


class SettingsUpdate(BaseModel):
    """Partial settings update; omitted fields keep their value."""

    tts_rate: float | None = None
    daily_goal: int | None = None
    enable_notifications: bool | None = None
    enable_haptics: bool | None = None
    preferred_deck: DeckType | None = None
    preferred_direction: QuizDirection | None = None


# =============================================================================
# Routes
# =============================================================================


@router.get("/stats", response_model=StatsResponse)
def get_stats(
    catalog: DeckCatalogDep,
    gamification: GamificationEngineDep,
) -> StatsResponse:
    """Learned counts, XP and streaks across all decks."""
    stats = catalog.statistics(gamification.state)
    return StatsResponse(
        total_words=stats.total_words,
        learned_words=stats.learned_words,
        unlearned_words=stats.unlearned_words,
        overall_progress=stats.overall_progress,
        current_streak=stats.current_streak,
        longest_streak=stats.longest_streak,
        total_xp=stats.total_xp,
        core_progress=stats.core_progress,
        vyvu_progress=stats.vyvu_progress,
        decks=[DeckInfo.from_stats(catalog.deck_stats(d)) for d in DeckType],
    )


@router.get("/settings", response_model=SettingsModel)
def get_settings(store: ProgressStoreDep) -> SettingsModel:
    """Current learner settings."""
    return SettingsModel(**store.get_settings().to_dict())


@router.put(
    "/settings",
    response_model=SettingsModel,
    responses={400: {"description": "Invalid settings"}},
)
def update_settings(update: SettingsUpdate, store: ProgressStoreDep) -> SettingsModel:
    """Update some or all settings."""
    current = store.get_settings().to_dict()
    current.update(update.model_dump(exclude_none=True))

    try:
        settings = Settings.from_dict(current)
    except ValueError as e:
        raise api_error(
            status.HTTP_400_BAD_REQUEST, "INVALID_SETTINGS", str(e)
        ) from None

    store.save_settings(settings)
    logger.info(f"Settings updated: {sorted(update.model_dump(exclude_none=True))}")
    return SettingsModel(**settings.to_dict())
