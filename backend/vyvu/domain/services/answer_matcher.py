"""Answer matcher: decides whether a typed answer is an accepted translation."""

from vyvu.domain.entities.vocabulary_entry import VocabularyEntry
from vyvu.domain.text_normalizer import normalize
from vyvu.domain.value_objects.quiz_direction import QuizDirection


def expected_answers(entry: VocabularyEntry, direction: QuizDirection) -> tuple[str, ...]:
    """Accepted answers for the direction (canonical first)."""
    if direction.is_source_to_target:
        return entry.all_target_forms
    return entry.all_source_forms


def prompt_text(entry: VocabularyEntry, direction: QuizDirection) -> str:
    """Word shown as the question."""
    if direction.is_source_to_target:
        return entry.source_canonical
    return entry.target_canonical


def is_correct(answer: str, entry: VocabularyEntry, direction: QuizDirection) -> bool:
    """Exact match after normalization against any accepted form.

    Case, surrounding/inner whitespace and accents are ignored; no
    edit-distance tolerance is applied.
    """
    given = normalize(answer)
    if not given:
        return False
    return any(normalize(form) == given for form in expected_answers(entry, direction))
