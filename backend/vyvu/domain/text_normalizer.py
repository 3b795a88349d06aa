"""
Text Normalizer.

Canonicalizes free text for comparison. Used by answer matching, sentence
lookup and (without accent folding) catalog deduplication.
"""

import re
import unicodedata

from vyvu.domain.constants import GERMAN_ARTICLES, UNDECOMPOSABLE_FOLDS

_WHITESPACE_RE = re.compile(r"\s+")


def _collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to one space and strip."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def _fold_diacritics(text: str) -> str:
    """Fold accents, tone marks and width variants to base characters."""
    decomposed = unicodedata.normalize("NFKD", text.translate(UNDECOMPOSABLE_FOLDS))
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize(text: str) -> str:
    """Normalize text for accent-insensitive comparison.

    Trims, collapses whitespace, lower-cases and folds diacritics, so
    "  NHÀ  ", "nhà" and "nha" all compare equal. Lower-casing runs on both
    sides of the fold because compatibility decomposition can produce
    upper-case letters; this keeps normalize(normalize(s)) == normalize(s).

    Args:
        text: Raw text (typed answer, vocabulary form, index key)

    Returns:
        Normalized comparison key
    """
    if not text:
        return ""
    folded = _fold_diacritics(text.lower()).lower()
    return _collapse_whitespace(folded)


def surface_key(text: str) -> str:
    """Key used for catalog deduplication.

    Same as normalize() but keeps diacritics: Vietnamese tone marks
    distinguish different words ("chỉ" vs "chi").
    """
    if not text:
        return ""
    return _collapse_whitespace(unicodedata.normalize("NFC", text).lower())


def strip_leading_article(text: str) -> str | None:
    """Remove a leading German article.

    Args:
        text: Vocabulary form or index key, e.g. "das Haus"

    Returns:
        The remainder ("Haus") if the first word is an article and something
        follows it, otherwise None
    """
    parts = _collapse_whitespace(text).split(" ", 1)
    if len(parts) < 2 or parts[0].lower() not in GERMAN_ARTICLES:
        return None
    return parts[1]
