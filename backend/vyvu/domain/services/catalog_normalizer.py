"""
Catalog Normalizer.

Merges raw vocabulary entries that denote the same concept under different
spellings, so every surface form (German or Vietnamese) belongs to exactly
one canonical entry.
"""

import logging
from collections.abc import Iterable, Sequence

from vyvu.domain.entities.vocabulary_entry import VocabularyEntry, ordered_unique
from vyvu.domain.text_normalizer import surface_key

logger = logging.getLogger(__name__)


def _surface_keys(entry: VocabularyEntry) -> list[str]:
    """Surface keys of every form of both languages, in form order."""
    keys: list[str] = []
    for form in (*entry.all_source_forms, *entry.all_target_forms):
        key = surface_key(form)
        if key not in keys:
            keys.append(key)
    return keys


def _merge_pair(
    base: VocabularyEntry,
    other: VocabularyEntry,
    owned_elsewhere: set[str],
) -> VocabularyEntry:
    """Fold other's forms into base.

    Keeps base's id, canonical forms and category. Forms whose key already
    belongs to a different canonical entry are not adopted.
    """

    def adopt(forms: Iterable[str]) -> list[str]:
        return [f for f in forms if surface_key(f) not in owned_elsewhere]

    source_forms = ordered_unique([*base.all_source_forms, *adopt(other.all_source_forms)])
    target_forms = ordered_unique([*base.all_target_forms, *adopt(other.all_target_forms)])

    return VocabularyEntry.create(
        source=base.source_canonical,
        target=base.target_canonical,
        source_alternates=source_forms[1:],
        target_alternates=target_forms[1:],
        category=base.category,
        id=base.id,
        example=base.example or other.example,
    )


def merge_entries(entries: Sequence[VocabularyEntry]) -> list[VocabularyEntry]:
    """Deduplicate entries by surface form, keeping the first occurrence canonical.

    Entries are processed in order. An entry sharing any surface form with an
    already emitted entry is merged into the earliest such entry; the merged
    value replaces it (inputs are never mutated). Output is deterministic for
    a given input order.

    Args:
        entries: Raw entries in deck-file order

    Returns:
        Canonical entries in order of first appearance
    """
    result: list[VocabularyEntry] = []
    index_by_key: dict[str, int] = {}

    for entry in entries:
        keys = _surface_keys(entry)
        matches = [index_by_key[k] for k in keys if k in index_by_key]

        if not matches:
            index = len(result)
            result.append(entry)
            for key in keys:
                index_by_key[key] = index
            continue

        index = min(matches)
        owned_elsewhere = {k for k in keys if index_by_key.get(k, index) != index}
        merged = _merge_pair(result[index], entry, owned_elsewhere)
        result[index] = merged

        for key in _surface_keys(merged):
            index_by_key.setdefault(key, index)

    if len(result) != len(entries):
        logger.debug(f"Merged {len(entries)} raw entries into {len(result)} canonical entries")
    return result
