"""Vocabulary entry entity representing one learnable concept."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypedDict

from vyvu.domain.entities.category import Category
from vyvu.domain.text_normalizer import surface_key
from vyvu.domain.value_objects.example_sentence import ExampleSentence


class VocabularyEntryDict(TypedDict):
    """Vocabulary entry structure for serialization."""

    id: str
    source_canonical: str
    source_alternates: list[str]
    target_canonical: str
    target_alternates: list[str]
    category: str
    category_title: str


def make_entry_id(source_canonical: str, target_canonical: str) -> str:
    """Derive the stable id used when a deck file does not supply one."""
    return f"{source_canonical}→{target_canonical}"


def ordered_unique(forms: Iterable[str]) -> list[str]:
    """Deduplicate forms by surface key, keeping the first spelling seen."""
    seen: set[str] = set()
    out: list[str] = []
    for form in forms:
        key = surface_key(form)
        if not key or key in seen:
            continue
        seen.add(key)
        out.append(form)
    return out


def _alternates(canonical: str, forms: Iterable[str]) -> tuple[str, ...]:
    canonical_key = surface_key(canonical)
    return tuple(f for f in ordered_unique(forms) if surface_key(f) != canonical_key)


@dataclass(frozen=True)
class VocabularyEntry:
    """German/Vietnamese word pair.

    Attributes:
        id: Stable identifier, also the key of the learned-state set
        source_canonical: Primary German spelling
        source_alternates: Other accepted German spellings (never the canonical)
        target_canonical: Primary Vietnamese spelling
        target_alternates: Other accepted Vietnamese spellings (never the canonical)
        category: Display grouping only
        example: Optional inline example sentence from the deck file
    """

    id: str
    source_canonical: str
    source_alternates: tuple[str, ...]
    target_canonical: str
    target_alternates: tuple[str, ...]
    category: Category = Category.OTHER
    example: ExampleSentence | None = None

    def __post_init__(self) -> None:
        """Validate that both sides have a canonical form."""
        if not self.source_canonical.strip() or not self.target_canonical.strip():
            raise ValueError(f"Entry {self.id!r} needs both canonical forms")

    @classmethod
    def create(
        cls,
        source: str,
        target: str,
        source_alternates: Iterable[str] = (),
        target_alternates: Iterable[str] = (),
        category: Category = Category.OTHER,
        id: str | None = None,
        example: ExampleSentence | None = None,
    ) -> "VocabularyEntry":
        """Build an entry, cleaning alternates.

        Alternates equal to the canonical form or to each other are dropped,
        so data files may list the canonical again without harm.
        """
        return cls(
            id=id or make_entry_id(source, target),
            source_canonical=source,
            source_alternates=_alternates(source, source_alternates),
            target_canonical=target,
            target_alternates=_alternates(target, target_alternates),
            category=category,
            example=example,
        )

    @property
    def all_source_forms(self) -> tuple[str, ...]:
        """Canonical German form followed by alternates."""
        return (self.source_canonical, *self.source_alternates)

    @property
    def all_target_forms(self) -> tuple[str, ...]:
        """Canonical Vietnamese form followed by alternates."""
        return (self.target_canonical, *self.target_alternates)

    def to_dict(self) -> VocabularyEntryDict:
        """Convert entry to dictionary for API responses."""
        return {
            "id": self.id,
            "source_canonical": self.source_canonical,
            "source_alternates": list(self.source_alternates),
            "target_canonical": self.target_canonical,
            "target_alternates": list(self.target_alternates),
            "category": self.category.value,
            "category_title": self.category.title,
        }
