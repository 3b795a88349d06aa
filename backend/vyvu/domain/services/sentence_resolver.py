"""
Sentence Resolver.

Finds an example sentence for a vocabulary entry despite casing, accent and
article differences between the vocabulary list and the sentence index.
"""

import logging
from collections.abc import Iterable, Iterator

from vyvu.domain.entities.vocabulary_entry import VocabularyEntry
from vyvu.domain.text_normalizer import normalize, strip_leading_article
from vyvu.domain.value_objects.example_sentence import ExampleSentence

logger = logging.getLogger(__name__)


def _lookup_forms(entry: VocabularyEntry) -> list[str]:
    """Id, canonical German form, then German alternates."""
    return [entry.id, entry.source_canonical, *entry.source_alternates]


def _normalized_keys(text: str) -> Iterator[str]:
    """Normalized key of text and of text without its leading article."""
    yield normalize(text)
    bare = strip_leading_article(text)
    if bare is not None:
        yield normalize(bare)


class SentenceResolver:
    """Read-only lookup from vocabulary entries to example sentences.

    Both indexes are built once. On key collisions the sentence registered
    last wins; this is deliberate and covered by tests.
    """

    def __init__(
        self,
        sentences: Iterable[ExampleSentence] = (),
        entries: Iterable[VocabularyEntry] = (),
    ):
        """Build exact and normalized indexes.

        Args:
            sentences: Stand-alone sentences keyed by owner_key
            entries: Vocabulary entries; those with an inline example register
                it under their id and every derived normalized key
        """
        self._exact: dict[str, ExampleSentence] = {}
        self._normalized: dict[str, ExampleSentence] = {}

        for sentence in sentences:
            self._exact[sentence.owner_key] = sentence
            for key in _normalized_keys(sentence.owner_key):
                self._normalized[key] = sentence

        for entry in entries:
            if entry.example is None:
                continue
            self._exact[entry.id] = entry.example
            for form in _lookup_forms(entry):
                for key in _normalized_keys(form):
                    self._normalized[key] = entry.example

        self._normalized.pop("", None)
        logger.debug(
            f"Sentence index built: {len(self._exact)} exact keys, "
            f"{len(self._normalized)} normalized keys"
        )

    def __len__(self) -> int:
        return len(self._exact)

    def resolve(self, entry: VocabularyEntry) -> ExampleSentence | None:
        """Find the example sentence for an entry.

        Cascade, first hit wins: exact id, exact canonical form, exact
        alternates in order, then the normalized index (with and without a
        leading article).

        Returns:
            The sentence, or None when no key matches
        """
        forms = _lookup_forms(entry)
        for form in forms:
            sentence = self._exact.get(form)
            if sentence is not None:
                return sentence

        for form in forms:
            for key in _normalized_keys(form):
                sentence = self._normalized.get(key)
                if sentence is not None:
                    return sentence

        return None

    def has_sentence(self, entry: VocabularyEntry) -> bool:
        """Check if an example sentence exists for the entry."""
        return self.resolve(entry) is not None
