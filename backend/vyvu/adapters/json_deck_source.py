"""Bundled JSON deck adapter.

Loads vocabulary decks and their example sentences from JSON files shipped
in the vyvu.adapters.data package. Set VYVU_DATA_DIR to read the same file
layout from another directory instead.
"""

import json
import logging
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from vyvu.domain.entities.category import Category
from vyvu.domain.entities.vocabulary_entry import VocabularyEntry, make_entry_id
from vyvu.domain.value_objects.deck_type import DeckType
from vyvu.domain.value_objects.example_sentence import ExampleSentence

logger = logging.getLogger(__name__)


# =============================================================================
# File schema
# =============================================================================


class _FileModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TermForms(_FileModel):
    """One side of an entry: main spelling plus accepted alternatives."""

    main: str = Field(min_length=1)
    alternatives: list[str] = Field(default_factory=list)


class InlineSentence(_FileModel):
    german: str
    vietnamese: str


class DeckEntry(_FileModel):
    id: str | None = None
    german: TermForms
    vietnamese: TermForms
    category: str | None = None
    example_sentence: InlineSentence | None = Field(default=None, alias="exampleSentence")


class DeckFile(_FileModel):
    data_model_version: int = Field(alias="dataModelVersion")
    metadata: dict = Field(default_factory=dict)
    entries: list[DeckEntry] = Field(default_factory=list)


class SentenceRecord(_FileModel):
    word_id: str = Field(alias="wordId", min_length=1)
    german: str
    vietnamese: str


class SentenceFile(_FileModel):
    data_model_version: int = Field(alias="dataModelVersion")
    sentences: list[SentenceRecord] = Field(default_factory=list)


# =============================================================================
# Adapter
# =============================================================================


class JsonDeckSource:
    """DeckSource implementation reading bundled JSON files.

    File names per deck: "<deck>.json" and "<deck>_sentences.json".
    Missing or malformed files produce an empty list and a warning; one bad
    file never prevents the other decks from loading.
    """

    def __init__(self, data_dir: str | Path | None = None) -> None:
        """Initialize the source.

        Args:
            data_dir: Directory holding the JSON files. None reads the
                packaged data.
        """
        self._data_dir = Path(data_dir) if data_dir else None

    def load_deck(self, deck: DeckType) -> list[VocabularyEntry]:
        """Load raw entries of a deck in file order."""
        data = self._read_json(f"{deck.value}.json")
        if data is None:
            return []

        try:
            file = DeckFile.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Deck file for {deck} is malformed: {e.error_count()} errors")
            return []

        entries = []
        for raw in file.entries:
            entry = self._to_entry(raw)
            if entry is not None:
                entries.append(entry)
        return entries

    def load_sentences(self, deck: DeckType) -> list[ExampleSentence]:
        """Load stand-alone example sentences of a deck."""
        data = self._read_json(f"{deck.value}_sentences.json")
        if data is None:
            return []

        try:
            file = SentenceFile.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Sentence file for {deck} is malformed: {e.error_count()} errors")
            return []

        return [
            ExampleSentence(owner_key=s.word_id, source_text=s.german, target_text=s.vietnamese)
            for s in file.sentences
        ]

    @staticmethod
    def _to_entry(raw: DeckEntry) -> VocabularyEntry | None:
        source = raw.german.main.strip()
        target = raw.vietnamese.main.strip()
        if not source or not target:
            logger.debug(f"Skipping entry without both main forms: {raw.id!r}")
            return None

        entry_id = raw.id or make_entry_id(source, target)
        example = None
        if raw.example_sentence is not None:
            example = ExampleSentence(
                owner_key=entry_id,
                source_text=raw.example_sentence.german,
                target_text=raw.example_sentence.vietnamese,
            )

        return VocabularyEntry.create(
            source=source,
            target=target,
            source_alternates=[a.strip() for a in raw.german.alternatives],
            target_alternates=[a.strip() for a in raw.vietnamese.alternatives],
            category=Category.parse(raw.category),
            id=entry_id,
            example=example,
        )

    def _read_json(self, filename: str) -> object | None:
        """Read a data file, returning None (and logging) when unavailable.

        Uses importlib.resources for packaged data, falling back to the
        source tree when running outside an installed package.
        """
        try:
            if self._data_dir is not None:
                with open(self._data_dir / filename, encoding="utf-8") as f:
                    return json.load(f)
            try:
                data_path = resources.files("vyvu.adapters.data").joinpath(filename)
                with data_path.open("r", encoding="utf-8") as f:
                    return json.load(f)
            except (ModuleNotFoundError, TypeError):
                file_path = Path(__file__).parent / "data" / filename
                with open(file_path, encoding="utf-8") as f:
                    return json.load(f)
        except FileNotFoundError:
            logger.warning(f"Data file {filename} not found")
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Data file {filename} unreadable: {e}")
        return None
