"""Vocabulary category tags used for display grouping."""

from enum import StrEnum


class Category(StrEnum):
    """Closed set of category tags found in the deck files."""

    PRONOUNS = "pronouns"
    CORE_VERBS = "coreVerbs"
    NOUNS = "nouns"
    COMMON_THINGS = "commonThings"
    ADJECTIVES = "adjectives"
    QUESTION_WORDS = "questionWords"
    TIME_FREQUENCY = "timeFrequency"
    PREPOSITIONS = "prepositions"
    CONNECTORS = "connectors"
    ADVERBS_FILLERS = "adverbsFillers"
    INTERJECTIONS_EXPRESSIONS = "interjectionsExpressions"
    OTHER = "other"
    SHAPES = "shapes"
    COLORS = "colors"
    MATERIALS = "materials"
    VERBS = "verbs"
    ADVERBS = "adverbs"
    PHRASES = "phrases"

    @property
    def title(self) -> str:
        """German display label."""
        return _TITLES[self]

    @classmethod
    def parse(cls, value: str | None) -> "Category":
        """Parse a data-file tag, falling back to OTHER for unknown tags."""
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


_TITLES = {
    Category.PRONOUNS: "Pronomen",
    Category.CORE_VERBS: "Grundlegende Verben",
    Category.NOUNS: "Substantive",
    Category.COMMON_THINGS: "Alltägliche Dinge",
    Category.ADJECTIVES: "Adjektive",
    Category.QUESTION_WORDS: "Fragewörter",
    Category.TIME_FREQUENCY: "Zeit & Häufigkeit",
    Category.PREPOSITIONS: "Präpositionen",
    Category.CONNECTORS: "Konnektoren",
    Category.ADVERBS_FILLERS: "Adverbien & Füllwörter",
    Category.INTERJECTIONS_EXPRESSIONS: "Interjektionen",
    Category.OTHER: "Sonstiges",
    Category.SHAPES: "Formen",
    Category.COLORS: "Farben",
    Category.MATERIALS: "Materialien",
    Category.VERBS: "Verben",
    Category.ADVERBS: "Adverbien",
    Category.PHRASES: "Redewendungen",
}
