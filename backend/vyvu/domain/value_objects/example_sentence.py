"""Example sentence value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExampleSentence:
    """Illustrative usage of a vocabulary entry.

    Attributes:
        owner_key: Key the sentence is indexed under (word id or German form)
        source_text: German sentence
        target_text: Vietnamese translation
    """

    owner_key: str
    source_text: str
    target_text: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "owner_key": self.owner_key,
            "source_text": self.source_text,
            "target_text": self.target_text,
        }
