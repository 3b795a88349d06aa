"""Quiz direction value object."""

from enum import StrEnum

from vyvu.domain.value_objects.speech_language import SpeechLanguage


class QuizDirection(StrEnum):
    """Which side of a vocabulary entry is the prompt.

    DE_TO_VI: German prompt, Vietnamese answers (source -> target)
    VI_TO_DE: Vietnamese prompt, German answers (target -> source)
    """

    DE_TO_VI = "de_to_vi"
    VI_TO_DE = "vi_to_de"

    @property
    def is_source_to_target(self) -> bool:
        """True when the learner answers in the target language."""
        return self is QuizDirection.DE_TO_VI

    @property
    def title(self) -> str:
        return "German → Vietnamese" if self.is_source_to_target else "Vietnamese → German"

    @property
    def prompt_language(self) -> SpeechLanguage:
        """Language of the word shown as the question."""
        return SpeechLanguage.GERMAN if self.is_source_to_target else SpeechLanguage.VIETNAMESE

    @property
    def answer_language(self) -> SpeechLanguage:
        """Language the learner is expected to type."""
        return SpeechLanguage.VIETNAMESE if self.is_source_to_target else SpeechLanguage.GERMAN
