"""Quiz stage value object for the session state machine."""

from enum import StrEnum


class QuizStage(StrEnum):
    """Quiz lifecycle stages.

    State machine:
        SETUP -> IN_QUIZ -> SUMMARY
          ^         |          |
          +--reset--+          |
          +----continue--------+
                    ^          |
                    +--review--+

    States:
        SETUP: Choosing deck, direction and size
        IN_QUIZ: Answering words one at a time
        SUMMARY: Session finished, rewards shown
    """

    SETUP = "setup"
    IN_QUIZ = "in_quiz"
    SUMMARY = "summary"

    def accepts_answers(self) -> bool:
        """Check if answers and navigation are meaningful in this stage."""
        return self is QuizStage.IN_QUIZ

    def can_transition_to(self, target: "QuizStage") -> bool:
        """Check whether the state machine allows moving to target."""
        allowed = {
            QuizStage.SETUP: {QuizStage.IN_QUIZ, QuizStage.SETUP},
            QuizStage.IN_QUIZ: {QuizStage.SUMMARY, QuizStage.SETUP, QuizStage.IN_QUIZ},
            QuizStage.SUMMARY: {QuizStage.SETUP, QuizStage.IN_QUIZ},
        }
        return target in allowed[self]
