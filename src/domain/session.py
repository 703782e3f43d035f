"""State machine for one in-progress questionnaire run."""
import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from .errors import AtStart, InvalidAnswer, SessionComplete
from .models import AnswerType, Question, TopicId


logger = logging.getLogger(__name__)


def validate_answer(question: Question, answer: Any) -> None:
    """Raise InvalidAnswer if ``answer`` does not fit ``question``."""
    if answer is None:
        if question.required:
            raise InvalidAnswer(question.id, "an answer is required")
        return

    if question.type is AnswerType.RATING:
        # bool is an int subclass; True/False are not ratings
        if isinstance(answer, bool) or not isinstance(answer, int):
            raise InvalidAnswer(question.id, f"expected an integer rating, got {type(answer).__name__}")
        if not question.min_value <= answer <= question.max_value:
            raise InvalidAnswer(
                question.id, f"rating {answer} outside {question.min_value}-{question.max_value}"
            )
    elif question.type is AnswerType.BINARY:
        if not isinstance(answer, str) or answer not in question.options:
            raise InvalidAnswer(question.id, f"expected one of {', '.join(question.options)}")
    else:
        if not isinstance(answer, str):
            raise InvalidAnswer(question.id, f"expected text, got {type(answer).__name__}")
        if not answer.strip():
            raise InvalidAnswer(question.id, "answer must not be empty")


class AssessmentSession:
    """Tracks the cursor and recorded answers for one topic's questionnaire.

    The cursor stays within ``[0, len(questions)]``; it equals
    ``len(questions)`` exactly when the session is complete. Answers survive
    navigation, so going back to a question exposes the previous response.

    A session belongs to one conversation and is not safe to mutate from
    several threads at once.
    """

    def __init__(self, topic_id: TopicId, questions: Sequence[Question]):
        if not questions:
            raise ValueError("A session needs at least one question")
        self.topic_id = topic_id
        self.questions = questions
        self._answers: Dict[str, Any] = {}
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def is_complete(self) -> bool:
        return self._cursor == len(self.questions)

    @property
    def answers(self) -> Mapping[str, Any]:
        return MappingProxyType(self._answers)

    def progress(self) -> Tuple[int, int]:
        """(1-based position of the current question, total questions)."""
        return min(self._cursor + 1, len(self.questions)), len(self.questions)

    def current_question(self) -> Question:
        if self.is_complete:
            raise SessionComplete("All questions have been answered")
        return self.questions[self._cursor]

    def answer_for(self, question_id: str) -> Optional[Any]:
        return self._answers.get(question_id)

    def current_answer(self) -> Optional[Any]:
        """Previously recorded answer for the current question, for pre-filling."""
        return self.answer_for(self.current_question().id)

    def record_answer(self, answer: Any) -> None:
        question = self.current_question()
        try:
            validate_answer(question, answer)
        except InvalidAnswer as e:
            logger.debug("Rejected answer for %s/%s: %s", self.topic_id, question.id, e.reason)
            raise

        self._answers[question.id] = answer
        self._cursor += 1
        if self.is_complete:
            logger.debug("Session for %s complete", self.topic_id)

    def go_to_previous(self) -> None:
        """Step back one question. From a complete session, re-opens the last question."""
        if self._cursor == 0:
            raise AtStart("Already at the first question")
        self._cursor -= 1
