import logging
from typing import Any, List, Optional

from src.application.schemas import Plan
from src.application.use_cases import PlanBuilder
from src.domain.catalog import QuestionCatalog, default_question_catalog
from src.domain.errors import AtStart, InvalidAnswer
from src.domain.models import AnswerType, Question, ScoreResult
from src.domain.rules import score
from src.domain.session import AssessmentSession


logger = logging.getLogger(__name__)


def coerce_answer(question: Question, raw: Optional[str]) -> Any:
    """Convert raw chat/widget input into the typed value the session expects."""
    if raw is None or (not raw.strip() and not question.required):
        return None

    if question.type is AnswerType.RATING:
        try:
            return int(raw.strip())
        except ValueError:
            raise InvalidAnswer(question.id, "please enter a whole number") from None

    if question.type is AnswerType.BINARY:
        for option in question.options:
            if raw.strip().lower() == option.lower():
                return option
        return raw

    return raw


def format_question(question: Question, position: int, total: int) -> str:
    hint = ""
    if question.type is AnswerType.RATING:
        hint = f" ({question.min_value}-{question.max_value})"
    elif question.type is AnswerType.BINARY:
        hint = f" ({' / '.join(question.options)})"
    return f"Question {position} of {total}: {question.text}{hint}"


class AssessmentConversation:
    """Drives one user's chat: topic selection, questionnaire, and the resulting plan."""

    def __init__(self, questions: Optional[QuestionCatalog] = None, plan_builder: Optional[PlanBuilder] = None):
        self.questions = questions or default_question_catalog()
        self.plan_builder = plan_builder or PlanBuilder(questions=self.questions)
        self.conversation_history: List[dict] = []
        self.session: Optional[AssessmentSession] = None
        self.result: Optional[ScoreResult] = None
        self.plan: Optional[Plan] = None

    @property
    def stage(self) -> str:
        if self.session is not None:
            return "assessment"
        if self.plan is not None:
            return "plan"
        return "initial"

    def start_new(self):
        self.conversation_history = []
        self.session = None
        self.result = None
        self.plan = None

    def greeting(self, user_name: Optional[str] = None) -> str:
        name = f" {user_name}" if user_name else ""
        return self._say(
            f"Hello{name}! I'm your mental health assistant. I'm here to provide personalized support "
            "and create a therapy plan tailored just for you.\n\n"
            "Would you like me to help you identify the best therapy approach for your current needs?"
        )

    def start_assessment(self, topic_id) -> str:
        topic = self.questions.topic(topic_id)
        # a new topic replaces whatever was in progress; partial answers are dropped
        self.session = AssessmentSession(topic.id, self.questions.questions_for(topic.id))
        self.result = None
        self.plan = None

        self._hear(
            f"I'd like to start an assessment for {topic.name}. "
            "This will help me understand your specific situation better."
        )
        self._say(
            f"Great! I'll ask you some questions about {topic.label} to create the best therapy plan for you. "
            "Let's begin:"
        )
        return self._ask_current()

    def submit(self, raw: Optional[str]) -> str:
        """Answer the current question with raw user input."""
        if self.session is None:
            return self._say("There is no assessment in progress.")

        question = self.session.current_question()
        try:
            self.session.record_answer(coerce_answer(question, raw))
        except InvalidAnswer as e:
            if raw is None or not raw.strip():
                return self._say("Please provide an answer before continuing.")
            return self._say(f"Sorry, I couldn't use that answer: {e.reason}.")

        self._hear(str(raw))
        if self.session.is_complete:
            return self._finish()
        return self._ask_current()

    def go_back(self) -> str:
        if self.session is None:
            return self._say("There is no assessment in progress.")
        try:
            self.session.go_to_previous()
        except AtStart:
            return self._say("This is already the first question.")
        return self._ask_current()

    def respond(self, user_message: str) -> Optional[str]:
        """Reply to free chat. Free text is never interpreted as a questionnaire answer."""
        self._hear(user_message)
        text = user_message.lower()
        if "help" in text or "start" in text:
            return self._say(
                "I can help you with various mental health concerns. Would you like to start an assessment "
                "to get personalized therapy recommendations?"
            )
        if self.stage != "initial":
            return None
        return self._say(
            "I understand. Feel free to ask me anything about mental health or start an assessment when you're ready."
        )

    def _finish(self) -> str:
        session = self.session
        self.result = score(session)
        self.plan = self.plan_builder.build_plan(session.topic_id, self.result)
        self.session = None

        topic = self.questions.topic(self.plan.topic_id)
        return self._say(
            f"Based on your comprehensive assessment, I've created a personalized {self.plan.plan_days}-day "
            f"therapy plan for {topic.label}. Your responses indicate {self.plan.severity.value} severity, "
            f"and this plan includes {len(self.plan.recommendations)} evidence-based therapies tailored to "
            "your specific needs and goals."
        )

    def _ask_current(self) -> str:
        position, total = self.session.progress()
        return self._say(format_question(self.session.current_question(), position, total))

    def _hear(self, content: str) -> None:
        self.conversation_history.append({"role": "user", "content": content})

    def _say(self, content: str) -> str:
        self.conversation_history.append({"role": "assistant", "content": content})
        return content
