"""Tests for the chat-driven assessment flow."""
import pytest

from src.application.conversation import AssessmentConversation, coerce_answer
from src.domain.errors import InvalidAnswer, UnknownTopic
from src.domain.models import AnswerType, Question, Severity, TopicId


ANXIETY_ANSWERS = ["racing thoughts", "tight chest", "yes", "Yes", "8", "9", "breathe", "crowds", "work", "calm"]


@pytest.fixture
def conversation():
    return AssessmentConversation()


class TestCoerceAnswer:
    """Test raw input conversion."""

    def test_rating_parsed_as_int(self):
        q = Question(id="1", text="Rate", type=AnswerType.RATING, min_value=1, max_value=10)
        assert coerce_answer(q, " 7 ") == 7
        with pytest.raises(InvalidAnswer):
            coerce_answer(q, "seven")

    def test_binary_matched_case_insensitively(self):
        q = Question(id="1", text="Yes?", type=AnswerType.BINARY, options=("Yes", "No"))
        assert coerce_answer(q, "no") == "No"
        assert coerce_answer(q, "maybe") == "maybe"

    def test_blank_optional_becomes_skip(self):
        q = Question(id="1", text="Anything else?", type=AnswerType.FREEFORM, required=False)
        assert coerce_answer(q, "  ") is None


class TestAssessmentConversation:
    """Test the full questionnaire flow through chat."""

    def test_full_assessment_produces_plan(self, conversation):
        first = conversation.start_assessment(TopicId.ANXIETY_DISORDERS)
        assert first.startswith("Question 1 of 10:")
        assert conversation.stage == "assessment"

        reply = None
        for raw in ANXIETY_ANSWERS:
            reply = conversation.submit(raw)

        assert conversation.stage == "plan"
        assert conversation.session is None
        assert conversation.result.severity is Severity.SEVERE
        assert conversation.plan.plan_days == 21
        assert "21-day therapy plan for anxiety disorders" in reply
        assert "4 evidence-based therapies" in reply

    def test_invalid_input_keeps_position(self, conversation):
        conversation.start_assessment("insomnia")
        conversation.submit("I lie awake")
        conversation.submit("It ruins my day")
        conversation.submit("Yes")
        conversation.submit("No")
        reply = conversation.submit("13")
        assert "couldn't use that answer" in reply
        assert conversation.session.cursor == 4

        reply = conversation.submit("   ")
        assert reply == "Please provide an answer before continuing."
        assert conversation.session.cursor == 4

    def test_go_back_prefills(self, conversation):
        conversation.start_assessment("depression")
        conversation.submit("Grey days")
        reply = conversation.go_back()
        assert reply.startswith("Question 1 of 10:")
        assert conversation.session.current_answer() == "Grey days"
        assert conversation.go_back() == "This is already the first question."

    def test_unknown_topic(self, conversation):
        with pytest.raises(UnknownTopic):
            conversation.start_assessment("astrology")

    def test_history_records_both_sides(self, conversation):
        conversation.greeting("Sam")
        conversation.start_assessment("stress")
        conversation.submit("Deadlines")
        roles = [m["role"] for m in conversation.conversation_history]
        assert roles == ["assistant", "user", "assistant", "assistant", "user", "assistant"]
        assert conversation.conversation_history[0]["content"].startswith("Hello Sam!")

    def test_start_new_discards_partial_session(self, conversation):
        conversation.start_assessment("trauma")
        conversation.submit("Something happened")
        conversation.start_new()
        assert conversation.session is None
        assert conversation.stage == "initial"
        assert conversation.conversation_history == []


class TestFreeChat:
    """Test replies outside a questionnaire."""

    def test_help_offers_assessment(self, conversation):
        assert "start an assessment" in conversation.respond("Can you help me?")

    def test_generic_reply_only_when_idle(self, conversation):
        assert conversation.respond("hello") is not None
        conversation.start_assessment("stress")
        assert conversation.respond("hello") is None

    def test_submit_without_session(self, conversation):
        assert conversation.submit("Yes") == "There is no assessment in progress."
