"""Unit tests for severity scoring."""
import pytest

from src.domain.catalog import default_question_catalog
from src.domain.errors import SessionNotComplete
from src.domain.models import AnswerType, Question, Severity, TopicId
from src.domain.rules import classify, normalize_rating, score
from src.domain.session import AssessmentSession


def completed(questions, answers, topic_id=TopicId.STRESS):
    session = AssessmentSession(topic_id, questions)
    for a in answers:
        session.record_answer(a)
    return session


class TestScore:
    """Test the combined score and tier selection."""

    def test_high_ratings_and_all_yes_is_severe(self, mixed_questions):
        result = score(completed(mixed_questions, [8, "Yes", "text", 9, "Yes"]))
        assert result.rating_score == 8.5
        assert result.binary_score == 10
        assert result.combined_score == 9.25
        assert result.severity is Severity.SEVERE
        assert result.plan_days == 21

    def test_midpoint_ratings_and_all_no_is_mild(self, mixed_questions):
        result = score(completed(mixed_questions, [5, "No", "text", 5, "No"]))
        assert result.combined_score == 2.5
        assert result.severity is Severity.MILD
        assert result.plan_days == 10

    def test_moderate(self, mixed_questions):
        result = score(completed(mixed_questions, [6, "Yes", "text", 4, "No"]))
        assert result.combined_score == 5.0
        assert result.severity is Severity.MODERATE
        assert result.plan_days == 14

    def test_incomplete_session_rejected(self, mixed_questions):
        session = completed(mixed_questions, [8, "Yes"])
        with pytest.raises(SessionNotComplete):
            score(session)

    def test_deterministic(self, mixed_questions):
        session = completed(mixed_questions, [3, "Yes", "text", 7, "No"])
        assert score(session) == score(session)

    def test_freeform_answers_do_not_matter(self, mixed_questions):
        a = score(completed(mixed_questions, [3, "Yes", "short", 7, "No"]))
        b = score(completed(mixed_questions, [3, "Yes", "a much longer and sadder answer", 7, "No"]))
        assert a == b

    def test_all_freeform_gets_neutral_score(self):
        questions = [Question(id=str(i), text="Describe", type=AnswerType.FREEFORM) for i in range(3)]
        result = score(completed(questions, ["a", "b", "c"]))
        assert result.rating_score == 5
        assert result.binary_score == 5
        assert result.severity is Severity.MODERATE

    def test_declared_affirmative_option_counts(self):
        questions = [
            Question(id="1", text="Calm?", type=AnswerType.BINARY, options=("Yes", "No"), affirmative="No"),
        ]
        assert score(completed(questions, ["No"])).binary_score == 10

    def test_skipped_optional_rating_ignored(self):
        questions = [
            Question(id="1", text="Rate", type=AnswerType.RATING, min_value=0, max_value=10),
            Question(id="2", text="Rate more", type=AnswerType.RATING, min_value=0, max_value=10, required=False),
        ]
        assert score(completed(questions, [6, None])).rating_score == 6

    def test_real_questionnaire_scores(self):
        catalog = default_question_catalog()
        questions = catalog.questions_for(TopicId.ANXIETY_DISORDERS)
        answers = ["text", "text", "Yes", "Yes", 8, 9, "text", "text", "text", "text"]
        result = score(completed(questions, answers, TopicId.ANXIETY_DISORDERS))
        assert result.combined_score == 9.25
        assert result.severity is Severity.SEVERE


class TestRescaling:
    """Test that ratings on other scales are brought onto 0-10."""

    def test_ten_point_scale_unchanged(self):
        q = Question(id="1", text="Rate", type=AnswerType.RATING, min_value=1, max_value=10)
        assert normalize_rating(q, 7) == 7

    def test_hours_of_sleep_rescaled(self):
        q = Question(id="1", text="Hours", type=AnswerType.RATING, min_value=1, max_value=12)
        assert normalize_rating(q, 12) == 10
        assert normalize_rating(q, 6) == 5

    def test_combined_score_stays_in_range(self):
        catalog = default_question_catalog()
        questions = catalog.questions_for(TopicId.INSOMNIA)
        answers = ["text", "text", "Yes", "Yes", 12, 10, "text", "text", "text", "text"]
        result = score(completed(questions, answers, TopicId.INSOMNIA))
        assert result.rating_score == 10
        assert result.combined_score == 10


class TestClassify:
    """Test tier boundaries."""

    @pytest.mark.parametrize("value,expected", [
        (0, Severity.MILD),
        (4.0, Severity.MILD),
        (4.01, Severity.MODERATE),
        (6.99, Severity.MODERATE),
        (7.0, Severity.SEVERE),
        (10, Severity.SEVERE),
    ])
    def test_boundaries(self, value, expected):
        assert classify(value) is expected
