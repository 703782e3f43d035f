import pytest

from src.domain.models import AnswerType, Question, Topic, TopicId


@pytest.fixture
def small_topic():
    return Topic(id=TopicId.STRESS, name="Stress & Burnout", description="Overwhelm")


@pytest.fixture
def mixed_questions():
    """Two ratings, two binaries and one freeform question."""
    return [
        Question(id="r1", text="Rate your stress", type=AnswerType.RATING, min_value=1, max_value=10),
        Question(id="b1", text="Headaches?", type=AnswerType.BINARY, options=("Yes", "No")),
        Question(id="f1", text="Describe a stressful day", type=AnswerType.FREEFORM),
        Question(id="r2", text="Rate your exhaustion", type=AnswerType.RATING, min_value=1, max_value=10),
        Question(id="b2", text="Trouble relaxing?", type=AnswerType.BINARY, options=("Yes", "No")),
    ]
