import logging
from typing import Any, Dict, List, Sequence

from .errors import SessionNotComplete
from .models import AnswerType, Question, ScoreResult, Severity
from .session import AssessmentSession


logger = logging.getLogger(__name__)


NEUTRAL_SCORE = 5.0
MILD_CEILING = 4.0
SEVERE_FLOOR = 7.0

PLAN_DAYS = {
    Severity.MILD: 10,
    Severity.MODERATE: 14,
    Severity.SEVERE: 21,
}


def normalize_rating(question: Question, value: int) -> float:
    """Map a rating onto 0-10 relative to the top of its scale.

    Scales topping out at 10 pass through unchanged; an hours-of-sleep
    question on 1-12 is brought into line with the rest.
    """
    return value * 10.0 / question.max_value


def rating_score(questions: Sequence[Question], answers: Dict[str, Any]) -> float:
    values: List[float] = [
        normalize_rating(q, answers[q.id])
        for q in questions
        if q.type is AnswerType.RATING and answers.get(q.id) is not None
    ]
    if not values:
        return NEUTRAL_SCORE
    return sum(values) / len(values)


def binary_score(questions: Sequence[Question], answers: Dict[str, Any]) -> float:
    answered = [
        q for q in questions
        if q.type is AnswerType.BINARY and answers.get(q.id) is not None
    ]
    if not answered:
        return NEUTRAL_SCORE
    affirmative = sum(1 for q in answered if answers[q.id] == q.affirmative_option)
    return affirmative / len(answered) * 10.0


def classify(combined: float) -> Severity:
    if combined <= MILD_CEILING:
        return Severity.MILD
    if combined >= SEVERE_FLOOR:
        return Severity.SEVERE
    return Severity.MODERATE


def score(session: AssessmentSession) -> ScoreResult:
    """Derive the severity tier from a completed session.

    Freeform answers never contribute. A questionnaire with no rating (or no
    binary) answers gets the neutral 5 for that half, which carries no
    information about the respondent.
    """
    if not session.is_complete:
        raise SessionNotComplete(
            f"Session for {session.topic_id} is at question {session.cursor + 1} of {len(session.questions)}"
        )

    answers = dict(session.answers)
    ratings = rating_score(session.questions, answers)
    binaries = binary_score(session.questions, answers)
    combined = (ratings + binaries) / 2
    severity = classify(combined)

    logger.info("Scored %s session: %.2f (%s)", session.topic_id, combined, severity.value)
    return ScoreResult(
        severity=severity,
        plan_days=PLAN_DAYS[severity],
        combined_score=combined,
        rating_score=ratings,
        binary_score=binaries,
    )
