import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from src.application.schemas import Plan, Recommendation
from src.domain.catalog import (
    QuestionCatalog,
    RecommendationCatalog,
    default_question_catalog,
    default_recommendation_catalog,
)
from src.domain.errors import NoRecommendations
from src.domain.models import ScoreResult


logger = logging.getLogger(__name__)


PLAN_DESCRIPTION = "A {days}-day personalized therapy plan for {topic}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PlanBuilder:
    """Turns a score into a ranked therapy plan for one topic."""

    def __init__(
        self,
        recommendations: Optional[RecommendationCatalog] = None,
        questions: Optional[QuestionCatalog] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.recommendations = recommendations or default_recommendation_catalog()
        self.questions = questions or default_question_catalog()
        self.clock = clock

    def build_plan(self, topic_id, result: ScoreResult) -> Plan:
        topic = self.questions.topic(topic_id)
        ranked = sorted(
            self.recommendations.recommendations_for(topic.id, result.severity),
            key=lambda entry: entry[1],
        )
        if not ranked:
            logger.error("Recommendation catalog returned nothing for %s/%s", topic.id.value, result.severity.value)
            raise NoRecommendations(topic.id, result.severity)

        items: List[Recommendation] = []
        for intervention_id, rank in ranked:
            meta = self.recommendations.metadata_for(intervention_id)
            items.append(
                Recommendation(
                    intervention_id=intervention_id,
                    title=meta.title,
                    description=meta.describe(topic),
                    priority=rank,
                    estimated_duration=meta.duration,
                    benefits=meta.benefits_for(topic),
                )
            )

        return Plan(
            topic_id=topic.id,
            topic_name=topic.name,
            severity=result.severity,
            plan_days=result.plan_days,
            recommendations=items,
            created_at=self.clock(),
            description=PLAN_DESCRIPTION.format(days=result.plan_days, topic=topic.label),
        )
