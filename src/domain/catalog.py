"""Read-only registries for questionnaires and recommendations.

Both catalogs validate their content when constructed, so an authoring
mistake surfaces at load time instead of in the middle of an assessment.
They hold no mutable state and can be shared across sessions freely.
"""
import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .errors import CatalogConfigurationError, NoRecommendations, UnknownTopic
from .models import InterventionMetadata, Question, Severity, Topic, TopicId


logger = logging.getLogger(__name__)


def _coerce_topic_id(topic_id) -> TopicId:
    if isinstance(topic_id, TopicId):
        return topic_id
    try:
        return TopicId(topic_id)
    except ValueError:
        raise UnknownTopic(topic_id) from None


class QuestionCatalog:
    """Maps a topic to its ordered question list.

    Unknown topics raise ``UnknownTopic``; there is no default topic.
    """

    def __init__(self, topics: Iterable[Topic], questionnaires: Mapping[TopicId, Sequence[Question]]):
        self._topics: Dict[TopicId, Topic] = {}
        self._questions: Dict[TopicId, Tuple[Question, ...]] = {}

        for topic in topics:
            if topic.id in self._topics:
                raise CatalogConfigurationError(f"Topic {topic.id.value} registered twice")
            self._topics[topic.id] = topic

        for topic_id, questions in questionnaires.items():
            if topic_id not in self._topics:
                raise CatalogConfigurationError(f"Questionnaire for unregistered topic {topic_id.value}")
            self._questions[topic_id] = self._validate_questions(topic_id, questions)

        missing = [t.value for t in self._topics if t not in self._questions]
        if missing:
            raise CatalogConfigurationError(f"Topics without a questionnaire: {', '.join(missing)}")

        logger.debug("Loaded question catalog with %d topics", len(self._topics))

    @staticmethod
    def _validate_questions(topic_id: TopicId, questions: Sequence[Question]) -> Tuple[Question, ...]:
        if not questions:
            raise CatalogConfigurationError(f"Topic {topic_id.value} has no questions")
        seen = set()
        for q in questions:
            if q.id in seen:
                raise CatalogConfigurationError(f"Duplicate question id {q.id} in topic {topic_id.value}")
            seen.add(q.id)
        return tuple(questions)

    def topics(self) -> List[Topic]:
        return list(self._topics.values())

    def topic(self, topic_id) -> Topic:
        tid = _coerce_topic_id(topic_id)
        if tid not in self._topics:
            raise UnknownTopic(topic_id)
        return self._topics[tid]

    def questions_for(self, topic_id) -> Tuple[Question, ...]:
        tid = _coerce_topic_id(topic_id)
        if tid not in self._questions:
            raise UnknownTopic(topic_id)
        return self._questions[tid]


class RecommendationCatalog:
    """Maps (topic, severity) to ranked intervention ids, plus intervention metadata.

    Lookup order is the tier-specific table, then the topic table, then the
    catalog-wide fallback. Every id referenced anywhere must have metadata.
    """

    def __init__(
        self,
        interventions: Iterable[InterventionMetadata],
        topic_tables: Mapping[TopicId, Sequence[str]],
        fallback: Sequence[str],
        severity_tables: Optional[Mapping[Tuple[TopicId, Severity], Sequence[str]]] = None,
    ):
        self._metadata: Dict[str, InterventionMetadata] = {}
        for item in interventions:
            if item.id in self._metadata:
                raise CatalogConfigurationError(f"Intervention {item.id} registered twice")
            self._metadata[item.id] = item

        self._topic_tables = {tid: self._rank(ids, tid.value) for tid, ids in topic_tables.items()}
        self._severity_tables = {
            key: self._rank(ids, f"{key[0].value}/{key[1].value}")
            for key, ids in (severity_tables or {}).items()
        }
        self._fallback = self._rank(fallback, "fallback")

        logger.debug(
            "Loaded recommendation catalog: %d interventions, %d topic tables, %d severity tables",
            len(self._metadata), len(self._topic_tables), len(self._severity_tables),
        )

    def _rank(self, intervention_ids: Sequence[str], table_name: str) -> Tuple[Tuple[str, int], ...]:
        if not intervention_ids:
            logger.error("Recommendation table %s is empty", table_name)
            raise CatalogConfigurationError(f"Recommendation table {table_name} is empty")
        if len(set(intervention_ids)) != len(intervention_ids):
            raise CatalogConfigurationError(f"Recommendation table {table_name} lists an intervention twice")
        unknown = [i for i in intervention_ids if i not in self._metadata]
        if unknown:
            logger.error("Recommendation table %s references unknown interventions %s", table_name, unknown)
            raise CatalogConfigurationError(
                f"Recommendation table {table_name} references unknown interventions: {', '.join(unknown)}"
            )
        return tuple((iid, rank) for rank, iid in enumerate(intervention_ids, start=1))

    def covers(self, topic_id, severity: Severity) -> bool:
        """True when the pair resolves to an authored table rather than the fallback."""
        tid = _coerce_topic_id(topic_id)
        return (tid, severity) in self._severity_tables or tid in self._topic_tables

    def recommendations_for(self, topic_id, severity: Severity) -> Tuple[Tuple[str, int], ...]:
        tid = _coerce_topic_id(topic_id)
        table = self._severity_tables.get((tid, severity)) or self._topic_tables.get(tid) or self._fallback
        if not table:
            logger.error("No recommendations for %s/%s", tid.value, severity)
            raise NoRecommendations(tid, severity)
        return table

    def metadata_for(self, intervention_id: str) -> InterventionMetadata:
        try:
            return self._metadata[intervention_id]
        except KeyError:
            raise CatalogConfigurationError(f"No metadata for intervention {intervention_id}") from None


def default_question_catalog() -> QuestionCatalog:
    from .questionnaires import QUESTIONNAIRES, TOPICS
    return QuestionCatalog(TOPICS, QUESTIONNAIRES)


def default_recommendation_catalog() -> RecommendationCatalog:
    from .interventions import (
        FALLBACK_RECOMMENDATIONS,
        INTERVENTIONS,
        SEVERITY_RECOMMENDATIONS,
        TOPIC_RECOMMENDATIONS,
    )
    return RecommendationCatalog(
        INTERVENTIONS,
        TOPIC_RECOMMENDATIONS,
        FALLBACK_RECOMMENDATIONS,
        severity_tables=SEVERITY_RECOMMENDATIONS,
    )
