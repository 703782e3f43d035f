"""Errors raised by the assessment core."""
from typing import Any, Optional


class AssessmentError(Exception):
    """Base class for conditions the caller can recover from."""


class UnknownTopic(AssessmentError):
    def __init__(self, topic_id: Any):
        super().__init__(f"Unknown topic: {topic_id!r}")
        self.topic_id = topic_id


class InvalidAnswer(AssessmentError):
    def __init__(self, question_id: str, reason: str):
        super().__init__(f"Invalid answer for question {question_id}: {reason}")
        self.question_id = question_id
        self.reason = reason


class SessionNotComplete(AssessmentError):
    pass


class SessionComplete(AssessmentError):
    pass


class AtStart(AssessmentError):
    pass


class ConfigurationError(Exception):
    """Catalog authoring bug. Not meant to be caught and recovered from."""


class CatalogConfigurationError(ConfigurationError):
    pass


class NoRecommendations(ConfigurationError):
    def __init__(self, topic_id: Any, severity: Optional[Any] = None):
        super().__init__(f"No recommendations configured for {topic_id!r} ({severity})")
        self.topic_id = topic_id
        self.severity = severity
