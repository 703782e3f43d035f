from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models import Severity, TopicId


class Recommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    intervention_id: str
    title: str
    description: str
    priority: int = Field(..., ge=1)
    estimated_duration: str
    benefits: List[str]


class Plan(BaseModel):
    model_config = ConfigDict(frozen=True)

    topic_id: TopicId
    topic_name: str
    severity: Severity
    plan_days: int = Field(..., gt=0)
    recommendations: List[Recommendation]
    created_at: datetime
    description: str
