from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TopicId(str, Enum):
    ANXIETY_DISORDERS = "anxiety-disorders"
    DEPRESSION = "depression"
    STRESS = "stress"
    INSOMNIA = "insomnia"
    TRAUMA = "trauma"
    SELF_ESTEEM = "self-esteem"
    EMOTIONAL_DYSREGULATION = "emotional-dysregulation"
    NEGATIVE_THOUGHTS = "negative-thoughts"
    SOCIAL_ANXIETY = "social-anxiety"
    ADJUSTMENT = "adjustment"


class AnswerType(str, Enum):
    RATING = "rating"
    BINARY = "binary"
    FREEFORM = "freeform"


class Severity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class Topic(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: TopicId
    name: str
    description: str = ""

    @property
    def label(self) -> str:
        """Lower-cased name used inside generated sentences."""
        return self.name.lower()


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    type: AnswerType
    required: bool = True
    category: Optional[str] = Field(None, description="Display grouping only, never scored")
    min_value: Optional[int] = Field(None, ge=0)
    max_value: Optional[int] = Field(None, gt=0)
    options: Tuple[str, ...] = ()
    affirmative: Optional[str] = None

    @field_validator("id", "text")
    def validate_not_blank(cls, v: str):
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @model_validator(mode="after")
    def validate_answer_shape(self):
        if self.type is AnswerType.RATING:
            if self.min_value is None or self.max_value is None:
                raise ValueError(f"rating question {self.id} needs min_value and max_value")
            if self.min_value >= self.max_value:
                raise ValueError(f"rating question {self.id} has an empty range")
        elif self.type is AnswerType.BINARY:
            if len(self.options) != 2 or self.options[0] == self.options[1]:
                raise ValueError(f"binary question {self.id} needs exactly two distinct options")
            if self.affirmative is not None and self.affirmative not in self.options:
                raise ValueError(f"affirmative option of {self.id} is not one of its options")
        return self

    @property
    def affirmative_option(self) -> Optional[str]:
        if self.type is not AnswerType.BINARY:
            return None
        return self.affirmative or self.options[0]


class InterventionMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description_template: str = "Evidence-based {title} for {topic}"
    duration: str = "15-30 min"
    benefit_templates: Tuple[str, ...] = (
        "Reduces {topic}",
        "Improves coping skills",
        "Builds resilience",
    )

    def describe(self, topic: Topic) -> str:
        return self.description_template.format(title=self.title.lower(), topic=topic.label)

    def benefits_for(self, topic: Topic) -> List[str]:
        return [b.format(title=self.title.lower(), topic=topic.label) for b in self.benefit_templates]


class ScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    severity: Severity
    plan_days: int = Field(..., gt=0)
    combined_score: float = Field(..., ge=0.0, le=10.0)
    rating_score: float = Field(..., ge=0.0, le=10.0)
    binary_score: float = Field(..., ge=0.0, le=10.0)
