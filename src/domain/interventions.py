"""Therapy modules and the per-topic recommendation tables."""
from typing import Dict, List, Tuple

from .models import InterventionMetadata, Severity, TopicId


INTERVENTIONS: List[InterventionMetadata] = [
    InterventionMetadata(id="cbt", title="CBT Thought Records"),
    InterventionMetadata(id="mindfulness", title="Mindfulness & Breathing"),
    InterventionMetadata(id="stress", title="Stress Management"),
    InterventionMetadata(id="gratitude", title="Gratitude Journal"),
    InterventionMetadata(id="music", title="Relaxation Music"),
    InterventionMetadata(id="tetris", title="Tetris Therapy"),
    InterventionMetadata(id="art", title="Art & Color Therapy"),
    InterventionMetadata(id="exposure", title="Exposure Therapy"),
    InterventionMetadata(id="video", title="Video Therapy"),
    InterventionMetadata(id="act", title="Acceptance & Commitment Therapy"),
]

# Applies to every severity tier of the topic unless SEVERITY_RECOMMENDATIONS
# has an entry for the (topic, tier) pair. List order is priority order.
TOPIC_RECOMMENDATIONS: Dict[TopicId, List[str]] = {
    TopicId.ANXIETY_DISORDERS: ["cbt", "mindfulness", "exposure", "music"],
    TopicId.DEPRESSION: ["cbt", "gratitude", "video", "act"],
    TopicId.STRESS: ["stress", "mindfulness", "music", "art"],
    TopicId.INSOMNIA: ["mindfulness", "music", "video", "stress"],
    TopicId.TRAUMA: ["video", "mindfulness", "art", "act"],
    TopicId.SELF_ESTEEM: ["gratitude", "cbt", "video", "act"],
    TopicId.EMOTIONAL_DYSREGULATION: ["mindfulness", "cbt", "art", "video"],
    TopicId.NEGATIVE_THOUGHTS: ["cbt", "mindfulness", "video", "gratitude"],
    TopicId.SOCIAL_ANXIETY: ["exposure", "cbt", "video", "mindfulness"],
    TopicId.ADJUSTMENT: ["video", "act", "gratitude", "art"],
}

SEVERITY_RECOMMENDATIONS: Dict[Tuple[TopicId, Severity], List[str]] = {}

FALLBACK_RECOMMENDATIONS: List[str] = ["cbt", "mindfulness", "video"]
