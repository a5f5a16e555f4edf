"""Domain modules for topic recommendations."""

from .profiles import ScoredTopic, Topic, UserProfile
from .scoring import RecommenderWeights, TopicRecommender, TopicScoreBreakdown

__all__ = [
    "RecommenderWeights",
    "ScoredTopic",
    "Topic",
    "TopicRecommender",
    "TopicScoreBreakdown",
    "UserProfile",
]
