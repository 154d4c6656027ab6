"""
Decaying interest weights.

Every request multiplies all existing topic weights by a decay factor and
then reinforces the request's topic by one. Decay is applied before the
increment, so the current request's topic is never decayed in the same
request.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

DECAY_FACTOR = 0.98
INTERACTION_WEIGHT = 1.0
DOMINANT_TOPIC_LIMIT = 5


def normalize_topic(topic: Optional[str]) -> str:
    """Lowercase and trim a topic; blank or missing topics become ''."""
    if not topic:
        return ""
    return topic.strip().lower()


def apply_interaction(
    weights: Optional[Dict[str, float]],
    topic: Optional[str] = None,
    decay_factor: float = DECAY_FACTOR,
) -> Dict[str, float]:
    """
    Decay every weight and reinforce the current topic.

    Args:
        weights: Current topic weights (not modified).
        topic: Topic of the current request; blank or None only decays.
        decay_factor: Multiplier applied to every existing weight.

    Returns:
        A new weight mapping.

    Examples:
        >>> apply_interaction({"python": 1.0}, "SQL ")
        {'python': 0.98, 'sql': 1.0}
    """
    updated = {name: weight * decay_factor for name, weight in (weights or {}).items()}

    normalized = normalize_topic(topic)
    if normalized:
        updated[normalized] = updated.get(normalized, 0.0) + INTERACTION_WEIGHT

    return updated


def top_topics(
    weights: Optional[Dict[str, float]],
    limit: int = DOMINANT_TOPIC_LIMIT,
) -> List[Tuple[str, float]]:
    """Return up to `limit` (topic, weight) pairs, heaviest first; ties keep insertion order."""
    if not weights:
        return []
    return sorted(weights.items(), key=lambda item: item[1], reverse=True)[:limit]


def extract_dominant_topics(
    weights: Optional[Dict[str, float]],
    limit: int = DOMINANT_TOPIC_LIMIT,
) -> List[str]:
    """
    Return the lowercase names of the heaviest topics.

    Used as a substring-matching signal by the course scorer.
    """
    return [name.lower() for name, _ in top_topics(weights, limit)]


def build_profile_summary(
    weights: Optional[Dict[str, float]],
    limit: int = DOMINANT_TOPIC_LIMIT,
) -> str:
    """
    Describe the user's dominant interests for a generation prompt.

    Examples:
        >>> build_profile_summary({"python": 2.0, "sql": 0.98})
        'User dominant interests: python (2.00 interactions), sql (0.98 interactions)'
        >>> build_profile_summary({})
        ''
    """
    ranked = top_topics(weights, limit)
    if not ranked:
        return ""

    summary = ", ".join(f"{name} ({weight:.2f} interactions)" for name, weight in ranked)
    return f"User dominant interests: {summary}"
