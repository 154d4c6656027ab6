"""
Static topic-relation graph.

Maps a canonical topic to an ordered list of related terms. The course
scorer uses it to boost titles that mention neighbouring subjects.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence

DEFAULT_TOPIC_GRAPH: Dict[str, List[str]] = {
    "machine learning": [
        "deep learning",
        "neural networks",
        "ai",
        "data science",
        "supervised learning",
    ],
    "data structures": [
        "algorithms",
        "time complexity",
        "recursion",
        "trees",
        "graphs",
    ],
    "dbms": [
        "sql",
        "database design",
        "normalization",
        "transactions",
        "indexing",
    ],
    "python": [
        "automation",
        "data science",
        "flask",
        "django",
        "pandas",
    ],
}


class TopicGraph:
    """
    Read-only lookup from topic to related terms.

    Keys are matched case-insensitively; unknown topics have no relations.

    Examples:
        >>> graph = TopicGraph()
        >>> graph.related("Machine Learning")[0]
        'deep learning'
        >>> graph.related("cooking")
        ()
    """

    def __init__(self, relations: Optional[Mapping[str, Sequence[str]]] = None):
        source = DEFAULT_TOPIC_GRAPH if relations is None else relations
        self._relations = MappingProxyType({
            topic.lower(): tuple(term.lower() for term in terms)
            for topic, terms in source.items()
        })

    def related(self, topic: str) -> Sequence[str]:
        """Related terms for a topic, in table order."""
        return self._relations.get(topic.strip().lower(), ())

    def topics(self) -> List[str]:
        return list(self._relations.keys())

    def __contains__(self, topic: str) -> bool:
        return topic.strip().lower() in self._relations
