"""
Prompt templates for the generation service.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Sequence

from skill_recommender.providers.base import Candidate

PROBLEM_DESCRIPTION_LIMIT = 1500


def build_video_ranking_prompt(
    topic: str,
    videos: Sequence[Candidate],
    profile_summary: str = "",
) -> str:
    """Prompt asking the model to rank videos and answer with a JSON array."""
    resources = "\n".join(
        f"{i}.\nTitle: {video.title}\nURL: {video.url}\nDescription: {video.description or ''}\n"
        for i, video in enumerate(videos, 1)
    )
    return f"""
You are an intelligent educational recommendation ranking agent.

User topic: {topic}
{profile_summary}
Return ONLY JSON array:
[
  {{ "title": "...", "url": "...", "reason": "..." }}
]

Resources:
{resources}
"""


def build_problem_mentor_prompt(
    title: str,
    difficulty: Optional[str],
    description: str,
    candidates: Sequence[Candidate] = (),
    profile_summary: str = "",
) -> str:
    """Prompt asking for similar problems, hints and a solution outline as a JSON object."""
    problems = "\n".join(
        f"- {c.title} ({c.difficulty or 'Unknown'}): {c.url}" for c in candidates
    )
    return f"""
You are an AI LeetCode mentor.

Current Problem:
Title: {title}
Difficulty: {difficulty or 'Unknown'}
Description: {description[:PROBLEM_DESCRIPTION_LIMIT]}

{profile_summary}

Candidate problems:
{problems}

Rank top 5 similar problems and provide 3 hints + solution outline.

Return JSON:
{{
  "similar_problems": [],
  "hints": [],
  "solution_outline": ""
}}
"""


def build_analysis_prompt(context: Dict[str, Any]) -> str:
    """Prompt for the free-form analysis endpoint."""
    return f"""
User is learning on {context.get('site')}.
Context: {json.dumps(context, ensure_ascii=False, default=str)}
Suggest better resources, channels or practice paths.
"""
