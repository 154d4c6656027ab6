"""
Skill Recommender - Personalized learning-resource recommendations.

This package provides:
- Decaying weighted-interest user profiles
- Platform pipelines for videos, practice problems and courses
- A resilient generation gateway for model-assisted ranking
- Response caching and collapsing of concurrent duplicate requests
"""

__version__ = "0.1.0"
