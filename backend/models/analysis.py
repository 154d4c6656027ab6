"""
Analysis Pydantic models.
"""

from pydantic import BaseModel


class AnalyzeResponse(BaseModel):
    """Free-form analysis result."""

    recommendation: str
