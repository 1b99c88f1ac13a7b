"""
Analysis Result Models

Pydantic models for the persisted results of the CV review and job match
workflows. Scores are integers bounded to [0, 100].
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from .cv_models import DomainModel


class ReviewFeedback(BaseModel):
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    suggestions: str = ""


class CVReview(DomainModel):
    id: str
    cv_id: str
    score: int = Field(ge=0, le=100)
    feedback: ReviewFeedback = Field(default_factory=ReviewFeedback)
    source_filename: Optional[str] = None  # set when the review came from an upload
    created_at: str


class JobMatch(DomainModel):
    id: str
    cv_id: str
    job_description: str
    match_score: int = Field(ge=0, le=100)
    missing_skills: List[str] = Field(default_factory=list)
    suggestions: str = ""
    created_at: str

    @field_validator("missing_skills")
    @classmethod
    def unique_skills(cls, skills: List[str]) -> List[str]:
        """Missing skills form a set; keep first occurrence order (case-insensitive)."""
        seen = set()
        result = []
        for skill in skills:
            key = skill.strip().lower()
            if key and key not in seen:
                seen.add(key)
                result.append(skill.strip())
        return result
