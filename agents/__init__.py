"""
Agents Package

This package contains the analysis workflow agents and the profile agent.
Each agent is responsible for one user-triggered operation.

Available Agents:
- CVReviewAgent:      Reviews a stored CV or an uploaded document
- JobMatchAgent:      Matches a stored CV against a job description
- CoverLetterAgent:   Drafts, generates and saves cover letters
- UserProfileAgent:   Manages the single local user profile
"""

from .base_agent import BaseAgent, WorkflowState
from .cv_review_agent import CVReviewAgent
from .job_match_agent import JobMatchAgent
from .cover_letter_agent import CoverLetterAgent
from .user_profile_agent import UserProfileAgent

__all__ = [
    "BaseAgent",
    "WorkflowState",
    "CVReviewAgent",
    "JobMatchAgent",
    "CoverLetterAgent",
    "UserProfileAgent",
]
