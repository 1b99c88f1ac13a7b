"""
Data Models Package

This package contains all Pydantic models used throughout the application
for data validation and structure, plus the domain error taxonomy.

Models:
- CV records
- User profile
- CV reviews and job matches
- Cover letters
"""

from .cv_models import CV, CVSection, DomainModel
from .user_models import UserProfile
from .analysis_models import CVReview, JobMatch, ReviewFeedback
from .cover_letter_models import CoverLetter
from .errors import (
    CareerAssistantError,
    InvalidProfile,
    MissingInput,
    ReferenceNotFound,
    StorageUnavailable,
    WorkflowBusy,
)

__all__ = [
    'CV', 'CVSection', 'DomainModel', 'UserProfile',
    'CVReview', 'JobMatch', 'ReviewFeedback', 'CoverLetter',
    'CareerAssistantError', 'InvalidProfile', 'MissingInput',
    'ReferenceNotFound', 'StorageUnavailable', 'WorkflowBusy',
]
