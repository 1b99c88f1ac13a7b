"""
Cover Letter Models

A cover letter exists first as an in-memory draft (no timestamps) and becomes a
saved record once persisted, at which point createdAt/updatedAt are set.
"""

from pydantic import model_validator
from typing import Optional

from constants import BaselineTexts
from .cv_models import DomainModel


class CoverLetter(DomainModel):
    id: str
    user_id: str
    cv_id: Optional[str] = None
    name: str = BaselineTexts.COVER_LETTER_NAME
    job_title: str = ""
    company_name: str = ""
    job_description: str = ""
    content: str = ""

    # Unset while the letter is only a draft
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @model_validator(mode="after")
    def created_not_after_updated(self):
        if self.created_at and self.updated_at and self.created_at > self.updated_at:
            raise ValueError("createdAt must not be later than updatedAt")
        return self

    @property
    def is_saved(self) -> bool:
        return self.created_at is not None
