"""
Cover Letter Agent

Unlike the review and match agents this one generates rather than evaluates:
- new_draft(): an in-memory letter with an id but no timestamps
- generate_cover_letter(): fills in the draft's content (nothing is persisted)
- save_cover_letter(): persists the letter and sets createdAt/updatedAt

A draft stays editable in memory until it is saved; the first save sets
createdAt == updatedAt, later saves keep createdAt and move updatedAt forward.
"""

from typing import Optional

from models import CoverLetter, MissingInput, ReferenceNotFound
from utils.analysis_strategies import CoverLetterGenerator
from .base_agent import BaseAgent


def _blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


class CoverLetterAgent(BaseAgent):
    workflow_name = "Cover letter generation"

    def __init__(self, store, logs_manager, generator: CoverLetterGenerator, delay: float = 0.0, sleeper=None):
        super().__init__(store, logs_manager, delay=delay, sleeper=sleeper)
        self.generator = generator

    def new_draft(self, cv_id: Optional[str] = None, user_id: Optional[str] = None, **fields) -> CoverLetter:
        """Create an unsaved draft. The user id defaults to the stored profile's id."""
        if user_id is None:
            profile = self.store.get_user_profile()
            user_id = profile.id if profile else f"user-{self.store.generate_id()}"
        return CoverLetter(id=self.store.generate_id(), user_id=user_id, cv_id=cv_id or None, **fields)

    async def generate_cover_letter(self, draft: CoverLetter) -> CoverLetter:
        """
        Return a copy of the draft with generated content. Timestamps are left untouched.

        Raises:
            MissingInput: job title, company name or job description is blank
            ReferenceNotFound: the draft references a CV that does not exist
            WorkflowBusy: a generation is already pending on this agent
        """
        def validate() -> CoverLetter:
            missing = [
                name for name, value in (
                    ("job_title", draft.job_title),
                    ("company_name", draft.company_name),
                    ("job_description", draft.job_description),
                ) if _blank(value)
            ]
            if missing:
                raise MissingInput(
                    missing, "Please provide the job title, company name, and job description."
                )
            if draft.cv_id and self.store.get_cv(draft.cv_id) is None:
                raise ReferenceNotFound("CV", draft.cv_id)
            return draft

        async def compute(letter: CoverLetter) -> CoverLetter:
            cv = self.store.get_cv(letter.cv_id) if letter.cv_id else None
            content = await self.generator.generate(
                letter.job_title,
                letter.company_name,
                letter.job_description,
                cv=cv,
                profile=self.store.get_user_profile(),
            )
            return letter.model_copy(update={"content": content})

        return await self._execute(validate, compute)

    async def save_cover_letter(self, letter: CoverLetter) -> CoverLetter:
        """
        Persist a cover letter (insert or update).

        Raises:
            MissingInput: content, job title or company name is blank
            ReferenceNotFound: the letter references a CV that does not exist
            StorageUnavailable: the letter could not be persisted
        """
        missing = [
            name for name, value in (
                ("content", letter.content),
                ("job_title", letter.job_title),
                ("company_name", letter.company_name),
            ) if _blank(value)
        ]
        if missing:
            error = MissingInput(
                missing, "Please provide the job title, company name, and cover letter content."
            )
            await self.logs_manager.warning(f"Cover letter save rejected: {str(error)}")
            raise error
        if letter.cv_id and self.store.get_cv(letter.cv_id) is None:
            await self.logs_manager.warning(f"Cover letter {letter.id} references unknown CV {letter.cv_id}")
            raise ReferenceNotFound("CV", letter.cv_id)

        timestamp = self.store.current_timestamp()
        existing = self.store.get_cover_letter(letter.id)
        created_at = (existing.created_at if existing else None) or letter.created_at or timestamp

        saved = CoverLetter.model_validate({
            **letter.model_dump(),
            "created_at": created_at,
            "updated_at": timestamp,
        })

        try:
            self.store.save_cover_letter(saved)
        except Exception as e:
            await self.logs_manager.error(f"Failed to save cover letter {letter.id}: {str(e)}")
            raise

        await self.logs_manager.info(f"Cover letter saved: {saved.name} ({saved.id})")
        return saved
