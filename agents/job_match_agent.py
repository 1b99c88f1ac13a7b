"""
Job Match Agent

Compares one stored CV against one job description and persists the match
score, missing skills and suggestions.
"""

from models import CV, JobMatch, MissingInput, ReferenceNotFound
from utils.analysis_strategies import JobMatchScorer
from .base_agent import BaseAgent


class JobMatchAgent(BaseAgent):
    workflow_name = "Job match"

    def __init__(self, store, logs_manager, scorer: JobMatchScorer, delay: float = 0.0, sleeper=None):
        super().__init__(store, logs_manager, delay=delay, sleeper=sleeper)
        self.scorer = scorer

    async def match_job(self, cv_id: str, job_description: str) -> JobMatch:
        """
        Raises:
            MissingInput: CV id or job description missing/blank
            ReferenceNotFound: the CV does not exist (checked again before saving)
            WorkflowBusy: a match is already pending on this agent
            StorageUnavailable: the result could not be persisted
        """
        def validate() -> CV:
            missing = []
            if not cv_id:
                missing.append("cv_id")
            if not job_description or not job_description.strip():
                missing.append("job_description")
            if missing:
                raise MissingInput(missing, "Please select a CV and enter a job description.")
            cv = self.store.get_cv(cv_id)
            if cv is None:
                raise ReferenceNotFound("CV", cv_id)
            return cv

        async def compute(cv: CV) -> JobMatch:
            result = await self.scorer.match(cv, job_description)

            # The CV may have been deleted while the analysis was pending
            if self.store.get_cv(cv.id) is None:
                raise ReferenceNotFound("CV", cv.id)

            match = JobMatch(
                id=self.store.generate_id(),
                cv_id=cv.id,
                job_description=job_description,
                match_score=result.match_score,
                missing_skills=result.missing_skills,
                suggestions=result.suggestions,
                created_at=self.store.current_timestamp(),
            )
            self.store.save_job_match(match)
            await self.logs_manager.debug(
                f"Job match {match.id}: score {match.match_score}, missing {match.missing_skills}"
            )
            return match

        return await self._execute(validate, compute)
