"""
CV Review Agent

Evaluates one CV's quality independent of any job. The CV is either a stored CV
(selected by id) or an uploaded document. Uploads are kept as an ephemeral CV
record so the resulting review always references a retrievable CV.
"""

from dataclasses import dataclass
from typing import Optional

from models import CV, CVReview, MissingInput, ReferenceNotFound, ReviewFeedback, StorageUnavailable
from utils.analysis_strategies import ReviewScorer
from utils.document_processor import DocumentProcessor, UploadedDocument
from .base_agent import BaseAgent


@dataclass
class _ReviewRequest:
    cv: Optional[CV]
    document: Optional[UploadedDocument]


class CVReviewAgent(BaseAgent):
    workflow_name = "CV review"

    def __init__(self, store, logs_manager, scorer: ReviewScorer, delay: float = 0.0,
                 document_processor: DocumentProcessor = None, sleeper=None):
        super().__init__(store, logs_manager, delay=delay, sleeper=sleeper)
        self.scorer = scorer
        self.document_processor = document_processor or DocumentProcessor(logs_manager)

    async def review_cv(
        self,
        cv_id: Optional[str] = None,
        document: Optional[UploadedDocument] = None,
    ) -> CVReview:
        """
        Review a stored CV (by id) or an uploaded document. A selected CV id
        takes precedence when both are given.

        Raises:
            MissingInput: neither a CV id nor a document was provided
            ReferenceNotFound: the selected CV id is not in the store
            WorkflowBusy: a review is already pending on this agent
            StorageUnavailable: the result could not be persisted
        """
        def validate() -> _ReviewRequest:
            if not cv_id and document is None:
                raise MissingInput(["cv_id", "document"], "Please select a CV or upload a file to review.")
            if cv_id:
                cv = self.store.get_cv(cv_id)
                if cv is None:
                    raise ReferenceNotFound("CV", cv_id)
                return _ReviewRequest(cv=cv, document=None)
            return _ReviewRequest(cv=None, document=document)

        return await self._execute(validate, self._run_review)

    async def _run_review(self, request: _ReviewRequest) -> CVReview:
        if request.document is not None:
            await self.document_processor.check_upload(request.document)
            text = await self.document_processor.extract_text(request.document)
        else:
            text = request.cv.full_text()

        result = await self.scorer.score(text, request.cv)

        ephemeral_cv = None
        cv = request.cv
        if cv is None:
            ephemeral_cv = self.store.create_cv(
                name=request.document.filename or "Uploaded CV",
                raw_text=text,
                ephemeral=True,
                source_filename=request.document.filename,
            )
            cv = ephemeral_cv

        review = CVReview(
            id=self.store.generate_id(),
            cv_id=cv.id,
            score=result.score,
            feedback=ReviewFeedback(
                strengths=result.strengths,
                improvements=result.improvements,
                suggestions=result.suggestions,
            ),
            source_filename=request.document.filename if request.document else None,
            created_at=self.store.current_timestamp(),
        )

        try:
            self.store.save_review(review)
        except StorageUnavailable:
            if ephemeral_cv is not None:
                await self._discard_ephemeral_cv(ephemeral_cv)
            raise

        await self.logs_manager.debug(f"Review {review.id} scored {review.score} for CV {cv.id}")
        return review

    async def _discard_ephemeral_cv(self, cv: CV) -> None:
        try:
            self.store.delete_cv(cv.id)
        except StorageUnavailable as e:
            await self.logs_manager.warning(
                f"Could not remove upload record {cv.id} after failed review save: {str(e)}"
            )
