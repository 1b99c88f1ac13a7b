"""
Main Controller Module (Async)

Caller-facing entry point of the career assistant. Wires the persistence store,
the analysis agents and logging together from one settings dict and exposes the
request/response operations a UI needs:

- CVs:            list_cvs, get_cv, save_cv, delete_cv
- Analyses:       review_cv, match_job
- Cover letters:  new_cover_letter, generate_cover_letter, save_cover_letter
- Profile:        get_profile, save_profile, delete_profile
- History:        list_reviews, list_job_matches, list_cover_letters, delete_*
- Maintenance:    clear_all_data, export_collection

Each analysis kind has one agent here, so a second request of the same kind
while the first is pending is rejected with WorkflowBusy.

Usage:
------
    controller = Controller(load_settings())
    await controller.initialize()
    cv = controller.save_cv("Backend CV", raw_text="Python, SQL, Docker")
    review = await controller.review_cv(cv_id=cv.id)
    await controller.shutdown()
"""

from pathlib import Path
from typing import List, Optional

from agents import CoverLetterAgent, CVReviewAgent, JobMatchAgent, UserProfileAgent
from constants import StorageKeys
from models import CV, CVSection, CVReview, CoverLetter, JobMatch, UserProfile
from storage import CSVExporter, LogsManager, PersistenceStore, create_backend
from utils.analysis_strategies import AnalysisStrategies, build_strategies
from utils.document_processor import DocumentProcessor, UploadedDocument


class Controller:
    def __init__(
        self,
        settings: dict,
        store: Optional[PersistenceStore] = None,
        logs_manager: Optional[LogsManager] = None,
        strategies: Optional[AnalysisStrategies] = None,
    ):
        """
        Args:
            settings: Output of config.load_settings() (or an equivalent dict)
            store: Optional pre-built store (defaults to the configured backend)
            logs_manager: Optional LogsManager (defaults to one built from settings)
            strategies: Optional scorer/generator set (defaults to the configured ones)
        """
        self.settings = settings
        self.logs_manager = logs_manager or LogsManager(settings)
        self.store = store or PersistenceStore(create_backend(settings))
        self.strategies = strategies or build_strategies(settings)
        self.exporter = CSVExporter(settings)

        analysis = settings.get('analysis', {})
        self.review_agent = CVReviewAgent(
            self.store,
            self.logs_manager,
            scorer=self.strategies.review_scorer,
            delay=analysis.get('review_delay', 0.0),
            document_processor=DocumentProcessor(self.logs_manager),
        )
        self.match_agent = JobMatchAgent(
            self.store,
            self.logs_manager,
            scorer=self.strategies.match_scorer,
            delay=analysis.get('match_delay', 0.0),
        )
        self.cover_letter_agent = CoverLetterAgent(
            self.store,
            self.logs_manager,
            generator=self.strategies.cover_letter_generator,
            delay=analysis.get('cover_letter_delay', 0.0),
        )
        self.profile_agent = UserProfileAgent(self.store, self.logs_manager)

    async def initialize(self):
        """Start file logging."""
        await self.logs_manager.initialize()
        await self.logs_manager.info("Career assistant ready")

    async def shutdown(self):
        await self.logs_manager.shutdown()

    # -------------------------------------------------------------------------
    # CVs
    # -------------------------------------------------------------------------

    def list_cvs(self, include_ephemeral: bool = False) -> List[CV]:
        return self.store.list_cvs(include_ephemeral=include_ephemeral)

    def get_cv(self, cv_id: str) -> Optional[CV]:
        return self.store.get_cv(cv_id)

    def save_cv(
        self,
        name: str,
        sections: Optional[List[CVSection]] = None,
        raw_text: str = "",
        cv_id: Optional[str] = None,
    ) -> CV:
        """Create a CV, or update the CV with `cv_id` (keeping its createdAt)."""
        if cv_id is None:
            return self.store.create_cv(name=name, sections=sections, raw_text=raw_text)

        existing = self.store.get_cv(cv_id)
        timestamp = self.store.current_timestamp()
        cv = CV(
            id=cv_id,
            name=name,
            sections=sections or [],
            raw_text=raw_text,
            created_at=existing.created_at if existing else timestamp,
            updated_at=timestamp,
        )
        return self.store.save_cv(cv)

    def delete_cv(self, cv_id: str) -> bool:
        return self.store.delete_cv(cv_id)

    # -------------------------------------------------------------------------
    # Analyses
    # -------------------------------------------------------------------------

    async def review_cv(
        self,
        cv_id: Optional[str] = None,
        document: Optional[UploadedDocument] = None,
        document_path: Optional[str | Path] = None,
    ) -> CVReview:
        if document is None and document_path is not None:
            document = UploadedDocument.from_path(document_path)
        return await self.review_agent.review_cv(cv_id=cv_id, document=document)

    async def match_job(self, cv_id: str, job_description: str) -> JobMatch:
        return await self.match_agent.match_job(cv_id, job_description)

    # -------------------------------------------------------------------------
    # Cover letters
    # -------------------------------------------------------------------------

    def new_cover_letter(self, cv_id: Optional[str] = None, **fields) -> CoverLetter:
        return self.cover_letter_agent.new_draft(cv_id=cv_id, **fields)

    async def generate_cover_letter(
        self,
        draft: Optional[CoverLetter] = None,
        **fields,
    ) -> CoverLetter:
        """
        Generate letter content for a draft. Fields (job_title, company_name,
        job_description, cv_id, name) update the draft, or start a new one.
        The returned draft is not persisted; its `content` holds the text.
        """
        if draft is None:
            draft = self.new_cover_letter(**fields)
        elif fields:
            draft = CoverLetter.model_validate({**draft.model_dump(), **fields})
        return await self.cover_letter_agent.generate_cover_letter(draft)

    async def save_cover_letter(self, letter: CoverLetter) -> CoverLetter:
        return await self.cover_letter_agent.save_cover_letter(letter)

    def list_cover_letters(self) -> List[CoverLetter]:
        return self.store.list_cover_letters()

    def delete_cover_letter(self, letter_id: str) -> bool:
        return self.store.delete_cover_letter(letter_id)

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    def list_reviews(self, cv_id: Optional[str] = None) -> List[CVReview]:
        if cv_id:
            return self.store.list_reviews_for_cv(cv_id)
        return self.store.list_reviews()

    def list_job_matches(self, cv_id: Optional[str] = None) -> List[JobMatch]:
        if cv_id:
            return self.store.list_job_matches_for_cv(cv_id)
        return self.store.list_job_matches()

    def delete_review(self, review_id: str) -> bool:
        return self.store.delete_review(review_id)

    def delete_job_match(self, match_id: str) -> bool:
        return self.store.delete_job_match(match_id)

    # -------------------------------------------------------------------------
    # Profile
    # -------------------------------------------------------------------------

    async def get_profile(self) -> Optional[UserProfile]:
        return await self.profile_agent.get_profile()

    async def save_profile(self, name: str, email: str, phone: Optional[str] = None) -> UserProfile:
        return await self.profile_agent.save_profile(name, email, phone)

    async def delete_profile(self) -> bool:
        return await self.profile_agent.delete_profile()

    # -------------------------------------------------------------------------
    # Maintenance
    # -------------------------------------------------------------------------

    async def clear_all_data(self):
        """Remove every stored CV, analysis, cover letter and the profile."""
        self.store.clear_all()
        for agent in (self.review_agent, self.match_agent, self.cover_letter_agent):
            if not agent.is_pending:
                agent.reset()
        await self.logs_manager.warning("All stored data cleared")

    def export_collection(self, collection: str, use_timestamp: bool = False) -> Path:
        """Export one collection (cvs, cv_reviews, job_matches, cover_letters) to CSV."""
        readers = {
            StorageKeys.CVS: lambda: self.store.list_cvs(include_ephemeral=True),
            StorageKeys.CV_REVIEWS: self.store.list_reviews,
            StorageKeys.JOB_MATCHES: self.store.list_job_matches,
            StorageKeys.COVER_LETTERS: self.store.list_cover_letters,
        }
        if collection not in readers:
            raise ValueError(f"Unknown collection: {collection} (available: {', '.join(readers)})")
        return self.exporter.export_collection(collection, readers[collection](), use_timestamp)
