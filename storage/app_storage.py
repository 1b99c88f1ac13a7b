"""
Persistence Store (Sync)

Owns the serialized representation of every entity collection and hands out ids
and timestamps. Collections are stored as JSON arrays under fixed namespaces
(see constants.StorageKeys); the user profile is a singleton object.

Semantics:
- Reads always reflect the most recent completed write.
- save_* upserts by id: replaced in place if present, appended otherwise.
- delete_* is idempotent and reports whether something was removed.
- Write failures raise StorageUnavailable and are never swallowed.
- No cross-entity transactions; each save is atomic only for its own entity.
"""

import json
import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional, Type, TypeVar, Union

from pydantic import ValidationError

from constants import StorageKeys, Messages
from models import (
    CV,
    CVSection,
    CVReview,
    CoverLetter,
    DomainModel,
    InvalidProfile,
    JobMatch,
    StorageUnavailable,
    UserProfile,
)
from storage.backends import StorageBackend

T = TypeVar("T", bound=DomainModel)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


class PersistenceStore:
    def __init__(self, backend: StorageBackend):
        """
        Args:
            backend (StorageBackend): The durable key-value medium to read/write.
        """
        self.backend = backend
        self.logger = logging.getLogger(__name__)
        self._issued_ids = set()
        self._last_timestamp = ""

    # -------------------------------------------------------------------------
    # Identity & time
    # -------------------------------------------------------------------------

    def generate_id(self) -> str:
        """Return a fresh random identifier, unique within this store's session."""
        new_id = uuid.uuid4().hex
        while new_id in self._issued_ids:
            new_id = uuid.uuid4().hex
        self._issued_ids.add(new_id)
        return new_id

    def current_timestamp(self) -> str:
        """
        Return the current UTC time as a fixed-width ISO-8601 string.
        Values never go backwards across calls, even if the wall clock does.
        """
        timestamp = datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)
        if timestamp < self._last_timestamp:
            timestamp = self._last_timestamp
        self._last_timestamp = timestamp
        return timestamp

    # -------------------------------------------------------------------------
    # Raw collection access
    # -------------------------------------------------------------------------

    def _read_raw(self, key: str):
        raw = self.backend.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            self.logger.error(f"Unreadable data in '{key}', treating it as empty: {e}")
            return None

    def _load_records(self, key: str) -> List[dict]:
        records = self._read_raw(key)
        return records if isinstance(records, list) else []

    def _write(self, key: str, payload) -> None:
        data = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        try:
            self.backend.set(key, data)
        except StorageUnavailable as e:
            self.logger.error(Messages.STORAGE_UNAVAILABLE.format(key, e.reason))
            raise

    def _list(self, key: str, model: Type[T]) -> List[T]:
        return [model.from_record(record) for record in self._load_records(key)]

    def _get(self, key: str, model: Type[T], entity_id: str) -> Optional[T]:
        for record in self._load_records(key):
            if record.get("id") == entity_id:
                return model.from_record(record)
        return None

    def _upsert(self, key: str, entity: DomainModel) -> None:
        records = self._load_records(key)
        new_record = entity.to_record()
        for index, record in enumerate(records):
            if record.get("id") == entity.id:
                records[index] = new_record
                break
        else:
            records.append(new_record)
        self._write(key, records)
        self.logger.debug(Messages.ENTITY_SAVED.format(key, entity.id))

    def _delete(self, key: str, entity_id: str) -> bool:
        records = self._load_records(key)
        remaining = [r for r in records if r.get("id") != entity_id]
        if len(remaining) == len(records):
            return False
        self._write(key, remaining)
        self.logger.debug(Messages.ENTITY_DELETED.format(key, entity_id))
        return True

    # -------------------------------------------------------------------------
    # CVs
    # -------------------------------------------------------------------------

    def list_cvs(self, include_ephemeral: bool = False) -> List[CV]:
        """All stored CVs in insertion order. Upload-backed records are hidden by default."""
        cvs = self._list(StorageKeys.CVS, CV)
        if include_ephemeral:
            return cvs
        return [cv for cv in cvs if not cv.ephemeral]

    def get_cv(self, cv_id: str) -> Optional[CV]:
        return self._get(StorageKeys.CVS, CV, cv_id)

    def create_cv(
        self,
        name: str,
        sections: Optional[List[CVSection]] = None,
        raw_text: str = "",
        ephemeral: bool = False,
        source_filename: Optional[str] = None,
    ) -> CV:
        """Allocate id and timestamps for a new CV and persist it."""
        timestamp = self.current_timestamp()
        cv = CV(
            id=self.generate_id(),
            name=name,
            sections=sections or [],
            raw_text=raw_text,
            ephemeral=ephemeral,
            source_filename=source_filename,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self.save_cv(cv)
        return cv

    def save_cv(self, cv: CV) -> CV:
        self._upsert(StorageKeys.CVS, cv)
        return cv

    def delete_cv(self, cv_id: str) -> bool:
        return self._delete(StorageKeys.CVS, cv_id)

    # -------------------------------------------------------------------------
    # CV reviews
    # -------------------------------------------------------------------------

    def list_reviews(self) -> List[CVReview]:
        return self._list(StorageKeys.CV_REVIEWS, CVReview)

    def list_reviews_for_cv(self, cv_id: str) -> List[CVReview]:
        return [review for review in self.list_reviews() if review.cv_id == cv_id]

    def get_review(self, review_id: str) -> Optional[CVReview]:
        return self._get(StorageKeys.CV_REVIEWS, CVReview, review_id)

    def save_review(self, review: CVReview) -> CVReview:
        self._upsert(StorageKeys.CV_REVIEWS, review)
        return review

    def delete_review(self, review_id: str) -> bool:
        return self._delete(StorageKeys.CV_REVIEWS, review_id)

    # -------------------------------------------------------------------------
    # Job matches
    # -------------------------------------------------------------------------

    def list_job_matches(self) -> List[JobMatch]:
        return self._list(StorageKeys.JOB_MATCHES, JobMatch)

    def list_job_matches_for_cv(self, cv_id: str) -> List[JobMatch]:
        return [match for match in self.list_job_matches() if match.cv_id == cv_id]

    def get_job_match(self, match_id: str) -> Optional[JobMatch]:
        return self._get(StorageKeys.JOB_MATCHES, JobMatch, match_id)

    def save_job_match(self, match: JobMatch) -> JobMatch:
        self._upsert(StorageKeys.JOB_MATCHES, match)
        return match

    def delete_job_match(self, match_id: str) -> bool:
        return self._delete(StorageKeys.JOB_MATCHES, match_id)

    # -------------------------------------------------------------------------
    # Cover letters
    # -------------------------------------------------------------------------

    def list_cover_letters(self) -> List[CoverLetter]:
        return self._list(StorageKeys.COVER_LETTERS, CoverLetter)

    def get_cover_letter(self, letter_id: str) -> Optional[CoverLetter]:
        return self._get(StorageKeys.COVER_LETTERS, CoverLetter, letter_id)

    def save_cover_letter(self, letter: CoverLetter) -> CoverLetter:
        self._upsert(StorageKeys.COVER_LETTERS, letter)
        return letter

    def delete_cover_letter(self, letter_id: str) -> bool:
        return self._delete(StorageKeys.COVER_LETTERS, letter_id)

    # -------------------------------------------------------------------------
    # User profile (singleton)
    # -------------------------------------------------------------------------

    def get_user_profile(self) -> Optional[UserProfile]:
        record = self._read_raw(StorageKeys.USER_PROFILE)
        if not record:
            return None
        return UserProfile.from_record(record)

    def create_user_profile(self, name: str, email: str, phone: Optional[str] = None) -> UserProfile:
        """Validate, allocate id/timestamps and persist the profile (replacing any existing one)."""
        timestamp = self.current_timestamp()
        try:
            profile = UserProfile(
                id=self.generate_id(),
                name=name,
                email=email,
                phone=phone,
                created_at=timestamp,
                updated_at=timestamp,
            )
        except ValidationError as e:
            raise InvalidProfile(_validation_summary(e)) from e

        if self.get_user_profile() is not None:
            self.logger.warning("Replacing existing user profile with a newly created one")
        self._write(StorageKeys.USER_PROFILE, profile.to_record())
        return profile

    def save_user_profile(self, profile: Union[UserProfile, dict]) -> UserProfile:
        """Full replace of the singleton profile; re-validates and bumps updatedAt."""
        record = profile.to_record() if isinstance(profile, UserProfile) else dict(profile)
        existing = self.get_user_profile()
        timestamp = self.current_timestamp()

        record.setdefault("id", existing.id if existing else self.generate_id())
        created_at = existing.created_at if existing else None
        record["createdAt"] = created_at or record.get("createdAt") or record.get("created_at") or timestamp
        record.pop("created_at", None)
        record.pop("updated_at", None)
        record["updatedAt"] = timestamp

        try:
            validated = UserProfile.model_validate(record)
        except ValidationError as e:
            raise InvalidProfile(_validation_summary(e)) from e

        self._write(StorageKeys.USER_PROFILE, validated.to_record())
        return validated

    def delete_user_profile(self) -> bool:
        if self._read_raw(StorageKeys.USER_PROFILE) is None:
            return False
        self.backend.remove(StorageKeys.USER_PROFILE)
        return True

    # -------------------------------------------------------------------------
    # Maintenance
    # -------------------------------------------------------------------------

    def clear_all(self) -> None:
        """Remove every collection and the profile from the medium."""
        for key in StorageKeys.ALL:
            self.backend.remove(key)
        self.logger.info("Cleared all stored data")


def _validation_summary(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item.get("loc", ()))
        parts.append(f"{field}: {item.get('msg')}")
    return "; ".join(parts)
