"""
Unit Tests for the domain models

Covers camelCase serialization, field validation and the cover letter draft
vs. saved distinction.
"""

import pytest
from pydantic import ValidationError

from models import CV, CVReview, CoverLetter, CVSection, JobMatch, UserProfile

TS1 = "2025-01-15T14:30:00.000000Z"
TS2 = "2025-01-15T14:31:00.000000Z"


def test_cv_record_uses_camel_case():
    cv = CV(id="cv1", name="CV", sections=[CVSection(title="Skills", content="Python")],
            raw_text="extra", created_at=TS1, updated_at=TS1)
    record = cv.to_record()

    assert record["rawText"] == "extra"
    assert record["createdAt"] == TS1
    assert "raw_text" not in record
    assert CV.from_record(record) == cv


def test_cv_full_text_joins_sections_and_raw_text():
    cv = CV(id="cv1", name="CV", sections=[CVSection(title="Skills", content="Python, SQL")],
            raw_text="Docker", created_at=TS1, updated_at=TS1)
    assert cv.full_text() == "Skills\nPython, SQL\nDocker"


def test_cv_blank_name_rejected():
    with pytest.raises(ValidationError):
        CV(id="cv1", name="  ", created_at=TS1, updated_at=TS1)


@pytest.mark.parametrize("score", [-1, 101])
def test_review_score_bounds(score):
    with pytest.raises(ValidationError):
        CVReview(id="r1", cv_id="cv1", score=score, created_at=TS1)


def test_job_match_missing_skills_deduplicated():
    match = JobMatch(id="m1", cv_id="cv1", job_description="jd", match_score=50,
                     missing_skills=["AWS", "aws ", "Docker", "", "AWS"], created_at=TS1)
    assert match.missing_skills == ["AWS", "Docker"]


def test_user_profile_normalizes_fields():
    profile = UserProfile(id="u1", name="  Jane  ", email=" jane@example.com ", phone="  ",
                          created_at=TS1, updated_at=TS1)
    assert profile.name == "Jane"
    assert profile.email == "jane@example.com"
    assert profile.phone is None


def test_cover_letter_draft_has_defaults():
    draft = CoverLetter(id="c1", user_id="u1")
    assert draft.name == "My Cover Letter"
    assert draft.cv_id is None
    assert not draft.is_saved


def test_cover_letter_created_after_updated_rejected():
    with pytest.raises(ValidationError):
        CoverLetter(id="c1", user_id="u1", created_at=TS2, updated_at=TS1)


def test_cover_letter_accepts_camel_case_record():
    letter = CoverLetter.from_record({
        "id": "c1", "userId": "u1", "jobTitle": "Engineer", "companyName": "Acme",
        "createdAt": TS1, "updatedAt": TS2,
    })
    assert letter.job_title == "Engineer"
    assert letter.is_saved
