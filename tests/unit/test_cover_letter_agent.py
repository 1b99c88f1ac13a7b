"""
Unit Tests for CoverLetterAgent

Drafts are generated without being persisted; saving sets the timestamps.
"""

import pytest

from agents import CoverLetterAgent, WorkflowState
from models import MissingInput, ReferenceNotFound, StorageUnavailable
from utils.analysis_strategies import TemplateCoverLetterGenerator


@pytest.fixture
def agent(store, logs_manager):
    return CoverLetterAgent(store, logs_manager, generator=TemplateCoverLetterGenerator())


@pytest.fixture
def draft(agent):
    return agent.new_draft(job_title="Engineer", company_name="Acme", job_description="Build APIs in Python.")


def test_new_draft_has_no_timestamps(agent, store):
    draft = agent.new_draft()
    assert draft.id
    assert draft.user_id.startswith("user-")
    assert not draft.is_saved
    assert store.list_cover_letters() == []


def test_new_draft_uses_profile_id(agent, store):
    profile = store.create_user_profile("Jane", "jane@example.com")
    assert agent.new_draft().user_id == profile.id


@pytest.mark.asyncio
async def test_generate_contains_title_and_company(agent, store, draft):
    generated = await agent.generate_cover_letter(draft)

    assert "Engineer" in generated.content
    assert "Acme" in generated.content
    assert generated.id == draft.id
    assert generated.created_at is None
    assert draft.content == ""
    assert store.list_cover_letters() == []
    assert agent.state is WorkflowState.COMPLETED


@pytest.mark.asyncio
async def test_generate_requires_job_fields(agent):
    draft = agent.new_draft(job_title="Engineer")
    with pytest.raises(MissingInput) as excinfo:
        await agent.generate_cover_letter(draft)
    assert excinfo.value.fields == ["company_name", "job_description"]
    assert agent.state is WorkflowState.IDLE


@pytest.mark.asyncio
async def test_generate_with_unknown_cv(agent):
    draft = agent.new_draft(cv_id="missing", job_title="Engineer", company_name="Acme", job_description="jd")
    with pytest.raises(ReferenceNotFound):
        await agent.generate_cover_letter(draft)


@pytest.mark.asyncio
async def test_save_without_content_fails(agent, store, draft):
    with pytest.raises(MissingInput) as excinfo:
        await agent.save_cover_letter(draft)
    assert excinfo.value.fields == ["content"]
    assert store.list_cover_letters() == []


@pytest.mark.asyncio
async def test_first_and_subsequent_saves(agent, store, draft):
    generated = await agent.generate_cover_letter(draft)

    first = await agent.save_cover_letter(generated)
    assert first.created_at == first.updated_at
    assert store.get_cover_letter(first.id) == first

    edited = first.model_copy(update={"content": first.content + "\nP.S. Available immediately."})
    second = await agent.save_cover_letter(edited)

    assert second.id == first.id
    assert second.created_at == first.created_at
    assert second.updated_at >= first.updated_at
    assert second.content.endswith("Available immediately.")
    assert store.list_cover_letters() == [second]


@pytest.mark.asyncio
async def test_save_manual_content_without_generation(agent, store):
    letter = agent.new_draft(job_title="Engineer", company_name="Acme", content="Hand written letter")
    saved = await agent.save_cover_letter(letter)
    assert saved.is_saved
    assert store.get_cover_letter(saved.id).content == "Hand written letter"


@pytest.mark.asyncio
async def test_save_with_deleted_cv(agent, store, saved_cv):
    letter = agent.new_draft(cv_id=saved_cv.id, job_title="Engineer", company_name="Acme", content="x")
    store.delete_cv(saved_cv.id)
    with pytest.raises(ReferenceNotFound):
        await agent.save_cover_letter(letter)


@pytest.mark.asyncio
async def test_save_storage_failure_propagates(agent, store, backend, draft):
    generated = await agent.generate_cover_letter(draft)
    backend.available = False
    with pytest.raises(StorageUnavailable):
        await agent.save_cover_letter(generated)
    backend.available = True
    assert store.list_cover_letters() == []
