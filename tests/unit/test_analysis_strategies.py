"""
Unit Tests for the analysis strategies and skill extraction
"""

import pytest

from constants import BaselineTexts
from models import CV, UserProfile
from utils.analysis_strategies import (
    BaselineJobMatchScorer,
    BaselineReviewScorer,
    KeywordJobMatchScorer,
    MatchResult,
    ReviewResult,
    TemplateCoverLetterGenerator,
    build_strategies,
    clamp_score,
)
from utils.regex_utils import RegexUtils

TS = "2025-01-15T14:30:00.000000Z"


def make_cv(text):
    return CV(id="cv1", name="CV", raw_text=text, created_at=TS, updated_at=TS)


@pytest.mark.parametrize("raw,expected", [(-5, 0), (0, 0), (42.4, 42), (99.6, 100), (250, 100)])
def test_clamp_score(raw, expected):
    assert clamp_score(raw) == expected


def test_results_clamp_scores():
    assert ReviewResult(score=130).score == 100
    assert MatchResult(match_score=-3).match_score == 0


@pytest.mark.asyncio
async def test_baseline_review_scorer():
    result = await BaselineReviewScorer().score("anything")
    assert result.score == 78
    assert result.strengths == BaselineTexts.REVIEW_STRENGTHS
    assert len(result.improvements) == 3


@pytest.mark.asyncio
async def test_baseline_match_scorer():
    result = await BaselineJobMatchScorer().match(make_cv(""), "Any job")
    assert result.match_score == 74
    assert result.missing_skills == ["Docker", "AWS", "TypeScript"]


@pytest.mark.asyncio
async def test_keyword_scorer_partial_match():
    cv = make_cv("Python developer with SQL and Git experience")
    result = await KeywordJobMatchScorer().match(cv, "We need Python, Docker and AWS skills. SQL a plus.")

    assert result.missing_skills == ["Docker", "AWS"]
    assert result.match_score == 50
    assert "Docker" in result.suggestions


@pytest.mark.asyncio
async def test_keyword_scorer_full_match():
    cv = make_cv("Python, Docker, AWS")
    result = await KeywordJobMatchScorer().match(cv, "python and docker on aws")
    assert result.match_score == 100
    assert result.missing_skills == []


@pytest.mark.asyncio
async def test_keyword_scorer_no_known_skills():
    result = await KeywordJobMatchScorer().match(make_cv("Python"), "Friendly team player wanted")
    assert result.match_score == 100
    assert result.missing_skills == []


def test_extract_skills_word_boundaries():
    utils = RegexUtils()
    assert utils.extract_skills("Senior JavaScript engineer") == ["JavaScript"]
    assert "Java" in utils.extract_skills("Java and C++ and C#")
    assert "C++" in utils.extract_skills("Java and C++ and C#")
    assert "C#" in utils.extract_skills("Java and C++ and C#")
    assert utils.extract_skills("Built services in Node.js") == ["Node.js"]
    assert utils.extract_skills("") == []


def test_extract_skills_aliases_and_extra_vocabulary():
    utils = RegexUtils(extra_skills={"Elixir": ["elixir"]})
    skills = utils.extract_skills("Postgres, k8s and some Elixir")
    assert skills == ["PostgreSQL", "Kubernetes", "Elixir"]


def test_missing_skills_is_case_insensitive():
    assert RegexUtils.missing_skills(["AWS", "Docker"], ["aws"]) == ["Docker"]


@pytest.mark.asyncio
async def test_template_generator_fills_fields():
    text = await TemplateCoverLetterGenerator().generate(" Engineer ", "Acme", "Build things")
    assert "Engineer position at Acme" in text
    assert text.endswith(BaselineTexts.DEFAULT_SIGNATURE)


@pytest.mark.asyncio
async def test_template_generator_signs_with_profile_name():
    profile = UserProfile(id="u1", name="Jane Doe", email="jane@example.com",
                          created_at=TS, updated_at=TS)
    text = await TemplateCoverLetterGenerator().generate("Engineer", "Acme", "jd", profile=profile)
    assert text.endswith("Jane Doe")


def test_build_strategies_from_settings(mock_settings):
    mock_settings['analysis']['match_scorer'] = 'keyword'
    strategies = build_strategies(mock_settings)
    assert isinstance(strategies.review_scorer, BaselineReviewScorer)
    assert isinstance(strategies.match_scorer, KeywordJobMatchScorer)
    assert isinstance(strategies.cover_letter_generator, TemplateCoverLetterGenerator)


def test_build_strategies_unknown_name(mock_settings):
    mock_settings['analysis']['review_scorer'] = 'gpt'
    with pytest.raises(ValueError):
        build_strategies(mock_settings)


def test_common_words_are_not_skills():
    utils = RegexUtils()
    text = "Join in spring 2025 and help the rest of the team."
    assert utils.extract_skills(text) == []


def test_specific_rest_and_spring_aliases():
    utils = RegexUtils()
    skills = utils.extract_skills("Build REST APIs with Spring Boot; RESTful design")
    assert skills == ["Spring", "REST"]


@pytest.mark.asyncio
async def test_keyword_scorer_ignores_plain_english():
    cv = make_cv("Python")
    result = await KeywordJobMatchScorer().match(cv, "Python role starting in spring, rest of details later")
    assert result.missing_skills == []
    assert result.match_score == 100
