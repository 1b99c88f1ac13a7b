"""
Analysis Strategies

Pluggable scoring and generation behind the analysis agents:
- ReviewScorer: CV text -> score + strengths/improvements/suggestions
- JobMatchScorer: CV + job description -> match score + missing skills
- CoverLetterGenerator: job fields -> letter body

Baseline implementations return the fixed canonical results (the simulated
"AI"); KeywordJobMatchScorer is a deterministic keyword comparison. A real
model-backed implementation only has to subclass the matching ABC and be
registered in the tables at the bottom of this module.

Strategies are async so implementations that call a model over the network
can await it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Type

from constants import BaselineTexts
from models import CV, UserProfile
from utils.regex_utils import RegexUtils


def clamp_score(value) -> int:
    """Round and bound a score to [0, 100]."""
    return max(0, min(100, int(round(float(value)))))


@dataclass
class ReviewResult:
    score: int
    strengths: List[str] = field(default_factory=list)
    improvements: List[str] = field(default_factory=list)
    suggestions: str = ""

    def __post_init__(self):
        self.score = clamp_score(self.score)
        self.strengths = list(self.strengths or [])
        self.improvements = list(self.improvements or [])
        self.suggestions = self.suggestions or ""


@dataclass
class MatchResult:
    match_score: int
    missing_skills: List[str] = field(default_factory=list)
    suggestions: str = ""

    def __post_init__(self):
        self.match_score = clamp_score(self.match_score)
        self.missing_skills = list(self.missing_skills or [])
        self.suggestions = self.suggestions or ""


# -----------------------------------------------------------------------------
# Interfaces
# -----------------------------------------------------------------------------

class ReviewScorer(ABC):
    @abstractmethod
    async def score(self, cv_text: str, cv: Optional[CV] = None) -> ReviewResult:
        ...


class JobMatchScorer(ABC):
    @abstractmethod
    async def match(self, cv: CV, job_description: str) -> MatchResult:
        ...


class CoverLetterGenerator(ABC):
    @abstractmethod
    async def generate(
        self,
        job_title: str,
        company_name: str,
        job_description: str,
        cv: Optional[CV] = None,
        profile: Optional[UserProfile] = None,
    ) -> str:
        ...


# -----------------------------------------------------------------------------
# Baseline implementations
# -----------------------------------------------------------------------------

class BaselineReviewScorer(ReviewScorer):
    """Fixed canonical review, regardless of input."""

    async def score(self, cv_text: str, cv: Optional[CV] = None) -> ReviewResult:
        return ReviewResult(
            score=BaselineTexts.REVIEW_SCORE,
            strengths=list(BaselineTexts.REVIEW_STRENGTHS),
            improvements=list(BaselineTexts.REVIEW_IMPROVEMENTS),
            suggestions=BaselineTexts.REVIEW_SUGGESTIONS,
        )


class BaselineJobMatchScorer(JobMatchScorer):
    """Fixed illustrative match result, regardless of input."""

    async def match(self, cv: CV, job_description: str) -> MatchResult:
        return MatchResult(
            match_score=BaselineTexts.MATCH_SCORE,
            missing_skills=list(BaselineTexts.MATCH_MISSING_SKILLS),
            suggestions=BaselineTexts.MATCH_SUGGESTIONS,
        )


class KeywordJobMatchScorer(JobMatchScorer):
    """
    Compares skill keywords found in the job description with those in the CV.
    Score is the share of job skills present in the CV (100 when the job
    description names no known skill).
    """

    def __init__(self, regex_utils: RegexUtils = None):
        self.regex_utils = regex_utils or RegexUtils()

    async def match(self, cv: CV, job_description: str) -> MatchResult:
        required = self.regex_utils.extract_skills(job_description)
        available = self.regex_utils.extract_skills(cv.full_text())
        missing = self.regex_utils.missing_skills(required, available)

        if not required:
            return MatchResult(
                match_score=100,
                suggestions="No specific skills were recognized in the job description.",
            )

        score = 100 * (len(required) - len(missing)) / len(required)
        if missing:
            suggestions = (
                f"Your CV covers {len(required) - len(missing)} of {len(required)} skills named in "
                f"the job description. Consider highlighting any experience with: {', '.join(missing)}."
            )
        else:
            suggestions = "Your CV mentions every skill recognized in the job description."
        return MatchResult(match_score=score, missing_skills=missing, suggestions=suggestions)


class TemplateCoverLetterGenerator(CoverLetterGenerator):
    """Fills job title and company name into a fixed letter skeleton."""

    def __init__(self, template: str = BaselineTexts.COVER_LETTER_TEMPLATE):
        self.template = template

    async def generate(
        self,
        job_title: str,
        company_name: str,
        job_description: str,
        cv: Optional[CV] = None,
        profile: Optional[UserProfile] = None,
    ) -> str:
        signature = profile.name if profile else BaselineTexts.DEFAULT_SIGNATURE
        return self.template.format(
            job_title=job_title.strip(),
            company_name=company_name.strip(),
            signature=signature,
        )


# -----------------------------------------------------------------------------
# Selection by configuration
# -----------------------------------------------------------------------------

REVIEW_SCORERS: Dict[str, Type[ReviewScorer]] = {
    'baseline': BaselineReviewScorer,
}
MATCH_SCORERS: Dict[str, Type[JobMatchScorer]] = {
    'baseline': BaselineJobMatchScorer,
    'keyword': KeywordJobMatchScorer,
}
COVER_LETTER_GENERATORS: Dict[str, Type[CoverLetterGenerator]] = {
    'template': TemplateCoverLetterGenerator,
}


@dataclass
class AnalysisStrategies:
    review_scorer: ReviewScorer
    match_scorer: JobMatchScorer
    cover_letter_generator: CoverLetterGenerator


def build_strategies(settings: dict) -> AnalysisStrategies:
    """Instantiate the strategies named in settings['analysis']."""
    analysis = settings.get('analysis', {})

    def pick(table: Dict[str, type], key: str, default: str):
        name = analysis.get(key, default)
        if name not in table:
            raise ValueError(f"Unknown {key}: {name} (available: {', '.join(table)})")
        return table[name]()

    return AnalysisStrategies(
        review_scorer=pick(REVIEW_SCORERS, 'review_scorer', 'baseline'),
        match_scorer=pick(MATCH_SCORERS, 'match_scorer', 'baseline'),
        cover_letter_generator=pick(COVER_LETTER_GENERATORS, 'cover_letter_generator', 'template'),
    )
