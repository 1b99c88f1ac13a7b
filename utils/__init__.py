"""
Utility functions and helpers for the career assistant: upload handling,
skill keyword extraction and the pluggable analysis strategies.
"""

from .analysis_strategies import (
    AnalysisStrategies,
    BaselineJobMatchScorer,
    BaselineReviewScorer,
    CoverLetterGenerator,
    JobMatchScorer,
    KeywordJobMatchScorer,
    MatchResult,
    ReviewResult,
    ReviewScorer,
    TemplateCoverLetterGenerator,
    build_strategies,
)
from .document_processor import DocumentProcessor, UploadedDocument
from .regex_utils import RegexUtils, RegexPatterns

__all__ = [
    'AnalysisStrategies',
    'BaselineJobMatchScorer',
    'BaselineReviewScorer',
    'CoverLetterGenerator',
    'JobMatchScorer',
    'KeywordJobMatchScorer',
    'MatchResult',
    'ReviewResult',
    'ReviewScorer',
    'TemplateCoverLetterGenerator',
    'build_strategies',
    'DocumentProcessor',
    'UploadedDocument',
    'RegexUtils',
    'RegexPatterns',
]
