"""
Regex Pattern Utilities

Skill keyword extraction for job matching. Kept synchronous: regex work is
CPU-bound and doesn't benefit from async.

A fixed vocabulary of technical and professional skills is matched against free
text with word-boundary aware patterns (so "Java" does not match "JavaScript"
and "C++"/"C#"/"Node.js" are handled). Aliases map to a canonical display name.
"""

import re
from typing import Dict, Iterable, List, Pattern


class RegexPatterns:
    """Skill vocabulary: canonical name -> aliases (matched case-insensitively)."""

    SKILLS: Dict[str, List[str]] = {
        "Python": ["python"],
        "Java": ["java"],
        "JavaScript": ["javascript", "js"],
        "TypeScript": ["typescript"],
        "Go": ["golang"],
        "Rust": ["rust"],
        "C++": ["c++", "cpp"],
        "C#": ["c#", "csharp"],
        "Ruby": ["ruby"],
        "PHP": ["php"],
        "SQL": ["sql"],
        "PostgreSQL": ["postgresql", "postgres"],
        "MySQL": ["mysql"],
        "MongoDB": ["mongodb", "mongo"],
        "Redis": ["redis"],
        "React": ["react", "react.js", "reactjs"],
        "Angular": ["angular"],
        "Vue": ["vue", "vue.js", "vuejs"],
        "Node.js": ["node.js", "nodejs"],
        "Django": ["django"],
        "Flask": ["flask"],
        "FastAPI": ["fastapi"],
        "Spring": ["spring boot", "spring framework"],
        "Docker": ["docker"],
        "Kubernetes": ["kubernetes", "k8s"],
        "AWS": ["aws", "amazon web services"],
        "Azure": ["azure"],
        "GCP": ["gcp", "google cloud"],
        "Terraform": ["terraform"],
        "CI/CD": ["ci/cd", "continuous integration", "continuous delivery"],
        "Git": ["git"],
        "Linux": ["linux"],
        "REST": ["rest api", "rest apis", "restful"],
        "GraphQL": ["graphql"],
        "Machine Learning": ["machine learning"],
        "Data Analysis": ["data analysis", "data analytics"],
        "Pandas": ["pandas"],
        "Spark": ["spark", "pyspark"],
        "Agile": ["agile", "scrum"],
        "Project Management": ["project management"],
        "Communication": ["communication"],
        "Leadership": ["leadership"],
    }

    @classmethod
    def compile_patterns(cls) -> Dict[str, Pattern]:
        """
        Compile one pattern per canonical skill. Boundaries are lookarounds on
        word characters so aliases ending in symbols (c++, c#) still match.
        """
        patterns = {}
        for name, aliases in cls.SKILLS.items():
            alternatives = "|".join(
                re.escape(alias) for alias in sorted(aliases, key=len, reverse=True)
            )
            patterns[name] = re.compile(rf"(?<![\w+#.])(?:{alternatives})(?![\w+#]|\.\w)", re.IGNORECASE)
        return patterns


class RegexUtils:
    """Provides skill extraction helpers using precompiled patterns."""

    def __init__(self, extra_skills: Dict[str, List[str]] = None):
        self._patterns = RegexPatterns.compile_patterns()
        for name, aliases in (extra_skills or {}).items():
            alternatives = "|".join(re.escape(alias) for alias in aliases)
            self._patterns[name] = re.compile(rf"(?<![\w+#.])(?:{alternatives})(?![\w+#]|\.\w)", re.IGNORECASE)

    def extract_skills(self, text: str) -> List[str]:
        """Return canonical skill names found in text, in vocabulary order."""
        if not text:
            return []
        return [name for name, pattern in self._patterns.items() if pattern.search(text)]

    @staticmethod
    def missing_skills(required: Iterable[str], available: Iterable[str]) -> List[str]:
        """Skills in `required` that are not in `available` (order of `required`)."""
        have = {skill.lower() for skill in available}
        return [skill for skill in required if skill.lower() not in have]
