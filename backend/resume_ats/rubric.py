# backend/resume_ats/rubric.py
# Shared vocabularies and regexes for the resume scorer, question generator
# and answer evaluator. Everything here is built once at import and only read.
import re
from typing import Iterable, List

# -------------------------
# Vocabularies
# -------------------------
TECH_KEYWORDS = (
    "javascript", "typescript", "python", "java", "c++", "c#", "ruby", "php",
    "swift", "kotlin", "react", "angular", "vue", "node", "express", "django",
    "flask", "spring", "sql", "mongodb", "postgresql", "redis", "docker",
    "kubernetes", "aws", "azure", "graphql",
)

ACTION_VERBS = (
    "achieved", "improved", "managed", "created", "increased", "reduced",
    "delivered", "developed", "implemented", "designed", "optimized",
    "automated", "led", "built", "launched",
)

# order matters: questions are emitted in this order
QUESTION_SKILLS = (
    "javascript", "typescript", "react", "node", "python", "java", "c#",
    "docker", "kubernetes", "aws", "azure", "sql", "graphql", "rest",
)

# -------------------------
# Resume patterns
# -------------------------
EMAIL_RE = re.compile(r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}", re.I)
PHONE_RE = re.compile(r"(\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}", re.ASCII)
SUMMARY_RE = re.compile(r"summary|objective|profile", re.I)
EXPERIENCE_RE = re.compile(r"experience|employment|work history", re.I)
EDUCATION_RE = re.compile(r"education|degree|university|college", re.I)
ACHIEVEMENT_RE = re.compile(r"\d+%|\d+\+|increased by|reduced by|saved \$|grew by|improved by", re.I | re.ASCII)
BULLET_RE = re.compile(r"[•\-*]\s")
BLOCK_SPLIT_RE = re.compile(r"\n\s*\n")

NAME_RE = re.compile(r"[A-Z][a-z]+\s[A-Z][a-z]+")
PROJECT_LINE_RE = re.compile(r"project|built|developed|implemented", re.I)

SUMMARY_MIN_CHARS = 100
JOB_DESCRIPTION_MIN_CHARS = 50
JOB_WORD_MIN_CHARS = 5

# -------------------------
# Answer patterns
# -------------------------
ANSWER_NUMBER_RE = re.compile(r"(\d+%?|\$\d+)", re.ASCII)
ANSWER_STAR_RE = re.compile(r"(situation|task|action|result|impact)", re.I)
ANSWER_METRIC_RE = re.compile(r"(increased|reduced|improved|cut|grew|saved|optimized)", re.I)
ANSWER_VERB_RE = re.compile(
    r"(led|designed|built|implemented|shipped|launched|automated|migrated|optimized|analyzed|collaborated)",
    re.I,
)


def _term_pattern(term: str):
    # a term counts only when not glued to another letter/digit
    return re.compile(r"(?<![a-z0-9])" + re.escape(term) + r"(?![a-z0-9])")


_TERM_PATTERNS = {t: _term_pattern(t) for t in set(TECH_KEYWORDS + ACTION_VERBS + QUESTION_SKILLS)}


def find_terms(lower_text: str, terms: Iterable[str]) -> List[str]:
    """
    Return the vocabulary terms present in lower-cased text, in vocabulary
    order and without duplicates.
    """
    found = []
    for term in terms:
        if term in found:
            continue
        pattern = _TERM_PATTERNS.get(term) or _term_pattern(term)
        if pattern.search(lower_text):
            found.append(term)
    return found
