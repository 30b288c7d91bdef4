# backend/resume_ats/questions.py
import logging
from typing import List, Optional

from . import rubric
from .schemas import QuestionSet

logger = logging.getLogger(__name__)

MAX_SKILL_QUESTIONS = 5
MAX_PROJECT_LINES = 3

HR_OPENER = "Tell me about yourself."
HR_FIXED = [
    "Why are you interested in this role and our company?",
    "What are your greatest strengths and weaknesses?",
]
TECH_FALLBACK = "Which technologies are you most comfortable with, and how have you used them?"
TECH_DEBUGGING = "Describe how you approach debugging a difficult production issue."
PROJECT_FIXED = [
    "Walk me through a project you are proud of, from design to delivery.",
    "How did you ensure code quality and maintainability in your projects?",
]


def detect_name(text: str) -> Optional[str]:
    m = rubric.NAME_RE.search(text or "")
    return m.group(0) if m else None


def detect_skills(text: str) -> List[str]:
    return rubric.find_terms((text or "").lower(), rubric.QUESTION_SKILLS)


def detect_project_lines(text: str) -> List[str]:
    lines = [l.strip() for l in (text or "").splitlines() if l.strip()]
    return [l for l in lines if rubric.PROJECT_LINE_RE.search(l)][:MAX_PROJECT_LINES]


def generate_questions(text: str) -> QuestionSet:
    """
    Build HR, technical and project interview questions from resume text.
    Output order depends only on the input and the vocabulary order.
    """
    text = text or ""
    name = detect_name(text)
    skills = detect_skills(text)
    project_lines = detect_project_lines(text)

    hr = [HR_OPENER]
    if name:
        first_name = name.split()[0]
        hr.append(f"{first_name}, what motivated you to pursue this career path?")
    hr.extend(HR_FIXED)

    technical = [f"Explain your experience with {s}." for s in skills[:MAX_SKILL_QUESTIONS]]
    if len(skills) >= 2:
        technical.append(
            f"How would you compare {skills[0]} and {skills[1]}, and when would you choose one over the other?"
        )
    if not skills:
        technical.append(TECH_FALLBACK)
    technical.append(TECH_DEBUGGING)

    project = [
        f'You mentioned "{line}". What was your role, and what challenges did you face?'
        for line in project_lines
    ]
    project.extend(PROJECT_FIXED)

    logger.debug("generate_questions: name=%s skills=%s project_lines=%s", bool(name), skills, len(project_lines))
    return QuestionSet(hr=hr, technical=technical, project=project, detected_skills=skills)
