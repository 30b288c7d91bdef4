# backend/resume_ats/suggestions.py
# Suggestions for a resume that is still being edited in the builder
# (structured fields rather than extracted text).
from typing import List

from .schemas import ResumeDraft

MIN_SUMMARY_CHARS = 30
MIN_SKILLS = 5
MIN_DESCRIPTION_CHARS = 20


def suggest_improvements(resume: ResumeDraft) -> List[str]:
    suggestions = []

    summary = (resume.summary or "").strip()
    if len(summary) < MIN_SUMMARY_CHARS:
        suggestions.append(
            "Write a concise professional summary (2-4 sentences) that highlights your top skills and achievements."
        )
    else:
        suggestions.append(
            "Your summary looks good. Consider adding one quantified achievement "
            '(e.g. "reduced latency by 30%") to strengthen it.'
        )

    if not resume.skills or len(resume.skills) < MIN_SKILLS:
        suggestions.append(
            "Expand your skills section to include relevant technologies, tools, and methodologies "
            "(aim for 6-12 core skills)."
        )

    if resume.experience:
        thin = [e for e in resume.experience if len((e.description or "").strip()) < MIN_DESCRIPTION_CHARS]
        if thin:
            suggestions.append(
                "Add short achievement-focused bullet points to each role. "
                'Use metrics where possible (e.g. "improved X by Y%").'
            )
        else:
            suggestions.append("Experience sections look detailed. Ensure top 2-3 roles contain quantifiable outcomes.")
    else:
        suggestions.append("Add at least one detailed work experience entry with responsibilities and achievements.")

    if resume.projects:
        suggestions.append(
            "For each project, include the technologies used and a link or short outcome (what you built or achieved)."
        )

    if not resume.education:
        suggestions.append(
            "If you have relevant coursework or certifications, add them to the education or projects sections."
        )

    suggestions.append(
        "Prefer single-line skill tokens (comma-separated or tags) to make scanning easier for both humans and ATS."
    )
    return suggestions
