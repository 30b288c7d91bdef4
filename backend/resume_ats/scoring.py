# backend/resume_ats/scoring.py
# Additive ATS rubric: each check awards 0..max points and says why.
import logging
from typing import List, NamedTuple, Optional

from . import rubric
from .schemas import ScoreReport

logger = logging.getLogger(__name__)

MAX_SCORE = 100


class CheckResult(NamedTuple):
    name: str
    points: int
    max_points: int
    strength: Optional[str] = None
    suggestion: Optional[str] = None


def check_contact(text: str) -> CheckResult:
    has_email = bool(rubric.EMAIL_RE.search(text))
    has_phone = bool(rubric.PHONE_RE.search(text))
    if has_email and has_phone:
        return CheckResult("contact", 10, 10, strength="Contact information is complete")
    if has_email or has_phone:
        missing = "phone number" if has_email else "email address"
        return CheckResult(
            "contact", 5, 10,
            strength="Some contact information is present",
            suggestion=f"Add a {missing} so recruiters can reach you",
        )
    return CheckResult("contact", 0, 10, suggestion="Add contact information (email and phone number)")


def check_summary(text: str) -> CheckResult:
    if rubric.SUMMARY_RE.search(text) and len(text) > rubric.SUMMARY_MIN_CHARS:
        return CheckResult("summary", 10, 10, strength="Professional summary present")
    return CheckResult(
        "summary", 0, 10,
        suggestion="Add a professional summary or objective (3-5 sentences highlighting your key strengths)",
    )


def check_experience(text: str) -> CheckResult:
    if rubric.EXPERIENCE_RE.search(text):
        return CheckResult("experience", 15, 15, strength="Work experience section found")
    return CheckResult(
        "experience", 0, 15,
        suggestion="Include a work experience section with roles, companies and dates",
    )


def check_education(text: str) -> CheckResult:
    if rubric.EDUCATION_RE.search(text):
        return CheckResult("education", 10, 10, strength="Education details included")
    return CheckResult(
        "education", 0, 10,
        suggestion="Add an education section with degree, institution and graduation year",
    )


def check_skills(text: str) -> CheckResult:
    found = rubric.find_terms(text.lower(), rubric.TECH_KEYWORDS)
    count = len(found)
    if count >= 8:
        return CheckResult("skills", 15, 15, strength=f"Strong technical skills coverage ({count} technologies)")
    if count >= 5:
        return CheckResult(
            "skills", 10, 15,
            strength=f"Good technical skills ({count} technologies)",
            suggestion="List a few more relevant technologies to reach 8 or more",
        )
    if count >= 2:
        return CheckResult(
            "skills", 5, 15,
            strength=f"Some technical skills listed ({count} technologies)",
            suggestion=f"Expand your skills section (current: {count}, target: 8+ technologies)",
        )
    return CheckResult("skills", 0, 15, suggestion="Add a skills section listing the technologies you use")


def check_action_verbs(text: str) -> CheckResult:
    count = len(rubric.find_terms(text.lower(), rubric.ACTION_VERBS))
    if count >= 8:
        return CheckResult("action_verbs", 10, 10, strength=f"Excellent use of action verbs ({count} found)")
    if count >= 4:
        return CheckResult(
            "action_verbs", 5, 10,
            strength=f"Good action verb usage ({count} found)",
            suggestion="Use more varied action verbs (developed, optimized, launched, ...)",
        )
    return CheckResult(
        "action_verbs", 0, 10,
        suggestion="Start achievement statements with strong action verbs (achieved, built, led, ...)",
    )


def check_achievements(text: str) -> CheckResult:
    count = len(rubric.ACHIEVEMENT_RE.findall(text))
    if count >= 3:
        return CheckResult("achievements", 10, 10, strength=f"Quantifiable achievements included ({count} found)")
    if count >= 1:
        return CheckResult(
            "achievements", 5, 10,
            strength="Some measurable results mentioned",
            suggestion="Add more quantifiable achievements (percentages, amounts, growth figures)",
        )
    return CheckResult(
        "achievements", 0, 10,
        suggestion='Include quantifiable achievements (e.g. "Increased sales by 45%")',
    )


def check_formatting(text: str) -> CheckResult:
    has_bullets = bool(rubric.BULLET_RE.search(text))
    blocks = [b for b in rubric.BLOCK_SPLIT_RE.split(text) if b.strip()]
    has_sections = len(blocks) >= 2
    if has_bullets and has_sections:
        return CheckResult("formatting", 10, 10, strength="Clear structure with sections and bullet points")
    if has_bullets or has_sections:
        fix = "separate sections with blank lines" if has_bullets else "use bullet points for achievements"
        return CheckResult(
            "formatting", 5, 10,
            strength="Partially structured layout",
            suggestion=f"Improve readability: {fix}",
        )
    return CheckResult(
        "formatting", 0, 10,
        suggestion="Use bullet points and clearly separated sections (Experience, Skills, Education)",
    )


def job_match_ratio(text: str, job_description: str) -> float:
    """
    Share of job-description words (longer than 4 chars) that appear anywhere
    in the resume text. Plain substring containment: "java" counts as found
    inside "javascript".
    """
    lower = text.lower()
    jd_words = [w for w in job_description.lower().split() if len(w) >= rubric.JOB_WORD_MIN_CHARS]
    if not jd_words:
        return 0.0
    matched = [w for w in jd_words if w in lower]
    return len(matched) / len(jd_words)


def check_job_match(text: str, job_description: str) -> CheckResult:
    ratio = job_match_ratio(text, job_description)
    pct = round(ratio * 100)
    if ratio > 0.5:
        return CheckResult("job_match", 10, 10, strength=f"Excellent alignment with the job description ({pct}% match)")
    if ratio > 0.3:
        return CheckResult(
            "job_match", 7, 10,
            strength=f"Good keyword match with the job description ({pct}% match)",
            suggestion="Incorporate a few more keywords from the job description",
        )
    if ratio > 0.15:
        return CheckResult(
            "job_match", 4, 10,
            strength=f"Partial match with the job description ({pct}% match)",
            suggestion=f"Improve job match from {pct}% by adding relevant keywords",
        )
    return CheckResult(
        "job_match", 0, 10,
        suggestion="Resume does not match the job description; incorporate its key terms and requirements",
    )


def job_match_enabled(job_description: Optional[str]) -> bool:
    return bool(job_description) and len(job_description) >= rubric.JOB_DESCRIPTION_MIN_CHARS


def run_checks(text: str, job_description: Optional[str] = None) -> List[CheckResult]:
    text = text or ""
    results = [
        check_contact(text),
        check_summary(text),
        check_experience(text),
        check_education(text),
        check_skills(text),
        check_action_verbs(text),
        check_achievements(text),
        check_formatting(text),
    ]
    if job_match_enabled(job_description):
        results.append(check_job_match(text, job_description))
    return results


def build_report(results: List[CheckResult], keywords_found: List[str]) -> ScoreReport:
    total = sum(r.points for r in results)
    strengths = [r.strength for r in results if r.strength]
    suggestions = [r.suggestion for r in results if r.suggestion]
    return ScoreReport(
        score=max(0, min(MAX_SCORE, total)),
        strengths=strengths,
        suggestions=suggestions,
        keywords_found=keywords_found,
    )


def score_resume(text: str, job_description: Optional[str] = None) -> ScoreReport:
    text = text or ""
    results = run_checks(text, job_description)
    report = build_report(results, rubric.find_terms(text.lower(), rubric.TECH_KEYWORDS))
    logger.debug("score_resume: chars=%s checks=%s score=%s", len(text), len(results), report.score)
    return report


def grade_for(score: int) -> str:
    if score >= 90:
        return "Excellent"
    if score >= 80:
        return "Very Good"
    if score >= 70:
        return "Good"
    if score >= 60:
        return "Fair"
    return "Needs Improvement"
