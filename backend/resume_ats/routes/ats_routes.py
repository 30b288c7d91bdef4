# backend/resume_ats/routes/ats_routes.py
import logging
from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, UploadFile

from .. import config, schemas, utils
from ..questions import detect_name, generate_questions
from ..scoring import build_report, grade_for, run_checks, score_resume
from ..rubric import TECH_KEYWORDS, find_terms

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ats", tags=["ats"])


@router.post("/analyze", response_model=schemas.AnalyzeResponse)
def analyze_resume(
    resume: UploadFile = File(...),
    job_description: Optional[str] = Form(None, alias="jobDescription"),
):
    content = resume.file.read(config.MAX_UPLOAD_BYTES + 1)
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    if len(content) > config.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"File exceeds {config.MAX_UPLOAD_MB} MB")

    logger.info("[analyze] file=%s type=%s bytes=%s", resume.filename, resume.content_type, len(content))
    text = utils.extract_text(resume.filename, content, resume.content_type)
    if not text.strip():
        logger.warning("[analyze] no text extracted from %s; scoring empty text", resume.filename)

    results = run_checks(text, job_description)
    report = build_report(results, find_terms(text.lower(), TECH_KEYWORDS))
    questions = generate_questions(text)
    logger.info("[analyze] score=%s skills=%s", report.score, questions.detected_skills)

    return schemas.AnalyzeResponse(
        ats_score=report.score,
        grade=grade_for(report.score),
        strengths=report.strengths,
        suggestions=report.suggestions,
        keywords_found=report.keywords_found,
        breakdown=[
            schemas.CheckBreakdown(name=r.name, points=r.points, max_points=r.max_points)
            for r in results
        ],
        candidate_name=detect_name(text),
        questions=questions,
    )


@router.post("/score", response_model=schemas.ScoreReport)
def score_text(payload: schemas.ScoreTextRequest):
    report = score_resume(payload.text, payload.job_description)
    logger.info("[score] chars=%s score=%s", len(payload.text), report.score)
    return report


@router.post("/questions", response_model=schemas.QuestionSet)
def questions_for_text(payload: schemas.QuestionsRequest):
    return generate_questions(payload.text)
