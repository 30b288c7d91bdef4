# backend/resume_ats/routes/interview_routes.py
import logging

from fastapi import APIRouter

from .. import schemas
from ..evaluator import evaluate_answer, summarize_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/interview", tags=["interview"])


@router.post("/evaluate", response_model=schemas.AnswerFeedback)
def evaluate(payload: schemas.AnswerPayload):
    feedback = evaluate_answer(payload.answer)
    logger.info("[evaluate] words=%s score=%s", len(payload.answer.split()), feedback.score)
    return feedback


@router.post("/summary", response_model=schemas.SessionSummary)
def summary(payload: schemas.SessionRequest):
    result = summarize_session(payload.items)
    logger.info("[summary] items=%s answered=%s overall=%s", len(payload.items), result.answered, result.overall_score)
    return result
