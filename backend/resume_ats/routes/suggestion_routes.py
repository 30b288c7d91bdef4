# backend/resume_ats/routes/suggestion_routes.py
from fastapi import APIRouter

from .. import schemas
from ..suggestions import suggest_improvements

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


@router.post("", response_model=schemas.SuggestionsResponse)
def suggestions(resume: schemas.ResumeDraft):
    return {"ok": True, "suggestions": suggest_improvements(resume)}
