# backend/resume_ats/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


# ---------- core value models ----------

class ScoreReport(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: int = Field(ge=0, le=100)
    strengths: List[str] = []
    suggestions: List[str] = []
    keywords_found: List[str] = Field(default_factory=list, alias="keywordsFound")


class QuestionSet(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hr: List[str] = []
    technical: List[str] = []
    project: List[str] = []
    detected_skills: List[str] = Field(default_factory=list, alias="detectedSkills")


class AnswerFeedback(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=10)
    summary: str
    strengths: List[str] = []
    improvements: List[str] = []


class CheckBreakdown(BaseModel):
    name: str
    points: int
    max_points: int = Field(alias="maxPoints")

    model_config = ConfigDict(populate_by_name=True)


# ---------- ATS routes ----------

class ScoreTextRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str = ""
    job_description: Optional[str] = Field(default=None, alias="jobDescription")


class QuestionsRequest(BaseModel):
    text: str = ""


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    ats_score: int = Field(alias="atsScore")
    grade: str
    strengths: List[str]
    suggestions: List[str]
    keywords_found: List[str] = Field(alias="keywordsFound")
    breakdown: List[CheckBreakdown]
    candidate_name: Optional[str] = Field(default=None, alias="candidateName")
    questions: QuestionSet


# ---------- interview routes ----------

class AnswerPayload(BaseModel):
    answer: str = ""


class SessionItem(BaseModel):
    question: str
    category: Optional[str] = None
    answer: str = ""


class SessionRequest(BaseModel):
    items: List[SessionItem] = []


class SessionItemResult(BaseModel):
    question: str
    category: Optional[str] = None
    answer: str
    feedback: AnswerFeedback


class SessionSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    overall_score: Optional[float] = Field(default=None, alias="overallScore")
    answered: int = 0
    top_strengths: List[str] = Field(default_factory=list, alias="topStrengths")
    top_improvements: List[str] = Field(default_factory=list, alias="topImprovements")
    items: List[SessionItemResult] = []


# ---------- suggestion routes ----------

class ExperienceEntry(BaseModel):
    title: Optional[str] = None
    company: Optional[str] = None
    description: Optional[str] = None


class ResumeDraft(BaseModel):
    summary: Optional[str] = None
    skills: Optional[List[str]] = None
    experience: Optional[List[ExperienceEntry]] = None
    projects: Optional[List[dict]] = None
    education: Optional[List[dict]] = None


class SuggestionsResponse(BaseModel):
    ok: bool = True
    suggestions: List[str]
