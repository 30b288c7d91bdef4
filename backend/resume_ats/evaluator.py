# backend/resume_ats/evaluator.py
# Quick heuristic feedback for mock-interview answers (0..10).
import logging
import math
from typing import Dict, Iterable, List

from . import rubric
from .schemas import AnswerFeedback, SessionItem, SessionItemResult, SessionSummary

logger = logging.getLogger(__name__)

WORDS_PER_POINT = 30
MAX_LENGTH_POINTS = 5
MIN_SCORE = 1
MAX_SCORE = 10

TOP_STRENGTHS = 5
TOP_IMPROVEMENTS = 8


def round_half_up(value: float) -> float:
    # one decimal place, .x5 rounds up
    return math.floor(value * 10 + 0.5) / 10


def evaluate_answer(answer: str) -> AnswerFeedback:
    text = (answer or "").strip()
    if not text:
        return AnswerFeedback(
            score=0,
            summary="No answer provided.",
            strengths=[],
            improvements=["Provide a complete, structured answer. Use the STAR method."],
        )

    length_score = min(MAX_LENGTH_POINTS, len(text.split()) // WORDS_PER_POINT)
    has_numbers = bool(rubric.ANSWER_NUMBER_RE.search(text))
    has_star = bool(rubric.ANSWER_STAR_RE.search(text))
    has_metrics = bool(rubric.ANSWER_METRIC_RE.search(text))
    has_verbs = bool(rubric.ANSWER_VERB_RE.search(text))

    bonus = 0
    if has_numbers:
        bonus += 2
    if has_star:
        bonus += 2
    if has_metrics:
        bonus += 1
    if has_verbs:
        bonus += 1

    score = min(MAX_SCORE, max(MIN_SCORE, length_score + bonus))

    strengths = []
    if has_star:
        strengths.append("Clear structure (STAR).")
    if has_numbers:
        strengths.append("Used numbers/metrics.")
    if has_metrics:
        strengths.append("Outcome-focused phrasing.")
    if has_verbs:
        strengths.append("Strong action verbs.")
    if length_score >= 3:
        strengths.append("Good depth and detail.")

    improvements = []
    if not has_star:
        improvements.append("Organize answer using STAR (Situation, Task, Action, Result).")
    if not has_numbers:
        improvements.append("Add measurable impact (numbers, %).")
    if not has_verbs:
        improvements.append("Use strong action verbs (implemented, led, optimized).")

    return AnswerFeedback(
        score=score,
        summary="Auto-evaluated response.",
        strengths=strengths,
        improvements=improvements,
    )


def _most_common(values: Iterable[str], limit: int) -> List[str]:
    counts: Dict[str, int] = {}
    for v in values:
        counts[v] = counts.get(v, 0) + 1
    # dicts keep first-seen order, sorted() is stable
    return [v for v, _ in sorted(counts.items(), key=lambda x: -x[1])][:limit]


def summarize_session(items: List[SessionItem]) -> SessionSummary:
    """
    Evaluate every answered item of a mock interview and aggregate the
    feedback. Items without an answer are treated as skipped.
    """
    results = []
    for item in items:
        if not (item.answer or "").strip():
            continue
        results.append(SessionItemResult(
            question=item.question,
            category=item.category,
            answer=item.answer.strip(),
            feedback=evaluate_answer(item.answer),
        ))

    if not results:
        return SessionSummary(overall_score=None, answered=0, items=[])

    scores = [r.feedback.score for r in results]
    overall = round_half_up(sum(scores) / len(scores))
    strengths = _most_common((s for r in results for s in r.feedback.strengths), TOP_STRENGTHS)
    improvements = _most_common((s for r in results for s in r.feedback.improvements), TOP_IMPROVEMENTS)
    logger.debug("summarize_session: answered=%s overall=%s", len(results), overall)
    return SessionSummary(
        overall_score=overall,
        answered=len(results),
        top_strengths=strengths,
        top_improvements=improvements,
        items=results,
    )
