from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ignitai.api.deps import get_basic_interview_service, get_session_store
from ignitai.core.session_store import InterviewSessionStore
from ignitai.schemas.interview import (
    AnswerAnalysisOut,
    InterviewAnswerRequest,
    InterviewAnswerResponse,
    InterviewResultsResponse,
    InterviewStartRequest,
    InterviewStartResponse,
    InterviewStatsResponse,
)
from ignitai.services.interview_service import BasicInterviewService

router = APIRouter(prefix="/ai-interview", tags=["ai-interview"])


@router.post("/start", response_model=InterviewStartResponse)
def start_interview(
    body: InterviewStartRequest,
    service: BasicInterviewService = Depends(get_basic_interview_service),
):
    session = service.start(body.course_track)
    questions = session.questions[1]
    return InterviewStartResponse(
        session_id=session.session_id,
        course_track=session.course_track,
        questions=questions,
        total_questions=len(questions),
    )


@router.post("/submit-answer", response_model=InterviewAnswerResponse)
def submit_answer(
    body: InterviewAnswerRequest,
    service: BasicInterviewService = Depends(get_basic_interview_service),
):
    outcome = service.submit_answer(body.session_id, body.answer, body.question_index)
    return InterviewAnswerResponse(
        analysis=AnswerAnalysisOut(length=outcome.analysis.length, word_count=outcome.analysis.word_count),
        next_question=outcome.next_question,
    )


@router.get("/results/{session_id}", response_model=InterviewResultsResponse)
def get_results(
    session_id: str,
    service: BasicInterviewService = Depends(get_basic_interview_service),
):
    session, report = service.get_results(session_id)
    answers = session.answers.get(1, [])
    return InterviewResultsResponse(
        score=report.score,
        strengths=report.strengths,
        improvements=report.improvements,
        feedback=report.feedback,
        recommended_course=report.recommended_course,
        course_track=session.course_track,
        answered_questions=sum(1 for answer in answers if answer.strip()),
        total_questions=len(session.questions[1]),
    )


@router.get("/stats", response_model=InterviewStatsResponse)
def get_stats(store: InterviewSessionStore = Depends(get_session_store)):
    stats = store.stats()
    return InterviewStatsResponse(
        active_sessions=stats["activeSessions"],
        breakdown=stats["breakdown"],
        timestamp=datetime.now(timezone.utc),
    )
