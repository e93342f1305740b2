from fastapi import APIRouter, Depends

from ignitai.api.deps import get_rounds_interview_service
from ignitai.schemas.interview import (
    RealInterviewAnswerRequest,
    RealInterviewAnswerResponse,
    RealInterviewResultsResponse,
    RealInterviewStartRequest,
    RealInterviewStartResponse,
    RoundAnalysisOut,
    RoundScoreOut,
)
from ignitai.services.interview_service import RoundsInterviewService
from ignitai.services.question_bank import ROUND_COUNT, ROUND_NAMES, TECH_DISPLAY_NAMES

router = APIRouter(prefix="/real-ai-interview", tags=["real-ai-interview"])


@router.post("/start", response_model=RealInterviewStartResponse)
def start_interview(
    body: RealInterviewStartRequest,
    service: RoundsInterviewService = Depends(get_rounds_interview_service),
):
    session = service.start(body.course_track, body.selected_tech)
    tech_name = TECH_DISPLAY_NAMES[session.selected_tech]
    return RealInterviewStartResponse(
        session_id=session.session_id,
        message=(
            f"Welcome to your {tech_name} interview. We will go through {ROUND_COUNT} rounds: "
            f"{', '.join(ROUND_NAMES[r] for r in sorted(ROUND_NAMES))}. Let's begin with round 1."
        ),
        rounds=ROUND_COUNT,
        questions_per_round=len(session.questions[1]),
        selected_tech=session.selected_tech,
        round_names=ROUND_NAMES,
        questions=session.questions,
    )


@router.post("/submit-answer", response_model=RealInterviewAnswerResponse)
def submit_answer(
    body: RealInterviewAnswerRequest,
    service: RoundsInterviewService = Depends(get_rounds_interview_service),
):
    outcome = service.submit_answer(
        body.session_id,
        body.answer,
        round_no=body.round,
        question_index=body.question_index,
        selected_tech=body.selected_tech,
    )
    return RealInterviewAnswerResponse(
        ai_response=outcome.ai_response,
        analysis=RoundAnalysisOut(
            length=outcome.analysis.length,
            word_count=outcome.analysis.word_count,
            round=body.round,
            question_index=body.question_index,
        ),
    )


@router.get("/results/{session_id}", response_model=RealInterviewResultsResponse)
def get_results(
    session_id: str,
    service: RoundsInterviewService = Depends(get_rounds_interview_service),
):
    _, report = service.get_results(session_id)
    return RealInterviewResultsResponse(
        overall_score=report.overall_score,
        round_scores=[
            RoundScoreOut(round=item.round, name=item.name, score=item.score, feedback=item.feedback)
            for item in report.round_scores
        ],
        strengths=report.strengths,
        improvements=report.improvements,
        recommendation=report.recommendation,
        next_steps=report.next_steps,
    )
