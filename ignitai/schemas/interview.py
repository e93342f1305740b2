from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from ignitai.schemas.base import CamelModel


class InterviewStartRequest(CamelModel):
    course_track: str


class InterviewStartResponse(CamelModel):
    session_id: str
    course_track: str
    questions: List[str]
    total_questions: int


class InterviewAnswerRequest(CamelModel):
    session_id: str = Field(min_length=1)
    answer: str
    question_index: int = Field(ge=0)


class AnswerAnalysisOut(CamelModel):
    length: int
    word_count: int


class InterviewAnswerResponse(CamelModel):
    analysis: AnswerAnalysisOut
    next_question: Optional[int] = None


class InterviewResultsResponse(CamelModel):
    score: int
    strengths: List[str]
    improvements: List[str]
    feedback: str
    recommended_course: str
    course_track: str
    answered_questions: int
    total_questions: int


class SessionBreakdown(CamelModel):
    basic: int
    advanced: int


class InterviewStatsResponse(CamelModel):
    active_sessions: int
    breakdown: SessionBreakdown
    timestamp: datetime


class RealInterviewStartRequest(CamelModel):
    course_track: Optional[str] = None
    selected_tech: str = Field(min_length=1)


class RealInterviewStartResponse(CamelModel):
    session_id: str
    message: str
    rounds: int
    questions_per_round: int
    selected_tech: str
    round_names: Dict[int, str]
    questions: Dict[int, List[str]]


class RealInterviewAnswerRequest(CamelModel):
    session_id: str = Field(min_length=1)
    answer: str
    round: int = Field(ge=1, le=3)
    question_index: int = Field(ge=0)
    selected_tech: Optional[str] = None


class RoundAnalysisOut(CamelModel):
    length: int
    word_count: int
    round: int
    question_index: int


class RealInterviewAnswerResponse(CamelModel):
    ai_response: str
    analysis: RoundAnalysisOut


class RoundScoreOut(CamelModel):
    round: int
    name: str
    score: int
    feedback: str


class RealInterviewResultsResponse(CamelModel):
    overall_score: int
    round_scores: List[RoundScoreOut]
    strengths: List[str]
    improvements: List[str]
    recommendation: str
    next_steps: List[str]
