from typing import ClassVar, List

from pydantic import BaseModel, Field


class QuizGenerateRequest(BaseModel):
    topics: List[str] = Field(min_length=1)
    amount: int = Field(default=5, ge=1, le=20)
    difficulty: str = "beginner"


class QuizQuestion(BaseModel):
    question: str = Field(min_length=1)
    options: List[str] = Field(min_length=4, max_length=4)
    answer: str
    explanation: str = ""


class QuizGenerateResponse(BaseModel):
    questions: List[QuizQuestion]


class CodeMatchRequest(BaseModel):
    challenge: str = Field(min_length=1)
    html: str = Field(min_length=1)
    css: str = ""


class CodeMatchResponse(BaseModel):
    MATCH_THRESHOLD: ClassVar[int] = 70

    score: int
    matched: bool
    feedback: str
    suggestions: List[str]
