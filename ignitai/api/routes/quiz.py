import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ignitai.api.deps import get_openai_service
from ignitai.core.errors import AIServiceError
from ignitai.schemas.quiz import CodeMatchRequest, CodeMatchResponse, QuizGenerateRequest, QuizGenerateResponse
from ignitai.services.openai_service import OpenAIService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quiz", tags=["quiz"])


@router.post("/generate", response_model=QuizGenerateResponse)
def generate_quiz(
    body: QuizGenerateRequest,
    openai_service: Optional[OpenAIService] = Depends(get_openai_service),
):
    if openai_service is None:
        raise HTTPException(status_code=500, detail="Failed to generate quiz.")
    try:
        questions = openai_service.generate_quiz(body)
    except AIServiceError as exc:
        logger.warning("[quiz] generation failed: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to generate quiz.")
    return QuizGenerateResponse(questions=questions)


@router.post("/code-match", response_model=CodeMatchResponse)
def match_code(
    body: CodeMatchRequest,
    openai_service: Optional[OpenAIService] = Depends(get_openai_service),
):
    if openai_service is None:
        raise HTTPException(status_code=500, detail="Failed to evaluate code.")
    try:
        return openai_service.match_code(body)
    except AIServiceError as exc:
        logger.warning("[quiz] code match failed: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to evaluate code.")
