import logging
from typing import Optional

from fastapi import Depends, Request

from ignitai.core.config import settings
from ignitai.core.session_store import InterviewSessionStore
from ignitai.services.interview_service import (
    BasicInterviewService,
    InterviewResponder,
    RoundsInterviewService,
)
from ignitai.services.mail_service import MailService
from ignitai.services.openai_service import OpenAIService
from ignitai.services.upload_service import UploadStorage

logger = logging.getLogger(__name__)


def get_session_store(request: Request) -> InterviewSessionStore:
    return request.app.state.interview_store


def get_openai_service() -> Optional[OpenAIService]:
    try:
        return OpenAIService()
    except RuntimeError as exc:
        logger.warning("[openai] %s", exc)
        return None


def get_mail_service() -> MailService:
    return MailService(settings)


def get_upload_storage() -> UploadStorage:
    return UploadStorage(settings.upload_dir)


def get_basic_interview_service(
    store: InterviewSessionStore = Depends(get_session_store),
) -> BasicInterviewService:
    return BasicInterviewService(store, ttl_seconds=settings.basic_session_ttl_seconds)


def get_rounds_interview_service(
    store: InterviewSessionStore = Depends(get_session_store),
    openai_service: Optional[OpenAIService] = Depends(get_openai_service),
) -> RoundsInterviewService:
    return RoundsInterviewService(
        store,
        ttl_seconds=settings.advanced_session_ttl_seconds,
        responder=InterviewResponder(openai_service),
    )
