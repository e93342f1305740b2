import logging
import math
import re
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session

from ignitai.api.deps import get_upload_storage
from ignitai.core.config import settings
from ignitai.db.session import get_db
from ignitai.repositories.feedback_repository import FeedbackRepository
from ignitai.schemas.base import MessageResponse
from ignitai.schemas.feedback import FeedbackItem
from ignitai.services.upload_service import UploadStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/feedback", tags=["feedback"])

DEFAULT_RATING = 5.0


def to_title_case(value: str) -> str:
    return re.sub(r"\w\S*", lambda match: match.group(0)[:1].upper() + match.group(0)[1:].lower(), value)


def parse_badges(raw: Optional[List[str]]) -> List[str]:
    values = raw or []
    # a single field may carry a comma separated list; repeated fields are kept as sent
    if len(values) == 1:
        return [item.strip() for item in values[0].split(",") if item.strip()]
    return [value.strip() for value in values if value.strip()]


def parse_rating(raw: Optional[str]) -> float:
    try:
        rating = float(raw) if raw is not None else 0
    except ValueError:
        rating = 0
    return rating if rating and not math.isnan(rating) else DEFAULT_RATING


@router.post("", response_model=MessageResponse, status_code=201)
def submit_feedback(
    name: Optional[str] = Form(default=None),
    role: Optional[str] = Form(default=None),
    quote: Optional[str] = Form(default=None),
    badges: Optional[List[str]] = Form(default=None),
    rating: Optional[str] = Form(default=None),
    linkedin: Optional[str] = Form(default=None),
    image: Optional[UploadFile] = File(default=None),
    db: Session = Depends(get_db),
    storage: UploadStorage = Depends(get_upload_storage),
):
    if not (name and name.strip()) or not (role and role.strip()) or not (quote and quote.strip()):
        raise HTTPException(status_code=400, detail="Name, role, and quote are required.")

    try:
        stored = storage.save(image) if image is not None and image.filename else None
        FeedbackRepository(db).create(
            name=to_title_case(name.strip()),
            role=to_title_case(role.strip()),
            company=settings.feedback_company,
            quote=quote.strip(),
            badges=parse_badges(badges),
            rating=parse_rating(rating),
            linkedin=linkedin or "",
            image=stored.public_path if stored else "",
        )
    except Exception:
        logger.exception("[feedback] failed to store feedback")
        raise HTTPException(status_code=500, detail="Failed to submit feedback.")

    return MessageResponse(message="Feedback submitted successfully!")


@router.get("", response_model=list[FeedbackItem])
def list_feedback(db: Session = Depends(get_db)):
    repo = FeedbackRepository(db)
    try:
        items = repo.list_recent()
    except Exception:
        logger.exception("[feedback] failed to list feedback")
        raise HTTPException(status_code=500, detail="Failed to fetch feedbacks.")

    return [
        FeedbackItem(
            id=item.id,
            name=item.name,
            role=item.role,
            company=item.company,
            quote=item.quote,
            badges=repo.parse_badges(item),
            rating=item.rating,
            linkedin=item.linkedin,
            image=item.image,
            created_at=item.created_at,
        )
        for item in items
    ]
