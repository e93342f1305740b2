import logging

from fastapi import APIRouter, Depends, HTTPException

from ignitai.api.deps import get_mail_service
from ignitai.core.errors import MailDeliveryError
from ignitai.schemas.base import MessageResponse
from ignitai.schemas.contact import ContactRequest
from ignitai.services.mail_service import MailService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("", response_model=MessageResponse)
def send_contact_message(body: ContactRequest, mail_service: MailService = Depends(get_mail_service)):
    if not body.is_complete():
        raise HTTPException(status_code=400, detail="All fields are required.")

    try:
        mail_service.send(
            f"Contact Form: {body.subject}",
            f"Name: {body.name}\nEmail: {body.email}\n\n{body.message}",
            reply_to=body.email,
        )
    except MailDeliveryError:
        logger.exception("[contact] relay failed")
        raise HTTPException(status_code=500, detail="Failed to send message.")

    return MessageResponse(message="Message sent successfully!")
