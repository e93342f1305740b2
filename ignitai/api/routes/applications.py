import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session

from ignitai.api.deps import get_mail_service, get_upload_storage
from ignitai.db.session import get_db
from ignitai.repositories.application_repository import ApplicationRepository
from ignitai.schemas.base import MessageResponse
from ignitai.services.mail_service import MailAttachment, MailService
from ignitai.services.upload_service import UploadStorage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["applications"])


@router.post("/apply", response_model=MessageResponse, status_code=201)
def submit_application(
    first_name: str = Form(..., alias="firstName", min_length=1),
    last_name: str = Form(..., alias="lastName", min_length=1),
    email: str = Form(..., min_length=3),
    phone: str = Form(default=""),
    program: str = Form(default=""),
    experience: str = Form(default=""),
    motivation: str = Form(default=""),
    resume: Optional[UploadFile] = File(default=None),
    db: Session = Depends(get_db),
    mail_service: MailService = Depends(get_mail_service),
    storage: UploadStorage = Depends(get_upload_storage),
):
    try:
        stored = storage.save(resume) if resume is not None and resume.filename else None
        repo = ApplicationRepository(db)
        application = repo.create(
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            email=email.strip(),
            phone=phone,
            program=program,
            experience=experience,
            motivation=motivation,
            resume=stored.public_path if stored else "",
        )

        body = (
            "A new application has been submitted.\n\n"
            f"Name: {application.first_name} {application.last_name}\n"
            f"Email: {application.email}\n"
            f"Phone: {application.phone}\n"
            f"Program: {application.program}\n"
            f"Experience: {application.experience}\n"
            f"Motivation: {application.motivation}\n"
            f"Resume: {'Attached' if stored else 'Not provided'}"
        )
        attachments = [MailAttachment(filename=stored.original_name, path=stored.path)] if stored else []
        mail_service.send("New Application Received", body, attachments=attachments)
    except Exception:
        logger.exception("[apply] failed to submit application")
        raise HTTPException(status_code=500, detail="Failed to submit application.")

    logger.info("[apply] application %s received for %s", application.id, application.program or "unspecified")
    return MessageResponse(message="Application submitted successfully!")
