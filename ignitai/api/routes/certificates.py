import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from pydantic import ValidationError
from sqlalchemy.orm import Session

from ignitai.db.session import get_db
from ignitai.repositories.certificate_repository import CertificateRepository
from ignitai.schemas.base import MessageResponse
from ignitai.schemas.certificate import CertificateNotFound, CertificatePayload, CertificateVerification

logger = logging.getLogger(__name__)

router = APIRouter(tags=["certificates"])


@router.get("/verify-certificate", response_model=CertificateVerification | CertificateNotFound)
def verify_certificate(
    certificate_id: Optional[str] = Query(default=None, alias="certificateId"),
    db: Session = Depends(get_db),
):
    if not certificate_id or not certificate_id.strip():
        raise HTTPException(status_code=400, detail="certificateId is required")

    certificate_id = certificate_id.strip()
    repo = CertificateRepository(db)
    certificate = repo.get_by_certificate_id(certificate_id)
    if not certificate:
        return CertificateNotFound(id=certificate_id)

    return CertificateVerification(
        certificate_id=certificate.certificate_id,
        student_name=certificate.student_name,
        course=certificate.course,
        issue_date=certificate.issue_date,
        expiry_date=certificate.expiry_date,
        grade=certificate.grade,
        skills=repo.parse_skills(certificate),
        msme_registered=certificate.msme_registered,
    )


@router.post("/admin/upload-certificates", response_model=MessageResponse)
def upload_certificates(certificates: Any = Body(...), db: Session = Depends(get_db)):
    if not isinstance(certificates, list):
        raise HTTPException(status_code=400, detail="Expected an array of certificates.")

    try:
        payloads = [CertificatePayload.model_validate(item) for item in certificates]
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "certificate"
        raise HTTPException(status_code=400, detail=f"Invalid certificate: {field} {first.get('msg', '')}".strip())

    try:
        result = CertificateRepository(db).insert_many(payloads)
    except Exception:
        logger.exception("[certificates] bulk insert failed")
        raise HTTPException(status_code=500, detail="Failed to upload certificates.")

    logger.info("[certificates] inserted %d, duplicates %d", len(result.inserted), len(result.duplicates))
    if result.duplicates:
        raise HTTPException(status_code=500, detail="Failed to upload certificates.")
    return MessageResponse(message="Certificates uploaded successfully!")
