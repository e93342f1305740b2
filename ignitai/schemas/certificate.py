from typing import List, Optional

from pydantic import Field

from ignitai.schemas.base import CamelModel


class CertificatePayload(CamelModel):
    certificate_id: str = Field(min_length=1)
    student_name: Optional[str] = None
    course: Optional[str] = None
    issue_date: Optional[str] = None
    expiry_date: Optional[str] = None
    grade: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    msme_registered: bool = False


class CertificateVerification(CertificatePayload):
    valid: bool = True


class CertificateNotFound(CamelModel):
    valid: bool = False
    id: str
