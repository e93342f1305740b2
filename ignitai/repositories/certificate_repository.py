import json
from dataclasses import dataclass, field
from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from ignitai.models.certificate import Certificate
from ignitai.schemas.certificate import CertificatePayload


@dataclass
class BulkInsertResult:
    inserted: List[str] = field(default_factory=list)
    duplicates: List[str] = field(default_factory=list)


class CertificateRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_certificate_id(self, certificate_id: str) -> Certificate | None:
        stmt = select(Certificate).where(Certificate.certificate_id == certificate_id)
        return self.db.scalars(stmt).first()

    def insert_many(self, payloads: Iterable[CertificatePayload]) -> BulkInsertResult:
        """Insert every certificate with a new id; duplicates are skipped and reported."""
        payloads = list(payloads)
        result = BulkInsertResult()
        requested = [item.certificate_id for item in payloads]
        existing = set(
            self.db.scalars(select(Certificate.certificate_id).where(Certificate.certificate_id.in_(requested))).all()
        )

        for item in payloads:
            if item.certificate_id in existing:
                result.duplicates.append(item.certificate_id)
                continue
            self.db.add(
                Certificate(
                    certificate_id=item.certificate_id,
                    student_name=item.student_name,
                    course=item.course,
                    issue_date=item.issue_date,
                    expiry_date=item.expiry_date,
                    grade=item.grade,
                    skills_json=json.dumps(item.skills),
                    msme_registered=item.msme_registered,
                )
            )
            existing.add(item.certificate_id)
            result.inserted.append(item.certificate_id)

        self.db.commit()
        return result

    @staticmethod
    def parse_skills(certificate: Certificate) -> List[str]:
        return json.loads(certificate.skills_json)
