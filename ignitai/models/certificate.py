from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ignitai.db.base import Base


class Certificate(Base):
    __tablename__ = "certificates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    certificate_id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    student_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    course: Mapped[str | None] = mapped_column(String(200), nullable=True)
    issue_date: Mapped[str | None] = mapped_column(String(30), nullable=True)
    expiry_date: Mapped[str | None] = mapped_column(String(30), nullable=True)
    grade: Mapped[str | None] = mapped_column(String(20), nullable=True)
    skills_json: Mapped[str] = mapped_column(Text, default="[]", nullable=False)
    msme_registered: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
