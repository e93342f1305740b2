import json
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from ignitai.models.feedback import Feedback


class FeedbackRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        name: str,
        role: str,
        company: str,
        quote: str,
        badges: List[str],
        rating: float,
        linkedin: str = "",
        image: str = "",
    ) -> Feedback:
        feedback = Feedback(
            name=name,
            role=role,
            company=company,
            quote=quote,
            badges_json=json.dumps(badges),
            rating=rating,
            linkedin=linkedin,
            image=image,
        )
        self.db.add(feedback)
        self.db.commit()
        self.db.refresh(feedback)
        return feedback

    def list_recent(self) -> List[Feedback]:
        stmt = select(Feedback).order_by(Feedback.created_at.desc(), Feedback.id.desc())
        return list(self.db.scalars(stmt).all())

    @staticmethod
    def parse_badges(feedback: Feedback) -> List[str]:
        return json.loads(feedback.badges_json)
