from datetime import datetime
from typing import List

from ignitai.schemas.base import CamelModel


class FeedbackItem(CamelModel):
    id: int
    name: str
    role: str
    company: str
    quote: str
    badges: List[str]
    rating: float
    linkedin: str
    image: str
    created_at: datetime
