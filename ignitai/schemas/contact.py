from typing import Optional

from pydantic import BaseModel


class ContactRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None

    def is_complete(self) -> bool:
        return all(value and value.strip() for value in (self.name, self.email, self.subject, self.message))
