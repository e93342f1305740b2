from sqlalchemy.orm import Session

from ignitai.models.application import Application


class ApplicationRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        first_name: str,
        last_name: str,
        email: str,
        phone: str = "",
        program: str = "",
        experience: str = "",
        motivation: str = "",
        resume: str = "",
    ) -> Application:
        application = Application(
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            program=program,
            experience=experience,
            motivation=motivation,
            resume=resume,
        )
        self.db.add(application)
        self.db.commit()
        self.db.refresh(application)
        return application
