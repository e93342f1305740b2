from typing import List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ignitai.api.deps import get_mail_service, get_openai_service, get_session_store, get_upload_storage
from ignitai.core.errors import AIServiceError, MailDeliveryError
from ignitai.core.session_store import InterviewSessionStore
from ignitai.db.base import Base
from ignitai.db.session import get_db
from ignitai.schemas.quiz import CodeMatchResponse, QuizQuestion
from ignitai.services.upload_service import UploadStorage
from ignitai import models  # noqa: F401
from main import app


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0):
        self.current = start

    def __call__(self) -> float:
        return self.current

    def advance(self, seconds: float):
        self.current += seconds


class FakeMailService:
    def __init__(self):
        self.sent: List[dict] = []
        self.fail = False

    def send(self, subject, body, attachments=(), reply_to=None):
        if self.fail:
            raise MailDeliveryError("relay down")
        self.sent.append(
            {
                "subject": subject,
                "body": body,
                "attachments": list(attachments),
                "reply_to": reply_to,
            }
        )


class FakeOpenAIService:
    def __init__(self):
        self.reply: Optional[str] = "That is a thoughtful answer, thanks for the detail."
        self.reply_calls: List[dict] = []
        self.quiz: Optional[List[QuizQuestion]] = None
        self.code_match: Optional[CodeMatchResponse] = None

    def build_interview_reply(self, recent_turns, user_answer, tech, round_no):
        self.reply_calls.append(
            {
                "recent_turns": list(recent_turns),
                "answer": user_answer,
                "tech": tech,
                "round": round_no,
            }
        )
        return self.reply

    def generate_quiz(self, payload):
        if self.quiz is None:
            raise AIServiceError("quiz backend down")
        return self.quiz

    def match_code(self, payload):
        if self.code_match is None:
            raise AIServiceError("grader down")
        return self.code_match


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return InterviewSessionStore(clock=clock)


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    yield factory
    engine.dispose()


@pytest.fixture
def mail_service():
    return FakeMailService()


@pytest.fixture
def openai_service():
    return FakeOpenAIService()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def client(store, session_factory, mail_service, openai_service, upload_dir):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_store] = lambda: store
    app.dependency_overrides[get_mail_service] = lambda: mail_service
    app.dependency_overrides[get_openai_service] = lambda: openai_service
    app.dependency_overrides[get_upload_storage] = lambda: UploadStorage(upload_dir)
    yield TestClient(app)
    app.dependency_overrides.clear()
