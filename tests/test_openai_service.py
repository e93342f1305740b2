from types import SimpleNamespace

import pytest

from ignitai.core.config import settings
from ignitai.core.errors import AIServiceError
from ignitai.core.session_store import ConversationTurn
from ignitai.schemas.quiz import CodeMatchRequest, QuizGenerateRequest
from ignitai.services import openai_service
from ignitai.services.openai_service import OpenAIService


class FakeCompletions:
    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.models = []
        self.timeouts = []

    def create(self, model, **kwargs):
        self.models.append(model)
        self.timeouts.append(kwargs.get("timeout"))
        outcome = self.outcomes.pop(0)
        if callable(outcome):
            outcome = outcome()
        if isinstance(outcome, Exception):
            raise outcome
        message = SimpleNamespace(content=outcome)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _service(*outcomes):
    service = OpenAIService.__new__(OpenAIService)
    completions = FakeCompletions(outcomes)
    service.client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return service, completions


@pytest.fixture(autouse=True)
def models(monkeypatch):
    monkeypatch.setattr(settings, "openai_model", "primary-model")
    monkeypatch.setattr(settings, "openai_fallback_model", "secondary-model")


def test_requires_api_key(monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", None)

    with pytest.raises(RuntimeError):
        OpenAIService()


def test_clean_reply_strips_echo_and_quotes():
    assert OpenAIService.clean_reply('Interviewer: "Nice use of closures there."') == "Nice use of closures there."
    assert OpenAIService.clean_reply("PROMPT rest of it", prompt="PROMPT") == "rest of it"


def test_strip_json_fences():
    assert OpenAIService._strip_json_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert OpenAIService._strip_json_fences('  {"a": 1} ') == '{"a": 1}'


def test_reply_from_primary_model():
    service, completions = _service("Good point about immutability, well explained.")

    reply = service.build_interview_reply([ConversationTurn("candidate", "hi")], "A tuple is immutable", "Python", 1)

    assert reply == "Good point about immutability, well explained."
    assert completions.models == ["primary-model"]


def test_secondary_model_is_tried_once_after_failure():
    service, completions = _service(TimeoutError("slow"), "Thanks, that covers the essentials nicely.")

    reply = service.build_interview_reply([], "answer", "Java", 2)

    assert reply == "Thanks, that covers the essentials nicely."
    assert completions.models == ["primary-model", "secondary-model"]


def test_short_replies_are_rejected():
    service, completions = _service("Ok.", "   ")

    assert service.build_interview_reply([], "answer", "Java", 3) is None
    assert completions.models == ["primary-model", "secondary-model"]


@pytest.fixture
def budget_clock(monkeypatch):
    now = [100.0]
    monkeypatch.setattr(settings, "openai_timeout_seconds", 8.0)
    monkeypatch.setattr(openai_service, "time", SimpleNamespace(monotonic=lambda: now[0]))
    return now


def _slow_failure(now, seconds):
    def outcome():
        now[0] += seconds
        return TimeoutError("slow")

    return outcome


def test_models_share_one_timeout_budget(budget_clock):
    service, completions = _service(_slow_failure(budget_clock, 5.0), "Thanks, that covers the essentials nicely.")

    reply = service.build_interview_reply([], "answer", "Java", 2)

    assert reply == "Thanks, that covers the essentials nicely."
    assert completions.timeouts == [8.0, 3.0]


def test_secondary_model_is_skipped_once_budget_is_spent(budget_clock):
    service, completions = _service(_slow_failure(budget_clock, 8.0), "never used")

    assert service.build_interview_reply([], "answer", "Java", 2) is None
    assert completions.models == ["primary-model"]


def test_generate_quiz_validates_payload():
    good = (
        '{"questions": [{"question": "2 + 2?", "options": ["3", "4", "5", "6"], '
        '"answer": "4", "explanation": "Basic arithmetic."}]}'
    )
    service, _ = _service(good)

    questions = service.generate_quiz(QuizGenerateRequest(topics=["math"], amount=1))

    assert questions[0].answer == "4"


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        '{"questions": []}',
        '{"questions": [{"question": "q", "options": ["a", "b", "c", "d"], "answer": "z"}]}',
        '{"questions": [{"question": "q", "options": ["a", "b"], "answer": "a"}]}',
    ],
)
def test_generate_quiz_rejects_bad_output(raw):
    service, _ = _service(raw)

    with pytest.raises(AIServiceError):
        service.generate_quiz(QuizGenerateRequest(topics=["math"], amount=1))


def test_generate_quiz_wraps_transport_errors():
    service, _ = _service(ConnectionError("down"))

    with pytest.raises(AIServiceError):
        service.generate_quiz(QuizGenerateRequest(topics=["math"], amount=1))


def test_match_code_clamps_score():
    service, _ = _service('{"score": 140, "feedback": "Spot on", "suggestions": "None needed"}')

    result = service.match_code(CodeMatchRequest(challenge="A red button", html="<button>Go</button>"))

    assert result.score == 100
    assert result.matched is True
    assert result.suggestions == ["None needed"]


def test_match_code_requires_numeric_score():
    service, _ = _service('{"score": "high"}')

    with pytest.raises(AIServiceError):
        service.match_code(CodeMatchRequest(challenge="x", html="<p>x</p>"))
