"""
Interview flow strategies.

A flow decides which questions a new session gets, how an answer is recorded
and how the accumulated answers are scored. The session store and the
interview service stay the same for every flow.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from ignitai.core.errors import InvalidRequest
from ignitai.core.session_store import (
    ADVANCED_SESSION_PREFIX,
    BASIC_SESSION_PREFIX,
    ConversationTurn,
    InterviewSession,
)
from ignitai.services.question_bank import (
    ROUND_COUNT,
    resolve_tech,
    resolve_track,
    rounds_for_tech,
)
from ignitai.services.scoring_service import AdvancedReport, BasicReport, ScoringService


@dataclass
class FlowSetup:
    course_track: str
    selected_tech: Optional[str]
    questions: Dict[int, List[str]]


class InterviewFlow:
    kind: str = ""
    prefix: str = ""

    def __init__(self, ttl_seconds: int):
        self.ttl_seconds = ttl_seconds

    def setup(self, course_track: Optional[str], selected_tech: Optional[str]) -> FlowSetup:
        raise NotImplementedError

    def record(
        self,
        session: InterviewSession,
        answer: str,
        round_no: int,
        question_index: int,
        ai_response: Optional[str] = None,
    ) -> None:
        raise NotImplementedError

    def report(self, session: InterviewSession):
        raise NotImplementedError

    @staticmethod
    def _check_index(session: InterviewSession, round_no: int, question_index: int) -> None:
        questions = session.questions.get(round_no)
        if questions is None:
            raise InvalidRequest(f"round must be between 1 and {len(session.questions)}")
        if question_index >= len(questions):
            raise InvalidRequest(f"questionIndex must be less than {len(questions)}")


class BasicInterviewFlow(InterviewFlow):
    """Single round, answers written positionally by question index."""

    kind = "basic"
    prefix = BASIC_SESSION_PREFIX

    def setup(self, course_track: Optional[str], selected_tech: Optional[str] = None) -> FlowSetup:
        track = resolve_track(course_track)
        return FlowSetup(course_track=track.key, selected_tech=None, questions={1: list(track.questions)})

    def validate(self, session: InterviewSession, question_index: int) -> None:
        self._check_index(session, 1, question_index)

    def record(
        self,
        session: InterviewSession,
        answer: str,
        round_no: int,
        question_index: int,
        ai_response: Optional[str] = None,
    ) -> None:
        answers = session.answers.setdefault(1, [])
        if question_index >= len(answers):
            answers.extend([""] * (question_index + 1 - len(answers)))
        answers[question_index] = answer

    @staticmethod
    def next_question(session: InterviewSession, question_index: int) -> Optional[int]:
        following = question_index + 1
        return following if following < len(session.questions[1]) else None

    def report(self, session: InterviewSession) -> BasicReport:
        track = resolve_track(session.course_track)
        return ScoringService.basic_report(session.answers.get(1, []), track)


class RoundsInterviewFlow(InterviewFlow):
    """Three scored rounds per technology, with a running conversation."""

    kind = "advanced"
    prefix = ADVANCED_SESSION_PREFIX

    def setup(self, course_track: Optional[str], selected_tech: Optional[str]) -> FlowSetup:
        tech = resolve_tech(selected_tech)
        return FlowSetup(
            course_track=(course_track or "").strip(),
            selected_tech=tech,
            questions=rounds_for_tech(tech),
        )

    def validate(self, session: InterviewSession, round_no: int, question_index: int) -> None:
        if not 1 <= round_no <= ROUND_COUNT:
            raise InvalidRequest(f"round must be between 1 and {ROUND_COUNT}")
        self._check_index(session, round_no, question_index)

    def record(
        self,
        session: InterviewSession,
        answer: str,
        round_no: int,
        question_index: int,
        ai_response: Optional[str] = None,
    ) -> None:
        session.answers.setdefault(round_no, []).append(answer)
        session.conversation_history.append(ConversationTurn(speaker="candidate", message=answer))
        if ai_response:
            session.conversation_history.append(ConversationTurn(speaker="interviewer", message=ai_response))

    def report(self, session: InterviewSession) -> AdvancedReport:
        return ScoringService.advanced_report(session.answers)
