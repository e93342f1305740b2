import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ignitai.core.session_store import ConversationTurn, InterviewSession, InterviewSessionStore
from ignitai.services.interview_flows import BasicInterviewFlow, InterviewFlow, RoundsInterviewFlow
from ignitai.services.openai_service import OpenAIService
from ignitai.services.question_bank import FALLBACK_RESPONSES, resolve_tech
from ignitai.services.scoring_service import AnswerAnalysis, ScoringService

logger = logging.getLogger(__name__)


@dataclass
class AnswerOutcome:
    analysis: AnswerAnalysis
    next_question: Optional[int] = None
    ai_response: Optional[str] = None


class InterviewResponder:
    """Produces the interviewer's reply to an answer, falling back to canned lines."""

    def __init__(self, openai_service: Optional[OpenAIService] = None):
        self.openai_service = openai_service

    @staticmethod
    def fallback(round_no: int, question_index: int) -> str:
        return FALLBACK_RESPONSES[(round_no + question_index) % len(FALLBACK_RESPONSES)]

    def respond(
        self,
        recent_turns: Sequence[ConversationTurn],
        answer: str,
        tech: str,
        round_no: int,
        question_index: int,
    ) -> str:
        reply = None
        if self.openai_service is not None:
            try:
                reply = self.openai_service.build_interview_reply(recent_turns, answer, tech, round_no)
            except Exception:
                logger.exception("[interview] reply generator raised")
        if reply:
            return reply

        logger.info("[interview] using fallback reply for round %s question %s", round_no, question_index)
        return self.fallback(round_no, question_index)


class InterviewService:
    def __init__(
        self,
        store: InterviewSessionStore,
        flow: InterviewFlow,
        responder: Optional[InterviewResponder] = None,
    ):
        self.store = store
        self.flow = flow
        self.responder = responder

    def start(self, course_track: Optional[str], selected_tech: Optional[str] = None) -> InterviewSession:
        setup = self.flow.setup(course_track, selected_tech)
        return self.store.create(
            prefix=self.flow.prefix,
            kind=self.flow.kind,
            course_track=setup.course_track,
            selected_tech=setup.selected_tech,
            questions=setup.questions,
            ttl_seconds=self.flow.ttl_seconds,
        )

    def get_results(self, session_id: str):
        session = self.store.pop(session_id)
        return session, self.flow.report(session)


class BasicInterviewService(InterviewService):
    def __init__(self, store: InterviewSessionStore, ttl_seconds: int):
        super().__init__(store, BasicInterviewFlow(ttl_seconds))

    def submit_answer(self, session_id: str, answer: str, question_index: int) -> AnswerOutcome:
        flow = self.flow

        def apply(session: InterviewSession) -> Optional[int]:
            flow.validate(session, question_index)
            flow.record(session, answer, 1, question_index)
            return flow.next_question(session, question_index)

        next_question = self.store.mutate(session_id, apply)
        return AnswerOutcome(analysis=ScoringService.analyze_answer(answer), next_question=next_question)


class RoundsInterviewService(InterviewService):
    def __init__(self, store: InterviewSessionStore, ttl_seconds: int, responder: InterviewResponder):
        super().__init__(store, RoundsInterviewFlow(ttl_seconds), responder)

    def submit_answer(
        self,
        session_id: str,
        answer: str,
        round_no: int,
        question_index: int,
        selected_tech: Optional[str] = None,
    ) -> AnswerOutcome:
        session = self.store.get(session_id)
        self.flow.validate(session, round_no, question_index)
        with session.lock:
            recent = session.recent_turns(3)
        tech = resolve_tech(selected_tech) if selected_tech else session.selected_tech

        # the reply generator may block on the network; no session lock is held here
        ai_response = self.responder.respond(recent, answer, tech, round_no, question_index)

        self.store.mutate(
            session_id,
            lambda live: self.flow.record(live, answer, round_no, question_index, ai_response=ai_response),
        )
        return AnswerOutcome(analysis=ScoringService.analyze_answer(answer), ai_response=ai_response)
