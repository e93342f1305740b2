import logging
import random
import string
from dataclasses import dataclass, field
from threading import Lock
from time import time
from typing import Callable, Dict, List, Optional, TypeVar

from ignitai.core.errors import SessionNotFound

logger = logging.getLogger(__name__)

T = TypeVar("T")

BASIC_SESSION_PREFIX = "interview_"
ADVANCED_SESSION_PREFIX = "real_interview_"

_ID_ALPHABET = string.ascii_lowercase + string.digits


@dataclass
class ConversationTurn:
    speaker: str
    message: str


@dataclass
class InterviewSession:
    session_id: str
    kind: str
    course_track: str
    selected_tech: Optional[str]
    questions: Dict[int, List[str]]
    start_time: float
    expires_at: float
    answers: Dict[int, List[str]] = field(default_factory=dict)
    conversation_history: List[ConversationTurn] = field(default_factory=list)
    lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    def is_expired(self, now: float) -> bool:
        return self.expires_at <= now

    def recent_turns(self, limit: int = 3) -> List[ConversationTurn]:
        return list(self.conversation_history[-limit:])


class InterviewSessionStore:
    """
    Process-local map of interview sessions.

    The map lock only guards dictionary access. Mutations of a single session
    run under that session's own lock, so work on different sessions never
    waits on each other. Expiry is evaluated lazily on access and by ``sweep``.
    """

    def __init__(self, clock: Callable[[], float] = time):
        self._clock = clock
        self._lock = Lock()
        self._sessions: Dict[str, InterviewSession] = {}

    def now(self) -> float:
        return self._clock()

    def _new_session_id(self, prefix: str) -> str:
        suffix = "".join(random.choices(_ID_ALPHABET, k=9))
        return f"{prefix}{int(self.now() * 1000)}_{suffix}"

    def create(
        self,
        prefix: str,
        kind: str,
        course_track: str,
        selected_tech: Optional[str],
        questions: Dict[int, List[str]],
        ttl_seconds: int,
    ) -> InterviewSession:
        started = self.now()
        snapshot = {round_no: list(items) for round_no, items in questions.items()}
        with self._lock:
            session_id = self._new_session_id(prefix)
            while session_id in self._sessions:
                session_id = self._new_session_id(prefix)
            session = InterviewSession(
                session_id=session_id,
                kind=kind,
                course_track=course_track,
                selected_tech=selected_tech,
                questions=snapshot,
                start_time=started,
                expires_at=started + ttl_seconds,
            )
            self._sessions[session_id] = session
        logger.info("[session] created %s (%s, ttl=%ss)", session_id, kind, ttl_seconds)
        return session

    def _live(self, session_id: str) -> Optional[InterviewSession]:
        # caller holds self._lock
        session = self._sessions.get(session_id)
        if session is None:
            return None
        if session.is_expired(self.now()):
            del self._sessions[session_id]
            logger.info("[session] %s expired", session_id)
            return None
        return session

    def get(self, session_id: str) -> InterviewSession:
        with self._lock:
            session = self._live(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session

    def mutate(self, session_id: str, fn: Callable[[InterviewSession], T]) -> T:
        session = self.get(session_id)
        with session.lock:
            # a results call or expiry may have won the race since lookup
            with self._lock:
                still_live = self._sessions.get(session_id) is session
            if not still_live:
                raise SessionNotFound(session_id)
            return fn(session)

    def pop(self, session_id: str) -> InterviewSession:
        with self._lock:
            session = self._live(session_id)
            if session is None:
                raise SessionNotFound(session_id)
            del self._sessions[session_id]
        # wait for any in-flight mutation to finish before handing it out
        with session.lock:
            pass
        logger.info("[session] consumed %s", session_id)
        return session

    def expire(self, session_id: str) -> bool:
        with self._lock:
            removed = self._sessions.pop(session_id, None)
        return removed is not None

    def sweep(self) -> int:
        now = self.now()
        with self._lock:
            expired = [sid for sid, session in self._sessions.items() if session.is_expired(now)]
            for sid in expired:
                del self._sessions[sid]
        if expired:
            logger.info("[session] swept %d expired sessions", len(expired))
        return len(expired)

    def stats(self) -> dict:
        with self._lock:
            live = [sid for sid, session in self._sessions.items() if not session.is_expired(self.now())]
        advanced = sum(1 for sid in live if sid.startswith(ADVANCED_SESSION_PREFIX))
        basic = sum(1 for sid in live if sid.startswith(BASIC_SESSION_PREFIX))
        return {
            "activeSessions": len(live),
            "breakdown": {"basic": basic, "advanced": advanced},
        }

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
