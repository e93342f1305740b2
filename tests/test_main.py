import asyncio

import pytest

from ignitai.core.errors import SessionNotFound
from ignitai.core.session_store import BASIC_SESSION_PREFIX, InterviewSessionStore
from main import sweep_expired_sessions


def _create(store, ttl):
    return store.create(
        prefix=BASIC_SESSION_PREFIX,
        kind="basic",
        course_track="frontend",
        selected_tech=None,
        questions={1: ["q1"]},
        ttl_seconds=ttl,
    )


def test_sweeper_drops_expired_sessions_until_cancelled(clock):
    store = InterviewSessionStore(clock=clock)
    expired = _create(store, ttl=60)
    live = _create(store, ttl=3600)
    clock.advance(120)

    async def run_sweeper():
        task = asyncio.create_task(sweep_expired_sessions(store, 0))
        for _ in range(3):
            await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(run_sweeper())

    assert len(store) == 1
    assert store.get(live.session_id).session_id == live.session_id
    with pytest.raises(SessionNotFound):
        store.get(expired.session_id)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
