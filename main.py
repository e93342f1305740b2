import asyncio
import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text

from ignitai.api.router import api_router
from ignitai.core.config import settings
from ignitai.core.errors import register_exception_handlers
from ignitai.core.logging import configure_logging
from ignitai.core.session_store import InterviewSessionStore
from ignitai.db.base import Base
from ignitai.db.session import SessionLocal, engine
from ignitai import models  # noqa: F401

configure_logging(settings.log_level)
logger = logging.getLogger("ignitai")

app = FastAPI(title=settings.app_name)
app.state.interview_store = InterviewSessionStore()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)


async def sweep_expired_sessions(store: InterviewSessionStore, interval: int):
    while True:
        await asyncio.sleep(interval)
        store.sweep()


@app.on_event("startup")
async def on_startup():
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("[startup] Database tables ready (%s)", "SQLite" if settings.is_sqlite else "external database")
    except Exception:
        logger.exception("[startup-error] Database initialization failed")

    app.state.sweeper = asyncio.create_task(
        sweep_expired_sessions(app.state.interview_store, settings.session_sweep_interval_seconds)
    )


@app.on_event("shutdown")
async def on_shutdown():
    sweeper = getattr(app.state, "sweeper", None)
    if sweeper is not None:
        sweeper.cancel()


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/health/db")
def health_db():
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        return {"status": "ok", "database": "connected"}
    except Exception:
        logger.exception("[health] database check failed")
        return {"status": "error", "database": "unavailable"}
    finally:
        db.close()


app.include_router(api_router, prefix=settings.api_prefix)

upload_dir = Path(settings.upload_dir)
upload_dir.mkdir(parents=True, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=upload_dir), name="uploads")
