"""
drinkmatch Web API - FastAPI application.

JSON endpoints driving one DrinkSession per browser. Sessions live in
memory only; nothing survives a restart.

Run with: uvicorn drinkmatch.web.app:app
"""

import logging
import secrets
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timedelta
from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from drinkmatch import __version__
from drinkmatch.config import get_settings
from drinkmatch.flow.session import DrinkSession
from drinkmatch.flow.state import InvalidTransition, Phase
from drinkmatch.quiz.questions import QUIZ_QUESTIONS
from drinkmatch.quiz.wizard import QuizError

logger = logging.getLogger(__name__)

# In-memory session store (keyed by session id)
# Each entry: {"session": DrinkSession, "expires_at": datetime}
sessions: dict[str, dict[str, Any]] = {}

SESSION_TTL = timedelta(hours=2)


def setup_logging() -> None:
    """Configure root logging from settings and quiet noisy libraries."""
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log configuration on startup."""
    from drinkmatch.llm.prompt_logger import get_logging_status

    setup_logging()
    settings = get_settings()

    status = get_logging_status()
    logger.info("drinkmatch starting up...")
    logger.info(f"  Environment: {settings.drinkmatch_env}")
    logger.info(f"  OpenAI key configured: {settings.has_openai_key} (demo mode if False)")
    logger.info(f"  Prompt file logging: {status['file_logging']}")
    yield


app = FastAPI(title="drinkmatch", version=__version__, lifespan=lifespan)

# CORS middleware for the frontend dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",  # Vite dev server
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidTransition)
async def invalid_transition_handler(request: Request, exc: InvalidTransition):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(QuizError)
async def quiz_error_handler(request: Request, exc: QuizError):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# =============================================================================
# Models
# =============================================================================

class AnswerRequest(BaseModel):
    question_id: str
    value: str
    auto_advance: bool = False


# =============================================================================
# Session Management
# =============================================================================

def prune_expired_sessions() -> int:
    """Drop expired sessions. Returns how many were removed."""
    now = datetime.now()
    expired = [sid for sid, entry in sessions.items() if entry["expires_at"] <= now]
    for session_id in expired:
        del sessions[session_id]
    return len(expired)


def create_session() -> tuple[str, DrinkSession]:
    """Create a new session and return (session id, session)."""
    pruned = prune_expired_sessions()
    if pruned:
        logger.info(f"Pruned {pruned} expired session(s)")

    session_id = secrets.token_urlsafe(16)
    session = DrinkSession(api_key=get_settings().openai_api_key)
    sessions[session_id] = {
        "session": session,
        "expires_at": datetime.now() + SESSION_TTL,
    }
    return session_id, session


def require_session(session_id: str) -> DrinkSession:
    """Look up a live session or raise 404 (unknown or expired)."""
    entry = sessions.get(session_id)
    if entry is None or entry["expires_at"] <= datetime.now():
        raise HTTPException(status_code=404, detail="Session not found")
    return entry["session"]


def _response(session_id: str, session: DrinkSession) -> dict:
    return {"session_id": session_id, **session.snapshot()}


# =============================================================================
# Endpoints
# =============================================================================

router = APIRouter(prefix="/api", tags=["drinkmatch"])


@router.get("/quiz/questions")
async def list_questions():
    """The static question set, in order."""
    return {"questions": [q.model_dump() for q in QUIZ_QUESTIONS]}


@router.post("/sessions")
async def new_session():
    session_id, session = create_session()
    logger.info(f"Created session {session_id[:6]}...")
    return _response(session_id, session)


@router.get("/sessions/{session_id}")
async def get_session_state(session_id: str):
    return _response(session_id, require_session(session_id))


@router.post("/sessions/{session_id}/start")
async def start_quiz(session_id: str):
    session = require_session(session_id)
    session.start()
    return _response(session_id, session)


@router.post("/sessions/{session_id}/answer")
async def answer_question(session_id: str, req: AnswerRequest):
    """Record an answer; with auto_advance, move on straight away."""
    session = require_session(session_id)
    session.select_answer(req.question_id, req.value)
    if req.auto_advance:
        await session.advance()
    return _response(session_id, session)


@router.post("/sessions/{session_id}/next")
async def next_question(session_id: str):
    session = require_session(session_id)
    if session.phase == Phase.COLLECTING and session.wizard and not session.wizard.can_advance:
        raise HTTPException(status_code=409, detail="Answer the current question first")
    await session.advance()
    return _response(session_id, session)


@router.post("/sessions/{session_id}/back")
async def previous_question(session_id: str):
    session = require_session(session_id)
    session.retreat()
    return _response(session_id, session)


@router.get("/sessions/{session_id}/result")
async def get_result(session_id: str):
    """Wait for the outstanding recommendation (if any) and return the state."""
    session = require_session(session_id)
    await session.wait_for_result()
    return _response(session_id, session)


@router.post("/sessions/{session_id}/restart")
async def restart(session_id: str):
    session = require_session(session_id)
    session.restart()
    return _response(session_id, session)


app.include_router(router)
