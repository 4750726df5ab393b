import logging
from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Form, Response
from fastapi.responses import JSONResponse

from .config import settings
from .globals import session_store, word_catalog
from .models import QuestionView, SessionStatus, Tier
from .quiz import QuizSession, QuizStateError

logger = logging.getLogger(__name__)

router = APIRouter()

CORRECT_MESSAGE = "✅ 正解！"
INCORRECT_MESSAGE = "❌ 不正解"
FINISHED_MESSAGE = "お疲れ様でした！全問終了です。"


# --- Dependencies ---
def get_session_id(
    session_id: Optional[str] = Cookie(None, alias=settings.SESSION_COOKIE_NAME)
) -> Optional[str]:
    return session_id


def _session_error() -> JSONResponse:
    return JSONResponse({"error": "Session invalid"}, status_code=401)


def _question_payload(session: QuizSession) -> dict:
    word = session.current_question()
    if word is None:
        return {"finished": True, "message": FINISHED_MESSAGE}
    view = QuestionView(
        term=word.term,
        choices=session.current_choices(),
        question_number=session.question_number,
        total_questions=session.total_questions,
        progress=session.progress_label,
    )
    return {"finished": False, **view.model_dump()}


# --- Routes ---


@router.get("/api/tiers")
async def get_tiers():
    return word_catalog.get_tiers()


@router.post("/api/quiz/start")
async def start_quiz(
    response: Response,
    tier: str = Form(...),
    session_id: str = Depends(get_session_id),
):
    try:
        selected = Tier(tier)
    except ValueError:
        return JSONResponse({"error": f"Unknown tier: {tier}"}, status_code=400)

    # Starting over replaces whatever run this learner had.
    session_store.discard(session_id)
    new_id, session = session_store.create()
    session.select_tier(selected)
    logger.info(
        f"Session {new_id} selected tier {selected.value}",
        extra={"session_id": new_id, "tier": selected.value},
    )

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=new_id,
        httponly=True,
        samesite="Lax",
    )
    return _question_payload(session)


@router.get("/api/quiz/question")
async def get_question(session_id: str = Depends(get_session_id)):
    session = session_store.get(session_id)
    if not session:
        return _session_error()
    return _question_payload(session)


@router.post("/api/quiz/answer")
async def submit_answer(
    choice: str = Form(...), session_id: str = Depends(get_session_id)
):
    session = session_store.get(session_id)
    if not session:
        return _session_error()
    try:
        record = session.answer(choice)
    except QuizStateError as e:
        return JSONResponse({"error": str(e)}, status_code=409)

    logger.info(
        f"Session {session_id} answered '{record.word}': "
        f"{'correct' if record.is_correct else 'incorrect'}",
        extra={"session_id": session_id, "tier": session.tier.value},
    )
    return {
        **record.model_dump(),
        "message": CORRECT_MESSAGE if record.is_correct else INCORRECT_MESSAGE,
        "advance_after_seconds": settings.ADVANCE_DELAY_SECONDS,
    }


@router.post("/api/quiz/advance")
async def advance(session_id: str = Depends(get_session_id)):
    session = session_store.get(session_id)
    if not session:
        return _session_error()
    try:
        session.advance()
    except QuizStateError as e:
        return JSONResponse({"error": str(e)}, status_code=409)
    return _question_payload(session)


@router.get("/api/quiz/status", response_model=SessionStatus)
async def get_status(session_id: str = Depends(get_session_id)):
    session = session_store.get(session_id)
    if not session:
        return _session_error()
    return SessionStatus(
        state=session.state,
        tier=session.tier,
        question_number=session.question_number,
        total_questions=session.total_questions,
        is_complete=session.is_complete(),
    )


@router.post("/api/reset")
async def reset_session(response: Response, session_id: str = Depends(get_session_id)):
    session = session_store.get(session_id)
    if session:
        session.restart()
    session_store.discard(session_id)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"status": "success"}
