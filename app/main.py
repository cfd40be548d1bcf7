"""FastAPI application exposing chat sessions backed by the sentiment model."""

import logging

from fastapi import FastAPI, HTTPException, Response
from fastapi.responses import PlainTextResponse

from app.config import settings
from app.llm import hf_client
from app.models.state import SessionState
from app.schemas.chat import SessionSnapshot, SubmitRequest, SubmitResponse
from app.session import controller
from app.session.store import SessionNotFoundError, session_store

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title="Sentiment Analysis Chatbot", version="0.1.0")


def _get_state(session_id: int) -> SessionState:
    try:
        return session_store.get_session(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Session not found") from exc


def _snapshot(session_id: int, state: SessionState) -> SessionSnapshot:
    return SessionSnapshot(
        session_id=session_id,
        messages=list(state.messages),
        input=state.input,
        busy=state.busy,
    )


@app.get("/health")
def health():
    return {"ok": True}


@app.post("/sessions", response_model=SessionSnapshot, status_code=201)
def create_session():
    session_id = session_store.create_session()
    return _snapshot(session_id, session_store.get_session(session_id))


@app.get("/sessions/{session_id}", response_model=SessionSnapshot)
def get_session(session_id: int):
    return _snapshot(session_id, _get_state(session_id))


@app.delete("/sessions/{session_id}", status_code=204)
def end_session(session_id: int):
    try:
        session_store.drop_session(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Session not found") from exc
    return Response(status_code=204)


@app.post("/sessions/{session_id}/messages", response_model=SubmitResponse)
async def submit_message(session_id: int, request: SubmitRequest):
    """Handle a user chat message.

    Waits for the sentiment gateway and returns the session's messages,
    including the bot reply.
    """
    state = _get_state(session_id)
    if state.busy:
        raise HTTPException(status_code=409, detail="Session is busy")

    controller.update_input(state, request.message)
    accepted = await controller.submit(state, hf_client.analyze_sentiment)
    if not accepted:
        logger.info("Session %s: blank message ignored", session_id)

    return SubmitResponse(
        session_id=session_id,
        accepted=accepted,
        messages=list(state.messages),
        busy=state.busy,
    )


@app.delete("/sessions/{session_id}/messages", response_model=SessionSnapshot)
def clear_messages(session_id: int):
    state = _get_state(session_id)
    controller.clear(state)
    return _snapshot(session_id, state)


@app.get("/sessions/{session_id}/transcript", response_class=PlainTextResponse)
def download_transcript(session_id: int):
    state = _get_state(session_id)
    return PlainTextResponse(
        controller.download(state),
        headers={
            "Content-Disposition": f'attachment; filename="{settings.transcript_filename}"'
        },
    )
