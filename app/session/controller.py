"""Session controller: submit, clear and download transitions.

A session is either idle or awaiting a gateway response. ``submit`` moves it
from idle to awaiting-response and back; everything else is synchronous.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from app.llm.hf_client import analyze_sentiment
from app.models.state import SessionState
from app.schemas.chat import Message, SentimentScore
from app.tools.format_response import render_transcript

logger = logging.getLogger(__name__)

SUCCESS_TEXT = "Here's the sentiment analysis of your message:"
ERROR_TEXT = "Sorry, I encountered an error while analyzing the sentiment. Please try again."

Analyzer = Callable[[str], list[SentimentScore]]


def update_input(state: SessionState, text: str) -> None:
    state.input = text


def can_submit(state: SessionState) -> bool:
    return not state.busy and bool(state.input.strip())


async def submit(state: SessionState, analyze: Analyzer = analyze_sentiment) -> bool:
    """Send the input buffer to the sentiment gateway.

    Appends the user message straight away and exactly one bot message once
    the gateway resolves. Returns ``False`` without touching the state when
    the session is busy or the input is blank.
    """
    if not can_submit(state):
        return False

    text = state.input
    generation = state.generation
    state.messages.append(Message(role="user", text=text))
    state.input = ""
    state.busy = True

    try:
        scores = await asyncio.to_thread(analyze, text)
        reply = Message(role="bot", text=SUCCESS_TEXT, sentiment=scores)
    except Exception:
        logger.exception("Error fetching sentiment analysis")
        reply = Message(role="bot", text=ERROR_TEXT)

    state.busy = False
    if state.generation != generation:
        logger.info("Discarding sentiment result for cleared chat")
        return True

    state.messages.append(reply)
    return True


def clear(state: SessionState) -> None:
    """Drop all messages. A pending call keeps the session busy until it resolves."""
    state.messages.clear()
    state.generation += 1
    logger.info("Chat cleared")


def download(state: SessionState) -> str:
    return render_transcript(state.messages)
