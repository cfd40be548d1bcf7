"""Transcript and score formatting helpers."""

from __future__ import annotations

from typing import Iterable

from app.schemas.chat import Message, SentimentScore

BAR_WIDTH = 20


def render_transcript(messages: Iterable[Message]) -> str:
    """Serialise messages as ``ROLE: text`` blocks separated by a blank line."""
    return "\n\n".join(f"{m.role.upper()}: {m.text}" for m in messages)


def format_score(item: SentimentScore, width: int = BAR_WIDTH) -> str:
    """Render one score as ``label: 90.00% ##########``."""
    filled = round(item.score * width)
    bar = "#" * filled + "." * (width - filled)
    return f"{item.label}: {item.score * 100:.2f}% {bar}"


def format_message(message: Message) -> str:
    """Render a message for terminal output, with one line per score."""
    lines = [message.text]
    for item in message.sentiment or []:
        lines.append(f"  {format_score(item)}")
    return "\n".join(lines)
