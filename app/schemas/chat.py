"""Message models and request/response schemas for the session endpoints."""

from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "bot"]


class SentimentScore(BaseModel):
    """One (label, confidence) pair returned by the sentiment model."""

    label: str
    score: float = Field(ge=0.0, le=1.0)


class Message(BaseModel):
    """A single chat message. Frozen once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    role: Role
    text: str
    sentiment: list[SentimentScore] | None = None


class SubmitRequest(BaseModel):
    """Incoming chat message from the user."""

    message: str


class SessionSnapshot(BaseModel):
    """Current state of one chat session."""

    session_id: int
    messages: list[Message]
    input: str = ""
    busy: bool = False


class SubmitResponse(BaseModel):
    """Outcome of a submit; ``accepted`` is false when the input was blank."""

    session_id: int
    accepted: bool
    messages: list[Message]
    busy: bool
