"""In-memory chat session state."""

from dataclasses import dataclass, field

from app.schemas.chat import Message


@dataclass
class SessionState:
    """State owned by one chat session.

    Fields
    ------
    messages : list[Message]
        Conversation history, append-only until cleared.
    input : str
        Text the user is composing.
    busy : bool
        True only while a submitted message waits for the sentiment gateway.
    generation : int
        Bumped on every clear. A response to a request issued before the clear
        is dropped but still releases ``busy``.
    """

    messages: list[Message] = field(default_factory=list)
    input: str = ""
    busy: bool = False
    generation: int = 0
