"""Tests for transcript and score formatting."""

from app.schemas.chat import Message, SentimentScore
from app.tools.format_response import format_message, format_score, render_transcript


def test_render_transcript_joins_with_blank_line():
    messages = [Message(role="user", text="hi"), Message(role="bot", text="ok")]
    assert render_transcript(messages) == "USER: hi\n\nBOT: ok"


def test_render_transcript_empty():
    assert render_transcript([]) == ""


def test_format_score_shows_two_decimal_percentage():
    line = format_score(SentimentScore(label="POS", score=0.9876), width=10)
    assert line == "POS: 98.76% ##########"


def test_format_message_lists_scores_under_text():
    message = Message(
        role="bot",
        text="Here's the sentiment analysis of your message:",
        sentiment=[SentimentScore(label="NEG", score=0.5)],
    )
    lines = format_message(message).splitlines()
    assert lines[0] == "Here's the sentiment analysis of your message:"
    assert lines[1].startswith("  NEG: 50.00% ")
