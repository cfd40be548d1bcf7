"""Interactive CLI client for the sentiment chat API."""

from __future__ import annotations

import argparse
from pathlib import Path

import requests

from app.schemas.chat import Message
from app.tools.format_response import format_message

DEFAULT_TRANSCRIPT = "sentiment-analysis-chat.txt"


def _print_new_messages(messages: list[dict], seen: int) -> int:
    for raw in messages[seen:]:
        message = Message.model_validate(raw)
        if message.role == "bot":
            print(format_message(message))
    return len(messages)


def main() -> int:
    parser = argparse.ArgumentParser(description="Interactive sentiment chat CLI")
    parser.add_argument(
        "--url",
        default="http://127.0.0.1:8000",
        help="Base URL of the chat API",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=30,
        help="Request timeout in seconds",
    )
    parser.add_argument(
        "--download-path",
        default=DEFAULT_TRANSCRIPT,
        help="Default file for /download",
    )
    args = parser.parse_args()
    base = args.url.rstrip("/")

    resp = requests.post(f"{base}/sessions", timeout=args.timeout)
    resp.raise_for_status()
    session_url = f"{base}/sessions/{resp.json()['session_id']}"
    seen = 0

    print("Type your messages. /clear, /download [path], Ctrl+D or 'exit' to quit.")

    while True:
        try:
            user_input = input("> ").strip()
        except EOFError:
            print()
            break

        if not user_input:
            continue
        if user_input.lower() in {"exit", "quit"}:
            break

        if user_input == "/clear":
            resp = requests.delete(f"{session_url}/messages", timeout=args.timeout)
            resp.raise_for_status()
            seen = 0
            print("Chat cleared")
            continue

        if user_input.split(maxsplit=1)[0] == "/download":
            parts = user_input.split(maxsplit=1)
            path = Path(parts[1] if len(parts) > 1 else args.download_path)
            resp = requests.get(f"{session_url}/transcript", timeout=args.timeout)
            resp.raise_for_status()
            path.write_text(resp.text, encoding="utf-8")
            print(f"Chat saved to {path}")
            continue

        resp = requests.post(
            f"{session_url}/messages",
            json={"message": user_input},
            timeout=args.timeout,
        )
        if resp.status_code != 200:
            print(f"Error {resp.status_code}: {resp.text}")
            continue

        seen = _print_new_messages(resp.json().get("messages", []), seen)

    requests.delete(session_url, timeout=args.timeout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
