"""Hugging Face Inference API client for the sentiment model."""

from __future__ import annotations

import logging

import requests
from pydantic import TypeAdapter

from app.config import settings
from app.schemas.chat import SentimentScore

logger = logging.getLogger(__name__)

_SCORES = TypeAdapter(list[SentimentScore])


class SentimentGatewayError(Exception):
    """Base class for failures raised by the sentiment gateway."""


class MissingCredentialError(SentimentGatewayError):
    """The Hugging Face API token is not configured."""


class SentimentRequestError(SentimentGatewayError):
    """The inference endpoint answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def model_url() -> str:
    base = settings.hf_api_base_url.rstrip("/")
    return f"{base}/models/{settings.hf_model}"


def analyze_sentiment(text: str) -> list[SentimentScore]:
    """Score ``text`` with the hosted sentiment model.

    Parameters
    ----------
    text : str
        Non-empty user text, sent as the ``inputs`` field.

    Returns
    -------
    list[SentimentScore]
        Label/score pairs in the order the model returned them.

    Raises
    ------
    MissingCredentialError
        If ``HUGGINGFACE_API_TOKEN`` is not set. No request is made.
    SentimentRequestError
        If the endpoint returns a non-2xx status.
    """
    api_token = settings.huggingface_api_token
    if not api_token:
        logger.error("Sentiment analysis failed: API token is missing.")
        raise MissingCredentialError("API token is missing.")

    url = model_url()
    logger.info("Sentiment request started: %s", url)
    try:
        response = requests.post(
            url,
            headers={
                "Authorization": f"Bearer {api_token}",
                "Content-Type": "application/json",
            },
            json={"inputs": text},
            timeout=settings.hf_timeout_seconds,
        )
        if not response.ok:
            raise SentimentRequestError(
                "Failed to fetch sentiment analysis", status_code=response.status_code
            )
        data = response.json()
        scores = _SCORES.validate_python(data[0])
    except SentimentRequestError as exc:
        logger.error("Sentiment analysis failed (HTTP %s)", exc.status_code)
        raise
    except Exception as exc:
        logger.error("Error in sentiment analysis: %r", exc)
        raise

    logger.info("Sentiment request finished: %d labels", len(scores))
    return scores
