"""Title and summary generation for meeting notes through the OpenAI API.

Two prompts are used: a short topic summary and a punchier title. Sampling temperature
is non-zero, so generated text differs between runs.
"""

import logging
from functools import lru_cache

import openai
from openai import OpenAI

from backend.app.core.settings import get_settings

logger = logging.getLogger(__name__)

SUMMARY_FALLBACK = "Career Discussion"
TITLE_FALLBACK = "Career Discussion Notes"

SUMMARY_PROMPT = (
    "You are a conversation summarizer. Create a concise 3-6 word summary of the conversation "
    "that captures its main topic or purpose. Respond with only the summary text."
)
TITLE_PROMPT = (
    "You write titles for career networking meeting notes. Create a catchy 2-7 word title for "
    "the conversation. Respond with only the title, without quotes."
)

# Prompts are truncated to keep requests within the model context
MAX_INPUT_CHARS = 12000


class AISummaryError(Exception):
    """Raised when the language model call fails or returns nothing usable."""


class AIRateLimitError(AISummaryError):
    """Raised when the language model API answers with a rate-limit response."""


@lru_cache(maxsize=1)
def _get_client() -> OpenAI:
    settings = get_settings()
    if not settings.openai_api_key:
        raise AISummaryError("OPENAI_API_KEY is not configured")
    return OpenAI(api_key=settings.openai_api_key)


def _complete(system_prompt: str, text: str, max_tokens: int, temperature: float) -> str:
    settings = get_settings()
    try:
        response = _get_client().chat.completions.create(
            model=settings.openai_model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": text[:MAX_INPUT_CHARS]},
            ],
            max_tokens=max_tokens,
            temperature=temperature,
        )
    except openai.RateLimitError as exc:
        raise AIRateLimitError(str(exc)) from exc
    except openai.OpenAIError as exc:
        raise AISummaryError(str(exc)) from exc

    if not response.choices:
        raise AISummaryError("Empty completion returned")
    content = (response.choices[0].message.content or "").strip().strip('"')
    if not content:
        raise AISummaryError("Empty completion returned")
    return content


def request_summary(text: str) -> str:
    return _complete(SUMMARY_PROMPT, text, max_tokens=20, temperature=0.7)


def request_title(text: str) -> str:
    return _complete(TITLE_PROMPT, text, max_tokens=25, temperature=0.8)


def summarize_conversation(text: str) -> str:
    """Return a 3-6 word summary, or SUMMARY_FALLBACK when the call fails."""
    try:
        return request_summary(text)
    except AISummaryError as exc:
        logger.warning("Summary generation failed, using fallback: %s", exc)
        return SUMMARY_FALLBACK


def generate_title(text: str) -> str:
    """Return a 2-7 word title, or TITLE_FALLBACK when the call fails."""
    try:
        return request_title(text)
    except AISummaryError as exc:
        logger.warning("Title generation failed, using fallback: %s", exc)
        return TITLE_FALLBACK
