"""Response sanitization for model replies.

Models asked for JSON mode still sometimes double-escape the payload or wrap
it in a markdown fence. These heuristics run before parsing; whatever still
fails to parse is reported as a MalformedResponseError.
"""
import json
import logging
import re

from utils.errors import MalformedResponseError

logger = logging.getLogger(__name__)

PARSE_ERROR_MESSAGE = "Failed to parse AI-generated questions"

_ESCAPES = (
    ("\\n", "\n"),
    ("\\r", "\r"),
    ("\\t", "\t"),
)
_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def unescape_whitespace(text):
    for escaped, real in _ESCAPES:
        text = text.replace(escaped, real)
    return text


def strip_code_fence(text):
    match = _CODE_FENCE.match(text)
    return match.group(1) if match else text


def sanitize_reply(text):
    """Normalize a raw model reply into something json.loads can read."""
    if not isinstance(text, str):
        raise MalformedResponseError(PARSE_ERROR_MESSAGE)
    return strip_code_fence(unescape_whitespace(text).strip())


def parse_questions(text):
    """Sanitize and parse a reply shaped like {"questions": [...]}.

    Returns the questions list. Raises MalformedResponseError on anything
    else.
    """
    cleaned = sanitize_reply(text)
    try:
        # strict=False: unescaping can leave raw newlines inside string values
        payload = json.loads(cleaned, strict=False)
    except json.JSONDecodeError as e:
        logger.error("Could not decode model reply as JSON: %s; raw reply: %r", e, text)
        raise MalformedResponseError(PARSE_ERROR_MESSAGE) from e

    if not isinstance(payload, dict) or not isinstance(payload.get("questions"), list):
        logger.error("Model reply has no questions list: %r", text)
        raise MalformedResponseError(PARSE_ERROR_MESSAGE)

    return payload["questions"]
