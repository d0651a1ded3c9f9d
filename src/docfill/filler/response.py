"""Parsing of model replies into placeholder values."""

import json
import logging
from typing import Iterable

from ..placeholders import Placeholder

logger = logging.getLogger(__name__)

_WRAPPING_PAIRS = (('"', '"'), ("'", "'"), ("`", "`"), ("“", "”"))


class MalformedResponseError(Exception):
    """Exception raised when a reply contains no parseable JSON object."""

    def __init__(self, message: str, reply: str):
        self.reply = reply
        super().__init__(message)


def extract_json_object(reply: str) -> str:
    """
    Return the first top-level {...} object in a free-text reply.

    Scans from the first opening brace, tracking nesting depth. Braces inside
    JSON string literals are not counted.

    Raises:
        MalformedResponseError: If there is no opening brace or the object
            never closes
    """
    start = reply.find("{")
    if start == -1:
        raise MalformedResponseError("Model reply contains no JSON object", reply)

    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(reply)):
        char = reply[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return reply[start : index + 1]

    raise MalformedResponseError("Model reply contains an unterminated JSON object", reply)


def parse_resolution(reply: str, placeholders: Iterable[Placeholder]) -> dict[str, str]:
    """
    Map a batch reply back to placeholder ids.

    Every known placeholder gets exactly one entry: its string value from the
    reply, or "" when the key is missing or the value is not a string.
    Unknown keys are ignored.

    Raises:
        MalformedResponseError: If the reply holds no valid JSON object
    """
    candidate = extract_json_object(reply)
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"Model reply JSON is invalid: {e}", reply) from e

    resolution = {}
    for placeholder in placeholders:
        value = parsed.get(placeholder.id)
        if isinstance(value, str):
            resolution[placeholder.id] = value
        else:
            if value is not None:
                logger.warning(
                    f"Non-string value for {placeholder.id} ({type(value).__name__}); using empty string"
                )
            resolution[placeholder.id] = ""

    unknown = set(parsed) - set(resolution)
    if unknown:
        logger.debug(f"Ignoring unknown keys in reply: {sorted(unknown)}")

    return resolution


def clean_sequential_reply(reply: str) -> str:
    """
    Trim a bare-text reply and drop one pair of wrapping quotes or backticks.

    The pair is only dropped when it wraps the whole reply, i.e. the inner
    text holds no further quote of the same kind.
    """
    text = reply.strip()
    for opening, closing in _WRAPPING_PAIRS:
        if len(text) >= 2 and text.startswith(opening) and text.endswith(closing):
            inner = text[1:-1]
            if opening in inner or closing in inner:
                return text
            return inner.strip()
    return text
