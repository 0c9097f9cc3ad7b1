"""WebGL Service - unwraps Gemini envelopes and fills in default values."""

import copy
import json
from collections.abc import Mapping

from webgl_server.prompts.schema import DEFAULTS


class NormalizeError(Exception):
    """The Gemini response could not be turned into a WebGL answer."""


class UnexpectedShape(NormalizeError):
    def __init__(self, detail: str = ""):
        message = "Invalid or unexpected response structure from Gemini API"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidAnswerJson(NormalizeError):
    def __init__(self, detail: str):
        super().__init__(f"Gemini answer is not valid JSON: {detail}")


def _first(value, key: str, path: str):
    if not isinstance(value, Mapping) or key not in value:
        raise UnexpectedShape(f"missing '{path}'")
    return value[key]


def _head(value, path: str):
    if not isinstance(value, list) or not value:
        raise UnexpectedShape(f"'{path}' is not a non-empty array")
    return value[0]


def extract_answer_text(envelope) -> str:
    """Return ``candidates[0].content.parts[0].text`` from a response envelope."""
    candidates = _first(envelope, "candidates", "candidates")
    candidate = _head(candidates, "candidates")
    content = _first(candidate, "content", "candidates[0].content")
    parts = _first(content, "parts", "candidates[0].content.parts")
    part = _head(parts, "candidates[0].content.parts")
    text = _first(part, "text", "candidates[0].content.parts[0].text")
    if not isinstance(text, str):
        raise UnexpectedShape("'candidates[0].content.parts[0].text' is not a string")
    return text


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def decode_answer(text: str) -> dict:
    """Decode the embedded answer, which must be a JSON object.

    NaN and Infinity are rejected like any other invalid JSON.
    """
    try:
        answer = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise InvalidAnswerJson(str(e)) from e
    if not isinstance(answer, dict):
        raise UnexpectedShape(f"answer is a JSON {type(answer).__name__}, not an object")
    return answer


def deep_merge(left: Mapping, right: Mapping) -> dict:
    """Merge ``right`` over ``left``, recursing only where both sides are mappings.

    Arrays and scalars are leaves: the right value replaces the left one.
    Neither argument is modified.
    """
    merged = dict(left)
    for key, right_val in right.items():
        left_val = merged.get(key)
        if isinstance(left_val, Mapping) and isinstance(right_val, Mapping):
            merged[key] = deep_merge(left_val, right_val)
        else:
            merged[key] = right_val
    return merged


def apply_defaults(answer: Mapping) -> dict:
    return deep_merge(copy.deepcopy(DEFAULTS), answer)


def normalize(envelope) -> dict:
    """Extract, decode and default-fill the answer in a Gemini envelope."""
    text = extract_answer_text(envelope)
    answer = decode_answer(text)
    return apply_defaults(answer)
