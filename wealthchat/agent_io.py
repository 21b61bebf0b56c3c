"""
I/O helpers for schemas and message construction.

PURPOSE: JSON Schema validation for the Lambda request/response envelopes and
         serialised projections, plus the small message builders shared by the
         entry points.
CONTEXT: Schemas ship inside the package (wealthchat/schemas) so validation works
         no matter which directory the process starts in.
"""

from __future__ import annotations

import json
import pathlib
from functools import lru_cache
from typing import Any, Dict

from jsonschema import Draft7Validator, ValidationError

SCHEMA_DIR = pathlib.Path(__file__).resolve().parent / "schemas"


# -------------------- Schema loading -------------------- #

@lru_cache(maxsize=16)
def load_schema(name: str) -> Dict[str, Any]:
    """
    Load a packaged JSON schema by file name (cached).

    parameters:
    - name: str – e.g. "turn_request.schema.json".

    raises:
    - FileNotFoundError – no such schema in wealthchat/schemas.
    - json.JSONDecodeError – the file is not valid JSON.
    """
    p = SCHEMA_DIR / name
    if not p.exists():
        raise FileNotFoundError(f"Schema not found at: {p}")
    return json.loads(p.read_text(encoding="utf-8"))


# -------------------- Validation -------------------- #

def validate_with_schema(instance: Dict[str, Any], schema: Dict[str, Any]) -> None:
    """
    raises:
    - ValidationError – if instance fails to meet schema requirements.
    """
    Draft7Validator(schema).validate(instance)


def validate_turn_request(payload: Dict[str, Any]) -> None:
    validate_with_schema(payload, load_schema("turn_request.schema.json"))


def validate_turn_response(body: Dict[str, Any]) -> None:
    validate_with_schema(body, load_schema("turn_response.schema.json"))


def validate_projection(result: Dict[str, Any]) -> None:
    """
    Validate ProjectionResult.to_dict() output.

    notes:
    - Milestone keys are ints in Python; JSON turns them into strings, so the
      dict is round-tripped through json before validation.
    """
    validate_with_schema(json.loads(json.dumps(result)), load_schema("projection_result.schema.json"))


def validate_conversation_state(state: Dict[str, Any]) -> None:
    validate_with_schema(state, load_schema("conversation_state.schema.json"))


# -------------------- Messages -------------------- #

def make_ok_message(content: str) -> Dict[str, str]:
    return {"role": "assistant", "content": str(content)}


def make_user_message(content: str) -> Dict[str, str]:
    return {"role": "user", "content": str(content)}


def error_to_string(err: Exception) -> str:
    """
    Render an exception for an error payload.

    returns:
    - str – "<message> at $.path" for ValidationError, "<Type>: <message>" otherwise.
    """
    if isinstance(err, ValidationError):
        path = "$" + "".join(f"[{p!r}]" if isinstance(p, int) else f".{p}" for p in err.path)
        return f"{err.message} at {path}"
    return f"{type(err).__name__}: {err}"


__all__ = [
    "load_schema",
    "validate_with_schema",
    "validate_turn_request",
    "validate_turn_response",
    "validate_projection",
    "validate_conversation_state",
    "make_ok_message",
    "make_user_message",
    "error_to_string",
]
