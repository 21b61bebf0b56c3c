"""
AWS Lambda handler: validates input, runs one dialogue step, returns schema-valid output.

PURPOSE:
- Entry point for AWS Lambda behind API Gateway.
- Stateless: the caller sends the serialised ConversationState with every
  request and receives the next one back.

CONTEXT:
- Actions: "start" (greeting), "turn" (one user message), "export" (write the
  completed projection to S3).
- Failures of any kind come back as {"status": "error"} with HTTP 200 so
  API Gateway does not retry; details go to the structured logs.
"""

from __future__ import annotations
import json
import time
import traceback
import uuid
from typing import Any, Dict, Optional

from jsonschema import ValidationError

from wealthchat.agent_io import (
    error_to_string,
    make_ok_message,
    validate_conversation_state,
    validate_projection,
    validate_turn_request,
    validate_turn_response,
)
from wealthchat.dialogue import ConversationState, DialogueManager, TurnResult
from wealthchat.logging_setup import configure_logging
from wealthchat.observability import init_observability
from wealthchat.tools.report_export import export_report

log = configure_logging()
init_observability()


def _response(body: Dict[str, Any], status_code: int = 200) -> Dict[str, Any]:
    """Wrap a dict into an API Gateway compatible response."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def _error_body(message: str, t0: float) -> Dict[str, Any]:
    return {
        "status": "error",
        "messages": [make_ok_message(message)],
        "latency_ms": round((time.time() - t0) * 1000, 1),
    }


def _parse_body(event: Any) -> Dict[str, Any]:
    body = event if isinstance(event, dict) else {}
    if isinstance(event, dict) and "body" in event:
        try:
            body = json.loads(event["body"]) if isinstance(event["body"], str) else (event["body"] or {})
        except ValueError:
            body = {}
            log.warning("request.body_parse_failed")
    return body


def _load_state(raw: Optional[Dict[str, Any]]) -> ConversationState:
    validate_conversation_state(raw or {})
    return ConversationState.from_dict(raw)


def _turn_body(result: TurnResult) -> Dict[str, Any]:
    verdict = result.verdict
    projection = result.state.projection
    return {
        "status": "ok",
        "messages": [make_ok_message(result.reply)],
        "state": result.state.to_dict(),
        "guardrail": None if verdict is None else {
            "allowed": verdict.allowed,
            "category": verdict.category,
            "severity": verdict.severity,
        },
        "intent": result.intent,
        "projection": None if projection is None else projection.to_dict(),
    }


def dispatch(body: Dict[str, Any], manager: DialogueManager) -> Dict[str, Any]:
    """
    Run one validated request.

    returns:
    - dict – response body (before schema validation).
    """
    action = body["action"]
    if action == "start":
        return _turn_body(manager.start())

    state = _load_state(body.get("state"))
    if action == "turn":
        return _turn_body(manager.handle_turn_sync(state, body["message"]))

    # export
    profile = state.profile.freeze()
    projection = state.projection or manager.model.project(profile, clock=manager.clock)
    validate_projection(projection.to_dict())
    uri = export_report(profile, projection, body.get("display_name") or "")
    return {
        "status": "ok",
        "messages": [make_ok_message("Your report has been exported.")],
        "state": state.to_dict(),
        "report_uri": uri,
    }


def handler(event: Dict[str, Any], context: Any = None, manager: Optional[DialogueManager] = None) -> Dict[str, Any]:
    """
    Lambda entry point.

    flow:
    1) Bind request/correlation IDs.
    2) Normalise and validate the body against turn_request.schema.json.
    3) Dispatch the action through a DialogueManager.
    4) Validate the result against turn_response.schema.json.

    returns:
    - dict – API Gateway compatible response with JSON body.
    """
    t0 = time.time()
    request_id = getattr(context, "aws_request_id", None) or str(uuid.uuid4())
    correlation_id = ((event or {}).get("headers") or {}).get("x-correlation-id") or str(uuid.uuid4())
    rlog = log.bind(request_id=request_id, correlation_id=correlation_id)
    rlog.info("request.received", event_type=type(event).__name__)

    body = _parse_body(event)
    try:
        validate_turn_request(body)
    except ValidationError as e:
        rlog.warning("request.schema_invalid", error=error_to_string(e))
        return _response(_error_body(f"Invalid request: {error_to_string(e)}", t0))

    try:
        result = dispatch(body, manager or DialogueManager())
        try:
            validate_turn_response(result)
        except ValidationError as e:
            rlog.error("response.schema_invalid", error=error_to_string(e))
            return _response(_error_body(f"Response schema violation: {error_to_string(e)}", t0))

        result["latency_ms"] = round((time.time() - t0) * 1000, 1)
        rlog.info("response.success", action=body["action"], latency_ms=result["latency_ms"])
        return _response(result)

    except Exception as e:
        rlog.error(
            "response.error",
            error=error_to_string(e),
            traceback=traceback.format_exc(limit=2),
        )
        return _response(_error_body(error_to_string(e), t0))
