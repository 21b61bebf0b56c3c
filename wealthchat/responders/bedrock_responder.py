# PURPOSE: External responder backed by the Amazon Bedrock Converse API.
# CONTEXT: boto3 is synchronous, so each call runs in a worker thread. botocore
#          failures are translated into the responder error classes that the
#          retry helper and the DialogueManager understand.

from __future__ import annotations
import asyncio
from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import (
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    NoCredentialsError,
    ReadTimeoutError,
)

from wealthchat.config import Settings, load_settings
from wealthchat.observability import xray_segment
from wealthchat.responders.base import ExternalResponder, ResponderRequest
from wealthchat.responders.errors import (
    ResponderAuthError,
    ResponderError,
    ResponderRateLimited,
    ResponderTimeout,
    TransientResponderError,
)

_RATE_LIMIT_CODES = {"ThrottlingException", "TooManyRequestsException", "ServiceQuotaExceededException"}
_AUTH_CODES = {
    "AccessDeniedException",
    "UnrecognizedClientException",
    "ExpiredTokenException",
    "InvalidSignatureException",
}
_CLIENT_CODES = {"ValidationException", "ResourceNotFoundException"}


def _to_converse_messages(request: ResponderRequest) -> List[Dict[str, Any]]:
    messages = [
        {"role": m["role"], "content": [{"text": m["content"]}]}
        for m in request.history
        if m.get("role") in ("user", "assistant") and m.get("content")
    ]
    # Converse requires the conversation to open with a user turn.
    while messages and messages[0]["role"] != "user":
        messages.pop(0)
    messages.append({"role": "user", "content": [{"text": request.user_content()}]})
    return messages


def _first_text(resp: Dict[str, Any]) -> str:
    for block in resp.get("output", {}).get("message", {}).get("content", []):
        if "text" in block:
            return block["text"]
    return ""


def translate_client_error(e: ClientError) -> ResponderError:
    code = e.response.get("Error", {}).get("Code", "")
    if code in _RATE_LIMIT_CODES:
        return ResponderRateLimited(code)
    if code in _AUTH_CODES:
        return ResponderAuthError(code)
    if code in _CLIENT_CODES:
        return ResponderError(code)
    return TransientResponderError(code or "ClientError")


class BedrockResponder(ExternalResponder):
    """
    Converse-API responder.

    parameters:
    - client: optional pre-built bedrock-runtime client (tests pass a fake).
    - settings: Settings – region and model id.
    """

    name = "bedrock"

    def __init__(self, client=None, settings: Optional[Settings] = None):
        self.settings = settings or load_settings()
        self.model_id = self.settings.model_id
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client("bedrock-runtime", region_name=self.settings.aws_region)
        return self._client

    def _converse(self, request: ResponderRequest) -> str:
        try:
            with xray_segment("responder.bedrock"):
                resp = self.client.converse(
                    modelId=self.model_id,
                    system=[{"text": request.system_prompt}],
                    messages=_to_converse_messages(request),
                    inferenceConfig={"maxTokens": 1024, "temperature": 0.7},
                )
        except ClientError as e:
            raise translate_client_error(e) from e
        except (ReadTimeoutError, ConnectTimeoutError) as e:
            raise ResponderTimeout(str(e)) from e
        except EndpointConnectionError as e:
            raise TransientResponderError(str(e)) from e
        except NoCredentialsError as e:
            raise ResponderAuthError(str(e)) from e

        text = _first_text(resp).strip()
        if not text:
            raise TransientResponderError("empty response from model")
        return text

    async def generate(self, request: ResponderRequest) -> str:
        return await asyncio.to_thread(self._converse, request)
