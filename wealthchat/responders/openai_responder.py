# PURPOSE: External responder for OpenAI-compatible /chat/completions endpoints.
# CONTEXT: Uses requests in a worker thread; HTTP status codes are mapped onto
#          the responder error classes.

from __future__ import annotations
import asyncio
from typing import Any, Dict, List, Optional

import requests

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


def _to_chat_messages(request: ResponderRequest) -> List[Dict[str, str]]:
    messages = [{"role": "system", "content": request.system_prompt}]
    messages.extend(
        {"role": m["role"], "content": m["content"]}
        for m in request.history
        if m.get("role") in ("user", "assistant") and m.get("content")
    )
    messages.append({"role": "user", "content": request.user_content()})
    return messages


def raise_for_status(resp: requests.Response) -> None:
    """
    Map an HTTP error status to a responder error.

    raises:
    - ResponderAuthError (401/403), ResponderRateLimited (429),
      TransientResponderError (5xx), ResponderError (other 4xx).
    """
    status = resp.status_code
    if status < 400:
        return
    if status in (401, 403):
        raise ResponderAuthError(f"HTTP {status}")
    if status == 429:
        raise ResponderRateLimited("HTTP 429")
    if status >= 500:
        raise TransientResponderError(f"HTTP {status}")
    raise ResponderError(f"HTTP {status}")


class OpenAIChatResponder(ExternalResponder):
    """
    parameters:
    - session: optional requests.Session (tests pass a fake with .post()).
    - settings: Settings – API key, model and base URL.
    """

    name = "openai"

    def __init__(self, session=None, settings: Optional[Settings] = None):
        self.settings = settings or load_settings()
        self.session = session or requests.Session()

    def _post(self, request: ResponderRequest) -> str:
        if not self.settings.openai_api_key:
            raise ResponderAuthError("OPENAI_API_KEY is not set")

        payload: Dict[str, Any] = {
            "model": self.settings.openai_model,
            "messages": _to_chat_messages(request),
            "temperature": 0.7,
            "max_tokens": 1024,
        }
        try:
            with xray_segment("responder.openai"):
                resp = self.session.post(
                    f"{self.settings.openai_base_url}/chat/completions",
                    json=payload,
                    headers={"Authorization": f"Bearer {self.settings.openai_api_key}"},
                    timeout=self.settings.responder_timeout_s,
                )
        except requests.Timeout as e:
            raise ResponderTimeout(str(e)) from e
        except requests.ConnectionError as e:
            raise TransientResponderError(str(e)) from e

        raise_for_status(resp)
        try:
            text = resp.json()["choices"][0]["message"]["content"] or ""
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ResponderError("unexpected response payload") from e
        if not text.strip():
            raise TransientResponderError("empty response from model")
        return text.strip()

    async def generate(self, request: ResponderRequest) -> str:
        return await asyncio.to_thread(self._post, request)
