from __future__ import annotations
from typing import Optional

from wealthchat.config import Settings, load_settings
from wealthchat.responders.base import ExternalResponder


def load_responder(settings: Optional[Settings] = None) -> Optional[ExternalResponder]:
    """
    Build the responder selected by RESPONDER_PROVIDER.

    returns:
    - ExternalResponder, or None for 'local' (answers come from local replies only).

    raises:
    - ValueError – unknown provider name.
    """
    settings = settings or load_settings()
    provider = settings.responder_provider
    if provider in ("", "local", "none"):
        return None
    if provider == "bedrock":
        from wealthchat.responders.bedrock_responder import BedrockResponder
        return BedrockResponder(settings=settings)
    if provider == "openai":
        from wealthchat.responders.openai_responder import OpenAIChatResponder
        return OpenAIChatResponder(settings=settings)
    raise ValueError(f"Unknown RESPONDER_PROVIDER: {provider!r}")
