"""
Runtime settings for WealthChat.

PURPOSE:
- Collects every environment-driven knob (responder provider, model ids,
  retry policy, branding, report bucket) into one frozen Settings object.

CONTEXT:
- Read by the DialogueManager, the responder loader, the report exporter and
  the Lambda entry point. Values are read at call time so tests can use
  monkeypatch.setenv without reloading modules.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """
    Environment-backed configuration.

    attributes:
    - responder_provider: str – 'local' (no external call), 'bedrock' or 'openai'.
    - aws_region: str – region used for Bedrock and S3 clients.
    - model_id: str – Bedrock model id passed to the Converse API.
    - openai_api_key / openai_model / openai_base_url – OpenAI-compatible endpoint.
    - responder_timeout_s: float – per-attempt timeout for the responder.
    - responder_max_retries: int – retries after the first attempt.
    - responder_backoff_s: float – base delay; attempt n waits base * 2**n.
    - history_messages: int – prior free-chat messages sent as context.
    - company_name: str – brand used in prompts and canned replies.
    - report_bucket: str|None – S3 bucket for exported reports.
    """
    responder_provider: str = "local"
    aws_region: str = "eu-west-2"
    model_id: str = "deepseek.v3-v1:0"
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    openai_base_url: str = "https://api.openai.com/v1"
    responder_timeout_s: float = 30.0
    responder_max_retries: int = 3
    responder_backoff_s: float = 1.0
    history_messages: int = 10
    company_name: str = "SwipeSwipe"
    report_bucket: Optional[str] = None


def load_settings() -> Settings:
    """
    Build a Settings instance from the current environment.

    returns:
    - Settings – defaults are used for any variable that is unset.
    """
    return Settings(
        responder_provider=os.getenv("RESPONDER_PROVIDER", "local").strip().lower(),
        aws_region=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or "eu-west-2",
        model_id=os.getenv("MODEL_ID", "deepseek.v3-v1:0"),
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        openai_base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1").rstrip("/"),
        responder_timeout_s=float(os.getenv("RESPONDER_TIMEOUT_S", "30")),
        responder_max_retries=int(os.getenv("RESPONDER_MAX_RETRIES", "3")),
        responder_backoff_s=float(os.getenv("RESPONDER_BACKOFF_S", "1.0")),
        history_messages=int(os.getenv("HISTORY_MESSAGES", "10")),
        company_name=os.getenv("COMPANY_NAME", "SwipeSwipe"),
        report_bucket=os.getenv("REPORT_BUCKET") or None,
    )
