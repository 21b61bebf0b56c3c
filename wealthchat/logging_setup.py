"""
Structured logging setup for Lambda & local runs.

PURPOSE:
- Configure consistent JSON-formatted logs for the Lambda entry point and the CLI.
- Library modules only call structlog.get_logger(); this module decides how
  those events are rendered.

CONTEXT:
- Called once by wealthchat.lambda_handler and scripts/chat_cli.py.
- Events use dotted names (e.g. "turn.advanced", "guardrail.blocked") so they
  can be filtered in CloudWatch Insights.
"""

from __future__ import annotations
import logging
import os
import sys
import structlog


def configure_logging():
    """
    Configure structured JSON logging for the current environment.

    returns:
    - structlog.BoundLogger – logger bound with service and environment metadata.

    behaviour:
    - Reads log level from LOG_LEVEL (default = INFO).
    - Sends logs to stdout so Lambda captures them.
    - Renders JSON lines, e.g.
      {"event": "turn.advanced", "level": "info", "timestamp": "...",
       "service": "WealthChat", "env": "dev", "stage": "income"}
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger("wealthchat").bind(service="WealthChat", env=os.getenv("ENV", "dev"))
