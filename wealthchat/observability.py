"""
Observability bootstrap.

PURPOSE:
- Optionally enables AWS X-Ray tracing when USE_XRAY=1.
- Provides a subsegment context manager used around the projection run and
  the external responder call.

CONTEXT:
- Tracing is an optional extra (aws-xray-sdk). When it is disabled or not
  installed every helper here is a no-op; the chatbot never depends on it.
"""
from __future__ import annotations
import os

import structlog

log = structlog.get_logger(__name__)


def init_observability():
    """
    Optionally initialise AWS X-Ray instrumentation.

    returns:
    - xray_recorder if configured, otherwise None.

    notes:
    - patch_all() instruments boto3 and requests, which covers both responders
      and the S3 report export.
    """
    use_xray = os.getenv("USE_XRAY", "0") == "1"
    if not use_xray:
        return None
    try:
        from aws_xray_sdk.core import xray_recorder, patch_all
        xray_recorder.configure(service=os.getenv("XRAY_SERVICE_NAME", "WealthChat"))
        patch_all()
        return xray_recorder
    except Exception as e:
        # Tracing must never block a turn.
        log.warning("observability.xray_unavailable", error=str(e))
        return None


class xray_segment:
    """
    Lightweight context manager for manual subsegments.

    usage:
    >>> with xray_segment("projection.run"):
    >>>     result = model.project(profile)

    Exceptions raised inside the block propagate; only tracing errors are ignored.
    """

    def __init__(self, name: str):
        self.name = name
        self.sub = None

    def __enter__(self):
        if os.getenv("USE_XRAY", "0") != "1":
            return self
        try:
            from aws_xray_sdk.core import xray_recorder
            self.sub = xray_recorder.begin_subsegment(self.name)
        except Exception:
            self.sub = None
        return self

    def __exit__(self, exc_type, exc, tb):
        if self.sub is None:
            return False
        try:
            from aws_xray_sdk.core import xray_recorder
            xray_recorder.end_subsegment()
        except Exception:
            pass
        return False
