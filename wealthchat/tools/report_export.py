# PURPOSE: Export a user's profile and projection as a JSON report to S3.
# CONTEXT: Downstream document services render the report; we only write the raw
#          data. Nothing is kept after the upload.

from __future__ import annotations
import json
import re
import uuid
from datetime import datetime
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo

import boto3
import structlog
from botocore.exceptions import ClientError

from wealthchat.config import load_settings
from wealthchat.model_interface.types import FinancialProfile, ProjectionResult

TZ = ZoneInfo("Europe/London")

log = structlog.get_logger(__name__)


def _slug(name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", (name or "").lower()).strip("-")
    return slug[:60] or "anonymous"


def build_report(profile: FinancialProfile, projection: ProjectionResult, display_name: str) -> Dict[str, Any]:
    return {
        "display_name": display_name,
        "generated_at": datetime.now(TZ).isoformat(timespec="seconds"),
        "profile": profile.to_dict(),
        "projection": projection.to_dict(),
    }


def export_report(
    profile: FinancialProfile,
    projection: ProjectionResult,
    display_name: str,
    bucket: Optional[str] = None,
    s3_client=None,
) -> str:
    """
    Upload the report JSON and return its location.

    parameters:
    - profile / projection – the completed conversation data.
    - display_name: str – shown on the rendered report; also used in the key.
    - bucket: str|None – defaults to REPORT_BUCKET.
    - s3_client – optional boto3 S3 client (tests use moto).

    returns:
    - str – "s3://<bucket>/<key>".

    raises:
    - ValueError – no bucket configured.
    - RuntimeError – if the S3 upload fails (wraps ClientError).
    """
    settings = load_settings()
    bucket = bucket or settings.report_bucket
    if not bucket:
        raise ValueError("No report bucket configured (set REPORT_BUCKET)")

    s3 = s3_client or boto3.client("s3", region_name=settings.aws_region)
    key = f"reports/{_slug(display_name)}/{uuid.uuid4().hex}.json"
    body = json.dumps(build_report(profile, projection, display_name))
    try:
        s3.put_object(Bucket=bucket, Key=key, Body=body.encode("utf-8"), ContentType="application/json")
    except ClientError as e:
        raise RuntimeError(f"S3 put_object failed: {e.response['Error']['Message']}")

    log.info("report.exported", bucket=bucket, key=key)
    return f"s3://{bucket}/{key}"
