import json

import boto3
import pytest
from moto import mock_aws

from wealthchat.model_impl.two_phase_model import calculate_projection
from wealthchat.tools.report_export import export_report


@mock_aws
def test_export_report_writes_retrievable_json(profile):
    s3 = boto3.client("s3", region_name="eu-west-2")
    s3.create_bucket(Bucket="wealth-reports", CreateBucketConfiguration={"LocationConstraint": "eu-west-2"})
    projection = calculate_projection(profile)

    uri = export_report(profile, projection, "Jane Doe", bucket="wealth-reports", s3_client=s3)

    assert uri.startswith("s3://wealth-reports/reports/jane-doe/")
    bucket, key = uri[len("s3://"):].split("/", 1)
    data = json.loads(s3.get_object(Bucket=bucket, Key=key)["Body"].read())
    assert data["display_name"] == "Jane Doe"
    assert data["profile"]["age"] == 35
    assert data["projection"]["milestones"]["0"]["baseline"] == 10000
    assert len(data["projection"]["year_by_year"]) == projection.horizon


@mock_aws
def test_export_report_uses_bucket_from_environment(monkeypatch, profile):
    monkeypatch.setenv("REPORT_BUCKET", "env-bucket")
    s3 = boto3.client("s3", region_name="eu-west-2")
    s3.create_bucket(Bucket="env-bucket", CreateBucketConfiguration={"LocationConstraint": "eu-west-2"})

    uri = export_report(profile, calculate_projection(profile), "")
    assert uri.startswith("s3://env-bucket/reports/anonymous/")


def test_export_report_requires_bucket(profile):
    with pytest.raises(ValueError):
        export_report(profile, calculate_projection(profile), "Jane")


@mock_aws
def test_export_report_wraps_client_errors(profile):
    s3 = boto3.client("s3", region_name="eu-west-2")
    with pytest.raises(RuntimeError):
        export_report(profile, calculate_projection(profile), "Jane", bucket="missing-bucket", s3_client=s3)
