import pytest

from wealthchat.model_interface.types import PartialProfile

_ENV_VARS = (
    "RESPONDER_PROVIDER", "PROJECTION_MODEL", "USE_XRAY", "REPORT_BUCKET", "COMPANY_NAME",
    "HISTORY_MESSAGES", "OPENAI_API_KEY", "MODEL_ID",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # moto and boto3 never see real credentials
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-2")
    monkeypatch.setenv("AWS_REGION", "eu-west-2")


@pytest.fixture
def profile():
    return PartialProfile(
        age=35,
        annual_income=60000,
        current_savings=10000,
        monthly_savings=500,
        monthly_investment=500,
        increase_percentage=10,
        bonus_savings=200,
    ).freeze()


