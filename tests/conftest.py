import json

import boto3
import pytest

from calendar_relay.config import Settings

from tests.fakes.fake_credentials import CLIENT_CONFIG, make_credentials


@pytest.fixture
def settings():
    return Settings(
        downstream_function="arn:aws:lambda:us-west-2:123456789012:function:trello",
        client_secret_parameter="/calendar/client-secret",
        token_parameter="/calendar/token",
        interval_minutes=60,
        aws_region="us-west-2",
        google_calendar_id="primary",
        display_tz=None,
        auth_code=None,
        log_level="INFO",
        xray_tracing=False,
    )


@pytest.fixture
def client_config_json():
    return json.dumps(CLIENT_CONFIG)


@pytest.fixture
def cached_token_json():
    return make_credentials("cached-token").to_json()


@pytest.fixture
def ssm_client():
    return boto3.client(
        "ssm",
        region_name="us-west-2",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def lambda_client():
    return boto3.client(
        "lambda",
        region_name="us-west-2",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def relay_env(monkeypatch):
    env = {
        "arntrello": "trello-card",
        "cspointer": "/calendar/client-secret",
        "interval": "60",
        "tokenpointer": "/calendar/token",
    }
    for key in ("AWS_REGION", "GOOGLE_CALENDAR_ID", "DISPLAY_TZ", "GOOGLE_AUTH_CODE", "LOG_LEVEL", "XRAY_TRACING", "AWS_LAMBDA_FUNCTION_NAME"):
        monkeypatch.delenv(key, raising=False)
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return env
