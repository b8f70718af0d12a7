"""
Shared fixtures for the ContactoSMS SDK tests
"""

import pytest

from contactosms_sdk.config import SmsApiConfig

API_KEY = "test-api-key"
SECRET_KEY = "test-secret-key"
API_URL = "https://api.example.com/api/"


@pytest.fixture
def config():
    """Valid configuration pointing at a fake host"""
    return SmsApiConfig(api_key=API_KEY, secret_key=SECRET_KEY, api_url=API_URL)
