import pytest
from fastapi.testclient import TestClient

import civic_connect.services.ai_service as ai_service_module
from civic_connect.main import app
from civic_connect.services.ai_plugin import reset_text_generator
from civic_connect.services.chatbot import IntentRouter

from tests.helpers import SITE


@pytest.fixture(autouse=True)
def reset_ai_singletons():
    reset_text_generator()
    ai_service_module._ai_service = None
    yield
    reset_text_generator()
    ai_service_module._ai_service = None


@pytest.fixture
def router():
    return IntentRouter(site_base_url=SITE)


@pytest.fixture
def client():
    return TestClient(app)
