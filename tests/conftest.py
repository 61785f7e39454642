from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from backend.config import Settings, get_settings
from backend.distribution import routes as distribution_routes
from backend.distribution.controller import DistributionController
from backend.main import app
from backend.services.completion_client import CompletionClient
from backend.services.mail_sender import MailSender
from backend.summary import routes as summary_routes
from backend.summary.controller import SummaryController


@pytest.fixture(autouse=True)
def _service_env(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "test")
    monkeypatch.setenv("EMAIL_USER", "bot@example.com")
    monkeypatch.setenv("EMAIL_PASS", "app-password")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        groq_api_key="test",
        email_user="bot@example.com",
        email_pass="app-password",
    )


class FakeCompletions:
    def __init__(self, content="Summary text", error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeCompletionProvider:
    def __init__(self, content="Summary text", error=None):
        self.completions = FakeCompletions(content=content, error=error)
        self.chat = SimpleNamespace(completions=self.completions)


class FakeSMTP:
    instances = []

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.started_tls = False
        self.login_args = None
        self.sent = []
        self.error = None
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        self.started_tls = True

    def login(self, user, password):
        self.login_args = (user, password)

    def send_message(self, message, to_addrs=None):
        self.sent.append((message, to_addrs))
        return {}


@pytest.fixture
def fake_provider():
    return FakeCompletionProvider()


@pytest.fixture
def fake_smtp():
    FakeSMTP.instances = []
    return FakeSMTP


@pytest.fixture
def client(settings, fake_provider, fake_smtp):
    summaries = SummaryController(
        completion_client=CompletionClient(settings, client=fake_provider),
        settings=settings,
    )
    distribution = DistributionController(
        mail_sender=MailSender(settings, smtp_factory=fake_smtp),
        settings=settings,
    )
    app.dependency_overrides[summary_routes.get_controller] = lambda: summaries
    app.dependency_overrides[distribution_routes.get_controller] = lambda: distribution
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_provider():
    return FakeCompletionProvider
