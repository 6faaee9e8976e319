"""Shared fixtures for the Enforcer test suite."""

from types import SimpleNamespace

import pytest

from feedback import app as feedback_app


class FakeMessages:
    """Stands in for anthropic_client.messages, returning canned text."""

    def __init__(self, text):
        self.text = text
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        return SimpleNamespace(content=[SimpleNamespace(text=self.text)])


class FakeAnthropic:
    def __init__(self, text):
        self.messages = FakeMessages(text)


@pytest.fixture
def client():
    """Flask test client for the feedback app."""
    feedback_app.app.config['TESTING'] = True
    with feedback_app.app.test_client() as test_client:
        yield test_client


@pytest.fixture
def fake_claude(monkeypatch):
    """Install a fake Anthropic client that replies with the given text."""
    def install(text):
        fake = FakeAnthropic(text)
        monkeypatch.setattr(feedback_app, 'anthropic_client', fake)
        return fake
    return install


@pytest.fixture
def cta_item():
    return {
        'id': 'FB-001',
        'content': 'Make the CTA button bigger and change color to navy',
        'category': 'DESIGN',
        'priority': 'HIGH',
        'requiredAction': 'Update design: Make the CTA button bigger and change color to navy',
        'status': 'PENDING'
    }
