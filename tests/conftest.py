import pytest

from gitops_demo.app import create_app


@pytest.fixture
def app(monkeypatch):
    """Create a test Flask application with no VERSION override."""
    monkeypatch.delenv("VERSION", raising=False)
    test_app = create_app()
    test_app.config['TESTING'] = True
    yield test_app


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()
