"""Test configuration and fixtures."""

import pytest

from deedguide import create_app


@pytest.fixture
def app():
    """Create application for testing."""
    app = create_app({
        'TESTING': True,
        'GUIDANCE_OFFICE_NAME': 'PHÒNG CÔNG CHỨNG SỐ 5',
        'GUIDANCE_SHEET_VERSION': '3.9',
    })

    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """Test client for making requests."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """CLI test runner."""
    return app.test_cli_runner()
