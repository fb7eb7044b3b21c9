"""
Pytest configuration and shared fixtures for all tests.
"""
import os
import sys
import pytest
from unittest.mock import Mock

from flask import redirect, render_template_string

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sweet_alert.app_factory import create_app
from sweet_alert.helpers import alert, show_success

PAGE_TEMPLATE = '<html><body><main>page</main>{{ sweet_alert() }}</body></html>'


class DictSessionStore:
    """In-memory store recording every flash, for builder tests."""

    def __init__(self):
        self.data = {}
        self.flashed = []

    def flash(self, key, value):
        self.data[key] = value
        self.flashed.append((key, value))

    def has(self, key):
        return key in self.data

    def pull(self, key, default=None):
        return self.data.pop(key, default)


def _register_demo_routes(app):
    """Routes used by the request-cycle tests."""

    @app.route('/')
    def index():
        return render_template_string(PAGE_TEMPLATE)

    @app.route('/save')
    def save():
        alert().success('Saved!', 'Done')
        return redirect('/')

    @app.route('/confirm')
    def confirm():
        alert('Delete this team?', 'Careful', 'warning').confirm_button('Yes').cancel_button('No')
        return redirect('/')

    @app.route('/shortcut')
    def shortcut():
        show_success('Profile updated')
        return redirect('/')

    @app.route('/rich')
    def rich():
        alert().info('See details').set_config({'content': '<b>bold</b>'})
        return redirect('/')

    @app.route('/rich-quiet')
    def rich_quiet():
        alert().info('first').set_config({'content': '<b>stale</b>'})
        return 'no template'

    @app.route('/html')
    def html_alert():
        alert().message('<em>hi</em>', 'Formatted').html()
        return redirect('/')

    @app.route('/inline')
    def inline():
        alert().error('Something failed', 'Oops')
        return render_template_string(PAGE_TEMPLATE)

    @app.route('/quiet')
    def quiet():
        alert().success('Not rendered here')
        return 'no template'


@pytest.fixture(scope='session')
def app():
    """
    Create application for testing.

    No app context is pushed here: requests must get their own context so the
    per-request notifier cached on g does not leak between requests.
    """
    app = create_app('web_config.TestingConfig')
    _register_demo_routes(app)
    return app


@pytest.fixture
def client(app):
    """Create Flask test client."""
    return app.test_client()


@pytest.fixture
def store():
    """Create an in-memory flash store."""
    return DictSessionStore()


@pytest.fixture
def mock_store():
    """Create a mock flash store."""
    return Mock(spec=['flash', 'has', 'pull'])
