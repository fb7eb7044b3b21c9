"""
Application factory and logging setup unit tests.
"""
import logging

import pytest
from unittest.mock import patch
from flask import Flask

from sweet_alert.app_factory import create_app, init_session
from sweet_alert.log_config import LOGGING_CONFIG, init_logging
from web_config import DevelopmentConfig


class _DevConfigWithKey(DevelopmentConfig):
    SECRET_KEY = 'dev-secret'


class _DevConfigWithoutKey(DevelopmentConfig):
    SECRET_KEY = None


@pytest.mark.unit
class TestCreateApp:
    """Test create_app behaviors."""

    def test_secret_key_is_required(self):
        with patch('sweet_alert.app_factory.init_logging'):
            with pytest.raises(RuntimeError, match='SECRET_KEY'):
                create_app(_DevConfigWithoutKey)

    def test_development_app_uses_cookie_sessions(self):
        with patch('sweet_alert.app_factory.init_logging'), \
                patch('sweet_alert.app_factory.Session') as session_ext:
            app = create_app(_DevConfigWithKey)

        session_ext.assert_not_called()
        assert 'sweet_alert' in app.extensions
        assert 'csrf' in app.extensions

    def test_testing_app_registers_blueprint(self, app):
        assert 'sweet_alert' in app.blueprints
        assert app.url_map.bind('localhost').match('/sweet-alert/clear', method='POST')[0] == \
            'sweet_alert.clear_sweet_alert'


@pytest.mark.unit
class TestInitSession:
    """Test server-side session setup."""

    def test_redis_session_configures_client(self):
        app = Flask(__name__)
        app.config.update(SESSION_TYPE='redis', REDIS_URL='redis://localhost:6379/3')

        with patch('redis.Redis.from_url') as from_url, \
                patch('sweet_alert.app_factory.Session') as session_ext:
            init_session(app)

        from_url.assert_called_once_with('redis://localhost:6379/3', decode_responses=False)
        assert app.config['SESSION_REDIS'] is from_url.return_value
        session_ext.assert_called_once_with(app)

    def test_testing_app_skips_server_side_session(self):
        app = Flask(__name__)
        app.config.update(TESTING=True, SESSION_TYPE='redis')

        with patch('sweet_alert.app_factory.Session') as session_ext:
            init_session(app)

        session_ext.assert_not_called()


@pytest.mark.unit
class TestInitLogging:
    """Test logging setup."""

    def test_testing_logging_is_console_only(self):
        app = Flask(__name__)
        app.config['TESTING'] = True

        init_logging(app)

        assert len(app.logger.handlers) == 1
        assert isinstance(app.logger.handlers[0], logging.StreamHandler)

    def test_deployed_logging_uses_dict_config(self):
        app = Flask(__name__)

        with patch('sweet_alert.log_config.os.makedirs'), \
                patch('sweet_alert.log_config.logging.config.dictConfig') as dict_config:
            init_logging(app)

        dict_config.assert_called_once_with(LOGGING_CONFIG)
        assert app.logger.level == logging.WARNING
