# sweet_alert/log_config.py

"""
Logging Configuration

dictConfig setup for deployed apps and simple console logging for testing.
Uses RotatingFileHandler so the alert log cannot grow without bound.
"""

import logging
import logging.config
import logging.handlers
import os

LOG_DIR = os.getenv('SWEET_ALERT_LOG_DIR', 'logs')

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,

    'formatters': {
        'detailed': {
            'format': '%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s'
        },
        'simple': {
            'format': '%(asctime)s [%(levelname)s] %(message)s'
        },
    },

    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
            'level': 'INFO',
        },
        'alerts_file': {
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': os.path.join(LOG_DIR, 'sweet_alert.log'),
            'formatter': 'detailed',
            'level': 'WARNING',
            'maxBytes': 10485760,   # 10MB
            'backupCount': 3,
            'encoding': 'utf-8',
            'delay': True,
        },
    },

    'loggers': {
        'sweet_alert': {
            'handlers': ['console', 'alerts_file'],
            'level': 'INFO',
            'propagate': False,
        },
        'werkzeug': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': False,
        },
    },

    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
}


def init_logging(app):
    """
    Initialize logging configuration for the Flask application.

    Args:
        app: The Flask application instance.
    """
    if app.config.get('TESTING'):
        # Console only; tests must not write log files
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s - %(message)s'
        ))

        app.logger.handlers = [console_handler]
        app.logger.setLevel(logging.DEBUG if app.debug else logging.INFO)
        return

    os.makedirs(LOG_DIR, exist_ok=True)
    logging.config.dictConfig(LOGGING_CONFIG)
    app.logger.setLevel(logging.INFO if app.debug else logging.WARNING)
    if app.debug:
        logging.getLogger('sweet_alert').setLevel(logging.DEBUG)
