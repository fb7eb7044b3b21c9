# sweet_alert/extension.py

"""
Flask Extension

Wires the notifier, the flash store, and the alert renderer into a Flask app.
"""

import logging

from flask import current_app, g

from sweet_alert.notifier import SweetAlertNotifier, TIMER_MILLISECONDS
from sweet_alert.rendering import render_alert
from sweet_alert.session_store import FlaskSessionStore

logger = logging.getLogger(__name__)

EXTENSION_NAME = 'sweet_alert'


class SweetAlert:
    """
    Flask extension for flashed SweetAlert popups.

    Usage:
        sweet_alert = SweetAlert(app)
        # or
        sweet_alert = SweetAlert()
        sweet_alert.init_app(app)

    Templates render the pending alert with ``{{ sweet_alert() }}``.
    """

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """
        Register the extension with the Flask application.

        Args:
            app: The Flask application instance.
        """
        from sweet_alert.routes import sweet_alert_bp

        app.config.setdefault('SWEET_ALERT_AUTOCLOSE', TIMER_MILLISECONDS)
        app.extensions[EXTENSION_NAME] = self

        app.before_request(self._age_flash_data)
        app.add_template_global(self.render, name='sweet_alert')
        app.register_blueprint(sweet_alert_bp)

        logger.debug(f"SweetAlert registered (autoclose={app.config['SWEET_ALERT_AUTOCLOSE']}ms)")

    def store(self):
        """Return a flash store bound to the current request's session."""
        return FlaskSessionStore()

    def notifier(self):
        """
        Return the notifier of the current request, creating it on first use.

        The default timer is read from SWEET_ALERT_AUTOCLOSE when the notifier
        is built.
        """
        if 'sweet_alert_notifier' not in g:
            g.sweet_alert_notifier = SweetAlertNotifier(
                self.store(),
                autoclose=current_app.config.get('SWEET_ALERT_AUTOCLOSE', TIMER_MILLISECONDS),
            )
        return g.sweet_alert_notifier

    def render(self):
        """Jinja global: consume and render the pending alert."""
        return render_alert(self.store())

    def _age_flash_data(self):
        self.store().age_flash_data()


def get_sweet_alert(app=None):
    """Return the SweetAlert extension registered on app (or current_app)."""
    app = app or current_app
    try:
        return app.extensions[EXTENSION_NAME]
    except KeyError:
        raise RuntimeError('SweetAlert extension is not registered on this app') from None
