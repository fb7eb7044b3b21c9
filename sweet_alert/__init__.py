# sweet_alert/__init__.py

"""
Flask SweetAlert

Fluent builder for one-shot SweetAlert popups, flashed through the session and
rendered on the next page load.
"""

from sweet_alert.notifier import (
    SweetAlertNotifier,
    MISSING,
    ICON_WARNING,
    ICON_ERROR,
    ICON_SUCCESS,
    ICON_INFO,
    TIMER_MILLISECONDS,
)
from sweet_alert.session_store import SessionStore, FlaskSessionStore
from sweet_alert.rendering import render_alert
from sweet_alert.extension import SweetAlert, get_sweet_alert
from sweet_alert.helpers import (
    alert,
    show_sweet_alert,
    show_success,
    show_error,
    show_warning,
    show_info,
)

__all__ = [
    'SweetAlertNotifier',
    'MISSING',
    'ICON_WARNING',
    'ICON_ERROR',
    'ICON_SUCCESS',
    'ICON_INFO',
    'TIMER_MILLISECONDS',
    'SessionStore',
    'FlaskSessionStore',
    'render_alert',
    'SweetAlert',
    'get_sweet_alert',
    'alert',
    'show_sweet_alert',
    'show_success',
    'show_error',
    'show_warning',
    'show_info',
]
