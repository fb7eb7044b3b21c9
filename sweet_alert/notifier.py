# sweet_alert/notifier.py

"""
Sweet Alert Notifier

Fluent builder for a single SweetAlert configuration. Every mutating call
flashes the full configuration to the session store so the alert is shown on
the next page render.
"""

import json
import logging

logger = logging.getLogger(__name__)

ICON_WARNING = 'warning'
ICON_ERROR = 'error'
ICON_SUCCESS = 'success'
ICON_INFO = 'info'
TIMER_MILLISECONDS = 1800

FLASH_PREFIX = 'alert'
ALERT_KEY = f'{FLASH_PREFIX}.alert'
CONTENT_KEY = f'{FLASH_PREFIX}.content'


class _Missing:
    """Marker returned by get_config() for keys that are not set."""

    def __repr__(self):
        return '<MISSING>'

    def __bool__(self):
        return False


MISSING = _Missing()


class SweetAlertNotifier:
    """
    Accumulates alert options and publishes them to a flash store.

    Args:
        store: Session store implementing flash/has/pull.
        autoclose (int): Default timer in milliseconds. Falls back to
            TIMER_MILLISECONDS when None.
    """

    def __init__(self, store, autoclose=None):
        self.store = store
        self.config = {
            'timer': TIMER_MILLISECONDS if autoclose is None else autoclose,
            'text': '',
            'showConfirmButton': False,
            'showCancelButton': False,
        }

    def message(self, text='', title=None, icon=None):
        """
        Display an alert message with a text and an optional title and icon.

        Args:
            text (str): Alert message
            title (str): Alert title, left untouched when None
            icon (str): One of the ICON_* constants, left untouched when None
        """
        self.config['text'] = text

        if title is not None:
            self.config['title'] = title

        if icon is not None:
            self.config['type'] = icon

        self._flash_config()
        return self

    def basic(self, text, title):
        """Display an untyped alert with a text and a title."""
        return self.message(text, title)

    def info(self, text, title=''):
        return self.message(text, title, ICON_INFO)

    def success(self, text, title=''):
        return self.message(text, title, ICON_SUCCESS)

    def error(self, text, title=''):
        return self.message(text, title, ICON_ERROR)

    def warning(self, text, title=''):
        return self.message(text, title, ICON_WARNING)

    def auto_close(self, milliseconds=None):
        """Set how long the alert stays open. Without a value the current state is re-flashed."""
        if milliseconds is not None:
            self.config['timer'] = milliseconds

        self._flash_config()
        return self

    def confirm_button(self, button_text='OK'):
        self.config['showConfirmButton'] = True
        self.config['confirmButtonText'] = button_text
        self._require_interaction()
        return self

    def cancel_button(self, button_text='Cancel'):
        self.config['showCancelButton'] = True
        self.config['cancelButtonText'] = button_text
        self._require_interaction()
        return self

    def add_button(self, button_text, button_type='confirm'):
        """
        Add a button to the alert.

        Only 'cancel' selects the cancel button; any other button_type adds a
        confirm button.
        """
        if button_type == 'cancel':
            return self.cancel_button(button_text)
        return self.confirm_button(button_text)

    def allow_outside_click(self, value=True):
        self.config['allowOutsideClick'] = value

        self._flash_config()
        return self

    def persistent(self, button_text='OK'):
        """Keep the alert open until the confirm button is clicked."""
        return self.confirm_button(button_text)

    def html(self):
        """
        Render the current text as HTML.

        Call this after the text is final: a later message() sets 'text'
        again and leaves the old 'html' value behind.
        """
        if 'text' in self.config:
            self.config['html'] = self.config.pop('text')

        self._flash_config()
        return self

    def set_config(self, config=None):
        """
        Merge options into the configuration "by hand".

        The merge is shallow and skips the button/timer rules. Values must be
        JSON serializable; otherwise TypeError is raised before anything is
        flashed, with the values already merged.
        """
        self.config.update(config or {})

        self._flash_config()
        return self

    def get_config(self, key=None):
        """
        Return the whole configuration, or a single value.

        Returns MISSING when the key is not set, so a stored None can be told
        apart from an absent option.
        """
        if key is None:
            return dict(self.config)

        return self.config.get(key, MISSING)

    def get_json_config(self):
        return self._build_json_config()

    def _require_interaction(self):
        # Buttons mean the user has to dismiss the alert.
        self.config['allowOutsideClick'] = False
        self.config.pop('timer', None)
        self._flash_config()

    def _flash_config(self):
        json_config = self._build_json_config()

        for key, value in self.config.items():
            self.store.flash(f'{FLASH_PREFIX}.{key}', value)

        self.store.flash(ALERT_KEY, json_config)
        logger.debug(f"Flashed sweet alert config: {self.config}")

    def _build_json_config(self):
        return json.dumps(self.config)
