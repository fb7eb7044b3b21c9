# sweet_alert/rendering.py

"""
Alert Rendering

Consumes the flashed alert configuration and renders the script that hands it
to SweetAlert on the client.
"""

import json
import logging

from flask import render_template
from markupsafe import Markup

from sweet_alert.notifier import ALERT_KEY, CONTENT_KEY

logger = logging.getLogger(__name__)

ALERT_TEMPLATE = 'sweet_alert/alert.html'


def load_alert_config(store):
    """
    Pull the flashed alert configuration from the store.

    Args:
        store: Session store holding the flashed alert.

    Returns:
        dict: The alert configuration, or None when no usable alert is flashed.
    """
    if not store.has(ALERT_KEY):
        return None

    raw_config = store.pull(ALERT_KEY)
    try:
        config = json.loads(raw_config)
    except (TypeError, ValueError) as e:
        logger.error(f"Discarding malformed sweet alert config {raw_config!r}: {e}")
        return None

    if not isinstance(config, dict):
        logger.error(f"Discarding sweet alert config that is not an object: {raw_config!r}")
        return None

    return config


def render_alert(store):
    """
    Render the flashed alert, if any, as a <script> element.

    Flashed HTML content is always pulled. It is attached to the config as a
    DOM element only when the config itself carries a content option.

    Returns:
        Markup: The script, or an empty string when there is nothing to show.
    """
    config = load_alert_config(store)
    if config is None:
        return Markup('')

    # Consume the slot even when this alert has no content option of its own.
    content = store.pull(CONTENT_KEY) if store.has(CONTENT_KEY) else None
    has_content = 'content' in config and content is not None

    logger.info(f"Rendering sweet alert: {config.get('title', '')!r} ({config.get('type', 'basic')})")
    return Markup(render_template(
        ALERT_TEMPLATE,
        config=config,
        has_content=has_content,
        content=content,
    ))
