# sweet_alert/routes.py

"""
Sweet Alert Routes

Blueprint that ships the alert template and an endpoint for clearing an alert
the client has already shown.
"""

import logging

from flask import Blueprint, jsonify

from sweet_alert.notifier import FLASH_PREFIX
from sweet_alert.session_store import FlaskSessionStore

logger = logging.getLogger(__name__)

sweet_alert_bp = Blueprint(
    'sweet_alert',
    __name__,
    template_folder='templates',
    url_prefix='/sweet-alert',
)


@sweet_alert_bp.route('/clear', methods=['POST'])
def clear_sweet_alert():
    """
    Clear the sweet alert from the session.

    Called by the client after an alert has been displayed so it does not
    appear again on page refresh.

    Returns:
        JSON response indicating success or failure.
    """
    store = FlaskSessionStore()
    try:
        keys = store.keys(f'{FLASH_PREFIX}.')
        if keys:
            cleared = {key: store.pull(key) for key in keys}
            logger.info(f"Sweet alert cleared from session: {cleared.get(f'{FLASH_PREFIX}.alert')}")
            return jsonify({'success': True, 'message': 'Alert cleared successfully'})

        logger.debug("No sweet alert found in session to clear")
        return jsonify({'success': True, 'message': 'No alert to clear'})
    except Exception as e:
        logger.error(f"Error clearing sweet alert: {str(e)}")
        return jsonify({'success': False, 'message': 'Error clearing alert'}), 500
