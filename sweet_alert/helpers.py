"""
Sweet Alert helpers for view functions.
Flash a Sweet Alert (SA2) to be shown on the next page load.
"""

from sweet_alert.extension import get_sweet_alert


def alert(text=None, title=None, icon=None):
    """
    Return the notifier of the current request.

    With a text, a message is flashed right away:

        alert('Profile saved', 'Done', 'success')
        alert().warning('Check your input').persistent('Got it')
    """
    notifier = get_sweet_alert().notifier()

    if text is not None:
        notifier.message(text, title, icon)

    return notifier


def show_sweet_alert(title, text, icon='success'):
    """
    Set a Sweet Alert to be displayed on the next page load.

    Args:
        title (str): Alert title
        text (str): Alert message
        icon (str): Alert icon ('success', 'error', 'warning', 'info')
    """
    return alert(text, title, icon)


def show_success(message, title='Success'):
    """Show success alert."""
    return show_sweet_alert(title, message, 'success')


def show_error(message, title='Error'):
    """Show error alert."""
    return show_sweet_alert(title, message, 'error')


def show_warning(message, title='Warning'):
    """Show warning alert."""
    return show_sweet_alert(title, message, 'warning')


def show_info(message, title='Info'):
    """Show info alert."""
    return show_sweet_alert(title, message, 'info')
