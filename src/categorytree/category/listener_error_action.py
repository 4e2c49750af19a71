"""Listener error action enum for handling exceptions raised by category listeners."""

from enum import Enum


class ListenerErrorAction(str, Enum):
    """Action to take when a listener raises while being notified of a category event.

    Values:
        RAISE: Let the exception propagate; the remaining listeners are not notified
            of that event (default behavior)
        LOG: Log the exception with its traceback and continue with the remaining listeners
    """

    RAISE = "raise"
    LOG = "log"
