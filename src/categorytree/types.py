from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from categorytree.category.category_event import CategoryEvent

# Anything that can be registered on a category to receive its events
ListenerType = Callable[["CategoryEvent"], None]


class EventKind(Enum):
    """Enumeration of the kinds of change a category can report.

    Each kind corresponds to one callback method of a CategoryListener.

    Attributes:
        ELEMENTS_ADDED: Elements were added to a category
        ELEMENTS_REMOVED: Elements were removed from a category
        CHILD_ADDED: A child category was attached
        CHILD_REMOVED: A child category was detached
    """

    ELEMENTS_ADDED = "elements_added"
    ELEMENTS_REMOVED = "elements_removed"
    CHILD_ADDED = "child_added"
    CHILD_REMOVED = "child_removed"

    @property
    def is_element_change(self) -> bool:
        return self in (EventKind.ELEMENTS_ADDED, EventKind.ELEMENTS_REMOVED)
