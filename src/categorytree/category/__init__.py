"""Observable category tree.

This package provides the Category node together with the events and listeners
used to observe changes anywhere below the category a listener is registered on.
"""

from .category import Category
from .category_event import CategoryEvent
from .category_listener import CategoryAdapter, CategoryListener
from .category_view import CategoryView
from .listener_error_action import ListenerErrorAction

__all__ = [
    "Category",
    "CategoryAdapter",
    "CategoryEvent",
    "CategoryListener",
    "CategoryView",
    "ListenerErrorAction",
]
