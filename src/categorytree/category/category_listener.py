"""Listener interface for observing changes in a category tree."""

from abc import ABC, abstractmethod

from categorytree.category.category_event import CategoryEvent
from categorytree.types import EventKind


class CategoryListener(ABC):
    """
    Abstract base class for objects that want to be informed about category changes.

    A listener that is registered on a category receives the events of that category
    and of all its current descendants. Categories call their listeners with the
    event as the only argument, so any callable taking a CategoryEvent can be
    registered. This class turns such a call into one of four callback methods,
    depending on the kind of the event.

    Listeners are expected not to raise. What happens when they do depends on the
    ListenerErrorAction of the category whose listener failed.

    Example:
        >>> from categorytree.category.category import Category
        >>> class PrintingListener(CategoryListener):
        ...     def elements_added(self, event):
        ...         print(f"added {list(event.elements)} to {event.source.name}")
        ...     def elements_removed(self, event):
        ...         pass
        ...     def child_added(self, event):
        ...         print(f"{event.source.name} got child {event.child.name}")
        ...     def child_removed(self, event):
        ...         pass
        >>> root = Category("Root")
        >>> root.add_category_listener(PrintingListener())
        >>> child = root.add_child("Child")
        Root got child Child
        >>> _ = child.add_elements([1, 2])
        added [1, 2] to Child
    """

    def __call__(self, event: CategoryEvent) -> None:
        """Dispatch the event to the callback method matching its kind."""
        if event.kind is EventKind.ELEMENTS_ADDED:
            self.elements_added(event)
        elif event.kind is EventKind.ELEMENTS_REMOVED:
            self.elements_removed(event)
        elif event.kind is EventKind.CHILD_ADDED:
            self.child_added(event)
        else:
            self.child_removed(event)

    @abstractmethod
    def elements_added(self, event: CategoryEvent) -> None:
        """Called when elements have been added to a category."""

    @abstractmethod
    def elements_removed(self, event: CategoryEvent) -> None:
        """Called when elements have been removed from a category."""

    @abstractmethod
    def child_added(self, event: CategoryEvent) -> None:
        """Called when a child has been added to a category."""

    @abstractmethod
    def child_removed(self, event: CategoryEvent) -> None:
        """Called when a child has been removed from a category."""


class CategoryAdapter(CategoryListener):
    """CategoryListener with empty callback methods, for overriding selectively."""

    def elements_added(self, event: CategoryEvent) -> None:
        pass

    def elements_removed(self, event: CategoryEvent) -> None:
        pass

    def child_added(self, event: CategoryEvent) -> None:
        pass

    def child_removed(self, event: CategoryEvent) -> None:
        pass
