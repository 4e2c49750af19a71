"""Observable category node holding elements and named child categories."""

import logging
from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Tuple

from anytree import NodeMixin

from categorytree.category.category_event import CategoryEvent, ElementIndex
from categorytree.category.listener_error_action import ListenerErrorAction
from categorytree.exceptions import DuplicateCategoryError, InvalidNameError
from categorytree.types import EventKind, ListenerType

if TYPE_CHECKING:
    from categorytree.category.category_view import CategoryView

logger = logging.getLogger(__name__)


def check_name(name: Any) -> str:
    """Validate a category name and return it.

    Raises:
        InvalidNameError: If the name is None, empty or contains a '/'.
        TypeError: If the name is not a string.
    """
    if name is None:
        raise InvalidNameError(name)
    if not isinstance(name, str):
        raise TypeError(f"The name must be a string, got {type(name)}")
    if not name or NodeMixin.separator in name:
        raise InvalidNameError(name, NodeMixin.separator)
    return name


class _ForwardingListener:
    """Listener that passes events of a child on to the listeners of its parent.

    Every category owns exactly one instance, which is registered on each of its
    children while they are attached.
    """

    __slots__ = ("owner",)

    def __init__(self, owner: "Category") -> None:
        self.owner = owner

    def __call__(self, event: CategoryEvent) -> None:
        self.owner._fire(event)

    def __repr__(self) -> str:
        return f"_ForwardingListener(owner={self.owner!r})"


class Category(NodeMixin):  # type: ignore
    """A named group of elements with named child categories, observable for changes.

    Extends anytree.NodeMixin, which maintains the parent/children links, rejects
    cycles and makes sure a category has at most one parent. On top of that, a
    category keeps an ordered list of elements and a list of listeners.

    Listeners registered on a category are called with a CategoryEvent for every
    change of that category and of all of its current descendants. This works
    without registering anything on the descendants: whenever a category becomes a
    child, the forwarding listener of its parent is registered on it, and it is
    unregistered again when the child is detached. Since the parent is itself
    forwarded to its own parent, an event travels up to the root unchanged, with
    ``source`` still naming the category where the change happened.

    Structural invariants:
        - Children of one category have distinct names.
        - Elements are compared with ``==`` and stored at most once, in insertion order.
        - Events are only fired when something actually changed.

    These hold no matter whether a child is attached through ``add_child`` or by
    assigning ``child.parent`` directly.

    Listener notification iterates over a snapshot of the listener list, so
    listeners may add or remove listeners while being notified. Categories are not
    thread-safe; concurrent mutation of one tree has to be serialized by the caller.

    Attributes:
        name (str): The name of the category. Read-only.
        parent (Optional[Category]): The parent category (inherited from anytree).
        children (Tuple[Category, ...]): The child categories (inherited from anytree).
        listener_error_action (ListenerErrorAction): How exceptions raised by this
            category's listeners are handled.

    Example:
        >>> root = Category("Root")
        >>> events = []
        >>> root.add_category_listener(events.append)
        >>> fruit = root.add_child("Fruit")
        >>> fruit.add_elements(["apple", "pear", "apple"])
        True
        >>> fruit.get_elements()
        ['apple', 'pear']
        >>> [(event.kind.name, event.source.name) for event in events]
        [('CHILD_ADDED', 'Root'), ('ELEMENTS_ADDED', 'Fruit')]
    """

    def __init__(
        self,
        name: str,
        parent: Optional["Category"] = None,
        listener_error_action: ListenerErrorAction = ListenerErrorAction.RAISE,
    ) -> None:
        """Initialize a Category.

        Args:
            name: The name of the category. Must be a non-empty string.
            parent: The parent category. Defaults to None. Attaching to a parent fires
                a CHILD_ADDED event on the parent.
            listener_error_action: How exceptions raised by listeners of this category
                are handled. Defaults to RAISE.

        Raises:
            InvalidNameError: If the name is None, empty or contains a '/'.
            DuplicateCategoryError: If the parent already has a child with this name.
        """
        self._name = check_name(name)
        self._elements: List[Any] = []
        self._element_index = ElementIndex()
        self._listeners: List[ListenerType] = []
        self._forwarding_listener = _ForwardingListener(self)
        self.listener_error_action = ListenerErrorAction(listener_error_action)
        if parent is not None:
            self.parent = parent

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> Optional["Category"]:
        return NodeMixin.parent.fget(self)  # type: ignore[no-any-return]

    @parent.setter
    def parent(self, value: Optional["Category"]) -> None:
        # Validate before anytree detaches from the old parent, so a rejected
        # attach leaves the tree untouched.
        if value is not None and value is not self.parent:
            if not isinstance(value, Category):
                raise TypeError(f"Parent of a category must be a Category, got {type(value)}")
            if value.get_child(self._name) is not None:
                raise DuplicateCategoryError(self._name, value.name)
        NodeMixin.parent.fset(self, value)

    def _post_attach(self, parent: "Category") -> None:
        self.add_category_listener(parent._forwarding_listener)
        logger.debug("Attached category %r to %r", self._name, parent.name)
        parent._fire(CategoryEvent.child_changed(EventKind.CHILD_ADDED, parent, self))

    def _post_detach(self, parent: "Category") -> None:
        self.remove_category_listener(parent._forwarding_listener)
        logger.debug("Detached category %r from %r", self._name, parent.name)
        parent._fire(CategoryEvent.child_changed(EventKind.CHILD_REMOVED, parent, self))

    def get_children(self) -> List["Category"]:
        """Return a new list containing the children of this category, in order."""
        return list(self.children)

    def get_child(self, name: str) -> Optional["Category"]:
        """Return the child with the given name.

        Args:
            name: The name of the child.

        Returns:
            The child, or None if this category has no child with that name.

        Raises:
            InvalidNameError: If the name is None, empty or contains a '/'.
        """
        check_name(name)
        for child in self.children:
            if child.name == name:
                return child  # type: ignore[no-any-return]
        return None

    def add_child(self, name: str) -> "Category":
        """Add a child with the given name, unless it already exists.

        A new child is created empty, inherits the listener error action of this
        category, and a CHILD_ADDED event is fired. If a child with this name already
        exists, it is returned unchanged and no event is fired.

        Args:
            name: The name of the child.

        Returns:
            The new or existing child.

        Raises:
            InvalidNameError: If the name is None, empty or contains a '/'.
        """
        present = self.get_child(name)
        if present is not None:
            return present
        return self._create_child(name)

    def _create_child(self, name: str) -> "Category":
        return Category(name, parent=self, listener_error_action=self.listener_error_action)

    def remove_child(self, name: str) -> Optional["Category"]:
        """Remove the child with the given name.

        The removed child becomes the root of its own tree and stays fully usable.
        Changes in it are no longer reported to the listeners of this category.

        Args:
            name: The name of the child.

        Returns:
            The removed child, or None (without firing an event) if there was no
            child with that name.
        """
        child = self.get_child(name)
        if child is not None:
            child.parent = None
        return child

    def remove_all_children(self) -> None:
        """Remove all children, in order, firing one CHILD_REMOVED event per child."""
        for child in self.get_children():
            self.remove_child(child.name)

    def get_elements(self) -> List[Any]:
        """Return a new list containing the elements of this category, in order."""
        return list(self._elements)

    def add_elements(self, elements: Optional[Iterable[Any]]) -> bool:
        """Add the given elements to this category.

        Each element that is not yet contained is appended. If at least one element
        was appended, a single ELEMENTS_ADDED event is fired. Its ``elements`` are the
        given elements, de-duplicated, including those that were already contained.

        Args:
            elements: The elements to add. None is treated like an empty iterable.

        Returns:
            True if this category changed.
        """
        if elements is None:
            return False
        batch = list(elements)
        changed = False
        for element in batch:
            if element not in self._element_index:
                self._elements.append(element)
                self._element_index.add(element)
                changed = True
        if changed:
            logger.debug("Added elements to category %r: %r", self._name, batch)
            self._fire(CategoryEvent.elements_changed(EventKind.ELEMENTS_ADDED, self, batch))
        return changed

    def remove_elements(self, elements: Optional[Iterable[Any]]) -> bool:
        """Remove the given elements from this category.

        If at least one of the elements was contained, a single ELEMENTS_REMOVED event
        is fired, carrying the given elements, de-duplicated.

        Args:
            elements: The elements to remove. None is treated like an empty iterable.

        Returns:
            True if this category changed.
        """
        if elements is None:
            return False
        batch = list(elements)
        changed = False
        for element in batch:
            if element in self._element_index:
                self._elements.remove(element)
                self._element_index.discard(element)
                changed = True
        if changed:
            logger.debug("Removed elements from category %r: %r", self._name, batch)
            self._fire(CategoryEvent.elements_changed(EventKind.ELEMENTS_REMOVED, self, batch))
        return changed

    def remove_all_elements(self) -> None:
        self.remove_elements(self.get_elements())

    def add_category_listener(self, listener: ListenerType) -> None:
        """Register a listener on this category.

        The listener is called with a CategoryEvent for every change of this category
        and of its descendants. Registering the same listener twice has no effect.

        Args:
            listener: A CategoryListener, or any callable accepting a CategoryEvent.

        Raises:
            TypeError: If the listener is not callable.
        """
        if not callable(listener):
            raise TypeError(f"Listener must be callable, got {type(listener)}")
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_category_listener(self, listener: ListenerType) -> None:
        """Unregister a listener. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def get_category_listeners(self) -> Tuple[ListenerType, ...]:
        """Return the registered listeners, including forwarding listeners of the parent."""
        return tuple(self._listeners)

    def _fire(self, event: CategoryEvent) -> None:
        for listener in tuple(self._listeners):
            if self.listener_error_action is ListenerErrorAction.LOG and not isinstance(
                listener, _ForwardingListener
            ):
                try:
                    listener(event)
                except Exception:
                    logger.exception(
                        "Listener %r of category %r failed on %s", listener, self._name, event.kind.name
                    )
            else:
                listener(event)

    def as_view(self) -> "CategoryView":
        """Return a read-only view of this category."""
        from categorytree.category.category_view import CategoryView

        return CategoryView(self)

    def __eq__(self, other: Any) -> bool:
        """Check structural equality with another category or category view.

        Two categories are equal if their names, their children (recursively, in
        order) and their elements (in order) are equal. Listeners are not compared.
        """
        if self is other:
            return True
        from categorytree.category.category_view import CategoryView

        if not isinstance(other, (Category, CategoryView)):
            return False
        return (
            self.name == other.name
            and self.get_elements() == other.get_elements()
            and self.get_children() == other.get_children()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        path = self.separator.join(node.name for node in self.path)
        return f"{self.__class__.__name__}({self.separator + path!r})"

    def __str__(self) -> str:
        return self._name
