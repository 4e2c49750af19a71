"""Immutable description of a single change in a category tree."""

from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Set, Tuple

from categorytree.types import EventKind

if TYPE_CHECKING:
    from categorytree.category.category import Category


class ElementIndex:
    """Membership index for elements compared with ``==``.

    Hashable elements are kept in a set, unhashable ones in a list that is scanned
    linearly. A hashable element is assumed never to equal an unhashable one.

    Example:
        >>> index = ElementIndex([1, [2]])
        >>> 1 in index, [2] in index, 3 in index
        (True, True, False)
    """

    __slots__ = ("_hashable", "_unhashable")

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._hashable: Set[Any] = set()
        self._unhashable: List[Any] = []
        for element in elements:
            self.add(element)

    def __contains__(self, element: Any) -> bool:
        try:
            return element in self._hashable
        except TypeError:
            return element in self._unhashable

    def add(self, element: Any) -> None:
        try:
            self._hashable.add(element)
        except TypeError:
            if element not in self._unhashable:
                self._unhashable.append(element)

    def discard(self, element: Any) -> None:
        try:
            self._hashable.discard(element)
        except TypeError:
            if element in self._unhashable:
                self._unhashable.remove(element)

    def __len__(self) -> int:
        return len(self._hashable) + len(self._unhashable)


def unique_in_order(items: Iterable[Any]) -> List[Any]:
    """Return the items with duplicates removed, keeping first occurrences.

    Duplicates are detected with ``==`` so elements do not need to be hashable.

    Example:
        >>> unique_in_order([3, 1, 3, 2, 1])
        [3, 1, 2]
    """
    seen = ElementIndex()
    result: List[Any] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


class CategoryEvent:
    """Event describing one change of a category.

    An event either describes changed elements or a changed child, never both. The
    ``source`` is always the category where the change physically happened, which is
    not necessarily the category the receiving listener was registered on: events of
    descendants are forwarded to the listeners of all their ancestors unchanged.

    Events are created by categories. Use the ``elements_changed`` and
    ``child_changed`` factories when creating them elsewhere, e.g. in tests.

    Attributes:
        kind (EventKind): What kind of change this event describes.
        source (Category): The category that was modified.
        elements (Tuple[Any, ...]): The added or removed elements, de-duplicated and in
            input order. Empty for child events.
        child (Optional[Category]): The added or removed child. None for element events.

    Example:
        >>> from categorytree.category.category import Category
        >>> root = Category("Root")
        >>> event = CategoryEvent.elements_changed(EventKind.ELEMENTS_ADDED, root, [1, 2, 1])
        >>> event.elements
        (1, 2)
        >>> event.child is None
        True
    """

    __slots__ = ("_kind", "_source", "_elements", "_child")

    def __init__(
        self,
        kind: EventKind,
        source: "Category",
        elements: Optional[Iterable[Any]] = None,
        child: Optional["Category"] = None,
    ) -> None:
        """Initialize a CategoryEvent.

        Args:
            kind: The kind of change.
            source: The category that was modified.
            elements: The changed elements, for element events.
            child: The changed child, for child events.

        Raises:
            ValueError: If the payload does not match the kind of the event.
        """
        if kind.is_element_change:
            if child is not None:
                raise ValueError(f"{kind.name} events may not carry a child")
        elif child is None or elements is not None:
            raise ValueError(f"{kind.name} events must carry a child and no elements")
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_source", source)
        object.__setattr__(self, "_elements", tuple(unique_in_order(elements or ())))
        object.__setattr__(self, "_child", child)

    @classmethod
    def elements_changed(cls, kind: EventKind, source: "Category", elements: Iterable[Any]) -> "CategoryEvent":
        """Create an ELEMENTS_ADDED or ELEMENTS_REMOVED event."""
        return cls(kind, source, elements=elements)

    @classmethod
    def child_changed(cls, kind: EventKind, source: "Category", child: "Category") -> "CategoryEvent":
        """Create a CHILD_ADDED or CHILD_REMOVED event."""
        return cls(kind, source, child=child)

    @property
    def kind(self) -> EventKind:
        return self._kind  # type: ignore[no-any-return]

    @property
    def source(self) -> "Category":
        return self._source  # type: ignore[no-any-return]

    @property
    def category(self) -> "Category":
        """Alias of ``source``."""
        return self._source  # type: ignore[no-any-return]

    @property
    def elements(self) -> Tuple[Any, ...]:
        return self._elements  # type: ignore[no-any-return]

    @property
    def child(self) -> Optional["Category"]:
        return self._child  # type: ignore[no-any-return]

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __eq__(self, other: Any) -> bool:
        """Check equality with another CategoryEvent.

        Sources and children are compared by identity, since two distinct categories
        with equal contents are still different origins of a change.
        """
        if not isinstance(other, CategoryEvent):
            return False
        return (
            self.kind is other.kind
            and self.source is other.source
            and self.child is other.child
            and self.elements == other.elements
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"CategoryEvent(kind={self.kind.name}, source={self.source!r}, "
            f"elements={list(self.elements)!r}, child={self.child!r})"
        )
