"""Read-only view of a category."""

from typing import Any, List, Optional

from categorytree.category.category import Category
from categorytree.types import ListenerType


class CategoryView:
    """Read-only wrapper around a Category.

    A view exposes the name, the children, the elements and listener registration of
    the wrapped category, but none of its mutators. Children are returned as views as
    well, so a consumer holding a view cannot modify any part of the tree. The view
    reflects later changes of the wrapped category.

    Listeners registered through a view receive the same events as listeners
    registered on the category itself; the ``source`` and ``child`` of those events
    are the underlying categories.

    Example:
        >>> root = Category("Root")
        >>> _ = root.add_child("Child").add_elements([1])
        >>> view = root.as_view()
        >>> view.get_child("Child").get_elements()
        [1]
        >>> hasattr(view, "add_child")
        False
    """

    __slots__ = ("_category",)

    def __init__(self, category: Category) -> None:
        if not isinstance(category, Category):
            raise TypeError(f"Expected a Category, got {type(category)}")
        self._category = category

    @property
    def name(self) -> str:
        return self._category.name

    def get_children(self) -> List["CategoryView"]:
        return [CategoryView(child) for child in self._category.get_children()]

    def get_child(self, name: str) -> Optional["CategoryView"]:
        child = self._category.get_child(name)
        return None if child is None else CategoryView(child)

    def get_elements(self) -> List[Any]:
        return self._category.get_elements()

    def add_category_listener(self, listener: ListenerType) -> None:
        self._category.add_category_listener(listener)

    def remove_category_listener(self, listener: ListenerType) -> None:
        self._category.remove_category_listener(listener)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, CategoryView):
            return self._category == other._category
        if isinstance(other, Category):
            return self._category == other
        return False

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CategoryView({self._category!r})"

    def __str__(self) -> str:
        return self._category.name
