"""Builder for assembling category trees with chained calls."""

from typing import Any, Iterable, Optional

from categorytree.categories import get_all_elements, merge_recursively
from categorytree.category.category import Category, check_name
from categorytree.category.category_event import ElementIndex, unique_in_order


class CategoriesBuilder:
    """Convenience wrapper for building a category tree.

    Every builder wraps one category. ``get`` returns a builder for a child, creating
    the child on first use, so a tree can be built with path-like chains of calls.
    All changes are made through the regular Category methods, so listeners that are
    already registered see them as usual.

    Example:
        >>> builder = CategoriesBuilder("Food")
        >>> _ = builder.get("Fruit").add("apple").add("pear")
        >>> _ = builder.get("Fruit").get("Citrus").add_all(["lemon", "lime"])
        >>> _ = builder.add_if_uncategorized("Other", ["pear", "bread"])
        >>> food = builder.build()
        >>> [child.name for child in food.get_children()]
        ['Fruit', 'Other']
        >>> food.get_child("Other").get_elements()
        ['bread']
    """

    def __init__(self, name: Optional[str] = None, category: Optional[Category] = None) -> None:
        """Initialize a builder for a new root category or for an existing category.

        Args:
            name: The name of a new root category. Ignored if ``category`` is given.
            category: An existing category to continue building.

        Raises:
            InvalidNameError: If no category is given and the name is None, empty or
                contains a '/'.
            TypeError: If ``category`` is not a Category.
        """
        if category is None:
            category = Category(name)  # type: ignore[arg-type]
        elif not isinstance(category, Category):
            raise TypeError(f"Expected a Category, got {type(category)}")
        self._category = category

    @classmethod
    def for_category(cls, category: Category) -> "CategoriesBuilder":
        """Create a builder that continues building an existing category."""
        return cls(category=category)

    def add(self, element: Any) -> "CategoriesBuilder":
        self._category.add_elements([element])
        return self

    def add_all(self, elements: Optional[Iterable[Any]]) -> "CategoriesBuilder":
        self._category.add_elements(elements)
        return self

    def get(self, name: str) -> "CategoriesBuilder":
        """Return a builder for the child with the given name, creating the child if needed.

        Raises:
            InvalidNameError: If the name is None, empty or contains a '/'.
        """
        return CategoriesBuilder.for_category(self._category.add_child(name))

    def merge_recursively(self, other: Category) -> "CategoriesBuilder":
        """Merge the elements and children of another category into this one.

        See ``categorytree.categories.merge_recursively``.
        """
        merge_recursively(self._category, other)
        return self

    def add_if_uncategorized(self, name: str, candidates: Iterable[Any]) -> "CategoriesBuilder":
        """Add candidates to the child ``name`` unless they are already somewhere in the tree.

        Candidates are checked against all elements of the category wrapped by this
        builder and its descendants. The child is only created when at least one
        candidate is left to add.

        Args:
            name: The name of the child that receives the uncategorized candidates.
            candidates: The elements to add if they are not yet categorized.

        Raises:
            InvalidNameError: If the name is None, empty or contains a '/'.
        """
        check_name(name)
        categorized = ElementIndex(get_all_elements(self._category))
        available = [candidate for candidate in unique_in_order(candidates) if candidate not in categorized]
        if available:
            self.get(name).add_all(available)
        return self

    def build(self) -> Category:
        """Return the category built by this builder."""
        return self._category

    def __repr__(self) -> str:
        return f"CategoriesBuilder({self._category!r})"
