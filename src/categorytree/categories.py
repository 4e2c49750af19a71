"""Utility functions operating on category trees.

All functions here work through the public methods of Category, so they apply to
any category, whether it is a root or part of a larger tree.
"""

import logging
from typing import TYPE_CHECKING, Any, Iterator, List, Optional, Tuple

from anytree import PreOrderIter, Resolver, ResolverError

from categorytree.category.category import Category
from categorytree.category.category_event import unique_in_order
from categorytree.category.listener_error_action import ListenerErrorAction
from categorytree.exceptions import InvalidNameError

if TYPE_CHECKING:
    from categorytree.categories_builder import CategoriesBuilder

logger = logging.getLogger(__name__)

_resolver = Resolver("name")

# Elements and (name, contents) pairs of the children of a copied category.
_Contents = Tuple[List[Any], List[Tuple[str, Any]]]


def create(name: str, listener_error_action: ListenerErrorAction = ListenerErrorAction.RAISE) -> Category:
    """Create a new, empty root category.

    Args:
        name: The name of the category.
        listener_error_action: How exceptions raised by listeners are handled.
            Children created with ``add_child`` inherit it. Defaults to RAISE.

    Raises:
        InvalidNameError: If the name is None, empty or contains a '/'.
    """
    return Category(name, listener_error_action=listener_error_action)


def create_builder(name: str) -> "CategoriesBuilder":
    """Create a builder for a new root category with the given name."""
    from categorytree.categories_builder import CategoriesBuilder

    return CategoriesBuilder(name)


def iter_categories(category: Category) -> Iterator[Category]:
    """Iterate over the category and all of its descendants, parents before children."""
    return PreOrderIter(category)  # type: ignore[no-any-return]


def get_all_elements(category: Category) -> List[Any]:
    """Return all elements of the category and its descendants.

    Elements are collected in pre-order (a category before its children) and each
    element is contained once, at its first occurrence. The result is a list because
    elements do not need to be hashable, but it has set semantics.

    Example:
        >>> root = create("Root")
        >>> _ = root.add_elements([0, 1, 2])
        >>> _ = root.add_child("Child").add_elements([10, 11, 1])
        >>> get_all_elements(root)
        [0, 1, 2, 10, 11]
    """
    result: List[Any] = []
    for node in iter_categories(category):
        result.extend(node.get_elements())
    return unique_in_order(result)


def remove_empty_categories(category: Category) -> None:
    """Remove all descendants that contain neither elements nor children.

    Children are processed before their parents, so a category whose children all
    turn out to be empty is removed as well. The given category itself is never
    removed, even if it ends up empty.
    """
    children = category.get_children()
    for child in children:
        remove_empty_categories(child)
    for child in children:
        if not child.get_children() and not child.get_elements():
            logger.debug("Removing empty category %r from %r", child.name, category.name)
            category.remove_child(child.name)


def merge_recursively(target: Category, source: Category) -> Category:
    """Merge the contents of one category tree into another.

    The elements of ``source`` are added to ``target``. Then, for each child of
    ``source``, the child of ``target`` with the same name is looked up or created,
    and the two are merged in the same way.

    The contents of ``source`` are copied before ``target`` is changed, so ``source``
    may be an ancestor or descendant of ``target``. ``source`` itself is only
    modified when ``target`` is one of its descendants. Merging a category into
    itself changes nothing.

    Args:
        target: The category to merge into.
        source: The category whose contents are merged.

    Returns:
        The target category.

    Example:
        >>> a = create("A")
        >>> _ = a.add_child("X").add_elements([1])
        >>> b = create("B")
        >>> _ = b.add_child("X").add_elements([2])
        >>> _ = b.add_child("Y").add_elements([3])
        >>> merged = merge_recursively(a, b)
        >>> [(child.name, child.get_elements()) for child in merged.get_children()]
        [('X', [1, 2]), ('Y', [3])]
    """
    _merge_contents(target, _copy_contents(source))
    return target


def _copy_contents(category: Category) -> _Contents:
    return (
        category.get_elements(),
        [(child.name, _copy_contents(child)) for child in category.get_children()],
    )


def _merge_contents(target: Category, contents: _Contents) -> None:
    elements, children = contents
    target.add_elements(elements)
    for name, child_contents in children:
        _merge_contents(target.add_child(name), child_contents)


def find_category(category: Category, path: str) -> Optional[Category]:
    """Find a category by a path of names, such as ``"Fruit/Citrus"``.

    Path segments are separated by ``/``. Relative paths start at the given category,
    where ``"."`` refers to the category itself and ``".."`` to its parent. Absolute
    paths, such as ``"/Food/Fruit"``, start with the name of the root.

    Args:
        category: The category to start from.
        path: The path of the category to find.

    Returns:
        The category at the given path, or None if any segment does not exist.

    Raises:
        InvalidNameError: If the path is None.
    """
    check_path(path)
    try:
        return _resolver.get(category, path)  # type: ignore[no-any-return]
    except ResolverError:
        return None


def find_categories(category: Category, pattern: str) -> List[Category]:
    """Find all categories matching a path pattern with wildcards.

    Segments may contain ``*`` and ``?`` wildcards. Otherwise patterns behave like the
    paths of ``find_category``.

    Example:
        >>> root = create("Root")
        >>> _ = root.add_child("Fruit").add_child("Citrus")
        >>> _ = root.add_child("Vegetables").add_child("Roots")
        >>> [c.name for c in find_categories(root, "*/R*")]
        ['Roots']
    """
    check_path(pattern)
    try:
        return list(_resolver.glob(category, pattern))
    except ResolverError:
        return []


def check_path(path: str) -> None:
    if path is None:
        raise InvalidNameError(path)
