"""Observable, hierarchical grouping of arbitrary elements.

This package provides categories: named groups of elements with named child
categories, whose changes can be observed from any ancestor.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from categorytree.categories import (
    create,
    create_builder,
    find_categories,
    find_category,
    get_all_elements,
    iter_categories,
    merge_recursively,
    remove_empty_categories,
)
from categorytree.categories_builder import CategoriesBuilder
from categorytree.category import (
    Category,
    CategoryAdapter,
    CategoryEvent,
    CategoryListener,
    CategoryView,
    ListenerErrorAction,
)
from categorytree.exceptions import DuplicateCategoryError, InvalidNameError
from categorytree.rendering import RenderStyle, stream_formatted_string, to_formatted_string
from categorytree.types import EventKind

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Expose the version for programmatic use
try:
    __version__ = version("categorytree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "CategoriesBuilder",
    "Category",
    "CategoryAdapter",
    "CategoryEvent",
    "CategoryListener",
    "CategoryView",
    "DuplicateCategoryError",
    "EventKind",
    "InvalidNameError",
    "ListenerErrorAction",
    "RenderStyle",
    "create",
    "create_builder",
    "find_categories",
    "find_category",
    "get_all_elements",
    "iter_categories",
    "merge_recursively",
    "remove_empty_categories",
    "stream_formatted_string",
    "to_formatted_string",
]
