"""Test configuration and fixtures for categorytree."""

import pytest

from categorytree.category.category import Category
from categorytree.category.category_listener import CategoryListener


class CollectingCategoryListener(CategoryListener):
    """Listener that records every event it receives, by kind."""

    def __init__(self):
        self.elements_added_events = []
        self.elements_removed_events = []
        self.child_added_events = []
        self.child_removed_events = []
        self.all_events = []

    def elements_added(self, event):
        self.elements_added_events.append(event)
        self.all_events.append(event)

    def elements_removed(self, event):
        self.elements_removed_events.append(event)
        self.all_events.append(event)

    def child_added(self, event):
        self.child_added_events.append(event)
        self.all_events.append(event)

    def child_removed(self, event):
        self.child_removed_events.append(event)
        self.all_events.append(event)


@pytest.fixture
def listener():
    return CollectingCategoryListener()


@pytest.fixture
def root(listener):
    """A root category named 'Root' with a collecting listener attached."""
    category = Category("Root")
    category.add_category_listener(listener)
    return category


@pytest.fixture
def sample_tree():
    """Create a small tree with elements on several levels.

    Root [0, 1, 2]
    ├── ChildA [10, 11]
    │   ├── ChildA0 []
    │   └── ChildA1 [20]
    └── ChildB []
    """
    root = Category("Root")
    root.add_elements([0, 1, 2])
    child_a = root.add_child("ChildA")
    child_a.add_elements([10, 11])
    child_a.add_child("ChildA0")
    child_a.add_child("ChildA1").add_elements([20])
    root.add_child("ChildB")
    return root
