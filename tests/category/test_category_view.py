"""Unit tests for the read-only CategoryView."""

import pytest

from categorytree.category.category import Category
from categorytree.category.category_view import CategoryView


def test_view_exposes_read_side(sample_tree):
    view = sample_tree.as_view()
    assert view.name == "Root"
    assert str(view) == "Root"
    assert view.get_elements() == [0, 1, 2]
    assert [child.name for child in view.get_children()] == ["ChildA", "ChildB"]
    assert all(isinstance(child, CategoryView) for child in view.get_children())
    assert view.get_child("ChildA").get_child("ChildA1").get_elements() == [20]
    assert view.get_child("Missing") is None


def test_view_has_no_mutators(sample_tree):
    view = sample_tree.as_view()
    for mutator in ("add_child", "remove_child", "remove_all_children", "add_elements", "remove_elements"):
        assert not hasattr(view, mutator)
    with pytest.raises(AttributeError):
        view.parent = None


def test_view_reflects_changes(sample_tree):
    view = sample_tree.as_view()
    sample_tree.add_elements([3])
    sample_tree.add_child("ChildC")
    assert view.get_elements() == [0, 1, 2, 3]
    assert view.get_child("ChildC") is not None


def test_listeners_through_view(sample_tree, listener):
    view = sample_tree.as_view()
    view.add_category_listener(listener)

    sample_tree.get_child("ChildB").add_elements(["x"])
    assert len(listener.elements_added_events) == 1
    assert listener.elements_added_events[0].source is sample_tree.get_child("ChildB")

    view.remove_category_listener(listener)
    sample_tree.add_elements(["y"])
    assert len(listener.elements_added_events) == 1


def test_view_equality(sample_tree):
    view = sample_tree.as_view()
    assert view == sample_tree
    assert sample_tree == view
    assert view == sample_tree.as_view()
    assert view != Category("Root")
    assert view != "Root"


def test_view_requires_category():
    with pytest.raises(TypeError):
        CategoryView("Root")


def test_view_repr(sample_tree):
    assert repr(sample_tree.as_view()) == "CategoryView(Category('/Root'))"
