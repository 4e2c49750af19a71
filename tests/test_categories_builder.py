"""Unit tests for the CategoriesBuilder class."""

import pytest

from categorytree.categories_builder import CategoriesBuilder
from categorytree.category.category import Category
from categorytree.exceptions import InvalidNameError


def test_builder_creates_root():
    category = CategoriesBuilder("Root").build()
    assert isinstance(category, Category)
    assert category.name == "Root"
    assert category.parent is None


def test_builder_none_name_raises():
    with pytest.raises(InvalidNameError):
        CategoriesBuilder(None)
    with pytest.raises(InvalidNameError):
        CategoriesBuilder("Root").get(None)


def test_add_and_add_all_chain():
    builder = CategoriesBuilder("Root")
    assert builder.add(1).add(2).add_all([2, 3]).add_all(None) is builder
    assert builder.build().get_elements() == [1, 2, 3]


def test_add_single_iterable_element():
    """``add`` adds its argument as one element, even if it is iterable."""
    category = CategoriesBuilder("Root").add("abc").add((1, 2)).build()
    assert category.get_elements() == ["abc", (1, 2)]


def test_get_creates_children_on_demand():
    builder = CategoriesBuilder("Root")
    builder.get("A").get("B").add("x")
    builder.get("A").add("y")

    root = builder.build()
    child_a = root.get_child("A")
    assert [child.name for child in root.get_children()] == ["A"]
    assert child_a.get_elements() == ["y"]
    assert child_a.get_child("B").get_elements() == ["x"]


def test_get_returns_builder_for_existing_child():
    root = Category("Root")
    existing = root.add_child("A")
    builder = CategoriesBuilder.for_category(root)
    assert builder.get("A").build() is existing
    assert builder.build() is root


def test_for_category_requires_category():
    with pytest.raises(TypeError):
        CategoriesBuilder.for_category("Root")


def test_builder_wraps_given_category():
    root = Category("Root")
    builder = CategoriesBuilder(category=root)
    assert builder.build() is root
    assert CategoriesBuilder("Ignored", category=root).build() is root
    with pytest.raises(TypeError):
        CategoriesBuilder(category="Root")


def test_builder_merges_ancestor_into_descendant():
    root = Category("Root")
    root.add_elements([0])
    child = root.add_child("A")
    child.add_elements([1])

    CategoriesBuilder.for_category(child).merge_recursively(root)

    assert child.get_elements() == [1, 0]
    assert child.get_child("A").get_elements() == [1]
    assert child.get_child("A").get_children() == []


def test_builder_changes_fire_events(listener):
    root = Category("Root")
    root.add_category_listener(listener)

    CategoriesBuilder.for_category(root).get("A").add(1)

    assert len(listener.child_added_events) == 1
    assert len(listener.elements_added_events) == 1


def test_add_if_uncategorized():
    builder = CategoriesBuilder("Root")
    builder.get("Fruit").add_all(["apple", "pear"])
    builder.get("Fruit").get("Citrus").add("lemon")

    builder.add_if_uncategorized("Other", ["pear", "bread", "lemon", "bread", "milk"])

    root = builder.build()
    assert root.get_child("Other").get_elements() == ["bread", "milk"]


def test_add_if_uncategorized_everything_categorized():
    builder = CategoriesBuilder("Root")
    builder.get("Fruit").add("apple")

    builder.add_if_uncategorized("Other", ["apple"])

    assert builder.build().get_child("Other") is None


def test_add_if_uncategorized_existing_child():
    builder = CategoriesBuilder("Root")
    builder.get("Other").add("x")

    builder.add_if_uncategorized("Other", ["x", "y"])

    assert builder.build().get_child("Other").get_elements() == ["x", "y"]


def test_add_if_uncategorized_none_name_raises():
    with pytest.raises(InvalidNameError):
        CategoriesBuilder("Root").add_if_uncategorized(None, [1])


def test_merge_recursively():
    other = Category("Other")
    other.add_child("A").add_elements([1])
    other.add_elements([0])

    builder = CategoriesBuilder("Root").add(5)
    assert builder.merge_recursively(other) is builder

    root = builder.build()
    assert root.name == "Root"
    assert root.get_elements() == [5, 0]
    assert root.get_child("A").get_elements() == [1]


def test_builder_repr():
    assert repr(CategoriesBuilder("Root").get("A")) == "CategoriesBuilder(Category('/Root/A'))"
