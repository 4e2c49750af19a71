"""Unit tests for rendering category trees as text."""

import pytest

from categorytree.category.category import Category
from categorytree.rendering import RenderStyle, stream_formatted_string, to_formatted_string


def test_to_formatted_string(sample_tree):
    expected = (
        "Root/\n"
        "├── 0\n"
        "├── 1\n"
        "├── 2\n"
        "├── ChildA/\n"
        "│   ├── 10\n"
        "│   ├── 11\n"
        "│   ├── ChildA0/\n"
        "│   └── ChildA1/\n"
        "│       └── 20\n"
        "└── ChildB/\n"
    )
    assert to_formatted_string(sample_tree) == expected


def test_ascii_style():
    root = Category("Root")
    root.add_elements(["a"])
    root.add_child("Child").add_elements(["b"])

    expected = "Root/\n|-- a\n+-- Child/\n    +-- b\n"
    assert to_formatted_string(root, RenderStyle.ASCII) == expected
    assert to_formatted_string(root, "ascii") == expected


def test_single_category():
    assert to_formatted_string(Category("Root")) == "Root/\n"


def test_none_renders_as_null():
    assert to_formatted_string(None) == "null\n"
    assert list(stream_formatted_string(None)) == ["null"]


def test_multiline_element():
    root = Category("Root")
    root.add_elements(["first\nsecond", "last"])
    assert list(stream_formatted_string(root)) == [
        "Root/",
        "├── first",
        "│   second",
        "└── last",
    ]


def test_elements_rendered_with_str():
    class Item:
        def __str__(self):
            return "item"

    root = Category("Root")
    root.add_elements([Item()])
    assert list(stream_formatted_string(root)) == ["Root/", "└── item"]


@pytest.mark.parametrize("style", list(RenderStyle))
def test_every_style_renders_every_node(sample_tree, style):
    lines = list(stream_formatted_string(sample_tree, style))
    assert len(lines) == 11
    assert lines[0] == "Root/"


def test_rendering_does_not_modify_tree(sample_tree, listener):
    sample_tree.add_category_listener(listener)
    to_formatted_string(sample_tree)
    assert listener.all_events == []
    assert sample_tree.get_child("ChildA").get_elements() == [10, 11]
