"""Text rendering of category trees for diagnostics."""

from enum import Enum
from typing import Iterator, Optional

from anytree import AsciiStyle, ContRoundStyle, ContStyle, DoubleStyle, Node, RenderTree
from anytree.render import AbstractStyle

from categorytree.category.category import Category


class RenderStyle(str, Enum):
    """Line drawing style used when rendering a category tree.

    Values:
        CONT: Unicode box drawing lines, like the Unix 'tree' command (default)
        ASCII: Plain ASCII lines
        ROUND: Unicode lines with rounded corners
        DOUBLE: Unicode double lines
    """

    CONT = "cont"
    ASCII = "ascii"
    ROUND = "round"
    DOUBLE = "double"

    def to_anytree_style(self) -> AbstractStyle:
        styles = {
            RenderStyle.CONT: ContStyle,
            RenderStyle.ASCII: AsciiStyle,
            RenderStyle.ROUND: ContRoundStyle,
            RenderStyle.DOUBLE: DoubleStyle,
        }
        return styles[self]()


def _build_display_tree(category: Category, parent: Optional[Node] = None) -> Node:
    """Mirror a category tree as plain anytree nodes, with elements as leaves."""
    node = Node(f"{category.name}/", parent=parent)
    for element in category.get_elements():
        Node(str(element), parent=node)
    for child in category.get_children():
        _build_display_tree(child, node)
    return node


def stream_formatted_string(
    category: Optional[Category], style: RenderStyle = RenderStyle.CONT
) -> Iterator[str]:
    """Generate a tree representation of a category one line at a time.

    Categories are shown with a trailing slash. The elements of a category are listed
    before its child categories. The exact format is meant for humans and may change.

    Args:
        category: The category to render. None renders as ``null``.
        style: The line drawing style. Defaults to CONT.

    Yields:
        Lines of the tree representation.

    Example:
        >>> from categorytree.categories import create
        >>> root = create("Root")
        >>> _ = root.add_elements([1])
        >>> _ = root.add_child("Child").add_elements(["a", "b"])
        >>> for line in stream_formatted_string(root):
        ...     print(line)
        Root/
        ├── 1
        └── Child/
            ├── a
            └── b
    """
    if category is None:
        yield "null"
        return
    display_tree = _build_display_tree(category)
    for row in RenderTree(display_tree, style=RenderStyle(style).to_anytree_style()):
        lines = row.node.name.splitlines() or [""]
        yield f"{row.pre}{lines[0]}"
        for line in lines[1:]:
            yield f"{row.fill}{line}"


def to_formatted_string(category: Optional[Category], style: RenderStyle = RenderStyle.CONT) -> str:
    """Get a complete string representation of a category tree.

    Returns:
        The tree representation, one line per category or element, ending with a newline.
    """
    return "\n".join(stream_formatted_string(category, style)) + "\n"
