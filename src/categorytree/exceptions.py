from typing import Optional


class InvalidNameError(ValueError):
    """
    Exception raised when a category name is missing, empty or contains the path separator.

    Category names identify children within their parent, so every category needs a
    non-empty string name. Names are also the segments of category paths, so they may
    not contain the separator ``/``. The check happens before any state is changed.

    Attributes:
        name (Optional[str]): The rejected name.

    Example:
        >>> error = InvalidNameError(None)
        >>> str(error)
        'The name may not be None'
        >>> str(InvalidNameError(""))
        'The name may not be empty'
        >>> str(InvalidNameError("a/b", "/"))
        "The name may not contain '/': 'a/b'"
    """

    def __init__(self, name: Optional[str], separator: Optional[str] = None) -> None:
        """
        Initialize the exception for the rejected name.

        Args:
            name (Optional[str]): The name that was passed in.
            separator (Optional[str]): The path separator, if the name was rejected
                because it contains it.
        """
        self.name = name
        if name is None:
            message = "The name may not be None"
        elif not name:
            message = "The name may not be empty"
        else:
            message = f"The name may not contain {separator!r}: {name!r}"
        super().__init__(message)


class DuplicateCategoryError(ValueError):
    """
    Exception raised when a category would get two children with the same name.

    This is raised when a category is attached to a parent that already holds a child
    with the same name, for example by assigning ``child.parent`` directly. Using
    ``Category.add_child`` never raises it, because an existing child is returned instead.

    Attributes:
        name (str): The name that is already taken.
        parent_name (str): The name of the parent category.

    Example:
        >>> error = DuplicateCategoryError("ChildA", "Root")
        >>> str(error)
        "Category 'Root' already has a child named 'ChildA'"
    """

    def __init__(self, name: str, parent_name: str) -> None:
        """
        Initialize the exception with the conflicting names.

        Args:
            name (str): The name of the child that could not be attached.
            parent_name (str): The name of the parent that already has such a child.
        """
        self.name = name
        self.parent_name = parent_name
        super().__init__(f"Category {parent_name!r} already has a child named {name!r}")
