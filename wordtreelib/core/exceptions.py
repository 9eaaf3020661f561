"""Exception types raised by the tree container."""


class TreeError(Exception):
    """Base class for errors raised by BSTree operations."""
    pass


class NullEntryError(TreeError, ValueError):
    """Raised when None is passed where an entry is required.

    Subclasses ValueError so callers that only care about bad arguments
    can catch the builtin type.
    """
    pass


class EmptyTreeError(TreeError, LookupError):
    """Raised when the root of an empty tree is requested."""
    pass
