"""Exception hierarchy shared by the path builder, the sum type and the emitters."""


class UnionTreeError(Exception):
    """Base for all union_tree errors."""


class InvalidCountError(UnionTreeError, ValueError):
    """Raised when the number of alternatives is not a positive integer."""


class IndexOutOfRangeError(UnionTreeError, IndexError):
    """Raised when a selected alternative does not lie in [0, count)."""


class MalformedInvocationError(UnionTreeError, ValueError):
    """Raised when macro argument text cannot be parsed into (count, n, expr)."""


class UnknownDialectError(UnionTreeError, KeyError):
    """Raised when an emission dialect name is not registered."""

    def __str__(self) -> str:
        # KeyError repr-quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class ShapeMismatchError(UnionTreeError):
    """Raised when a wrapped value does not follow the tree shape for its count."""


class MalformedPathError(UnionTreeError, ValueError):
    """Raised when a path element is neither LEFT/0 nor RIGHT/1."""


class ConfigurationError(UnionTreeError, ValueError):
    """Raised when EmitConfig options are invalid."""
