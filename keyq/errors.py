"""exception kinds raised by keyq. all of them propagate straight to the caller."""


class KeyqError(Exception):
    """base class for every error raised by the collection engine"""


class InvalidArgumentKind(KeyqError, TypeError):
    """a selector or predicate argument is not a callable, a path string or a match template"""

    def __init__(self, argument, expected: str = "callable or property path"):
        self.argument = argument
        super().__init__(f"expected {expected}, got {type(argument).__name__}: {argument!r}")


class FieldAccessError(KeyqError, KeyError):
    """a property path ran into a missing field or a value that cannot be indexed"""

    def __init__(self, path: str, segment: str, value=None):
        self.path = path
        self.segment = segment
        self.value = value
        super().__init__(path, segment)

    def __str__(self) -> str:
        return f"cannot read '{self.segment}' of path '{self.path}' from {type(self.value).__name__}"


class NoRootFound(KeyqError, ValueError):
    """to_tree could not infer any root, the data is cyclic or fully self-referential"""


class EmptyCollectionAccess(KeyqError, LookupError):
    """a value was requested from an empty Maybe"""
