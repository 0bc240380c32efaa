"""Exceptions raised while resolving and loading the content graph."""


class ContentLookupError(LookupError):
    """Base class for failures resolving a codename against the item lookup."""


class MissingItemError(ContentLookupError, KeyError):
    """Raised when a referenced codename is absent from the item lookup."""

    def __init__(self, codename: str) -> None:
        """Initialize the error with the codename that failed to resolve."""
        super().__init__(codename)
        self.codename = codename

    def __str__(self) -> str:
        """Return a readable message instead of the KeyError repr."""
        return f"Content item not found: {self.codename!r}"


class ItemTypeMismatchError(ContentLookupError):
    """Raised when a codename resolves to an item of an unexpected variant."""

    def __init__(self, codename: str, expected: str, actual: str) -> None:
        """Initialize the error with the expected and actual item types."""
        super().__init__(
            f"Content item {codename!r} is of type {actual!r}, expected {expected!r}"
        )
        self.codename = codename
        self.expected = expected
        self.actual = actual


class ContentModelError(ValueError):
    """Raised when a raw content item cannot be mapped to a known variant."""


class CyclicReferenceError(ContentLookupError):
    """Raised when embedded items reference each other in a loop."""

    def __init__(self, path: tuple[str, ...]) -> None:
        """Initialize the error with the chain of codenames forming the loop."""
        super().__init__(f"Cyclic item reference: {' -> '.join(path)}")
        self.path = path
