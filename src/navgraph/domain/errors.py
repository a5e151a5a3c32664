class PathError(Exception):
    """Base class for failures raised by graph validation and path search."""


class InvalidIndexError(PathError, IndexError):
    """A start/goal index or a neighbor reference is out of bounds."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"invalid vertex index {index}")


class CyclicReferenceError(PathError):
    """A vertex lists itself as its own neighbor."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"vertex {index} lists itself as a neighbor")


class EmptyGraphError(PathError):
    def __init__(self):
        super().__init__("graph has no vertices")
