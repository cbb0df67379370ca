"""
GraphRank Exceptions

Custom exceptions for graph loading, analysis and ranking.
"""


class GraphRankError(Exception):
    """Base exception for graphrank."""

    pass


class InvalidArgumentError(GraphRankError, ValueError):
    """Ranking parameter is outside its valid range."""

    def __init__(self, name: str, value: object, expected: str):
        self.name = name
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid {name}={value!r}: expected {expected}")


class GraphLoadError(GraphRankError):
    """Input graph file could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read graph file {path}: {reason}")


class NodeNotFoundError(GraphRankError, KeyError):
    """Node label does not exist in the graph."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(label)

    def __str__(self) -> str:
        return f"Node not found: {self.label!r}"


class GraphFrozenError(GraphRankError):
    """Graph was mutated after it was frozen."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Graph is frozen, {operation} is not allowed")
