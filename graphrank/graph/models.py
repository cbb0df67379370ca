"""
Graph Store

Directed multigraph keyed by string labels.

Nodes are kept in first-seen order and mapped to dense integer indexes so
that ranking code can store scores in flat arrays. Edges get monotonically
increasing integer ids; parallel edges and self-loops are allowed.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from graphrank.exceptions import GraphFrozenError, NodeNotFoundError


@dataclass(frozen=True, slots=True)
class Edge:
    """
    Directed edge between two node labels.

    Attributes:
        id: Unique edge id, assigned in creation order
        source: Source node label
        target: Target node label
    """

    id: int
    source: str
    target: str


class NodeIndex:
    """
    Bidirectional label <-> dense index lookup table.

    Indexes are assigned 0..N-1 in insertion order and never reused.
    """

    def __init__(self) -> None:
        self._index_by_label: dict[str, int] = {}
        self._labels: list[str] = []

    def add(self, label: str) -> int:
        """Return the index of ``label``, registering it on first reference."""
        index = self._index_by_label.get(label)
        if index is None:
            index = len(self._labels)
            self._index_by_label[label] = index
            self._labels.append(label)
        return index

    def index_of(self, label: str) -> int:
        try:
            return self._index_by_label[label]
        except KeyError:
            raise NodeNotFoundError(label) from None

    def label_of(self, index: int) -> str:
        return self._labels[index]

    def labels(self) -> tuple[str, ...]:
        return tuple(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._index_by_label

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)


class DirectedMultigraph:
    """
    In-memory directed multigraph.

    Invariants:
    - every edge's endpoints exist as nodes
    - edge ids are unique and equal to their creation position (0, 1, 2, ...)
    - node iteration follows first-seen order

    The graph is built once and then frozen; mutating a frozen graph raises
    GraphFrozenError.
    """

    def __init__(self) -> None:
        self._nodes = NodeIndex()
        self._edges: list[Edge] = []
        self._out_edges: list[list[Edge]] = []
        self._in_edges: list[list[Edge]] = []
        self._frozen = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_node(self, label: str) -> int:
        """
        Add a node (idempotent).

        Args:
            label: Node label

        Returns:
            Dense index of the node

        Raises:
            GraphFrozenError: If the graph is frozen
        """
        self._check_mutable("add_node")
        return self._ensure_node(label)

    def add_edge(self, source: str, target: str) -> int:
        """
        Add a directed edge, creating missing endpoints.

        Args:
            source: Source node label
            target: Target node label

        Returns:
            Id of the new edge

        Raises:
            GraphFrozenError: If the graph is frozen
        """
        self._check_mutable("add_edge")
        source_index = self._ensure_node(source)
        target_index = self._ensure_node(target)

        edge = Edge(id=len(self._edges), source=source, target=target)
        self._edges.append(edge)
        self._out_edges[source_index].append(edge)
        self._in_edges[target_index].append(edge)
        return edge.id

    def freeze(self) -> "DirectedMultigraph":
        """Mark the graph immutable. Returns self for chaining."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self, operation: str) -> None:
        if self._frozen:
            raise GraphFrozenError(operation)

    def _ensure_node(self, label: str) -> int:
        index = self._nodes.add(label)
        if index == len(self._out_edges):
            self._out_edges.append([])
            self._in_edges.append([])
        return index

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def nodes(self) -> Iterator[str]:
        """Iterate node labels in first-seen order."""
        return iter(self._nodes)

    def edges(self) -> Iterator[Edge]:
        """Iterate edges in id order."""
        return iter(self._edges)

    def out_edges(self, label: str) -> list[Edge]:
        """Outgoing edges of ``label`` in creation order."""
        return list(self._out_edges[self._nodes.index_of(label)])

    def in_edges(self, label: str) -> list[Edge]:
        """Incoming edges of ``label`` in creation order."""
        return list(self._in_edges[self._nodes.index_of(label)])

    def out_degree(self, label: str) -> int:
        return len(self._out_edges[self._nodes.index_of(label)])

    def in_degree(self, label: str) -> int:
        return len(self._in_edges[self._nodes.index_of(label)])

    def index_of(self, label: str) -> int:
        return self._nodes.index_of(label)

    def label_of(self, index: int) -> str:
        return self._nodes.label_of(index)

    def labels(self) -> tuple[str, ...]:
        """All labels, position i holding the node with dense index i."""
        return self._nodes.labels()

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def __contains__(self, label: object) -> bool:
        return label in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"DirectedMultigraph(nodes={self.node_count}, edges={self.edge_count}, frozen={self._frozen})"
