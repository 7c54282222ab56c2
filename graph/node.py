from dataclasses import dataclass, field
from typing import Optional


# ---------------------------------------------------------------------------
# GraphNode
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GraphNode:
    """
    A vertex.  Identity is the integer id: two nodes with the same id are
    the same vertex no matter what their labels say, so the label takes no
    part in equality or hashing.

    Attributes:
        id    : Unique integer identifier.
        label : Optional human-readable name shown by the renderer.
    """

    id:    int
    label: Optional[str] = field(default=None, compare=False)

    @property
    def name(self) -> str:
        """Label if one is set, otherwise the id as text."""
        return self.label if self.label is not None else str(self.id)

    def __repr__(self) -> str:
        if self.label is None:
            return f"GraphNode({self.id})"
        return f"GraphNode({self.id}, {self.label!r})"
