"""
Report models for a zap pass.

A CleanReport is built fresh for every clean_forest() call and is never retained
by the engine. It feeds user-facing messaging (see cleaning.report.format_report).
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .options import ZapMode


FailureReason = Literal["malformed", "reconstruction"]


class NodeChange(BaseModel):
    """
    Detail for one node that lost at least one attribute.
    """

    kind: str = Field(description="Block kind identifier, e.g. 'core/paragraph'")
    label: str = Field(description="Display label (kind without the core/ namespace)")
    client_id: Optional[str] = Field(default=None, description="Opaque identity token")
    path: List[int] = Field(
        default_factory=list,
        description="Child indices from the forest root down to this node",
    )
    attributes_before: int = Field(ge=0, description="Attribute count before cleaning")
    attributes_after: int = Field(ge=0, description="Attribute count after cleaning")
    removed_keys: List[str] = Field(description="Removed keys, in original attribute order")

    @property
    def removed_count(self) -> int:
        return len(self.removed_keys)


class NodeFailure(BaseModel):
    """
    A node that was dropped from the rebuilt forest.
    """

    reason: FailureReason = Field(description="'malformed' or 'reconstruction'")
    kind: Optional[str] = Field(default=None, description="Kind, if the node had one")
    client_id: Optional[str] = Field(default=None, description="Opaque identity token")
    path: List[int] = Field(default_factory=list, description="Child indices to this node")
    error: str = Field(description="Human-readable error message")
    removed_keys: List[str] = Field(
        default_factory=list,
        description="Keys that would have been removed (reconstruction failures only)",
    )


class CleanReport(BaseModel):
    """
    Aggregated outcome of a zap pass over a forest.

    Counting rules:
    - nodes_visited counts every node reached, malformed ones included (their
      subtrees are not walked)
    - nodes_changed / attributes_removed count every classified node with
      removed keys, including nodes later dropped by the node factory
    """

    mode: ZapMode = Field(description="Zap mode used for this pass")
    taxonomy_version: str = Field(description="Category table version")
    nodes_visited: int = Field(default=0, ge=0)
    nodes_changed: int = Field(default=0, ge=0)
    attributes_removed: int = Field(default=0, ge=0)
    changes: List[NodeChange] = Field(
        default_factory=list, description="Changed nodes, leaf-first (post-order)"
    )
    failures: List[NodeFailure] = Field(
        default_factory=list, description="Skipped nodes, in traversal order"
    )

    @property
    def nodes_skipped(self) -> int:
        return len(self.failures)

    def record_change(self, change: NodeChange) -> None:
        """Add a changed node and update the totals."""
        self.changes.append(change)
        self.nodes_changed += 1
        self.attributes_removed += change.removed_count

    def record_failure(self, failure: NodeFailure) -> None:
        """Add a skipped node (totals are updated by record_change only)."""
        self.failures.append(failure)


class ForestStats(BaseModel):
    """Size of a forest, as shown on the container's status panel."""

    top_level_blocks: int = Field(ge=0)
    total_blocks: int = Field(ge=0)
    top_level_attributes: int = Field(ge=0, description="Attributes of top-level blocks only")
    total_attributes: int = Field(ge=0, description="Attributes of every block in the tree")
