"""
Human-readable reporting for zap passes.

Produces the status line shown on the container panel and the summary message
displayed after a zap.
"""

from typing import Any, List, Mapping, Sequence

from ..models.blocks import BlockNode
from ..models.report import CleanReport, ForestStats


CORE_NAMESPACE = "core/"

EMPTY_FOREST_MESSAGE = "No blocks to zap! Add some blocks inside this container first."
ALREADY_CLEAN_MESSAGE = "All blocks are already clean! No custom properties found to remove."


def kind_label(kind: str) -> str:
    """
    Display label for a block kind: the core/ namespace is dropped.

    Examples:
        >>> kind_label("core/paragraph")
        'paragraph'
        >>> kind_label("acme/hero")
        'acme/hero'
    """
    if kind.startswith(CORE_NAMESPACE):
        return kind[len(CORE_NAMESPACE):]
    return kind


def format_report(report: CleanReport) -> str:
    """
    Format a CleanReport as a one-paragraph summary.

    Args:
        report: Report returned by clean_forest()

    Returns:
        Summary message
    """
    if report.nodes_visited == 0:
        return EMPTY_FOREST_MESSAGE

    if report.nodes_changed == 0:
        message = ALREADY_CLEAN_MESSAGE
    else:
        details = ", ".join(
            f"{change.label}: {change.removed_count} props removed"
            for change in report.changes
        )
        message = (
            f"ZAP COMPLETE! Removed {report.attributes_removed} properties from "
            f"{report.nodes_changed} block(s). Details: {details}"
        )

    if report.failures:
        skipped = ", ".join(
            f"{kind_label(failure.kind) if failure.kind else 'unknown block'} ({failure.reason})"
            for failure in report.failures
        )
        message += f" Skipped {report.nodes_skipped} block(s): {skipped}"

    return message


def forest_stats(nodes: Sequence[Any]) -> ForestStats:
    """
    Count blocks and attributes in a forest.

    top_level_attributes matches the container panel (top-level blocks only);
    total_attributes covers the whole tree.

    Entries that are not BlockNodes are ignored; a node whose attributes are not
    a mapping counts as a block with zero attributes.

    Args:
        nodes: Top-level nodes

    Returns:
        ForestStats
    """
    total_blocks = 0
    total_attributes = 0
    stack: List[Any] = list(nodes)

    while stack:
        node = stack.pop()
        if not isinstance(node, BlockNode):
            continue
        total_blocks += 1
        if isinstance(node.attributes, Mapping):
            total_attributes += len(node.attributes)
        if isinstance(node.children, (list, tuple)):
            stack.extend(node.children)

    top_level = [node for node in nodes if isinstance(node, BlockNode)]

    return ForestStats(
        top_level_blocks=len(top_level),
        top_level_attributes=sum(
            len(node.attributes) for node in top_level
            if isinstance(node.attributes, Mapping)
        ),
        total_blocks=total_blocks,
        total_attributes=total_attributes,
    )
