"""
Tree cleaner: rebuilds a block forest with only the attributes that survive.

Nodes are processed leaf-first (children before their parent). Each node is
classified independently, rebuilt through an injected node factory and never
mutated in place. Per-node problems are recovered locally:

- malformed nodes are skipped together with their subtree
- factory failures drop the node (and its rebuilt subtree)

Both are recorded as NodeFailure entries on the CleanReport; clean_forest()
never raises for them. A node dropped by its factory still counts as changed:
its removed keys were computed before the failure.

The tree is walked with an explicit stack, so nesting depth is not bounded by
the interpreter recursion limit.
"""

import dataclasses
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import structlog

from ..classification.categories import DEFAULT_CATEGORIES, CategoryTable
from ..classification.classifier import classify
from ..errors import MalformedNodeError, ReconstructionError
from ..models.blocks import BlockNode, NodeFactory, create_block
from ..models.options import ZapMode, ZapOptions
from ..models.report import CleanReport, NodeChange, NodeFailure
from ..version import TAXONOMY_VERSION
from .report import kind_label


logger = structlog.get_logger(__name__)

OptionsLike = Union[ZapOptions, Mapping[str, Any]]


def check_node(node: Any) -> None:
    """
    Verify that a node can be cleaned.

    Raises:
        MalformedNodeError: If the node is not a BlockNode, has no kind, or has
            a non-mapping attribute map, non-string keys or non-list children
    """
    client_id = getattr(node, "client_id", None)

    if not isinstance(node, BlockNode):
        raise MalformedNodeError(
            f"Expected a BlockNode, got {type(node).__name__}", client_id=client_id
        )
    if not isinstance(node.kind, str) or not node.kind.strip():
        raise MalformedNodeError("Node has no kind identifier", client_id=client_id)
    if not isinstance(node.attributes, Mapping):
        raise MalformedNodeError(
            f"Attributes must be a mapping, got {type(node.attributes).__name__}",
            client_id=client_id,
        )
    bad_keys = [key for key in node.attributes if not isinstance(key, str)]
    if bad_keys:
        raise MalformedNodeError(
            f"Attribute keys must be strings: {bad_keys!r}", client_id=client_id
        )
    if not isinstance(node.children, (list, tuple)):
        raise MalformedNodeError(
            f"Children must be a list, got {type(node.children).__name__}",
            client_id=client_id,
        )


@dataclasses.dataclass
class _Frame:
    """A node whose children are still being cleaned."""

    node: BlockNode
    path: List[int]
    kept_attributes: Dict[str, Any]
    removed_keys: List[str]
    children: List[BlockNode] = dataclasses.field(default_factory=list)
    next_child: int = 0


class _ZapPass:
    """State of one cleaning invocation (report accumulator)."""

    def __init__(
        self,
        mode: ZapMode,
        options: ZapOptions,
        node_factory: NodeFactory,
        categories: CategoryTable,
    ):
        self.mode = mode
        self.options = options
        self.node_factory = node_factory
        self.categories = categories
        self.report = CleanReport(mode=mode, taxonomy_version=TAXONOMY_VERSION)

    def clean_tree(
        self, root: Any, path: List[int], strict: bool = False
    ) -> Tuple[Optional[BlockNode], List[str]]:
        """
        Clean a node and its subtree without recursion (depth is unbounded).

        Descendant failures are always recorded and dropped. Root failures are
        raised when strict, otherwise recorded like any other node.

        Returns:
            Tuple of (rebuilt root or None if dropped, root removed_keys)

        Raises:
            MalformedNodeError: strict and the root is malformed
            ReconstructionError: strict and the factory rejects the root
        """
        try:
            root_frame = self._enter(root, path)
        except MalformedNodeError as e:
            if strict:
                raise
            self._record_malformed(root, path, e)
            return None, []

        stack = [root_frame]
        rebuilt_root: Optional[BlockNode] = None

        while stack:
            frame = stack[-1]

            if frame.next_child < len(frame.node.children):
                index = frame.next_child
                frame.next_child += 1
                child = frame.node.children[index]
                child_path = frame.path + [index]
                try:
                    stack.append(self._enter(child, child_path))
                except MalformedNodeError as e:
                    self._record_malformed(child, child_path, e)
                continue

            stack.pop()
            try:
                rebuilt = self._leave(frame)
            except ReconstructionError as e:
                if strict and frame is root_frame:
                    raise
                self._record_reconstruction_failure(frame.path, e)
                continue

            if stack:
                stack[-1].children.append(rebuilt)
            else:
                rebuilt_root = rebuilt

        return rebuilt_root, root_frame.removed_keys

    def _enter(self, node: Any, path: List[int]) -> _Frame:
        """Visit and classify a node; its children are cleaned afterwards."""
        self.report.nodes_visited += 1
        check_node(node)

        partition = classify(node.attributes.keys(), self.mode, self.options, self.categories)
        return _Frame(
            node=node,
            path=path,
            kept_attributes={
                key: value
                for key, value in node.attributes.items()
                if key not in partition.removed
            },
            removed_keys=[key for key in node.attributes if key in partition.removed],
        )

    def _leave(self, frame: _Frame) -> BlockNode:
        """
        Record the node's change and rebuild it from its cleaned children.

        The change is recorded even if the factory then fails.
        """
        node = frame.node
        if frame.removed_keys:
            self.report.record_change(
                NodeChange(
                    kind=node.kind,
                    label=kind_label(node.kind),
                    client_id=node.client_id,
                    path=frame.path,
                    attributes_before=len(node.attributes),
                    attributes_after=len(frame.kept_attributes),
                    removed_keys=frame.removed_keys,
                )
            )
            logger.debug(
                "node_zapped",
                kind=node.kind,
                path=frame.path,
                removed_keys=frame.removed_keys,
            )

        try:
            rebuilt = self.node_factory(node.kind, frame.kept_attributes, frame.children)
        except Exception as e:
            raise ReconstructionError(
                f"Failed to rebuild {node.kind}: {e}",
                kind=node.kind,
                removed_keys=frame.removed_keys,
                client_id=node.client_id,
            ) from e

        if isinstance(rebuilt, BlockNode) and rebuilt.client_id is None:
            rebuilt = dataclasses.replace(rebuilt, client_id=node.client_id)
        return rebuilt

    def _record_malformed(self, node: Any, path: List[int], error: MalformedNodeError) -> None:
        kind = getattr(node, "kind", None)
        client_id = getattr(node, "client_id", None)
        self.report.record_failure(
            NodeFailure(
                reason="malformed",
                kind=kind if isinstance(kind, str) and kind else None,
                client_id=client_id if isinstance(client_id, str) else None,
                path=path,
                error=str(error),
            )
        )
        logger.warning("node_skipped_malformed", path=path, error=str(error))

    def _record_reconstruction_failure(self, path: List[int], error: ReconstructionError) -> None:
        self.report.record_failure(
            NodeFailure(
                reason="reconstruction",
                kind=error.kind,
                client_id=error.client_id,
                path=path,
                error=str(error),
                removed_keys=error.removed_keys,
            )
        )
        logger.warning(
            "node_reconstruction_failed",
            kind=error.kind,
            path=path,
            error=str(error),
        )


def _coerce_options(options: OptionsLike) -> ZapOptions:
    if isinstance(options, ZapOptions):
        return options
    return ZapOptions.model_validate(dict(options))


def clean(
    node: BlockNode,
    mode: ZapMode,
    options: OptionsLike,
    node_factory: NodeFactory = create_block,
    categories: CategoryTable = DEFAULT_CATEGORIES,
) -> Tuple[BlockNode, List[str]]:
    """
    Clean a single node tree.

    Malformed or unbuildable descendants are dropped from the rebuilt tree; only
    a problem with the root itself is raised.

    Args:
        node: Root node to clean (never mutated)
        mode: Zap mode
        options: ZapOptions or a dict of option flags
        node_factory: Builds the rebuilt nodes (default: create_block)
        categories: Category table (default: core block taxonomy)

    Returns:
        Tuple of (cleaned_node, removed_keys of the root node)

    Raises:
        MalformedNodeError: If the root node is malformed
        ReconstructionError: If the node factory rejects the root node
    """
    zap = _ZapPass(ZapMode(mode), _coerce_options(options), node_factory, categories)
    return zap.clean_tree(node, [], strict=True)


def clean_forest(
    nodes: Sequence[BlockNode],
    mode: ZapMode,
    options: OptionsLike,
    node_factory: NodeFactory = create_block,
    categories: CategoryTable = DEFAULT_CATEGORIES,
) -> Tuple[List[BlockNode], CleanReport]:
    """
    Clean every node of a forest and aggregate a report.

    The returned forest holds one rebuilt node per valid input node, in input
    order, each carrying the client_id of the node it replaces. Malformed and
    unbuildable nodes are omitted and listed in report.failures.

    Args:
        nodes: Top-level nodes (e.g. the inner blocks of the zapper container)
        mode: Zap mode
        options: ZapOptions or a dict of option flags
        node_factory: Builds the rebuilt nodes (default: create_block)
        categories: Category table (default: core block taxonomy)

    Returns:
        Tuple of (cleaned_nodes, CleanReport)

    Examples:
        >>> forest = [BlockNode("core/paragraph", {"content": "hi", "className": "x"})]
        >>> cleaned, report = clean_forest(forest, ZapMode.MEGA, ZapOptions())
        >>> cleaned[0].attributes, report.attributes_removed
        ({'content': 'hi'}, 1)
    """
    zap = _ZapPass(ZapMode(mode), _coerce_options(options), node_factory, categories)

    logger.info(
        "forest_zap_started",
        mode=zap.mode.value,
        top_level_blocks=len(nodes),
        selected_categories=[c.value for c in zap.options.selected_categories()],
        keep_media=zap.options.keep_media,
    )

    cleaned: List[BlockNode] = []
    for index, node in enumerate(nodes):
        rebuilt, _ = zap.clean_tree(node, [index])
        if rebuilt is not None:
            cleaned.append(rebuilt)

    report = zap.report
    logger.info(
        "forest_zap_completed",
        mode=zap.mode.value,
        nodes_visited=report.nodes_visited,
        nodes_changed=report.nodes_changed,
        attributes_removed=report.attributes_removed,
        nodes_skipped=report.nodes_skipped,
    )

    return cleaned, report
