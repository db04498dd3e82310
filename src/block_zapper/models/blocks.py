"""
Block tree model.

A BlockNode is one unit of structured content: an opaque kind identifier, a flat
attribute mapping and an ordered list of child nodes. The engine never interprets
the kind or the attribute values; it only decides which attribute keys survive.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class BlockNode:
    """
    One node of a block tree.

    Attributes:
        kind: Block type identifier (e.g. "core/paragraph"). None or "" marks the
            node as malformed.
        attributes: Attribute key -> opaque value
        children: Ordered child nodes, each owned by exactly this parent
        client_id: Opaque identity token of the host document, carried through
            cleaning untouched so the caller can match replacements to originals
    """

    kind: Optional[str]
    attributes: Mapping[str, Any] = field(default_factory=dict)
    children: List["BlockNode"] = field(default_factory=list)
    client_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BlockNode":
        """
        Build a node tree from a Gutenberg-style dict.

        Accepts ``name``/``kind``, ``attributes`` and ``innerBlocks``/``children``.
        Parsing is lenient: shape problems (missing kind, a list where
        the attribute map should be, a non-dict child) are kept as-is so that the
        cleaner can report them per node instead of rejecting the whole tree.

        Args:
            data: Raw block dict

        Returns:
            BlockNode (possibly malformed)
        """
        kind = data.get("name", data.get("kind"))
        attributes = data.get("attributes", {})
        raw_children = data.get("innerBlocks", data.get("children", []))

        if isinstance(raw_children, list):
            children = [
                cls.from_dict(child) if isinstance(child, Mapping) else child
                for child in raw_children
            ]
        else:
            children = raw_children

        return cls(
            kind=kind,
            attributes=attributes,
            children=children,
            client_id=data.get("clientId", data.get("client_id")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to a Gutenberg-style dict."""
        data: Dict[str, Any] = {
            "name": self.kind,
            "attributes": dict(self.attributes),
            "innerBlocks": [child.to_dict() for child in self.children],
        }
        if self.client_id is not None:
            data["clientId"] = self.client_id
        return data


# Host seam: builds a new node of the given kind from cleaned attributes/children.
NodeFactory = Callable[[str, Dict[str, Any], List[BlockNode]], BlockNode]


def create_block(
    kind: str, attributes: Dict[str, Any], children: List[BlockNode]
) -> BlockNode:
    """Default node factory: a plain in-memory BlockNode."""
    return BlockNode(kind=kind, attributes=dict(attributes), children=list(children))


def parse_forest(data: Any) -> List[Any]:
    """
    Parse a JSON-decoded forest (list of block dicts).

    Non-dict entries are passed through unchanged and later reported as malformed.

    Raises:
        ValueError: If data is not a list
    """
    if not isinstance(data, list):
        raise ValueError(
            f"Expected a list of blocks, got {type(data).__name__}"
        )
    return [
        BlockNode.from_dict(item) if isinstance(item, Mapping) else item
        for item in data
    ]
