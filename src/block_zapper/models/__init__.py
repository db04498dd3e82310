# Data models for the block zapper engine

from .blocks import BlockNode, NodeFactory, create_block, parse_forest
from .options import (
    DEFAULT_ZAP_OPTIONS,
    PROTECTED_CATEGORIES,
    AttributeCategory,
    ZapMode,
    ZapOptions,
)
from .report import CleanReport, ForestStats, NodeChange, NodeFailure

__all__ = [
    "BlockNode",
    "NodeFactory",
    "create_block",
    "parse_forest",
    "AttributeCategory",
    "PROTECTED_CATEGORIES",
    "ZapMode",
    "ZapOptions",
    "DEFAULT_ZAP_OPTIONS",
    "CleanReport",
    "ForestStats",
    "NodeChange",
    "NodeFailure",
]
