"""
Block Zapper: strip presentation metadata from block trees.

Public API:
- classify(): keep/remove partition of one node's attribute keys
- clean() / clean_forest(): rebuild a block tree with cleaned attributes
- format_report(): human-readable summary of a zap pass
"""

from .classification import DEFAULT_CATEGORIES, AttributePartition, classify
from .cleaning import clean, clean_forest, forest_stats, format_report
from .errors import MalformedNodeError, ReconstructionError, ZapError
from .models import (
    DEFAULT_ZAP_OPTIONS,
    AttributeCategory,
    BlockNode,
    CleanReport,
    ZapMode,
    ZapOptions,
)
from .version import ENGINE_VERSION, TAXONOMY_VERSION

__version__ = ENGINE_VERSION

__all__ = [
    "DEFAULT_CATEGORIES",
    "AttributePartition",
    "classify",
    "clean",
    "clean_forest",
    "forest_stats",
    "format_report",
    "ZapError",
    "MalformedNodeError",
    "ReconstructionError",
    "DEFAULT_ZAP_OPTIONS",
    "AttributeCategory",
    "BlockNode",
    "CleanReport",
    "ZapMode",
    "ZapOptions",
    "ENGINE_VERSION",
    "TAXONOMY_VERSION",
]
