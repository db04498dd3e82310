"""
Tree cleaning: rebuild block forests with cleaned attributes and report on it.
"""

from .cleaner import check_node, clean, clean_forest
from .report import format_report, forest_stats, kind_label

__all__ = [
    "check_node",
    "clean",
    "clean_forest",
    "format_report",
    "forest_stats",
    "kind_label",
]
