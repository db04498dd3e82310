"""
Attribute classification: category taxonomy and the keep/remove policy.
"""

from .categories import (
    DEFAULT_CATEGORIES,
    CategoryTable,
    build_category_table,
    categories_for_key,
    overlapping_keys,
)
from .classifier import AttributePartition, classify, surviving_categories

__all__ = [
    "DEFAULT_CATEGORIES",
    "CategoryTable",
    "build_category_table",
    "categories_for_key",
    "overlapping_keys",
    "AttributePartition",
    "classify",
    "surviving_categories",
]
