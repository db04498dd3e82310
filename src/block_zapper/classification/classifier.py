"""
Attribute classifier: decides which attribute keys survive a zap.

Policy:
1. ESSENTIAL always survives
2. MEDIA survives iff options.keep_media
3. Every other category never survives in MEGA mode, and survives in SELECTIVE
   mode iff its removal flag is False
4. A key is kept if ANY of its categories survives, or if it belongs to no
   category at all (unknown keys are never dropped)

The function is pure: the category table and options are explicit inputs and
nothing is cached between calls.
"""

from typing import AbstractSet, FrozenSet, Iterable, NamedTuple

from ..models.options import PROTECTED_CATEGORIES, AttributeCategory, ZapMode, ZapOptions
from .categories import DEFAULT_CATEGORIES, CategoryTable


class AttributePartition(NamedTuple):
    """Result of classify(): kept | removed == input keys, kept & removed == {}."""

    kept: FrozenSet[str]
    removed: FrozenSet[str]


def surviving_categories(
    mode: ZapMode, options: ZapOptions
) -> FrozenSet[AttributeCategory]:
    """
    Compute the categories whose keys survive a pass.

    Args:
        mode: Zap mode
        options: Removal flags and keep_media

    Returns:
        Frozen set of surviving categories

    Examples:
        >>> sorted(c.value for c in surviving_categories(ZapMode.MEGA, ZapOptions()))
        ['essential', 'media']
    """
    surviving = {AttributeCategory.ESSENTIAL}
    if options.keep_media:
        surviving.add(AttributeCategory.MEDIA)

    if mode == ZapMode.SELECTIVE:
        surviving.update(
            category for category in AttributeCategory
            if category not in PROTECTED_CATEGORIES and not options.removes(category)
        )

    return frozenset(surviving)


def classify(
    attribute_keys: Iterable[str],
    mode: ZapMode,
    options: ZapOptions,
    categories: CategoryTable = DEFAULT_CATEGORIES,
) -> AttributePartition:
    """
    Partition attribute keys into kept and removed.

    Args:
        attribute_keys: Keys of one node's attribute map
        mode: Zap mode (selective or mega)
        options: Per-category removal flags plus keep_media
        categories: Category table (default: core block taxonomy)

    Returns:
        AttributePartition(kept, removed)

    Examples:
        >>> opts = ZapOptions(blockStyles=True)
        >>> classify({"content", "backgroundColor", "className"}, ZapMode.SELECTIVE, opts).removed
        frozenset({'backgroundColor'})
    """
    keys = frozenset(attribute_keys)
    if not keys:
        return AttributePartition(kept=frozenset(), removed=frozenset())

    surviving = surviving_categories(mode, options)
    protected: AbstractSet[str] = frozenset().union(
        *(categories.get(category, frozenset()) for category in surviving)
    )
    known: AbstractSet[str] = frozenset().union(*categories.values())

    removed = frozenset(key for key in keys if key in known and key not in protected)
    return AttributePartition(kept=keys - removed, removed=removed)
