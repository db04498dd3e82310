"""
Attribute category taxonomy (Gutenberg core block attributes).

Each category maps to an immutable set of attribute keys. Categories are mostly
disjoint, with one deliberate overlap: the dimension keys (width, height,
aspectRatio, scale) belong to both MEDIA and CUSTOM_PROPERTIES. The classifier
keeps a key when any of its categories survives, so media protection always
wins over the dimension category.
"""

from collections import defaultdict
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Set

from ..models.options import AttributeCategory


CategoryTable = Mapping[AttributeCategory, FrozenSet[str]]


# Core content: never removed
ESSENTIAL_KEYS = frozenset({
    "content",
    "text",
    "value",
    "citation",
    "caption",
    "label",
    "placeholder",
    "title",
    "level",
    "ordered",
    "values",
    "start",
    "reversed",
    "href",
    "linkTarget",
    "rel",
    "name",
    "type",
    "checked",
    "selected",
    "disabled",
    "required",
    "multiple",
    "body",
    "head",
    "foot",
})

# Shared by MEDIA and CUSTOM_PROPERTIES
DIMENSION_KEYS = frozenset({"width", "height", "aspectRatio", "scale"})

# Image/video/audio/icon resources
MEDIA_KEYS = frozenset({
    "url",
    "src",
    "alt",
    "id",
    "ids",
    "images",
    "sizeSlug",
    "linkDestination",
    "mediaId",
    "mediaUrl",
    "mediaType",
    "mediaAlt",
    "mediaLink",
    "mediaSizeSlug",
    "mediaWidth",
    "poster",
    "focalPoint",
    "icon",
    "iconName",
    "autoplay",
    "loop",
    "muted",
    "controls",
    "playsInline",
    "preload",
    "tracks",
}) | DIMENSION_KEYS

# Alignment, layout and editor behaviour
BLOCK_SETTINGS_KEYS = frozenset({
    "align",
    "textAlign",
    "verticalAlignment",
    "contentPosition",
    "mediaPosition",
    "justification",
    "orientation",
    "layout",
    "lock",
    "metadata",
    "templateLock",
    "allowedBlocks",
    "isStackedOnMobile",
    "columns",
    "dropCap",
    "hasParallax",
    "isRepeated",
    "useFeaturedImage",
    "imageFill",
    "opensInNewTab",
})

# Colors, typography and the style object
BLOCK_STYLES_KEYS = frozenset({
    "style",
    "backgroundColor",
    "textColor",
    "gradient",
    "customGradient",
    "overlayColor",
    "customOverlayColor",
    "customBackgroundColor",
    "customTextColor",
    "borderColor",
    "fontSize",
    "customFontSize",
    "fontFamily",
    "dimRatio",
    "shadow",
})

# Dimensions and sizing
CUSTOM_PROPERTIES_KEYS = frozenset({
    "minHeight",
    "minHeightUnit",
    "maxWidth",
    "widthUnit",
    "heightUnit",
    "contentSize",
    "wideSize",
}) | DIMENSION_KEYS

CUSTOM_CLASSES_KEYS = frozenset({"className"})

CUSTOM_ANCHORS_KEYS = frozenset({"anchor"})

# Rendered element overrides
HTML_ELEMENTS_KEYS = frozenset({"tagName", "htmlTag", "wrapperTag"})


DEFAULT_CATEGORIES: CategoryTable = MappingProxyType({
    AttributeCategory.ESSENTIAL: ESSENTIAL_KEYS,
    AttributeCategory.MEDIA: MEDIA_KEYS,
    AttributeCategory.BLOCK_SETTINGS: BLOCK_SETTINGS_KEYS,
    AttributeCategory.BLOCK_STYLES: BLOCK_STYLES_KEYS,
    AttributeCategory.CUSTOM_PROPERTIES: CUSTOM_PROPERTIES_KEYS,
    AttributeCategory.CUSTOM_CLASSES: CUSTOM_CLASSES_KEYS,
    AttributeCategory.CUSTOM_ANCHORS: CUSTOM_ANCHORS_KEYS,
    AttributeCategory.HTML_ELEMENTS: HTML_ELEMENTS_KEYS,
})


def build_category_table(
    categories: Mapping[AttributeCategory, Iterable[str]]
) -> CategoryTable:
    """
    Freeze a user-supplied category mapping into a CategoryTable.

    Missing categories are treated as empty.

    Args:
        categories: Category -> iterable of attribute keys

    Returns:
        Read-only mapping of category -> frozenset of keys
    """
    table: Dict[AttributeCategory, FrozenSet[str]] = {
        category: frozenset() for category in AttributeCategory
    }
    for category, keys in categories.items():
        table[AttributeCategory(category)] = frozenset(keys)
    return MappingProxyType(table)


def categories_for_key(
    key: str, categories: CategoryTable = DEFAULT_CATEGORIES
) -> Set[AttributeCategory]:
    """
    Return every category containing a key (empty set for unknown keys).

    Examples:
        >>> sorted(c.value for c in categories_for_key("width"))
        ['customProperties', 'media']
        >>> categories_for_key("data-foo")
        set()
    """
    return {category for category, keys in categories.items() if key in keys}


def overlapping_keys(
    categories: CategoryTable = DEFAULT_CATEGORIES,
) -> Dict[str, List[AttributeCategory]]:
    """
    Find keys that belong to more than one category.

    Returns:
        Key -> categories (taxonomy order), only for keys with 2+ categories
    """
    key_to_categories: Dict[str, List[AttributeCategory]] = defaultdict(list)
    for category in AttributeCategory:
        for key in categories.get(category, frozenset()):
            key_to_categories[key].append(category)

    return {
        key: cats
        for key, cats in sorted(key_to_categories.items())
        if len(cats) > 1
    }
