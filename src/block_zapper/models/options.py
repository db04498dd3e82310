"""
Zap policy inputs: attribute categories, zap mode and per-category options.
"""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


# ============================================================================
# ENUMS
# ============================================================================

class AttributeCategory(str, Enum):
    """
    Fixed taxonomy of block attribute categories.

    Values match the camelCase option names used by the editor panel.
    """
    ESSENTIAL = "essential"
    MEDIA = "media"
    BLOCK_SETTINGS = "blockSettings"
    BLOCK_STYLES = "blockStyles"
    CUSTOM_PROPERTIES = "customProperties"
    CUSTOM_CLASSES = "customClasses"
    CUSTOM_ANCHORS = "customAnchors"
    HTML_ELEMENTS = "htmlElements"


# Categories that are never toggled by a removal flag
PROTECTED_CATEGORIES = frozenset({AttributeCategory.ESSENTIAL, AttributeCategory.MEDIA})

# Category -> ZapOptions field holding its removal flag
_FLAG_FIELDS: Dict[AttributeCategory, str] = {
    AttributeCategory.BLOCK_SETTINGS: "block_settings",
    AttributeCategory.BLOCK_STYLES: "block_styles",
    AttributeCategory.CUSTOM_PROPERTIES: "custom_properties",
    AttributeCategory.CUSTOM_CLASSES: "custom_classes",
    AttributeCategory.CUSTOM_ANCHORS: "custom_anchors",
    AttributeCategory.HTML_ELEMENTS: "html_elements",
}


class ZapMode(str, Enum):
    """Cleaning policy."""
    SELECTIVE = "selective"  # Remove exactly the flagged categories
    MEGA = "mega"  # Remove everything but Essential (and Media if kept)


# ============================================================================
# OPTIONS
# ============================================================================

class ZapOptions(BaseModel):
    """
    Per-invocation removal flags.

    Each flag means "remove this category" (True = remove). Essential has no flag
    and is never removed; Media is governed by keep_media alone. Both the editor's
    camelCase names (``blockStyles``, ``keepMedia``) and snake_case field names
    are accepted.
    """

    block_settings: bool = Field(default=False, description="Remove alignment/layout settings")
    block_styles: bool = Field(default=False, description="Remove colors, typography, style object")
    custom_properties: bool = Field(default=False, description="Remove dimension properties")
    custom_classes: bool = Field(default=False, description="Remove additional CSS classes")
    custom_anchors: bool = Field(default=False, description="Remove HTML anchors")
    html_elements: bool = Field(default=False, description="Remove HTML element overrides")
    keep_media: bool = Field(default=True, description="Protect image/video/icon attributes")

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "forbid",
    }

    def removes(self, category: AttributeCategory) -> bool:
        """
        Whether this option set flags a category for removal in selective mode.

        Essential is never flagged; Media is flagged iff keep_media is False.
        """
        if category == AttributeCategory.ESSENTIAL:
            return False
        if category == AttributeCategory.MEDIA:
            return not self.keep_media
        return getattr(self, _FLAG_FIELDS[category])

    def selected_categories(self) -> List[AttributeCategory]:
        """Flagged (non-protected) categories, in taxonomy order."""
        return [
            category for category in _FLAG_FIELDS
            if getattr(self, _FLAG_FIELDS[category])
        ]

    def has_selection(self) -> bool:
        """
        True if at least one category flag is set.

        Callers use this to disable a selective zap with nothing selected; the
        engine itself runs either way.
        """
        return bool(self.selected_categories())


# Immutable default: nothing selected, media protected
DEFAULT_ZAP_OPTIONS = ZapOptions()
