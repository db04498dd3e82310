"""
Unit tests for the attribute category taxonomy (categories.py).
"""

import pytest

from block_zapper.classification.categories import (
    DEFAULT_CATEGORIES,
    DIMENSION_KEYS,
    build_category_table,
    categories_for_key,
    overlapping_keys,
)
from block_zapper.models.options import AttributeCategory


@pytest.mark.unit
class TestDefaultCategories:
    """Tests for the default category table."""

    def test_every_category_present(self):
        assert set(DEFAULT_CATEGORIES) == set(AttributeCategory)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_CATEGORIES[AttributeCategory.ESSENTIAL] = frozenset({"x"})

    def test_key_sets_are_frozen(self):
        for keys in DEFAULT_CATEGORIES.values():
            assert isinstance(keys, frozenset)

    def test_content_is_essential(self):
        assert categories_for_key("content") == {AttributeCategory.ESSENTIAL}

    def test_class_and_anchor(self):
        assert categories_for_key("className") == {AttributeCategory.CUSTOM_CLASSES}
        assert categories_for_key("anchor") == {AttributeCategory.CUSTOM_ANCHORS}

    def test_unknown_key(self):
        assert categories_for_key("data-plugin") == set()


@pytest.mark.unit
class TestOverlaps:
    """The only overlap is the dimension keys between media and customProperties."""

    def test_overlap_is_dimensions_only(self):
        overlaps = overlapping_keys()

        assert set(overlaps) == DIMENSION_KEYS
        for categories in overlaps.values():
            assert categories == [
                AttributeCategory.MEDIA,
                AttributeCategory.CUSTOM_PROPERTIES,
            ]

    def test_width_in_both(self):
        assert categories_for_key("width") == {
            AttributeCategory.MEDIA,
            AttributeCategory.CUSTOM_PROPERTIES,
        }


@pytest.mark.unit
class TestBuildCategoryTable:
    """Tests for build_category_table()."""

    def test_missing_categories_are_empty(self):
        table = build_category_table({AttributeCategory.ESSENTIAL: ["body"]})

        assert table[AttributeCategory.ESSENTIAL] == frozenset({"body"})
        assert table[AttributeCategory.MEDIA] == frozenset()
        assert set(table) == set(AttributeCategory)

    def test_accepts_string_category_names(self):
        table = build_category_table({"blockStyles": {"color"}})

        assert table[AttributeCategory.BLOCK_STYLES] == frozenset({"color"})

    def test_unknown_category_rejected(self):
        with pytest.raises(ValueError):
            build_category_table({"colors": {"color"}})

    def test_result_is_read_only(self):
        table = build_category_table({})

        with pytest.raises(TypeError):
            table[AttributeCategory.MEDIA] = frozenset()
