"""Tests for domain enumerations and display-name mappings."""

from blended_pricing.domain.types import CONTENT_TYPE_NAMES, ComplexityLevel, ContentType


class TestContentType:
    """Tests for the ContentType enum."""

    def test_values(self):
        assert ContentType.MOTION_GRAPHICS == "motion_graphics"
        assert ContentType.CGFX == "cgfx"

    def test_every_type_has_a_display_name(self):
        assert set(CONTENT_TYPE_NAMES) == set(ContentType)


class TestComplexityLevel:
    """Tests for the ComplexityLevel enum."""

    def test_labels_are_display_ready(self):
        assert [level.value for level in ComplexityLevel] == ["Simple", "Moderate", "Complex"]
