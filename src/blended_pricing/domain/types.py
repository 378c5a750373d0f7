"""Domain enumerations for the blended pricing engine."""

from enum import StrEnum


class ContentType(StrEnum):
    """Production content types that make up a blended video."""

    MOTION_GRAPHICS = "motion_graphics"
    CGFX = "cgfx"


class ComplexityLevel(StrEnum):
    """Human-readable complexity bands shown next to the complexity slider."""

    SIMPLE = "Simple"
    MODERATE = "Moderate"
    COMPLEX = "Complex"


# Display names for each content type
CONTENT_TYPE_NAMES: dict[ContentType, str] = {
    ContentType.MOTION_GRAPHICS: "Motion Graphics",
    ContentType.CGFX: "CGI / VFX / SFX",
}
