"""Core package - Domain models and constants."""

from .models import (
    ElementTag,
    DisplayType,
    StyleProperty,
    ElementStyles,
    UIElement,
    validate_style_keys,
    elements_to_json,
    elements_from_json,
)
from .constants import (
    SPACING_SCALE,
    COLOR_NAMES,
    DEFAULT_ELEMENT_STYLES,
    TEXT_TAGS,
)

__all__ = [
    'ElementTag',
    'DisplayType',
    'StyleProperty',
    'ElementStyles',
    'UIElement',
    'validate_style_keys',
    'elements_to_json',
    'elements_from_json',
    'SPACING_SCALE',
    'COLOR_NAMES',
    'DEFAULT_ELEMENT_STYLES',
    'TEXT_TAGS',
]
