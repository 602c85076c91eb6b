"""
Unit tests for core.constants module.
"""
import re
import pytest
from core.constants import (
    SPACING_SCALE,
    COLOR_NAMES,
    BORDER_WIDTH_CLASSES,
    BORDER_RADIUS_CLASSES,
    FONT_SIZE_CLASSES,
    FONT_WEIGHT_CLASSES,
    DISPLAY_CLASSES,
    DEFAULT_ELEMENT_STYLES,
    TEXT_TAGS,
)
from core.models import StyleProperty


class TestSpacingScale:
    """Tests for SPACING_SCALE constant."""

    def test_keys_are_pixel_values(self):
        """Test every key is an integer pixel length."""
        for key in SPACING_SCALE:
            assert re.fullmatch(r'\d+px', key), key

    def test_quarter_rem_steps(self):
        """Test steps from 2px up follow px / 4."""
        for key, step in SPACING_SCALE.items():
            px = int(key[:-2])
            if px >= 2:
                assert float(step) == px / 4

    def test_one_pixel_step(self):
        """Test 1px maps to the 'px' step."""
        assert SPACING_SCALE['1px'] == 'px'
        assert SPACING_SCALE['16px'] == '4'


class TestColorNames:
    """Tests for COLOR_NAMES constant."""

    def test_keys_are_lowercase_hex(self):
        """Test keys are lower-case 6-digit hex so lookups can lower() input."""
        for key in COLOR_NAMES:
            assert re.fullmatch(r'#[0-9a-f]{6}', key), key

    def test_gray_scale_complete(self):
        """Test gray-100 to gray-900 are all present."""
        names = set(COLOR_NAMES.values())
        for shade in range(100, 1000, 100):
            assert f'gray-{shade}' in names


class TestClassTables:
    """Tests for keyword and scale class tables."""

    def test_border_widths(self):
        """Test border width table covers 0/1/2/4/8px with bare class for 1px."""
        assert set(BORDER_WIDTH_CLASSES) == {'0px', '1px', '2px', '4px', '8px'}
        assert BORDER_WIDTH_CLASSES['1px'] == 'border'

    def test_radius_full(self):
        """Test radius table maps 9999px to rounded-full."""
        assert BORDER_RADIUS_CLASSES['9999px'] == 'rounded-full'
        assert BORDER_RADIUS_CLASSES['4px'] == 'rounded'

    def test_font_sizes_xs_to_5xl(self):
        """Test font size table spans text-xs through text-5xl."""
        assert FONT_SIZE_CLASSES['12px'] == 'text-xs'
        assert FONT_SIZE_CLASSES['48px'] == 'text-5xl'
        assert len(FONT_SIZE_CLASSES) == 9

    @pytest.mark.parametrize("weight,keyword", [('400', 'normal'), ('700', 'bold')])
    def test_font_weight_keywords_match_numbers(self, weight, keyword):
        """Test font weight keywords map to the same class as their number."""
        assert FONT_WEIGHT_CLASSES[weight] == FONT_WEIGHT_CLASSES[keyword]

    def test_display_none_is_hidden(self):
        """Test display none maps to hidden."""
        assert DISPLAY_CLASSES['none'] == 'hidden'


class TestDefaults:
    """Tests for element defaults."""

    def test_default_styles_use_known_properties(self):
        """Test default element styles only use known properties."""
        for key in DEFAULT_ELEMENT_STYLES:
            StyleProperty(key)

    def test_text_tags(self):
        """Test which tags get placeholder text."""
        assert set(TEXT_TAGS) == {'button', 'p', 'span'}
