"""
Unit tests for core.models module.
"""
import pytest
from core.models import (
    ElementTag,
    StyleProperty,
    UIElement,
    validate_style_keys,
    elements_to_json,
    elements_from_json,
)


class TestUIElement:
    """Tests for UIElement dataclass."""

    def test_initialization(self):
        """Test creating UIElement with required fields."""
        element = UIElement(id='a', tag='div')

        assert element.id == 'a'
        assert element.tag is ElementTag.DIV
        assert element.styles == {}
        assert element.children == []
        assert element.content is None
        assert element.attributes is None

    def test_children_default_list(self):
        """Test children defaults to an independent empty list."""
        first = UIElement(id='a', tag='div')
        second = UIElement(id='b', tag='div')

        first.children.append(UIElement(id='c', tag='span'))
        assert len(second.children) == 0

    def test_unknown_tag_rejected(self):
        """Test tags outside the closed set fail at construction."""
        with pytest.raises(ValueError):
            UIElement(id='a', tag='marquee')

    def test_unknown_style_property_rejected(self):
        """Test unknown style property names fail at construction."""
        with pytest.raises(ValueError):
            UIElement(id='a', tag='div', styles={'paddingTop': '4px'})

    def test_enum_style_keys_normalized(self):
        """Test StyleProperty keys are stored as plain strings."""
        element = UIElement(id='a', tag='div', styles={StyleProperty.PADDING_TOP: '4px'})

        assert element.styles == {'padding_top': '4px'}

    def test_styles_copied(self):
        """Test the element does not alias the caller's style dict."""
        styles = {'padding': '4px'}
        element = UIElement(id='a', tag='div', styles=styles)
        styles['padding'] = '8px'

        assert element.styles['padding'] == '4px'


class TestSerialization:
    """Tests for dict conversion."""

    def test_to_dict_omits_unset_optionals(self):
        """Test to_dict leaves out content and attributes when unset."""
        element = UIElement(id='a', tag='p', styles={'color': '#000000'})

        assert element.to_dict() == {
            'id': 'a',
            'tag': 'p',
            'styles': {'color': '#000000'},
            'children': [],
        }

    def test_nested_round_trip(self, sample_forest):
        """Test a forest survives conversion to JSON structures and back."""
        restored = elements_from_json(elements_to_json(sample_forest))

        assert restored == sample_forest

    def test_from_dict_with_attributes(self):
        """Test from_dict restores attributes and defaults children."""
        element = UIElement.from_dict({
            'id': 'link',
            'tag': 'a',
            'content': 'Docs',
            'attributes': {'href': '/docs'},
        })

        assert element.tag is ElementTag.A
        assert element.attributes == {'href': '/docs'}
        assert element.children == []


class TestValidateStyleKeys:
    """Tests for validate_style_keys."""

    def test_known_keys(self):
        """Test known keys pass validation."""
        validate_style_keys(['display', 'grid_gap', 'border_top_left_radius'])

    def test_unknown_key(self):
        """Test unknown key raises ValueError."""
        with pytest.raises(ValueError):
            validate_style_keys(['display', 'z_index'])
