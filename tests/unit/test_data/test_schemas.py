"""
Unit tests for data.schemas module.
"""
import pytest
from pydantic import ValidationError

from core.models import ElementTag, elements_to_json
from data.schemas import DesignRecord, ElementSchema


class TestElementSchema:
    """Tests for ElementSchema."""

    def test_to_element(self):
        """Test converting a nested schema to UIElements."""
        schema = ElementSchema.model_validate({
            'id': 'root',
            'tag': 'section',
            'styles': {'display': 'grid'},
            'children': [{'id': 'c', 'tag': 'p', 'content': 'Hi'}],
        })

        element = schema.to_element()
        assert element.tag is ElementTag.SECTION
        assert element.children[0].content == 'Hi'
        assert element.children[0].styles == {}

    def test_rejects_unknown_tag(self):
        """Test validation fails for an unknown tag."""
        with pytest.raises(ValidationError):
            ElementSchema.model_validate({'id': 'x', 'tag': 'blink'})

    def test_rejects_unknown_style_property(self):
        """Test validation fails for an unknown style property."""
        with pytest.raises(ValidationError):
            ElementSchema.model_validate({'id': 'x', 'tag': 'div', 'styles': {'zIndex': '1'}})


class TestDesignRecord:
    """Tests for DesignRecord."""

    def test_round_trip_forest(self, sample_forest):
        """Test a forest survives record validation."""
        record = DesignRecord(
            id='d1',
            name='Sample',
            elements=elements_to_json(sample_forest),
            selected_element_id='cta',
            created_at=1,
            updated_at=2,
        )

        assert record.to_elements() == sample_forest

    def test_requires_timestamps(self):
        """Test timestamps are required."""
        with pytest.raises(ValidationError):
            DesignRecord(name='No times')
