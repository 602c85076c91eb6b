"""
Unit tests for data.db_models module.
"""
from data.db_models import Design, generate_uuid, now_ms


class TestDesign:
    """Tests for Design model."""

    def test_create_design(self, test_db_session):
        """Test creating a design."""
        design = Design(name="Landing page", elements=[])

        test_db_session.add(design)
        test_db_session.commit()

        assert design.id is not None
        assert design.name == "Landing page"
        assert design.elements == []
        assert design.selected_element_id is None

    def test_design_timestamps(self, test_db_session):
        """Test created_at and updated_at default to epoch milliseconds."""
        before = now_ms()
        design = Design(name="Timestamps", elements=[])

        test_db_session.add(design)
        test_db_session.commit()

        assert isinstance(design.created_at, int)
        assert design.created_at >= before
        assert design.updated_at >= design.created_at

    def test_elements_json_column(self, test_db_session):
        """Test nested element dicts survive storage."""
        elements = [{
            'id': 'root',
            'tag': 'div',
            'styles': {'padding': '16px'},
            'children': [{'id': 'c', 'tag': 'p', 'styles': {}, 'children': [], 'content': 'Hi'}],
        }]
        design = Design(name="Nested", elements=elements, selected_element_id='c')
        test_db_session.add(design)
        test_db_session.commit()

        test_db_session.expire(design)
        assert design.elements == elements
        assert design.selected_element_id == 'c'

    def test_to_dict(self, test_db_session):
        """Test to_dict returns the design record fields."""
        design = Design(name="Dict", elements=[])
        test_db_session.add(design)
        test_db_session.commit()

        data = design.to_dict()
        assert set(data) == {
            'id', 'name', 'elements', 'selected_element_id', 'created_at', 'updated_at'
        }
        assert data['name'] == "Dict"


def test_generate_uuid_unique():
    """Test UUID generation returns distinct values."""
    assert generate_uuid() != generate_uuid()
