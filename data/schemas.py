"""
Pydantic schemas for design records exchanged with the store.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from core.models import ElementTag, StyleProperty, UIElement


class ElementSchema(BaseModel):
    """Serialized UI element (recursive)."""
    id: str
    tag: ElementTag
    styles: Dict[str, Optional[str]] = Field(default_factory=dict)
    children: List['ElementSchema'] = Field(default_factory=list)
    content: Optional[str] = None
    attributes: Optional[Dict[str, str]] = None

    @field_validator('styles')
    @classmethod
    def check_style_properties(cls, styles: Dict[str, Optional[str]]) -> Dict[str, Optional[str]]:
        for key in styles:
            StyleProperty(key)
        return styles

    def to_element(self) -> UIElement:
        """Convert to a UIElement tree."""
        return UIElement(
            id=self.id,
            tag=self.tag,
            styles=dict(self.styles),
            children=[child.to_element() for child in self.children],
            content=self.content,
            attributes=dict(self.attributes) if self.attributes is not None else None,
        )


class DesignRecord(BaseModel):
    """Design record as loaded from or written to the store."""
    id: Optional[str] = None
    name: str
    elements: List[ElementSchema] = Field(default_factory=list)
    selected_element_id: Optional[str] = None
    created_at: int
    updated_at: int

    def to_elements(self) -> List[UIElement]:
        """Element forest of this design."""
        return [element.to_element() for element in self.elements]


ElementSchema.model_rebuild()
