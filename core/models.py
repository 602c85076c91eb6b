"""
Core domain models for the UI builder.

These are pure data structures without business logic. Tags and style
property names are closed enumerations: constructing an element with an
unknown tag or style property raises ValueError.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional


class ElementTag(str, Enum):
    """Markup element kinds an element can take."""
    DIV = 'div'
    SPAN = 'span'
    P = 'p'
    H1 = 'h1'
    H2 = 'h2'
    H3 = 'h3'
    H4 = 'h4'
    H5 = 'h5'
    H6 = 'h6'
    BUTTON = 'button'
    INPUT = 'input'
    TEXTAREA = 'textarea'
    A = 'a'
    IMG = 'img'
    UL = 'ul'
    OL = 'ol'
    LI = 'li'
    SECTION = 'section'
    HEADER = 'header'
    FOOTER = 'footer'
    NAV = 'nav'
    MAIN = 'main'
    ARTICLE = 'article'
    ASIDE = 'aside'


class DisplayType(str, Enum):
    BLOCK = 'block'
    INLINE_BLOCK = 'inline-block'
    INLINE = 'inline'
    FLEX = 'flex'
    GRID = 'grid'
    NONE = 'none'


class StyleProperty(str, Enum):
    """Style properties a style record may carry."""
    # Layout
    DISPLAY = 'display'
    POSITION = 'position'

    # Spacing
    PADDING = 'padding'
    PADDING_TOP = 'padding_top'
    PADDING_RIGHT = 'padding_right'
    PADDING_BOTTOM = 'padding_bottom'
    PADDING_LEFT = 'padding_left'
    MARGIN = 'margin'
    MARGIN_TOP = 'margin_top'
    MARGIN_RIGHT = 'margin_right'
    MARGIN_BOTTOM = 'margin_bottom'
    MARGIN_LEFT = 'margin_left'

    # Size
    WIDTH = 'width'
    HEIGHT = 'height'
    MIN_WIDTH = 'min_width'
    MIN_HEIGHT = 'min_height'
    MAX_WIDTH = 'max_width'
    MAX_HEIGHT = 'max_height'

    # Colors
    BACKGROUND_COLOR = 'background_color'
    COLOR = 'color'

    # Border
    BORDER = 'border'
    BORDER_WIDTH = 'border_width'
    BORDER_TOP_WIDTH = 'border_top_width'
    BORDER_RIGHT_WIDTH = 'border_right_width'
    BORDER_BOTTOM_WIDTH = 'border_bottom_width'
    BORDER_LEFT_WIDTH = 'border_left_width'
    BORDER_COLOR = 'border_color'
    BORDER_STYLE = 'border_style'
    BORDER_RADIUS = 'border_radius'
    BORDER_TOP_LEFT_RADIUS = 'border_top_left_radius'
    BORDER_TOP_RIGHT_RADIUS = 'border_top_right_radius'
    BORDER_BOTTOM_LEFT_RADIUS = 'border_bottom_left_radius'
    BORDER_BOTTOM_RIGHT_RADIUS = 'border_bottom_right_radius'

    # Flexbox (only when display is flex)
    FLEX_DIRECTION = 'flex_direction'
    JUSTIFY_CONTENT = 'justify_content'
    ALIGN_ITEMS = 'align_items'
    GAP = 'gap'

    # Grid (only when display is grid)
    GRID_TEMPLATE_COLUMNS = 'grid_template_columns'
    GRID_TEMPLATE_ROWS = 'grid_template_rows'
    GRID_GAP = 'grid_gap'

    # Typography
    FONT_SIZE = 'font_size'
    FONT_WEIGHT = 'font_weight'
    TEXT_ALIGN = 'text_align'

    # Position coordinates (for absolute/fixed)
    TOP = 'top'
    RIGHT = 'right'
    BOTTOM = 'bottom'
    LEFT = 'left'


# Style record: property name -> CSS value (None means unset)
ElementStyles = Dict[str, Optional[str]]


def validate_style_keys(keys: Iterable[str]) -> None:
    """
    Check that every key names a known style property.

    Raises:
        ValueError: If a key is not a StyleProperty value
    """
    for key in keys:
        StyleProperty(key)


def normalize_styles(styles: Dict) -> ElementStyles:
    """Return a plain-string-keyed copy of a style mapping, validating keys."""
    normalized = {}
    for key, value in styles.items():
        normalized[StyleProperty(key).value] = value
    return normalized


@dataclass
class UIElement:
    """A single node of the UI tree."""
    id: str
    tag: ElementTag
    styles: ElementStyles = field(default_factory=dict)
    children: List['UIElement'] = field(default_factory=list)
    content: Optional[str] = None
    attributes: Optional[Dict[str, str]] = None

    def __post_init__(self):
        self.tag = ElementTag(self.tag)
        self.styles = normalize_styles(self.styles)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary (recursive)."""
        data = {
            'id': self.id,
            'tag': self.tag.value,
            'styles': dict(self.styles),
            'children': [child.to_dict() for child in self.children],
        }
        if self.content is not None:
            data['content'] = self.content
        if self.attributes is not None:
            data['attributes'] = dict(self.attributes)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'UIElement':
        """Build an element (and its subtree) from a dictionary."""
        return cls(
            id=data['id'],
            tag=data['tag'],
            styles=dict(data.get('styles') or {}),
            children=[cls.from_dict(child) for child in data.get('children') or []],
            content=data.get('content'),
            attributes=data.get('attributes'),
        )


def elements_to_json(elements: List[UIElement]) -> List[dict]:
    """Serialize a forest to a list of dictionaries."""
    return [element.to_dict() for element in elements]


def elements_from_json(data: List[dict]) -> List[UIElement]:
    """Deserialize a forest from a list of dictionaries."""
    return [UIElement.from_dict(item) for item in data]
