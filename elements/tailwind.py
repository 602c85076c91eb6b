"""
Tailwind Class Mapper

Converts a style record into an ordered list of Tailwind utility classes.

Category order is fixed:
display -> position -> padding -> margin -> width/height -> min/max ->
colors -> border (width, style, color, radius) -> flex -> grid ->
typography -> offsets

Values with an entry in the lookup tables map to named classes; anything
else falls back to an arbitrary-value class such as ``p-[15px]``. No value
is ever rejected, so the mapper cannot fail.
"""
from typing import List, Optional

from core.constants import (
    ALIGN_ITEMS_CLASSES,
    BORDER_RADIUS_CLASSES,
    BORDER_STYLE_CLASSES,
    BORDER_WIDTH_CLASSES,
    COLOR_NAMES,
    CORNER_PREFIXES,
    CORNERS,
    DISPLAY_CLASSES,
    FLEX_DIRECTION_CLASSES,
    FONT_SIZE_CLASSES,
    FONT_WEIGHT_CLASSES,
    HEIGHT_CLASSES,
    JUSTIFY_CONTENT_CLASSES,
    POSITION_CLASSES,
    SIDE_PREFIXES,
    SIDES,
    SPACING_SCALE,
    TEXT_ALIGN_CLASSES,
    WIDTH_CLASSES,
)
from core.models import DisplayType, ElementStyles


def arbitrary(prefix: str, value: str) -> str:
    """Arbitrary-value class carrying the literal value, e.g. ``w-[37px]``."""
    return f"{prefix}-[{value}]"


def spacing_class(value: Optional[str], prefix: str) -> str:
    """
    Quantize a spacing value against the Tailwind spacing scale.

    Args:
        value: CSS length such as "16px"
        prefix: Class prefix ("p", "mt", "gap", ...)

    Returns:
        Scale class ("p-4") on an exact hit, arbitrary class ("p-[15px]")
        otherwise, empty string for an unset value
    """
    if not value:
        return ''
    step = SPACING_SCALE.get(value)
    if step is not None:
        return f"{prefix}-{step}"
    return arbitrary(prefix, value)


def color_class(value: Optional[str], prefix: str) -> str:
    """Named color class for known hex values (case-insensitive), else arbitrary."""
    if not value:
        return ''
    name = COLOR_NAMES.get(value.lower())
    if name:
        return f"{prefix}-{name}"
    return arbitrary(prefix, value)


def _spacing_family(styles: ElementStyles, prop: str, prefix: str) -> List[str]:
    # Shorthand wins over the per-side values
    shorthand = styles.get(prop)
    if shorthand:
        return [spacing_class(shorthand, prefix)]

    classes = []
    for side in SIDES:
        value = styles.get(f"{prop}_{side}")
        if value:
            classes.append(spacing_class(value, f"{prefix}{SIDE_PREFIXES[side]}"))
    return classes


def _size_classes(styles: ElementStyles) -> List[str]:
    classes = []

    width = styles.get('width')
    if width:
        classes.append(WIDTH_CLASSES.get(width) or arbitrary('w', width))

    height = styles.get('height')
    if height:
        classes.append(HEIGHT_CLASSES.get(height) or arbitrary('h', height))

    for prop, prefix in (
        ('min_width', 'min-w'),
        ('max_width', 'max-w'),
        ('min_height', 'min-h'),
        ('max_height', 'max-h'),
    ):
        value = styles.get(prop)
        if value:
            classes.append(arbitrary(prefix, value))

    return classes


def _border_width_classes(styles: ElementStyles) -> List[str]:
    border_width = styles.get('border_width')
    if border_width:
        return [BORDER_WIDTH_CLASSES.get(border_width) or arbitrary('border', border_width)]

    sides = [(side, styles.get(f"border_{side}_width")) for side in SIDES]
    if any(value for _, value in sides):
        classes = []
        for side, value in sides:
            if not value:
                continue
            prefix = f"border-{SIDE_PREFIXES[side]}"
            classes.append(prefix if value == '1px' else arbitrary(prefix, value))
        return classes

    if styles.get('border'):
        return ['border']
    return []


def _border_radius_classes(styles: ElementStyles) -> List[str]:
    classes = []

    radius = styles.get('border_radius')
    if radius:
        classes.append(BORDER_RADIUS_CLASSES.get(radius) or arbitrary('rounded', radius))

    # Corners are emitted alongside the shorthand, never suppressed by it
    for corner in CORNERS:
        value = styles.get(f"border_{corner}_radius")
        if value:
            classes.append(arbitrary(f"rounded-{CORNER_PREFIXES[corner]}", value))

    return classes


def _border_classes(styles: ElementStyles) -> List[str]:
    classes = _border_width_classes(styles)

    border_style = styles.get('border_style')
    if border_style in BORDER_STYLE_CLASSES:
        classes.append(BORDER_STYLE_CLASSES[border_style])

    border_color = styles.get('border_color')
    if border_color:
        classes.append(color_class(border_color, 'border'))

    classes.extend(_border_radius_classes(styles))
    return classes


def _flex_classes(styles: ElementStyles) -> List[str]:
    classes = []
    for prop, table in (
        ('flex_direction', FLEX_DIRECTION_CLASSES),
        ('justify_content', JUSTIFY_CONTENT_CLASSES),
        ('align_items', ALIGN_ITEMS_CLASSES),
    ):
        value = styles.get(prop)
        if value in table:
            classes.append(table[value])

    gap = styles.get('gap')
    if gap:
        classes.append(spacing_class(gap, 'gap'))
    return classes


def _grid_classes(styles: ElementStyles) -> List[str]:
    classes = []

    columns = styles.get('grid_template_columns')
    if columns:
        classes.append(arbitrary('grid-cols', columns))

    rows = styles.get('grid_template_rows')
    if rows:
        classes.append(arbitrary('grid-rows', rows))

    grid_gap = styles.get('grid_gap')
    if grid_gap:
        classes.append(spacing_class(grid_gap, 'gap'))
    return classes


def _typography_classes(styles: ElementStyles) -> List[str]:
    classes = []

    font_size = styles.get('font_size')
    if font_size:
        classes.append(FONT_SIZE_CLASSES.get(font_size) or arbitrary('text', font_size))

    font_weight = styles.get('font_weight')
    if font_weight in FONT_WEIGHT_CLASSES:
        classes.append(FONT_WEIGHT_CLASSES[font_weight])

    text_align = styles.get('text_align')
    if text_align in TEXT_ALIGN_CLASSES:
        classes.append(TEXT_ALIGN_CLASSES[text_align])

    return classes


def _offset_classes(styles: ElementStyles) -> List[str]:
    return [
        arbitrary(side, styles[side])
        for side in SIDES
        if styles.get(side)
    ]


def styles_to_classes(styles: ElementStyles) -> List[str]:
    """
    Map a style record to Tailwind classes.

    Args:
        styles: Style record (property name -> CSS value)

    Returns:
        Ordered, duplicate-free list of class tokens
    """
    classes = []

    display = styles.get('display')
    if display in DISPLAY_CLASSES:
        classes.append(DISPLAY_CLASSES[display])

    position = styles.get('position')
    if position in POSITION_CLASSES:
        classes.append(POSITION_CLASSES[position])

    classes.extend(_spacing_family(styles, 'padding', 'p'))
    classes.extend(_spacing_family(styles, 'margin', 'm'))
    classes.extend(_size_classes(styles))

    background = styles.get('background_color')
    if background:
        classes.append(color_class(background, 'bg'))
    text_color = styles.get('color')
    if text_color:
        classes.append(color_class(text_color, 'text'))

    classes.extend(_border_classes(styles))

    if display == DisplayType.FLEX.value:
        classes.extend(_flex_classes(styles))
    if display == DisplayType.GRID.value:
        classes.extend(_grid_classes(styles))

    classes.extend(_typography_classes(styles))
    classes.extend(_offset_classes(styles))

    return list(dict.fromkeys(classes))


def styles_to_tailwind(styles: ElementStyles) -> str:
    """Space-joined Tailwind class string for a style record."""
    return ' '.join(styles_to_classes(styles))
