"""
React Code Exporter

Walks the element forest and renders JSX markup with Tailwind classes.

Attribute values and text content are inserted verbatim (no escaping);
callers embedding untrusted content must sanitize it before export.
"""
from typing import List, Optional

from config.settings import settings
from core.constants import INDENT_UNIT
from core.models import UIElement
from elements.tailwind import styles_to_tailwind


COMPONENT_TEMPLATE = """import React from 'react';

export default function {name}() {{
  return (
{body}
  );
}}"""


def render_open_tag(element: UIElement, indent_str: str, class_attribute: str = 'className') -> str:
    """Render ``<tag className="..." key="value">`` at the given indentation."""
    classes = styles_to_tailwind(element.styles)
    class_attr = f' {class_attribute}="{classes}"' if classes else ''

    attrs = ' '.join(
        f'{key}="{value}"' for key, value in (element.attributes or {}).items()
    )
    attrs_str = f' {attrs}' if attrs else ''

    return f"{indent_str}<{element.tag.value}{class_attr}{attrs_str}>"


def export_to_react_code(
    elements: List[UIElement],
    indent: int = 0,
    class_attribute: str = 'className'
) -> str:
    """
    Render a forest as indented JSX.

    Elements with children put each child on its own line one level deeper
    and close on a line at their own indentation; leaf elements close
    right after their text content.

    Args:
        elements: Forest to render
        indent: Indentation level of the top-level elements (two spaces per level)
        class_attribute: Attribute name used for the utility classes

    Returns:
        Newline-joined markup of all top-level elements
    """
    indent_str = INDENT_UNIT * indent

    rendered = []
    for element in elements:
        open_tag = render_open_tag(element, indent_str, class_attribute)
        if element.children:
            inner = export_to_react_code(element.children, indent + 1, class_attribute)
            body = f"\n{inner}\n{indent_str}"
        else:
            body = element.content or ''
        rendered.append(f"{open_tag}{body}</{element.tag.value}>")

    return '\n'.join(rendered)


def wrap_in_component(body: str, component_name: str) -> str:
    """Wrap rendered markup in a React function component."""
    return COMPONENT_TEMPLATE.format(name=component_name, body=body)


def export_component(
    elements: List[UIElement],
    component_name: Optional[str] = None,
    class_attribute: Optional[str] = None
) -> str:
    """
    Export a forest as a complete React component module.

    Defaults come from settings (EXPORT_COMPONENT_NAME, EXPORT_INDENT,
    CLASS_ATTRIBUTE).
    """
    export_config = settings.get_export_config()
    body = export_to_react_code(
        elements,
        indent=export_config['indent'],
        class_attribute=class_attribute or export_config['class_attribute']
    )
    return wrap_in_component(body, component_name or export_config['component_name'])
