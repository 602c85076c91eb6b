"""Elements package - Tree operations, Tailwind mapping and code export."""

from .tree_ops import (
    create_default_element,
    iter_elements,
    collect_ids,
    find_element_by_id,
    update_element_by_id,
    add_child_to_element,
    remove_element_by_id,
    apply_style_delta,
    update_element_styles,
    update_element,
    subtree_ids,
)

from .tailwind import (
    spacing_class,
    color_class,
    styles_to_classes,
    styles_to_tailwind,
)

from .inline_styles import styles_to_inline

from .exporter import (
    export_to_react_code,
    wrap_in_component,
    export_component,
)

__all__ = [
    # Tree operations
    'create_default_element',
    'iter_elements',
    'collect_ids',
    'find_element_by_id',
    'update_element_by_id',
    'add_child_to_element',
    'remove_element_by_id',
    'apply_style_delta',
    'update_element_styles',
    'update_element',
    'subtree_ids',

    # Tailwind mapping
    'spacing_class',
    'color_class',
    'styles_to_classes',
    'styles_to_tailwind',

    # Inline styles
    'styles_to_inline',

    # Export
    'export_to_react_code',
    'wrap_in_component',
    'export_component',
]
