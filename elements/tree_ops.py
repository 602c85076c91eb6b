"""
Element Tree Operations

Recursive, copy-on-write CRUD over the element forest:
- find an element by id (depth-first, pre-order)
- rebuild the forest with one element transformed
- append a child under a parent
- remove an element together with its subtree

None of these functions mutate their input. Nodes that are not on the path
to the target are reused by reference, so callers can compare snapshots
cheaply. Unknown ids are silent no-ops: an editing panel may still hold the
id of an element that was just deleted.
"""
from dataclasses import replace
from typing import Callable, Dict, Iterator, List, Optional, Set

from core.constants import DEFAULT_ELEMENT_STYLES, DEFAULT_TEXT_CONTENT, TEXT_TAGS
from core.models import ElementStyles, ElementTag, UIElement, validate_style_keys
from utils.id_utils import generate_id


ElementUpdater = Callable[[UIElement], UIElement]


def create_default_element(tag=ElementTag.DIV) -> UIElement:
    """
    Create a new element with a fresh id and the default styles.

    Args:
        tag: ElementTag or tag name

    Returns:
        New UIElement with no children
    """
    tag = ElementTag(tag)
    return UIElement(
        id=generate_id(),
        tag=tag,
        styles=dict(DEFAULT_ELEMENT_STYLES),
        children=[],
        content=DEFAULT_TEXT_CONTENT if tag.value in TEXT_TAGS else None,
    )


def iter_elements(elements: List[UIElement]) -> Iterator[UIElement]:
    """Traverse the forest depth-first, yielding each element before its children."""
    for element in elements:
        yield element
        yield from iter_elements(element.children)


def collect_ids(elements: List[UIElement]) -> List[str]:
    """List every id in the forest in pre-order."""
    return [element.id for element in iter_elements(elements)]


def find_element_by_id(elements: List[UIElement], element_id: str) -> Optional[UIElement]:
    """
    Find an element anywhere in the forest.

    Args:
        elements: Forest to search
        element_id: Id to look for

    Returns:
        The first matching element in pre-order, or None
    """
    for element in elements:
        if element.id == element_id:
            return element
        found = find_element_by_id(element.children, element_id)
        if found is not None:
            return found
    return None


def _same_nodes(left: List[UIElement], right: List[UIElement]) -> bool:
    return len(left) == len(right) and all(a is b for a, b in zip(left, right))


def update_element_by_id(
    elements: List[UIElement],
    element_id: str,
    updater: ElementUpdater
) -> List[UIElement]:
    """
    Return a new forest where the matching element is replaced by updater(element).

    Ancestors of the match are rebuilt with their new children; every other
    element is reused as-is. If no element matches, the result equals the input.

    Args:
        elements: Forest to update
        element_id: Id of the element to transform
        updater: Function producing the replacement element

    Returns:
        New list of root elements
    """
    updated = []
    for element in elements:
        if element.id == element_id:
            updated.append(updater(element))
            continue

        children = update_element_by_id(element.children, element_id, updater)
        if _same_nodes(children, element.children):
            updated.append(element)
        else:
            updated.append(replace(element, children=children))
    return updated


def add_child_to_element(
    elements: List[UIElement],
    parent_id: str,
    child: UIElement
) -> List[UIElement]:
    """Append child to the children of parent_id. No-op if the parent is absent."""
    return update_element_by_id(
        elements,
        parent_id,
        lambda parent: replace(parent, children=[*parent.children, child])
    )


def remove_element_by_id(elements: List[UIElement], element_id: str) -> List[UIElement]:
    """
    Remove an element and its whole subtree.

    Removing a root-level id drops that top-level tree. Siblings and
    subtrees that do not contain the id are reused by reference.
    """
    remaining = []
    for element in elements:
        if element.id == element_id:
            continue

        children = remove_element_by_id(element.children, element_id)
        if _same_nodes(children, element.children):
            remaining.append(element)
        else:
            remaining.append(replace(element, children=children))
    return remaining


def apply_style_delta(styles: ElementStyles, delta: ElementStyles) -> ElementStyles:
    """
    Merge a partial style update into a style record.

    For every key in delta: None or an empty string deletes the key from the
    result (explicit unset), any other value sets or overwrites it. Keys not
    present in delta are left untouched.

    Args:
        styles: Current style record (not modified)
        delta: Partial update

    Returns:
        New style record

    Raises:
        ValueError: If delta names an unknown style property
    """
    validate_style_keys(delta.keys())

    merged = dict(styles)
    for key, value in delta.items():
        key = getattr(key, 'value', key)
        if value is None or value == '':
            merged.pop(key, None)
        else:
            merged[key] = value
    return merged


def update_element_styles(
    elements: List[UIElement],
    element_id: str,
    delta: ElementStyles
) -> List[UIElement]:
    """Apply a partial style update to one element (delete-on-empty semantics)."""
    return update_element_by_id(
        elements,
        element_id,
        lambda element: replace(element, styles=apply_style_delta(element.styles, delta))
    )


_UPDATABLE_FIELDS = ('tag', 'styles', 'children', 'content', 'attributes')


def update_element(
    elements: List[UIElement],
    element_id: str,
    updates: Dict
) -> List[UIElement]:
    """
    Shallow-merge field updates into one element.

    Raises:
        ValueError: If updates tries to change the id or names an unknown field
    """
    if 'id' in updates:
        raise ValueError("Element ids are immutable")
    unknown = set(updates) - set(_UPDATABLE_FIELDS)
    if unknown:
        raise ValueError(f"Unknown element fields: {sorted(unknown)}")

    return update_element_by_id(
        elements,
        element_id,
        lambda element: replace(element, **updates)
    )


def subtree_ids(elements: List[UIElement], element_id: str) -> Set[str]:
    """Ids of an element and all its descendants (empty if the id is absent)."""
    element = find_element_by_id(elements, element_id)
    if element is None:
        return set()
    return set(collect_ids([element]))
