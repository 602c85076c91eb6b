"""
Editor Service - Editing surface for one open design.

The session owns the authoritative element forest and is its only writer.
Every edit replaces the forest copy-on-write, so readers always see a
complete snapshot. Saves are coalesced: each edit restarts a trailing
timer and only the last one in a burst writes to the store. Once the
session is closed, pending and late timers do nothing.
"""
import logging
import threading
from typing import List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError

from config.settings import settings
from core.models import ElementStyles, ElementTag, UIElement
from elements.exporter import export_component
from elements import tree_ops

logger = logging.getLogger(__name__)


class EditorSession:
    """Editing session bound to a design in a storage service."""

    def __init__(
        self,
        storage,
        design_id: str,
        elements: List[UIElement],
        name: str,
        selected_element_id: Optional[str] = None,
        autosave_delay: Optional[float] = None
    ):
        """
        Initialize editor session.

        Args:
            storage: Store handle with a save_design(design_id, elements,
                     selected_element_id, name) method
            design_id: Id of the design being edited
            elements: Initial element forest
            name: Design name
            selected_element_id: Initially selected element
            autosave_delay: Seconds to wait after the last edit before saving
                            (defaults to settings.autosave_delay_seconds)
        """
        self.storage = storage
        self.design_id = design_id
        self.autosave_delay = (
            settings.autosave_delay_seconds if autosave_delay is None else autosave_delay
        )

        self._elements = list(elements)
        self._name = name
        self._selected_element_id = selected_element_id
        self._hovered_element_id: Optional[str] = None

        self._lock = threading.RLock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._saved_generation = 0
        self._closed = False

    @classmethod
    def open(cls, storage, design_id: str, autosave_delay: Optional[float] = None) -> Optional['EditorSession']:
        """
        Load a design from storage and start editing it.

        Returns:
            EditorSession, or None if the design does not exist
        """
        record = storage.load_design(design_id)
        if record is None:
            logger.warning("Design %s not found", design_id)
            return None

        return cls(
            storage=storage,
            design_id=design_id,
            elements=record.to_elements(),
            name=record.name,
            selected_element_id=record.selected_element_id,
            autosave_delay=autosave_delay
        )

    # State

    @property
    def elements(self) -> Tuple[UIElement, ...]:
        """
        Current forest snapshot.

        Elements are shared with later snapshots, so treat them as read-only
        and change them through the editing methods.
        """
        return tuple(self._elements)

    @property
    def name(self) -> str:
        return self._name

    @property
    def selected_element_id(self) -> Optional[str]:
        return self._selected_element_id

    @property
    def hovered_element_id(self) -> Optional[str]:
        return self._hovered_element_id

    @property
    def selected_element(self) -> Optional[UIElement]:
        if self._selected_element_id is None:
            return None
        return tree_ops.find_element_by_id(self._elements, self._selected_element_id)

    @property
    def closed(self) -> bool:
        return self._closed

    # Editing surface

    def add_element(self, parent_id: str, tag=ElementTag.DIV) -> Optional[str]:
        """
        Append a new default element under parent_id and select it.

        Returns:
            Id of the new element, or None if the parent does not exist
        """
        with self._lock:
            if tree_ops.find_element_by_id(self._elements, parent_id) is None:
                return None

            child = tree_ops.create_default_element(tag)
            self._elements = tree_ops.add_child_to_element(self._elements, parent_id, child)
            self._selected_element_id = child.id
            logger.debug("Added %s %s under %s", child.tag.value, child.id, parent_id)
            self._schedule_save()
            return child.id

    def update_element(self, element_id: str, **updates) -> None:
        """Shallow-merge field updates (tag, content, attributes, ...) into an element."""
        with self._lock:
            self._elements = tree_ops.update_element(self._elements, element_id, updates)
            self._schedule_save()

    def update_element_styles(self, element_id: str, styles: ElementStyles) -> None:
        """Apply a partial style update; None or "" unsets a property."""
        with self._lock:
            self._elements = tree_ops.update_element_styles(self._elements, element_id, styles)
            self._schedule_save()

    def delete_element(self, element_id: str) -> None:
        """Delete an element with its subtree, clearing a selection inside it."""
        with self._lock:
            removed = tree_ops.subtree_ids(self._elements, element_id)
            self._elements = tree_ops.remove_element_by_id(self._elements, element_id)
            if self._selected_element_id in removed:
                self._selected_element_id = None
            if self._hovered_element_id in removed:
                self._hovered_element_id = None
            logger.debug("Deleted %s (%d elements)", element_id, len(removed))
            self._schedule_save()

    def select_element(self, element_id: Optional[str]) -> None:
        with self._lock:
            self._selected_element_id = element_id
            self._schedule_save()

    def set_hovered_element(self, element_id: Optional[str]) -> None:
        # Hover is transient and never persisted
        self._hovered_element_id = element_id

    def rename(self, name: str) -> bool:
        """Rename the design. Blank names are ignored."""
        name = (name or '').strip()
        if not name:
            return False
        with self._lock:
            self._name = name
            self._schedule_save()
        return True

    def export_code(self, component_name: Optional[str] = None) -> str:
        """Export the current forest as a React component."""
        return export_component(self._elements, component_name=component_name)

    # Persistence

    def _schedule_save(self) -> None:
        if self._closed:
            return

        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()

        if self.autosave_delay <= 0:
            self._timer = None
            self._save(self._generation)
            return

        self._timer = threading.Timer(self.autosave_delay, self._save, args=(self._generation,))
        self._timer.daemon = True
        self._timer.start()

    def _save(self, generation: int) -> None:
        with self._lock:
            # A superseded or abandoned timer must not write
            if self._closed or generation != self._generation:
                return
            if generation == self._saved_generation:
                return
            self._timer = None

            try:
                self.storage.save_design(
                    self.design_id, self._elements, self._selected_element_id, self._name
                )
            except SQLAlchemyError:
                # Left dirty so the next flush or close retries
                logger.exception("Failed to save design %s", self.design_id)
                return
            self._saved_generation = generation

    @property
    def dirty(self) -> bool:
        """True while the latest edit has not been written."""
        return self._generation != self._saved_generation

    def flush(self) -> None:
        """Write pending changes now instead of waiting for the timer."""
        with self._lock:
            if not self.dirty:
                return
            if self._timer is not None:
                self._timer.cancel()
            self._save(self._generation)

    def close(self, flush: bool = True) -> None:
        """
        Stop editing. Pending changes are written first unless flush is False;
        any timer firing afterwards is a no-op.
        """
        with self._lock:
            if self._closed:
                return
            if flush:
                self.flush()
            elif self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._closed = True
