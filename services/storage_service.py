"""
Design Storage Service

Handles CRUD operations for designs. Each call opens its own session, so
the service can be shared by the editor and its autosave timer.
"""
import logging
from typing import List, Optional

from config.settings import settings
from core.models import UIElement, elements_to_json
from data.database import DatabaseManager
from data.repositories import DesignRepository
from data.schemas import DesignRecord
from elements.tree_ops import create_default_element

logger = logging.getLogger(__name__)


class DesignStorageService:
    """Service for storing and retrieving designs."""

    def __init__(self, db_manager: DatabaseManager):
        """
        Initialize storage service.

        Args:
            db_manager: Database manager providing sessions
        """
        self.db_manager = db_manager

    def create_design(self, name: Optional[str] = None) -> DesignRecord:
        """
        Create a new design holding a single default root element.

        Args:
            name: Design name; defaults to "Design <n+1>"

        Returns:
            The stored design record
        """
        with self.db_manager.session() as session:
            repo = DesignRepository(session)
            if not name:
                name = f"{settings.default_design_name_prefix} {repo.count() + 1}"

            design = repo.create(
                name=name,
                elements=elements_to_json([create_default_element('div')]),
                selected_element_id=None
            )
            logger.info("Created design %s (%s)", design.id, name)
            return DesignRecord.model_validate(design.to_dict())

    def load_design(self, design_id: str) -> Optional[DesignRecord]:
        """
        Load a design by ID.

        Returns:
            Design record, or None if not found
        """
        with self.db_manager.session() as session:
            design = DesignRepository(session).get_by_id(design_id)
            if design is None:
                return None
            return DesignRecord.model_validate(design.to_dict())

    def save_design(
        self,
        design_id: str,
        elements: List[UIElement],
        selected_element_id: Optional[str],
        name: Optional[str] = None
    ) -> bool:
        """
        Persist the current state of a design.

        Returns:
            True if the design existed and was updated
        """
        fields = {
            'elements': elements_to_json(elements),
            'selected_element_id': selected_element_id,
        }
        if name:
            fields['name'] = name

        with self.db_manager.session() as session:
            design = DesignRepository(session).update(design_id, **fields)
            if design is None:
                logger.warning("Design %s not found, save skipped", design_id)
                return False
            logger.debug("Saved design %s (%d root elements)", design_id, len(elements))
            return True

    def list_designs(self, limit: Optional[int] = None, offset: int = 0) -> List[DesignRecord]:
        """List designs, most recently updated first."""
        with self.db_manager.session() as session:
            designs = DesignRepository(session).list_all(
                limit=limit or settings.design_list_limit,
                offset=offset
            )
            return [DesignRecord.model_validate(d.to_dict()) for d in designs]

    def delete_design(self, design_id: str) -> bool:
        """Delete a design. Returns False if it did not exist."""
        with self.db_manager.session() as session:
            deleted = DesignRepository(session).delete(design_id)
        if deleted:
            logger.info("Deleted design %s", design_id)
        return deleted
