"""
Repository pattern for data access.

Provides clean separation between data access and business logic.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from data.db_models import Design, now_ms


class DesignRepository:
    """Repository for Design operations."""

    _UPDATABLE = ('name', 'elements', 'selected_element_id')

    def __init__(self, session: Session):
        self.session = session

    def create(
        self,
        name: str,
        elements: List[dict],
        selected_element_id: Optional[str] = None
    ) -> Design:
        """Create a new design."""
        timestamp = now_ms()
        design = Design(
            name=name,
            elements=elements,
            selected_element_id=selected_element_id,
            created_at=timestamp,
            updated_at=timestamp
        )
        self.session.add(design)
        self.session.commit()
        self.session.refresh(design)
        return design

    def get_by_id(self, design_id: str) -> Optional[Design]:
        """Get design by ID."""
        return self.session.query(Design).filter(
            Design.id == design_id
        ).first()

    def list_all(self, limit: int = 50, offset: int = 0) -> List[Design]:
        """List designs, most recently updated first."""
        return self.session.query(Design)\
            .order_by(Design.updated_at.desc())\
            .limit(limit)\
            .offset(offset)\
            .all()

    def count(self) -> int:
        """Number of stored designs."""
        return self.session.query(Design).count()

    def update(self, design_id: str, **fields) -> Optional[Design]:
        """
        Update name, elements and/or selected_element_id of a design.

        Returns:
            The updated design, or None if it does not exist

        Raises:
            ValueError: If a field other than the updatable ones is given
        """
        unknown = set(fields) - set(self._UPDATABLE)
        if unknown:
            raise ValueError(f"Cannot update design fields: {sorted(unknown)}")

        design = self.get_by_id(design_id)
        if design is None:
            return None

        for key, value in fields.items():
            setattr(design, key, value)
        design.updated_at = now_ms()

        self.session.commit()
        self.session.refresh(design)
        return design

    def delete(self, design_id: str) -> bool:
        """Delete a design."""
        design = self.get_by_id(design_id)
        if design:
            self.session.delete(design)
            self.session.commit()
            return True
        return False
