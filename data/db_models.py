"""
Database models for design storage.

A design stores its whole element forest as JSON together with the
selected element and epoch-millisecond timestamps.
"""
import time
import uuid

from sqlalchemy import BigInteger, Column, JSON, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def generate_uuid():
    """Generate UUID string for primary keys."""
    return str(uuid.uuid4())


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


class Design(Base):
    """A saved UI design."""

    __tablename__ = 'designs'

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(String, nullable=False)

    # Element forest as a list of element dicts
    elements = Column(JSON, nullable=False)
    selected_element_id = Column(String, nullable=True)

    created_at = Column(BigInteger, nullable=False, default=now_ms)
    updated_at = Column(BigInteger, nullable=False, default=now_ms, onupdate=now_ms)

    def __repr__(self):
        return f"<Design(id={self.id}, name={self.name})>"

    def to_dict(self):
        """Convert to dictionary matching the design record shape."""
        return {
            'id': self.id,
            'name': self.name,
            'elements': self.elements,
            'selected_element_id': self.selected_element_id,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }
