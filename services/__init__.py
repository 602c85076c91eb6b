"""Services package - Design storage and editing sessions."""

from .storage_service import DesignStorageService
from .editor_service import EditorSession

__all__ = ['DesignStorageService', 'EditorSession']
