"""Utilities package - Helper functions."""

from .id_utils import generate_id

__all__ = ['generate_id']
