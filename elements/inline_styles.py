"""
Inline style projection for direct visual application.
"""
from typing import Dict

from core.models import ElementStyles


def styles_to_inline(styles: ElementStyles) -> Dict[str, str]:
    """Copy every set style property, dropping entries whose value is None."""
    return {key: value for key, value in styles.items() if value is not None}
