"""
ssh_config_keywords - Canonical SSH config keyword spelling for raw config keys
"""

# Constants
from .constants import SEPARATOR

# Keyword transformations
from .transforms import (
    sanitize,
    is_canonical,
)

# Mapping helpers
from .domain import SanitizeResult
from .mapping import sanitize_keys

__all__ = [
    # Constants
    'SEPARATOR',
    # Transforms
    'sanitize',
    'is_canonical',
    # Mapping
    'SanitizeResult',
    'sanitize_keys',
]
