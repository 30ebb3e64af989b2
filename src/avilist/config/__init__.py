"""avilist configuration package.

This package provides configuration management with:
- Pydantic models for validated settings
- YAML parsing of an optional user config file
"""

from .manager import ConfigManager
from .models import AviListConfig

__all__ = [
    "AviListConfig",
    "ConfigManager",
]
