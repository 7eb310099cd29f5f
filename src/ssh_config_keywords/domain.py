"""Data models for keyword sanitation."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class SanitizeResult:
    """Result of sanitizing the keys of a config mapping."""
    data: Dict[str, Any] = field(default_factory=dict)
    renamed: Dict[str, str] = field(default_factory=dict)  # raw path -> canonical path
    collisions: List[str] = field(default_factory=list)
