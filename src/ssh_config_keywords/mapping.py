"""Sanitize the keys of raw config mappings."""

import logging
from typing import Any, Mapping, Optional

from .domain import SanitizeResult
from .transforms import sanitize

logger = logging.getLogger(__name__)


def _join(prefix: str, key: Any) -> str:
    return f"{prefix}.{key}" if prefix else str(key)


def _sanitize_value(value: Any, path: str, result: SanitizeResult) -> Any:
    if isinstance(value, Mapping):
        return _sanitize_mapping(value, path, result, recursive=True)
    if isinstance(value, list):
        return [
            _sanitize_value(item, f"{path}[{index}]", result)
            for index, item in enumerate(value)
        ]
    return value


def _sanitize_mapping(
    data: Mapping[Any, Any],
    prefix: str,
    result: SanitizeResult,
    recursive: bool
) -> dict:
    sanitized: dict = {}
    for key, value in data.items():
        canonical = sanitize(key) if isinstance(key, str) else key
        canonical_path = _join(prefix, canonical)

        if canonical != key:
            result.renamed[_join(prefix, key)] = canonical_path
            logger.debug(f"Renamed config key '{key}' -> '{canonical}'")

        if canonical in sanitized:
            result.collisions.append(canonical_path)
            logger.warning(f"Config key '{key}' collides with an earlier key for '{canonical_path}'. Keeping the later value.")

        sanitized[canonical] = _sanitize_value(value, canonical_path, result) if recursive else value
    return sanitized


def sanitize_keys(data: Optional[Mapping[Any, Any]], recursive: bool = False) -> SanitizeResult:
    """
    Return a copy of ``data`` keyed by canonical keywords.

    Values are kept as-is unless ``recursive`` is set, in which case nested
    mappings (including mappings inside lists) have their keys sanitized too.
    When two raw keys map to the same canonical keyword the later one wins
    and the keyword is reported in ``SanitizeResult.collisions``.
    """
    result = SanitizeResult()
    if not data:
        return result

    result.data = _sanitize_mapping(data, "", result, recursive)
    logger.debug(f"Sanitized {len(result.data)} config keys. Renamed: {len(result.renamed)}, collisions: {len(result.collisions)}")
    return result
