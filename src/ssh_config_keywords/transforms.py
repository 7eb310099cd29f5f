"""
Keyword string transformations
"""
from .constants import SEPARATOR


def _capitalize_first(segment: str) -> str:
    # str.capitalize() would lower-case the tail
    return segment[:1].upper() + segment[1:]


def sanitize(keyword: str) -> str:
    """
    Normalize a configuration keyword to its canonical mixed-case spelling

    - snake_case keywords are split on underscores, empty segments dropped,
      and each segment's first character upper-cased
    - keywords without underscores are kept as-is, except that a leading
      lowercase letter is upper-cased (a single-segment keyword)
    - acronyms are only preserved through the no-underscore path

    Examples:
        >>> sanitize('identity_file')
        'IdentityFile'
        >>> sanitize('port')
        'Port'
        >>> sanitize('MACs')
        'MACs'
        >>> sanitize('RhostsRSAAuthentication')
        'RhostsRSAAuthentication'
    """
    if SEPARATOR not in keyword:
        if keyword[:1].islower():
            return _capitalize_first(keyword)
        return keyword

    return ''.join(
        _capitalize_first(segment)
        for segment in keyword.split(SEPARATOR)
        if segment
    )


def is_canonical(keyword: str) -> bool:
    """Check if a keyword is already in canonical form"""
    return sanitize(keyword) == keyword
