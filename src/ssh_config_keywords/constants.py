"""
Keyword sanitizer constants
"""

# Delimiter between segments of a snake_case keyword
SEPARATOR = '_'
