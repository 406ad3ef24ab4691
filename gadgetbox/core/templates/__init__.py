"""Template module for gadget command placeholders.

This module provides:
- extract_placeholders: Ordered, deduplicated placeholder names
- substitute: Fill placeholders with values (missing names pass through)
- rename_placeholder: Rewrite every occurrence of one placeholder
- is_valid_variable_name: Placeholder variable name check
- escape_literal / unescape_literal / make_placeholder: Helpers for building
  templates and decoding escapes
"""

from gadgetbox.core.templates.placeholders import (
    ESCAPED_OPEN,
    escape_literal,
    extract_placeholders,
    is_valid_variable_name,
    make_placeholder,
    rename_placeholder,
    substitute,
    unescape_literal,
)

__all__ = [
    "ESCAPED_OPEN",
    "escape_literal",
    "extract_placeholders",
    "is_valid_variable_name",
    "make_placeholder",
    "rename_placeholder",
    "substitute",
    "unescape_literal",
]
