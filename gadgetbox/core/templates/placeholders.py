# gadgetbox/core/templates/placeholders.py
"""Pure placeholder logic for gadget command templates.

A template is plain command text containing ``{{name}}`` slots where ``name``
is one or more of ``[A-Za-z0-9_]``. There is one escape sequence: ``{{{{}}``
stands for a literal ``{{`` so commands that really contain double braces
can be stored without being mistaken for placeholders.

Everything in this module is side-effect free.
"""

import re
from collections.abc import Mapping

PLACEHOLDER_OPEN = "{{"
PLACEHOLDER_CLOSE = "}}"
ESCAPED_OPEN = "{{{{}}"

# The escape alternative comes first so "{{{{}}" is consumed as a unit.
_TOKEN_RE = re.compile(r"(?P<escape>\{\{\{\{\}\})|\{\{(?P<name>[A-Za-z0-9_]+)\}\}")
_VARIABLE_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def make_placeholder(name: str) -> str:
    """Return the placeholder slot for ``name``.

    Example:
        >>> make_placeholder("path")
        '{{path}}'
    """
    return f"{PLACEHOLDER_OPEN}{name}{PLACEHOLDER_CLOSE}"


def escape_literal(text: str) -> str:
    """Escape literal ``{{`` sequences so ``text`` can live inside a template.

    Example:
        >>> escape_literal("echo {{x}}")
        'echo {{{{}}x}}'
    """
    return text.replace(PLACEHOLDER_OPEN, ESCAPED_OPEN)


def extract_placeholders(template: str) -> list[str]:
    """Extract placeholder names from a template.

    Names are returned in order of first occurrence and each name is listed
    once, however many times it appears. Escaped braces are ignored.

    Args:
        template: Command template to scan.

    Returns:
        Ordered, deduplicated list of placeholder names.

    Examples:
        >>> extract_placeholders("copy {{src}} {{dst}} && ls {{src}}")
        ['src', 'dst']

        >>> extract_placeholders("echo {{{{}}literal}}")
        []
    """
    names: list[str] = []
    seen: set[str] = set()
    for match in _TOKEN_RE.finditer(template):
        name = match.group("name")
        if name is not None and name not in seen:
            seen.add(name)
            names.append(name)
    return names


def substitute(
    template: str, values: Mapping[str, str], *, unescape: bool = False
) -> str:
    """Fill placeholders with values.

    Every ``{{name}}`` whose name is a key of ``values`` is replaced. Names
    missing from ``values`` are left exactly as they are, so a partially
    filled template stays inspectable. Escapes are kept as written unless
    ``unescape`` is set, in which case they are decoded to ``{{`` in the same
    pass. Inserted values are never rescanned.

    Args:
        template: Command template.
        values: Mapping of placeholder name to replacement text.
        unescape: Decode escapes, producing final command text.

    Returns:
        The substituted template, or command text when ``unescape`` is set.

    Examples:
        >>> substitute("ping {{host}} -n {{count}}", {"host": "example.com"})
        'ping example.com -n {{count}}'

        >>> substitute("echo {{{{}}x}} {{y}}", {"y": "1"})
        'echo {{{{}}x}} 1'

        >>> substitute("echo {{{{}}x}} {{y}}", {"y": "1"}, unescape=True)
        'echo {{x}} 1'
    """

    def _replace(match: re.Match[str]) -> str:
        if match.group("escape") is not None:
            return PLACEHOLDER_OPEN if unescape else match.group(0)
        name = match.group("name")
        if name in values:
            return values[name]
        return match.group(0)

    return _TOKEN_RE.sub(_replace, template)


def unescape_literal(text: str) -> str:
    """Decode escapes in ``text``, leaving placeholders untouched.

    Inverse of escape_literal.

    Example:
        >>> unescape_literal("echo {{{{}}x}} {{y}}")
        'echo {{x}} {{y}}'
    """
    return substitute(text, {}, unescape=True)


def rename_placeholder(template: str, old_name: str, new_name: str) -> str:
    """Rewrite every ``{{old_name}}`` as ``{{new_name}}``.

    Returns the template unchanged when ``old_name`` does not occur. Escapes
    are preserved as written.

    Example:
        >>> rename_placeholder("echo {{a}} {{a}} {{b}}", "a", "who")
        'echo {{who}} {{who}} {{b}}'
    """

    def _replace(match: re.Match[str]) -> str:
        if match.group("name") == old_name:
            return make_placeholder(new_name)
        return match.group(0)

    return _TOKEN_RE.sub(_replace, template)


def is_valid_variable_name(name: str) -> bool:
    """Check whether ``name`` is usable as a placeholder variable name.

    Variable names must start with a letter or underscore, followed by
    letters, digits or underscores.

    Examples:
        >>> is_valid_variable_name("path2")
        True

        >>> is_valid_variable_name("2path")
        False
    """
    return bool(name) and _VARIABLE_NAME_RE.fullmatch(name) is not None
