# gadgetbox/core/analysis/classifier.py
"""Heuristic classifier that spots user data in a tokenized command.

The classifier walks the token stream once and proposes placeholder
variables for fragments that look like data rather than fixed syntax:

- quoted strings become ``string`` variables (quotes included)
- numeric literals become ``number`` variables
- shell variable references become ``variable`` variables
- runs of bare words and punctuation that look like a filesystem path
  become one ``path`` variable; otherwise each bare word the oracle does not
  know (and that is not a ``-Flag``) becomes a ``string`` variable

The parameterized template is built from token offsets, so every suggestion
replaces exactly the span it came from even when two suggestions share the
same text.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from gadgetbox.core.analysis.oracle import IdentifierOracle
from gadgetbox.core.analysis.tokens import Token, TokenKind
from gadgetbox.core.templates import escape_literal, make_placeholder

logger = logging.getLogger(__name__)

CATEGORY_STRING = "string"
CATEGORY_NUMBER = "number"
CATEGORY_VARIABLE = "variable"
CATEGORY_PATH = "path"

# Token kinds that emit a suggestion on their own.
SUGGESTION_KINDS: dict[TokenKind, str] = {
    TokenKind.STRING: CATEGORY_STRING,
    TokenKind.NUMBER: CATEGORY_NUMBER,
    TokenKind.VARIABLE: CATEGORY_VARIABLE,
}

# Token kinds accumulated in the path buffer.
PATH_BUFFER_KINDS = frozenset({TokenKind.IDENTIFIER, TokenKind.PUNCTUATION})

# Token kinds copied to the template untouched.
PASS_THROUGH_KINDS = frozenset(
    {
        TokenKind.OPERATOR,
        TokenKind.KEYWORD,
        TokenKind.WHITESPACE,
        TokenKind.COMMENT,
        TokenKind.OTHER,
    }
)

MIN_PATH_LENGTH = 3


@dataclass(frozen=True)
class Suggestion:
    """A proposed placeholder for a fragment of the command.

    Attributes:
        variable_name: Generated placeholder name (e.g. "string2").
        original_text: Exact command text the placeholder replaces.
        position: Offset of ``original_text`` in the analysed command.
    """

    variable_name: str
    original_text: str
    position: int

    @property
    def end(self) -> int:
        return self.position + len(self.original_text)


@dataclass
class AnalysisResult:
    """Outcome of analysing one command.

    Attributes:
        source: The analysed command text.
        suggestions: Suggestions in order of first appearance.
        template: Parameterized command template.
    """

    source: str
    suggestions: list[Suggestion] = field(default_factory=list)
    template: str = ""

    @property
    def variables(self) -> dict[str, str]:
        """Placeholder name to original text, handy as default descriptions."""
        return {s.variable_name: s.original_text for s in self.suggestions}

    @property
    def has_suggestions(self) -> bool:
        return bool(self.suggestions)


def is_likely_path(text: str) -> bool:
    """Check whether text looks like a Windows or Unix filesystem path.

    Examples:
        >>> is_likely_path("C:\\\\Users")
        True

        >>> is_likely_path("file.txt")
        False
    """
    if len(text) < MIN_PATH_LENGTH:
        return False
    return ":\\" in text or "/" in text


def looks_like_flag(text: str) -> bool:
    """Check whether text is a command-line switch such as ``-Encoding``."""
    return text.startswith("-")


class _NameAllocator:
    """Hands out ``<category><ordinal>`` names, omitting the first ordinal."""

    def __init__(self) -> None:
        self._counters = {
            CATEGORY_STRING: 0,
            CATEGORY_NUMBER: 0,
            CATEGORY_VARIABLE: 0,
            CATEGORY_PATH: 0,
        }

    def next(self, category: str) -> str:
        self._counters[category] += 1
        count = self._counters[category]
        return category if count == 1 else f"{category}{count}"


def _build_template(source: str, suggestions: Sequence[Suggestion]) -> str:
    """Replace each suggestion's own span with its placeholder."""
    pieces: list[str] = []
    cursor = 0
    for suggestion in sorted(suggestions, key=lambda s: s.position):
        pieces.append(escape_literal(source[cursor : suggestion.position]))
        pieces.append(make_placeholder(suggestion.variable_name))
        cursor = suggestion.end
    pieces.append(escape_literal(source[cursor:]))
    return "".join(pieces).strip()


def analyze_tokens(
    tokens: Sequence[Token], is_known_identifier: Callable[[str], bool]
) -> AnalysisResult:
    """Classify tokens and build a parameterized template.

    Offsets are recomputed from the token texts, so the result is consistent
    with ``"".join(t.text for t in tokens)`` whatever positions the tokenizer
    reported.

    Args:
        tokens: Tokens in source order.
        is_known_identifier: Returns True for words the shell already knows.

    Returns:
        AnalysisResult with suggestions and template.

    Example:
        >>> from gadgetbox.core.analysis.tokens import Token, TokenKind
        >>> tokens = [
        ...     Token(TokenKind.KEYWORD, "Start-Sleep", 0),
        ...     Token(TokenKind.WHITESPACE, " ", 11),
        ...     Token(TokenKind.NUMBER, "5", 12),
        ... ]
        >>> analyze_tokens(tokens, lambda _: False).template
        'Start-Sleep {{number}}'
    """
    names = _NameAllocator()
    suggestions: list[Suggestion] = []
    buffer: list[tuple[int, Token]] = []

    def flush() -> None:
        if not buffer:
            return
        joined = "".join(token.text for _, token in buffer)
        if is_likely_path(joined):
            suggestions.append(Suggestion(names.next(CATEGORY_PATH), joined, buffer[0][0]))
        else:
            for offset, token in buffer:
                if token.kind is not TokenKind.IDENTIFIER:
                    continue
                if is_known_identifier(token.text) or looks_like_flag(token.text):
                    continue
                suggestions.append(
                    Suggestion(names.next(CATEGORY_STRING), token.text, offset)
                )
        buffer.clear()

    offset = 0
    for token in tokens:
        if token.kind in PATH_BUFFER_KINDS:
            buffer.append((offset, token))
        else:
            flush()
            category = SUGGESTION_KINDS.get(token.kind)
            if category is not None:
                suggestions.append(Suggestion(names.next(category), token.text, offset))
            elif token.kind not in PASS_THROUGH_KINDS:
                logger.debug("Passing through unhandled token kind %s", token.kind)
        offset += len(token.text)
    flush()

    source = "".join(token.text for token in tokens)
    return AnalysisResult(
        source=source,
        suggestions=suggestions,
        template=_build_template(source, suggestions),
    )


class CommandClassifier:
    """Classifier bound to a known-identifier oracle.

    Attributes:
        oracle: Oracle consulted for bare words.

    Example:
        >>> from gadgetbox.core.analysis.oracle import StaticIdentifierOracle
        >>> classifier = CommandClassifier(StaticIdentifierOracle(["ls"]))
    """

    def __init__(self, oracle: IdentifierOracle) -> None:
        self.oracle = oracle

    def analyze(self, tokens: Sequence[Token]) -> AnalysisResult:
        """Classify tokens using the bound oracle.

        Args:
            tokens: Tokens in source order.

        Returns:
            AnalysisResult with suggestions and template.
        """
        return analyze_tokens(tokens, self.oracle.is_known)
